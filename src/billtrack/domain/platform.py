"""Payment platform domain service."""

from typing import Optional
from billtrack.database.base import Database
from billtrack.domain.entities import Platform as PlatformEntity
from billtrack.domain.errors import ConflictError, ValidationError, duplicate_platform


class PlatformService:
    """Service for managing the payment platform lookup table."""

    def __init__(self, db: Database):
        """Initialize platform service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_platform(self, name: str) -> int:
        """Register a payment platform.

        Args:
            name: Platform name, unique regardless of case

        Returns:
            Platform ID

        Raises:
            ValidationError: If name is blank
            ConflictError: If a platform with the same name exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Platform name cannot be empty")
        if self.db.find_platform_by_name(name) is not None:
            raise ConflictError(duplicate_platform(name))
        return self.db.create_platform(name=name)

    def get_platform_by_name(self, name: str) -> Optional[PlatformEntity]:
        """Get platform by name, ignoring case."""
        return self.db.find_platform_by_name(name.strip())

    def list_platforms(self) -> list[PlatformEntity]:
        """List all platforms."""
        return self.db.list_platforms()
