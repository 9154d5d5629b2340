"""Client domain service."""

import logging
from typing import Optional
from billtrack.database.base import Database
from billtrack.domain.entities import Client as ClientEntity
from billtrack.domain.errors import NotFoundError, client_not_found

logger = logging.getLogger(__name__)


class ClientService:
    """Service for client operations that span related tables."""

    def __init__(self, db: Database):
        """Initialize client service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_client(self, client_id: int) -> Optional[ClientEntity]:
        """Get client by ID."""
        return self.db.get_client(client_id)

    def delete_client(self, client_id: int) -> tuple[int, int]:
        """Delete a client with all of its invoices and their transactions.

        Args:
            client_id: Client ID to delete

        Returns:
            Tuple of (invoices deleted, transactions deleted)

        Raises:
            NotFoundError: If client not found
        """
        if self.db.get_client(client_id) is None:
            raise NotFoundError(client_not_found(client_id))

        invoices = self.db.list_invoices(client_id=client_id)
        transaction_count = sum(
            len(self.db.list_transactions(invoice_id=inv.id)) for inv in invoices
        )

        self.db.delete_client(client_id)
        logger.info(
            "Deleted client %s with %d invoices and %d transactions",
            client_id,
            len(invoices),
            transaction_count,
        )
        return len(invoices), transaction_count
