"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InfrastructureError(Exception):
    """The backing store failed; the current batch cannot continue.

    Deliberately not a DomainError: callers that recover from bad input
    must not swallow this one.
    """


def missing_field(field_name: str) -> str:
    """Return message for a required record field that is empty."""
    return f"Missing {field_name}"


def client_not_found(client_id: int) -> str:
    """Return message for missing client."""
    return f"Client {client_id} not found"


def duplicate_platform(name: str) -> str:
    """Return message for a platform name that is already registered."""
    return f"Platform '{name}' already exists"


def missing_columns(columns: list[str]) -> str:
    """Return message for a CSV header lacking required columns."""
    return f"CSV file missing required columns: {', '.join(columns)}"
