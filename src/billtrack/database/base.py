"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from billtrack.domain.entities import (
    Client,
    Invoice,
    Platform,
    Transaction,
    ClientPaymentSummary,
    PendingInvoice,
    PlatformTransaction,
)


class Database(ABC):
    """Abstract database interface for billtrack.

    The ``insert_*`` operations used by the bulk loader never commit; they
    must run inside ``batch_transaction()``. Standalone operations such as
    ``create_platform`` and ``delete_client`` commit on their own.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Transaction scope
    @abstractmethod
    def batch_transaction(self) -> AbstractContextManager[None]:
        """Run the enclosed block in one transaction on a fresh session.

        Commits when the block exits normally, rolls back on any exception
        and always releases the session.

        Raises:
            InfrastructureError: If the commit fails
        """
        pass

    @abstractmethod
    def savepoint(self) -> AbstractContextManager[None]:
        """Run the enclosed block in a nested transaction.

        Only the block's own writes are rolled back when it fails.

        Raises:
            ValidationError: If the store rejects the block's data
            InfrastructureError: On any other storage failure
        """
        pass

    # Client operations
    @abstractmethod
    def find_client_by_email(self, email: str) -> Optional[Client]:
        """Get client by email."""
        pass

    @abstractmethod
    def find_client_by_document(self, document_number: str) -> Optional[Client]:
        """Get client by document number."""
        pass

    @abstractmethod
    def insert_client(
        self,
        name: str,
        email: Optional[str] = None,
        document_number: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        city: Optional[str] = None,
        registration_date: Optional[str] = None,
    ) -> Optional[int]:
        """Insert a client. Returns client ID, or None if the email or
        document number is already taken."""
        pass

    @abstractmethod
    def get_client(self, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    def list_clients(self) -> list[Client]:
        """List all clients."""
        pass

    @abstractmethod
    def delete_client(self, client_id: int) -> None:
        """Delete a client together with its invoices and their transactions."""
        pass

    # Invoice operations
    @abstractmethod
    def find_invoice_by_number(self, invoice_number: str) -> Optional[Invoice]:
        """Get invoice by invoice number."""
        pass

    @abstractmethod
    def insert_invoice(
        self,
        invoice_number: str,
        client_id: int,
        total_amount: Decimal,
        paid_amount: Decimal,
        status: str,
        billing_period: Optional[str] = None,
        issue_date: Optional[str] = None,
        due_date: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Optional[int]:
        """Insert an invoice. Returns invoice ID, or None if the invoice
        number is already taken."""
        pass

    @abstractmethod
    def get_invoice(self, invoice_id: int) -> Optional[Invoice]:
        """Get invoice by ID."""
        pass

    @abstractmethod
    def list_invoices(self, client_id: Optional[int] = None) -> list[Invoice]:
        """List invoices, optionally filtered by client."""
        pass

    # Platform operations
    @abstractmethod
    def create_platform(self, name: str) -> int:
        """Create a platform. Returns platform ID."""
        pass

    @abstractmethod
    def find_platform_by_name(self, name: str) -> Optional[Platform]:
        """Get platform by name, ignoring case."""
        pass

    @abstractmethod
    def list_platforms(self) -> list[Platform]:
        """List all platforms."""
        pass

    # Transaction operations
    @abstractmethod
    def find_transaction_by_reference(self, reference: str) -> Optional[Transaction]:
        """Get transaction by reference."""
        pass

    @abstractmethod
    def insert_transaction(
        self,
        reference: str,
        invoice_id: int,
        platform_id: int,
        amount: Decimal,
        status: str,
        transaction_date: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Optional[int]:
        """Insert a transaction. Returns transaction ID, or None if the
        reference already exists (the existing row is left untouched)."""
        pass

    @abstractmethod
    def list_transactions(self, invoice_id: Optional[int] = None) -> list[Transaction]:
        """List transactions, optionally filtered by invoice."""
        pass

    # Reports
    @abstractmethod
    def get_client_payment_summary(self) -> list[ClientPaymentSummary]:
        """Total paid and invoice count per client, highest total first."""
        pass

    @abstractmethod
    def get_pending_invoices(self, statuses: tuple[str, ...]) -> list[PendingInvoice]:
        """Invoices in one of ``statuses`` with their completed transactions,
        earliest due date first."""
        pass

    @abstractmethod
    def get_transactions_by_platform(
        self, platform_name: Optional[str] = None
    ) -> list[PlatformTransaction]:
        """Transactions joined with platform, invoice and client, newest first.

        Args:
            platform_name: Optional case-insensitive platform filter
        """
        pass
