"""Billing report domain service."""

from typing import Optional

from billtrack.database.base import Database
from billtrack.domain.entities import (
    ClientPaymentSummary,
    PendingInvoice,
    PlatformTransaction,
)

# Invoice statuses that still expect payment
PENDING_STATUSES = ("pending", "partial", "overdue")


class ReportService:
    """Read-only reports across clients, invoices and transactions."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def client_payments(self) -> list[ClientPaymentSummary]:
        """Total paid by each client, highest first.

        Clients without invoices are included with a total of zero.
        """
        return self.db.get_client_payment_summary()

    def pending_invoices(self) -> list[PendingInvoice]:
        """Invoices still awaiting payment, earliest due date first."""
        return self.db.get_pending_invoices(PENDING_STATUSES)

    def transactions_by_platform(
        self, platform_name: Optional[str] = None
    ) -> list[PlatformTransaction]:
        """Transactions with platform, invoice and client details.

        Args:
            platform_name: Optional platform filter, case-insensitive
        """
        return self.db.get_transactions_by_platform(platform_name=platform_name)
