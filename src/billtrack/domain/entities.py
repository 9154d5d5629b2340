"""Domain model entities for billtrack.

These are pure data classes representing business concepts, independent of
database schema. Services and the loader exchange these, never ORM rows.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


@dataclass(frozen=True)
class Client:
    """Client domain entity."""

    id: int
    name: str
    document_number: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    city: Optional[str]
    registration_date: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Invoice:
    """Invoice domain entity."""

    id: int
    invoice_number: str
    client_id: int
    billing_period: Optional[str]
    total_amount: Decimal
    paid_amount: Decimal
    status: str
    issue_date: Optional[str]
    due_date: Optional[str]
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Platform:
    """Payment platform lookup entity."""

    id: int
    name: str


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    reference: str
    invoice_id: int
    platform_id: int
    amount: Decimal
    transaction_date: Optional[str]
    status: str
    notes: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class BillingRecord:
    """One validated input row: client, invoice and optional transaction.

    Text fields are already trimmed; empty input is None.
    """

    customer_name: str
    invoice_number: str
    total_amount: Decimal
    paid_amount: Decimal
    invoice_status: str
    email: Optional[str] = None
    document_number: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    registration_date: Optional[str] = None
    billing_period: Optional[str] = None
    issue_date: Optional[str] = None
    due_date: Optional[str] = None
    description: Optional[str] = None
    platform_name: Optional[str] = None
    transaction_reference: Optional[str] = None
    transaction_amount: Optional[Decimal] = None
    transaction_date: Optional[str] = None
    transaction_status: str = "completed"
    notes: Optional[str] = None

    @property
    def has_transaction(self) -> bool:
        """True when platform, reference and amount are all present."""
        return (
            self.platform_name is not None
            and self.transaction_reference is not None
            and self.transaction_amount is not None
        )


class TransactionOutcome(Enum):
    """What happened to the transaction part of a record."""

    CREATED = "created"
    NOT_SUPPLIED = "not_supplied"
    UNKNOWN_PLATFORM = "unknown_platform"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class Resolution:
    """Result of resolving one record against the store."""

    client_id: int
    invoice_id: int
    client_created: bool
    invoice_created: bool
    transaction_outcome: TransactionOutcome

    @property
    def transaction_created(self) -> bool:
        return self.transaction_outcome is TransactionOutcome.CREATED


@dataclass(frozen=True)
class RowError:
    """A record that failed and was skipped."""

    row_number: int
    message: str


@dataclass(frozen=True)
class ResolvedRow:
    """A record that reached a resolved state."""

    row_number: int
    resolution: Resolution


@dataclass(frozen=True)
class BatchSummary:
    """Outcome of a batch run, rows in input order."""

    processed: int
    errors: tuple[RowError, ...] = ()
    rows: tuple[ResolvedRow, ...] = ()

    def _count(self, predicate) -> int:
        return sum(1 for row in self.rows if predicate(row.resolution))

    @property
    def clients_created(self) -> int:
        return self._count(lambda r: r.client_created)

    @property
    def invoices_created(self) -> int:
        return self._count(lambda r: r.invoice_created)

    @property
    def transactions_created(self) -> int:
        return self._count(lambda r: r.transaction_created)


@dataclass(frozen=True)
class BulkLoadResult:
    """Summary handed to the caller of a bulk load."""

    success: bool
    processed: int
    errors: int
    error_details: tuple[RowError, ...] = ()
    summary: Optional[BatchSummary] = field(default=None, compare=False)

    @classmethod
    def from_summary(cls, summary: BatchSummary) -> "BulkLoadResult":
        return cls(
            success=not summary.errors,
            processed=summary.processed,
            errors=len(summary.errors),
            error_details=summary.errors,
            summary=summary,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serializable form: {success, processed, errors, error_details}."""
        return {
            "success": self.success,
            "processed": self.processed,
            "errors": self.errors,
            "error_details": [
                {"row": e.row_number, "error": e.message} for e in self.error_details
            ],
        }


@dataclass(frozen=True)
class ClientPaymentSummary:
    """Report row: how much a client has paid across its invoices."""

    client_id: int
    name: str
    email: Optional[str]
    total_paid: Decimal
    total_invoices: int


@dataclass(frozen=True)
class PendingInvoice:
    """Report row: an invoice with an outstanding balance."""

    invoice_id: int
    invoice_number: str
    total_amount: Decimal
    paid_amount: Decimal
    due_date: Optional[str]
    customer_name: str
    email: Optional[str]
    phone: Optional[str]
    recent_transactions: tuple[tuple[str, Decimal], ...] = ()

    @property
    def pending_amount(self) -> Decimal:
        return self.total_amount - self.paid_amount


@dataclass(frozen=True)
class PlatformTransaction:
    """Report row: a transaction joined with its platform, invoice and client."""

    transaction_id: int
    reference: str
    amount: Decimal
    transaction_date: Optional[str]
    status: str
    platform_name: str
    customer_name: str
    email: Optional[str]
    invoice_number: str
    invoice_total: Decimal
    notes: Optional[str]
