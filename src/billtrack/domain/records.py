"""Record schema for bulk billing imports.

Raw CSV rows are loose string mappings. ``parse_record`` turns one into a
typed, immutable ``BillingRecord`` before any entity resolution happens, so
a row that fails here never touches the database.
"""

from decimal import Decimal
from typing import Mapping, Optional

from billtrack.domain.entities import BillingRecord
from billtrack.domain.errors import ValidationError, missing_field
from billtrack.utils.amount_parser import parse_amount
from billtrack.utils.date_parser import validate_date

# Column names as they appear in the CSV header
RECORD_FIELDS = (
    "customer_name",
    "document_number",
    "email",
    "phone",
    "address",
    "city",
    "registration_date",
    "invoice_number",
    "billing_period",
    "total_amount",
    "paid_amount",
    "invoice_status",
    "issue_date",
    "due_date",
    "description",
    "platform_name",
    "transaction_reference",
    "transaction_amount",
    "transaction_date",
    "transaction_status",
    "notes",
)

REQUIRED_COLUMNS = ("customer_name", "invoice_number", "total_amount")

DATE_FIELDS = ("registration_date", "issue_date", "due_date", "transaction_date")

DEFAULT_INVOICE_STATUS = "pending"
DEFAULT_TRANSACTION_STATUS = "completed"


class UnreadableRow(dict):
    """Stand-in for an input line the CSV reader could not decode."""

    def __init__(self, message: str):
        super().__init__()
        self.message = message


def _clean(raw: Mapping[str, Optional[str]], field_name: str) -> Optional[str]:
    """Trimmed value of a field, or None when absent or blank."""
    value = raw.get(field_name)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _money(field_name: str, value: str, allow_negative: bool = False) -> Decimal:
    try:
        amount = parse_amount(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {field_name}: {e}") from e
    if amount < 0 and not allow_negative:
        raise ValidationError(f"Invalid {field_name}: amount cannot be negative")
    return amount


def parse_record(raw: Mapping[str, Optional[str]]) -> BillingRecord:
    """Validate a raw row and build a BillingRecord.

    Args:
        raw: Mapping of CSV column name to cell text

    Returns:
        BillingRecord with trimmed text, Decimal amounts and defaults applied

    Raises:
        ValidationError: If a required field is missing or malformed
    """
    if isinstance(raw, UnreadableRow):
        raise ValidationError(raw.message)

    values = {name: _clean(raw, name) for name in RECORD_FIELDS}

    if values["customer_name"] is None:
        raise ValidationError(missing_field("customer_name"))
    if values["email"] is None and values["document_number"] is None:
        raise ValidationError("Missing email or document_number")
    if values["invoice_number"] is None:
        raise ValidationError(missing_field("invoice_number"))
    if values["total_amount"] is None:
        raise ValidationError(missing_field("total_amount"))

    total_amount = _money("total_amount", values["total_amount"])
    paid_amount = Decimal("0")
    if values["paid_amount"] is not None:
        paid_amount = _money("paid_amount", values["paid_amount"])
    if paid_amount > total_amount:
        raise ValidationError(
            f"paid_amount {paid_amount} exceeds total_amount {total_amount}"
        )

    transaction_amount = None
    if values["transaction_amount"] is not None:
        transaction_amount = _money(
            "transaction_amount", values["transaction_amount"], allow_negative=True
        )

    for name in DATE_FIELDS:
        if values[name] is not None:
            try:
                values[name] = validate_date(values[name])
            except ValueError as e:
                raise ValidationError(f"Invalid {name}: {e}") from e

    email = values["email"]
    return BillingRecord(
        customer_name=values["customer_name"],
        email=email.lower() if email else None,
        document_number=values["document_number"],
        phone=values["phone"],
        address=values["address"],
        city=values["city"],
        registration_date=values["registration_date"],
        invoice_number=values["invoice_number"],
        billing_period=values["billing_period"],
        total_amount=total_amount,
        paid_amount=paid_amount,
        invoice_status=(values["invoice_status"] or DEFAULT_INVOICE_STATUS).lower(),
        issue_date=values["issue_date"],
        due_date=values["due_date"],
        description=values["description"],
        platform_name=values["platform_name"],
        transaction_reference=values["transaction_reference"],
        transaction_amount=transaction_amount,
        transaction_date=values["transaction_date"],
        transaction_status=(
            values["transaction_status"] or DEFAULT_TRANSACTION_STATUS
        ).lower(),
        notes=values["notes"],
    )
