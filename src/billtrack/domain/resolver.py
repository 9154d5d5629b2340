"""Find-or-create resolution of client, invoice and transaction."""

import logging
from typing import Optional

from billtrack.database.base import Database
from billtrack.domain.entities import (
    BillingRecord,
    Client,
    Resolution,
    TransactionOutcome,
)
from billtrack.domain.errors import ValidationError

logger = logging.getLogger(__name__)


class EntityResolver:
    """Links one record to Client -> Invoice -> Transaction rows.

    Lookups run before inserts, and inserts tolerate unique-key collisions:
    a client or invoice that appears between the lookup and the insert is
    fetched again and reused, a transaction reference that already exists
    keeps its original row.
    """

    def __init__(self, db: Database):
        """Initialize entity resolver.

        Args:
            db: Database instance
        """
        self.db = db

    def resolve(self, record: BillingRecord) -> Resolution:
        """Resolve a record, creating whatever does not exist yet.

        Args:
            record: Validated billing record

        Returns:
            Resolution with the client and invoice IDs and the transaction outcome

        Raises:
            ValidationError: If an entity cannot be resolved from the record
        """
        client_id, client_created = self._resolve_client(record)
        invoice_id, invoice_created = self._resolve_invoice(record, client_id)
        outcome = self._resolve_transaction(record, invoice_id)
        return Resolution(
            client_id=client_id,
            invoice_id=invoice_id,
            client_created=client_created,
            invoice_created=invoice_created,
            transaction_outcome=outcome,
        )

    def _find_client(self, record: BillingRecord) -> Optional[Client]:
        if record.email is not None:
            client = self.db.find_client_by_email(record.email)
            if client is not None:
                return client
        if record.document_number is not None:
            return self.db.find_client_by_document(record.document_number)
        return None

    def _resolve_client(self, record: BillingRecord) -> tuple[int, bool]:
        if record.email is None and record.document_number is None:
            raise ValidationError("Missing email or document_number")

        client = self._find_client(record)
        if client is not None:
            return client.id, False

        client_id = self.db.insert_client(
            name=record.customer_name,
            email=record.email,
            document_number=record.document_number,
            phone=record.phone,
            address=record.address,
            city=record.city,
            registration_date=record.registration_date,
        )
        if client_id is not None:
            logger.debug("Created client %s (%s)", client_id, record.email or record.document_number)
            return client_id, True

        # Lost an insert race; the other writer's row is the client
        client = self._find_client(record)
        if client is None:
            raise ValidationError(
                f"Client '{record.email or record.document_number}' conflicts "
                "with an existing client"
            )
        logger.debug("Client %s already existed, reusing it", client.id)
        return client.id, False

    def _resolve_invoice(self, record: BillingRecord, client_id: int) -> tuple[int, bool]:
        invoice = self.db.find_invoice_by_number(record.invoice_number)
        if invoice is not None:
            if invoice.client_id != client_id:
                logger.debug(
                    "Invoice %s belongs to client %s, ignoring client %s from record",
                    record.invoice_number,
                    invoice.client_id,
                    client_id,
                )
            return invoice.id, False

        invoice_id = self.db.insert_invoice(
            invoice_number=record.invoice_number,
            client_id=client_id,
            total_amount=record.total_amount,
            paid_amount=record.paid_amount,
            status=record.invoice_status,
            billing_period=record.billing_period,
            issue_date=record.issue_date,
            due_date=record.due_date,
            description=record.description,
        )
        if invoice_id is not None:
            return invoice_id, True

        invoice = self.db.find_invoice_by_number(record.invoice_number)
        if invoice is None:
            raise ValidationError(f"Invoice '{record.invoice_number}' could not be stored")
        logger.debug("Invoice %s already existed, reusing it", record.invoice_number)
        return invoice.id, False

    def _resolve_transaction(self, record: BillingRecord, invoice_id: int) -> TransactionOutcome:
        if not record.has_transaction:
            return TransactionOutcome.NOT_SUPPLIED

        platform = self.db.find_platform_by_name(record.platform_name)
        if platform is None:
            logger.debug(
                "Unknown platform '%s', skipping transaction %s",
                record.platform_name,
                record.transaction_reference,
            )
            return TransactionOutcome.UNKNOWN_PLATFORM

        transaction_id = self.db.insert_transaction(
            reference=record.transaction_reference,
            invoice_id=invoice_id,
            platform_id=platform.id,
            amount=record.transaction_amount,
            status=record.transaction_status,
            transaction_date=record.transaction_date,
            notes=record.notes,
        )
        if transaction_id is None:
            logger.debug("Transaction %s already exists, keeping original", record.transaction_reference)
            return TransactionOutcome.DUPLICATE
        return TransactionOutcome.CREATED
