"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, making it easy to change when
the database schema changes.
"""

from billtrack.domain import entities as domain
from billtrack.database.models import (
    Client as ORMClient,
    Invoice as ORMInvoice,
    Platform as ORMPlatform,
    Transaction as ORMTransaction,
)


def client_to_domain(orm_client: ORMClient) -> domain.Client:
    """Convert SQLAlchemy Client model to domain Client entity."""
    return domain.Client(
        id=orm_client.id,
        name=orm_client.name,
        document_number=orm_client.document_number,
        email=orm_client.email,
        phone=orm_client.phone,
        address=orm_client.address,
        city=orm_client.city,
        registration_date=orm_client.registration_date,
        created_at=orm_client.created_at,
    )


def invoice_to_domain(orm_invoice: ORMInvoice) -> domain.Invoice:
    """Convert SQLAlchemy Invoice model to domain Invoice entity."""
    return domain.Invoice(
        id=orm_invoice.id,
        invoice_number=orm_invoice.invoice_number,
        client_id=orm_invoice.client_id,
        billing_period=orm_invoice.billing_period,
        total_amount=orm_invoice.total_amount,
        paid_amount=orm_invoice.paid_amount,
        status=orm_invoice.status,
        issue_date=orm_invoice.issue_date,
        due_date=orm_invoice.due_date,
        description=orm_invoice.description,
        created_at=orm_invoice.created_at,
    )


def platform_to_domain(orm_platform: ORMPlatform) -> domain.Platform:
    """Convert SQLAlchemy Platform model to domain Platform entity."""
    return domain.Platform(id=orm_platform.id, name=orm_platform.name)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        reference=orm_transaction.reference,
        invoice_id=orm_transaction.invoice_id,
        platform_id=orm_transaction.platform_id,
        amount=orm_transaction.amount,
        transaction_date=orm_transaction.transaction_date,
        status=orm_transaction.status,
        notes=orm_transaction.notes,
        created_at=orm_transaction.created_at,
    )
