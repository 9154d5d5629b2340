"""Tests for the Database implementation."""

import pytest
from datetime import datetime
from decimal import Decimal
from sqlalchemy.exc import OperationalError

from billtrack.domain import entities
from billtrack.domain.errors import InfrastructureError, NotFoundError, ValidationError


def _insert_invoice(db, client_id, invoice_number="INV-001"):
    return db.insert_invoice(
        invoice_number=invoice_number,
        client_id=client_id,
        total_amount=Decimal("100.00"),
        paid_amount=Decimal("0"),
        status="pending",
    )


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_insert_client_returns_id(self, temp_db):
        """Test that a new client gets an ID and reads back as a domain entity."""
        client_id = temp_db.insert_client(name="Ana Torres", email="ana@example.com")

        client = temp_db.get_client(client_id)
        assert isinstance(client, entities.Client)
        assert client.name == "Ana Torres"
        assert isinstance(client.created_at, datetime)

    def test_insert_client_conflict_returns_none(self, temp_db):
        """Test that a duplicate email is ignored rather than raising."""
        first = temp_db.insert_client(name="Ana Torres", email="ana@example.com")
        second = temp_db.insert_client(name="Someone Else", email="ana@example.com")

        assert first is not None
        assert second is None
        assert [c.name for c in temp_db.list_clients()] == ["Ana Torres"]

    def test_clients_without_email_do_not_collide(self, temp_db):
        """Test that NULL identity keys never count as duplicates."""
        a = temp_db.insert_client(name="A", document_number="CC-1")
        b = temp_db.insert_client(name="B", document_number="CC-2")

        assert a is not None and b is not None
        assert temp_db.find_client_by_document("CC-2").name == "B"

    def test_insert_invoice_conflict_returns_none(self, temp_db):
        """Test that a duplicate invoice number is ignored."""
        client_id = temp_db.insert_client(name="Ana", email="ana@example.com")

        assert _insert_invoice(temp_db, client_id) is not None
        assert _insert_invoice(temp_db, client_id) is None

        invoice = temp_db.find_invoice_by_number("INV-001")
        assert isinstance(invoice, entities.Invoice)
        assert invoice.total_amount == Decimal("100.00")
        assert invoice.status == "pending"

    def test_insert_transaction_conflict_keeps_original(self, temp_db):
        """Test that the first transaction with a reference wins."""
        platform_id = temp_db.create_platform("Nequi")
        client_id = temp_db.insert_client(name="Ana", email="ana@example.com")
        invoice_id = _insert_invoice(temp_db, client_id)

        first = temp_db.insert_transaction(
            reference="TXN-1", invoice_id=invoice_id, platform_id=platform_id,
            amount=Decimal("10.00"), status="completed",
        )
        second = temp_db.insert_transaction(
            reference="TXN-1", invoice_id=invoice_id, platform_id=platform_id,
            amount=Decimal("99.00"), status="completed",
        )

        assert first is not None
        assert second is None
        assert temp_db.find_transaction_by_reference("TXN-1").amount == Decimal("10.00")

    def test_find_platform_ignores_case(self, temp_db):
        """Test case-insensitive platform lookup."""
        platform_id = temp_db.create_platform("PayPal")

        platform = temp_db.find_platform_by_name("paypal")
        assert isinstance(platform, entities.Platform)
        assert platform.id == platform_id
        assert temp_db.find_platform_by_name("Bitcoin") is None

    def test_list_platforms_sorted_by_name(self, temp_db):
        """Test platform listing order."""
        temp_db.create_platform("PayPal")
        temp_db.create_platform("Nequi")

        assert [p.name for p in temp_db.list_platforms()] == ["Nequi", "PayPal"]

    def test_delete_missing_client(self, temp_db):
        """Test deleting a client that does not exist."""
        with pytest.raises(NotFoundError):
            temp_db.delete_client(999)


class TestTransactionScope:
    """Tests for batch transactions and savepoints."""

    def test_batch_commits(self, temp_db):
        """Test that writes inside a batch persist."""
        with temp_db.batch_transaction():
            temp_db.insert_client(name="Ana", email="ana@example.com")

        assert len(temp_db.list_clients()) == 1

    def test_batch_rolls_back_on_error(self, temp_db):
        """Test that an exception discards every write of the batch."""
        with pytest.raises(RuntimeError):
            with temp_db.batch_transaction():
                temp_db.insert_client(name="Ana", email="ana@example.com")
                raise RuntimeError("boom")

        assert temp_db.list_clients() == []

    def test_savepoint_discards_only_its_own_writes(self, temp_db):
        """Test that a failed savepoint keeps earlier writes of the batch."""
        with temp_db.batch_transaction():
            temp_db.insert_client(name="Ana", email="ana@example.com")
            with pytest.raises(ValidationError):
                with temp_db.savepoint():
                    temp_db.insert_client(name="Luis", email="luis@example.com")
                    raise ValidationError("bad row")

        assert [c.name for c in temp_db.list_clients()] == ["Ana"]

    def test_savepoint_translates_integrity_error(self, temp_db):
        """Test that a constraint violation becomes a row-level ValidationError."""
        with temp_db.batch_transaction():
            with pytest.raises(ValidationError, match="Rejected by database"):
                with temp_db.savepoint():
                    # No client 999: foreign key violation
                    _insert_invoice(temp_db, client_id=999)

        assert temp_db.find_invoice_by_number("INV-001") is None

    def test_savepoint_translates_storage_failure(self, temp_db):
        """Test that other storage errors become InfrastructureError."""
        with pytest.raises(InfrastructureError):
            with temp_db.batch_transaction():
                with temp_db.savepoint():
                    raise OperationalError("INSERT", {}, Exception("disk I/O error"))
