"""Tests for client deletion."""

import pytest

from billtrack.cli.main import cli
from billtrack.domain.errors import NotFoundError


@pytest.fixture
def loaded_db(temp_db, sample_platforms, fixtures_dir):
    """Database with the sample billing file loaded."""
    from billtrack.domain.bulk_load import BulkLoadService

    BulkLoadService(temp_db).load_csv(str(fixtures_dir / "sample_billing.csv"))
    return temp_db


class TestClientService:
    """Tests for ClientService."""

    def test_delete_client_cascades(self, loaded_db, client_service):
        """Test that a client's invoices and transactions go with it."""
        ana = loaded_db.find_client_by_email("ana@example.com")

        invoices, transactions = client_service.delete_client(ana.id)

        assert (invoices, transactions) == (2, 2)
        assert loaded_db.get_client(ana.id) is None
        assert loaded_db.find_invoice_by_number("INV-001") is None
        assert loaded_db.find_invoice_by_number("INV-002") is None
        assert loaded_db.list_transactions() == []
        # Other clients are untouched
        assert loaded_db.find_invoice_by_number("INV-003") is not None

    def test_delete_missing_client(self, client_service):
        """Test deleting an unknown client."""
        with pytest.raises(NotFoundError, match="Client 999 not found"):
            client_service.delete_client(999)

    def test_delete_keeps_platforms(self, loaded_db, client_service):
        """Test that platforms are shared lookup data and survive deletion."""
        ana = loaded_db.find_client_by_email("ana@example.com")
        client_service.delete_client(ana.id)

        assert len(loaded_db.list_platforms()) == 2


def test_client_delete_command(cli_runner, loaded_db):
    """Test deleting a client from the CLI with --yes."""
    luis = loaded_db.find_client_by_email("luis@example.com")
    loaded_db.disconnect()

    result = cli_runner.invoke(
        cli,
        ["--db-path", loaded_db.database_path, "client", "delete", str(luis.id), "--yes"],
    )

    assert result.exit_code == 0
    assert "Deleted client 'Luis Gomez' with 1 invoice(s) and 0 transaction(s)" in result.output
    assert loaded_db.get_client(luis.id) is None


def test_client_delete_confirmation_declined(cli_runner, loaded_db):
    """Test that answering no keeps the client."""
    luis = loaded_db.find_client_by_email("luis@example.com")
    loaded_db.disconnect()

    result = cli_runner.invoke(
        cli,
        ["--db-path", loaded_db.database_path, "client", "delete", str(luis.id)],
        input="n\n",
    )

    assert result.exit_code == 0
    assert "Deletion cancelled" in result.output
    assert loaded_db.get_client(luis.id) is not None


def test_client_delete_not_found(cli_runner, temp_db):
    """Test deleting a client that does not exist."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "client", "delete", "999", "--yes"]
    )

    assert result.exit_code == 1
    assert "Client 999 not found" in result.output
