"""Shared pytest fixtures for billtrack tests."""

import tempfile
import os
from pathlib import Path
import pytest

from billtrack.database.factories import create_sqlite_database
from billtrack.domain.bulk_load import BatchCoordinator, BulkLoadService
from billtrack.domain.client import ClientService
from billtrack.domain.platform import PlatformService
from billtrack.domain.report import ReportService
from billtrack.domain.resolver import EntityResolver


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def platform_service(temp_db):
    """Create a PlatformService with a temporary database."""
    return PlatformService(temp_db)


@pytest.fixture
def client_service(temp_db):
    """Create a ClientService with a temporary database."""
    return ClientService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def resolver(temp_db):
    """Create an EntityResolver with a temporary database."""
    return EntityResolver(temp_db)


@pytest.fixture
def coordinator(temp_db):
    """Create a BatchCoordinator with a temporary database."""
    return BatchCoordinator(temp_db)


@pytest.fixture
def bulk_load_service(temp_db):
    """Create a BulkLoadService with a temporary database."""
    return BulkLoadService(temp_db)


@pytest.fixture
def sample_platforms(platform_service):
    """Register the platforms used by the sample files."""
    return {
        "Nequi": platform_service.create_platform("Nequi"),
        "PayPal": platform_service.create_platform("PayPal"),
    }


@pytest.fixture
def make_row():
    """Build a raw CSV row with sensible defaults, overridable per field."""

    def _make_row(**overrides):
        row = {
            "customer_name": "Ana Torres",
            "email": "ana@example.com",
            "phone": "3001112233",
            "address": "Calle 1 #2-3",
            "city": "Medellin",
            "registration_date": "2024-01-10",
            "invoice_number": "INV-001",
            "total_amount": "100000",
            "paid_amount": "50000",
            "invoice_status": "partial",
            "issue_date": "2024-06-01",
            "due_date": "2024-06-30",
            "description": "June service",
            "platform_name": "",
            "transaction_reference": "",
            "transaction_amount": "",
            "transaction_date": "",
            "transaction_status": "",
            "notes": "",
        }
        row.update(overrides)
        return row

    return _make_row


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
