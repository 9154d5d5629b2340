"""Tests for database factory functions."""

from billtrack.database.factories import create_database, create_sqlite_database


def test_sqlite_path_argument(tmp_path):
    """Test an explicit SQLite path."""
    db_path = tmp_path / "explicit.db"
    db = create_sqlite_database(str(db_path))

    assert db.database_url == f"sqlite:///{db_path}"
    assert db_path.exists()


def test_sqlite_path_from_environment(tmp_path, monkeypatch):
    """Test BILLTRACK_DB_PATH when no path is passed."""
    db_path = tmp_path / "env.db"
    monkeypatch.setenv("BILLTRACK_DB_PATH", str(db_path))

    db = create_sqlite_database()

    assert db.database_url == f"sqlite:///{db_path}"


def test_database_url_takes_precedence(tmp_path, monkeypatch):
    """Test that a database URL wins over a SQLite path."""
    url_path = tmp_path / "from_url.db"
    monkeypatch.setenv("BILLTRACK_DATABASE_URL", f"sqlite:///{url_path}")

    db = create_database(database_path=str(tmp_path / "ignored.db"))

    assert db.database_url == f"sqlite:///{url_path}"
    assert not (tmp_path / "ignored.db").exists()


def test_falls_back_to_sqlite(tmp_path, monkeypatch):
    """Test SQLite fallback without a configured URL."""
    monkeypatch.delenv("BILLTRACK_DATABASE_URL", raising=False)
    db_path = tmp_path / "fallback.db"

    db = create_database(database_path=str(db_path))

    assert db.database_url == f"sqlite:///{db_path}"
    assert db.list_platforms() == []
