"""Database layer for billtrack application."""

from billtrack.database.base import Database
from billtrack.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
