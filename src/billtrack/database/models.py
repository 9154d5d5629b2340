"""SQLAlchemy models for billtrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from billtrack.utils.amount_parser import CURRENCY_PRECISION, CURRENCY_SCALE

Base = declarative_base()

MONEY = Numeric(CURRENCY_PRECISION, CURRENCY_SCALE)


class Client(Base):
    """Client model."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    document_number = Column(String, unique=True, nullable=True)
    email = Column(String, unique=True, nullable=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    city = Column(String, nullable=True)
    registration_date = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    invoices = relationship("Invoice", back_populates="client", cascade="all, delete-orphan")


class Invoice(Base):
    """Invoice (bill) model."""

    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True)
    invoice_number = Column(String, unique=True, nullable=False)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False)
    billing_period = Column(String, nullable=True)
    total_amount = Column(MONEY, nullable=False)
    paid_amount = Column(MONEY, default=0, nullable=False)
    status = Column(String, default="pending", nullable=False)
    issue_date = Column(String, nullable=True)
    due_date = Column(String, nullable=True)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    client = relationship("Client", back_populates="invoices")
    transactions = relationship(
        "Transaction", back_populates="invoice", cascade="all, delete-orphan"
    )


class Platform(Base):
    """Payment platform lookup model."""

    __tablename__ = "platforms"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="platform")


class Transaction(Base):
    """Payment transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    reference = Column(String, unique=True, nullable=False)
    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False)
    platform_id = Column(Integer, ForeignKey("platforms.id"), nullable=False)
    amount = Column(MONEY, nullable=False)
    transaction_date = Column(String, nullable=True)
    status = Column(String, default="completed", nullable=False)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    invoice = relationship("Invoice", back_populates="transactions")
    platform = relationship("Platform", back_populates="transactions")


def _configure_sqlite(engine: Engine) -> None:
    """Open SQLite transactions explicitly and enforce foreign keys.

    pysqlite defers BEGIN until the first DML statement; savepoints only
    nest inside the batch transaction when BEGIN is emitted up front.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        _configure_sqlite(engine)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
