"""Bulk billing import: batch coordination and CSV loading."""

import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional, TextIO

from billtrack.database.base import Database
from billtrack.domain.entities import BatchSummary, BulkLoadResult, ResolvedRow, RowError
from billtrack.domain.errors import (
    DomainError,
    InfrastructureError,
    ValidationError,
    missing_columns,
)
from billtrack.domain.records import REQUIRED_COLUMNS, UnreadableRow, parse_record
from billtrack.domain.resolver import EntityResolver

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Optional[str]]


class BatchCoordinator:
    """Applies the entity resolver to every record of a batch.

    The whole run is one database transaction. Each record gets its own
    savepoint, so a rejected record leaves no partial rows behind while the
    rest of the batch carries on. An InfrastructureError rolls back the
    entire run, including rows that had already been resolved.
    """

    def __init__(self, db: Database):
        """Initialize batch coordinator.

        Args:
            db: Database instance
        """
        self.db = db
        self.resolver = EntityResolver(db)

    def run(self, records: Iterable[RawRecord]) -> BatchSummary:
        """Resolve records in input order.

        Args:
            records: Raw rows; row numbers are their 1-based positions

        Returns:
            BatchSummary with the processed count, row errors and resolutions

        Raises:
            InfrastructureError: If the backing store fails; nothing is kept
        """
        processed = 0
        errors: list[RowError] = []
        rows: list[ResolvedRow] = []
        row_number = 0

        logger.info("Starting bulk load")
        try:
            with self.db.batch_transaction():
                for row_number, raw in enumerate(records, start=1):
                    try:
                        record = parse_record(raw)
                        with self.db.savepoint():
                            resolution = self.resolver.resolve(record)
                    except DomainError as e:
                        logger.warning("Row %d rejected: %s", row_number, e)
                        errors.append(RowError(row_number=row_number, message=str(e)))
                        continue

                    processed += 1
                    rows.append(ResolvedRow(row_number=row_number, resolution=resolution))
        except InfrastructureError:
            logger.error("Bulk load aborted at row %d; all rows rolled back", row_number)
            raise

        summary = BatchSummary(processed=processed, errors=tuple(errors), rows=tuple(rows))
        logger.info(
            "Bulk load committed: %d processed, %d rejected "
            "(%d clients, %d invoices, %d transactions created)",
            summary.processed,
            len(summary.errors),
            summary.clients_created,
            summary.invoices_created,
            summary.transactions_created,
        )
        return summary


class BulkLoadService:
    """Service for loading billing CSV files."""

    def __init__(self, db: Database):
        """Initialize bulk load service.

        Args:
            db: Database instance
        """
        self.db = db
        self.coordinator = BatchCoordinator(db)

    def load_records(self, records: Iterable[RawRecord]) -> BulkLoadResult:
        """Load already-decoded rows."""
        return BulkLoadResult.from_summary(self.coordinator.run(records))

    def load_stream(self, stream: TextIO) -> BulkLoadResult:
        """Load billing rows from an open CSV text stream.

        Args:
            stream: Text stream positioned at the header line

        Returns:
            BulkLoadResult summary

        Raises:
            ValidationError: If the CSV is empty, malformed or lacks required columns
            InfrastructureError: If the backing store fails
        """
        # Try to detect delimiter
        sample = stream.read(4096)
        stream.seek(0)
        try:
            delimiter = csv.Sniffer().sniff(sample, delimiters=",;").delimiter
        except csv.Error:
            delimiter = ","

        reader = csv.DictReader(stream, delimiter=delimiter)
        try:
            fieldnames = reader.fieldnames
        except csv.Error as e:
            raise ValidationError(f"Malformed CSV header: {e}") from e
        if fieldnames is None:
            raise ValidationError("CSV file has no columns")
        reader.fieldnames = [name.strip() for name in fieldnames]

        missing = [col for col in REQUIRED_COLUMNS if col not in reader.fieldnames]
        if missing:
            raise ValidationError(missing_columns(missing))

        return self.load_records(self._iter_rows(reader))

    def load_csv(self, csv_file_path: str, remove_file: bool = False) -> BulkLoadResult:
        """Load billing rows from a CSV file.

        Args:
            csv_file_path: Path to CSV file
            remove_file: Delete the file afterwards, whatever the outcome
                (for uploaded payloads)

        Returns:
            BulkLoadResult summary

        Raises:
            FileNotFoundError: If CSV file doesn't exist
            ValidationError: If the CSV is empty, malformed or lacks required columns
            InfrastructureError: If the backing store fails
        """
        csv_path = Path(csv_file_path)
        try:
            if not csv_path.exists():
                raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

            logger.info("Loading billing CSV %s", csv_path)
            with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
                return self.load_stream(f)
        finally:
            if remove_file:
                csv_path.unlink(missing_ok=True)

    @staticmethod
    def _iter_rows(reader: csv.DictReader) -> Iterator[RawRecord]:
        """Yield data rows; a line the reader cannot decode becomes an UnreadableRow."""
        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                yield UnreadableRow(f"Malformed CSV at line {reader.reader.line_num}: {e}")
                continue
            yield row
