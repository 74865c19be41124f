"""SQLite writer storing each visible chunk as one row."""

import logging
import os
from pathlib import Path
from time import monotonic

import apsw

from aistudio_exporter.chunking.processing import visible_chunks
from aistudio_exporter.errors import (
    InsertError,
    SchemaError,
    StoreError,
    StoreOpenError,
)
from aistudio_exporter.observability import names
from aistudio_exporter.observability.base import MetricsHook, NoOpMetricsHook
from aistudio_exporter.parsers.models import Root

from .base import Writer
from .types import ChunkRecord

logger = logging.getLogger(__name__)

TABLE_NAME = "chunk_records"


def ensure_schema(conn: apsw.Connection) -> None:
    """Create the chunk_records table if it doesn't exist.

    Safe to run against a store that already has the table.

    Raises:
        SchemaError: If the table cannot be created.
    """
    try:
        conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                text TEXT NOT NULL
            )
            """
        )
    except apsw.Error as exc:
        raise SchemaError("error migrating database", cause=exc) from exc


class SQLiteWriter(Writer):
    """Writer storing visible chunks in a SQLite database.

    Each write opens the database (creating the file if needed), ensures
    the schema, inserts all visible chunks in one transaction and closes
    the connection. Ids are assigned by SQLite and increase in source order.

    Example:
        >>> writer = SQLiteWriter(db_path="session.db")
        >>> writer.write(root)
        >>> writer.count()
        2
    """

    def __init__(
        self,
        db_path: str | Path,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        """
        Args:
            db_path: Path to the SQLite database file.
            metrics_hook: Hook for recording metrics.
        """
        self.metrics_hook = metrics_hook
        self._db_path = str(db_path)

    @property
    def db_path(self) -> str:
        return self._db_path

    def _open(self, readonly: bool = False) -> apsw.Connection:
        """Open the database and force SQLite to actually read it.

        A read-only open never creates the file.
        """
        if os.path.isdir(self._db_path):
            raise StoreOpenError(
                "error opening database: path is a directory", path=self._db_path
            )

        if readonly:
            flags = apsw.SQLITE_OPEN_READONLY
        else:
            flags = apsw.SQLITE_OPEN_READWRITE | apsw.SQLITE_OPEN_CREATE

        try:
            conn = apsw.Connection(self._db_path, flags=flags)
        except (apsw.Error, ValueError) as exc:
            logger.error("Failed opening %r: %s", self._db_path, exc)
            raise StoreOpenError(
                "error opening database", path=self._db_path, cause=exc
            ) from exc

        # SQLite defers some failures (e.g. file is not a database) to first use
        try:
            list(conn.execute("PRAGMA schema_version"))
        except apsw.Error as exc:
            conn.close()
            logger.error("Failed opening %r: %s", self._db_path, exc)
            raise StoreOpenError(
                "error opening database", path=self._db_path, cause=exc
            ) from exc

        return conn

    def _connect(self) -> apsw.Connection:
        conn = self._open()
        try:
            ensure_schema(conn)
        except SchemaError:
            conn.close()
            logger.error("Failed creating schema in %s", self._db_path)
            raise
        return conn

    def write(self, root: Root) -> None:
        start = monotonic()
        records = [ChunkRecord(text=chunk.text) for chunk in visible_chunks(root)]

        conn = self._connect()
        try:
            if records:
                self._insert(conn, records)
            else:
                logger.debug("No visible chunks, nothing to insert")
        finally:
            conn.close()

        logger.info("Inserted %d chunks into %s", len(records), self._db_path)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SQLITE_WRITE_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.WRITER_OPERATIONS_TOTAL, labels={"writer": "sqlite"}
        )
        self.metrics_hook.increment(names.CHUNKS_WRITTEN_TOTAL, len(records))

    def _insert(self, conn: apsw.Connection, records: list[ChunkRecord]) -> None:
        """Insert all records with one statement in one transaction."""
        try:
            with conn:
                conn.executemany(
                    f"INSERT INTO {TABLE_NAME} (text) VALUES (?)",
                    [(record.text,) for record in records],
                )
        except (apsw.Error, ValueError) as exc:
            logger.error("Failed inserting into %s: %s", self._db_path, exc)
            raise InsertError(
                "error inserting chunks", path=self._db_path, cause=exc
            ) from exc

    def _read(self, query: str) -> list[tuple]:
        """Run a query against an existing store without creating anything."""
        conn = self._open(readonly=True)
        try:
            return list(conn.execute(query))
        except apsw.Error as exc:
            raise StoreError(
                "error reading chunks", path=self._db_path, cause=exc
            ) from exc
        finally:
            conn.close()

    def count(self) -> int:
        """Number of rows currently stored."""
        result = self._read(f"SELECT COUNT(*) FROM {TABLE_NAME}")
        count: int = result[0][0]
        return count

    def records(self) -> list[ChunkRecord]:
        """All stored rows ordered by id."""
        rows = self._read(f"SELECT id, text FROM {TABLE_NAME} ORDER BY id")
        return [ChunkRecord(id=row_id, text=text) for row_id, text in rows]
