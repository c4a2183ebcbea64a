"""
SQLite Inventory Repository - SQL to DataFrame adapter.

Stores segments in a single SQLite table, returns SegmentSchema-compliant
DataFrames, and closes the purchase race with a conditional UPDATE.
"""

import logging
import re
import sqlite3
import threading
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd
import pandera as pa

from src.itinerary_search.exceptions import RepositoryError
from src.itinerary_search.ports.inventory_repository import InventoryRepository
from src.itinerary_search.schemas.segment import (
    SEGMENT_COLUMNS,
    Segment,
    SegmentDataFrame,
    SegmentFilter,
    SegmentSchema,
)

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS {table} (
        segment_id TEXT PRIMARY KEY,
        origin TEXT NOT NULL,
        destination TEXT NOT NULL,
        quantity INTEGER NOT NULL CHECK (quantity >= 0),
        price REAL,
        departure INTEGER,
        arrival INTEGER NOT NULL,
        CHECK (departure IS NULL OR departure < arrival)
    )
"""


def build_segment_query(table: str, segment_filter: SegmentFilter) -> tuple[str, list]:
    """
    Translate a SegmentFilter into a parameterized SELECT.

    Args:
        table: Validated table name.
        segment_filter: Query parameters.

    Returns:
        Tuple of (SQL text, positional parameters).
    """
    query = f"SELECT {', '.join(SEGMENT_COLUMNS)} FROM {table} WHERE quantity >= ?"
    params: list = [segment_filter.min_quantity]

    if segment_filter.segment_id is not None:
        query += " AND segment_id = ?"
        params.append(segment_filter.segment_id)

    if segment_filter.origin is not None:
        query += " AND origin = ? AND destination = ?"
        params.extend([segment_filter.origin, segment_filter.destination])

    if segment_filter.departure_from is not None:
        query += " AND departure >= ?"
        params.append(segment_filter.departure_from)

    if segment_filter.departure_until is not None:
        query += " AND departure <= ?"
        params.append(segment_filter.departure_until)

    return query, params


class SqliteInventoryRepository(InventoryRepository):
    """
    Inventory repository backed by a SQLite database.

    One connection is shared between threads and serialized behind a
    lock; SQLite itself makes each UPDATE atomic.

    Attributes:
        db_path: Path to the SQLite database file (or ":memory:").
        table_name: Table holding segment rows.
    """

    def __init__(
        self,
        db_path: Union[str, Path] = ":memory:",
        table_name: str = "segments",
    ) -> None:
        if not _IDENTIFIER.fullmatch(table_name):
            raise ValueError(f"Invalid table name: {table_name!r}")
        self.db_path = str(db_path)
        self.table_name = table_name
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection, creating the table on first use."""
        if self._conn is None:
            if self.db_path != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path, check_same_thread=False)
            conn.execute(_CREATE_TABLE.format(table=self.table_name))
            conn.commit()
            self._conn = conn
        return self._conn

    def add_segments(self, segments: Iterable[Segment]) -> int:
        """
        Insert segments into the store.

        Returns:
            Number of rows inserted.

        Raises:
            RepositoryError: On constraint violations or I/O failure.
        """
        rows = [
            (s.segment_id, s.origin, s.destination, s.quantity, s.price, s.departure, s.arrival)
            for s in segments
        ]
        with self._lock:
            conn = self._get_connection()
            try:
                with conn:
                    conn.executemany(
                        f"INSERT INTO {self.table_name} ({', '.join(SEGMENT_COLUMNS)}) "
                        "VALUES (?, ?, ?, ?, ?, ?, ?)",
                        rows,
                    )
            except sqlite3.Error as e:
                logger.error("Failed to insert %d segments: %s", len(rows), e)
                raise RepositoryError(f"Failed to insert segments: {e}") from e

        logger.info("Inserted %d segments into %s", len(rows), self.table_name)
        return len(rows)

    def find_segments(self, segment_filter: SegmentFilter) -> SegmentDataFrame:
        """
        Fetch segments from the database and validate against SegmentSchema.

        Args:
            segment_filter: Query parameters.

        Returns:
            DataFrame validated against SegmentSchema.
        """
        query, params = build_segment_query(self.table_name, segment_filter)
        logger.debug("Executing query: %s with params: %s", query, params)

        with self._lock:
            conn = self._get_connection()
            try:
                df = pd.read_sql(query, conn, params=params)
            except (sqlite3.Error, pd.errors.DatabaseError) as e:
                logger.error("Segment query failed: %s", e)
                raise RepositoryError(f"Failed to find segments: {e}") from e

        if df.empty:
            logger.warning("No segments found matching criteria")
            df = pd.DataFrame(columns=SEGMENT_COLUMNS)

        try:
            return SegmentSchema.validate(df)
        except (pa.errors.SchemaError, pa.errors.SchemaErrors) as e:
            logger.error("Stored segments failed validation: %s", e)
            raise RepositoryError(f"Stored segments failed validation: {e}") from e

    def get_segment(self, segment_id: str) -> Optional[Segment]:
        with self._lock:
            conn = self._get_connection()
            try:
                row = conn.execute(
                    f"SELECT {', '.join(SEGMENT_COLUMNS)} FROM {self.table_name} "
                    "WHERE segment_id = ?",
                    (segment_id,),
                ).fetchone()
            except sqlite3.Error as e:
                logger.error("Failed to load segment %s: %s", segment_id, e)
                raise RepositoryError(f"Failed to find segment: {e}") from e

        if row is None:
            return None

        seg_id, origin, destination, quantity, price, departure, arrival = row
        return Segment(
            segment_id=seg_id,
            origin=origin,
            destination=destination,
            quantity=int(quantity),
            arrival=int(arrival),
            departure=None if departure is None else int(departure),
            price=None if price is None else float(price),
        )

    def decrement_seats(self, segment_id: str, count: int) -> bool:
        """
        Conditional decrement: only rows that still hold `count` seats change.

        Returns:
            True if exactly one row was updated.
        """
        with self._lock:
            conn = self._get_connection()
            try:
                with conn:
                    cursor = conn.execute(
                        f"UPDATE {self.table_name} SET quantity = quantity - ? "
                        "WHERE segment_id = ? AND quantity >= ?",
                        (count, segment_id, count),
                    )
            except sqlite3.Error as e:
                logger.error("Failed to decrement segment %s: %s", segment_id, e)
                raise RepositoryError(f"Failed to update segment: {e}") from e

        return cursor.rowcount == 1

    @property
    def name(self) -> str:
        """Human-readable repository name."""
        return "SQLite"

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("Database connection closed")
