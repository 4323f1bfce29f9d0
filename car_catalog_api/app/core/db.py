"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``) and truncating/reseeding the ``cars`` table
(``reset_cars``).  It uses SQLite as a lightweight embedded database.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterable, Iterator, Tuple

from .config import settings

logger = logging.getLogger(__name__)

# Rows inserted on every startup, in insertion (and therefore id) order.
SEED_CARS: Tuple[Tuple[str, int], ...] = (
    ("ヤリス", 2020),
    ("キャストスタイル", 2020),
    ("フィット", 2019),
)

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: cars table
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS cars (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            year INTEGER NOT NULL
        );
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are used directly; relative ones are resolved against
    the current working directory, the way ``./cars.db`` would be.
    SQLite in‑memory databases are rejected: every connection would see
    its own empty database.  Use ``CAR_STORAGE=memory`` instead.
    """
    db_url = settings.database_url
    if not db_url or db_url == ":memory:" or db_url.startswith("file::memory:"):
        raise ValueError(
            f"DATABASE_URL must be a file path, got {db_url!r}; "
            "set CAR_STORAGE=memory for an in-memory catalog"
        )
    if os.path.isabs(db_url):
        return db_url
    return os.path.abspath(db_url)


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection with name‑addressable rows."""
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor, commits and closes the connection."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Create the database file if needed and apply pending migrations."""
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version


def reset_cars(seed: Iterable[Tuple[str, int]] = SEED_CARS) -> int:
    """Truncate the ``cars`` table and insert ``seed`` rows.

    The AUTOINCREMENT counter is reset together with the rows so that
    the seeded cars always receive ids starting at 1.  Returns the
    number of inserted rows.
    """
    rows = list(seed)
    with get_cursor() as cursor:
        cursor.execute("DELETE FROM cars")
        cursor.execute("DELETE FROM sqlite_sequence WHERE name = 'cars'")
        cursor.executemany("INSERT INTO cars (name, year) VALUES (?, ?)", rows)
    logger.info("Seeded %d cars", len(rows))
    return len(rows)
