"""
database.py
===========
The ``docSet.dsidx`` search index.

Dash reads a single ``searchIndex`` table.  The table is always dropped and
recreated, so an index is never a mix of two builds.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Iterable

from .config import SearchEntry
from .errors import DatabaseError

log = logging.getLogger(__name__)

TABLE_NAME = "searchIndex"


def init_database(db_path: Path) -> sqlite3.Connection:
    """Create the Dash SQLite search index at *db_path* and return the connection."""
    try:
        conn = sqlite3.connect(str(db_path))
    except sqlite3.Error as exc:
        raise DatabaseError(f"Cannot open database {db_path}: {exc}") from exc
    try:
        conn.execute(f"DROP TABLE IF EXISTS {TABLE_NAME}")
        conn.execute(
            f"""
            CREATE TABLE {TABLE_NAME} (
                id   INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT,
                type TEXT,
                path TEXT
            )
            """
        )
        conn.commit()
    except sqlite3.Error as exc:
        conn.close()
        raise DatabaseError(f"Cannot create {TABLE_NAME} in {db_path}: {exc}") from exc
    return conn


def insert_entries(conn: sqlite3.Connection, entries: Iterable[SearchEntry]) -> int:
    """Insert *entries* in order within one transaction. Returns the row count."""
    rows = [(entry.name, entry.type, entry.path) for entry in entries]
    try:
        with conn:
            conn.executemany(
                f"INSERT INTO {TABLE_NAME}(name, type, path) VALUES (?, ?, ?)",
                rows,
            )
    except sqlite3.Error as exc:
        raise DatabaseError(f"Inserting search entries failed: {exc}") from exc
    return len(rows)


def read_entries(db_path: Path) -> list[SearchEntry]:
    """Return every row of the search index in insertion order."""
    conn = sqlite3.connect(str(db_path))
    try:
        rows = conn.execute(
            f"SELECT name, type, path FROM {TABLE_NAME} ORDER BY id"
        ).fetchall()
    except sqlite3.Error as exc:
        raise DatabaseError(f"Cannot read {TABLE_NAME} from {db_path}: {exc}") from exc
    finally:
        conn.close()
    return [SearchEntry(*row) for row in rows]
