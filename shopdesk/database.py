"""Opening the shop database and checking the connection."""

from __future__ import annotations

import sqlite3
from pathlib import Path

DEFAULT_DATABASE = "shop2.db"


class ShopError(Exception):
    """Raised when the shop database cannot be used as requested."""


def open_database(path: str | Path = DEFAULT_DATABASE) -> sqlite3.Connection:
    """Open an existing database file for reading and writing.

    The file is never created. A database that opens read-only is
    rejected, and a test query is run before the connection is returned.
    """
    uri = Path(path).resolve().as_uri() + "?mode=rw"
    try:
        connection = sqlite3.connect(uri, uri=True)
    except sqlite3.Error as exc:
        raise ShopError(f"Error opening database: {exc}") from exc

    try:
        # Take a write lock and release it straight away: this fails when
        # SQLite could only open the file read-only.
        connection.execute("BEGIN IMMEDIATE")
        connection.execute("ROLLBACK")
    except sqlite3.Error as exc:
        connection.close()
        raise ShopError(
            f"Could not open database in read/write mode: {exc}"
        ) from exc

    try:
        database_name(connection)
    except sqlite3.Error as exc:
        connection.close()
        raise ShopError(f"Error executing test query: {exc}") from exc

    return connection


def database_name(connection: sqlite3.Connection) -> str:
    """Return the name of the first database attached to the connection."""
    row = connection.execute("PRAGMA database_list;").fetchone()
    if row is None or row[1] is None:
        return ""
    return str(row[1])