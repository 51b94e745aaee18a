"""SQLite storage for notifications that were already shown."""

import sqlite3
from datetime import datetime
from typing import Iterable, Iterator, Optional, Set


def init_db(db_path: str) -> sqlite3.Connection:
    """
    Initialize the database and create tables if they don't exist.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        A connection to the database.
    """
    conn = sqlite3.connect(db_path)
    conn.execute("""
        CREATE TABLE IF NOT EXISTS handled_notifications (
            id TEXT PRIMARY KEY,
            first_handled_at TEXT NOT NULL
        )
    """)
    conn.execute("""
        CREATE TABLE IF NOT EXISTS meta (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
    """)
    conn.commit()
    return conn


def get_handled_ids(conn: sqlite3.Connection) -> Set[str]:
    """
    Retrieve all handled notification IDs from the database.

    Args:
        conn: Database connection.

    Returns:
        A set of notification identifiers.
    """
    cursor = conn.execute("SELECT id FROM handled_notifications")
    return {row[0] for row in cursor.fetchall()}


def mark_handled(conn: sqlite3.Connection, notification_id: str) -> None:
    """Record a notification as shown."""
    now = datetime.utcnow().isoformat() + "Z"
    conn.execute(
        "INSERT OR IGNORE INTO handled_notifications (id, first_handled_at) VALUES (?, ?)",
        (notification_id, now)
    )
    conn.commit()


def get_meta(conn: sqlite3.Connection, key: str) -> Optional[str]:
    """
    Get a metadata value from the database.

    Args:
        conn: Database connection.
        key: Metadata key.

    Returns:
        The metadata value, or None if not found.
    """
    cursor = conn.execute("SELECT value FROM meta WHERE key = ?", (key,))
    row = cursor.fetchone()
    return row[0] if row else None


def set_meta(conn: sqlite3.Connection, key: str, value: str) -> None:
    """
    Set a metadata value in the database.

    Args:
        conn: Database connection.
        key: Metadata key.
        value: Metadata value.
    """
    conn.execute(
        "INSERT OR REPLACE INTO meta (key, value) VALUES (?, ?)",
        (key, value)
    )
    conn.commit()


def clear_handled(conn: sqlite3.Connection) -> None:
    """Forget every handled notification so they are shown again."""
    conn.execute("DELETE FROM handled_notifications")
    conn.commit()


class HandledSet:
    """
    Identifiers of notifications that were displayed successfully.

    The set only grows. When a connection is given, every addition is
    written to the database as well.
    """

    def __init__(self, initial: Iterable[str] = (), conn: Optional[sqlite3.Connection] = None):
        self._ids: Set[str] = set(initial)
        self._conn = conn

    @classmethod
    def load(cls, conn: sqlite3.Connection) -> "HandledSet":
        """Build a set from the database that also writes back to it."""
        return cls(get_handled_ids(conn), conn=conn)

    def __contains__(self, notification_id: str) -> bool:
        return notification_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def add(self, notification_id: str) -> None:
        if notification_id in self._ids:
            return
        if self._conn is not None:
            mark_handled(self._conn, notification_id)
        self._ids.add(notification_id)
