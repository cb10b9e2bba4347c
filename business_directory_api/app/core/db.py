"""
SQLite database integration and simple migration system.

This module provides functions for resolving the database location
(``get_database_path``), opening a connection (``get_connection``) and
applying migrations (``init_db``).  It uses SQLite as a lightweight
embedded database, mirroring the on-device store of the mobile client.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import List, Tuple

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: users and businesses
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            email TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL,
            name TEXT,
            created_at TIMESTAMP NOT NULL
        );

        CREATE TABLE IF NOT EXISTS businesses (
            id TEXT PRIMARY KEY,
            owner_id TEXT,
            name TEXT NOT NULL,
            description TEXT,
            category TEXT NOT NULL DEFAULT 'other',
            address TEXT,
            phone TEXT,
            email TEXT,
            website TEXT,
            latitude REAL NOT NULL,
            longitude REAL NOT NULL,
            rating REAL NOT NULL DEFAULT 0,
            review_count INTEGER NOT NULL DEFAULT 0,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP NOT NULL,
            images TEXT NOT NULL DEFAULT '[]'
        );
        """,
    ),
    # Migration 2: persisted flags (e.g. whether the sample catalog was loaded)
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS app_flags (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        );
        """,
    ),
    # Migration 3: persist social media handles and index listings by owner
    (
        3,
        """
        -- JSON object of platform -> handle.  Older rows read back as empty.
        ALTER TABLE businesses ADD COLUMN social_media TEXT NOT NULL DEFAULT '{}';
        CREATE INDEX IF NOT EXISTS idx_businesses_owner_id ON businesses(owner_id);
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned unchanged.  Relative
    paths are resolved against the project root (the directory that
    contains the ``business_directory_api`` package).
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Timestamps are stored as ISO strings and parsed by the
    pydantic models, so no type detection is enabled.  The connection
    may be shared across threads; callers serialise access themselves.
    """
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> int:
    """Apply pending migrations on ``conn`` and return the schema version.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entry of
    ``MIGRATIONS``.  To change the schema, append a migration with an
    incremented version number.
    """
    cursor = conn.cursor()
    cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
    row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    current_version = row["version"] if row and row["version"] is not None else 0

    for version, sql in MIGRATIONS:
        if version > current_version:
            logger.info("Applying migration %s", version)
            cursor.executescript(sql)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            current_version = version
    conn.commit()
    return current_version
