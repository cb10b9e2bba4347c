"""
Durable storage for users and businesses.

``EntityStore`` owns a single SQLite connection (opened lazily, schema
migrated on open) and is the only component that issues SQL.  Every
operation runs under a re-entrant lock, so the store behaves as a
single writer even when the API serves requests from several threads.

Reads that find nothing return ``None`` or an empty list.  Database
failures are logged, rolled back and raised as ``StoreError``; callers
decide how to surface them.  After each committed write every
subscribed listener is called, in subscription order, with no
arguments.  A commit that touched zero rows still notifies, so a
listener may see more notifications than actual changes but never
fewer.
"""

import json
import logging
import sqlite3
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Union

from ..core.db import get_connection, get_database_path, init_db
from ..core.errors import StoreError
from ..schemas.business import Business, BusinessCategory, Coordinate
from ..schemas.user import UserRead, UserRecord

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]

BUSINESS_COLUMNS = (
    "id",
    "owner_id",
    "name",
    "description",
    "category",
    "address",
    "phone",
    "email",
    "website",
    "latitude",
    "longitude",
    "rating",
    "review_count",
    "created_at",
    "updated_at",
    "images",
    "social_media",
)

_INSERT_BUSINESS = "INSERT INTO businesses ({cols}) VALUES ({marks})".format(
    cols=", ".join(BUSINESS_COLUMNS),
    marks=", ".join("?" for _ in BUSINESS_COLUMNS),
)

_UPSERT_BUSINESS = _INSERT_BUSINESS + " ON CONFLICT(id) DO UPDATE SET " + ", ".join(
    f"{col} = excluded.{col}" for col in BUSINESS_COLUMNS if col != "id"
)

_SELECT_BUSINESS = "SELECT {cols} FROM businesses".format(cols=", ".join(BUSINESS_COLUMNS))


def _business_params(business: Business) -> tuple:
    return (
        business.id,
        business.owner_id,
        business.name,
        business.description,
        business.category.value,
        business.address,
        business.phone,
        business.email,
        business.website,
        business.location.latitude,
        business.location.longitude,
        business.rating,
        business.review_count,
        business.created_at.isoformat(),
        business.updated_at.isoformat(),
        json.dumps(business.images),
        json.dumps(business.social_media),
    )


def _business_from_row(row: sqlite3.Row) -> Business:
    return Business(
        id=row["id"],
        owner_id=row["owner_id"] or "",
        name=row["name"] or "",
        description=row["description"] or "",
        category=BusinessCategory.parse(row["category"]),
        location=Coordinate(latitude=row["latitude"], longitude=row["longitude"]),
        address=row["address"] or "",
        phone=row["phone"],
        email=row["email"],
        website=row["website"],
        social_media=json.loads(row["social_media"] or "{}"),
        images=json.loads(row["images"] or "[]"),
        rating=row["rating"],
        review_count=row["review_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _rollback(conn: sqlite3.Connection) -> None:
    try:
        if conn.in_transaction:
            conn.rollback()
    except sqlite3.Error as e:
        logger.warning("Rollback failed: %s", e)


def _user_from_row(row: sqlite3.Row) -> UserRecord:
    return UserRecord(
        id=row["id"],
        email=row["email"],
        password=row["password"],
        name=row["name"] or "",
        created_at=row["created_at"],
    )


class EntityStore:
    """SQLite-backed store for ``UserRecord`` and ``Business`` rows."""

    def __init__(self, database_url: str):
        self.database_path = get_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()
        self._listeners: List[ChangeListener] = []

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Open the connection and apply pending migrations."""
        with self._lock:
            if self._conn is not None:
                return
            try:
                conn = get_connection(self.database_path)
                version = init_db(conn)
            except sqlite3.Error as e:
                logger.error("Failed to open database %s: %s", self.database_path, e)
                raise StoreError(f"Cannot open database: {e}") from e
            self._conn = conn
            logger.info("Opened database %s (schema version %s)", self.database_path, version)

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self.open()
        return self._conn

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                # The write is already committed; a failing observer must
                # not turn it into an error for the caller.
                logger.exception("Store change listener %r failed", listener)

    # ------------------------------------------------------------------
    # Low level helpers
    # ------------------------------------------------------------------

    def _execute(self, sql: str, params: Sequence = ()) -> sqlite3.Cursor:
        with self._lock:
            conn = self.connection
            try:
                return conn.execute(sql, tuple(params))
            except sqlite3.Error as e:
                _rollback(conn)
                logger.error("Database error: %s", e)
                raise StoreError(str(e)) from e

    def _write(self, sql: str, params: Sequence = ()) -> int:
        """Run one mutating statement, commit it and notify listeners.

        Returns the number of affected rows.
        """
        with self._lock:
            rowcount = self._execute(sql, params).rowcount
            changed = self._commit()
        if changed:
            self._notify()
        return rowcount

    def _commit(self) -> bool:
        """Commit the open transaction; return whether there was one."""
        conn = self.connection
        if not conn.in_transaction:
            return False
        try:
            conn.commit()
        except sqlite3.Error as e:
            _rollback(conn)
            logger.error("Failed to save changes: %s", e)
            raise StoreError(str(e)) from e
        logger.debug("Changes saved to %s", self.database_path)
        return True

    def save(self) -> None:
        """Commit pending changes, if any, and notify listeners."""
        with self._lock:
            changed = self._commit()
        if changed:
            self._notify()

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def fetch_user(self, email: str) -> Optional[UserRecord]:
        """Return the user registered with ``email`` (case-insensitive) or ``None``."""
        row = self._execute(
            "SELECT id, email, password, name, created_at FROM users WHERE email = ?",
            (email.lower(),),
        ).fetchone()
        return _user_from_row(row) if row else None

    def create_user(self, email: str, password: str, name: str) -> Optional[UserRecord]:
        """Persist a new user and return it.

        Returns ``None`` when the row is rejected by a constraint (the
        e-mail was registered in the meantime).  Other database failures
        raise ``StoreError``.
        """
        record = UserRecord(
            id=str(uuid.uuid4()),
            email=email.lower(),
            password=password,
            name=name,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            conn = self.connection
            try:
                conn.execute(
                    "INSERT INTO users (id, email, password, name, created_at) VALUES (?, ?, ?, ?, ?)",
                    (record.id, record.email, record.password, record.name, record.created_at.isoformat()),
                )
            except sqlite3.IntegrityError as e:
                _rollback(conn)
                logger.warning("User %s was not created: %s", record.email, e)
                return None
            except sqlite3.Error as e:
                _rollback(conn)
                logger.error("Failed to create user %s: %s", record.email, e)
                raise StoreError(str(e)) from e
            changed = self._commit()
        if changed:
            self._notify()
        logger.info("Created user %s", record.email)
        return record

    def delete_user(self, user: Union[UserRead, str]) -> bool:
        user_id = user if isinstance(user, str) else user.id
        return self._write("DELETE FROM users WHERE id = ?", (user_id,)) > 0

    # ------------------------------------------------------------------
    # Businesses
    # ------------------------------------------------------------------

    def fetch_businesses(self) -> List[Business]:
        """Return every stored business in insertion order."""
        rows = self._execute(_SELECT_BUSINESS + " ORDER BY rowid").fetchall()
        businesses = [_business_from_row(row) for row in rows]
        logger.debug("Fetched %d businesses", len(businesses))
        return businesses

    def fetch_business(self, business_id: str) -> Optional[Business]:
        row = self._execute(_SELECT_BUSINESS + " WHERE id = ?", (business_id,)).fetchone()
        return _business_from_row(row) if row else None

    def add_business(self, business: Business) -> None:
        """Insert ``business``; an existing id raises ``StoreError``."""
        logger.info("Saving business %s with images %s", business.name, business.images)
        self._write(_INSERT_BUSINESS, _business_params(business))

    def upsert_business(self, business: Business) -> None:
        """Insert or fully replace ``business`` in one statement.

        The record is never absent from the table while it is being
        replaced.
        """
        logger.info("Replacing business %s (%s)", business.id, business.name)
        self._write(_UPSERT_BUSINESS, _business_params(business))

    def delete_business(self, business: Union[Business, str]) -> bool:
        """Delete by id; return whether a row was removed."""
        business_id = business if isinstance(business, str) else business.id
        deleted = self._write("DELETE FROM businesses WHERE id = ?", (business_id,)) > 0
        if not deleted:
            logger.info("Business %s not found, nothing deleted", business_id)
        return deleted

    def delete_all_businesses(self) -> int:
        count = self._write("DELETE FROM businesses")
        logger.info("Deleted %d businesses", count)
        return count

    # ------------------------------------------------------------------
    # Flags
    # ------------------------------------------------------------------

    def get_flag(self, key: str) -> Optional[str]:
        row = self._execute("SELECT value FROM app_flags WHERE key = ?", (key,)).fetchone()
        return row["value"] if row else None

    def set_flag(self, key: str, value: str) -> None:
        self._write(
            "INSERT INTO app_flags (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, value),
        )
