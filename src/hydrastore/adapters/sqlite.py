"""SQLiteAdapter — durable, single-file storage backend using aiosqlite."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

try:
    import aiosqlite
except ImportError as exc:
    raise ImportError(
        "SQLiteAdapter requires the 'aiosqlite' package. "
        "Install it with: pip install aiosqlite"
    ) from exc

from hydrastore.adapters.base import StorageAdapter

if TYPE_CHECKING:
    from hydrastore.store import StoreOptions

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS hydrastore (
    key   TEXT NOT NULL PRIMARY KEY,
    value TEXT NOT NULL
)
"""


class SQLiteAdapter(StorageAdapter):
    """Persistent adapter backed by a single SQLite file.

    Values are stored as JSON text, so anything ``json.dumps`` accepts
    round-trips.  The ``encrypted`` store option is not acted upon here;
    wrap this adapter if values must be encrypted at rest.

    Parameters:
        db_path: Path to the SQLite database file.  Use ``":memory:"``
                 for an in-memory database (useful for testing).
    """

    def __init__(self, db_path: str = "hydrastore.db") -> None:
        self._db_path = db_path
        self._db: aiosqlite.Connection | None = None

    async def _connect(self) -> aiosqlite.Connection:
        if self._db is None:
            self._db = await aiosqlite.connect(self._db_path)
            await self._db.execute(_CREATE_TABLE)
            await self._db.commit()
        return self._db

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    # ── StorageAdapter protocol ──────────────────────────────

    async def get(self, key: str, options: StoreOptions) -> Any | None:
        db = await self._connect()
        cursor = await db.execute("SELECT value FROM hydrastore WHERE key = ?", (key,))
        row = await cursor.fetchone()
        if row is None:
            return None
        return json.loads(row[0])

    async def set(self, key: str, value: Any, options: StoreOptions) -> None:
        db = await self._connect()
        await db.execute(
            "INSERT OR REPLACE INTO hydrastore (key, value) VALUES (?, ?)",
            (key, json.dumps(value)),
        )
        await db.commit()

    async def remove(self, key: str, options: StoreOptions) -> None:
        db = await self._connect()
        await db.execute("DELETE FROM hydrastore WHERE key = ?", (key,))
        await db.commit()

    async def keys(self) -> list[str]:
        db = await self._connect()
        cursor = await db.execute("SELECT key FROM hydrastore")
        rows = await cursor.fetchall()
        return [row[0] for row in rows]
