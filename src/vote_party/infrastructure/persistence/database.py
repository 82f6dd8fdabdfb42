"""SQLite database with per-operation connections and WAL mode."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import aiosqlite

from vote_party.domain.shared.constants import SQLPragmas, TableNames
from vote_party.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...config.settings import DatabaseSettings

logger = logging.getLogger(__name__)

_SCHEMA = (
    f"""
    CREATE TABLE IF NOT EXISTS {TableNames.PARTIES} (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        code TEXT NOT NULL UNIQUE,
        event_type TEXT NOT NULL,
        admin_id TEXT NOT NULL,
        status TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    f"CREATE INDEX IF NOT EXISTS idx_parties_admin ON {TableNames.PARTIES}(admin_id, created_at)",
    # Codes stay here after their party is deleted so they are never reissued.
    f"""
    CREATE TABLE IF NOT EXISTS {TableNames.ISSUED_PARTY_CODES} (
        code TEXT PRIMARY KEY,
        issued_at TEXT NOT NULL
    )
    """,
    f"""
    CREATE TABLE IF NOT EXISTS {TableNames.GUESTS} (
        id TEXT PRIMARY KEY,
        party_id TEXT NOT NULL,
        username TEXT NOT NULL,
        status TEXT NOT NULL,
        created_at TEXT NOT NULL,
        UNIQUE (party_id, username)
    )
    """,
    f"CREATE INDEX IF NOT EXISTS idx_guests_party_status ON {TableNames.GUESTS}(party_id, status)",
    f"""
    CREATE TABLE IF NOT EXISTS {TableNames.VOTES} (
        id TEXT PRIMARY KEY,
        guest_id TEXT NOT NULL,
        party_id TEXT NOT NULL,
        votes_json TEXT NOT NULL,
        created_at TEXT NOT NULL,
        UNIQUE (guest_id, party_id)
    )
    """,
    f"CREATE INDEX IF NOT EXISTS idx_votes_party ON {TableNames.VOTES}(party_id)",
    f"""
    CREATE TABLE IF NOT EXISTS {TableNames.USERS} (
        id TEXT PRIMARY KEY,
        username TEXT NOT NULL,
        email TEXT NOT NULL DEFAULT ''
    )
    """,
)


class Database:
    def __init__(self, url: str, settings: DatabaseSettings | None = None) -> None:
        if url.startswith("sqlite:///"):
            self._db_path = url[10:]  # Remove "sqlite:///"
        else:
            self._db_path = url

        self._initialized = False
        self._keepalive_conn: aiosqlite.Connection | None = None
        self._busy_timeout = settings.busy_timeout_ms if settings else 5000
        self._connection_timeout = settings.connection_timeout_s if settings else 10
        # Each in-memory instance gets its own shared-cache name so that
        # concurrently open test databases stay isolated.
        self._memory_name = f"vote-party-{uuid4().hex}"

    @property
    def db_path(self) -> str:
        return self._db_path

    @property
    def is_memory(self) -> bool:
        return self._db_path == ":memory:"

    async def initialize(self) -> None:
        if self._initialized:
            return

        if not self.is_memory:
            Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)

        # Keep one connection alive for in-memory DBs; otherwise the shared
        # in-memory DB is destroyed once the last connection closes.
        if self.is_memory and self._keepalive_conn is None:
            self._keepalive_conn = await self._connect()

        async with self.transaction() as conn:
            for statement in _SCHEMA:
                await conn.execute(statement)

        self._initialized = True
        logger.info(LogTemplates.DATABASE_INITIALIZED, self._db_path)

    async def _connect(self) -> aiosqlite.Connection:
        # SQLite ":memory:" is per-connection, so use a shared URI to allow
        # multiple connections to see the same in-memory database.
        if self.is_memory:
            db_path = f"file:{self._memory_name}?mode=memory&cache=shared"
            uri = True
        else:
            db_path = self._db_path
            uri = False

        conn = await aiosqlite.connect(db_path, uri=uri, timeout=self._connection_timeout)
        conn.row_factory = aiosqlite.Row

        if not self.is_memory:
            await conn.execute(SQLPragmas.JOURNAL_MODE_WAL)
        await conn.execute(SQLPragmas.FOREIGN_KEYS_ON)
        await conn.execute(SQLPragmas.BUSY_TIMEOUT.format(timeout=self._busy_timeout))

        return conn

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        conn = await self._connect()
        try:
            yield conn
        finally:
            await conn.close()

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        """Get a transaction context manager with auto-commit/rollback."""
        async with self.connection() as conn:
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    async def execute(self, sql: str, parameters: tuple[Any, ...] = ()) -> int:
        """Execute a single statement in its own transaction.

        Returns:
            The number of rows affected.
        """
        async with self.transaction() as conn:
            cursor = await conn.execute(sql, parameters)
            return cursor.rowcount

    async def fetch_one(self, sql: str, parameters: tuple[Any, ...] = ()) -> dict[str, Any] | None:
        """Fetch a single row."""
        async with self.connection() as conn:
            cursor = await conn.execute(sql, parameters)
            row = await cursor.fetchone()
            return dict(row) if row else None

    async def fetch_all(self, sql: str, parameters: tuple[Any, ...] = ()) -> list[dict[str, Any]]:
        """Fetch all rows."""
        async with self.connection() as conn:
            cursor = await conn.execute(sql, parameters)
            rows = await cursor.fetchall()
            return [dict(row) for row in rows]

    async def close(self) -> None:
        """Close the database manager.

        For file-based DBs this is mostly a no-op. For in-memory DBs we also
        close the keepalive connection, which discards the data.
        """
        if self._keepalive_conn is not None:
            try:
                await self._keepalive_conn.close()
            finally:
                self._keepalive_conn = None
        self._initialized = False
        logger.info(LogTemplates.DATABASE_CLOSED)
