"""SQLite implementation of the party repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import aiosqlite

from vote_party.domain.catalog.value_objects import EventType
from vote_party.domain.parties.entities import Party
from vote_party.domain.parties.repository import PartyRepository
from vote_party.domain.parties.value_objects import PartyStatus
from vote_party.domain.shared.constants import TableNames
from vote_party.domain.shared.datetime_utils import UtcDateTime
from vote_party.domain.shared.exceptions import DuplicateEntityError

if TYPE_CHECKING:
    from ..database import Database


class SQLitePartyRepository(PartyRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def create(self, party: Party) -> None:
        try:
            async with self._db.transaction() as conn:
                await conn.execute(
                    f"INSERT INTO {TableNames.ISSUED_PARTY_CODES} (code, issued_at) VALUES (?, ?)",
                    (party.code, UtcDateTime(party.created_at).iso),
                )
                await conn.execute(
                    f"""
                    INSERT INTO {TableNames.PARTIES}
                        (id, name, code, event_type, admin_id, status, created_at)
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        party.id,
                        party.name,
                        party.code,
                        party.event_type.value,
                        party.admin_id,
                        party.status.value,
                        UtcDateTime(party.created_at).iso,
                    ),
                )
        except aiosqlite.IntegrityError as exc:
            raise DuplicateEntityError("Party", "code") from exc

    async def get_by_id(self, party_id: str) -> Party | None:
        row = await self._db.fetch_one(
            f"SELECT * FROM {TableNames.PARTIES} WHERE id = ?",
            (party_id,),
        )
        return self._row_to_party(row) if row else None

    async def get_by_code(self, code: str) -> Party | None:
        row = await self._db.fetch_one(
            f"SELECT * FROM {TableNames.PARTIES} WHERE code = ?",
            (code,),
        )
        return self._row_to_party(row) if row else None

    async def list_by_admin(self, admin_id: str) -> list[Party]:
        rows = await self._db.fetch_all(
            f"""
            SELECT * FROM {TableNames.PARTIES}
            WHERE admin_id = ?
            ORDER BY created_at DESC
            """,
            (admin_id,),
        )
        return [self._row_to_party(row) for row in rows]

    async def delete(self, party_id: str) -> bool:
        deleted = await self._db.execute(
            f"DELETE FROM {TableNames.PARTIES} WHERE id = ?",
            (party_id,),
        )
        return deleted > 0

    async def update_status(self, party_id: str, status: PartyStatus) -> bool:
        updated = await self._db.execute(
            f"UPDATE {TableNames.PARTIES} SET status = ? WHERE id = ?",
            (status.value, party_id),
        )
        return updated > 0

    async def code_exists(self, code: str) -> bool:
        row = await self._db.fetch_one(
            f"SELECT 1 FROM {TableNames.ISSUED_PARTY_CODES} WHERE code = ?",
            (code,),
        )
        return row is not None

    @staticmethod
    def _row_to_party(row: dict[str, Any]) -> Party:
        return Party(
            id=row["id"],
            name=row["name"],
            code=row["code"],
            event_type=EventType(row["event_type"]),
            admin_id=row["admin_id"],
            status=PartyStatus(row["status"]),
            created_at=UtcDateTime.from_iso(row["created_at"]).dt,
        )
