"""SQLite implementation of the guest repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import aiosqlite

from vote_party.domain.guests.entities import Guest
from vote_party.domain.guests.repository import GuestRepository
from vote_party.domain.guests.value_objects import GuestStatus
from vote_party.domain.shared.constants import TableNames
from vote_party.domain.shared.datetime_utils import UtcDateTime
from vote_party.domain.shared.exceptions import DuplicateEntityError

if TYPE_CHECKING:
    from ..database import Database


class SQLiteGuestRepository(GuestRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def create(self, guest: Guest) -> None:
        try:
            await self._db.execute(
                f"""
                INSERT INTO {TableNames.GUESTS} (id, party_id, username, status, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    guest.id,
                    guest.party_id,
                    guest.username,
                    guest.status.value,
                    UtcDateTime(guest.created_at).iso,
                ),
            )
        except aiosqlite.IntegrityError as exc:
            raise DuplicateEntityError("Guest", "party_id, username") from exc

    async def get_by_id(self, guest_id: str) -> Guest | None:
        row = await self._db.fetch_one(
            f"SELECT * FROM {TableNames.GUESTS} WHERE id = ?",
            (guest_id,),
        )
        return self._row_to_guest(row) if row else None

    async def list_by_party(self, party_id: str) -> list[Guest]:
        rows = await self._db.fetch_all(
            f"""
            SELECT * FROM {TableNames.GUESTS}
            WHERE party_id = ?
            ORDER BY created_at ASC
            """,
            (party_id,),
        )
        return [self._row_to_guest(row) for row in rows]

    async def list_by_party_and_status(self, party_id: str, status: GuestStatus) -> list[Guest]:
        rows = await self._db.fetch_all(
            f"""
            SELECT * FROM {TableNames.GUESTS}
            WHERE party_id = ? AND status = ?
            ORDER BY created_at ASC
            """,
            (party_id, status.value),
        )
        return [self._row_to_guest(row) for row in rows]

    async def update_status(self, guest_id: str, status: GuestStatus) -> bool:
        updated = await self._db.execute(
            f"UPDATE {TableNames.GUESTS} SET status = ? WHERE id = ?",
            (status.value, guest_id),
        )
        return updated > 0

    async def delete(self, guest_id: str) -> bool:
        deleted = await self._db.execute(
            f"DELETE FROM {TableNames.GUESTS} WHERE id = ?",
            (guest_id,),
        )
        return deleted > 0

    async def exists_by_party_and_username(self, party_id: str, username: str) -> bool:
        row = await self._db.fetch_one(
            f"SELECT 1 FROM {TableNames.GUESTS} WHERE party_id = ? AND username = ? LIMIT 1",
            (party_id, username),
        )
        return row is not None

    @staticmethod
    def _row_to_guest(row: dict[str, Any]) -> Guest:
        return Guest(
            id=row["id"],
            party_id=row["party_id"],
            username=row["username"],
            status=GuestStatus(row["status"]),
            created_at=UtcDateTime.from_iso(row["created_at"]).dt,
        )
