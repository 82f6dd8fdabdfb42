"""SQLite implementation of the user profile repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vote_party.domain.shared.constants import TableNames
from vote_party.domain.users.entities import User
from vote_party.domain.users.repository import UserRepository

if TYPE_CHECKING:
    from ..database import Database


class SQLiteUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def upsert(self, user: User) -> None:
        await self._db.execute(
            f"""
            INSERT INTO {TableNames.USERS} (id, username, email)
            VALUES (?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                username = excluded.username,
                email = excluded.email
            """,
            (user.id, user.username, user.email),
        )

    async def get_by_id(self, user_id: str) -> User | None:
        row = await self._db.fetch_one(
            f"SELECT * FROM {TableNames.USERS} WHERE id = ?",
            (user_id,),
        )
        if row is None:
            return None
        return User(id=row["id"], username=row["username"], email=row["email"])
