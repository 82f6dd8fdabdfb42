"""SQLite implementation of the vote repository."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import aiosqlite

from vote_party.domain.shared.constants import TableNames
from vote_party.domain.shared.datetime_utils import UtcDateTime
from vote_party.domain.shared.exceptions import DuplicateEntityError
from vote_party.domain.voting.entities import Vote
from vote_party.domain.voting.repository import VoteRepository

if TYPE_CHECKING:
    from ..database import Database


class SQLiteVoteRepository(VoteRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    async def create(self, vote: Vote) -> None:
        try:
            await self._db.execute(
                f"""
                INSERT INTO {TableNames.VOTES} (id, guest_id, party_id, votes_json, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    vote.id,
                    vote.guest_id,
                    vote.party_id,
                    self._encode_ballot(vote.votes),
                    UtcDateTime(vote.created_at).iso,
                ),
            )
        except aiosqlite.IntegrityError as exc:
            raise DuplicateEntityError("Vote", "guest_id, party_id") from exc

    async def get_by_guest_and_party(self, guest_id: str, party_id: str) -> Vote | None:
        row = await self._db.fetch_one(
            f"SELECT * FROM {TableNames.VOTES} WHERE guest_id = ? AND party_id = ? LIMIT 1",
            (guest_id, party_id),
        )
        return self._row_to_vote(row) if row else None

    async def update(self, vote: Vote) -> bool:
        updated = await self._db.execute(
            f"UPDATE {TableNames.VOTES} SET votes_json = ? WHERE id = ?",
            (self._encode_ballot(vote.votes), vote.id),
        )
        return updated > 0

    async def list_by_party(self, party_id: str) -> list[Vote]:
        rows = await self._db.fetch_all(
            f"SELECT * FROM {TableNames.VOTES} WHERE party_id = ? ORDER BY created_at ASC",
            (party_id,),
        )
        return [self._row_to_vote(row) for row in rows]

    @staticmethod
    def _encode_ballot(votes: dict[int, str]) -> str:
        # JSON object keys are strings; Vote coerces them back to int on load.
        return json.dumps({str(points): act_id for points, act_id in votes.items()})

    @staticmethod
    def _row_to_vote(row: dict[str, Any]) -> Vote:
        return Vote(
            id=row["id"],
            guest_id=row["guest_id"],
            party_id=row["party_id"],
            votes=json.loads(row["votes_json"]),
            created_at=UtcDateTime.from_iso(row["created_at"]).dt,
        )
