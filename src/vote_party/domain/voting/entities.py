"""Core domain entities for the voting bounded context."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, Field

from vote_party.domain.shared.datetime_utils import utcnow
from vote_party.domain.shared.types import EntityId, UtcDatetimeField
from vote_party.domain.voting.value_objects import Ballot


class Vote(BaseModel):
    """A guest's ranked ballot for one party. At most one per (guest, party)."""

    id: EntityId
    guest_id: EntityId
    party_id: EntityId
    votes: dict[int, str]
    created_at: UtcDatetimeField = Field(default_factory=utcnow)

    def points_for(self, act_id: str) -> int:
        return sum(points for points, voted in self.votes.items() if voted == act_id)

    def replace_ballot(self, votes: Ballot) -> None:
        """Overwrite the ballot in place; id and creation time are kept."""
        self.votes = dict(votes)

    @classmethod
    def cast(cls, *, guest_id: str, party_id: str, votes: Ballot) -> Vote:
        return cls(
            id=str(uuid4()),
            guest_id=guest_id,
            party_id=party_id,
            votes=dict(votes),
            created_at=utcnow(),
        )
