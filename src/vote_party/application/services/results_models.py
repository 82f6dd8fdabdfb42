"""Response models for party results."""

from __future__ import annotations

from pydantic import BaseModel

from ...domain.shared.types import EntityId, NonNegativeInt
from ...domain.voting.value_objects import ActScore


class PartyResults(BaseModel):
    """Scoreboard of a closed party. Derived on demand, never stored."""

    party_id: EntityId
    party_name: str
    total_voters: NonNegativeInt
    results: list[ActScore]

    @property
    def winners(self) -> list[ActScore]:
        """Every act sharing rank 1 (empty for an event without acts)."""
        return [score for score in self.results if score.rank == 1]
