"""
Voting Domain Value Objects

Immutable value objects for the voting bounded context.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from vote_party.domain.shared.constants import VotingConstants
from vote_party.domain.shared.types import EntityId, NonNegativeInt, PositiveInt

POINT_VALUES: tuple[int, ...] = VotingConstants.POINT_VALUES
"""The ten point values a ballot awards, highest first."""

Ballot = Mapping[int, str]
"""Points awarded -> act id."""


class ActScore(BaseModel):
    """One row of a party scoreboard."""

    model_config = ConfigDict(frozen=True)

    act_id: EntityId
    country: str
    artist: str
    song: str
    total_points: NonNegativeInt
    rank: PositiveInt
