"""Core entities for the act catalog bounded context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from vote_party.domain.catalog.value_objects import EventType
from vote_party.domain.shared.types import EntityId, NonBlankStr, PositiveInt


class Act(BaseModel):
    """A competing entry. Reference data; never mutated by the core."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: EntityId
    country: NonBlankStr
    artist: NonBlankStr
    song: NonBlankStr
    running_order: PositiveInt = Field(alias="runningOrder")
    event_type: EventType = Field(alias="eventType")
