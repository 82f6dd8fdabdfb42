"""Core entities for the party bounded context."""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field

from vote_party.domain.catalog.value_objects import EventType
from vote_party.domain.parties.value_objects import PartyStatus
from vote_party.domain.shared.datetime_utils import utcnow
from vote_party.domain.shared.exceptions import PartyClosedError
from vote_party.domain.shared.types import EntityId, NonBlankStr, UtcDatetimeField


class Party(BaseModel):
    """Aggregate for a watch party owned by one admin."""

    id: EntityId
    name: NonBlankStr
    code: NonBlankStr
    event_type: EventType
    admin_id: EntityId
    status: PartyStatus = PartyStatus.ACTIVE
    created_at: UtcDatetimeField = Field(default_factory=utcnow)

    @property
    def is_active(self) -> bool:
        return self.status.accepts_votes

    def is_owned_by(self, admin_id: str) -> bool:
        return self.admin_id == admin_id

    def close(self) -> None:
        """End voting. Closing an already closed party is an error."""
        if not self.is_active:
            raise PartyClosedError(self.id)
        self.status = PartyStatus.CLOSED

    @classmethod
    def open(
        cls,
        *,
        admin_id: str,
        name: str,
        code: str,
        event_type: EventType,
        created_at: datetime | None = None,
    ) -> Party:
        """Create a new active party with a fresh id."""
        return cls(
            id=str(uuid4()),
            name=name,
            code=code,
            event_type=event_type,
            admin_id=admin_id,
            status=PartyStatus.ACTIVE,
            created_at=created_at or utcnow(),
        )
