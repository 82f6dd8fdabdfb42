"""Core entities for the guest bounded context."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, Field

from vote_party.domain.guests.value_objects import GuestStatus
from vote_party.domain.shared.datetime_utils import utcnow
from vote_party.domain.shared.exceptions import ValidationError
from vote_party.domain.shared.messages import ErrorMessages
from vote_party.domain.shared.types import EntityId, NonBlankStr, UtcDatetimeField


class Guest(BaseModel):
    """A participant scoped to exactly one party."""

    id: EntityId
    party_id: EntityId
    username: NonBlankStr
    status: GuestStatus = GuestStatus.PENDING
    created_at: UtcDatetimeField = Field(default_factory=utcnow)

    @property
    def is_pending(self) -> bool:
        return not self.status.is_decided

    @property
    def is_approved(self) -> bool:
        return self.status is GuestStatus.APPROVED

    def belongs_to(self, party_id: str) -> bool:
        return self.party_id == party_id

    def can_vote_in(self, party_id: str) -> bool:
        return self.belongs_to(party_id) and self.is_approved

    def approve(self) -> None:
        self._decide(GuestStatus.APPROVED)

    def reject(self) -> None:
        self._decide(GuestStatus.REJECTED)

    def _decide(self, status: GuestStatus) -> None:
        if not self.is_pending:
            raise ValidationError(
                ErrorMessages.GUEST_NOT_PENDING.format(status=self.status.value), field="status"
            )
        self.status = status

    @classmethod
    def request_join(cls, *, party_id: str, username: str) -> Guest:
        """Create a pending join request."""
        return cls(
            id=str(uuid4()),
            party_id=party_id,
            username=username,
            status=GuestStatus.PENDING,
            created_at=utcnow(),
        )
