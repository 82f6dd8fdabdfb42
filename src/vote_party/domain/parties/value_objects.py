"""Value objects for the party bounded context."""

from __future__ import annotations

from enum import StrEnum


class PartyStatus(StrEnum):
    """Lifecycle of a party. Transitions only ACTIVE -> CLOSED."""

    ACTIVE = "active"
    CLOSED = "closed"

    @property
    def accepts_votes(self) -> bool:
        return self is PartyStatus.ACTIVE
