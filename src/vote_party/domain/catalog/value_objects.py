"""Value objects for the act catalog bounded context."""

from __future__ import annotations

from enum import StrEnum

from vote_party.domain.shared.exceptions import InvalidEventTypeError


class EventType(StrEnum):
    """Which show of the contest a party watches; partitions the act catalog."""

    SEMIFINAL1 = "semifinal1"
    SEMIFINAL2 = "semifinal2"
    GRANDFINAL = "grandfinal"

    @classmethod
    def parse(cls, value: str | EventType) -> EventType:
        """Return the matching member or raise ``InvalidEventTypeError``."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidEventTypeError(str(value)) from None
