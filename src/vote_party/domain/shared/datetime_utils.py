"""Date/time helpers.

All timestamps are timezone-aware UTC; the database stores them as ISO 8601
strings with an explicit offset.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from vote_party.domain.shared.messages import ErrorMessages


@dataclass(frozen=True, slots=True)
class UtcDateTime:
    """Wrapper around a timezone-aware UTC `datetime` used at the storage edge."""

    dt: datetime

    def __post_init__(self) -> None:
        if self.dt.tzinfo is None:
            raise ValueError(ErrorMessages.TIMEZONE_REQUIRED_UTC_DATETIME)
        object.__setattr__(self, "dt", self.dt.astimezone(UTC))

    @classmethod
    def now(cls) -> UtcDateTime:
        return cls(datetime.now(UTC))

    @classmethod
    def from_iso(cls, value: str) -> UtcDateTime:
        # Accepts: '...+00:00' or '...Z'
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return cls(datetime.fromisoformat(value))

    @property
    def iso(self) -> str:
        return self.dt.isoformat()


def utcnow() -> datetime:
    return datetime.now(UTC)
