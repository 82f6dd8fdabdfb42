"""Reusable Pydantic Annotated types for domain-wide validation.

Models annotate their fields with these instead of repeating constraints::

    from vote_party.domain.shared.types import EntityId, NonBlankStr

    class MyModel(BaseModel):
        id: EntityId
        name: NonBlankStr
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, Field

from vote_party.domain.shared.validators import validate_non_empty_string

# ── String constraints ──────────────────────────────────────────────

NonBlankStr = Annotated[str, AfterValidator(validate_non_empty_string)]
"""String that is not empty or whitespace-only."""

EntityId = NonBlankStr
"""Opaque identifier (UUID4 string for parties, guests, votes)."""


# ── Numeric constraints ─────────────────────────────────────────────

PositiveInt = Annotated[int, Field(gt=0)]
"""Integer > 0."""

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""


# ── Settings-specific constraints ──────────────────────────────────

BusyTimeoutMs = Annotated[int, Field(ge=1000, le=30000)]
"""Database busy timeout in milliseconds: 1 000 … 30 000."""

ConnectionTimeoutS = Annotated[int, Field(ge=1, le=60)]
"""Database connection timeout in seconds: 1 … 60."""


# ── Datetime constraints ────────────────────────────────────────────

def _ensure_utc(v: datetime) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if isinstance(v, datetime):
        if v.tzinfo is None:
            raise ValueError("datetime must be timezone-aware (UTC)")
        return v.astimezone(UTC)
    return v


UtcDatetimeField = Annotated[datetime, BeforeValidator(_ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""
