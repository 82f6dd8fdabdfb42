"""Request models for vote submission."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ...domain.shared.types import EntityId


class SubmitVoteRequest(BaseModel):
    """A guest's ballot as received from the boundary.

    ``votes`` maps points awarded to act id. String keys such as ``"12"``
    (as found in JSON bodies) are coerced to ``int``.
    """

    model_config = ConfigDict(populate_by_name=True)

    guest_id: EntityId = Field(alias="guestId")
    votes: dict[int, str]
