"""Core entities for the user profile bounded context."""

from __future__ import annotations

from pydantic import BaseModel

from vote_party.domain.shared.types import EntityId


class User(BaseModel):
    """Profile of an authenticated admin."""

    id: EntityId
    username: str
    email: str = ""
