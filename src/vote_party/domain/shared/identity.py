"""Caller identities passed into every use case.

The boundary verifies tokens and hands the core one of these; the core never
infers identity itself.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from vote_party.domain.shared.types import EntityId


class AdminCaller(BaseModel):
    """An authenticated admin."""

    model_config = ConfigDict(frozen=True)

    admin_id: EntityId

    def owns(self, owner_id: str) -> bool:
        return self.admin_id == owner_id


class GuestCaller(BaseModel):
    """A party guest identified by the guest id they received on joining."""

    model_config = ConfigDict(frozen=True)

    guest_id: EntityId


class AnonymousCaller(BaseModel):
    """A caller that presented no credentials."""

    model_config = ConfigDict(frozen=True)


Caller = AdminCaller | GuestCaller | AnonymousCaller

ANONYMOUS = AnonymousCaller()


def is_foreign_admin(caller: Caller, owner_id: str) -> bool:
    """True when an authenticated admin other than the owner is calling.

    Guests and anonymous callers are not rejected by this check; operations
    open to the public rely on it.
    """
    return isinstance(caller, AdminCaller) and not caller.owns(owner_id)
