"""Reusable authorization guard functions for party use cases.

These are free functions that accept explicit dependencies rather than relying
on a specific service instance, so every service applies the same rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vote_party.domain.shared.exceptions import NotFoundError, UnauthorizedError
from vote_party.domain.shared.identity import AdminCaller, Caller, is_foreign_admin

if TYPE_CHECKING:
    from ..domain.parties.entities import Party
    from ..domain.parties.repository import PartyRepository


async def load_party(party_repository: PartyRepository, party_id: str) -> Party:
    """Fetch a party or raise ``NotFoundError``."""
    party = await party_repository.get_by_id(party_id)
    if party is None:
        raise NotFoundError("Party", party_id)
    return party


async def load_party_by_code(party_repository: PartyRepository, code: str) -> Party:
    """Fetch a party by public code or raise ``NotFoundError``."""
    party = await party_repository.get_by_code(code)
    if party is None:
        raise NotFoundError("Party", code)
    return party


def ensure_owner(party: Party, admin_id: str) -> None:
    """Require the admin to own the party."""
    if not party.is_owned_by(admin_id):
        raise UnauthorizedError()


def ensure_owner_if_admin(party: Party, caller: Caller) -> None:
    """Reject an authenticated admin who does not own the party.

    Guests and anonymous callers pass; operations open to the public use this.
    """
    if is_foreign_admin(caller, party.admin_id):
        raise UnauthorizedError()


def ensure_admin_owner(party: Party, caller: Caller) -> AdminCaller:
    """Require an authenticated admin who owns the party. Never allows anonymous."""
    if not isinstance(caller, AdminCaller):
        raise UnauthorizedError()
    ensure_owner(party, caller.admin_id)
    return caller
