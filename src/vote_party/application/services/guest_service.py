"""Guest Application Service - the join, approve, reject and remove workflow."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.guests.entities import Guest
from ...domain.guests.value_objects import GuestStatus
from ...domain.parties.services import PartyDomainService
from ...domain.shared.exceptions import (
    DuplicateEntityError,
    DuplicateUsernameError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from ...domain.shared.messages import ErrorMessages, LogTemplates
from ..guards import ensure_owner, load_party, load_party_by_code

if TYPE_CHECKING:
    from ...domain.guests.repository import GuestRepository
    from ...domain.parties.repository import PartyRepository

logger = logging.getLogger(__name__)


class GuestApplicationService:
    """Owns the guest state machine: ``pending -> approved | rejected``.

    Guests in a different party, or no longer pending, are reported as
    ``NotFoundError`` so an admin cannot probe other parties' guests.
    """

    def __init__(
        self,
        *,
        guest_repository: GuestRepository,
        party_repository: PartyRepository,
    ) -> None:
        self._guest_repo = guest_repository
        self._party_repo = party_repository

    async def join_party(self, code: str, username: str) -> Guest:
        """Request to join a party by its public code. No authentication required.

        Raises:
            ValidationError: If the username is blank.
            NotFoundError: If no party has that code.
            DuplicateUsernameError: If the username is taken in that party.
        """
        if not username or not username.strip():
            raise ValidationError(ErrorMessages.EMPTY_USERNAME, field="username")

        party = await load_party_by_code(self._party_repo, PartyDomainService.normalize_code(code))
        if await self._guest_repo.exists_by_party_and_username(party.id, username):
            raise DuplicateUsernameError(username)

        guest = Guest.request_join(party_id=party.id, username=username)
        try:
            await self._guest_repo.create(guest)
        except DuplicateEntityError as exc:
            raise DuplicateUsernameError(username) from exc

        logger.info(LogTemplates.GUEST_JOINED, guest.id, party.id, username)
        return guest

    async def list_guests(self, admin_id: str, party_id: str) -> list[Guest]:
        """Approved guests of a party, admin view."""
        party = await load_party(self._party_repo, party_id)
        ensure_owner(party, admin_id)
        return await self._guest_repo.list_by_party_and_status(party.id, GuestStatus.APPROVED)

    async def list_guests_as_guest(self, guest_id: str, party_id: str) -> list[Guest]:
        """Approved guests of a party, visible to an approved guest of that party."""
        guest = await self._guest_repo.get_by_id(guest_id)
        if guest is None or not guest.can_vote_in(party_id):
            logger.debug(LogTemplates.OPERATION_DENIED, "Guest list", party_id, guest_id)
            raise UnauthorizedError()
        return await self._guest_repo.list_by_party_and_status(party_id, GuestStatus.APPROVED)

    async def list_join_requests(self, admin_id: str, party_id: str) -> list[Guest]:
        """Pending guests of a party, admin view."""
        party = await load_party(self._party_repo, party_id)
        ensure_owner(party, admin_id)
        return await self._guest_repo.list_by_party_and_status(party.id, GuestStatus.PENDING)

    async def approve_guest(self, admin_id: str, party_id: str, guest_id: str) -> Guest:
        guest = await self._load_pending_guest(admin_id, party_id, guest_id)
        guest.approve()
        await self._guest_repo.update_status(guest.id, guest.status)
        logger.info(LogTemplates.GUEST_APPROVED, guest.id, party_id)
        return guest

    async def reject_guest(self, admin_id: str, party_id: str, guest_id: str) -> Guest:
        guest = await self._load_pending_guest(admin_id, party_id, guest_id)
        guest.reject()
        await self._guest_repo.update_status(guest.id, guest.status)
        logger.info(LogTemplates.GUEST_REJECTED, guest.id, party_id)
        return guest

    async def remove_guest(self, admin_id: str, party_id: str, guest_id: str) -> None:
        """Delete a guest of the party, whatever their status."""
        party = await load_party(self._party_repo, party_id)
        ensure_owner(party, admin_id)
        guest = await self._load_guest_in_party(guest_id, party.id)
        await self._guest_repo.delete(guest.id)
        logger.info(LogTemplates.GUEST_REMOVED, guest.id, party.id)

    async def get_guest_status(self, code: str, guest_id: str) -> Guest:
        """Unauthenticated status poll for a guest who joined by code."""
        party = await load_party_by_code(self._party_repo, PartyDomainService.normalize_code(code))
        return await self._load_guest_in_party(guest_id, party.id)

    async def _load_pending_guest(self, admin_id: str, party_id: str, guest_id: str) -> Guest:
        party = await load_party(self._party_repo, party_id)
        ensure_owner(party, admin_id)
        guest = await self._load_guest_in_party(guest_id, party.id)
        if not guest.is_pending:
            # Already decided guests are indistinguishable from absent ones.
            raise NotFoundError("Guest", guest_id)
        return guest

    async def _load_guest_in_party(self, guest_id: str, party_id: str) -> Guest:
        guest = await self._guest_repo.get_by_id(guest_id)
        if guest is None or not guest.belongs_to(party_id):
            raise NotFoundError("Guest", guest_id)
        return guest
