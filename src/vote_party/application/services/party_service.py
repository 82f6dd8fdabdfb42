"""Party Application Service - party creation, lookup and the close transition."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.catalog.value_objects import EventType
from ...domain.parties.entities import Party
from ...domain.parties.services import PartyDomainService
from ...domain.shared.exceptions import (
    CodeGenerationExhaustedError,
    DuplicateEntityError,
    ValidationError,
)
from ...domain.shared.messages import ErrorMessages, LogTemplates
from ..guards import ensure_admin_owner, ensure_owner, load_party, load_party_by_code

if TYPE_CHECKING:
    from ...domain.parties.repository import PartyRepository
    from ...domain.shared.identity import Caller

logger = logging.getLogger(__name__)


class PartyApplicationService:
    """Owns party creation, code issuance, lookup, listing and closing."""

    def __init__(self, *, party_repository: PartyRepository) -> None:
        self._party_repo = party_repository

    async def create_party(self, admin_id: str, name: str, event_type: str | EventType) -> Party:
        """Open a new active party with a freshly issued code.

        Raises:
            ValidationError: If the admin id or name is blank.
            InvalidEventTypeError: If the event type is not recognised.
            CodeGenerationExhaustedError: If every code attempt collided.
        """
        if not admin_id or not admin_id.strip():
            raise ValidationError(ErrorMessages.ADMIN_ID_REQUIRED, field="admin_id")
        if not name or not name.strip():
            raise ValidationError(ErrorMessages.EMPTY_PARTY_NAME, field="name")
        event = EventType.parse(event_type)

        attempts = PartyDomainService.MAX_ATTEMPTS
        for attempt in range(1, attempts + 1):
            code = PartyDomainService.generate_code()
            if await self._party_repo.code_exists(code):
                logger.debug(LogTemplates.PARTY_CODE_COLLISION, code, attempt, attempts)
                continue

            party = Party.open(admin_id=admin_id, name=name, code=code, event_type=event)
            try:
                await self._party_repo.create(party)
            except DuplicateEntityError:
                # Another request issued the same code between the check and the write.
                logger.debug(LogTemplates.PARTY_CODE_COLLISION, code, attempt, attempts)
                continue

            logger.info(LogTemplates.PARTY_CREATED, party.id, party.code, admin_id)
            return party

        raise CodeGenerationExhaustedError(attempts)

    async def get_party_by_id(self, admin_id: str, party_id: str) -> Party:
        party = await load_party(self._party_repo, party_id)
        ensure_owner(party, admin_id)
        return party

    async def get_party_by_code(self, code: str) -> Party:
        """Unauthenticated lookup by public code. Case and surrounding spaces are ignored."""
        return await load_party_by_code(self._party_repo, PartyDomainService.normalize_code(code))

    async def list_parties_by_admin(self, admin_id: str) -> list[Party]:
        return await self._party_repo.list_by_admin(admin_id)

    async def delete_party(self, admin_id: str, party_id: str) -> None:
        party = await load_party(self._party_repo, party_id)
        ensure_owner(party, admin_id)
        await self._party_repo.delete(party.id)
        logger.info(LogTemplates.PARTY_DELETED, party.id, admin_id)

    async def close_party(self, caller: Caller, party_id: str) -> Party:
        """End voting for a party.

        Never tolerates an anonymous caller: only the owning admin may close.

        Raises:
            NotFoundError: If the party does not exist.
            UnauthorizedError: If the caller is not the owning admin.
            PartyClosedError: If voting has already ended.
        """
        party = await load_party(self._party_repo, party_id)
        ensure_admin_owner(party, caller)
        party.close()
        await self._party_repo.update_status(party.id, party.status)
        logger.info(LogTemplates.PARTY_CLOSED, party.id)
        return party
