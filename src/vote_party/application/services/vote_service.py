"""Vote Application Service - ballot submission, update and the end of voting."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.guests.entities import Guest
from ...domain.parties.entities import Party
from ...domain.shared.exceptions import (
    DomainError,
    DuplicateEntityError,
    GuestNotApprovedError,
    NotFoundError,
    PartyClosedError,
    VoteAlreadyExistsError,
)
from ...domain.shared.messages import LogTemplates
from ...domain.voting.entities import Vote
from ...domain.voting.services import VotingDomainService
from ..guards import ensure_owner_if_admin, load_party

if TYPE_CHECKING:
    from ...domain.catalog.repository import ActCatalog
    from ...domain.guests.repository import GuestRepository
    from ...domain.parties.repository import PartyRepository
    from ...domain.shared.identity import Caller
    from ...domain.voting.repository import VoteRepository
    from .party_service import PartyApplicationService
    from .vote_models import SubmitVoteRequest

logger = logging.getLogger(__name__)


class VoteApplicationService:
    """Validates and stores ballots; at most one per guest and party.

    Checks run in a fixed order so the same request always fails the same
    way: party exists, party active, caller owns it (admins only), guest
    approved in this party, acts belong to the event, then ballot shape.
    """

    def __init__(
        self,
        *,
        vote_repository: VoteRepository,
        party_repository: PartyRepository,
        guest_repository: GuestRepository,
        act_catalog: ActCatalog,
        party_service: PartyApplicationService,
    ) -> None:
        self._vote_repo = vote_repository
        self._party_repo = party_repository
        self._guest_repo = guest_repository
        self._catalog = act_catalog
        self._party_service = party_service

    async def submit_vote(self, caller: Caller, party_id: str, request: SubmitVoteRequest) -> Vote:
        """Store a guest's first ballot for the party.

        Raises:
            NotFoundError: If the party or guest does not exist.
            PartyClosedError: If voting has ended.
            UnauthorizedError: If an admin other than the owner is calling.
            GuestNotApprovedError: If the guest is not approved in this party.
            VoteAlreadyExistsError: If the guest already voted.
            InvalidVotesError: If the ballot is malformed or names unknown acts.
        """
        try:
            party = await self._check_ballot_preconditions(caller, party_id, request)

            existing = await self._vote_repo.get_by_guest_and_party(request.guest_id, party.id)
            if existing is not None:
                raise VoteAlreadyExistsError(request.guest_id, party.id)

            VotingDomainService.validate_ballot(request.votes)
            vote = Vote.cast(guest_id=request.guest_id, party_id=party.id, votes=request.votes)
            try:
                await self._vote_repo.create(vote)
            except DuplicateEntityError as exc:
                raise VoteAlreadyExistsError(request.guest_id, party.id) from exc
        except DomainError as exc:
            logger.debug(LogTemplates.VOTE_REJECTED, request.guest_id, party_id, exc.code)
            raise

        logger.info(LogTemplates.VOTE_SUBMITTED, vote.id, vote.guest_id, vote.party_id)
        return vote

    async def update_vote(self, caller: Caller, party_id: str, request: SubmitVoteRequest) -> Vote:
        """Overwrite a guest's existing ballot while the party is still active.

        Raises the same errors as ``submit_vote``, except that a missing
        ballot is ``NotFoundError`` instead of a conflict.
        """
        try:
            party = await self._check_ballot_preconditions(caller, party_id, request)

            vote = await self._vote_repo.get_by_guest_and_party(request.guest_id, party.id)
            if vote is None:
                raise NotFoundError("Vote", request.guest_id)

            VotingDomainService.validate_ballot(request.votes)
            vote.replace_ballot(request.votes)
            await self._vote_repo.update(vote)
        except DomainError as exc:
            logger.debug(LogTemplates.VOTE_REJECTED, request.guest_id, party_id, exc.code)
            raise

        logger.info(LogTemplates.VOTE_UPDATED, vote.id, vote.guest_id, vote.party_id)
        return vote

    async def get_votes(self, caller: Caller, party_id: str, guest_id: str) -> Vote:
        """Read a guest's ballot. Open to the owning admin and non-admin callers."""
        party = await load_party(self._party_repo, party_id)
        ensure_owner_if_admin(party, caller)
        vote = await self._vote_repo.get_by_guest_and_party(guest_id, party.id)
        if vote is None:
            raise NotFoundError("Vote", guest_id)
        return vote

    async def end_voting(self, caller: Caller, party_id: str) -> Party:
        """Close the party so results can be computed."""
        return await self._party_service.close_party(caller, party_id)

    async def _check_ballot_preconditions(
        self, caller: Caller, party_id: str, request: SubmitVoteRequest
    ) -> Party:
        party = await load_party(self._party_repo, party_id)
        if not party.is_active:
            raise PartyClosedError(party.id)
        ensure_owner_if_admin(party, caller)

        guest = await self._load_guest(request.guest_id)
        if not guest.can_vote_in(party.id):
            raise GuestNotApprovedError(guest.id)

        acts = await self._catalog.list_acts(party.event_type)
        VotingDomainService.ensure_acts_in_catalog(request.votes, acts)
        return party

    async def _load_guest(self, guest_id: str) -> Guest:
        guest = await self._guest_repo.get_by_id(guest_id)
        if guest is None:
            raise NotFoundError("Guest", guest_id)
        return guest
