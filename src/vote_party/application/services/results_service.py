"""Results Application Service - scoreboards for closed parties."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.shared.exceptions import VotingNotEndedError
from ...domain.shared.messages import LogTemplates
from ...domain.voting.services import VotingDomainService
from ..guards import ensure_owner_if_admin, load_party
from .results_models import PartyResults

if TYPE_CHECKING:
    from ...domain.catalog.repository import ActCatalog
    from ...domain.parties.repository import PartyRepository
    from ...domain.shared.identity import Caller
    from ...domain.voting.repository import VoteRepository

logger = logging.getLogger(__name__)


class ResultsApplicationService:
    def __init__(
        self,
        *,
        party_repository: PartyRepository,
        vote_repository: VoteRepository,
        act_catalog: ActCatalog,
    ) -> None:
        self._party_repo = party_repository
        self._vote_repo = vote_repository
        self._catalog = act_catalog

    async def get_results(self, caller: Caller, party_id: str) -> PartyResults:
        """Rank every act of the party's event by total points.

        Raises:
            NotFoundError: If the party does not exist.
            UnauthorizedError: If an admin other than the owner is calling.
            VotingNotEndedError: If the party is still active.
        """
        party = await load_party(self._party_repo, party_id)
        ensure_owner_if_admin(party, caller)
        if party.is_active:
            raise VotingNotEndedError(party.id)

        votes = await self._vote_repo.list_by_party(party.id)
        acts = await self._catalog.list_acts(party.event_type)
        scoreboard = VotingDomainService.build_scoreboard(votes, acts)

        logger.info(LogTemplates.RESULTS_COMPUTED, party.id, len(votes))
        return PartyResults(
            party_id=party.id,
            party_name=party.name,
            total_voters=len(votes),
            results=scoreboard,
        )
