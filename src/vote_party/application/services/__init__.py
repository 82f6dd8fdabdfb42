"""Application services, one per component of the party workflow."""

from vote_party.application.services.guest_service import GuestApplicationService
from vote_party.application.services.party_service import PartyApplicationService
from vote_party.application.services.results_models import PartyResults
from vote_party.application.services.results_service import ResultsApplicationService
from vote_party.application.services.user_service import UserApplicationService
from vote_party.application.services.vote_models import SubmitVoteRequest
from vote_party.application.services.vote_service import VoteApplicationService

__all__ = [
    "PartyApplicationService",
    "GuestApplicationService",
    "VoteApplicationService",
    "ResultsApplicationService",
    "UserApplicationService",
    "PartyResults",
    "SubmitVoteRequest",
]
