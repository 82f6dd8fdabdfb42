"""
Voting Bounded Context

Ballot validation, one-vote-per-guest storage contract, and scoreboard ranking.
"""

from vote_party.domain.voting.entities import Vote
from vote_party.domain.voting.repository import VoteRepository
from vote_party.domain.voting.services import VotingDomainService
from vote_party.domain.voting.value_objects import POINT_VALUES, ActScore, Ballot

__all__ = [
    # Entities
    "Vote",
    # Value Objects
    "ActScore",
    "Ballot",
    "POINT_VALUES",
    # Repository
    "VoteRepository",
    # Services
    "VotingDomainService",
]
