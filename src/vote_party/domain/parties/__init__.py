"""
Party Bounded Context

Party lifecycle: creation with a unique public code, ownership, closing.
"""

from vote_party.domain.parties.entities import Party
from vote_party.domain.parties.repository import PartyRepository
from vote_party.domain.parties.services import PartyDomainService
from vote_party.domain.parties.value_objects import PartyStatus

__all__ = [
    "Party",
    "PartyStatus",
    "PartyRepository",
    "PartyDomainService",
]
