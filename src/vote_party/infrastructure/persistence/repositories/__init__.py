"""SQLite repository implementations."""

from vote_party.infrastructure.persistence.repositories.guest_repository import (
    SQLiteGuestRepository,
)
from vote_party.infrastructure.persistence.repositories.party_repository import (
    SQLitePartyRepository,
)
from vote_party.infrastructure.persistence.repositories.user_repository import (
    SQLiteUserRepository,
)
from vote_party.infrastructure.persistence.repositories.vote_repository import (
    SQLiteVoteRepository,
)

__all__ = [
    "SQLitePartyRepository",
    "SQLiteGuestRepository",
    "SQLiteVoteRepository",
    "SQLiteUserRepository",
]
