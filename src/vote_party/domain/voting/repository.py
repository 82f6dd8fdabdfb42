"""
Voting Domain Repository Interfaces

Abstract base classes defining the contracts for vote persistence.
"""

from abc import ABC, abstractmethod

from vote_party.domain.voting.entities import Vote


class VoteRepository(ABC):
    """Abstract repository for ballots. Votes are never deleted through it."""

    @abstractmethod
    async def create(self, vote: Vote) -> None:
        """Persist a new vote.

        Raises:
            DuplicateEntityError: If the guest already voted in the party.
        """
        ...

    @abstractmethod
    async def get_by_guest_and_party(self, guest_id: str, party_id: str) -> Vote | None:
        """Retrieve a guest's vote for a party, or None if absent."""
        ...

    @abstractmethod
    async def update(self, vote: Vote) -> bool:
        """Overwrite the ballot of an existing vote.

        Returns:
            True if a vote was updated.
        """
        ...

    @abstractmethod
    async def list_by_party(self, party_id: str) -> list[Vote]:
        """List every vote cast in a party."""
        ...
