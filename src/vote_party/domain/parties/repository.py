"""
Party Domain Repository Interfaces

Abstract base classes defining the contracts for party persistence.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod

from vote_party.domain.parties.entities import Party
from vote_party.domain.parties.value_objects import PartyStatus


class PartyRepository(ABC):
    """Abstract repository for parties."""

    @abstractmethod
    async def create(self, party: Party) -> None:
        """Persist a new party and record its code as issued.

        Raises:
            DuplicateEntityError: If the code has already been issued.
        """
        ...

    @abstractmethod
    async def get_by_id(self, party_id: str) -> Party | None:
        """Retrieve a party by id, or None if absent."""
        ...

    @abstractmethod
    async def get_by_code(self, code: str) -> Party | None:
        """Retrieve a party by its public code, or None if absent."""
        ...

    @abstractmethod
    async def list_by_admin(self, admin_id: str) -> list[Party]:
        """List an admin's parties, newest first."""
        ...

    @abstractmethod
    async def delete(self, party_id: str) -> bool:
        """Delete a party. The issued code stays reserved.

        Returns:
            True if a party was deleted.
        """
        ...

    @abstractmethod
    async def update_status(self, party_id: str, status: PartyStatus) -> bool:
        """Set the party status.

        Returns:
            True if a party was updated.
        """
        ...

    @abstractmethod
    async def code_exists(self, code: str) -> bool:
        """Check whether a code was ever issued, including to deleted parties."""
        ...
