"""
Guest Domain Repository Interfaces

Abstract base classes defining the contracts for guest persistence.
"""

from abc import ABC, abstractmethod

from vote_party.domain.guests.entities import Guest
from vote_party.domain.guests.value_objects import GuestStatus


class GuestRepository(ABC):
    """Abstract repository for party guests."""

    @abstractmethod
    async def create(self, guest: Guest) -> None:
        """Persist a new guest.

        Raises:
            DuplicateEntityError: If the username is taken within the party.
        """
        ...

    @abstractmethod
    async def get_by_id(self, guest_id: str) -> Guest | None:
        """Retrieve a guest by id, or None if absent."""
        ...

    @abstractmethod
    async def list_by_party(self, party_id: str) -> list[Guest]:
        """List every guest of a party in join order."""
        ...

    @abstractmethod
    async def list_by_party_and_status(self, party_id: str, status: GuestStatus) -> list[Guest]:
        """List a party's guests with the given status in join order."""
        ...

    @abstractmethod
    async def update_status(self, guest_id: str, status: GuestStatus) -> bool:
        """Set the guest status.

        Returns:
            True if a guest was updated.
        """
        ...

    @abstractmethod
    async def delete(self, guest_id: str) -> bool:
        """Delete a guest.

        Returns:
            True if a guest was deleted.
        """
        ...

    @abstractmethod
    async def exists_by_party_and_username(self, party_id: str, username: str) -> bool:
        """Check whether a username is already used within a party."""
        ...
