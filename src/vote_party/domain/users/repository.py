"""
User Domain Repository Interfaces
"""

from abc import ABC, abstractmethod

from vote_party.domain.users.entities import User


class UserRepository(ABC):
    """Abstract repository for admin profiles."""

    @abstractmethod
    async def upsert(self, user: User) -> None:
        """Create the profile or overwrite the existing one."""
        ...

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        """Retrieve a profile by user id, or None if absent."""
        ...
