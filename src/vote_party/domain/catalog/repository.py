"""
Act Catalog Interface

Read-only source of the acts competing in each event.
"""

from abc import ABC, abstractmethod

from vote_party.domain.catalog.entities import Act
from vote_party.domain.catalog.value_objects import EventType


class ActCatalog(ABC):
    """Abstract read-only act catalog."""

    @abstractmethod
    async def list_acts(self, event_type: EventType | None = None) -> list[Act]:
        """List acts ordered by running order.

        Args:
            event_type: Restrict to one event. ``None`` returns every act.

        Returns:
            The matching acts (possibly empty).
        """
        ...
