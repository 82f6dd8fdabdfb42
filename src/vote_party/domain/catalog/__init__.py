"""
Act Catalog Bounded Context

Fixed reference data: the acts competing in each event.
"""

from vote_party.domain.catalog.entities import Act
from vote_party.domain.catalog.repository import ActCatalog
from vote_party.domain.catalog.value_objects import EventType

__all__ = [
    "Act",
    "EventType",
    "ActCatalog",
]
