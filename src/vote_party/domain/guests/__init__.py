"""
Guest Bounded Context

Join requests and the admin approval workflow.
"""

from vote_party.domain.guests.entities import Guest
from vote_party.domain.guests.repository import GuestRepository
from vote_party.domain.guests.value_objects import GuestStatus

__all__ = [
    "Guest",
    "GuestStatus",
    "GuestRepository",
]
