"""
User Bounded Context

Profiles of authenticated admins.
"""

from vote_party.domain.users.entities import User
from vote_party.domain.users.repository import UserRepository

__all__ = [
    "User",
    "UserRepository",
]
