"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Caller identities, value types, messages and exceptions
- catalog/: Acts and event types
- parties/: Party lifecycle and code issuance
- guests/: Join requests and approval state
- voting/: Ballots, tallying and ranking
- users/: Admin profiles
"""

from vote_party.domain.shared import AdminCaller, AnonymousCaller, Caller, GuestCaller
from vote_party.domain.shared.exceptions import DomainError

__all__ = [
    "Caller",
    "AdminCaller",
    "GuestCaller",
    "AnonymousCaller",
    "DomainError",
]
