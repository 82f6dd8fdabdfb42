"""
Shared Domain Kernel

Contains identities, value types, and exceptions shared across all bounded contexts.
"""

from vote_party.domain.shared.exceptions import (
    CodeGenerationExhaustedError,
    DomainError,
    DuplicateEntityError,
    DuplicateUsernameError,
    GuestNotApprovedError,
    InvalidEventTypeError,
    InvalidUsernameError,
    InvalidVotesError,
    NotFoundError,
    PartyClosedError,
    UnauthorizedError,
    ValidationError,
    VoteAlreadyExistsError,
    VotingNotEndedError,
)
from vote_party.domain.shared.identity import (
    ANONYMOUS,
    AdminCaller,
    AnonymousCaller,
    Caller,
    GuestCaller,
)

__all__ = [
    # Identity
    "Caller",
    "AdminCaller",
    "GuestCaller",
    "AnonymousCaller",
    "ANONYMOUS",
    # Errors
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "DuplicateUsernameError",
    "GuestNotApprovedError",
    "PartyClosedError",
    "VoteAlreadyExistsError",
    "InvalidVotesError",
    "VotingNotEndedError",
    "InvalidEventTypeError",
    "InvalidUsernameError",
    "CodeGenerationExhaustedError",
    "DuplicateEntityError",
]
