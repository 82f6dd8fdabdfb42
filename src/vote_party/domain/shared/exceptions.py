"""Domain error hierarchy.

Every failure a use case can produce is a subclass of ``DomainError`` with a
stable ``code`` so the boundary layer can map it to a transport status.
"""

from __future__ import annotations

from vote_party.domain.shared.messages import ErrorMessages


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class NotFoundError(DomainError):
    """Raised when an entity is absent or not addressable by the caller.

    Deliberately reused for "exists, but not in this party" and "exists, but
    no longer pending" so callers cannot probe for other parties' records.
    """

    def __init__(self, entity_type: str, identifier: str, message: str | None = None) -> None:
        msg = message or ErrorMessages.ENTITY_NOT_FOUND.format(
            entity_type=entity_type, identifier=identifier
        )
        super().__init__(msg, code="NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier


class UnauthorizedError(DomainError):
    """Raised when an authenticated caller does not own the resource."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or ErrorMessages.UNAUTHORIZED, code="UNAUTHORIZED")


class DuplicateUsernameError(DomainError):
    """Raised when a username is already taken within a party."""

    def __init__(self, username: str) -> None:
        super().__init__(
            ErrorMessages.DUPLICATE_USERNAME.format(username=username),
            code="DUPLICATE_USERNAME",
        )
        self.username = username


class GuestNotApprovedError(DomainError):
    """Raised when a guest who is not approved for the party tries to vote."""

    def __init__(self, guest_id: str) -> None:
        super().__init__(ErrorMessages.GUEST_NOT_APPROVED, code="GUEST_NOT_APPROVED")
        self.guest_id = guest_id


class PartyClosedError(DomainError):
    """Raised when an operation requires an active party."""

    def __init__(self, party_id: str) -> None:
        super().__init__(ErrorMessages.PARTY_CLOSED, code="PARTY_CLOSED")
        self.party_id = party_id


class VoteAlreadyExistsError(DomainError):
    """Raised when a guest already has a vote for the party."""

    def __init__(self, guest_id: str, party_id: str) -> None:
        super().__init__(ErrorMessages.VOTE_ALREADY_EXISTS, code="VOTE_ALREADY_EXISTS")
        self.guest_id = guest_id
        self.party_id = party_id


class InvalidVotesError(DomainError):
    """Raised when a ballot has the wrong shape or references unknown acts."""

    def __init__(self, reason: str) -> None:
        super().__init__(ErrorMessages.INVALID_VOTES.format(reason=reason), code="INVALID_VOTES")
        self.reason = reason


class VotingNotEndedError(DomainError):
    """Raised when results are requested for a party that is still active."""

    def __init__(self, party_id: str) -> None:
        super().__init__(ErrorMessages.VOTING_NOT_ENDED, code="VOTING_NOT_ENDED")
        self.party_id = party_id


class InvalidEventTypeError(DomainError):
    def __init__(self, event_type: str) -> None:
        super().__init__(
            ErrorMessages.INVALID_EVENT_TYPE.format(event_type=event_type),
            code="INVALID_EVENT_TYPE",
        )
        self.event_type = event_type


class InvalidUsernameError(DomainError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason, code="INVALID_USERNAME")


class CodeGenerationExhaustedError(DomainError):
    """Raised when every party code attempt collided with an issued code."""

    def __init__(self, attempts: int) -> None:
        super().__init__(
            ErrorMessages.CODE_GENERATION_EXHAUSTED.format(attempts=attempts),
            code="CODE_GENERATION_EXHAUSTED",
        )
        self.attempts = attempts


class DuplicateEntityError(Exception):
    """Raised by a store when a write violates a uniqueness constraint.

    This is a store-contract signal, not a domain error: services translate it
    into the matching domain error.
    """

    def __init__(self, entity_type: str, constraint: str) -> None:
        super().__init__(f"{entity_type} violates unique constraint '{constraint}'")
        self.entity_type = entity_type
        self.constraint = constraint
