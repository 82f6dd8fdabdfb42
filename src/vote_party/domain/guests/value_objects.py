"""Value objects for the guest bounded context."""

from __future__ import annotations

from enum import StrEnum


class GuestStatus(StrEnum):
    """Approval state of a guest.

    PENDING -> APPROVED or PENDING -> REJECTED; REJECTED is terminal.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_decided(self) -> bool:
        return self is not GuestStatus.PENDING
