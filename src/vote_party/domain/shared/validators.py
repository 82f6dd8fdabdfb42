"""Shared validation helpers for domain models.

Each helper raises ``ValueError`` so it can back a Pydantic validator as well
as be called directly from a service.
"""

import re

from vote_party.domain.shared.constants import UsernameConstants
from vote_party.domain.shared.messages import ErrorMessages

_USERNAME_RE = re.compile(UsernameConstants.PATTERN)


def validate_non_empty_string(value: str, field_name: str = "value") -> str:
    """Validate that a string is not empty or whitespace-only.

    Raises:
        ValueError: If the string is empty or whitespace-only.
    """
    if not value or not value.strip():
        raise ValueError(ErrorMessages.FIELD_CANNOT_BE_EMPTY.format(field_name=field_name))
    return value


def validate_profile_username(value: str) -> str:
    """Validate a profile username: 3-30 characters of letters, digits, underscore.

    Guest usernames inside a party are only required to be non-blank; this
    stricter rule applies to admin profiles.

    Raises:
        ValueError: With a message naming the violated rule.
    """
    if not UsernameConstants.MIN_LENGTH <= len(value) <= UsernameConstants.MAX_LENGTH:
        raise ValueError(
            ErrorMessages.USERNAME_LENGTH.format(
                min=UsernameConstants.MIN_LENGTH, max=UsernameConstants.MAX_LENGTH
            )
        )
    if not _USERNAME_RE.fullmatch(value):
        raise ValueError(ErrorMessages.USERNAME_CHARSET)
    return value
