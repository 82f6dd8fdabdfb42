"""
Party Domain Services

Party code issuance rules.
"""

import secrets

from vote_party.domain.shared.constants import PartyCodeConstants


class PartyDomainService:
    """Domain service for party code rules.

    Codes are public, human-shareable identifiers, so they are drawn from an
    alphabet without look-alike glyphs using a cryptographic RNG.
    """

    ALPHABET = PartyCodeConstants.ALPHABET
    CODE_LENGTH = PartyCodeConstants.LENGTH
    MAX_ATTEMPTS = PartyCodeConstants.MAX_ATTEMPTS

    @classmethod
    def generate_code(cls) -> str:
        """Draw a random party code."""
        return "".join(secrets.choice(cls.ALPHABET) for _ in range(cls.CODE_LENGTH))

    @classmethod
    def is_valid_code(cls, code: str) -> bool:
        """Check that a code has the right length and only uses the alphabet."""
        return len(code) == cls.CODE_LENGTH and all(ch in cls.ALPHABET for ch in code)

    @classmethod
    def normalize_code(cls, code: str) -> str:
        """Normalize user-typed codes (surrounding whitespace, lower case)."""
        return code.strip().upper()
