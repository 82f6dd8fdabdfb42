"""Centralized constants for domain rules, database schema, and configuration keys."""

from __future__ import annotations


class PartyCodeConstants:
    """Party code format and generation limits."""

    # 0/O/1/I/L are left out so codes survive being read aloud or hand-copied.
    ALPHABET = "ABCDEFGHJKMNPQRSTUVWXYZ23456789"
    LENGTH = 6
    MAX_ATTEMPTS = 10


class VotingConstants:
    """Eurovision-style scoring."""

    POINT_VALUES: tuple[int, ...] = (12, 10, 8, 7, 6, 5, 4, 3, 2, 1)


class UsernameConstants:
    """Profile username limits."""

    MIN_LENGTH = 3
    MAX_LENGTH = 30
    PATTERN = r"^[a-zA-Z0-9_]+$"


class TableNames:
    """Database table names."""

    PARTIES = "parties"
    ISSUED_PARTY_CODES = "issued_party_codes"
    GUESTS = "guests"
    VOTES = "votes"
    USERS = "users"


class SQLPragmas:
    """SQLite PRAGMA statements."""

    JOURNAL_MODE_WAL = "PRAGMA journal_mode=WAL"
    FOREIGN_KEYS_ON = "PRAGMA foreign_keys=ON"
    BUSY_TIMEOUT = "PRAGMA busy_timeout={timeout}"

