"""Centralized message constants for error messages, validation, and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Lookup / authorization
    ENTITY_NOT_FOUND = "{entity_type} '{identifier}' not found"
    UNAUTHORIZED = "Caller is not allowed to access this party"
    ADMIN_ID_REQUIRED = "Admin id cannot be empty"

    # Party
    EMPTY_PARTY_NAME = "Party name cannot be empty"
    INVALID_EVENT_TYPE = "Invalid event type: {event_type}"
    CODE_GENERATION_EXHAUSTED = "Failed to generate a unique party code after {attempts} attempts"
    PARTY_CLOSED = "Party is not active"

    # Guest
    EMPTY_USERNAME = "Username cannot be empty"
    DUPLICATE_USERNAME = "Username '{username}' is already taken in this party"
    GUEST_NOT_PENDING = "Guest is not pending (current status: {status})"
    GUEST_NOT_APPROVED = "Guest is not approved for this party"

    # Voting
    VOTE_ALREADY_EXISTS = "A vote already exists for this guest"
    INVALID_VOTES = "Invalid votes: {reason}"
    WRONG_VOTE_COUNT = "exactly {expected} votes required, got {actual}"
    MISSING_POINT_VALUE = "missing vote for point value {points}"
    EMPTY_ACT_ID = "act id is required for points {points}"
    DUPLICATE_ACT_ID = "duplicate act id '{act_id}'"
    UNKNOWN_ACT_ID = "act '{act_id}' is not part of this event"
    VOTING_NOT_ENDED = "Voting has not ended for this party"

    # User profile
    USERNAME_LENGTH = "Username must be between {min} and {max} characters"
    USERNAME_CHARSET = "Username must contain only alphanumeric characters and underscores"

    # Act catalog
    ACTS_FILE_UNREADABLE = "Could not read acts file {path}"

    # Field Validation Errors
    FIELD_CANNOT_BE_EMPTY = "{field_name} cannot be empty"

    # Time/Date Validation Errors
    TIMEZONE_REQUIRED_UTC_DATETIME = "UtcDateTime requires a timezone-aware datetime"

    # Settings
    INVALID_DATABASE_URL = "Database URL must start with sqlite://"
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class LogTemplates:
    """Log message templates.

    Pass values as logger arguments rather than pre-formatting them.
    """

    # Startup
    APP_STARTING = "Starting vote party core (environment: %s)"
    APP_READY = "Vote party core ready"
    APP_FATAL_ERROR = "Fatal error during startup: %r"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"

    # Database Lifecycle
    DATABASE_INITIALIZED = "Database initialized at %s"
    DATABASE_CLOSED = "Database manager closed"

    # Catalog
    CATALOG_LOADED = "Loaded %d acts from %s"
    CATALOG_EVENT_SIZE = "Event %s has %d acts"

    # Parties
    PARTY_CREATED = "Party %s created with code %s by admin %s"
    PARTY_CODE_COLLISION = "Party code %s already issued (attempt %d/%d)"
    PARTY_DELETED = "Party %s deleted by admin %s"
    PARTY_CLOSED = "Voting closed for party %s"

    # Guests
    GUEST_JOINED = "Guest %s joined party %s as '%s'"
    GUEST_APPROVED = "Guest %s approved in party %s"
    GUEST_REJECTED = "Guest %s rejected in party %s"
    GUEST_REMOVED = "Guest %s removed from party %s"

    # Votes
    VOTE_SUBMITTED = "Vote %s submitted by guest %s in party %s"
    VOTE_UPDATED = "Vote %s updated by guest %s in party %s"
    VOTE_REJECTED = "Vote from guest %s in party %s rejected: %s"
    RESULTS_COMPUTED = "Results for party %s computed from %d votes"

    # Users
    PROFILE_UPSERTED = "Profile upserted for user %s"

    # Rejections
    OPERATION_DENIED = "%s denied for party %s: %s"
