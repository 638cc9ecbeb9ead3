"""
Centralized constants for the backend application.
Avoid magic strings and repeated constants.

Usage:
    from shared.config.constants import Messages, Limits

    controller.not_found("id", Messages.RECORD_NOT_FOUND)
"""

from typing import Final


# =============================================================================
# Notification messages shared by every CRUD endpoint
# =============================================================================


class Messages:
    """Fixed notification messages of the CRUD error contract."""

    RECORD_NOT_FOUND: Final[str] = "record not found"
    IDS_DO_NOT_MATCH: Final[str] = "ids do not match"
    RECORD_ALREADY_EXISTS: Final[str] = "record already exists"


class Properties:
    """Notification property names used outside of entity fields."""

    ID: Final[str] = "id"


# =============================================================================
# Limits
# =============================================================================


class Limits:
    """Input size limits."""

    MAX_SEARCH_TERM_LENGTH: Final[int] = 100
    MAX_NAME_LENGTH: Final[int] = 120
    MAX_PHONE_LENGTH: Final[int] = 30
    MAX_DESCRIPTION_LENGTH: Final[int] = 1000
    # Largest value of a 32-bit INTEGER column
    MAX_INT: Final[int] = 2**31 - 1
