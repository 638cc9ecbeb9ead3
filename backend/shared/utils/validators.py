"""
Shared validators for input sanitization.
"""

from shared.config.constants import Limits


def escape_like_pattern(value: str) -> str:
    """
    Escape special characters in LIKE patterns.

    SQL LIKE uses % and _ as wildcards. Escaping them makes every user
    supplied text match literally.
    """
    if not value:
        return value

    # Escape the escape character first, then the wildcards
    value = value.replace("\\", "\\\\")
    value = value.replace("%", "\\%")
    value = value.replace("_", "\\_")
    return value


def normalize_search_term(value: str | None) -> str:
    """Strip and truncate free-text search input. ``None`` becomes an empty string."""
    if not value:
        return ""
    return value.strip()[: Limits.MAX_SEARCH_TERM_LENGTH]
