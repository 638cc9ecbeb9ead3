"""
Utilities module: Exceptions, validators.
"""

from shared.utils.exceptions import (
    AppException,
    InternalError,
    DatabaseError,
)
from shared.utils.validators import (
    escape_like_pattern,
    normalize_search_term,
)

__all__ = [
    # exceptions
    "AppException",
    "InternalError",
    "DatabaseError",
    # validators
    "escape_like_pattern",
    "normalize_search_term",
]
