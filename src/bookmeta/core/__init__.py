"""Core types, models, and utilities."""

from .exceptions import (
    BookmetaError,
    ResolutionError,
    SourceError,
    ValidationError,
)
from .identifiers import ISBN13, is_valid_isbn13, isbn13_check_digit
from .models import UNKNOWN_AUTHOR, UNKNOWN_TITLE, Book, Candidate, or_placeholder
from .normalization import join_text, normalize_text
from .sizing import classify_by_code, classify_by_text
from .types import LookupStatus, SizeClass, SourceName

__all__ = [
    # Types
    "LookupStatus",
    "SizeClass",
    "SourceName",
    # Identifiers
    "ISBN13",
    "is_valid_isbn13",
    "isbn13_check_digit",
    # Models
    "Book",
    "Candidate",
    "UNKNOWN_AUTHOR",
    "UNKNOWN_TITLE",
    "or_placeholder",
    # Normalization
    "join_text",
    "normalize_text",
    # Sizing
    "classify_by_code",
    "classify_by_text",
    # Exceptions
    "BookmetaError",
    "ResolutionError",
    "SourceError",
    "ValidationError",
]
