"""Bookmeta - ISBN to canonical book record resolution with size classification."""

from bookmeta.client import BookmetaClient, resolve_book
from bookmeta.core.identifiers import ISBN13, is_valid_isbn13
from bookmeta.core.models import Book, Candidate
from bookmeta.core.sizing import classify_by_code, classify_by_text
from bookmeta.core.types import LookupStatus, SizeClass, SourceName
from bookmeta.resolution.chain import FallbackConfig, ResolutionOutcome

__version__ = "0.1.0"
__all__ = [
    # Client
    "BookmetaClient",
    "resolve_book",
    # Types
    "LookupStatus",
    "SizeClass",
    "SourceName",
    # Models
    "Book",
    "Candidate",
    # Identifiers
    "ISBN13",
    "is_valid_isbn13",
    # Sizing
    "classify_by_code",
    "classify_by_text",
    # Results
    "FallbackConfig",
    "ResolutionOutcome",
    # Version
    "__version__",
]
