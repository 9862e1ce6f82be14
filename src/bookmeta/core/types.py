"""Core enums and type definitions."""

from enum import StrEnum


class SourceName(StrEnum):
    """Known bibliographic sources."""

    OPENBD = "openbd"
    GOOGLE_BOOKS = "google_books"


class LookupStatus(StrEnum):
    """Verdict of a single source lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


class SizeClass(StrEnum):
    """Physical size bucket of a book."""

    S = "S"  # bunko, pocket formats
    M = "M"  # shinsho, B6, comics
    L = "L"  # tankobon, A5
    XL = "XL"  # mooks, encyclopedias, picture books, A4 and up
    UNKNOWN = "UNKNOWN"
