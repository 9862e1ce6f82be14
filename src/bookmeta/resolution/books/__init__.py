"""Book sources for fetching book metadata."""

from bookmeta.resolution.books.google_books import GoogleBooksSource
from bookmeta.resolution.books.openbd import OpenBDSource

__all__ = [
    "GoogleBooksSource",
    "OpenBDSource",
]
