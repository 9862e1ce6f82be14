"""Domain models for book records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import SizeClass, SourceName

# Placeholders for missing text fields. Cover URL and page count stay None instead.
UNKNOWN_TITLE = "タイトル不明"
UNKNOWN_AUTHOR = "著者不明"


def or_placeholder(value: str | None, placeholder: str) -> str:
    """Replace an absent value with the placeholder; empty strings are kept."""
    return placeholder if value is None else value


class Candidate(BaseModel):
    """Source-specific book data before size classification."""

    model_config = ConfigDict(frozen=True)

    isbn: str = Field(..., description="ISBN reported by the source")
    title: str = Field(default=UNKNOWN_TITLE, description="Title of the book")
    author: str = Field(default=UNKNOWN_AUTHOR, description="Author display string")
    publisher: str | None = Field(default=None, description="Publisher name")
    cover_image_url: str | None = Field(default=None, description="Cover image URL")
    page_count: int | None = Field(default=None, description="Number of pages")
    classification_code: str | None = Field(
        default=None, description="C-code whose 3rd character denotes physical form"
    )
    source: SourceName = Field(..., description="Source that produced the candidate")


class Book(BaseModel):
    """Canonical book record returned by a resolution."""

    model_config = ConfigDict(frozen=True)

    isbn: str = Field(..., description="ISBN of the book")
    title: str = Field(..., description="Title of the book")
    author: str = Field(..., description="Author display string")
    cover_image_url: str | None = Field(default=None, description="Cover image URL")
    page_count: int | None = Field(default=None, description="Number of pages")
    size_class: SizeClass = Field(default=SizeClass.UNKNOWN, description="Physical size bucket")
    source: SourceName = Field(..., description="Source the record was resolved from")
