"""Google Books resolver implementation."""

from __future__ import annotations

from typing import Any, ClassVar

from bookmeta.core.models import UNKNOWN_AUTHOR, UNKNOWN_TITLE, Candidate, or_placeholder
from bookmeta.core.types import SourceName
from bookmeta.resolution.base import AbstractSource, SourceConfig

# industryIdentifiers types in order of preference
ISBN_IDENTIFIER_TYPES: tuple[str, ...] = ("ISBN_13", "ISBN_10")


class GoogleBooksSource(AbstractSource):
    """
    Google Books API source (identifier and keyword fallback).

    API Documentation: https://developers.google.com/books/docs/v1/using

    Works without API key but rate limits apply.
    With API key, higher quotas are available.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.GOOGLE_BOOKS
    BASE_URL: ClassVar[str] = "https://www.googleapis.com/books/v1"
    SUPPORTS_KEYWORD_SEARCH: ClassVar[bool] = True

    def __init__(self, config: SourceConfig | None = None) -> None:
        super().__init__(config)
        # API key is optional for Google Books
        self._api_key = config.api_key if config else None

    @property
    def priority(self) -> int:
        return 50  # Fallback source

    def _params(self, **params: Any) -> dict[str, Any]:
        if self._api_key:
            params["key"] = self._api_key
        return params

    async def _fetch_by_isbn(self, isbn: str) -> Candidate | None:
        data = await self._get_json("/volumes", params=self._params(q=f"isbn:{isbn}"))

        items = data.get("items") or []
        if not items:
            return None

        return self._parse_volume(items[0])

    async def _search(self, text: str, max_results: int) -> list[Candidate]:
        data = await self._get_json(
            "/volumes",
            params=self._params(q=text, maxResults=max_results),
        )

        items = data.get("items") or []
        records = [self._parse_volume(item) for item in items]
        return [r for r in records if r is not None]

    def _parse_volume(self, data: dict[str, Any]) -> Candidate | None:
        """Parse a Google Books volume into a Candidate."""
        if not data:
            return None

        volume_info = data.get("volumeInfo")
        if not volume_info:
            return None

        isbn = self._pick_isbn(volume_info.get("industryIdentifiers") or [])
        if not isbn:
            return None

        # An absent list gets the placeholder; an empty one joins to ""
        authors = volume_info.get("authors")

        # Prefer the regular thumbnail over the small one
        image_links = volume_info.get("imageLinks") or {}
        cover_url = image_links.get("thumbnail") or image_links.get("smallThumbnail") or None

        return Candidate(
            isbn=isbn,
            title=or_placeholder(volume_info.get("title"), UNKNOWN_TITLE),
            author=UNKNOWN_AUTHOR if authors is None else ", ".join(authors),
            publisher=volume_info.get("publisher") or None,
            cover_image_url=cover_url,
            page_count=volume_info.get("pageCount"),
            source=self.source_name,
        )

    @staticmethod
    def _pick_isbn(identifiers: list[dict[str, Any]]) -> str | None:
        """Return the ISBN-13 identifier, else the ISBN-10 one."""
        for ident_type in ISBN_IDENTIFIER_TYPES:
            for ident in identifiers:
                if ident.get("type") == ident_type and ident.get("identifier"):
                    return ident["identifier"]
        return None
