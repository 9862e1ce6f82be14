"""openBD resolver implementation."""

from __future__ import annotations

from typing import Any, ClassVar

from bookmeta.core.exceptions import SourceError
from bookmeta.core.models import UNKNOWN_AUTHOR, UNKNOWN_TITLE, Candidate, or_placeholder
from bookmeta.core.types import SourceName
from bookmeta.resolution.base import AbstractSource, SourceConfig

# ONIX SubjectSchemeIdentifier for the Japanese C-code
CCODE_SCHEME_ID = "29"
# ONIX ExtentType for the main content page count
PAGE_COUNT_EXTENT_TYPE = "00"


class OpenBDSource(AbstractSource):
    """
    openBD API source (primary book source).

    API Documentation: https://openbd.jp/

    Free, no API key. Returns ONIX-based records for Japanese publications,
    including the C-code used for size classification. No keyword search.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.OPENBD
    BASE_URL: ClassVar[str] = "https://api.openbd.jp/v1"
    SUPPORTS_KEYWORD_SEARCH: ClassVar[bool] = False

    def __init__(self, config: SourceConfig | None = None) -> None:
        super().__init__(config)

    @property
    def priority(self) -> int:
        return 10  # Primary source (highest priority)

    async def _fetch_by_isbn(self, isbn: str) -> Candidate | None:
        data = await self._get_json("/get", params={"isbn": isbn})

        # openBD answers [null] (or []) for unknown ISBNs
        if not isinstance(data, list):
            raise SourceError(
                message=f"Expected a JSON array, got {type(data).__name__}",
                source=self.source_name.value,
            )
        if not data or data[0] is None:
            return None

        return self._parse_book(data[0])

    def _parse_book(self, data: dict[str, Any]) -> Candidate | None:
        """Parse an openBD record into a Candidate."""
        summary = data.get("summary")
        if not summary:
            return None

        isbn = summary.get("isbn")
        if not isbn:
            return None

        descriptive_detail = (data.get("onix") or {}).get("DescriptiveDetail") or {}

        # Blank cover strings mean no cover
        cover_url = summary.get("cover") or None
        if cover_url is not None and not cover_url.strip():
            cover_url = None

        return Candidate(
            isbn=isbn,
            title=or_placeholder(summary.get("title"), UNKNOWN_TITLE),
            author=or_placeholder(summary.get("author"), UNKNOWN_AUTHOR),
            publisher=summary.get("publisher") or None,
            cover_image_url=cover_url,
            page_count=self._parse_page_count(descriptive_detail.get("Extent") or []),
            classification_code=self._parse_ccode(descriptive_detail.get("Subject") or []),
            source=self.source_name,
        )

    @staticmethod
    def _parse_ccode(subjects: list[dict[str, Any]]) -> str | None:
        """Return the SubjectCode of the first C-code subject entry."""
        for subject in subjects:
            if subject.get("SubjectSchemeIdentifier") == CCODE_SCHEME_ID:
                return subject.get("SubjectCode")
        return None

    @staticmethod
    def _parse_page_count(extents: list[dict[str, Any]]) -> int | None:
        """Return the page count extent as int, None if missing or non-numeric."""
        for extent in extents:
            if extent.get("ExtentType") == PAGE_COUNT_EXTENT_TYPE:
                value = extent.get("ExtentValue")
                try:
                    return int(value)
                except (TypeError, ValueError):
                    return None
        return None
