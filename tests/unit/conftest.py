"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from typing import Any

import pytest
import respx
from httpx import Response

from bookmeta.resolution.base import SourceConfig

OPENBD_GET_URL = "https://api.openbd.jp/v1/get"
GOOGLE_BOOKS_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Source Configuration Fixtures
# ============================================================================


@pytest.fixture
def source_config() -> SourceConfig:
    """Create a source config for testing."""
    return SourceConfig(
        api_key="test-api-key",
        timeout=5.0,
        enabled=True,
    )


@pytest.fixture
def source_config_no_key() -> SourceConfig:
    """Create a source config without API key."""
    return SourceConfig(
        api_key=None,
        timeout=5.0,
        enabled=True,
    )


@pytest.fixture
def source_config_disabled() -> SourceConfig:
    """Create a disabled source config."""
    return SourceConfig(enabled=False)


# ============================================================================
# Mock Response Helpers
# ============================================================================


def mock_json_response(data: Any, status_code: int = 200) -> Response:
    """Create a mock JSON response."""
    return Response(
        status_code=status_code,
        json=data,
        headers={"Content-Type": "application/json"},
    )


def mock_error_response(status_code: int, message: str = "Error") -> Response:
    """Create a mock error response."""
    return Response(
        status_code=status_code,
        json={"error": message},
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def mock_responses():
    """Provide helper functions for creating mock responses."""
    return {
        "json": mock_json_response,
        "error": mock_error_response,
    }


# ============================================================================
# Book API Response Fixtures
# ============================================================================


def openbd_record(
    isbn: str,
    title: str | None,
    author: str | None,
    *,
    cover: str | None = None,
    publisher: str | None = None,
    ccode: str | None = None,
    pages: str | None = None,
) -> dict[str, Any]:
    """Build one openBD record with optional ONIX subject and extent entries."""
    summary: dict[str, Any] = {"isbn": isbn}
    if title is not None:
        summary["title"] = title
    if author is not None:
        summary["author"] = author
    if cover is not None:
        summary["cover"] = cover
    if publisher is not None:
        summary["publisher"] = publisher

    detail: dict[str, Any] = {}
    if ccode is not None:
        detail["Subject"] = [
            {"SubjectSchemeIdentifier": "78", "SubjectCode": "913"},
            {"SubjectSchemeIdentifier": "29", "SubjectCode": ccode},
        ]
    if pages is not None:
        detail["Extent"] = [{"ExtentType": "00", "ExtentValue": pages}]

    return {"summary": summary, "onix": {"DescriptiveDetail": detail}}


def google_volume(
    title: str | None,
    authors: list[str] | None,
    *,
    identifiers: list[dict[str, str]] | None = None,
    image_links: dict[str, str] | None = None,
    page_count: int | None = None,
    publisher: str | None = None,
    volume_id: str = "vol-1",
) -> dict[str, Any]:
    """Build one Google Books volume item."""
    info: dict[str, Any] = {}
    if title is not None:
        info["title"] = title
    if authors is not None:
        info["authors"] = authors
    if identifiers is not None:
        info["industryIdentifiers"] = identifiers
    if image_links is not None:
        info["imageLinks"] = image_links
    if page_count is not None:
        info["pageCount"] = page_count
    if publisher is not None:
        info["publisher"] = publisher
    return {"kind": "books#volume", "id": volume_id, "volumeInfo": info}


@pytest.fixture
def openbd_isbn_response() -> list[dict[str, Any]]:
    """Sample openBD response for a bunko with page count."""
    return [
        openbd_record(
            "9784041061907",
            "君の膵臓をたべたい",
            "住野よる",
            cover="https://cover.openbd.jp/9784041061907.jpg",
            publisher="KADOKAWA",
            ccode="C0193",
            pages="334",
        )
    ]


@pytest.fixture
def google_books_isbn_response() -> dict[str, Any]:
    """Sample Google Books response for an ISBN lookup."""
    return {
        "kind": "books#volumes",
        "totalItems": 1,
        "items": [
            google_volume(
                "Effective Java",
                ["Joshua Bloch"],
                identifiers=[
                    {"type": "ISBN_10", "identifier": "4621303252"},
                    {"type": "ISBN_13", "identifier": "9784621303252"},
                ],
                image_links={
                    "smallThumbnail": "http://books.google.com/small.jpg",
                    "thumbnail": "http://books.google.com/thumb.jpg",
                },
                page_count=412,
                publisher="丸善出版",
                volume_id="abcDEF123",
            )
        ],
    }


@pytest.fixture
def make_openbd_record():
    """Factory fixture building openBD records."""
    return openbd_record


@pytest.fixture
def make_google_volume():
    """Factory fixture building Google Books volume items."""
    return google_volume
