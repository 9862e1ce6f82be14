"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from bookmeta.config import BookmetaSettings
from bookmeta.core.models import Book, Candidate
from bookmeta.core.types import SizeClass, SourceName


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_candidate() -> Candidate:
    """Create a sample openBD candidate carrying a bunko C-code."""
    return Candidate(
        isbn="9784041061907",
        title="君の膵臓をたべたい",
        author="住野よる",
        publisher="KADOKAWA",
        cover_image_url="https://cover.openbd.jp/9784041061907.jpg",
        page_count=334,
        classification_code="C0193",
        source=SourceName.OPENBD,
    )


@pytest.fixture
def sample_candidate_minimal() -> Candidate:
    """Create a candidate with only required fields."""
    return Candidate(isbn="9784873119038", source=SourceName.GOOGLE_BOOKS)


@pytest.fixture
def sample_book() -> Book:
    """Create a sample canonical book."""
    return Book(
        isbn="9784041061907",
        title="君の膵臓をたべたい",
        author="住野よる",
        cover_image_url="https://cover.openbd.jp/9784041061907.jpg",
        page_count=334,
        size_class=SizeClass.S,
        source=SourceName.OPENBD,
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> BookmetaSettings:
    """Create settings for tests, independent of the environment."""
    return BookmetaSettings(
        _env_file=None,
        google_books_api_key=None,
        request_timeout=5.0,
        total_timeout=10.0,
        keyword_max_results=10,
        validate_isbn=False,
    )


@pytest.fixture
def mock_settings_strict(mock_settings: BookmetaSettings) -> BookmetaSettings:
    """Settings that reject invalid ISBNs before any request."""
    return mock_settings.model_copy(update={"validate_isbn": True})


# ============================================================================
# Identifier Fixtures
# ============================================================================


@pytest.fixture
def valid_isbns() -> list[str]:
    """ISBN-13 values with correct prefix and check digit."""
    return [
        "9784873119038",  # リーダブルコード
        "9784873119045",
        "9784873118222",
        "9784295013341",
        "9784048930598",
        "9791234567896",  # 979 prefix
    ]


@pytest.fixture
def invalid_isbns() -> list[str]:
    """Values that must fail ISBN-13 validation."""
    return [
        "9784873119039",  # bad check digit
        "1234567890123",  # bad prefix
        "978487311903",  # 12 digits
        "97848731190384",  # 14 digits
        "",
        "978-4-87311-903-8",  # hyphens
        "978487311903A",  # letter
        "978 4873119038",  # space
    ]
