"""Text normalization utilities for keyword matching."""

import re
import unicodedata


def normalize_text(text: str) -> str:
    """
    Normalize text for substring matching.

    Applies NFKC so full-width Latin and half-width kana compare equal to
    their standard forms, case-folds, and collapses runs of whitespace.

    Args:
        text: Input text to normalize

    Returns:
        Normalized string suitable for comparison
    """
    if not text:
        return ""

    result = unicodedata.normalize("NFKC", text)
    result = result.casefold()
    return re.sub(r"\s+", " ", result).strip()


def join_text(*parts: str | None) -> str:
    """Join the non-empty parts with single spaces."""
    return " ".join(p for p in parts if p)
