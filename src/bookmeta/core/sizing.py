"""Physical size classification from C-codes and title/publisher keywords."""

from __future__ import annotations

from .normalization import join_text, normalize_text
from .types import SizeClass

# Third character of a C-code is the form code (形態).
_FORM_CODE_SIZES: dict[str, SizeClass] = {
    "1": SizeClass.S,  # bunko
    "2": SizeClass.M,  # shinsho
    "9": SizeClass.M,  # comics
    "0": SizeClass.L,  # tankobon
    "3": SizeClass.L,  # complete works, series
    "4": SizeClass.XL,  # mook
    "5": SizeClass.XL,  # encyclopedias, dictionaries
    "6": SizeClass.XL,  # picture books, illustrated references
    "7": SizeClass.XL,  # children's picture books
}

POCKET_KEYWORDS: tuple[str, ...] = (
    "文庫",
    "ポケット版",
    "ポケットブック",
    "a6判",
    "bunko",
    "pocket",
)

FORMAT_M_KEYWORDS: tuple[str, ...] = (
    "新書",
    "ノベルス",
    "選書",
    "ブルーバックス",
    "単行本",
    "ハードカバー",
    "四六判",
    "b6判",
    "shinsho",
    "tankobon",
    "hardcover",
)

COMIC_KEYWORDS: tuple[str, ...] = (
    "コミック",
    "漫画",
    "マンガ",
    "comic",
    "manga",
)

LARGE_FORMAT_KEYWORDS: tuple[str, ...] = (
    "技術",
    "リファレンス",
    "オライリー",
    "o'reilly",
    "事典",
    "辞典",
    "図鑑",
    "百科",
    "画集",
    "写真集",
    "作品集",
    "ムック",
    "大型本",
    "a4判",
    "b5判",
    "reference",
    "technical",
    "encyclopedi",
    "art book",
    "artbook",
    "oversized",
)

# First match wins. Pocket terms outrank large-format terms when both appear.
_KEYWORD_RULES: tuple[tuple[tuple[str, ...], SizeClass], ...] = tuple(
    (tuple(normalize_text(k) for k in keywords), size)
    for keywords, size in (
        (POCKET_KEYWORDS, SizeClass.S),
        (FORMAT_M_KEYWORDS, SizeClass.M),
        (COMIC_KEYWORDS, SizeClass.M),
        (LARGE_FORMAT_KEYWORDS, SizeClass.XL),
    )
)


def classify_by_code(code: str | None) -> SizeClass:
    """Map a C-code such as ``C0197`` to a size class via its form code."""
    if code is None or len(code) < 3:
        return SizeClass.UNKNOWN
    return _FORM_CODE_SIZES.get(code[2], SizeClass.UNKNOWN)


def classify_by_text(title: str | None, secondary: str | None) -> SizeClass:
    """
    Guess a size class from free text.

    Args:
        title: Book title
        secondary: Author and/or publisher text

    Returns:
        Size class of the first matching keyword group, UNKNOWN if none match
    """
    target = normalize_text(join_text(title, secondary))
    if not target:
        return SizeClass.UNKNOWN

    for keywords, size in _KEYWORD_RULES:
        if any(k in target for k in keywords):
            return size

    return SizeClass.UNKNOWN
