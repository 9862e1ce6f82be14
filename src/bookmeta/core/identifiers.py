"""ISBN-13 validation and value object."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import ValidationError

ISBN13_PREFIXES: tuple[str, ...] = ("978", "979")
ISBN13_LENGTH = 13

_ASCII_DIGITS = frozenset("0123456789")


def isbn13_check_digit(first12: str) -> int:
    """Compute the ISBN-13 check digit for the first twelve digits."""
    total = sum(int(c) * (1 if i % 2 == 0 else 3) for i, c in enumerate(first12))
    return (10 - (total % 10)) % 10


def is_valid_isbn13(value: str) -> bool:
    """
    Check whether a scanned or typed string is a valid ISBN-13.

    The string must be exactly 13 ASCII digits, start with 978 or 979 and
    carry a matching check digit. Never raises.
    """
    if not isinstance(value, str) or len(value) != ISBN13_LENGTH:
        return False
    if not set(value) <= _ASCII_DIGITS:
        return False
    if not value.startswith(ISBN13_PREFIXES):
        return False
    return isbn13_check_digit(value[:12]) == int(value[12])


class ISBN13(BaseModel):
    """Validated ISBN-13. Immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Thirteen digits, no separators")

    @model_validator(mode="after")
    def validate_isbn(self) -> Self:
        if not is_valid_isbn13(self.value):
            raise ValueError(f"Invalid ISBN-13: {self.value!r}")
        return self

    @classmethod
    def parse(cls, value: str) -> ISBN13:
        """Build an ISBN13, raising ValidationError for anything invalid."""
        if not is_valid_isbn13(value):
            raise ValidationError(
                f"Invalid ISBN-13: {value!r}",
                details={"value": value},
            )
        return cls(value=value)

    @property
    def prefix(self) -> str:
        return self.value[:3]

    @property
    def check_digit(self) -> int:
        return int(self.value[12])

    def __str__(self) -> str:
        return self.value
