"""Domain models (Pydantic v2).

These models describe a national number and what we learn from inspecting
one. They hold no I/O: parsing text, reading files and printing belong to the
layers above.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from core.domain.category import Category, classify, digit_at
from core.domain.checksum import MAX_NUMBER, NUMBER_LENGTH, calculate_checksum, is_valid_checksum


class CheckDigits(BaseModel):
    """The two trailing check digits of a national number."""

    model_config = ConfigDict(frozen=True)

    k1: int = Field(..., ge=0, le=9, description="First check digit.")
    k2: int = Field(..., ge=0, le=9, description="Second check digit.")

    @classmethod
    def from_value(cls, value: int) -> "CheckDigits":
        """Split a two-digit checksum (`k1 * 10 + k2`) into its digits."""

        return cls(k1=value // 10, k2=value % 10)

    @property
    def value(self) -> int:
        return self.k1 * 10 + self.k2

    def __str__(self) -> str:
        return f"{self.k1}{self.k2}"


class NationalNumber(BaseModel):
    """An 11-digit national identity number.

    Leading zeros are significant, so the number is kept as an integer and
    always rendered zero-padded. Construction goes through `from_string` or
    `from_int`, which return None for input that cannot be a number at all.
    Whether the checksum holds is a separate question (`is_valid_checksum`).
    """

    model_config = ConfigDict(frozen=True)

    value: int = Field(
        ...,
        ge=0,
        le=MAX_NUMBER,
        strict=True,
        description="Numeric value; 11 digits when zero-padded.",
    )

    @classmethod
    def from_string(cls, text: str) -> "NationalNumber | None":
        """Parse exactly 11 ASCII digits. Anything else gives None."""

        if len(text) != NUMBER_LENGTH or not (text.isascii() and text.isdigit()):
            return None
        return cls(value=int(text))

    @classmethod
    def from_int(cls, value: int) -> "NationalNumber | None":
        """Wrap an integer in 0..99 999 999 999. Anything else gives None."""

        try:
            return cls(value=value)
        except ValidationError:
            return None

    def digit(self, position: int) -> int:
        """Digit at 0-based `position`; IndexError outside 0..10."""

        return digit_at(self.value, position)

    @property
    def leading(self) -> int:
        """The first nine digits as an integer."""

        return self.value // 100

    def checksum(self) -> CheckDigits | None:
        """Check digits computed from the leading nine digits, if they exist."""

        computed = calculate_checksum(self.value)
        if computed is None:
            return None
        return CheckDigits.from_value(computed)

    def is_valid_checksum(self) -> bool:
        return is_valid_checksum(self.value)

    def category(self) -> Category:
        return classify(self.value)

    def __str__(self) -> str:
        return f"{self.value:0{NUMBER_LENGTH}d}"


class NumberReport(BaseModel):
    """Result of inspecting one raw input.

    Malformed input still produces a report, with `well_formed=False` and the
    derived fields left empty, so batches keep one entry per input line.
    """

    raw: str = Field(..., description="Input exactly as received.")
    number: str | None = Field(
        default=None,
        min_length=NUMBER_LENGTH,
        max_length=NUMBER_LENGTH,
        description="Zero-padded number, when the input parsed.",
    )
    well_formed: bool = Field(
        default=False,
        description="Input is exactly 11 decimal digits.",
    )
    checksum_valid: bool = Field(
        default=False,
        description="Trailing digits match the computed check digits.",
    )
    expected_check_digits: str | None = Field(
        default=None,
        description="Check digits computed from the leading nine digits (None if none exist).",
    )
    category: Category | None = Field(
        default=None,
        description="Category of the number, when the input parsed.",
    )

    @property
    def ok(self) -> bool:
        return self.well_formed and self.checksum_valid
