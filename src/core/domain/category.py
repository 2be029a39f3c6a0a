"""Number categories.

Temporary identity schemes reuse the national number layout and mark
themselves by pushing a date digit out of its natural range.
"""

from __future__ import annotations

from enum import Enum

from core.domain.checksum import NUMBER_LENGTH


class Category(str, Enum):
    """Kind of identity a national number belongs to."""

    NORMAL = "normal"
    D_NUMBER = "d-number"
    H_NUMBER = "h-number"
    FH_NUMBER = "fh-number"

    def label(self) -> str:
        """Human readable label for tables and messages."""

        return _LABELS[self]


_LABELS: dict[Category, str] = {
    Category.NORMAL: "normal numbers",
    Category.D_NUMBER: "D-numbers",
    Category.H_NUMBER: "H-numbers",
    Category.FH_NUMBER: "FH-numbers",
}


def digit_at(value: int, position: int) -> int:
    """Digit at 0-based `position` of the zero-padded 11-digit `value`.

    Positions outside 0..10 mean the caller is broken, so this raises
    IndexError instead of returning something that looks like a digit.
    """

    if not 0 <= position < NUMBER_LENGTH:
        raise IndexError(f"digit position out of range: {position}")
    return value // 10 ** (NUMBER_LENGTH - 1 - position) % 10


def classify(value: int) -> Category:
    """Classify an 11-digit value. The checksum is not looked at."""

    first = digit_at(value, 0)
    if first >= 8:
        return Category.FH_NUMBER
    if first >= 4:
        return Category.D_NUMBER
    if digit_at(value, 2) >= 4:
        return Category.H_NUMBER
    return Category.NORMAL
