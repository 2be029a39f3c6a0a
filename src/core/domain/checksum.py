"""Check digit engine for national identity numbers.

Both check digits come from a weighted modulo-11 sum. A sum whose residue is 1
has no check digit, so some leading digit sequences can never form a valid
number. That is a property of the numbering scheme, not an error, and every
function here reports it as ``None``.
"""

from __future__ import annotations

NUMBER_LENGTH = 11
LEADING_LENGTH = 9
MAX_NUMBER = 10**NUMBER_LENGTH - 1
MAX_LEADING = 10**LEADING_LENGTH - 1

K1_WEIGHTS: tuple[int, ...] = (3, 7, 6, 1, 8, 9, 4, 5, 2)
K2_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)


def split_digits(value: int, count: int = NUMBER_LENGTH) -> list[int]:
    """Return the first `count` digits of `value` zero-padded to 11 positions.

    `split_digits(30110618235, 9)` -> `[3, 0, 1, 1, 0, 6, 1, 8, 2]`.
    """

    divisor = 10 ** (NUMBER_LENGTH - 1)
    remaining = value
    digits: list[int] = []
    for _ in range(count):
        digit = remaining // divisor
        remaining -= digit * divisor
        divisor //= 10
        digits.append(digit)
    return digits


def check_digit(weighted_sum: int) -> int | None:
    """Map a weighted sum to its check digit, or None when residue is 1."""

    rest = 11 - (weighted_sum % 11)
    if rest == 11:
        return 0
    if rest == 10:
        return None
    return rest


def _weighted_sum(weights: tuple[int, ...], digits: list[int]) -> int:
    return sum(w * d for w, d in zip(weights, digits))


def calculate_checksum(value: int) -> int | None:
    """Compute the two check digits of an 11-position value as `k1 * 10 + k2`.

    Only the leading nine digits of `value` are read, so the trailing two may
    hold anything (zeros, or the digits being verified). Returns None when
    either check digit does not exist; k2 is not attempted without k1.
    """

    digits = split_digits(value, LEADING_LENGTH)

    k1 = check_digit(_weighted_sum(K1_WEIGHTS, digits))
    if k1 is None:
        return None
    digits.append(k1)

    k2 = check_digit(_weighted_sum(K2_WEIGHTS, digits))
    if k2 is None:
        return None

    return k1 * 10 + k2


def checksum_for_leading(leading: int) -> int | None:
    """Like `calculate_checksum` but takes the nine leading digits as one integer."""

    if not 0 <= leading <= MAX_LEADING:
        raise ValueError(f"leading digits out of range: {leading}")
    return calculate_checksum(leading * 100)


def is_valid_checksum(value: int) -> bool:
    """True if the last two digits of `value` are its computed check digits."""

    expected = calculate_checksum(value)
    if expected is None:
        return False
    return expected == value % 100
