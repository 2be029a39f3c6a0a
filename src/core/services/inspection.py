"""Inspection and counting of national numbers.

The CLI delegates here so the same flows are usable from scripts and tests
without any printing. Progress is reported through optional hooks and the
module logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from core.domain.category import Category, classify
from core.domain.checksum import MAX_LEADING, calculate_checksum
from core.domain.models import NationalNumber, NumberReport

logger = logging.getLogger(__name__)

LEADING_STOP = MAX_LEADING + 1

# Categories fixed by the first digit occupy a contiguous block of leading
# sequences. H-numbers and normal numbers are spread over the whole space.
_LEADING_RANGES: dict[Category, tuple[int, int]] = {
    Category.FH_NUMBER: (800_000_000, LEADING_STOP),
    Category.D_NUMBER: (400_000_000, 800_000_000),
}


def inspect_number(raw: str) -> NumberReport:
    """Parse `raw` and report its checksum status and category."""

    number = NationalNumber.from_string(raw)
    if number is None:
        return NumberReport(raw=raw)

    check_digits = number.checksum()
    return NumberReport(
        raw=raw,
        number=str(number),
        well_formed=True,
        checksum_valid=number.is_valid_checksum(),
        expected_check_digits=str(check_digits) if check_digits is not None else None,
        category=number.category(),
    )


def inspect_many(raws: Iterable[str]) -> list[NumberReport]:
    reports = [inspect_number(raw) for raw in raws]
    logger.debug(
        "Inspected %d inputs (%d valid)",
        len(reports),
        sum(1 for report in reports if report.ok),
    )
    return reports


def summarize(reports: Iterable[NumberReport]) -> dict[str, int]:
    """Totals per outcome and per category."""

    summary: dict[str, int] = {"total": 0, "valid": 0, "malformed": 0, "invalid_checksum": 0}
    for category in Category:
        summary[category.value] = 0

    for report in reports:
        summary["total"] += 1
        if not report.well_formed:
            summary["malformed"] += 1
            continue
        if report.checksum_valid:
            summary["valid"] += 1
        else:
            summary["invalid_checksum"] += 1
        if report.category is not None:
            summary[report.category.value] += 1
    return summary


def leading_range(category: Category) -> tuple[int, int] | None:
    """Natural `[start, stop)` of leading sequences for `category`, if contiguous."""

    return _LEADING_RANGES.get(category)


@dataclass
class CountRequest:
    """Which leading sequences to count.

    `category=None` counts every sequence that has a checksum.
    """

    start: int = 800_000_000
    stop: int = LEADING_STOP
    category: Category | None = Category.FH_NUMBER

    def validate(self) -> None:
        if self.start < 0 or self.stop > LEADING_STOP:
            raise ValueError(f"range must lie within [0, {LEADING_STOP}), got [{self.start}, {self.stop})")
        if self.start > self.stop:
            raise ValueError(f"start {self.start} is greater than stop {self.stop}")


@dataclass
class CountHooks:
    """Optional callbacks for UI layers."""

    progress: Callable[[int, int], None] | None = None
    progress_every: int = 10_000_000


def count_valid(request: CountRequest, hooks: CountHooks | None = None) -> int:
    """Count leading sequences in the request range that complete to a valid number."""

    request.validate()
    hooks = hooks or CountHooks()
    total = request.stop - request.start
    wanted = request.category
    logger.info(
        "Counting %s over [%d, %d)",
        wanted.label() if wanted is not None else "all numbers",
        request.start,
        request.stop,
    )

    count = 0
    done = 0
    for leading in range(request.start, request.stop):
        checksum = calculate_checksum(leading * 100)
        if checksum is not None and (wanted is None or classify(leading * 100 + checksum) is wanted):
            count += 1

        done += 1
        if done % hooks.progress_every == 0:
            logger.info("Checked %d/%d leading sequences, %d valid so far", done, total, count)
            if hooks.progress is not None:
                hooks.progress(done, total)

    logger.info("Found %d valid numbers in %d leading sequences", count, total)
    return count
