"""Unit tests for the inspection and counting service."""
import pytest

from core.domain.category import Category
from core.domain.models import NationalNumber
from core.services.inspection import (
    LEADING_STOP,
    CountHooks,
    CountRequest,
    count_valid,
    inspect_many,
    inspect_number,
    leading_range,
    summarize,
)


class TestInspectNumber:
    """Test inspection of a single raw input."""

    def test_valid_number(self):
        """A valid number reports checksum, expected digits and category."""
        report = inspect_number("02063626662")
        assert report.ok
        assert report.number == "02063626662"
        assert report.expected_check_digits == "62"
        assert report.category is Category.NORMAL

    def test_wrong_check_digits(self):
        """Wrong trailing digits are reported with the expected ones."""
        report = inspect_number("21016514959")
        assert report.well_formed
        assert not report.checksum_valid
        assert report.expected_check_digits == "58"
        assert not report.ok

    def test_no_checksum_exists(self):
        """Leading digits without a checksum have no expected digits."""
        report = inspect_number("30150618200")
        assert report.well_formed
        assert not report.checksum_valid
        assert report.expected_check_digits is None
        assert report.category is Category.NORMAL

    @pytest.mark.parametrize("raw", ["s", "00000000001x", " 02063626662", ""])
    def test_malformed(self, raw):
        """Malformed input keeps the raw text and nothing else."""
        report = inspect_number(raw)
        assert report.raw == raw
        assert not report.well_formed
        assert report.number is None
        assert report.category is None
        assert report.expected_check_digits is None


class TestInspectMany:
    """Test batch inspection and summaries."""

    def test_preserves_order(self, category_samples):
        """One report per input, in input order."""
        raws = ["bad", *category_samples.values(), "21016514959"]
        reports = inspect_many(raws)
        assert [r.raw for r in reports] == raws

    def test_summary(self, category_samples):
        """Summary counts outcomes and categories."""
        raws = ["bad", *category_samples.values(), "21016514959"]
        summary = summarize(inspect_many(raws))
        assert summary["total"] == 6
        assert summary["valid"] == 4
        assert summary["malformed"] == 1
        assert summary["invalid_checksum"] == 1
        assert summary["normal"] == 2
        assert summary["d-number"] == 1
        assert summary["h-number"] == 1
        assert summary["fh-number"] == 1

    def test_empty(self):
        """No input gives empty totals."""
        assert inspect_many([]) == []
        assert summarize([])["total"] == 0


class TestLeadingRange:
    """Test natural ranges per category."""

    def test_first_digit_categories(self):
        """FH and D numbers occupy contiguous blocks."""
        assert leading_range(Category.FH_NUMBER) == (800_000_000, LEADING_STOP)
        assert leading_range(Category.D_NUMBER) == (400_000_000, 800_000_000)

    def test_scattered_categories(self):
        """H and normal numbers have no single block."""
        assert leading_range(Category.H_NUMBER) is None
        assert leading_range(Category.NORMAL) is None


class TestCountValid:
    """Test counting of valid numbers."""

    def test_single_sequence(self):
        """A one-element range counts 1 or 0."""
        assert count_valid(CountRequest(start=301106182, stop=301106183, category=None)) == 1
        assert count_valid(CountRequest(start=301506182, stop=301506183, category=None)) == 0

    def test_category_filter(self):
        """Only numbers of the requested category are counted."""
        assert count_valid(CountRequest(start=839184738, stop=839184739, category=Category.FH_NUMBER)) == 1
        assert count_valid(CountRequest(start=839184738, stop=839184739, category=Category.D_NUMBER)) == 0
        assert count_valid(CountRequest(start=24636266, stop=24636267, category=Category.H_NUMBER)) == 1

    def test_matches_model(self):
        """Counting agrees with completing each number by hand."""
        start, stop = 839184700, 839185000
        expected = 0
        for leading in range(start, stop):
            check_digits = NationalNumber.from_int(leading * 100).checksum()
            if check_digits is None:
                continue
            number = NationalNumber.from_int(leading * 100 + check_digits.value)
            if number.category() is Category.FH_NUMBER:
                expected += 1
        assert 0 < expected < stop - start
        assert count_valid(CountRequest(start=start, stop=stop)) == expected

    def test_empty_range(self):
        """start == stop counts nothing."""
        assert count_valid(CountRequest(start=5, stop=5)) == 0

    @pytest.mark.parametrize(
        "start,stop",
        [(-1, 10), (0, LEADING_STOP + 1), (10, 5)],
    )
    def test_invalid_range(self, start, stop):
        """Ranges outside the leading space are rejected."""
        with pytest.raises(ValueError):
            count_valid(CountRequest(start=start, stop=stop))

    def test_progress_hook(self):
        """Progress is reported every `progress_every` sequences."""
        calls = []
        hooks = CountHooks(progress=lambda done, total: calls.append((done, total)), progress_every=10)
        count_valid(CountRequest(start=0, stop=25, category=None), hooks)
        assert calls == [(10, 25), (20, 25)]
