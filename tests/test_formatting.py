"""Tests for explanation formatting."""

import pytest

from schouten.core.engine import GapRecord, SpiralPoint
from schouten.formatting import (
    DESCRIPTIONS,
    FORMULAS,
    format_gap,
    format_gap_law,
    format_next_prime,
    format_nth_prime,
    format_number,
    format_prime_count,
    format_prime_list,
    format_primorial,
    format_spiral_point,
    format_survivor,
    ordinal_suffix,
)


class TestOrdinalSuffix:
    """Tests for ordinal_suffix function."""

    @pytest.mark.parametrize("n,suffix", [
        (1, "st"), (2, "nd"), (3, "rd"), (4, "th"),
        (11, "th"), (12, "th"), (13, "th"),
        (21, "st"), (22, "nd"), (23, "rd"),
        (101, "st"), (111, "th"), (112, "th"),
    ])
    def test_suffixes(self, n, suffix):
        """Test English ordinal suffixes."""
        assert ordinal_suffix(n) == suffix


class TestFormatters:
    """Tests for the format_* helpers."""

    def test_next_prime(self):
        """Test next prime formula."""
        assert format_next_prime(10, 11) == "next_prime(10) = 10 + 1 = 11"

    def test_gap(self):
        """Test gap and gap law strings."""
        record = GapRecord(current_prime=23, next_prime=29, gap=6, composites_between=5)
        assert format_gap(record) == "gap(23) = 29 - 23 = 6"
        assert format_gap_law(record) == "gap = 1 + composites_between = 1 + 5 = 6"

    def test_prime_count(self):
        """Test prime counting string."""
        assert format_prime_count(100, 25, 74) == "π(100) = 100 - 1 - 74 = 25"
        assert "no primes" in format_prime_count(1, 0, 0)

    def test_prime_list(self):
        """Test truncation of long lists."""
        assert format_prime_list([2, 3, 5]) == "2, 3, 5"
        assert format_prime_list(list(range(30)), limit=3) == "0, 1, 2..."

    def test_nth_prime(self):
        """Test nth prime string."""
        assert format_nth_prime(3, 5) == "p_3 = 5 (the 3rd prime number)"

    def test_primorial(self):
        """Test primorial uses separators."""
        assert format_primorial(13, 30030) == "13# = 30,030"

    def test_number(self):
        """Test thousands separators on big ints."""
        assert format_number(10 ** 21) == "1,000,000,000,000,000,000,000"

    def test_survivor(self):
        """Test survivor strings."""
        assert format_survivor(31, 5, True) == "31 passes survivor criterion for 5#"
        assert format_survivor(35, 5, False) == "35 fails survivor criterion for 5#"

    def test_spiral_point(self):
        """Test spiral point string."""
        point = SpiralPoint(x=0.25, y=0.5, z=1, prime=2)
        assert format_spiral_point(1, point) == "P(1) = (0.250, 0.500, 1), prime = 2"

    def test_tables_cover_same_operations(self):
        """Test every formula has a description."""
        assert set(FORMULAS) == set(DESCRIPTIONS)
