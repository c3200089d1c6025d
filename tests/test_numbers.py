"""Tests for number formatting."""

from __future__ import annotations

import pytest

from doctree.numbers import FormattedNumber, alpha, format_number, roman


class TestAlpha:
    """Tests for bijective base-26 letters."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1, "A"), (2, "B"), (26, "Z"), (27, "AA"), (52, "AZ"), (53, "BA"), (702, "ZZ"), (703, "AAA")],
    )
    def test_uppercase_values(self, value: int, expected: str) -> None:
        """Values render as uppercase numerals."""
        assert format_number(value, "Alpha") == expected

    def test_lowercase_mode(self) -> None:
        """The lowercase spelling selects lowercase letters."""
        assert format_number(28, "alpha") == "ab"

    def test_uppercase_alias(self) -> None:
        """The capitalized spelling selects uppercase letters."""
        assert format_number(3, "ALPHA") == "C"

    @pytest.mark.parametrize("value", [0, -1, -30])
    def test_non_positive_values_give_zero(self, value: int) -> None:
        """Values of zero or less give "0"."""
        assert alpha(value) == "0"


class TestRoman:
    """Tests for Roman numerals."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (40, "XL"), (90, "XC"), (400, "CD"), (1994, "MCMXCIV"), (3999, "MMMCMXCIX")],
    )
    def test_uppercase_values(self, value: int, expected: str) -> None:
        """Values render as uppercase numerals."""
        assert format_number(value, "Roman") == expected

    def test_zero(self) -> None:
        """Zero gives "0"."""
        assert roman(0) == "0"

    def test_negative_values_keep_sign(self) -> None:
        """Negative values keep a leading sign."""
        assert roman(-4) == "-IV"

    def test_lowercase_mode(self) -> None:
        """The lowercase spelling selects lowercase letters."""
        assert format_number(12, "roman") == "xii"


class TestInt:
    """Tests for grouped decimal formatting."""

    def test_plain_integer(self) -> None:
        """Integers render without grouping by default."""
        assert format_number(1234) == "1234"

    def test_thousands_separator(self) -> None:
        """The thousands separator groups digits."""
        assert format_number(1234567, "int", thousands_separator=".") == "1.234.567"

    def test_decimals(self) -> None:
        """Decimals use the configured decimal point."""
        assert format_number(5, "INT", decimals=2, decimal_point=",") == "5,00"

    def test_negative_value(self) -> None:
        """Negative values keep their sign with grouping."""
        assert format_number(-1500, "Int", thousands_separator=" ") == "-1 500"

    def test_large_integer_keeps_precision(self) -> None:
        """Integers beyond float precision are rendered exactly."""
        assert format_number(2**53 + 1) == "9007199254740993"
        assert format_number(2**53 + 1, thousands_separator=",") == "9,007,199,254,740,993"


class TestUnknownFormat:
    """Unknown formats fall back to the raw integer."""

    def test_returns_raw_value(self) -> None:
        """Unknown formats render the plain integer."""
        assert format_number(42, "hex") == "42"


class TestFormattedNumber:
    """Tests for the FormattedNumber wrapper."""

    def test_format_delegates(self) -> None:
        """format renders through format_number."""
        assert FormattedNumber(27).format("Alpha") == "AA"

    def test_str_is_raw_value(self) -> None:
        """str gives the plain value."""
        assert str(FormattedNumber(7)) == "7"

    def test_equality(self) -> None:
        """Numbers compare by value."""
        assert FormattedNumber(3) == FormattedNumber(3)
        assert FormattedNumber(3) != FormattedNumber(4)
