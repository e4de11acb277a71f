# -*- coding: utf-8 -*-
"""
Tests for fixed-point decimal helpers.
"""

import pytest
from decimal import Decimal

from bpx_client.decimals import decimal_places, format_decimal, to_decimal
from bpx_client.errors import BpxError, InvalidDecimal


class TestToDecimal:
    """Test conversion of wire and caller values."""

    def test_string_keeps_scale(self):
        """Trailing zeros in the source text are preserved."""
        value = to_decimal("0.0100")
        assert value == Decimal("0.01")
        assert value.as_tuple().exponent == -4

    def test_int_and_decimal(self):
        assert to_decimal(5) == Decimal("5")
        original = Decimal("1.50")
        assert to_decimal(original) is original

    def test_float_goes_through_text(self):
        """Floats are converted from their shortest repr, not binary expansion."""
        assert to_decimal(0.1) == Decimal("0.1")

    def test_surrounding_whitespace_ignored(self):
        assert to_decimal(" 42.5 ") == Decimal("42.5")

    def test_signs_and_exponents(self):
        assert to_decimal("-.5") == Decimal("-0.5")
        assert to_decimal("+3.") == Decimal("3")
        assert to_decimal("1E-5") == Decimal("0.00001")
        assert to_decimal(1e-05) == Decimal("0.00001")

    @pytest.mark.parametrize("value", [
        "", "   ", "abc", "1.2.3", "NaN", "Infinity", "-inf",
        "1_000.5", "1_000", "\u0661\u0662\u0663", "\uff15", "1e", "+", ".",
    ])
    def test_malformed_text_rejected(self, value):
        with pytest.raises(InvalidDecimal):
            to_decimal(value)

    @pytest.mark.parametrize("value", [None, True, False, [1], {"a": 1}])
    def test_non_numeric_types_rejected(self, value):
        with pytest.raises(InvalidDecimal):
            to_decimal(value)

    def test_error_carries_field(self):
        """The failing field name is attached to the error."""
        with pytest.raises(InvalidDecimal) as exc_info:
            to_decimal("12,5", field="tickSize")
        assert exc_info.value.field == "tickSize"
        assert exc_info.value.value == "12,5"
        assert "tickSize" in str(exc_info.value)

    def test_error_hierarchy(self):
        """InvalidDecimal is both a client error and a ValueError."""
        with pytest.raises(BpxError):
            to_decimal("x")
        with pytest.raises(ValueError):
            to_decimal("x")


class TestDecimalPlaces:
    """Test scale derivation."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0.0001", 4),
            ("0.01", 2),
            ("0.0100", 4),
            ("1", 0),
            ("10", 0),
            ("1E+1", 0),
            ("1E-5", 5),
        ],
    )
    def test_scale(self, text, expected):
        assert decimal_places(Decimal(text)) == expected


class TestFormatDecimal:
    """Test positional rendering."""

    def test_plain_notation(self):
        assert format_decimal(Decimal("1E-7")) == "0.0000001"
        assert format_decimal(Decimal("-0.0000039641039274236048482914")) == (
            "-0.0000039641039274236048482914"
        )

    def test_trailing_zeros_kept(self):
        assert format_decimal(Decimal("50000.10")) == "50000.10"
