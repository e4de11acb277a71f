"""
Fixed-point decimal helpers.

Every price, quantity, rate and fee is carried as ``decimal.Decimal`` so no
value ever passes through a binary float. ``Decimal`` keeps the scale of its
source text, which is what market precision is derived from.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .errors import InvalidDecimal

_NUMERAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def to_decimal(value: Any, field: Optional[str] = None) -> Decimal:
    """Convert a wire or caller value to ``Decimal`` without losing scale.

    Args:
        value: Decimal, int, numeric string or float
        field: Field name reported in the error when conversion fails

    Returns:
        Finite Decimal with the source's number of fractional digits

    Raises:
        InvalidDecimal: If the value is not a finite base-10 numeral
    """
    if isinstance(value, bool) or value is None:
        raise InvalidDecimal(value, field)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        text = str(value).strip()
        if not _NUMERAL.fullmatch(text):
            raise InvalidDecimal(value, field)
        try:
            result = Decimal(text)
        except InvalidOperation as e:
            raise InvalidDecimal(value, field) from e
    else:
        raise InvalidDecimal(value, field)

    if not result.is_finite():
        raise InvalidDecimal(value, field)
    return result


def decimal_places(value: Decimal) -> int:
    """Number of fractional digits carried by a decimal (its scale)."""
    exponent = value.as_tuple().exponent
    return max(0, -int(exponent))


def format_decimal(value: Decimal) -> str:
    """Render a decimal as plain positional text, keeping trailing zeros."""
    return format(value, "f")
