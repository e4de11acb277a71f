"""
Query string encoding.

Turns an ordered sequence of ``(key, value)`` pairs into a query string,
dropping every pair whose value is unset. Order is the caller's declared
order, never alphabetical.
"""

from decimal import Decimal
from typing import Any, Iterable, Optional, Tuple
from urllib.parse import quote

from .decimals import format_decimal
from .models.enums import WireEnum


def render_value(value: Any) -> str:
    """Render a query value in its canonical wire form."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, WireEnum):
        return value.encode()
    if isinstance(value, Decimal):
        return format_decimal(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return quote(value, safe="")
    raise TypeError(f"Unsupported query value type: {type(value).__name__}")


def encode_query(pairs: Iterable[Tuple[str, Optional[Any]]]) -> str:
    """
    Encode pairs as ``?k1=v1&k2=v2``.

    Args:
        pairs: Ordered ``(key, value)`` pairs; ``None`` values are omitted

    Returns:
        Query string with leading ``?``, or ``""`` when nothing is set
    """
    parts = [f"{key}={render_value(value)}" for key, value in pairs if value is not None]
    if not parts:
        return ""
    return "?" + "&".join(parts)
