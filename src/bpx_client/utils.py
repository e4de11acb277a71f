"""
Utility functions for bpx client.

Validation helpers for caller-supplied arguments.
"""


def validate_symbol(symbol: str) -> bool:
    """Validate market or asset symbol format, e.g. ``SOL_USDC_PERP``."""
    if not symbol or not isinstance(symbol, str):
        return False

    return len(symbol) <= 32 and symbol.replace("-", "").replace("_", "").isalnum()


def validate_url(url: str) -> bool:
    """Validate URL format."""
    if not url or not isinstance(url, str):
        return False
    if not url.startswith(("http://", "https://")):
        return False
    host = url.split("://", 1)[1]
    return "." in host or host.startswith("localhost")
