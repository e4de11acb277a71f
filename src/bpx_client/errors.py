"""
Exceptions raised by the bpx client.

Every public operation either returns a fully-typed value or raises one of
the exceptions defined here. Nothing is retried or defaulted at this layer.
"""

import json
from typing import Any, Optional


class BpxError(Exception):
    """Base exception for all bpx client errors."""
    pass


class InvalidDecimal(BpxError, ValueError):
    """Raised when a value is not a valid finite base-10 numeral."""

    def __init__(self, value: Any, field: Optional[str] = None):
        location = f" in field '{field}'" if field else ""
        super().__init__(f"Invalid decimal{location}: {value!r}")
        self.value = value
        self.field = field


class UnknownVariant(BpxError, ValueError):
    """Raised when a wire string matches no variant of an enumeration."""

    def __init__(self, enum_name: str, value: Any, field: Optional[str] = None):
        location = f" in field '{field}'" if field else ""
        super().__init__(f"Unknown {enum_name} variant{location}: {value!r}")
        self.enum_name = enum_name
        self.value = value
        self.field = field


class TransportFailure(BpxError):
    """Network or connection-level failure, not attributable to request content."""

    def __init__(self, message: str, method: Optional[str] = None, url: Optional[str] = None):
        super().__init__(message)
        self.method = method
        self.url = url


class ApiError(BpxError):
    """Non-2xx HTTP response from the exchange."""

    def __init__(self, status_code: int, body: str, method: Optional[str] = None, url: Optional[str] = None):
        super().__init__(f"HTTP {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url

    @property
    def payload(self) -> Optional[Any]:
        """Error body parsed as JSON, or None when it is not JSON."""
        try:
            return json.loads(self.body)
        except ValueError:
            return None

    @property
    def code(self) -> Optional[str]:
        """Exchange error code, e.g. ``INVALID_CLIENT_REQUEST``."""
        payload = self.payload
        if isinstance(payload, dict) and payload.get("code") is not None:
            return str(payload["code"])
        return None

    @property
    def error_message(self) -> Optional[str]:
        payload = self.payload
        if isinstance(payload, dict) and payload.get("message") is not None:
            return str(payload["message"])
        return None

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)


class DecodeError(BpxError):
    """Response body did not conform to the expected schema."""

    def __init__(self, detail: str, entity: Optional[str] = None, field: Optional[str] = None):
        parts = [entity, f"field '{field}'" if field else None]
        location = " ".join(part for part in parts if part)
        super().__init__(f"{location}: {detail}" if location else detail)
        self.detail = detail
        self.entity = entity
        self.field = field
