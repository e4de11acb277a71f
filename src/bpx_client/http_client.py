"""
Request dispatcher for bpx client.

Composes base URL, path and query string, hands the request to a transport
and decodes the response body into a typed result. One transport call per
request; retries belong to the transport.
"""

import json
import logging
from decimal import Decimal
from typing import Any, Callable, List, Optional, TypeVar

from .decimals import format_decimal
from .endpoints import Endpoint
from .errors import ApiError, DecodeError
from .models.enums import WireEnum
from .transport import Transport, TransportResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")
Decoder = Callable[[Any], T]


def list_of(decoder: Decoder) -> Callable[[Any], List[T]]:
    """Lift an element decoder to a decoder of JSON arrays."""

    def decode(data: Any) -> List[T]:
        if not isinstance(data, list):
            raise DecodeError(f"expected JSON array, got {type(data).__name__}")
        return [decoder(item) for item in data]

    return decode


def _json_default(value: Any) -> Any:
    """Serialize request body values the json module does not know."""
    if isinstance(value, Decimal):
        return format_decimal(value)
    if isinstance(value, WireEnum):
        return value.encode()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class HttpClient:
    """Dispatcher specialized for exchange REST endpoints."""

    def __init__(self, base_url: str, transport: Transport):
        """Initialize dispatcher with base URL and transport."""
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, path: str, query: str = "") -> str:
        """Absolute request URL for a path and encoded query string."""
        return f"{self._base_url}{path}{query}"

    async def get(self, path: str, decoder: Decoder, query: str = "") -> T:
        """Execute a GET request and decode its body."""
        return await self.request("GET", path, decoder=decoder, query=query)

    async def patch(self, path: str, payload: Any) -> None:
        """Execute a PATCH request with a JSON body."""
        await self.request("PATCH", path, payload=payload)

    async def post(self, path: str, payload: Any) -> None:
        """Execute a POST request with a JSON body."""
        await self.request("POST", path, payload=payload)

    async def call(
        self,
        endpoint: Endpoint,
        decoder: Optional[Decoder] = None,
        query: str = "",
        payload: Any = None,
    ) -> Any:
        """Execute a catalog endpoint with the method it declares."""
        return await self.request(
            endpoint.method, endpoint.path, decoder=decoder, query=query, payload=payload
        )

    async def request(
        self,
        method: str,
        path: str,
        decoder: Optional[Decoder] = None,
        query: str = "",
        payload: Any = None,
    ) -> Any:
        """
        Execute a single request.

        Args:
            method: HTTP method
            path: Endpoint path
            decoder: Converts the parsed JSON body; ``None`` discards the body
            query: Encoded query string, ``""`` or starting with ``?``
            payload: JSON-serializable request body

        Returns:
            Decoded result, or ``None`` when no decoder is given

        Raises:
            TransportFailure: If the transport could not complete the exchange
            ApiError: If the response status is not 2xx
            DecodeError: If the body is not valid JSON or does not match the schema
        """
        url = self.url_for(path, query)
        body = None
        if payload is not None:
            body = json.dumps(payload, default=_json_default).encode("utf-8")

        logger.debug(f"{method} {url}")
        response = await self._transport.send(method, url, body)
        return self._process_response(method, url, response, decoder)

    def _process_response(
        self,
        method: str,
        url: str,
        response: TransportResponse,
        decoder: Optional[Decoder],
    ) -> Any:
        """Check status and decode response body."""
        if not 200 <= response.status < 300:
            text = response.body.decode("utf-8", errors="replace")
            logger.warning(f"{method} {url} returned {response.status}: {text[:200]}")
            raise ApiError(response.status, text, method=method, url=url)

        if decoder is None:
            return None

        try:
            text = response.body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"response body is not valid UTF-8: {e.reason}") from e

        if not text.strip():
            raise DecodeError(f"empty response body (Status {response.status})")

        try:
            data = json.loads(text, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise DecodeError(f"invalid JSON response: {text[:200]}") from e

        return decoder(data)
