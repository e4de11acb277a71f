"""
Transport collaborator for bpx client.

The request dispatcher hands a transport ``(method, absolute URL, optional
JSON body)`` and gets back ``(status, body bytes)``. Authentication headers,
connection pooling, timeouts and retry policy all live on this side of the
boundary.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import aiohttp

from .errors import TransportFailure
from .models.config import ConnectionConfig, RetryConfig
from .session_manager import SessionManager

logger = logging.getLogger(__name__)

# (method, url, body) -> extra headers, e.g. a request signature
RequestSigner = Callable[[str, str, Optional[bytes]], Dict[str, str]]


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP response as seen by the dispatcher."""
    status: int
    body: bytes


class Transport(ABC):
    """Performs one HTTP exchange per call."""

    @abstractmethod
    async def send(self, method: str, url: str, body: Optional[bytes] = None) -> TransportResponse:
        """Send a request and return its status and body.

        Raises:
            TransportFailure: On network or connection-level failure
        """

    async def close(self) -> None:
        """Release transport resources."""


class AiohttpTransport(Transport):
    """Transport on a pooled aiohttp session with retry and backoff."""

    def __init__(
        self,
        config: ConnectionConfig,
        retry_config: Optional[RetryConfig] = None,
        signer: Optional[RequestSigner] = None,
    ):
        """Initialize transport with configuration."""
        self._config = config
        self._retry_config = retry_config or RetryConfig()
        self._signer = signer
        self._session_manager = SessionManager(config)

    async def send(self, method: str, url: str, body: Optional[bytes] = None) -> TransportResponse:
        """Execute request, retrying idempotent methods on transient failures."""
        method = method.upper()
        session = await self._session_manager.create_session()

        retryable = method in self._retry_config.retry_methods
        attempts = self._retry_config.max_retries + 1 if retryable else 1
        last_exception: Optional[BaseException] = None

        for attempt in range(attempts):
            headers = self._signer(method, url, body) if self._signer else {}
            try:
                async with session.request(method, url, data=body, headers=headers) as response:
                    result = TransportResponse(status=response.status, body=await response.read())
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_exception = e
                if attempt == attempts - 1:
                    break
                logger.warning(f"{method} {url} failed ({e!r}), retrying")
                await self._backoff(attempt)
                continue

            if result.status in self._retry_config.retry_on_status and attempt < attempts - 1:
                logger.warning(f"{method} {url} returned {result.status}, retrying")
                await self._backoff(attempt)
                continue

            return result

        raise TransportFailure(
            f"{method} {url} failed after {attempts} attempt(s): {last_exception!r}",
            method=method,
            url=url,
        ) from last_exception

    async def _backoff(self, attempt: int) -> None:
        """Sleep with exponential backoff."""
        delay = self._retry_config.retry_delay * (self._retry_config.backoff_factor ** attempt)
        await asyncio.sleep(delay)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._session_manager.close_session()
