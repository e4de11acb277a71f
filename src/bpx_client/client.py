"""
Main client for the Backpack exchange REST API.

Wires configuration, transport and dispatcher together and exposes every
endpoint operation. The client keeps no caches or per-call state, so one
instance can serve any number of concurrent callers.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .api_methods import APIMethods
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
)
from .http_client import HttpClient
from .models.config import ConnectionConfig, RetryConfig
from .transport import AiohttpTransport, RequestSigner, Transport

logger = logging.getLogger(__name__)


class BpxClient(APIMethods):
    """
    Main bpx client.

    Uses an aiohttp transport built from ``config`` unless a transport is
    injected, in which case connection settings are the transport's concern.
    """

    def __init__(
        self,
        config: Optional[ConnectionConfig] = None,
        retry_config: Optional[RetryConfig] = None,
        transport: Optional[Transport] = None,
        signer: Optional[RequestSigner] = None,
    ):
        """Initialize bpx client with configuration."""
        self._config = config or ConnectionConfig()
        self._transport = transport or AiohttpTransport(self._config, retry_config, signer)
        super().__init__(HttpClient(self._config.base_url, self._transport))
        self._closed = False

    @classmethod
    def from_env(cls, signer: Optional[RequestSigner] = None) -> "BpxClient":
        """Create client from environment variables.

        Reads ``BPX_BASE_URL``, ``BPX_API_KEY``, ``BPX_TIMEOUT`` and
        ``BPX_MAX_RETRIES``; a ``.env`` file is loaded first when present.
        """
        load_dotenv()

        config = ConnectionConfig(
            base_url=os.getenv("BPX_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("BPX_TIMEOUT", str(DEFAULT_TIMEOUT))),
            api_key=os.getenv("BPX_API_KEY") or None,
        )
        retry_config = RetryConfig(
            max_retries=int(os.getenv("BPX_MAX_RETRIES", str(DEFAULT_MAX_RETRIES))),
        )

        return cls(config, retry_config, signer=signer)

    @property
    def config(self) -> ConnectionConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._http_client.base_url

    async def close(self) -> None:
        """Close client and cleanup resources."""
        if not self._closed:
            await self._transport.close()
            self._closed = True
            logger.info("Bpx client closed")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()


def create_bpx_client(
    api_key: Optional[str] = None,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    max_retries: int = DEFAULT_MAX_RETRIES,
    retry_delay: float = DEFAULT_RETRY_DELAY,
    signer: Optional[RequestSigner] = None,
) -> BpxClient:
    """
    Factory function to create bpx client with common configuration.

    Args:
        api_key: API key sent as ``X-API-Key``
        base_url: Base URL for API endpoints
        timeout: Request timeout in seconds
        max_retries: Maximum number of retry attempts for idempotent requests
        retry_delay: Initial delay between retries in seconds
        signer: Callable returning per-request authentication headers

    Returns:
        Configured BpxClient instance
    """
    config = ConnectionConfig(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
    )

    retry_config = RetryConfig(
        max_retries=max_retries,
        retry_delay=retry_delay,
    )

    return BpxClient(config, retry_config, signer=signer)
