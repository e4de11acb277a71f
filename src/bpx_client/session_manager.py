"""
Session management for the bpx aiohttp transport.

Handles connection lifecycle, session creation, and resource cleanup
following the pure core/impure edges principle.
"""

import logging
from typing import Optional

import aiohttp

from .constants import API_KEY_HEADER, USER_AGENT
from .models.config import ConnectionConfig

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages HTTP session lifecycle for the transport."""

    def __init__(self, config: ConnectionConfig):
        """Initialize session manager with configuration."""
        self._config = config
        self._session: Optional[aiohttp.ClientSession] = None

    async def create_session(self) -> aiohttp.ClientSession:
        """Create and configure HTTP session, reusing an open one."""
        if self._session is not None and not self._session.closed:
            return self._session

        connector = aiohttp.TCPConnector(
            limit=100,
            limit_per_host=20,
            ttl_dns_cache=300,
            use_dns_cache=True,
        )

        timeout = aiohttp.ClientTimeout(total=self._config.timeout)

        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self._config.api_key:
            headers[API_KEY_HEADER] = self._config.api_key

        self._session = aiohttp.ClientSession(
            connector=connector,
            timeout=timeout,
            headers=headers,
        )
        logger.debug(f"Created HTTP session for {self._config.base_url}")

        return self._session

    async def close_session(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Get current session without creating one."""
        return self._session
