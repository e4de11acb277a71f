"""
Configuration models for bpx client.

Immutable configuration structures following state-first design.
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
)
from ..utils import validate_url


@dataclass(frozen=True)
class ConnectionConfig:
    """Configuration for the exchange connection."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    api_key: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not validate_url(self.base_url):
            raise ValueError("Base URL must be a valid HTTP/HTTPS URL")

        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

        if self.api_key is not None and not self.api_key.strip():
            raise ValueError("API key cannot be blank")


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for transport-level retry behavior."""
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    backoff_factor: float = 2.0
    retry_on_status: tuple[int, ...] = (500, 502, 503, 504)
    retry_methods: tuple[str, ...] = ("GET",)

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError(f"max_retries cannot be negative, got {self.max_retries}")
