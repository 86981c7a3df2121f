"""
Configuration models for the futures client.

Immutable configuration structures, validated on construction so that bad
settings fail before any network call.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from ..constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RECV_WINDOW,
    DEFAULT_RETRY_DELAY,
    DEFAULT_STREAM_URL,
    DEFAULT_TIMEOUT,
)
from ..errors import ConfigurationError


@dataclass(frozen=True)
class ConnectionConfig:
    """Configuration for the client connection."""
    api_key: str
    api_secret: str
    base_url: str = DEFAULT_BASE_URL
    stream_url: str = DEFAULT_STREAM_URL
    timeout: float = DEFAULT_TIMEOUT
    recv_window: int = DEFAULT_RECV_WINDOW

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_credential("API key", self.api_key)
        self._validate_credential("API secret", self.api_secret)

        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"Base URL must be an HTTP/HTTPS URL: {self.base_url!r}")
        if not self.stream_url.startswith(("ws://", "wss://")):
            raise ConfigurationError(f"Stream URL must be a WS/WSS URL: {self.stream_url!r}")
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")
        if self.recv_window < 0:
            raise ConfigurationError(f"recv_window must be non-negative, got {self.recv_window}")

    @staticmethod
    def _validate_credential(name: str, value: str):
        if not value:
            raise ConfigurationError(f"{name} cannot be empty")

        if len(value) > 128:
            raise ConfigurationError(
                f"{name} appears to be too long (expected max 128 characters, got {len(value)})"
            )

    @classmethod
    def from_env(cls) -> "ConnectionConfig":
        """Create configuration from environment variables (and a .env file)."""
        load_dotenv()

        recv_window = os.getenv("FAPI_RECV_WINDOW", str(DEFAULT_RECV_WINDOW))
        try:
            recv_window_ms = int(recv_window)
        except ValueError:
            raise ConfigurationError(f"FAPI_RECV_WINDOW must be an integer, got {recv_window!r}") from None

        return cls(
            api_key=os.getenv("FAPI_API_KEY", ""),
            api_secret=os.getenv("FAPI_API_SECRET", ""),
            base_url=os.getenv("FAPI_BASE_URL", DEFAULT_BASE_URL),
            stream_url=os.getenv("FAPI_STREAM_URL", DEFAULT_STREAM_URL),
            recv_window=recv_window_ms,
        )


@dataclass(frozen=True)
class RetryConfig:
    """Transport retry behavior for idempotent (GET) requests."""
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    backoff_factor: float = 2.0
