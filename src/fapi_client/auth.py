"""
Authentication and signing utilities for the futures API.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional
import hashlib
import hmac
import time
from urllib.parse import urlencode

from .constants import API_KEY_HEADER, DEFAULT_RECV_WINDOW
from .errors import ConfigurationError, TimestampError
from .params import ParameterSet


@dataclass(frozen=True)
class ApiCredentials:
    """Container for API credentials"""
    api_key: str
    api_secret: str

    def __repr__(self) -> str:
        return f"ApiCredentials(api_key={self.api_key[:6]!r}..., api_secret=***)"


@dataclass(frozen=True)
class SignedRequest:
    """Parameters with timestamp, recvWindow and signature applied."""
    params: ParameterSet
    query_string: str
    signature: str

    @property
    def payload(self) -> str:
        """Query string or form body to send; the signature is always last."""
        return f"{self.query_string}&signature={self.signature}"


def _system_clock_ms() -> int:
    return int(time.time() * 1000)


class RequestSigner:
    """
    Handles request signing for futures API authentication.

    Uses Binance-style HMAC-SHA256 signing for authenticated requests.
    Holds no per-request state, so one signer can be shared freely.
    """

    def __init__(
        self,
        credentials: ApiCredentials,
        recv_window: int = DEFAULT_RECV_WINDOW,
        clock: Optional[Callable[[], int]] = None,
        digestmod=hashlib.sha256,
    ):
        """
        Initialize the signer with API credentials.

        Args:
            credentials: API credentials containing key and secret
            recv_window: Receive window in milliseconds; 0 leaves it off the request
            clock: Returns the current time in milliseconds (default: system clock)
            digestmod: Hash constructor for the HMAC (default: SHA-256)

        Raises:
            ConfigurationError: If the API secret is missing or recv_window is negative
        """
        if not credentials.api_secret:
            raise ConfigurationError("API secret is required to sign requests")
        if recv_window < 0:
            raise ConfigurationError(f"recv_window must be non-negative, got {recv_window}")

        self.credentials = credentials
        self.recv_window = recv_window
        self._clock = clock or _system_clock_ms
        self._digestmod = digestmod

    def sign(self, params: ParameterSet, timestamp: Optional[int] = None) -> SignedRequest:
        """
        Add timestamp, receive window and signature to request parameters.

        Args:
            params: Request parameters
            timestamp: Milliseconds since epoch; read from the clock when omitted

        Returns:
            SignedRequest ready to hand to the transport

        Raises:
            TimestampError: If the clock cannot produce a timestamp
        """
        if timestamp is None:
            timestamp = self._now()

        extra = {"timestamp": str(timestamp)}
        if self.recv_window > 0:
            extra["recvWindow"] = str(self.recv_window)
        signed_params = params.with_fields(extra)

        query_string = urlencode(list(signed_params.items()))
        return SignedRequest(
            params=signed_params,
            query_string=query_string,
            signature=self._generate_signature(query_string),
        )

    def _now(self) -> int:
        try:
            timestamp = int(self._clock())
        except (OSError, OverflowError, TypeError, ValueError) as e:
            raise TimestampError(f"Failed to read the clock: {e}") from e
        if timestamp < 0:
            raise TimestampError(f"Clock returned a time before the epoch: {timestamp}")
        return timestamp

    def _generate_signature(self, query_string: str) -> str:
        """
        Generate the HMAC signature for the exact query string bytes.

        Returns:
            Hex-encoded HMAC signature
        """
        return hmac.new(
            self.credentials.api_secret.encode("utf-8"),
            query_string.encode("utf-8"),
            self._digestmod,
        ).hexdigest()

    def get_auth_headers(self) -> Dict[str, str]:
        """
        Get authentication headers for API requests.

        Raises:
            ConfigurationError: If the API key is empty or not a valid header value
        """
        return auth_headers(self.credentials.api_key)


def auth_headers(api_key: str) -> Dict[str, str]:
    """API-key header for signed and user-stream endpoints."""
    if not api_key:
        raise ConfigurationError("API key is required")
    if any(ch in api_key for ch in "\r\n\0") or not api_key.isprintable():
        raise ConfigurationError("API key is not a valid header value")
    return {API_KEY_HEADER: api_key}
