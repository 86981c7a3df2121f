"""
HTTP transport for the futures API.

Sends an encoded payload and hands back the raw status and body. Signed
payloads are passed as a callable and rebuilt for every retry.
Classification of the body happens in ``fapi_client.classifier``; this
module only turns connection-level failures into TransportError.
"""

import asyncio
import logging
from typing import Callable, Dict, Optional, Tuple, Union

import aiohttp
from aiohttp import ClientSession
from yarl import URL

from .constants import FORM_CONTENT_TYPE
from .errors import TransportError
from .models.config import RetryConfig

logger = logging.getLogger(__name__)

# Only these are safe to resend after a connection failure.
IDEMPOTENT_METHODS = ("GET",)
QUERY_METHODS = ("GET", "DELETE")


class HttpTransport:
    """Sends requests to the exchange and returns raw responses."""

    def __init__(self, base_url: str, retry_config: Optional[RetryConfig] = None):
        """Initialize transport with the API base URL."""
        self._base_url = base_url.rstrip("/")
        self._retry_config = retry_config or RetryConfig()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def send(
        self,
        session: ClientSession,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        payload: Union[str, Callable[[], str], None] = None,
    ) -> Tuple[int, bytes]:
        """
        Send one request.

        GET and DELETE carry the payload as the query string; POST and PUT
        carry it as a form-encoded body.

        Args:
            payload: Encoded parameters, or a callable producing them. A
                callable is invoked once per attempt, so signed requests
                get a fresh timestamp and signature on every retry.

        Returns:
            (HTTP status, raw body bytes)

        Raises:
            TransportError: On connection, I/O or timeout failure
        """
        method = method.upper()
        attempts = self._retry_config.max_retries + 1 if method in IDEMPOTENT_METHODS else 1
        for attempt in range(attempts):
            encoded = payload() if callable(payload) else payload
            url, request_headers, data = self._prepare(method, path, headers, encoded)
            try:
                return await self._send_once(session, method, url, request_headers, data)
            except TransportError as e:
                if attempt == attempts - 1:
                    raise

                delay = self._retry_config.retry_delay * (
                    self._retry_config.backoff_factor ** attempt
                )
                logger.warning(
                    f"{method} {path} failed ({e}), retrying in {delay:.1f}s "
                    f"(attempt {attempt + 1}/{attempts - 1})"
                )
                await asyncio.sleep(delay)

        raise TransportError(f"{method} {path} was not attempted")

    def _prepare(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]],
        payload: Optional[str],
    ) -> Tuple[str, Dict[str, str], Optional[str]]:
        request_headers = dict(headers or {})
        url = f"{self._base_url}{path}"
        if method in QUERY_METHODS:
            if payload:
                url = f"{url}?{payload}"
            return url, request_headers, None
        if payload:
            request_headers["Content-Type"] = FORM_CONTENT_TYPE
            return url, request_headers, payload
        return url, request_headers, None

    async def _send_once(
        self,
        session: ClientSession,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[str],
    ) -> Tuple[int, bytes]:
        # encoded=True keeps the signed query string byte-for-byte
        target = URL(url, encoded=True)
        try:
            async with session.request(method, target, headers=headers, data=data) as response:
                body = await response.read()
                logger.debug(f"{method} {target.path} -> {response.status} ({len(body)} bytes)")
                return response.status, body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {target.path} failed: {e!r}", cause=e) from e
