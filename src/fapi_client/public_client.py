# -*- coding: utf-8 -*-
"""
Public market data client.

Unauthenticated endpoints; no API key or signature is sent.
"""

import logging
from typing import Any, Callable, List, Optional, TypeVar
from urllib.parse import urlencode

from aiohttp import ClientSession, ClientTimeout

from .classifier import classify_response, decode_list
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    KLINES_ENDPOINT,
    MARK_PRICE_ENDPOINT,
    OPEN_INTEREST_ENDPOINT,
    SERVER_TIME_ENDPOINT,
)
from .errors import ConfigurationError
from .http_client import HttpTransport
from .models.config import RetryConfig
from .models.market import KlineSummary, MarkPrice, OpenInterest, ServerTime
from .params import ParameterSet, kline_params, symbol_params

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PublicClient:
    """Client for public market data endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: Optional[RetryConfig] = None,
    ):
        if not isinstance(base_url, str) or not base_url.startswith(("http://", "https://")):
            raise ConfigurationError("Base URL must be a valid HTTP/HTTPS URL")

        self._transport = HttpTransport(base_url, retry_config)
        # Session is created lazily when needed
        self._session: Optional[ClientSession] = None
        self._timeout = ClientTimeout(total=timeout)

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    async def _get_session(self) -> ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=self._timeout)
        return self._session

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _get(self, path: str, params: ParameterSet, decoder: Callable[[Any], T]) -> T:
        session = await self._get_session()
        payload = urlencode(list(params.items())) if params else None
        status, body = await self._transport.send(session, "GET", path, payload=payload)
        return classify_response(status, body, decoder)

    async def get_server_time(self) -> ServerTime:
        return await self._get(SERVER_TIME_ENDPOINT, ParameterSet(), ServerTime.from_wire)

    async def get_klines(
        self,
        symbol: str,
        interval: str,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[KlineSummary]:
        """
        Get candlesticks for a symbol.

        Raises:
            FieldMissingError: If a kline row lacks a column or has a bad value in it
        """
        params = kline_params(symbol, interval, start_time, end_time, limit)
        return await self._get(KLINES_ENDPOINT, params, decode_list(KlineSummary.from_row))

    async def get_mark_price(self, symbol: str) -> MarkPrice:
        return await self._get(MARK_PRICE_ENDPOINT, symbol_params(symbol), MarkPrice.from_wire)

    async def get_open_interest(self, symbol: str) -> OpenInterest:
        return await self._get(OPEN_INTEREST_ENDPOINT, symbol_params(symbol), OpenInterest.from_wire)
