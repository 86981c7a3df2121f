# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing the futures client.
"""

import json
import pytest
from typing import Any, Dict
from unittest.mock import Mock, AsyncMock

from fapi_client.auth import ApiCredentials, RequestSigner
from fapi_client.models import ConnectionConfig, RetryConfig

FIXED_TIMESTAMP = 1499827319559
TEST_API_KEY = "vmPUZE6mv9SD5VNHk4HlWFsOr6aKE2zvsw0MuIgwCIPy6utIco14y7Ju91duEh8A"
TEST_API_SECRET = "NhqPtmdSJYdKjVHjA7PZj4Mge3R5YNiP1e3UZjInClVN65XAbvqqM6A7H5fATj0j"


class FakeResponse:
    """Stand-in for aiohttp's response context manager."""

    def __init__(self, status: int, body: bytes):
        self.status = status
        self._body = body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


def as_body(data: Any) -> bytes:
    return json.dumps(data).encode("utf-8")


@pytest.fixture
def credentials() -> ApiCredentials:
    return ApiCredentials(api_key=TEST_API_KEY, api_secret=TEST_API_SECRET)


@pytest.fixture
def signer(credentials) -> RequestSigner:
    """Signer with a frozen clock."""
    return RequestSigner(credentials, recv_window=5000, clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig(
        api_key=TEST_API_KEY,
        api_secret=TEST_API_SECRET,
        base_url="https://test-api.example.com",
    )


@pytest.fixture
def retry_config() -> RetryConfig:
    return RetryConfig(max_retries=2, retry_delay=0.0, backoff_factor=1.0)


@pytest.fixture
def mock_client_session():
    """Mock aiohttp ClientSession."""
    import aiohttp

    session = Mock(spec=aiohttp.ClientSession)
    session.request = Mock(return_value=FakeResponse(200, b"{}"))
    session.close = AsyncMock()
    session.closed = False
    return session


# Mock data fixtures
@pytest.fixture
def transaction_response_data() -> Dict[str, Any]:
    """New order acknowledgement."""
    return {
        "clientOrderId": "testOrder",
        "cumQty": "0",
        "cumQuote": "0",
        "executedQty": "0",
        "orderId": 22542179,
        "avgPrice": "0.00000",
        "origQty": "10",
        "price": "0",
        "reduceOnly": False,
        "side": "BUY",
        "positionSide": "SHORT",
        "status": "NEW",
        "stopPrice": "9300",
        "closePosition": False,
        "symbol": "BTCUSDT",
        "timeInForce": "GTC",
        "type": "TRAILING_STOP_MARKET",
        "origType": "TRAILING_STOP_MARKET",
        "activatePrice": "9020",
        "priceRate": "0.3",
        "updateTime": 1566818724722,
        "workingType": "CONTRACT_PRICE",
        "priceProtect": False,
    }


@pytest.fixture
def order_response_data() -> Dict[str, Any]:
    """Order as returned by GET /fapi/v1/order for a plain LIMIT order."""
    return {
        "avgPrice": "0.00000",
        "clientOrderId": "abc",
        "cumQuote": "0",
        "executedQty": "0",
        "orderId": 1917641,
        "origQty": "0.40",
        "origType": "LIMIT",
        "price": "20000",
        "reduceOnly": False,
        "side": "BUY",
        "positionSide": "BOTH",
        "status": "NEW",
        "closePosition": False,
        "symbol": "BTCUSDT",
        "time": 1579276756075,
        "timeInForce": "GTC",
        "type": "LIMIT",
        "updateTime": 1579276756075,
        "workingType": "CONTRACT_PRICE",
        "priceProtect": False,
    }


@pytest.fixture
def order_trade_update_frame() -> Dict[str, Any]:
    return {
        "e": "ORDER_TRADE_UPDATE",
        "E": 1568879465651,
        "T": 1568879465650,
        "o": {
            "s": "BTCUSDT",
            "c": "TEST",
            "S": "SELL",
            "o": "TRAILING_STOP_MARKET",
            "f": "GTC",
            "q": "0.001",
            "p": "0",
            "ap": "0",
            "sp": "7103.04",
            "x": "NEW",
            "X": "NEW",
            "i": 8886774,
            "l": "0",
            "z": "0",
            "L": "0",
            "N": "USDT",
            "n": "0",
            "T": 1568879465650,
            "t": 0,
            "b": "0",
            "a": "9.91",
            "m": False,
            "R": False,
            "wt": "CONTRACT_PRICE",
            "ot": "TRAILING_STOP_MARKET",
            "ps": "LONG",
            "cp": False,
            "AP": "7476.89",
            "cr": "5.0",
            "pP": False,
            "si": 0,
            "ss": 0,
            "rp": "0",
        },
    }


@pytest.fixture
def account_update_frame() -> Dict[str, Any]:
    return {
        "e": "ACCOUNT_UPDATE",
        "E": 1564745798939,
        "T": 1564745798938,
        "a": {
            "m": "ORDER",
            "B": [
                {"a": "USDT", "wb": "122624.12345678", "cw": "100.12345678", "bc": "50.12345678"},
                {"a": "BUSD", "wb": "1.00000000", "cw": "0.00000000", "bc": "-49.12345678"},
            ],
            "P": [
                {
                    "s": "BTCUSDT",
                    "pa": "0",
                    "ep": "0.00000",
                    "cr": "200",
                    "up": "0",
                    "mt": "isolated",
                    "iw": "0.00000000",
                    "ps": "BOTH",
                },
                {
                    "s": "BTCUSDT",
                    "pa": "20",
                    "ep": "6563.66500",
                    "cr": "0",
                    "up": "2850.21200",
                    "mt": "isolated",
                    "iw": "13200.70726908",
                    "ps": "LONG",
                    "ma": "USDT",
                },
            ],
        },
    }
