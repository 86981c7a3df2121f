"""
Futures account client.

Coordinates the request pipeline for authenticated endpoints:
intent -> ParameterSet (params.py) -> SignedRequest (auth.py)
-> HttpTransport (http_client.py) -> classify_response (classifier.py).
"""

import logging
from typing import Any, Callable, List, Optional, TypeVar, Union

from .auth import ApiCredentials, RequestSigner
from .classifier import classify_response, decode_list, expect_empty
from .codec import get_str
from .constants import (
    ALL_OPEN_ORDERS_ENDPOINT,
    ALL_ORDERS_ENDPOINT,
    BALANCE_ENDPOINT,
    LEVERAGE_ENDPOINT,
    LISTEN_KEY_ENDPOINT,
    OPEN_ORDERS_ENDPOINT,
    ORDER_ENDPOINT,
    POSITION_RISK_ENDPOINT,
    POSITION_SIDE_ENDPOINT,
)
from .http_client import HttpTransport
from .models import (
    AccountBalance,
    CanceledOrder,
    ChangeLeverageResponse,
    ConnectionConfig,
    Order,
    OrderIntent,
    OrderSide,
    OrderType,
    Position,
    RetryConfig,
    TimeInForce,
    Transaction,
)
from .params import (
    ParameterSet,
    all_orders_params,
    build_order_params,
    leverage_params,
    order_id_params,
    position_mode_params,
    symbol_params,
)
from .session_manager import SessionManager
from .user_stream import UserDataStream

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FuturesClient:
    """
    Client for authenticated USD-M futures endpoints.

    Every method raises exactly one of the ``fapi_client.errors`` classes
    on failure. Nothing is retried here; the transport resends GET
    requests on connection failures only.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        retry_config: Optional[RetryConfig] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """Initialize the client; invalid credentials fail here, before any I/O."""
        self._config = config
        self._credentials = ApiCredentials(api_key=config.api_key, api_secret=config.api_secret)
        self._signer = RequestSigner(self._credentials, config.recv_window, clock=clock)
        self._headers = self._signer.get_auth_headers()
        self._session_manager = SessionManager(config)
        self._transport = HttpTransport(config.base_url, retry_config)

    @classmethod
    def from_env(cls, retry_config: Optional[RetryConfig] = None) -> "FuturesClient":
        """Create client from FAPI_* environment variables."""
        return cls(ConnectionConfig.from_env(), retry_config)

    async def close(self) -> None:
        await self._session_manager.close_session()

    async def __aenter__(self) -> "FuturesClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _signed(
        self,
        method: str,
        path: str,
        params: ParameterSet,
        decoder: Callable[[Any], T],
    ) -> T:
        # Signed per attempt: a retried request must not reuse a stale timestamp.
        return await self._call(method, path, lambda: self._signer.sign(params).payload, decoder)

    async def _call(
        self,
        method: str,
        path: str,
        payload: Union[str, Callable[[], str], None],
        decoder: Callable[[Any], T],
    ) -> T:
        session = await self._session_manager.create_session()
        status, body = await self._transport.send(
            session, method, path, headers=self._headers, payload=payload
        )
        return classify_response(status, body, decoder)

    # Orders
    async def limit_buy(
        self, symbol: str, qty: float, price: float, time_in_force: TimeInForce
    ) -> Transaction:
        return await self.custom_order(OrderIntent(
            symbol=symbol,
            side=OrderSide.BUY,
            order_type=OrderType.LIMIT,
            time_in_force=time_in_force,
            quantity=qty,
            price=price,
        ))

    async def limit_sell(
        self, symbol: str, qty: float, price: float, time_in_force: TimeInForce
    ) -> Transaction:
        return await self.custom_order(OrderIntent(
            symbol=symbol,
            side=OrderSide.SELL,
            order_type=OrderType.LIMIT,
            time_in_force=time_in_force,
            quantity=qty,
            price=price,
        ))

    async def market_buy(self, symbol: str, qty: float) -> Transaction:
        return await self.custom_order(OrderIntent(
            symbol=symbol, side=OrderSide.BUY, order_type=OrderType.MARKET, quantity=qty
        ))

    async def market_sell(self, symbol: str, qty: float) -> Transaction:
        return await self.custom_order(OrderIntent(
            symbol=symbol, side=OrderSide.SELL, order_type=OrderType.MARKET, quantity=qty
        ))

    async def stop_market_close_buy(self, symbol: str, stop_price: float) -> Transaction:
        """Close a short position with a STOP_MARKET Close-All order."""
        return await self.custom_order(OrderIntent(
            symbol=symbol,
            side=OrderSide.BUY,
            order_type=OrderType.STOP_MARKET,
            stop_price=stop_price,
            close_position=True,
        ))

    async def stop_market_close_sell(self, symbol: str, stop_price: float) -> Transaction:
        """Close a long position with a STOP_MARKET Close-All order."""
        return await self.custom_order(OrderIntent(
            symbol=symbol,
            side=OrderSide.SELL,
            order_type=OrderType.STOP_MARKET,
            stop_price=stop_price,
            close_position=True,
        ))

    async def custom_order(self, intent: OrderIntent) -> Transaction:
        """Place any order the intent describes."""
        params = build_order_params(intent)
        logger.debug(f"Placing {intent.order_type.value} {intent.side.value} order on {intent.symbol}")
        return await self._signed("POST", ORDER_ENDPOINT, params, Transaction.from_wire)

    async def get_order(self, symbol: str, order_id: int) -> Order:
        return await self._signed(
            "GET", ORDER_ENDPOINT, order_id_params(symbol, order_id), Order.from_wire
        )

    async def cancel_order(self, symbol: str, order_id: int) -> CanceledOrder:
        return await self._signed(
            "DELETE", ORDER_ENDPOINT, order_id_params(symbol, order_id), CanceledOrder.from_wire
        )

    async def cancel_all_open_orders(self, symbol: str) -> None:
        await self._signed("DELETE", ALL_OPEN_ORDERS_ENDPOINT, symbol_params(symbol), expect_empty)

    async def get_all_open_orders(self, symbol: str) -> List[Order]:
        return await self._signed(
            "GET", OPEN_ORDERS_ENDPOINT, symbol_params(symbol), decode_list(Order.from_wire)
        )

    async def get_all_open_orders_for_all_symbols(self) -> List[Order]:
        """All open orders on the account. Heavy request weight (40)."""
        return await self._signed(
            "GET", OPEN_ORDERS_ENDPOINT, ParameterSet(), decode_list(Order.from_wire)
        )

    async def get_all_orders(
        self,
        symbol: str,
        from_id: Optional[int] = None,
        start_time: Optional[int] = None,
        end_time: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Order]:
        params = all_orders_params(symbol, from_id, start_time, end_time, limit)
        return await self._signed("GET", ALL_ORDERS_ENDPOINT, params, decode_list(Order.from_wire))

    # Account
    async def position_information(self, symbol: str) -> List[Position]:
        return await self._signed(
            "GET", POSITION_RISK_ENDPOINT, symbol_params(symbol), decode_list(Position.from_wire)
        )

    async def get_all_positions(self) -> List[Position]:
        return await self._signed(
            "GET", POSITION_RISK_ENDPOINT, ParameterSet(), decode_list(Position.from_wire)
        )

    async def account_balance(self) -> List[AccountBalance]:
        return await self._signed(
            "GET", BALANCE_ENDPOINT, ParameterSet(), decode_list(AccountBalance.from_wire)
        )

    async def change_initial_leverage(self, symbol: str, leverage: int) -> ChangeLeverageResponse:
        return await self._signed(
            "POST",
            LEVERAGE_ENDPOINT,
            leverage_params(symbol, leverage),
            ChangeLeverageResponse.from_wire,
        )

    async def change_position_mode(self, dual_side_position: bool) -> None:
        """Switch between Hedge Mode (True) and One-way Mode (False)."""
        await self._signed(
            "POST", POSITION_SIDE_ENDPOINT, position_mode_params(dual_side_position), expect_empty
        )

    # User data stream
    async def start_user_stream(self) -> str:
        """Create a listen key for the user data stream."""
        listen_key = await self._call(
            "POST", LISTEN_KEY_ENDPOINT, None, lambda data: get_str(data, "listenKey")
        )
        logger.info(f"Created listen key: {listen_key[:8]}...")
        return listen_key

    async def keep_alive_user_stream(self) -> None:
        """Extend the current listen key's validity (every 60 minutes at the latest)."""
        await self._call("PUT", LISTEN_KEY_ENDPOINT, None, expect_empty)

    async def close_user_stream(self) -> None:
        await self._call("DELETE", LISTEN_KEY_ENDPOINT, None, expect_empty)

    async def user_data_stream(self, listen_key: str) -> UserDataStream:
        """Unconnected stream for ``listen_key``, sharing this client's HTTP session."""
        session = await self._session_manager.create_session()
        return UserDataStream(session, listen_key, self._config.stream_url)
