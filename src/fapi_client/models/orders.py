"""
Order-related models for the futures client.

Immutable data structures for order intents and order responses.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..codec import (
    get_bool,
    get_float,
    get_int,
    get_optional_float,
    get_str,
)
from .enums import OrderSide, OrderType, PositionSide, TimeInForce, WorkingType


@dataclass(frozen=True)
class OrderIntent:
    """What the caller wants to place. Unset fields never reach the wire."""
    symbol: str
    side: OrderSide
    order_type: OrderType
    position_side: Optional[PositionSide] = None
    time_in_force: Optional[TimeInForce] = None
    quantity: Optional[float] = None
    reduce_only: Optional[bool] = None
    price: Optional[float] = None
    stop_price: Optional[float] = None
    close_position: Optional[bool] = None  # Close-All (exchange rejects it with quantity)
    activation_price: Optional[float] = None  # TRAILING_STOP_MARKET only
    callback_rate: Optional[float] = None  # TRAILING_STOP_MARKET only
    working_type: Optional[WorkingType] = None
    price_protect: Optional[float] = None  # sent as a flag: non-zero means TRUE


def _order_core(data: Dict[str, Any]) -> Dict[str, Any]:
    """Fields shared by every order-shaped response."""
    return dict(
        client_order_id=get_str(data, "clientOrderId"),
        cum_quote=get_float(data, "cumQuote"),
        executed_qty=get_float(data, "executedQty"),
        order_id=get_int(data, "orderId"),
        orig_qty=get_float(data, "origQty"),
        reduce_only=get_bool(data, "reduceOnly"),
        side=get_str(data, "side"),
        position_side=get_str(data, "positionSide"),
        status=get_str(data, "status"),
        close_position=get_bool(data, "closePosition"),
        symbol=get_str(data, "symbol"),
        time_in_force=get_str(data, "timeInForce"),
        order_type=get_str(data, "type"),
        orig_type=get_str(data, "origType"),
        update_time=get_int(data, "updateTime"),
        working_type=get_str(data, "workingType"),
        price_protect=get_bool(data, "priceProtect"),
    )


@dataclass(frozen=True)
class Order:
    """Order as returned by the query endpoints (order, openOrders, allOrders)."""
    client_order_id: str
    cum_qty: float
    cum_quote: float
    executed_qty: float
    order_id: int
    avg_price: float
    orig_qty: float
    price: float
    side: str
    reduce_only: bool
    position_side: str
    status: str
    stop_price: float
    close_position: bool
    symbol: str
    time_in_force: str
    order_type: str
    orig_type: str
    activation_price: float
    price_rate: float
    update_time: int
    working_type: str
    price_protect: bool

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "Order":
        # Query endpoints omit these for order types that do not use them;
        # the exchange documents 0 as their value in that case.
        return cls(
            cum_qty=get_optional_float(data, "cumQty", default=0.0),
            avg_price=get_float(data, "avgPrice"),
            price=get_float(data, "price"),
            stop_price=get_optional_float(data, "stopPrice", default=0.0),
            activation_price=get_optional_float(data, "activationPrice", default=0.0),
            price_rate=get_optional_float(data, "priceRate", default=0.0),
            **_order_core(data),
        )


@dataclass(frozen=True)
class Transaction:
    """Acknowledgement of a newly placed order."""
    client_order_id: str
    cum_qty: float
    cum_quote: float
    executed_qty: float
    order_id: int
    avg_price: float
    orig_qty: float
    reduce_only: bool
    side: str
    position_side: str
    status: str
    stop_price: float
    close_position: bool
    symbol: str
    time_in_force: str
    order_type: str
    orig_type: str
    activate_price: Optional[float]
    price_rate: Optional[float]
    update_time: int
    working_type: str
    price_protect: bool
    price: Optional[float] = None

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "Transaction":
        return cls(
            cum_qty=get_float(data, "cumQty"),
            avg_price=get_float(data, "avgPrice"),
            stop_price=get_float(data, "stopPrice"),
            activate_price=get_optional_float(data, "activatePrice"),
            price_rate=get_optional_float(data, "priceRate"),
            price=get_optional_float(data, "price"),
            **_order_core(data),
        )


@dataclass(frozen=True)
class CanceledOrder:
    """Order state returned by a cancel request."""
    client_order_id: str
    cum_qty: float
    cum_quote: float
    executed_qty: float
    order_id: int
    orig_qty: float
    orig_type: str
    price: float
    reduce_only: bool
    side: str
    position_side: str
    status: str
    stop_price: float
    close_position: bool
    symbol: str
    time_in_force: str
    order_type: str
    activate_price: Optional[float]
    price_rate: Optional[float]
    update_time: int
    working_type: str
    price_protect: bool

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "CanceledOrder":
        return cls(
            cum_qty=get_float(data, "cumQty"),
            price=get_float(data, "price"),
            stop_price=get_float(data, "stopPrice"),
            activate_price=get_optional_float(data, "activatePrice"),
            price_rate=get_optional_float(data, "priceRate"),
            **_order_core(data),
        )


@dataclass(frozen=True)
class ChangeLeverageResponse:
    """Result of changing a symbol's initial leverage."""
    leverage: int
    max_notional_value: float
    symbol: str

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "ChangeLeverageResponse":
        return cls(
            leverage=get_int(data, "leverage"),
            max_notional_value=get_float(data, "maxNotionalValue"),
            symbol=get_str(data, "symbol"),
        )
