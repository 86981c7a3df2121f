"""
User data stream event models.

Each event class decodes its own payload from the short wire keys the
exchange uses on the stream. Dispatch on the "e" field lives in
``fapi_client.events``.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..codec import (
    get_bool,
    get_float,
    get_int,
    get_list,
    get_object,
    get_optional_bool,
    get_optional_float,
    get_optional_str,
    get_str,
)


@dataclass(frozen=True)
class OrderUpdate:
    """Order payload ("o") of an ORDER_TRADE_UPDATE event."""
    symbol: str
    new_client_order_id: str
    side: str
    order_type: str
    time_in_force: str
    qty: float
    price: float
    average_price: float
    stop_price: float
    execution_type: str
    order_status: str
    order_id: int
    qty_last_filled_trade: float
    accumulated_qty_filled_trades: float
    price_last_filled_trade: float
    asset_commissioned: Optional[str]
    commission: Optional[float]
    trade_order_time: int
    trade_id: int
    bids_notional: float
    ask_notional: float
    is_buyer_maker: bool
    is_reduce_only: bool
    stop_price_working_type: str
    original_order_type: str
    position_side: str
    close_all: Optional[bool]
    # only present on trailing stop orders
    activation_price: Optional[float]
    callback_rate: Optional[float]
    # documented as "ignore", kept exactly as received
    pp_ignore: Any = None
    si_ignore: Any = None
    ss_ignore: Any = None
    rp_ignore: Any = None

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "OrderUpdate":
        return cls(
            symbol=get_str(data, "s"),
            new_client_order_id=get_str(data, "c"),
            side=get_str(data, "S"),
            order_type=get_str(data, "o"),
            time_in_force=get_str(data, "f"),
            qty=get_float(data, "q"),
            price=get_float(data, "p"),
            average_price=get_float(data, "ap"),
            stop_price=get_float(data, "sp"),
            execution_type=get_str(data, "x"),
            order_status=get_str(data, "X"),
            order_id=get_int(data, "i"),
            qty_last_filled_trade=get_float(data, "l"),
            accumulated_qty_filled_trades=get_float(data, "z"),
            price_last_filled_trade=get_float(data, "L"),
            asset_commissioned=get_optional_str(data, "N"),
            commission=get_optional_float(data, "n"),
            trade_order_time=get_int(data, "T"),
            trade_id=get_int(data, "t"),
            bids_notional=get_float(data, "b"),
            ask_notional=get_float(data, "a"),
            is_buyer_maker=get_bool(data, "m"),
            is_reduce_only=get_bool(data, "R"),
            stop_price_working_type=get_str(data, "wt"),
            original_order_type=get_str(data, "ot"),
            position_side=get_str(data, "ps"),
            close_all=get_optional_bool(data, "cp"),
            activation_price=get_optional_float(data, "AP"),
            callback_rate=get_optional_float(data, "cr"),
            pp_ignore=data.get("pP"),
            si_ignore=data.get("si"),
            ss_ignore=data.get("ss"),
            rp_ignore=data.get("rp"),
        )


@dataclass(frozen=True)
class OrderTradeEvent:
    event_time: int
    transaction_time: int
    order: OrderUpdate

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "OrderTradeEvent":
        return cls(
            event_time=get_int(data, "E"),
            transaction_time=get_int(data, "T"),
            order=OrderUpdate.from_wire(get_object(data, "o")),
        )


@dataclass(frozen=True)
class EventBalanceUpdate:
    asset: str
    wallet_balance: float
    cross_wallet_balance: float
    balance_change: float

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "EventBalanceUpdate":
        return cls(
            asset=get_str(data, "a"),
            wallet_balance=get_float(data, "wb"),
            cross_wallet_balance=get_float(data, "cw"),
            balance_change=get_float(data, "bc"),
        )


@dataclass(frozen=True)
class EventPositionUpdate:
    symbol: str
    position_amount: float
    entry_price: float
    accumulated_realized: float
    unrealized_profit: float
    margin_type: str
    isolated_wallet: float
    position_side: str
    margin_asset: Optional[str] = None

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "EventPositionUpdate":
        return cls(
            symbol=get_str(data, "s"),
            position_amount=get_float(data, "pa"),
            entry_price=get_float(data, "ep"),
            accumulated_realized=get_float(data, "cr"),
            unrealized_profit=get_float(data, "up"),
            margin_type=get_str(data, "mt"),
            isolated_wallet=get_float(data, "iw"),
            position_side=get_str(data, "ps"),
            margin_asset=get_optional_str(data, "ma"),
        )


@dataclass(frozen=True)
class AccountUpdateEvent:
    event_time: int
    transaction_time: int
    reason_type: str
    balances: List[EventBalanceUpdate]
    positions: List[EventPositionUpdate]

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "AccountUpdateEvent":
        update = get_object(data, "a")
        return cls(
            event_time=get_int(data, "E"),
            transaction_time=get_int(data, "T"),
            reason_type=get_str(update, "m"),
            balances=[EventBalanceUpdate.from_wire(b) for b in get_list(update, "B")],
            positions=[EventPositionUpdate.from_wire(p) for p in get_list(update, "P")],
        )


@dataclass(frozen=True)
class MarginCallPosition:
    symbol: str
    position_side: str
    position_amount: float
    margin_type: str
    isolated_wallet: float
    mark_price: float
    unrealized_profit: float
    maintenance_margin: float

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "MarginCallPosition":
        return cls(
            symbol=get_str(data, "s"),
            position_side=get_str(data, "ps"),
            position_amount=get_float(data, "pa"),
            margin_type=get_str(data, "mt"),
            isolated_wallet=get_float(data, "iw"),
            mark_price=get_float(data, "mp"),
            unrealized_profit=get_float(data, "up"),
            maintenance_margin=get_float(data, "mm"),
        )


@dataclass(frozen=True)
class MarginCallEvent:
    event_time: int
    cross_wallet_balance: float
    positions: List[MarginCallPosition]

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "MarginCallEvent":
        return cls(
            event_time=get_int(data, "E"),
            cross_wallet_balance=get_float(data, "cw"),
            positions=[MarginCallPosition.from_wire(p) for p in get_list(data, "p")],
        )


@dataclass(frozen=True)
class LeverageUpdateEvent:
    event_time: int
    transaction_time: int
    symbol: str
    leverage: int

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "LeverageUpdateEvent":
        update = get_object(data, "ac")
        return cls(
            event_time=get_int(data, "E"),
            transaction_time=get_int(data, "T"),
            symbol=get_str(update, "s"),
            leverage=get_int(update, "l"),
        )


@dataclass(frozen=True)
class MultiAssetsMarginUpdateEvent:
    event_time: int
    transaction_time: int
    enabled: bool

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "MultiAssetsMarginUpdateEvent":
        update = get_object(data, "ai")
        return cls(
            event_time=get_int(data, "E"),
            transaction_time=get_int(data, "T"),
            enabled=get_bool(update, "j"),
        )


@dataclass(frozen=True)
class ListenKeyExpiredEvent:
    event_time: int
    listen_key: Optional[str] = None

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "ListenKeyExpiredEvent":
        return cls(
            event_time=get_int(data, "E"),
            listen_key=get_optional_str(data, "listenKey"),
        )
