"""
Data models for the futures client.

This package contains the data structures used throughout the client:
wire enums, order intents, and immutable response and event schemas.
"""

from .config import ConnectionConfig, RetryConfig
from .enums import (
    OrderSide,
    OrderType,
    PositionSide,
    TimeInForce,
    WireEnum,
    WorkingType,
)
from .orders import (
    CanceledOrder,
    ChangeLeverageResponse,
    Order,
    OrderIntent,
    Transaction,
)
from .account import AccountBalance, Position
from .market import KlineSummary, MarkPrice, OpenInterest, ServerTime
from .events import (
    AccountUpdateEvent,
    EventBalanceUpdate,
    EventPositionUpdate,
    LeverageUpdateEvent,
    ListenKeyExpiredEvent,
    MarginCallEvent,
    MarginCallPosition,
    MultiAssetsMarginUpdateEvent,
    OrderTradeEvent,
    OrderUpdate,
)

__all__ = [
    # Configuration
    "ConnectionConfig",
    "RetryConfig",
    # Enums
    "WireEnum",
    "OrderSide",
    "PositionSide",
    "OrderType",
    "TimeInForce",
    "WorkingType",
    # Orders
    "OrderIntent",
    "Order",
    "Transaction",
    "CanceledOrder",
    "ChangeLeverageResponse",
    # Account
    "Position",
    "AccountBalance",
    # Market
    "KlineSummary",
    "MarkPrice",
    "OpenInterest",
    "ServerTime",
    # Stream events
    "OrderTradeEvent",
    "OrderUpdate",
    "AccountUpdateEvent",
    "EventBalanceUpdate",
    "EventPositionUpdate",
    "MarginCallEvent",
    "MarginCallPosition",
    "LeverageUpdateEvent",
    "MultiAssetsMarginUpdateEvent",
    "ListenKeyExpiredEvent",
]
