"""
Wire enumerations for Binance-style futures endpoints.

Each member's value is the single string the exchange uses for it, so the
enum itself is the mapping table in both directions.
"""

from enum import Enum


class WireEnum(Enum):
    """Enum whose value is its wire string."""

    @classmethod
    def parse(cls, text: str) -> "WireEnum":
        """Parse a wire string, failing on anything unrecognized."""
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Invalid {cls.__name__}: '{text}'")

    def __str__(self) -> str:
        return self.value


class OrderSide(WireEnum):
    BUY = "BUY"
    SELL = "SELL"


class PositionSide(WireEnum):
    BOTH = "BOTH"
    LONG = "LONG"
    SHORT = "SHORT"


class OrderType(WireEnum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP = "STOP"
    STOP_MARKET = "STOP_MARKET"
    TAKE_PROFIT = "TAKE_PROFIT"
    TAKE_PROFIT_MARKET = "TAKE_PROFIT_MARKET"
    TRAILING_STOP_MARKET = "TRAILING_STOP_MARKET"


class TimeInForce(WireEnum):
    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"
    GTX = "GTX"  # post-only


class WorkingType(WireEnum):
    MARK_PRICE = "MARK_PRICE"
    CONTRACT_PRICE = "CONTRACT_PRICE"
