"""
Market-related models for the futures client.

Immutable data structures for public market data.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from ..classifier import positional_field
from ..codec import get_float, get_int, get_str, parse_float, parse_int


@dataclass(frozen=True)
class KlineSummary:
    """One candlestick. The exchange sends each kline as a bare array."""
    open_time: int
    open: float
    high: float
    low: float
    close: float
    volume: float
    close_time: int
    quote_asset_volume: float
    number_of_trades: int
    taker_buy_base_asset_volume: float
    taker_buy_quote_asset_volume: float

    @classmethod
    def from_row(cls, row: List[Any]) -> "KlineSummary":
        return cls(
            open_time=positional_field(row, 0, "open_time", parse_int),
            open=positional_field(row, 1, "open", parse_float),
            high=positional_field(row, 2, "high", parse_float),
            low=positional_field(row, 3, "low", parse_float),
            close=positional_field(row, 4, "close", parse_float),
            volume=positional_field(row, 5, "volume", parse_float),
            close_time=positional_field(row, 6, "close_time", parse_int),
            quote_asset_volume=positional_field(row, 7, "quote_asset_volume", parse_float),
            number_of_trades=positional_field(row, 8, "number_of_trades", parse_int),
            taker_buy_base_asset_volume=positional_field(
                row, 9, "taker_buy_base_asset_volume", parse_float
            ),
            taker_buy_quote_asset_volume=positional_field(
                row, 10, "taker_buy_quote_asset_volume", parse_float
            ),
        )


@dataclass(frozen=True)
class MarkPrice:
    """Mark price and funding data (/fapi/v1/premiumIndex)."""
    symbol: str
    mark_price: float
    last_funding_rate: float
    next_funding_time: int
    time: int

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "MarkPrice":
        return cls(
            symbol=get_str(data, "symbol"),
            mark_price=get_float(data, "markPrice"),
            last_funding_rate=get_float(data, "lastFundingRate"),
            next_funding_time=get_int(data, "nextFundingTime"),
            time=get_int(data, "time"),
        )


@dataclass(frozen=True)
class OpenInterest:
    """Open interest of a symbol."""
    open_interest: float
    symbol: str

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "OpenInterest":
        return cls(
            open_interest=get_float(data, "openInterest"),
            symbol=get_str(data, "symbol"),
        )


@dataclass(frozen=True)
class ServerTime:
    """Exchange server time in milliseconds."""
    server_time: int

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "ServerTime":
        return cls(server_time=get_int(data, "serverTime"))
