"""
Account-related models for the futures client.

Immutable data structures for position and balance information.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..codec import get_bool, get_float, get_int, get_str


@dataclass(frozen=True)
class Position:
    """Position risk entry (/fapi/v2/positionRisk)."""
    entry_price: float
    margin_type: str
    is_auto_add_margin: bool
    isolated_margin: float
    leverage: str
    liquidation_price: float
    mark_price: float
    max_notional_value: float
    position_amount: float
    symbol: str
    unrealized_profit: float
    position_side: str

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "Position":
        return cls(
            entry_price=get_float(data, "entryPrice"),
            margin_type=get_str(data, "marginType"),
            # sent as "true"/"false" strings on this endpoint
            is_auto_add_margin=get_bool(data, "isAutoAddMargin"),
            isolated_margin=get_float(data, "isolatedMargin"),
            leverage=get_str(data, "leverage"),
            liquidation_price=get_float(data, "liquidationPrice"),
            mark_price=get_float(data, "markPrice"),
            max_notional_value=get_float(data, "maxNotionalValue"),
            position_amount=get_float(data, "positionAmt"),
            symbol=get_str(data, "symbol"),
            unrealized_profit=get_float(data, "unRealizedProfit"),
            position_side=get_str(data, "positionSide"),
        )


@dataclass(frozen=True)
class AccountBalance:
    """Futures account balance entry (/fapi/v2/balance)."""
    account_alias: str  # unique account code
    asset: str
    balance: float  # wallet balance
    cross_wallet_balance: float
    cross_unrealized_pnl: float
    available_balance: float
    max_withdraw_amount: float
    margin_available: bool  # usable as margin in Multi-Assets mode
    update_time: int

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "AccountBalance":
        return cls(
            account_alias=get_str(data, "accountAlias"),
            asset=get_str(data, "asset"),
            balance=get_float(data, "balance"),
            cross_wallet_balance=get_float(data, "crossWalletBalance"),
            cross_unrealized_pnl=get_float(data, "crossUnPnl"),
            available_balance=get_float(data, "availableBalance"),
            max_withdraw_amount=get_float(data, "maxWithdrawAmount"),
            margin_available=get_bool(data, "marginAvailable"),
            update_time=get_int(data, "updateTime"),
        )
