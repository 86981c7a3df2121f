"""
Request parameter building.

Turns typed intents into ParameterSets: immutable string-to-string
mappings that always iterate in lexicographic key order, the same order
the signer serializes them in.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from .codec import encode_bool, encode_flag, encode_float
from .models.enums import WireEnum
from .models.orders import OrderIntent


class ParameterSet(Mapping):
    """Wire field name to wire value, iterated in canonical (sorted) order."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[Mapping] = None):
        data = dict(fields or {})
        for key, value in data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(
                    f"Parameters must map str to str, got {key!r}: {value!r}"
                )
        self._fields: Dict[str, str] = data

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._fields))

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"ParameterSet({dict(self.items())!r})"

    def with_fields(self, extra: Mapping) -> "ParameterSet":
        """Return a new set with ``extra`` added (existing keys replaced)."""
        merged = dict(self._fields)
        merged.update(extra)
        return ParameterSet(merged)


def _wire_name(value: Any) -> str:
    if not isinstance(value, WireEnum):
        raise TypeError(f"Expected a wire enum member, got {value!r}")
    return value.value


def _symbol(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError(f"Invalid symbol: {value!r}")
    return value


def _price_protect_flag(value: float) -> str:
    return encode_flag(value != 0)


def _integer(value: int) -> str:
    return str(int(value))


Encoder = Callable[[Any], str]

# (attribute, wire name, encoder, required)
ORDER_FIELDS: Tuple[Tuple[str, str, Encoder, bool], ...] = (
    ("symbol", "symbol", _symbol, True),
    ("side", "side", _wire_name, True),
    ("order_type", "type", _wire_name, True),
    ("position_side", "positionSide", _wire_name, False),
    ("time_in_force", "timeInForce", _wire_name, False),
    ("quantity", "quantity", encode_float, False),
    ("reduce_only", "reduceOnly", encode_flag, False),
    ("price", "price", encode_float, False),
    ("stop_price", "stopPrice", encode_float, False),
    ("close_position", "closePosition", encode_flag, False),
    ("activation_price", "activationPrice", encode_float, False),
    ("callback_rate", "callbackRate", encode_float, False),
    ("working_type", "workingType", _wire_name, False),
    ("price_protect", "priceProtect", _price_protect_flag, False),
)


def _build(source: Any, table) -> ParameterSet:
    fields = {}
    for attribute, wire_name, encoder, required in table:
        value = getattr(source, attribute)
        if value is None:
            if required:
                raise ValueError(f"{attribute} is required")
            continue
        fields[wire_name] = encoder(value)
    return ParameterSet(fields)


def build_order_params(intent: OrderIntent) -> ParameterSet:
    """
    Translate an order intent into wire parameters.

    Unset fields are left out entirely. No cross-field checks are made;
    the exchange decides whether a combination is acceptable.
    """
    return _build(intent, ORDER_FIELDS)


def _optional_ints(**values: Optional[int]) -> Dict[str, str]:
    return {name: _integer(value) for name, value in values.items() if value is not None}


def symbol_params(symbol: str) -> ParameterSet:
    return ParameterSet({"symbol": _symbol(symbol)})


def order_id_params(symbol: str, order_id: int) -> ParameterSet:
    return ParameterSet({"symbol": _symbol(symbol), "orderId": _integer(order_id)})


def leverage_params(symbol: str, leverage: int) -> ParameterSet:
    return ParameterSet({"symbol": _symbol(symbol), "leverage": _integer(leverage)})


def position_mode_params(dual_side_position: bool) -> ParameterSet:
    # this endpoint takes lower-case JSON-style booleans
    return ParameterSet({"dualSidePosition": encode_bool(dual_side_position)})


def all_orders_params(
    symbol: str,
    order_id: Optional[int] = None,
    start_time: Optional[int] = None,
    end_time: Optional[int] = None,
    limit: Optional[int] = None,
) -> ParameterSet:
    fields = {"symbol": _symbol(symbol)}
    fields.update(_optional_ints(
        orderId=order_id, startTime=start_time, endTime=end_time, limit=limit
    ))
    return ParameterSet(fields)


def kline_params(
    symbol: str,
    interval: str,
    start_time: Optional[int] = None,
    end_time: Optional[int] = None,
    limit: Optional[int] = None,
) -> ParameterSet:
    fields = {"symbol": _symbol(symbol), "interval": interval}
    fields.update(_optional_ints(startTime=start_time, endTime=end_time, limit=limit))
    return ParameterSet(fields)
