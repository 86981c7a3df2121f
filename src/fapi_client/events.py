"""
User data stream event decoding.

Reads the "e" discriminator of a frame and hands the frame to exactly one
event decoder. Unknown or missing discriminators are errors, so protocol
changes on the exchange side surface instead of being dropped.
"""

import json
from typing import Any, Callable, Dict, Union

from .errors import DecodeError
from .models.events import (
    AccountUpdateEvent,
    LeverageUpdateEvent,
    ListenKeyExpiredEvent,
    MarginCallEvent,
    MultiAssetsMarginUpdateEvent,
    OrderTradeEvent,
)

StreamEvent = Union[
    OrderTradeEvent,
    AccountUpdateEvent,
    MarginCallEvent,
    LeverageUpdateEvent,
    MultiAssetsMarginUpdateEvent,
    ListenKeyExpiredEvent,
]


def _decode_account_config(data: Dict[str, Any]) -> StreamEvent:
    # Leverage and multi-assets changes share one event name; the payload
    # key tells them apart.
    if "ac" in data:
        return LeverageUpdateEvent.from_wire(data)
    if "ai" in data:
        return MultiAssetsMarginUpdateEvent.from_wire(data)
    raise DecodeError("ACCOUNT_CONFIG_UPDATE carries neither 'ac' nor 'ai'")


EVENT_DECODERS: Dict[str, Callable[[Dict[str, Any]], StreamEvent]] = {
    "ORDER_TRADE_UPDATE": OrderTradeEvent.from_wire,
    "ACCOUNT_UPDATE": AccountUpdateEvent.from_wire,
    "MARGIN_CALL": MarginCallEvent.from_wire,
    "ACCOUNT_CONFIG_UPDATE": _decode_account_config,
    "listenKeyExpired": ListenKeyExpiredEvent.from_wire,
}


def decode_event(frame: Union[str, bytes, Dict[str, Any]]) -> StreamEvent:
    """
    Decode one user data stream frame.

    Args:
        frame: Raw text/bytes frame, or an already parsed JSON object

    Returns:
        The typed event for the frame's "e" discriminator

    Raises:
        DecodeError: Invalid JSON, missing or unknown discriminator, or a
            payload that does not match its event's schema
    """
    if isinstance(frame, (str, bytes)):
        raw = frame.encode("utf-8") if isinstance(frame, str) else frame
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"Invalid JSON frame: {e}", body=raw) from e
    else:
        data = frame
        raw = None

    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object frame, got {type(data).__name__}", body=raw)

    event_type = data.get("e")
    if event_type is None:
        raise DecodeError("Frame has no 'e' discriminator", body=raw)

    decoder = EVENT_DECODERS.get(event_type) if isinstance(event_type, str) else None
    if decoder is None:
        raise DecodeError(f"Unknown event type: {event_type!r}", body=raw)

    try:
        return decoder(data)
    except DecodeError as e:
        raise DecodeError(f"{event_type}: {e.message}", body=raw) from None
