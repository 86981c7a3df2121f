"""
fapi-client - Python adapter for Binance-style USD-M futures APIs.

Builds signed requests from typed order intents, classifies responses
into typed results or errors, and decodes user data stream events.
"""

from .account_client import FuturesClient
from .auth import ApiCredentials, RequestSigner, SignedRequest
from .classifier import classify_response
from .errors import (
    BusinessError,
    ConfigurationError,
    DecodeError,
    FapiError,
    FieldMissingError,
    StreamDisconnected,
    TimestampError,
    TransportError,
)
from .events import StreamEvent, decode_event
from .models import (
    ConnectionConfig,
    RetryConfig,
    OrderIntent,
    OrderSide,
    OrderType,
    PositionSide,
    TimeInForce,
    WorkingType,
)
from .params import ParameterSet, build_order_params
from .public_client import PublicClient
from .user_stream import UserDataStream

__all__ = [
    # Main Clients
    "FuturesClient",
    "PublicClient",
    "UserDataStream",
    "ConnectionConfig",
    "RetryConfig",
    # Request pipeline
    "OrderIntent",
    "OrderSide",
    "OrderType",
    "PositionSide",
    "TimeInForce",
    "WorkingType",
    "ParameterSet",
    "build_order_params",
    "ApiCredentials",
    "RequestSigner",
    "SignedRequest",
    "classify_response",
    "StreamEvent",
    "decode_event",
    # Errors
    "FapiError",
    "BusinessError",
    "TransportError",
    "DecodeError",
    "FieldMissingError",
    "StreamDisconnected",
    "ConfigurationError",
    "TimestampError",
]
