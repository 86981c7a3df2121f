"""
Response classification.

Turns a raw HTTP status and body into either a decoded success value or
exactly one classified error: BusinessError when the exchange sent a
``{"code", "msg"}`` envelope, DecodeError when the body did not have the
expected shape. Pure functions, no I/O.
"""

import json
from typing import Any, Callable, List, Optional, TypeVar

from .constants import ERROR_CODE_MAX, ERROR_CODE_MIN
from .errors import BusinessError, DecodeError, FieldMissingError

T = TypeVar("T")


def is_success(status: int) -> bool:
    return 200 <= status < 300


def parse_json(body: bytes, status: Optional[int] = None) -> Any:
    """
    Parse a JSON body, keeping the raw bytes on failure.

    ValueError also covers bad UTF-8 and integer literals past the
    interpreter's digit limit.
    """
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as e:
        raise DecodeError(
            f"Invalid JSON response: {e}", status_code=status, body=body
        ) from e


def classify_response(status: int, body: bytes, decoder: Callable[[Any], T]) -> T:
    """
    Decode a response into the expected success type or raise a classified error.

    Args:
        status: HTTP status code
        body: Raw response body
        decoder: Converts the parsed JSON into the success type, raising
            DecodeError on a schema mismatch

    Returns:
        The decoded success value

    Raises:
        BusinessError: Non-2xx status with a well-formed error envelope
        DecodeError: Anything that did not parse as expected
    """
    if not is_success(status):
        raise classify_error(status, body)

    data = parse_json(body, status)
    try:
        return decoder(data)
    except DecodeError as e:
        raise e.with_context(status, body) from None


def classify_error(status: int, body: bytes) -> Exception:
    """Build the error for a failed response. Never invents an error code."""
    try:
        data = json.loads(body)
    except (ValueError, RecursionError):
        return DecodeError(
            "Error response is not a JSON error envelope", status_code=status, body=body
        )

    if not isinstance(data, dict):
        return DecodeError(
            "Error response is not a JSON object", status_code=status, body=body
        )

    code = data.get("code")
    msg = data.get("msg")
    if isinstance(code, bool) or not isinstance(code, int) or not isinstance(msg, str):
        return DecodeError(
            "Error response lacks an integer 'code' and string 'msg'",
            status_code=status,
            body=body,
        )
    if not ERROR_CODE_MIN <= code <= ERROR_CODE_MAX:
        return DecodeError(
            f"Error code {code} is outside the signed 16-bit range",
            status_code=status,
            body=body,
        )

    return BusinessError(code, msg, status_code=status)


def decode_list(decoder: Callable[[Any], T]) -> Callable[[Any], List[T]]:
    """Adapt an element decoder to a JSON array response."""
    def _decode(data: Any) -> List[T]:
        if not isinstance(data, list):
            raise DecodeError(f"Expected a JSON array, got {type(data).__name__}")
        return [decoder(item) for item in data]
    return _decode


def expect_empty(data: Any) -> None:
    """Decoder for endpoints whose success body carries nothing of interest."""
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
    return None


def positional_field(row: Any, index: int, name: str, parser: Callable[[Any], T]) -> T:
    """
    Extract one field of a positional-array row.

    A missing index, a null, or a value the parser rejects all raise
    FieldMissingError naming the index and the field.
    """
    if not isinstance(row, list) or index >= len(row) or row[index] is None:
        raise FieldMissingError(index, name)
    try:
        return parser(row[index])
    except DecodeError:
        raise FieldMissingError(index, name) from None
