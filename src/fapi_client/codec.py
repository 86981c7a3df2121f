"""
Wire value codec.

The exchange encodes most numbers as JSON strings and some booleans as
strings. These helpers convert between wire values and native floats and
bools. Field getters raise DecodeError naming the offending key.
"""

import math
import re
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .errors import DecodeError

_MISSING = object()

# float() and int() alone accept more than the exchange sends, e.g. "1_000" or "nan".
# Unicode digits are excluded too.
_NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?([eE][-+]?[0-9]+)?")
_INTEGER_RE = re.compile(r"-?[0-9]+")


def encode_float(value: float) -> str:
    """Encode a float as its shortest decimal string, without exponent."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"Cannot encode non-finite number: {value}")

    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def encode_flag(value: bool) -> str:
    """Shout-case flag, e.g. reduceOnly=TRUE."""
    return "TRUE" if value else "FALSE"


def encode_bool(value: bool) -> str:
    """JSON-style boolean string, e.g. dualSidePosition=true."""
    return "true" if value else "false"


def parse_float(value: Any) -> float:
    """Decode a JSON number or a numeric string to float."""
    if isinstance(value, bool):
        raise DecodeError(f"Expected a number, got boolean {value!r}")
    if isinstance(value, str):
        if not _NUMBER_RE.fullmatch(value.strip()):
            raise DecodeError(f"Invalid numeric string: {value!r}")
        result = float(value.strip())
    elif isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            raise DecodeError(f"Number out of float range ({value.bit_length()} bits)") from None
    else:
        raise DecodeError(f"Expected a number or numeric string, got {type(value).__name__}")

    if not math.isfinite(result):
        raise DecodeError(f"Number is not finite: {str(value)[:32]!r}")
    return result


def parse_int(value: Any) -> int:
    """Decode a JSON integer (or integral string) to int."""
    if isinstance(value, bool):
        raise DecodeError(f"Expected an integer, got boolean {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if not _INTEGER_RE.fullmatch(value.strip()):
            raise DecodeError(f"Invalid integer string: {value!r}")
        try:
            return int(value.strip())
        except ValueError:
            raise DecodeError(f"Integer string too long: {value[:32]!r}...") from None
    raise DecodeError(f"Expected an integer, got {type(value).__name__}")


def parse_bool(value: Any) -> bool:
    """Decode a JSON boolean or a "true"/"false" string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    raise DecodeError(f"Expected a boolean, got {value!r}")


def _lookup(data: Dict[str, Any], key: str) -> Any:
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise DecodeError(f"Missing required field '{key}'")
    return value


def _field(key: str, parser, value: Any):
    try:
        return parser(value)
    except DecodeError as e:
        raise DecodeError(f"Field '{key}': {e.message}") from None


def get_float(data: Dict[str, Any], key: str) -> float:
    return _field(key, parse_float, _lookup(data, key))


def get_optional_float(
    data: Dict[str, Any], key: str, default: Optional[float] = None
) -> Optional[float]:
    """Null or absent yields ``default``; only pass one where the schema defines it."""
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}")
    value = data.get(key)
    if value is None:
        return default
    return _field(key, parse_float, value)


def get_int(data: Dict[str, Any], key: str) -> int:
    return _field(key, parse_int, _lookup(data, key))


def get_bool(data: Dict[str, Any], key: str) -> bool:
    return _field(key, parse_bool, _lookup(data, key))


def get_optional_bool(data: Dict[str, Any], key: str) -> Optional[bool]:
    value = data.get(key) if isinstance(data, dict) else None
    if value is None:
        return None
    return _field(key, parse_bool, value)


def get_str(data: Dict[str, Any], key: str) -> str:
    value = _lookup(data, key)
    if not isinstance(value, str):
        raise DecodeError(f"Field '{key}': expected a string, got {type(value).__name__}")
    return value


def get_optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key) if isinstance(data, dict) else None
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"Field '{key}': expected a string, got {type(value).__name__}")
    return value


def get_list(data: Dict[str, Any], key: str) -> List[Any]:
    value = _lookup(data, key)
    if not isinstance(value, list):
        raise DecodeError(f"Field '{key}': expected an array, got {type(value).__name__}")
    return value


def get_object(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = _lookup(data, key)
    if not isinstance(value, dict):
        raise DecodeError(f"Field '{key}': expected an object, got {type(value).__name__}")
    return value
