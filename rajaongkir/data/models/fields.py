"""
Typed field readers shared by the record and envelope decoders.
Absent or null strings read as ""; any other wrong JSON type raises DecodeError.
"""
from typing import Any, Callable, TypeVar

from rajaongkir.api.errors import DecodeError

T = TypeVar("T")


def text(d: dict[str, Any], key: str) -> str:
    value = d.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"expected {key} to be a string, got {type(value).__name__}")
    return value


def integer(d: dict[str, Any], key: str) -> int:
    value = d.get(key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool):
        raise DecodeError(f"expected {key} to be a number, got bool")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"invalid {key}: {value!r}") from e


def objects(value: Any, key: str, decode: Callable[[dict[str, Any]], T]) -> tuple[T, ...]:
    """Decode a JSON list of objects; null or absent is an empty tuple."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise DecodeError(f"expected {key} to be a list, got {type(value).__name__}")
    if not all(isinstance(v, dict) for v in value):
        raise DecodeError(f"expected every entry of {key} to be an object")
    return tuple(decode(v) for v in value)
