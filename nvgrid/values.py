"""Checked conversions of decoded msgpack values into plain Python types."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_U64_LIMIT = 2**64
_I64_MIN = -(2**63)
_I64_LIMIT = 2**63


class ParseError(ValueError):
    """A value received from the editor did not have the expected shape."""

    def __init__(self, expected: str, value: Any) -> None:
        self.expected = expected
        self.value = value
        super().__init__(f"invalid {expected} format {value!r}")


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def extract_values(values: Sequence[Any], count: int) -> tuple[Any, ...]:
    """Return the values as a tuple, requiring exactly ``count`` of them."""
    if len(values) != count:
        raise ParseError("event", list(values))
    return tuple(values)


def parse_array(value: Any) -> list[Any]:
    """A msgpack array as a list."""
    if not isinstance(value, (list, tuple)):
        raise ParseError("array", value)
    return list(value)


def parse_map(value: Any) -> list[tuple[Any, Any]]:
    """A msgpack map as a list of key/value pairs, in order."""
    if not isinstance(value, dict):
        raise ParseError("map", value)
    return list(value.items())


def parse_string(value: Any) -> str:
    """A msgpack string."""
    if not isinstance(value, str):
        raise ParseError("string", value)
    return value


def parse_u64(value: Any) -> int:
    """An integer that fits in an unsigned 64-bit word."""
    if not _is_integer(value) or not 0 <= value < _U64_LIMIT:
        raise ParseError("u64", value)
    return value


def parse_i64(value: Any) -> int:
    """An integer that fits in a signed 64-bit word."""
    if not _is_integer(value) or not _I64_MIN <= value < _I64_LIMIT:
        raise ParseError("i64", value)
    return value


def parse_f64(value: Any) -> float:
    """A floating point number; integers are widened to float."""
    if isinstance(value, float) or _is_integer(value):
        return float(value)
    raise ParseError("f64", value)


def parse_bool(value: Any) -> bool:
    """A msgpack boolean."""
    if not isinstance(value, bool):
        raise ParseError("bool", value)
    return value