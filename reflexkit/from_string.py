"""Strict text-to-value conversion for numbers and strings."""

from __future__ import annotations

import math
import re
import types
import typing
from typing import Any

__all__ = ["from_string"]

_INT = re.compile(r"-?[0-9]+")
_FLOAT = re.compile(
    r"-?(?:(?P<inf>inf(?:inity)?)"
    r"|(?P<nan>nan(?:\([0-9A-Za-z_]*\))?)"
    r"|(?P<mantissa>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _unwrap_optional(kind: Any) -> Any:
    origin = typing.get_origin(kind)
    if origin is typing.Union or origin is types.UnionType:
        args = typing.get_args(kind)
        inner = [a for a in args if a is not type(None)]
        if len(inner) == 1 and len(args) == 2:
            return inner[0]
        raise TypeError(f"no string loader for {kind!r}")
    return kind


def _parse_int(text: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group())


def _parse_float(text: str) -> float:
    match = _FLOAT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    negative = text.startswith("-")
    if match["inf"]:
        return -math.inf if negative else math.inf
    if match["nan"]:
        return math.copysign(math.nan, -1.0 if negative else 1.0)
    value = float(match.group())
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    if value == 0.0 and any(ch in "123456789" for ch in match["mantissa"]):
        raise ValueError(f"number out of range: {text!r}")
    return value


def from_string(kind: Any, text: str) -> Any:
    """Convert ``text`` to ``kind``: int, float, str, or an Optional of those.

    Numbers are read from the start of the text; trailing characters are
    ignored. Leading blanks and a ``+`` sign are rejected.
    """
    kind = _unwrap_optional(kind)
    if not isinstance(kind, type):
        raise TypeError(f"no string loader for {kind!r}")
    if issubclass(kind, bool):
        raise TypeError("no string loader for bool")
    if issubclass(kind, int):
        return kind(_parse_int(text))
    if issubclass(kind, float):
        return kind(_parse_float(text))
    if issubclass(kind, str):
        return kind(text)
    raise TypeError(f"no string loader for {kind.__name__}")