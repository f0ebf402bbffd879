"""Bitwise operators for enumeration members of any enum type."""

from __future__ import annotations

import enum
from typing import TypeVar

__all__ = ["bit_or", "bit_and", "bit_xor", "bit_not"]

E = TypeVar("E", bound=enum.Enum)


def _check(*members: enum.Enum) -> type[enum.Enum]:
    kind = type(members[0])
    for member in members:
        if not isinstance(member, enum.Enum):
            raise TypeError(f"{member!r} is not an enumeration member")
        if type(member) is not kind:
            raise TypeError(f"mixed enumeration types: {kind.__name__} and {type(member).__name__}")
    return kind


def _rebuild(kind: type[E], value: int) -> E:
    # Raises ValueError when the result is not a value of a non-flag enum.
    return kind(value)


def bit_or(lhs: E, rhs: E) -> E:
    """Combine two members of the same enum with ``|``."""
    kind = _check(lhs, rhs)
    if isinstance(lhs, enum.Flag):
        return lhs | rhs
    return _rebuild(kind, lhs.value | rhs.value)


def bit_and(lhs: E, rhs: E) -> E:
    """Intersect two members of the same enum with ``&``."""
    kind = _check(lhs, rhs)
    if isinstance(lhs, enum.Flag):
        return lhs & rhs
    return _rebuild(kind, lhs.value & rhs.value)


def bit_xor(lhs: E, rhs: E) -> E:
    """Exclusive-or two members of the same enum."""
    kind = _check(lhs, rhs)
    if isinstance(lhs, enum.Flag):
        return lhs ^ rhs
    return _rebuild(kind, lhs.value ^ rhs.value)


def bit_not(value: E) -> E:
    """Complement a member of an enum."""
    kind = _check(value)
    if isinstance(value, enum.Flag):
        return ~value
    return _rebuild(kind, ~value.value)