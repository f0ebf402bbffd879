"""Locale-independent ASCII character classification."""

from __future__ import annotations

import operator

__all__ = [
    "is_in_range",
    "is_cntrl",
    "is_print",
    "is_graph",
    "is_blank",
    "is_space",
    "is_upper",
    "is_alpha",
    "is_digit",
    "is_xdigit",
    "is_alphanum",
    "is_punct",
]


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_in_range(c: int | str, low: int | str, high: int | str) -> bool:
    """Return True when ``low <= c <= high``."""
    return _code(low) <= _code(c) <= _code(high)


def is_cntrl(c: int | str) -> bool:
    """Control characters: 0x00-0x1f and 0x7f."""
    return is_in_range(c, 0x00, 0x1F) or _code(c) == 0x7F


def is_print(c: int | str) -> bool:
    """Printable characters, space included."""
    return is_in_range(c, 0x20, 0x7E)


def is_graph(c: int | str) -> bool:
    """Printable characters, space excluded."""
    return is_in_range(c, 0x21, 0x7E)


def is_blank(c: int | str) -> bool:
    """Tab or space."""
    return _code(c) in (0x09, 0x20)


def is_space(c: int | str) -> bool:
    """Tab, newline, vertical tab, form feed, carriage return or space."""
    return is_in_range(c, 0x09, 0x0D) or _code(c) == 0x20


def is_upper(c: int | str) -> bool:
    """Upper-case ASCII letter."""
    return is_in_range(c, 0x41, 0x5A)


def is_alpha(c: int | str) -> bool:
    """ASCII letter."""
    return is_upper(c) or is_in_range(c, 0x61, 0x7A)


def is_digit(c: int | str) -> bool:
    """Decimal digit."""
    return is_in_range(c, 0x30, 0x39)


def is_xdigit(c: int | str) -> bool:
    """Hexadecimal digit, either case."""
    return is_digit(c) or is_in_range(c, 0x41, 0x46) or is_in_range(c, 0x61, 0x66)


def is_alphanum(c: int | str) -> bool:
    """ASCII letter or decimal digit."""
    return is_digit(c) or is_alpha(c)


def is_punct(c: int | str) -> bool:
    """ASCII punctuation."""
    return (
        is_in_range(c, 0x21, 0x2F)
        or is_in_range(c, 0x3A, 0x40)
        or is_in_range(c, 0x5B, 0x60)
        or is_in_range(c, 0x7B, 0x7E)
    )