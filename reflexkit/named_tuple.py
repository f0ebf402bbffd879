"""Ordered, name-addressed value records and tuple conversion."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

__all__ = ["NamedValues", "make_named_tuple", "named_tuple_of", "to_tuple"]


class NamedValues:
    """A fixed set of named fields, each with a declared type."""

    __slots__ = ("_values", "_types")

    def __init__(
        self,
        items: Mapping[str, Any] | Iterable[tuple[str, Any]] = (),
        types: Mapping[str, type] | None = None,
    ) -> None:
        pairs = items.items() if isinstance(items, Mapping) else items
        values: dict[str, Any] = {}
        for name, value in pairs:
            if not isinstance(name, str) or not name.isidentifier():
                raise ValueError(f"invalid field name: {name!r}")
            if name in values:
                raise ValueError(f"duplicate field name: {name!r}")
            values[name] = value
        declared = dict(types or {})
        unknown = set(declared) - set(values)
        if unknown:
            raise ValueError(f"types given for unknown fields: {sorted(unknown)}")
        object.__setattr__(self, "_values", values)
        object.__setattr__(
            self, "_types", {name: declared.get(name, type(value)) for name, value in values.items()}
        )

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._values)

    def kind_of(self, name: str) -> type:
        """Declared type of a field."""
        return self._types[name]

    def has(self, name: str, kind: type | None = None) -> bool:
        """True if the field exists and, when ``kind`` is given, is declared with it."""
        if name not in self._values:
            return False
        return kind is None or self._types[name] is kind

    def get(self, name: str, kind: type | None = None) -> Any:
        """Value of a field; KeyError if missing, TypeError if ``kind`` differs."""
        if name not in self._values:
            raise KeyError(f"not found: {name!r}")
        if kind is not None and self._types[name] is not kind:
            raise TypeError(f"bad type for {name!r}: declared {self._types[name].__name__}")
        return self._values[name]

    def values(self) -> tuple[Any, ...]:
        return tuple(self._values.values())

    def items(self) -> tuple[tuple[str, Any], ...]:
        return tuple(self._values.items())

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise KeyError(f"not found: {name!r}")
        self._values[name] = value

    def __getattr__(self, name: str) -> Any:
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise AttributeError(f"no field named {name!r}")
        self._values[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedValues):
            return NotImplemented
        return self.items() == other.items()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"NamedValues({body})"


def make_named_tuple(names: Iterable[str], values: Iterable[Any]) -> NamedValues:
    """Pair names with values in order."""
    names = list(names)
    values = list(values)
    if len(names) != len(values):
        raise ValueError(f"{len(names)} names for {len(values)} values")
    return NamedValues(zip(names, values))


def _is_plain_type(kind: Any) -> bool:
    return isinstance(kind, type) and not isinstance(kind, types.GenericAlias)


def named_tuple_of(obj: Any) -> NamedValues:
    """Copy the fields of a dataclass, named tuple or plain object."""
    if isinstance(obj, NamedValues):
        return NamedValues(obj.items(), types=obj._types)
    if isinstance(obj, type):
        raise TypeError("expected an instance, not a class")
    if dataclasses.is_dataclass(obj):
        fields = dataclasses.fields(obj)
        return NamedValues(
            ((f.name, getattr(obj, f.name)) for f in fields),
            types={f.name: f.type for f in fields if _is_plain_type(f.type)},
        )
    if isinstance(obj, tuple) and hasattr(type(obj), "_fields"):
        return NamedValues(zip(type(obj)._fields, obj))
    if hasattr(obj, "__dict__"):
        return NamedValues(vars(obj))
    raise TypeError(f"cannot take fields of {type(obj).__name__}")


def to_tuple(obj: Any) -> tuple[Any, ...]:
    """Field values of ``obj`` in order; tuples are returned unchanged."""
    if isinstance(obj, tuple):
        return obj
    if isinstance(obj, NamedValues):
        return obj.values()
    return named_tuple_of(obj).values()