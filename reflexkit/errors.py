"""Declarative error code sets with categories, values and exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

__all__ = [
    "ErrorCode",
    "ErrorValue",
    "ErrorCategory",
    "CodedError",
    "ErrorCodes",
    "make_error_code",
    "raise_error",
]

UNKNOWN_MESSAGE = "<unknown>"


class ErrorCode:
    """An error declared as a class attribute of an :class:`ErrorCodes` subclass."""

    __slots__ = ("message", "name", "owner")

    def __init__(self, message: str) -> None:
        self.message = message
        self.name: str | None = None
        self.owner: type[ErrorCodes] | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        owner = self.owner.__name__ if self.owner else "?"
        return f"<ErrorCode {owner}.{self.name}: {self.message!r}>"


class ErrorCategory:
    """The category shared by all codes of one :class:`ErrorCodes` subclass."""

    __slots__ = ("_codes",)

    def __init__(self, codes: type[ErrorCodes]) -> None:
        self._codes = codes

    def name(self) -> str:
        """The category name declared by the code set."""
        return self._codes.category

    def message(self, error: int) -> str:
        """The message for a numeric error value."""
        return self._codes.message_of(error)

    def __repr__(self) -> str:
        return f"<ErrorCategory {self.name()!r}>"


@dataclass(frozen=True, eq=False)
class ErrorValue:
    """A numeric error value bound to its category."""

    value: int
    category: ErrorCategory

    @property
    def message(self) -> str:
        return self.category.message(self.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorValue):
            return self.category is other.category and self.value == other.value
        if isinstance(other, ErrorCode):
            owner = other.owner
            if owner is None:
                return False
            return owner._category is self.category and self.value == owner.value_of(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, id(self.category)))


class CodedError(Exception):
    """Exception carrying an :class:`ErrorValue`."""

    def __init__(self, code: ErrorValue) -> None:
        super().__init__(code.message)
        self.code = code


class ErrorCodes:
    """Base for code sets; subclasses declare ``category`` and ``ErrorCode`` attributes."""

    category: ClassVar[str]
    _codes: ClassVar[tuple[ErrorCode, ...]] = ()
    _category: ClassVar[ErrorCategory]

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(getattr(cls, "category", None), str):
            raise TypeError(f"{cls.__name__} must define a string 'category' attribute")
        codes = tuple(v for v in cls.__dict__.values() if isinstance(v, ErrorCode))
        for code in codes:
            code.owner = cls
        cls._codes = codes
        cls._category = ErrorCategory(cls)

    @classmethod
    def message_of(cls, value: int) -> str:
        """Message of the code at ``value``, or ``"<unknown>"``."""
        if 0 <= value < len(cls._codes):
            return cls._codes[value].message
        return UNKNOWN_MESSAGE

    @classmethod
    def value_of(cls, code: ErrorCode) -> int:
        """Position of ``code`` in declaration order, or -1."""
        for index, candidate in enumerate(cls._codes):
            if candidate is code:
                return index
        return -1

    @classmethod
    def make(cls, code: ErrorCode) -> ErrorValue:
        """Build the error value of one of this set's codes."""
        value = cls.value_of(code)
        if value < 0:
            raise ValueError(f"{code!r} is not a code of {cls.__name__}")
        return ErrorValue(value, cls._category)

    @classmethod
    def raise_(cls, code: ErrorCode) -> None:
        """Raise :class:`CodedError` for ``code``."""
        raise CodedError(cls.make(code))


def _owner_of(code: ErrorCode) -> type[ErrorCodes]:
    if not isinstance(code, ErrorCode) or code.owner is None:
        raise TypeError(f"{code!r} is not declared in an ErrorCodes subclass")
    return code.owner


def make_error_code(code: ErrorCode) -> ErrorValue:
    """Build the error value of a declared code."""
    return _owner_of(code).make(code)


def raise_error(code: ErrorCode) -> None:
    """Raise :class:`CodedError` for a declared code."""
    _owner_of(code).raise_(code)