"""The "id" member of JSON-RPC requests and responses."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .errors import InvalidTypeError, SerializationError

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

IdValue = Union[str, int, float, None]


class IdKind(Enum):
    """The kinds of value an id may hold."""

    STRING = "String"
    NUMBER = "Number"
    FRACTIONAL = "Fractional"
    NULL = "Null"


def _fits(kind: IdKind, value: Any) -> bool:
    if kind is IdKind.STRING:
        return isinstance(value, str)
    if kind is IdKind.NUMBER:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and _I64_MIN <= value <= _I64_MAX
        )
    if kind is IdKind.FRACTIONAL:
        return isinstance(value, float)
    return value is None


@dataclass(frozen=True)
class Id:
    """A JSON-RPC id: a string, a 64-bit integer, a fraction or null."""

    kind: IdKind
    value: IdValue = None

    def __post_init__(self) -> None:
        if not _fits(self.kind, self.value):
            raise InvalidTypeError(
                f"value {self.value!r} does not fit Id type {self.kind.value}"
            )

    @classmethod
    def coerce(cls, value: Any) -> Id:
        """Make an Id from a Python value, an Id, or an object carrying an ``id``."""
        if isinstance(value, Id):
            return value
        if value is None:
            return cls(IdKind.NULL)
        if isinstance(value, bool):
            raise InvalidTypeError("cannot convert bool to Id")
        if isinstance(value, str):
            return cls(IdKind.STRING, value)
        if isinstance(value, int):
            return cls(IdKind.NUMBER, value)
        if isinstance(value, float):
            return cls(IdKind.FRACTIONAL, value)
        nested = getattr(value, "id", None)
        if isinstance(nested, Id):
            return nested
        raise InvalidTypeError(f"cannot convert {type(value).__name__} to Id")

    @classmethod
    def from_json_value(cls, value: Any) -> Id:
        """Read an Id from a decoded JSON value."""
        if value is None:
            return cls(IdKind.NULL)
        if isinstance(value, str):
            return cls(IdKind.STRING, value)
        if isinstance(value, int) and not isinstance(value, bool):
            if _I64_MIN <= value <= _I64_MAX:
                return cls(IdKind.NUMBER, value)
            return cls(IdKind.FRACTIONAL, float(value))
        if isinstance(value, float):
            return cls(IdKind.FRACTIONAL, value)
        raise SerializationError(
            f'"id" must be a string, number or null, not {type(value).__name__}'
        )

    def to_json_value(self) -> IdValue:
        """Return the value as it is written into JSON."""
        if self.kind is IdKind.FRACTIONAL and not math.isfinite(self.value):
            return None
        return self.value

    def _expect(self, kind: IdKind) -> IdValue:
        if self.kind is not kind:
            raise InvalidTypeError(
                f"cannot convert Id type {self.kind.value} to {kind.value}"
            )
        return self.value

    def as_str(self) -> str:
        """Return the string held, or raise InvalidTypeError."""
        return self._expect(IdKind.STRING)

    def as_int(self) -> int:
        """Return the integer held, or raise InvalidTypeError."""
        return self._expect(IdKind.NUMBER)

    def as_float(self) -> float:
        """Return the fraction held, or raise InvalidTypeError."""
        return self._expect(IdKind.FRACTIONAL)

    def as_null(self) -> None:
        """Return None for a null id, or raise InvalidTypeError."""
        return self._expect(IdKind.NULL)