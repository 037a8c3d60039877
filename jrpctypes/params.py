"""The "params" member of requests and notifications."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterator, Union

from .errors import SerializationError

_NOT_STRUCTURED = '"params" must be a JSON object or array'

ParamsValue = Union[dict, list]


@dataclass
class Params:
    """Structured parameters: a JSON object (by name) or array (by position)."""

    value: ParamsValue

    def __post_init__(self) -> None:
        if not isinstance(self.value, (dict, list)):
            raise SerializationError(_NOT_STRUCTURED)

    @classmethod
    def from_json(cls, text: str) -> Params:
        """Parse JSON text into Params."""
        try:
            decoded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerializationError(str(exc)) from exc
        return cls.from_value(decoded)

    @classmethod
    def from_value(cls, value: Any) -> Params:
        """Make Params from any JSON-serialisable Python value."""
        try:
            normalised = json.loads(json.dumps(value, allow_nan=False))
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc
        return cls(normalised)

    def to_json(self) -> str:
        """Write the parameters as compact JSON text."""
        try:
            return json.dumps(self.value, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc

    @property
    def is_object(self) -> bool:
        """True when the parameters are given by name."""
        return isinstance(self.value, dict)

    @property
    def is_array(self) -> bool:
        """True when the parameters are given by position."""
        return isinstance(self.value, list)

    def __getitem__(self, key: Any) -> Any:
        return self.value[key]

    def __setitem__(self, key: Any, item: Any) -> None:
        self.value[key] = item

    def __len__(self) -> int:
        return len(self.value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.value)

    def __contains__(self, item: Any) -> bool:
        return item in self.value