"""The JSON-RPC notification object and a builder for it."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import InvalidTypeError, JsonRpcError, SerializationError
from .params import Params
from .version import JSONRPC_VERSION, validate_version


def _decode_object(text: str) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise SerializationError(str(exc)) from exc


def _required(data: dict, name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise SerializationError(f"missing field `{name}`") from None


@dataclass
class Notification:
    """A JSON-RPC 2.0 notification: a call that expects no response."""

    method: str
    params: Optional[Params] = None
    jsonrpc: str = field(default=JSONRPC_VERSION, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.method, str):
            raise InvalidTypeError(
                f'"method" must be a string, not {type(self.method).__name__}'
            )
        if self.params is not None and not isinstance(self.params, Params):
            self.params = Params.from_value(self.params)

    @classmethod
    def builder(cls) -> NotificationBuilder:
        """Start building a notification."""
        return NotificationBuilder()

    @classmethod
    def from_json(cls, text: str) -> Notification:
        """Parse a notification from JSON text."""
        return cls.from_dict(_decode_object(text))

    @classmethod
    def from_dict(cls, data: Any) -> Notification:
        """Read a notification from a decoded JSON object."""
        if not isinstance(data, dict):
            raise SerializationError(
                f"invalid type: {type(data).__name__}, "
                "expected a JSON-RPC notification object"
            )
        validate_version(_required(data, "jsonrpc"))
        method = _required(data, "method")
        if not isinstance(method, str):
            raise SerializationError(
                f'invalid type: {type(method).__name__}, expected "method" to be a string'
            )
        raw_params = data.get("params")
        params = None if raw_params is None else Params.from_value(raw_params)
        return cls(method=method, params=params)

    def to_dict(self) -> dict:
        """Return the notification as a JSON-ready dictionary."""
        return {
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": None if self.params is None else self.params.value,
        }

    def to_json(self) -> str:
        """Write the notification as compact JSON text."""
        try:
            return json.dumps(
                self.to_dict(), separators=(",", ":"), ensure_ascii=False
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc


class NotificationBuilder:
    """Builds a Notification; a method must be given exactly once."""

    def __init__(self) -> None:
        self._method: Optional[str] = None
        self._params: Optional[Params] = None

    def params(self, value: Any) -> NotificationBuilder:
        """Set the parameters from a JSON-serialisable object or list."""
        self._params = value if isinstance(value, Params) else Params.from_value(value)
        return self

    def params_str(self, text: str) -> NotificationBuilder:
        """Set the parameters from JSON text."""
        self._params = Params.from_json(text)
        return self

    def method(self, name: str) -> NotificationBuilder:
        """Set the method name."""
        if self._method is not None:
            raise JsonRpcError("notification method is already set")
        if not isinstance(name, str):
            raise InvalidTypeError(
                f'"method" must be a string, not {type(name).__name__}'
            )
        self._method = name
        return self

    def build(self) -> Notification:
        """Return the finished notification."""
        if self._method is None:
            raise JsonRpcError("notification needs a method before it can be built")
        return Notification(method=self._method, params=self._params)