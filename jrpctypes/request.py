"""The JSON-RPC request object and a builder for it."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import InvalidTypeError, JsonRpcError, SerializationError
from .ident import Id
from .params import Params
from .version import JSONRPC_VERSION, validate_version


def _decode_object(text: str) -> dict:
    try:
        decoded = json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        raise SerializationError(str(exc)) from exc
    return decoded


def _required(data: dict, name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise SerializationError(f"missing field `{name}`") from None


@dataclass
class Request:
    """A JSON-RPC 2.0 request: a method call that expects a response."""

    method: str
    id: Id
    params: Optional[Params] = None
    jsonrpc: str = field(default=JSONRPC_VERSION, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.method, str):
            raise InvalidTypeError(
                f'"method" must be a string, not {type(self.method).__name__}'
            )
        self.id = Id.coerce(self.id)
        if self.params is not None and not isinstance(self.params, Params):
            self.params = Params.from_value(self.params)

    @classmethod
    def builder(cls) -> RequestBuilder:
        """Start building a request."""
        return RequestBuilder()

    @classmethod
    def from_json(cls, text: str) -> Request:
        """Parse a request from JSON text."""
        return cls.from_dict(_decode_object(text))

    @classmethod
    def from_dict(cls, data: Any) -> Request:
        """Read a request from a decoded JSON object."""
        if not isinstance(data, dict):
            raise SerializationError(
                f"invalid type: {type(data).__name__}, expected a JSON-RPC request object"
            )
        validate_version(_required(data, "jsonrpc"))
        method = _required(data, "method")
        if not isinstance(method, str):
            raise SerializationError(
                f'invalid type: {type(method).__name__}, expected "method" to be a string'
            )
        raw_params = data.get("params")
        params = None if raw_params is None else Params.from_value(raw_params)
        ident = Id.from_json_value(_required(data, "id"))
        return cls(method=method, id=ident, params=params)

    def to_dict(self) -> dict:
        """Return the request as a JSON-ready dictionary."""
        return {
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": None if self.params is None else self.params.value,
            "id": self.id.to_json_value(),
        }

    def to_json(self) -> str:
        """Write the request as compact JSON text."""
        try:
            return json.dumps(
                self.to_dict(), separators=(",", ":"), ensure_ascii=False
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc


class RequestBuilder:
    """Builds a Request; a method and an id must each be given exactly once."""

    def __init__(self) -> None:
        self._method: Optional[str] = None
        self._params: Optional[Params] = None
        self._id: Optional[Id] = None

    def params(self, value: Any) -> RequestBuilder:
        """Set the parameters from a JSON-serialisable object or list."""
        self._params = value if isinstance(value, Params) else Params.from_value(value)
        return self

    def params_str(self, text: str) -> RequestBuilder:
        """Set the parameters from JSON text."""
        self._params = Params.from_json(text)
        return self

    def method(self, name: str) -> RequestBuilder:
        """Set the method name."""
        if self._method is not None:
            raise JsonRpcError("request method is already set")
        if not isinstance(name, str):
            raise InvalidTypeError(
                f'"method" must be a string, not {type(name).__name__}'
            )
        self._method = name
        return self

    def id(self, value: Any) -> RequestBuilder:
        """Set the id from a string, integer, float, None, Id or request."""
        if self._id is not None:
            raise JsonRpcError("request id is already set")
        self._id = Id.coerce(value)
        return self

    def build(self) -> Request:
        """Return the finished request."""
        if self._method is None:
            raise JsonRpcError("request needs a method before it can be built")
        if self._id is None:
            raise JsonRpcError("request needs an id before it can be built")
        return Request(method=self._method, id=self._id, params=self._params)