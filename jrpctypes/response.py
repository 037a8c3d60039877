"""The JSON-RPC response object and builders for it."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional, Union

from .errors import InvalidTypeError, JsonRpcError, SerializationError
from .ident import Id
from .version import JSONRPC_VERSION, validate_version

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

SERVER_ERROR_MIN = -32099
SERVER_ERROR_MAX = -32000


class ErrorCode(IntEnum):
    """Error codes defined by the JSON-RPC 2.0 specification."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    @property
    def message(self) -> str:
        """The message the specification pairs with this code."""
        return _STANDARD_MESSAGES[self]


_STANDARD_MESSAGES = {
    ErrorCode.PARSE_ERROR: "Parse error",
    ErrorCode.INVALID_REQUEST: "Invalid Request",
    ErrorCode.METHOD_NOT_FOUND: "Method not found",
    ErrorCode.INVALID_PARAMS: "Invalid params",
    ErrorCode.INTERNAL_ERROR: "Internal error",
}


def _to_json_value(value: Any) -> Any:
    try:
        return json.loads(json.dumps(value, allow_nan=False))
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc


def _is_i32(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and _I32_MIN <= value <= _I32_MAX
    )


def _required(data: dict, name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise SerializationError(f"missing field `{name}`") from None


@dataclass
class Success:
    """The status of a call that succeeded, holding its result."""

    result: Any = None

    def to_dict(self) -> dict:
        return {"result": self.result}


@dataclass
class Failure:
    """The status of a call that failed, holding the error object."""

    code: int
    message: str
    data: Any = None

    def __post_init__(self) -> None:
        if not _is_i32(self.code):
            raise InvalidTypeError(f"error code must be a 32-bit integer, not {self.code!r}")
        if not isinstance(self.message, str):
            raise InvalidTypeError(
                f"error message must be a string, not {type(self.message).__name__}"
            )

    def to_dict(self) -> dict:
        return {
            "error": {"code": self.code, "message": self.message, "data": self.data}
        }

    @classmethod
    def _from_json_value(cls, value: Any) -> Failure:
        if not isinstance(value, dict):
            raise SerializationError(
                f'invalid type: {type(value).__name__}, expected "error" to be an object'
            )
        code = _required(value, "code")
        if not _is_i32(code):
            raise SerializationError(
                f"invalid value: {code!r}, expected a 32-bit integer error code"
            )
        message = _required(value, "message")
        if not isinstance(message, str):
            raise SerializationError(
                f"invalid type: {type(message).__name__}, expected error message string"
            )
        return cls(code=code, message=message, data=value.get("data"))


Status = Union[Success, Failure]


def _status_from(data: dict) -> Status:
    for key, value in data.items():
        if key == "result":
            return Success(value)
        if key == "error":
            return Failure._from_json_value(value)
    raise SerializationError("no variant of enum Status found in flattened data")


@dataclass
class Response:
    """A JSON-RPC 2.0 response: a result or an error for a given id."""

    id: Id
    status: Status
    jsonrpc: str = field(default=JSONRPC_VERSION, init=False)

    def __post_init__(self) -> None:
        self.id = Id.coerce(self.id)
        if not isinstance(self.status, (Success, Failure)):
            raise InvalidTypeError(
                f"status must be Success or Failure, not {type(self.status).__name__}"
            )

    @property
    def is_success(self) -> bool:
        """True when the response carries a result."""
        return isinstance(self.status, Success)

    @classmethod
    def builder(cls) -> ResponseBuilder:
        """Start building a response."""
        return ResponseBuilder()

    @classmethod
    def from_json(cls, text: str) -> Response:
        """Parse a response from JSON text."""
        try:
            decoded = json.loads(text)
        except (json.JSONDecodeError, TypeError) as exc:
            raise SerializationError(str(exc)) from exc
        return cls.from_dict(decoded)

    @classmethod
    def from_dict(cls, data: Any) -> Response:
        """Read a response from a decoded JSON object."""
        if not isinstance(data, dict):
            raise SerializationError(
                f"invalid type: {type(data).__name__}, expected a JSON-RPC response object"
            )
        validate_version(_required(data, "jsonrpc"))
        ident = Id.from_json_value(_required(data, "id"))
        return cls(id=ident, status=_status_from(data))

    def to_dict(self) -> dict:
        """Return the response as a JSON-ready dictionary."""
        return {
            "jsonrpc": self.jsonrpc,
            "id": self.id.to_json_value(),
            **self.status.to_dict(),
        }

    def to_json(self) -> str:
        """Write the response as compact JSON text."""
        try:
            return json.dumps(
                self.to_dict(), separators=(",", ":"), ensure_ascii=False
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc


@dataclass(frozen=True)
class ServerErrorCode:
    """A code from the range reserved for implementation-defined server errors."""

    value: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.value, int)
            or isinstance(self.value, bool)
            or not SERVER_ERROR_MIN <= self.value <= SERVER_ERROR_MAX
        ):
            raise ValueError(
                f"server error code range is {SERVER_ERROR_MIN} <--> {SERVER_ERROR_MAX}"
            )

    def __int__(self) -> int:
        return self.value


class ResponseBuilder:
    """Starts a response; choose success() or error() to continue."""

    def __init__(self) -> None:
        self._id: Optional[Id] = None

    def id(self, value: Any) -> ResponseBuilder:
        """Set the id from a string, integer, float, None, Id or request."""
        if self._id is not None:
            raise JsonRpcError("response id is already set")
        self._id = Id.coerce(value)
        return self

    def success(self) -> SuccessBuilder:
        """Continue with a successful response."""
        return SuccessBuilder(self._id)

    def error(self) -> ErrorBuilder:
        """Continue with an error response."""
        return ErrorBuilder(self._id)


class SuccessBuilder:
    """Builds a successful response; the result defaults to null."""

    def __init__(self, ident: Optional[Id] = None) -> None:
        self._id = ident
        self._result: Any = None

    def id(self, value: Any) -> SuccessBuilder:
        """Set the id, if it was not set before."""
        if self._id is not None:
            raise JsonRpcError("response id is already set")
        self._id = Id.coerce(value)
        return self

    def result(self, value: Any) -> SuccessBuilder:
        """Set the result from any JSON-serialisable value."""
        self._result = _to_json_value(value)
        return self

    def result_str(self, text: str) -> SuccessBuilder:
        """Set the result to a JSON string holding ``text``."""
        if not isinstance(text, str):
            raise InvalidTypeError(f"expected a string, not {type(text).__name__}")
        self._result = text
        return self

    def build(self) -> Response:
        """Return the finished response."""
        if self._id is None:
            raise JsonRpcError("response needs an id before it can be built")
        return Response(id=self._id, status=Success(self._result))


class ErrorBuilder:
    """Builds an error response; an id, a code and a message are required."""

    def __init__(self, ident: Optional[Id] = None) -> None:
        self._id = ident
        self._code: Optional[int] = None
        self._message: Optional[str] = None
        self._data: Any = None

    def id(self, value: Any) -> ErrorBuilder:
        """Set the id, if it was not set before."""
        if self._id is not None:
            raise JsonRpcError("response id is already set")
        self._id = Id.coerce(value)
        return self

    def code(self, code: int) -> ErrorBuilder:
        """Set the error code."""
        if self._code is not None:
            raise JsonRpcError("error code is already set")
        if not _is_i32(code):
            raise InvalidTypeError(f"error code must be a 32-bit integer, not {code!r}")
        self._code = int(code)
        return self

    def message(self, message: str) -> ErrorBuilder:
        """Set the error message."""
        if self._message is not None:
            raise JsonRpcError("error message is already set")
        if not isinstance(message, str):
            raise InvalidTypeError(
                f"error message must be a string, not {type(message).__name__}"
            )
        self._message = message
        return self

    def _preset(self, code: int, message: str) -> ErrorBuilder:
        if self._code is not None or self._message is not None:
            raise JsonRpcError("error code or message is already set")
        self._code = code
        self._message = message
        return self

    def _standard(self, code: ErrorCode) -> ErrorBuilder:
        return self._preset(int(code), code.message)

    def parse_error(self) -> ErrorBuilder:
        """Use the standard "Parse error" code and message."""
        return self._standard(ErrorCode.PARSE_ERROR)

    def invalid_request(self) -> ErrorBuilder:
        """Use the standard "Invalid Request" code and message."""
        return self._standard(ErrorCode.INVALID_REQUEST)

    def method_not_found(self) -> ErrorBuilder:
        """Use the standard "Method not found" code and message."""
        return self._standard(ErrorCode.METHOD_NOT_FOUND)

    def invalid_params(self) -> ErrorBuilder:
        """Use the standard "Invalid params" code and message."""
        return self._standard(ErrorCode.INVALID_PARAMS)

    def internal_error(self) -> ErrorBuilder:
        """Use the standard "Internal error" code and message."""
        return self._standard(ErrorCode.INTERNAL_ERROR)

    def server_error(self, code: Union[int, ServerErrorCode]) -> ErrorBuilder:
        """Use a reserved server error code with the message "Server error"."""
        checked = code if isinstance(code, ServerErrorCode) else ServerErrorCode(code)
        return self._preset(checked.value, "Server error")

    def data(self, value: Any) -> ErrorBuilder:
        """Set the error data from any JSON-serialisable value."""
        self._data = _to_json_value(value)
        return self

    def data_str(self, text: str) -> ErrorBuilder:
        """Set the error data to a JSON string holding ``text``."""
        if not isinstance(text, str):
            raise InvalidTypeError(f"expected a string, not {type(text).__name__}")
        self._data = text
        return self

    def build(self) -> Response:
        """Return the finished response."""
        if self._id is None:
            raise JsonRpcError("response needs an id before it can be built")
        if self._code is None:
            raise JsonRpcError("error response needs a code before it can be built")
        if self._message is None:
            raise JsonRpcError("error response needs a message before it can be built")
        return Response(
            id=self._id,
            status=Failure(code=self._code, message=self._message, data=self._data),
        )