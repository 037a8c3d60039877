"""Exceptions raised while building, reading or writing JSON-RPC objects."""

from __future__ import annotations


class JsonRpcError(Exception):
    """Base class for every error raised by this package."""


class InvalidTypeError(JsonRpcError, TypeError):
    """A value has a type that cannot be used where it was given."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid type: {detail}")


class SerializationError(JsonRpcError, ValueError):
    """JSON text or data could not be read or written as a JSON-RPC value."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"serialization error: {detail}")