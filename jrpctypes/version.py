"""Checking of the "jsonrpc" member."""

from __future__ import annotations

from typing import Any

from .errors import SerializationError

JSONRPC_VERSION = "2.0"


def validate_version(value: Any) -> str:
    """Return ``value`` if it is the string "2.0", else raise SerializationError."""
    if not isinstance(value, str):
        raise SerializationError(
            f'invalid type: {type(value).__name__}, expected jsonrpc version MUST be "2.0"'
        )
    if value != JSONRPC_VERSION:
        raise SerializationError(f"jsonrpc version NOT 2.0: {value}")
    return value