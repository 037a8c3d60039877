"""Types and builders for JSON-RPC 2.0 requests, notifications and responses."""

__version__ = "0.1.0"