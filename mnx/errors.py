from __future__ import annotations

from typing import Any, Dict, List, Optional


# -----------------------------
# Exceptions
# -----------------------------
class MnxError(Exception):
    """Base exception for the MNX binding layer."""


class SchemaError(MnxError):
    """
    Input JSON does not conform to the MNX schema.

    ``path`` is a JSON path into the input document (``$`` is the root),
    ``cause`` a human readable reason. ``errors`` keeps every problem found
    in the same pass, first one first.
    """

    def __init__(self, path: str, cause: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause
        self.errors = errors or [{"path": path, "cause": cause}]


class EncodeError(MnxError):
    """The in-memory model holds a value that cannot be written as MNX JSON."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class InputTooLargeError(MnxError):
    """Text input exceeds the configured size bound."""

    def __init__(self, size: int, limit: int):
        super().__init__(f"MNX input is {size} bytes, limit is {limit} bytes")
        self.size = size
        self.limit = limit
