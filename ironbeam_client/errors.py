"""Error types raised by the client and helpers for reading API error bodies."""

from __future__ import annotations

import json
from typing import Any

_MAX_NESTING = 3


class IronbeamError(Exception):
    """Base class for every error the client raises."""

    _prefix = ""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self._prefix}{self.message}"


class HttpError(IronbeamError):
    """The HTTP transport failed before a response was received."""

    _prefix = "http: "


class JsonError(IronbeamError):
    """A response or stream message could not be decoded."""

    _prefix = "json: "


class ApiError(IronbeamError):
    """The API answered with an error status."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        super().__init__(message)

    def __str__(self) -> str:
        return f"api error {self.status}: {self.message}"


class AuthError(IronbeamError):
    """Authentication is missing or malformed."""

    _prefix = "auth failed: "


class WebSocketError(IronbeamError):
    """The streaming connection failed or was closed."""

    _prefix = "websocket: "


def _is_error_body(value: Any) -> bool:
    """Whether ``value`` has the shape of an API error body, nested results included."""
    if not isinstance(value, dict):
        return False
    for key in ("error1", "message"):
        if value.get(key) is not None and not isinstance(value[key], str):
            return False
    inner = value.get("result")
    return inner is None or _is_error_body(inner)


def _extract_message(body: dict[str, Any], depth: int) -> str | None:
    for key in ("error1", "message"):
        text = body.get(key)
        if text:
            return text
    inner = body.get("result")
    if depth > 0 and inner is not None:
        return _extract_message(inner, depth - 1)
    return None


def parse_api_error(body: bytes | str) -> str:
    """Return a readable message from an API error body.

    Looks at ``error1`` and then ``message``, descending into a nested
    ``result`` object; falls back to the raw body text.
    """
    raw = body if isinstance(body, bytes) else body.encode("utf-8")
    try:
        parsed = json.loads(raw)
    except ValueError:
        parsed = None
    if _is_error_body(parsed):
        message = _extract_message(parsed, _MAX_NESTING)
        if message is not None:
            return message
    return raw.decode("utf-8", errors="replace")