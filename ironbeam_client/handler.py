"""Turns streaming messages into typed events."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import JsonError


class EventKind(Enum):
    PING = "ping"
    QUOTES = "quotes"
    DEPTH = "depth"
    TRADES = "trades"
    ORDERS = "orders"
    FILLS = "fills"
    POSITIONS = "positions"
    ALL_POSITIONS = "all_positions"
    BALANCE = "balance"
    ALL_BALANCES = "all_balances"
    RISK = "risk"
    ALL_RISK = "all_risk"
    TRADE_BARS = "trade_bars"
    TICK_BARS = "tick_bars"
    TIME_BARS = "time_bars"
    VOLUME_BARS = "volume_bars"
    INDICATORS = "indicators"
    NOTIFICATION = "notification"


# Envelope keys in the order events are produced, with the JSON shape each holds.
_FIELDS: tuple[tuple[str, EventKind, type], ...] = (
    ("p", EventKind.PING, dict),
    ("q", EventKind.QUOTES, list),
    ("d", EventKind.DEPTH, list),
    ("tr", EventKind.TRADES, list),
    ("o", EventKind.ORDERS, list),
    ("f", EventKind.FILLS, list),
    ("ps", EventKind.POSITIONS, list),
    ("psa", EventKind.ALL_POSITIONS, list),
    ("b", EventKind.BALANCE, dict),
    ("ba", EventKind.ALL_BALANCES, list),
    ("ri", EventKind.RISK, dict),
    ("ria", EventKind.ALL_RISK, list),
    ("tb", EventKind.TRADE_BARS, list),
    ("tc", EventKind.TICK_BARS, list),
    ("ti", EventKind.TIME_BARS, list),
    ("vb", EventKind.VOLUME_BARS, list),
    ("i", EventKind.INDICATORS, list),
    ("r", EventKind.NOTIFICATION, dict),
)


@dataclass(frozen=True)
class StreamEvent:
    """One event from the stream: its kind and the decoded JSON it carries."""

    kind: EventKind
    data: Any


def events_from_response(payload: bytes | str | dict[str, Any]) -> list[StreamEvent]:
    """Split one stream message into events, one per populated field.

    Accepts raw message text or an already decoded object. Raises
    :class:`JsonError` if the message is not a well-formed envelope.
    """
    if isinstance(payload, (bytes, str)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise JsonError(str(exc)) from exc
    if not isinstance(payload, dict):
        raise JsonError("stream message is not a JSON object")

    events = []
    for key, kind, shape in _FIELDS:
        value = payload.get(key)
        if value is None:
            continue
        if not isinstance(value, shape):
            raise JsonError(f"field {key!r} should be a JSON {shape.__name__}")
        events.append(StreamEvent(kind, value))
    return events