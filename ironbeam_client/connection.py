"""WebSocket transport for the streaming endpoint and the loop that turns frames into events."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from dataclasses import dataclass
from typing import Any, Literal, Protocol
from urllib.parse import quote

import websockets
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK

from .errors import IronbeamError, JsonError, WebSocketError
from .handler import events_from_response

log = logging.getLogger(__name__)

MessageKind = Literal["text", "binary", "close"]

_DEFAULT_CLOSE_REASON = "connection closed by server"


@dataclass(frozen=True)
class WsMessage:
    """A frame read from the WebSocket.

    Text and binary frames carry ``payload``; a close frame may carry ``reason``.
    """

    kind: MessageKind
    payload: bytes = b""
    reason: str | None = None


class _Transport(Protocol):
    async def read_frame(self) -> WsMessage: ...

    async def write_close(self) -> None: ...


class WebsocketTransport:
    """Reads frames from and closes an open WebSocket connection."""

    def __init__(self, connection: Any, stream_id: str) -> None:
        self._connection = connection
        self.stream_id = stream_id

    async def read_frame(self) -> WsMessage:
        """Wait for the next data or close frame."""
        try:
            data = await self._connection.recv()
        except ConnectionClosed as exc:
            received = getattr(exc, "rcvd", None)
            if received is None and not isinstance(exc, ConnectionClosedOK):
                raise WebSocketError(str(exc)) from exc
            reason = getattr(received, "reason", "") or None
            return WsMessage("close", reason=reason)
        except Exception as exc:
            raise WebSocketError(str(exc)) from exc
        if isinstance(data, str):
            return WsMessage("text", data.encode("utf-8"))
        return WsMessage("binary", bytes(data))

    async def write_close(self) -> None:
        """Send a normal close frame."""
        try:
            await self._connection.close(code=1000)
        except Exception as exc:
            raise WebSocketError(str(exc)) from exc

    def __repr__(self) -> str:
        return f"WebsocketTransport(stream_id={self.stream_id!r})"


def build_ws_url(base_url: str, stream_id: str, token: str) -> str:
    """Turn ``https://host/v2`` into ``wss://host/v2/stream/{id}?token={token}``."""
    ws_base = base_url.replace("https://", "wss://", 1).replace("http://", "ws://", 1)
    return f"{ws_base}/stream/{stream_id}?token={quote(token, safe='')}"


async def connect(base_url: str, stream_id: str, token: str) -> WebsocketTransport:
    """Open a WebSocket connection to the streaming endpoint."""
    url = build_ws_url(base_url, stream_id, token)
    try:
        connection = await websockets.connect(url)
    except Exception as exc:
        raise WebSocketError(str(exc)) from exc
    return WebsocketTransport(connection, stream_id)


async def _read_unless_shutdown(ws: _Transport, shutdown: asyncio.Event) -> WsMessage | None:
    """Read one frame, or return None once shutdown is requested (shutdown wins ties)."""
    if shutdown.is_set():
        return None
    read = asyncio.ensure_future(ws.read_frame())
    stop = asyncio.ensure_future(shutdown.wait())
    try:
        await asyncio.wait({read, stop}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        read.cancel()
        stop.cancel()
        raise
    if stop.done():
        read.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await read
        return None
    stop.cancel()
    return read.result()


async def message_loop(
    ws: _Transport,
    queue: asyncio.Queue,
    shutdown: asyncio.Event,
    stream_id: str,
) -> None:
    """Read frames and put events, or errors, on ``queue`` until the stream ends.

    Each item is a :class:`StreamEvent` or an :class:`IronbeamError`; a final
    ``None`` marks the end of the stream. Undecodable messages are reported and
    skipped; a close frame or read error ends the loop, as does ``shutdown``.
    """
    while True:
        try:
            frame = await _read_unless_shutdown(ws, shutdown)
        except IronbeamError as exc:
            log.error("websocket read error (stream %s): %s", stream_id, exc)
            await queue.put(exc)
            break

        if frame is None:
            log.debug("shutdown signal received (stream %s)", stream_id)
            with contextlib.suppress(IronbeamError):
                await ws.write_close()
            break

        if frame.kind == "close":
            message = frame.reason if frame.reason is not None else _DEFAULT_CLOSE_REASON
            log.warning("server closed websocket (stream %s): %s", stream_id, message)
            await queue.put(WebSocketError(message))
            break

        try:
            events = events_from_response(frame.payload)
        except JsonError as exc:
            log.warning("failed to parse message (stream %s): %s", stream_id, exc)
            log.debug(
                "unparseable message (stream %s): %s",
                stream_id,
                frame.payload.decode("utf-8", errors="replace"),
            )
            await queue.put(exc)
            continue

        for event in events:
            await queue.put(event)

    await queue.put(None)