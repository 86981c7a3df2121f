"""
User data stream connection.

Wraps one aiohttp websocket on a listen key and yields decoded events,
one frame at a time and in arrival order. Reconnecting and keeping the
listen key alive are left to the caller (see FuturesClient).

Reference: Binance-style futures User Data Stream API
"""

import logging
from typing import Optional

import aiohttp

from .constants import DEFAULT_STREAM_URL
from .errors import StreamDisconnected, TransportError
from .events import StreamEvent, decode_event

logger = logging.getLogger(__name__)

_CLOSED_TYPES = (aiohttp.WSMsgType.CLOSE, aiohttp.WSMsgType.CLOSING, aiohttp.WSMsgType.CLOSED)


class UserDataStream:
    """
    Decoded event stream for one listen key.

    Usage:
        async with UserDataStream(session, listen_key) as stream:
            async for event in stream:
                ...

    Iteration ends by raising StreamDisconnected.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        listen_key: str,
        stream_url: str = DEFAULT_STREAM_URL,
        heartbeat: float = 60.0,
    ):
        self._session = session
        self._listen_key = listen_key
        self._stream_url = stream_url.rstrip("/")
        self._heartbeat = heartbeat
        self._ws: Optional[aiohttp.ClientWebSocketResponse] = None

    async def connect(self) -> None:
        url = f"{self._stream_url}/{self._listen_key}"
        try:
            self._ws = await self._session.ws_connect(url, heartbeat=self._heartbeat)
        except (aiohttp.ClientError, OSError) as e:
            raise TransportError(f"Failed to connect user data stream: {e!r}", cause=e) from e
        logger.info(f"Connected to user data stream {self._listen_key[:8]}...")

    async def receive(self) -> StreamEvent:
        """
        Wait for the next frame and decode it.

        Raises:
            StreamDisconnected: The websocket closed or errored, with the close
                code and reason when the transport supplied them
            DecodeError: The frame did not decode to a known event
        """
        if self._ws is None:
            raise StreamDisconnected(reason="not connected")

        msg = await self._ws.receive()

        if msg.type in (aiohttp.WSMsgType.TEXT, aiohttp.WSMsgType.BINARY):
            return decode_event(msg.data)

        if msg.type in _CLOSED_TYPES:
            code = msg.data if msg.type == aiohttp.WSMsgType.CLOSE else self._ws.close_code
            reason = msg.extra or None
            logger.warning(f"User data stream closed: code={code} reason={reason}")
            raise StreamDisconnected(code=code, reason=reason)

        if msg.type == aiohttp.WSMsgType.ERROR:
            error = self._ws.exception()
            logger.error(f"User data stream error: {error}")
            raise StreamDisconnected(code=self._ws.close_code, reason=str(error))

        raise StreamDisconnected(
            code=self._ws.close_code, reason=f"unexpected message type {msg.type!r}"
        )

    async def close(self) -> None:
        if self._ws is not None and not self._ws.closed:
            await self._ws.close()
        self._ws = None

    async def __aenter__(self) -> "UserDataStream":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __aiter__(self):
        return self

    async def __anext__(self) -> StreamEvent:
        return await self.receive()
