"""Real-time event streaming over WebSocket.

A stream connects to ``<base_url as ws(s)://>/stream``, sends one subscription
message carrying the :class:`StreamConfig`, then yields :class:`StreamEvent`
objects until the caller closes it or the server disconnects. Streams are not
restartable: after a close or a drop, open a new one.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Callable, Dict, Optional

from websockets.asyncio.client import connect as async_connect
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK, WebSocketException
from websockets.sync.client import connect as sync_connect

from schlep_sdk.auth import build_auth_headers
from schlep_sdk.errors import DeserializationError, StreamError
from schlep_sdk.executor import parse_model
from schlep_sdk.models import StreamConfig, StreamEvent

logger = logging.getLogger(__name__)

DEFAULT_OPEN_TIMEOUT = 10.0


def subscription_message(config: StreamConfig, api_key: str) -> Dict[str, Any]:
    return {
        "action": "subscribe",
        "events": config.model_dump(mode="json"),
        "auth": {"api_key": api_key},
    }


def decode_event(raw: Any) -> StreamEvent:
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationError(f"stream message is not UTF-8: {e}", bytes(raw)) from e
    try:
        body = json.loads(raw)
    except ValueError as e:
        raise DeserializationError(f"stream message is not JSON: {e}", raw) from e
    return parse_model(StreamEvent, body, "stream event")


class _StreamBase:
    def __init__(
        self,
        url: str,
        api_key: str,
        config: StreamConfig,
        open_timeout: float = DEFAULT_OPEN_TIMEOUT,
    ) -> None:
        if not isinstance(config, StreamConfig):
            config = StreamConfig.model_validate(config)
        self.url = url
        self.config = config
        self._api_key = api_key
        self._open_timeout = open_timeout
        self._conn: Any = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_reopen(self) -> None:
        if self._closed:
            raise StreamError("stream is closed; open a new stream to reconnect")

    def _connect_kwargs(self) -> Dict[str, Any]:
        return {
            "additional_headers": build_auth_headers(self._api_key),
            "open_timeout": self._open_timeout,
        }

    def _handshake(self) -> str:
        try:
            return json.dumps(subscription_message(self.config, self._api_key))
        except (TypeError, ValueError) as e:
            raise StreamError(f"cannot encode subscription for {self.url}: {e}") from e

    def _dropped(self, exc: ConnectionClosed) -> StreamError:
        self._closed = True
        logger.warning("stream %s dropped: %s", self.url, exc)
        return StreamError(f"stream connection dropped: {exc}")

    def _subscribe_failed(self, exc: Exception) -> StreamError:
        self._closed = True
        logger.warning("stream %s subscription failed: %s", self.url, exc)
        return StreamError(f"could not subscribe on {self.url}: {exc}")

    def __repr__(self) -> str:
        state = "closed" if self._closed else ("open" if self._conn is not None else "idle")
        return f"{type(self).__name__}(url={self.url!r}, event_types={self.config.event_types!r}, {state})"


class EventStream(_StreamBase):
    """Blocking event iterator.

    Usage::

        config = StreamConfig(event_types=["training", "deployment"])
        with client.stream(config) as events:
            for event in events:
                print(event.event_type, event.data)
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        config: StreamConfig,
        *,
        open_timeout: float = DEFAULT_OPEN_TIMEOUT,
        connect: Optional[Callable[..., Any]] = None,
    ) -> None:
        super().__init__(url, api_key, config, open_timeout)
        self._connect = connect or sync_connect

    def open(self) -> "EventStream":
        """Connect and send the subscription. Idempotent while open."""
        self._check_reopen()
        if self._conn is not None:
            return self
        handshake = self._handshake()
        try:
            self._conn = self._connect(self.url, **self._connect_kwargs())
        except (OSError, WebSocketException) as e:
            raise StreamError(f"could not connect to {self.url}: {e}") from e
        try:
            self._conn.send(handshake)
        except Exception as e:
            self._conn.close()
            raise self._subscribe_failed(e) from e
        logger.info("stream connected: %s event_types=%s", self.url, self.config.event_types)
        return self

    def __iter__(self) -> "EventStream":
        return self

    def __next__(self) -> StreamEvent:
        if self._closed:
            raise StopIteration
        if self._conn is None:
            self.open()
        try:
            raw = self._conn.recv()
        except ConnectionClosedOK:
            self.close()
            raise StopIteration
        except ConnectionClosed as e:
            raise self._dropped(e) from e
        return decode_event(raw)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._conn is not None:
            self._conn.close()
            logger.info("stream closed: %s", self.url)

    def __enter__(self) -> "EventStream":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncEventStream(_StreamBase):
    """Asynchronous event iterator.

    Usage::

        async with client.stream(StreamConfig(event_types=["training"])) as events:
            async for event in events:
                ...
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        config: StreamConfig,
        *,
        open_timeout: float = DEFAULT_OPEN_TIMEOUT,
        connect: Optional[Callable[..., Any]] = None,
    ) -> None:
        super().__init__(url, api_key, config, open_timeout)
        self._connect = connect or async_connect

    async def open(self) -> "AsyncEventStream":
        self._check_reopen()
        if self._conn is not None:
            return self
        handshake = self._handshake()
        try:
            self._conn = await self._connect(self.url, **self._connect_kwargs())
        except (OSError, asyncio.TimeoutError, WebSocketException) as e:
            raise StreamError(f"could not connect to {self.url}: {e}") from e
        try:
            await self._conn.send(handshake)
        except Exception as e:
            await self._conn.close()
            raise self._subscribe_failed(e) from e
        logger.info("stream connected: %s event_types=%s", self.url, self.config.event_types)
        return self

    def __aiter__(self) -> "AsyncEventStream":
        return self

    async def __anext__(self) -> StreamEvent:
        if self._closed:
            raise StopAsyncIteration
        if self._conn is None:
            await self.open()
        try:
            raw = await self._conn.recv()
        except ConnectionClosedOK:
            await self.close()
            raise StopAsyncIteration
        except ConnectionClosed as e:
            raise self._dropped(e) from e
        return decode_event(raw)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._conn is not None:
            await self._conn.close()
            logger.info("stream closed: %s", self.url)

    async def __aenter__(self) -> "AsyncEventStream":
        return await self.open()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
