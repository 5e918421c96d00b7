"""Test doubles for the Schlep SDK: a mock HTTP API and fake WebSocket connections."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import httpx
from websockets.exceptions import ConnectionClosedError, ConnectionClosedOK

API_KEY = "test-api-key"
BASE_URL = "https://api.test/v1"


class MockApi:
    """Queue of canned responses plus a log of the requests that hit them."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[Any] = []

    def reply(
        self,
        status: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> "MockApi":
        if content is None and json_body is not None:
            content = json.dumps(json_body).encode()
            headers = {"content-type": "application/json", **(headers or {})}
        self._responses.append(httpx.Response(status, content=content or b"", headers=headers))
        return self

    def fail(self, exc_type: type = httpx.ConnectError, message: str = "boom") -> "MockApi":
        self._responses.append((exc_type, message))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        nxt = self._responses.pop(0)
        if isinstance(nxt, tuple):
            exc_type, message = nxt
            raise exc_type(message, request=request)
        return nxt

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


# ── WebSocket doubles ────────────────────────────────────────────

class FakeConnection:
    """Stands in for a websockets ClientConnection."""

    def __init__(
        self,
        messages: List[Any],
        drop: bool = False,
        fail_send: Optional[BaseException] = None,
    ) -> None:
        self.sent: List[str] = []
        self.messages = list(messages)
        self.drop = drop
        self.fail_send = fail_send
        self.closed = False

    def send(self, message: str) -> None:
        if self.fail_send is not None:
            raise self.fail_send
        self.sent.append(message)

    def recv(self) -> Any:
        if self.closed:
            raise ConnectionClosedOK(None, None)
        if not self.messages:
            if self.drop:
                raise ConnectionClosedError(None, None)
            raise ConnectionClosedOK(None, None)
        return self.messages.pop(0)

    def close(self) -> None:
        self.closed = True


class FakeAsyncConnection(FakeConnection):
    async def send(self, message: str) -> None:  # type: ignore[override]
        FakeConnection.send(self, message)

    async def recv(self) -> Any:  # type: ignore[override]
        return FakeConnection.recv(self)

    async def close(self) -> None:  # type: ignore[override]
        FakeConnection.close(self)


class FakeConnector:
    """Callable replacing websockets' connect(); records the URL and kwargs."""

    def __init__(self, connection: FakeConnection) -> None:
        self.connection = connection
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, url: str, **kwargs: Any) -> FakeConnection:
        self.calls.append({"url": url, **kwargs})
        return self.connection


class FakeAsyncConnector(FakeConnector):
    async def __call__(self, url: str, **kwargs: Any) -> FakeConnection:  # type: ignore[override]
        return FakeConnector.__call__(self, url, **kwargs)


def event(event_type: str, n: int) -> str:
    return json.dumps({
        "event_type": event_type,
        "data": {"seq": n},
        "timestamp": f"2024-01-01T00:00:0{n}Z",
    })
