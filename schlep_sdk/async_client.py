"""AsyncSchlepClient: asynchronous Python SDK for the Schlep-engine API."""

from __future__ import annotations

from typing import Any, Callable, Optional

import httpx

from schlep_sdk.client import _ClientBase
from schlep_sdk.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from schlep_sdk.executor import AsyncExecutor
from schlep_sdk.models import StreamConfig
from schlep_sdk.streaming import AsyncEventStream


class AsyncSchlepClient(_ClientBase):
    """Asynchronous client for the Schlep-engine API.

    Every request method returns an awaitable; concurrent calls share one
    pooled ``httpx.AsyncClient``.

    Usage::

        import asyncio
        from schlep_sdk import AsyncSchlepClient

        async def main():
            async with AsyncSchlepClient("your-api-key") as c:
                pipeline = await c.ml.create_pipeline({"name": "p", "task_type": "regression"})
                print(pipeline.pipeline_id)

        asyncio.run(main())
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        *,
        config: Optional[ClientConfig] = None,
    ) -> None:
        super().__init__(config or ClientConfig.resolve(api_key, base_url, timeout))
        self._executor = AsyncExecutor(self._config, transport=transport)

    @classmethod
    def from_env(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "AsyncSchlepClient":
        return cls(config=ClientConfig.from_env(), transport=transport)

    @classmethod
    def with_base_url(
        cls,
        api_key: str,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AsyncSchlepClient":
        return cls(config=ClientConfig(api_key=api_key, base_url=base_url), transport=transport)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AsyncSchlepClient":
        return cls(config=config, transport=transport)

    def stream(
        self,
        config: StreamConfig,
        *,
        connect: Optional[Callable[..., Any]] = None,
    ) -> AsyncEventStream:
        """Return an unopened stream; ``async with`` or ``await .open()`` connects it."""
        return AsyncEventStream(self._stream_url(), self._config.api_key, config, connect=connect)

    # ── Context Manager ─────────────────────────────────────────

    async def __aenter__(self) -> "AsyncSchlepClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._executor.close()
