"""SchlepClient: typed Python SDK for the Schlep-engine API."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import httpx

from schlep_sdk.api import (
    AdminClient,
    AnalyticsClient,
    DataClient,
    DocumentClient,
    MLClient,
    MonitoringClient,
    QualityClient,
    StorageClient,
    UsersClient,
)
from schlep_sdk.api._base import MaybeAwaitable
from schlep_sdk.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from schlep_sdk.executor import SyncExecutor
from schlep_sdk.models import (
    DeployResponse,
    StatusResponse,
    StreamConfig,
    TrainConfig,
    TrainResponse,
    UploadResponse,
)
from schlep_sdk.streaming import EventStream
from schlep_sdk.utils import build_path, require, to_websocket_url


class _ClientBase:
    """Surface shared by the sync and async facades.

    Everything here hands a request to ``self._executor`` and returns its
    result, so the same code serves both clients.
    """

    _executor: Any

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ── Sub-clients ──────────────────────────────────────────────

    @property
    def data(self) -> DataClient:
        return DataClient(self._executor)

    @property
    def ml(self) -> MLClient:
        return MLClient(self._executor)

    @property
    def analytics(self) -> AnalyticsClient:
        return AnalyticsClient(self._executor)

    @property
    def document(self) -> DocumentClient:
        return DocumentClient(self._executor)

    @property
    def quality(self) -> QualityClient:
        return QualityClient(self._executor)

    @property
    def storage(self) -> StorageClient:
        return StorageClient(self._executor)

    @property
    def monitoring(self) -> MonitoringClient:
        return MonitoringClient(self._executor)

    @property
    def users(self) -> UsersClient:
        return UsersClient(self._executor)

    @property
    def admin(self) -> AdminClient:
        return AdminClient(self._executor)

    # ── Legacy flat surface ──────────────────────────────────────

    def upload(self, data: str) -> MaybeAwaitable[UploadResponse]:
        """POST /upload"""
        return self._executor.execute("POST", "/upload", UploadResponse, json={"data": data})

    def train(self, config: Any) -> MaybeAwaitable[TrainResponse]:
        """POST /train

        ``config`` is a :class:`TrainConfig` or a plain dict with at least
        ``model_type`` and ``dataset_id``.
        """
        if isinstance(config, TrainConfig):
            body: Dict[str, Any] = config.model_dump()
        else:
            body = dict(config)
        return self._executor.execute("POST", "/train", TrainResponse, json=body)

    def deploy(self, model_id: str) -> MaybeAwaitable[DeployResponse]:
        """POST /deploy"""
        body = {"model_id": require("model_id", model_id)}
        return self._executor.execute("POST", "/deploy", DeployResponse, json=body)

    def status(self, job_id: str) -> MaybeAwaitable[StatusResponse]:
        """GET /status/{job_id}"""
        path = build_path("/status/{job_id}", job_id=job_id)
        return self._executor.execute("GET", path, StatusResponse)

    def _stream_url(self) -> str:
        return to_websocket_url(self._config.base_url, "/stream")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"


class SchlepClient(_ClientBase):
    """Synchronous client for the Schlep-engine API.

    Usage::

        from schlep_sdk import SchlepClient

        c = SchlepClient("your-api-key")
        with open("data.csv", "rb") as f:
            job = c.data.process_file(f.read(), "csv")
        print(job.job_id)

    ``api_key`` falls back to the ``SCHLEP_API_KEY`` environment variable.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
        *,
        config: Optional[ClientConfig] = None,
    ) -> None:
        super().__init__(config or ClientConfig.resolve(api_key, base_url, timeout))
        self._executor = SyncExecutor(self._config, transport=transport)

    @classmethod
    def from_env(cls, transport: Optional[httpx.BaseTransport] = None) -> "SchlepClient":
        """Build a client from SCHLEP_API_KEY and the optional SCHLEP_BASE_URL."""
        return cls(config=ClientConfig.from_env(), transport=transport)

    @classmethod
    def with_base_url(
        cls,
        api_key: str,
        base_url: str,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "SchlepClient":
        return cls(config=ClientConfig(api_key=api_key, base_url=base_url), transport=transport)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "SchlepClient":
        return cls(config=config, transport=transport)

    def stream(
        self,
        config: StreamConfig,
        *,
        connect: Optional[Callable[..., Any]] = None,
    ) -> EventStream:
        """Open a WebSocket event stream filtered by config.

        The returned stream is already connected and subscribed; close it (or
        use it as a context manager) to release the socket.
        """
        stream = EventStream(self._stream_url(), self._config.api_key, config, connect=connect)
        return stream.open()

    # ── Context Manager ─────────────────────────────────────────

    def __enter__(self) -> "SchlepClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._executor.close()
