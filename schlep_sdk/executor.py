"""Request executors shared by every sub-client.

``SyncExecutor`` wraps one ``httpx.Client``; ``AsyncExecutor`` wraps one
``httpx.AsyncClient``. Both build the same requests, attach the same headers
and map failures onto the same exception hierarchy, so sub-clients can hand
their request to whichever executor their facade owns.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from schlep_sdk import __version__
from schlep_sdk.auth import build_auth_headers
from schlep_sdk.config import ClientConfig
from schlep_sdk.errors import (
    DeserializationError,
    HttpError,
    error_class_for_status,
)
from schlep_sdk.utils import generate_request_id

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# name -> (filename, content, content_type)
FileParts = Mapping[str, Tuple[str, bytes, str]]

METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


@dataclass(frozen=True)
class Request:
    method: str
    path: str
    json: Any = None
    params: Optional[Dict[str, Any]] = None
    files: Optional[FileParts] = None
    data: Optional[Dict[str, str]] = None

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"Unsupported method: {self.method}")
        if not self.path.startswith("/"):
            raise ValueError(f"path must start with '/', got {self.path!r}")

    @property
    def endpoint(self) -> str:
        return f"{self.method} {self.path}"


class _BaseExecutor:
    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    # ── Request building ─────────────────────────────────────────

    def _headers(self, multipart: bool = False) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": f"schlep-sdk-python/{__version__}",
            "X-Request-ID": generate_request_id(),
        }
        headers.update(build_auth_headers(self.config.api_key))
        if not multipart:
            headers["Content-Type"] = "application/json"
        return headers

    def _build(self, http: Any, request: Request) -> httpx.Request:
        multipart = request.files is not None
        kwargs: Dict[str, Any] = {
            "headers": self._headers(multipart=multipart),
            "params": request.params or None,
        }
        if multipart:
            kwargs["files"] = dict(request.files)
            if request.data:
                kwargs["data"] = request.data
        elif request.json is not None:
            kwargs["json"] = request.json
        return http.build_request(request.method, request.path, **kwargs)

    # ── Response handling ────────────────────────────────────────

    def _raise_for_status(self, resp: httpx.Response, endpoint: str) -> None:
        if resp.is_success:
            return
        request_id = resp.headers.get("x-request-id")
        try:
            body = resp.json()
        except ValueError:
            body = resp.text

        code: Optional[str] = None
        if isinstance(body, dict):
            err = body.get("error")
            if isinstance(err, dict):
                message = (
                    body.get("message") or err.get("message") or body.get("detail") or str(body)
                )
                code = body.get("code") or err.get("code") or err.get("type")
            else:
                message = body.get("message") or body.get("detail") or err or str(body)
                code = body.get("code")
        else:
            message = str(body) or resp.reason_phrase
        if code is not None:
            code = str(code)

        logger.warning(
            "%s failed: status=%s code=%s request_id=%s",
            endpoint, resp.status_code, code, request_id,
        )
        error_cls = error_class_for_status(resp.status_code)
        raise error_cls(resp.status_code, str(message), code, body, request_id)

    def _decode(self, resp: httpx.Response, model: Optional[Type[M]], endpoint: str) -> Any:
        if not resp.content:
            if model is None:
                return None
            raise DeserializationError(f"{endpoint} returned an empty body")
        try:
            body = resp.json()
        except ValueError as e:
            raise DeserializationError(f"{endpoint} returned invalid JSON: {e}", resp.text) from e
        if model is None:
            return body
        return parse_model(model, body, endpoint)

    def _transport_error(self, exc: httpx.TransportError, endpoint: str) -> HttpError:
        logger.warning("%s transport failure: %s", endpoint, exc)
        return HttpError(f"{endpoint} failed: {exc.__class__.__name__}: {exc}")

    def _log_response(self, resp: httpx.Response, endpoint: str, started: float) -> None:
        elapsed_ms = int((time.monotonic() - started) * 1000)
        logger.debug("%s -> %s (%dms)", endpoint, resp.status_code, elapsed_ms)


def parse_model(model: Type[M], body: Any, endpoint: str = "response") -> M:
    """Validate body into model, raising DeserializationError on mismatch."""
    try:
        return model.model_validate(body)
    except PydanticValidationError as e:
        raise DeserializationError(
            f"{endpoint} body does not match {model.__name__}: {e}", body
        ) from e


class SyncExecutor(_BaseExecutor):
    """Blocking executor over a pooled ``httpx.Client``."""

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(config)
        self._http = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    def send(self, request: Request) -> httpx.Response:
        endpoint = request.endpoint
        started = time.monotonic()
        try:
            resp = self._http.send(self._build(self._http, request))
        except httpx.TransportError as e:
            raise self._transport_error(e, endpoint) from e
        self._log_response(resp, endpoint, started)
        self._raise_for_status(resp, endpoint)
        return resp

    def execute(
        self,
        method: str,
        path: str,
        model: Optional[Type[M]] = None,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        expect_body: bool = True,
    ) -> Any:
        request = Request(method, path, json=json, params=params)
        resp = self.send(request)
        if not expect_body:
            return None
        return self._decode(resp, model, request.endpoint)

    def execute_multipart(
        self,
        path: str,
        model: Type[M],
        *,
        files: FileParts,
        data: Optional[Dict[str, str]] = None,
    ) -> M:
        request = Request("POST", path, files=files, data=data)
        return self._decode(self.send(request), model, request.endpoint)

    def download(self, path: str) -> bytes:
        return self.send(Request("GET", path)).content

    def close(self) -> None:
        self._http.close()


class AsyncExecutor(_BaseExecutor):
    """Coroutine executor over a pooled ``httpx.AsyncClient``."""

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(config)
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    async def send(self, request: Request) -> httpx.Response:
        endpoint = request.endpoint
        started = time.monotonic()
        try:
            resp = await self._http.send(self._build(self._http, request))
        except httpx.TransportError as e:
            raise self._transport_error(e, endpoint) from e
        self._log_response(resp, endpoint, started)
        self._raise_for_status(resp, endpoint)
        return resp

    async def execute(
        self,
        method: str,
        path: str,
        model: Optional[Type[M]] = None,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        expect_body: bool = True,
    ) -> Any:
        request = Request(method, path, json=json, params=params)
        resp = await self.send(request)
        if not expect_body:
            return None
        return self._decode(resp, model, request.endpoint)

    async def execute_multipart(
        self,
        path: str,
        model: Type[M],
        *,
        files: FileParts,
        data: Optional[Dict[str, str]] = None,
    ) -> M:
        request = Request("POST", path, files=files, data=data)
        return self._decode(await self.send(request), model, request.endpoint)

    async def download(self, path: str) -> bytes:
        resp = await self.send(Request("GET", path))
        return resp.content

    async def close(self) -> None:
        await self._http.aclose()
