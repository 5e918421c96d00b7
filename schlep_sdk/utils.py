"""Utilities: request-ID helpers, path templating, URL conversion."""

from __future__ import annotations

import uuid
from typing import Optional
from urllib.parse import quote


def generate_request_id() -> str:
    """Generate a short UUID4 hex string for X-Request-ID."""
    return uuid.uuid4().hex[:12]


def require(name: str, value: Optional[str]) -> str:
    """Reject empty identifiers before any request is built."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")
    return value


def build_path(template: str, **segments: str) -> str:
    """Fill a path template, percent-encoding each segment.

    ``build_path("/data/jobs/{job_id}", job_id="a/b")`` -> ``/data/jobs/a%2Fb``
    """
    encoded = {name: quote(require(name, value), safe="") for name, value in segments.items()}
    return template.format(**encoded)


def to_websocket_url(base_url: str, path: str = "/stream") -> str:
    """https:// -> wss://, http:// -> ws://, then append path."""
    if base_url.startswith("https://"):
        ws_url = "wss://" + base_url[len("https://"):]
    elif base_url.startswith("http://"):
        ws_url = "ws://" + base_url[len("http://"):]
    else:
        ws_url = base_url
    return ws_url.rstrip("/") + path
