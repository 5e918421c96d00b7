"""Client configuration: API key, base URL, timeout."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from schlep_sdk.errors import ConfigError

DEFAULT_BASE_URL = "https://api.schlep-engine.com/v1"
DEFAULT_TIMEOUT = 60.0

API_KEY_ENV = "SCHLEP_API_KEY"
BASE_URL_ENV = "SCHLEP_BASE_URL"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ConfigError("API key cannot be empty")
        if not (self.api_key.isascii() and self.api_key.isprintable()):
            raise ConfigError("API key must be printable ASCII")
        object.__setattr__(self, "base_url", _normalize_base_url(self.base_url))
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='{mask_key(self.api_key)}', "
            f"base_url={self.base_url!r}, timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "ClientConfig":
        """Build a config from SCHLEP_API_KEY (required) and SCHLEP_BASE_URL (optional)."""
        api_key = os.environ.get(API_KEY_ENV)
        if not api_key:
            raise ConfigError(f"{API_KEY_ENV} environment variable not set")
        base_url = os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL
        return cls(api_key=api_key, base_url=base_url, timeout=timeout)

    @classmethod
    def resolve(
        cls,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "ClientConfig":
        """Explicit api_key wins; otherwise fall back to SCHLEP_API_KEY."""
        if api_key is None:
            api_key = os.environ.get(API_KEY_ENV)
            if api_key is None:
                raise ConfigError(
                    f"No API key given and {API_KEY_ENV} environment variable not set"
                )
        return cls(api_key=api_key, base_url=base_url, timeout=timeout)


def _normalize_base_url(base_url: str) -> str:
    if not isinstance(base_url, str) or not base_url.strip():
        raise ConfigError("base URL cannot be empty")
    parsed = urlparse(base_url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"base URL must be an absolute http(s) URL, got {base_url!r}")
    return base_url.strip().rstrip("/")


def mask_key(api_key: str) -> str:
    """Keep the first four characters of a key for log and repr output."""
    if len(api_key) <= 4:
        return "****"
    return api_key[:4] + "****"
