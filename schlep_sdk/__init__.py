"""Schlep-engine Python SDK: typed client for the Schlep-engine API."""

__version__ = "0.2.0"

from schlep_sdk.config import DEFAULT_BASE_URL, ClientConfig
from schlep_sdk.client import SchlepClient
from schlep_sdk.async_client import AsyncSchlepClient
from schlep_sdk.errors import (
    ApiError,
    AuthError,
    BadRequestError,
    ConfigError,
    ConflictError,
    DeserializationError,
    ForbiddenError,
    HttpError,
    NotFoundError,
    RateLimitError,
    SchlepError,
    ServerError,
    StreamError,
    UnprocessableEntityError,
)
from schlep_sdk.models import ListParams, PaginatedResponse, StreamConfig, StreamEvent, TrainConfig
from schlep_sdk.streaming import AsyncEventStream, EventStream

__all__ = [
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "SchlepClient",
    "AsyncSchlepClient",
    "ListParams",
    "PaginatedResponse",
    "StreamConfig",
    "StreamEvent",
    "TrainConfig",
    "EventStream",
    "AsyncEventStream",
    "SchlepError",
    "ConfigError",
    "HttpError",
    "DeserializationError",
    "StreamError",
    "ApiError",
    "BadRequestError",
    "AuthError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitError",
    "ServerError",
]
