"""Structured exceptions for the Schlep-engine SDK."""

from __future__ import annotations

from typing import Any, Optional


class SchlepError(Exception):
    """Base exception for everything the SDK raises."""
    pass


class ConfigError(SchlepError):
    """Missing or invalid API key or base URL."""
    pass


class HttpError(SchlepError):
    """Transport failure: DNS, connect, TLS or timeout."""
    pass


class DeserializationError(SchlepError):
    """A 2xx response body did not match the expected shape."""

    def __init__(self, message: str, body: Any = None) -> None:
        self.body = body
        super().__init__(message)


class StreamError(SchlepError):
    """WebSocket connect failure or abnormal disconnect."""
    pass


class ApiError(SchlepError):
    """Base exception for non-2xx API responses."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        detail: Any = None,
        request_id: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.code = code
        self.detail = detail
        self.request_id = request_id
        label = f"{status_code} {code}" if code else str(status_code)
        super().__init__(f"[{label}] {message}")


class BadRequestError(ApiError):
    """400 Bad Request."""
    pass


class AuthError(ApiError):
    """401 Unauthorized: missing or invalid API key."""
    pass


class ForbiddenError(ApiError):
    """403 Forbidden: insufficient permissions."""
    pass


class NotFoundError(ApiError):
    """404 Not Found: job, pipeline, file or user missing."""
    pass


class ConflictError(ApiError):
    """409 Conflict."""
    pass


class UnprocessableEntityError(ApiError):
    """422 Unprocessable Entity: invalid request parameters."""
    pass


class RateLimitError(ApiError):
    """429 Too Many Requests."""
    pass


class ServerError(ApiError):
    """500+: server-side error."""
    pass


STATUS_ERRORS = {
    400: BadRequestError,
    401: AuthError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def error_class_for_status(status_code: int) -> type:
    if status_code >= 500:
        return ServerError
    return STATUS_ERRORS.get(status_code, ApiError)
