"""Shared plumbing for the namespaced sub-clients."""

from __future__ import annotations

from typing import Any, Awaitable, Dict, Optional, Tuple, Type, TypeVar, Union

from schlep_sdk.models import ListParams, PaginatedResponse

T = TypeVar("T")

# Sub-client methods return the executor's result unchanged: a value for the
# sync client, an awaitable for the async one.
MaybeAwaitable = Union[T, Awaitable[T]]

OCTET_STREAM = "application/octet-stream"


def file_part(
    content: bytes,
    filename: str,
    content_type: Optional[str] = None,
) -> Tuple[str, bytes, str]:
    if not isinstance(content, (bytes, bytearray, memoryview)):
        raise TypeError(f"file content must be bytes, got {type(content).__name__}")
    return (filename, bytes(content), content_type or OCTET_STREAM)


def list_query(
    params: Optional[ListParams] = None,
    **overrides: Any,
) -> Dict[str, Any]:
    """Merge a ListParams with keyword overrides; unset values are dropped."""
    merged = params.to_query() if params is not None else {}
    merged.update({k: v for k, v in overrides.items() if v is not None})
    # Round-trip through ListParams so unknown keys fail early.
    return ListParams(**merged).to_query()


class SubClient:
    """A lightweight view bound to its facade's executor."""

    def __init__(self, executor: Any) -> None:
        self._executor = executor

    def _list(
        self,
        path: str,
        item_model: Type[Any],
        params: Optional[ListParams],
        **overrides: Any,
    ) -> Any:
        return self._executor.execute(
            "GET",
            path,
            PaginatedResponse[item_model],
            params=list_query(params, **overrides),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._executor.config.base_url!r})"
