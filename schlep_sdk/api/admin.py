"""Admin API. Requires an admin-scoped API key."""

from __future__ import annotations

from typing import Optional

from schlep_sdk.api._base import MaybeAwaitable, SubClient
from schlep_sdk.models import ListParams, PaginatedResponse, SystemStats, UserSummary


class AdminClient(SubClient):
    def list_users(
        self,
        params: Optional[ListParams] = None,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        offset: Optional[int] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        status: Optional[str] = None,
    ) -> MaybeAwaitable[PaginatedResponse[UserSummary]]:
        """GET /admin/users"""
        return self._list(
            "/admin/users", UserSummary, params,
            limit=limit, cursor=cursor, offset=offset,
            page=page, page_size=page_size, status=status,
        )

    def get_system_stats(self) -> MaybeAwaitable[SystemStats]:
        """GET /admin/stats"""
        return self._executor.execute("GET", "/admin/stats", SystemStats)
