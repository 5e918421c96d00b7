"""Monitoring API: metrics, health and alerts."""

from __future__ import annotations

from typing import Any, Dict, Optional

from schlep_sdk.api._base import MaybeAwaitable, SubClient
from schlep_sdk.models import (
    AlertResponse,
    HealthResponse,
    ListParams,
    MetricsResponse,
    PaginatedResponse,
)


class MonitoringClient(SubClient):
    def get_metrics(self, params: Optional[Dict[str, Any]] = None) -> MaybeAwaitable[MetricsResponse]:
        """POST /monitoring/metrics. ``params`` selects metric names and time range."""
        return self._executor.execute(
            "POST", "/monitoring/metrics", MetricsResponse, json=params if params is not None else {},
        )

    def get_health(self) -> MaybeAwaitable[HealthResponse]:
        """GET /monitoring/health"""
        return self._executor.execute("GET", "/monitoring/health", HealthResponse)

    def list_alerts(
        self,
        params: Optional[ListParams] = None,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        offset: Optional[int] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        status: Optional[str] = None,
    ) -> MaybeAwaitable[PaginatedResponse[AlertResponse]]:
        """GET /monitoring/alerts"""
        return self._list(
            "/monitoring/alerts", AlertResponse, params,
            limit=limit, cursor=cursor, offset=offset,
            page=page, page_size=page_size, status=status,
        )
