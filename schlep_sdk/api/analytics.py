"""Analytics API."""

from __future__ import annotations

from typing import Any, Dict

from schlep_sdk.api._base import MaybeAwaitable, SubClient
from schlep_sdk.models import DatasetResponse, QueryResponse, ReportResponse
from schlep_sdk.utils import build_path


class AnalyticsClient(SubClient):
    def execute_query(self, query: Dict[str, Any]) -> MaybeAwaitable[QueryResponse]:
        """POST /analytics/query, e.g. ``{"sql": "SELECT * FROM users"}``."""
        return self._executor.execute("POST", "/analytics/query", QueryResponse, json=query)

    def create_report(self, config: Dict[str, Any]) -> MaybeAwaitable[ReportResponse]:
        """POST /analytics/reports"""
        return self._executor.execute("POST", "/analytics/reports", ReportResponse, json=config)

    def get_report(self, report_id: str) -> MaybeAwaitable[ReportResponse]:
        """GET /analytics/reports/{report_id}"""
        path = build_path("/analytics/reports/{report_id}", report_id=report_id)
        return self._executor.execute("GET", path, ReportResponse)

    def create_dataset(self, config: Dict[str, Any]) -> MaybeAwaitable[DatasetResponse]:
        """POST /analytics/datasets"""
        return self._executor.execute("POST", "/analytics/datasets", DatasetResponse, json=config)

    def get_dataset(self, dataset_id: str) -> MaybeAwaitable[DatasetResponse]:
        """GET /analytics/datasets/{dataset_id}"""
        path = build_path("/analytics/datasets/{dataset_id}", dataset_id=dataset_id)
        return self._executor.execute("GET", path, DatasetResponse)
