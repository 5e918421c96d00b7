"""Data Processing API: file processing, transformations, schema validation."""

from __future__ import annotations

from typing import Any, Optional

from schlep_sdk.api._base import MaybeAwaitable, SubClient, file_part
from schlep_sdk.models import (
    ListParams,
    PaginatedResponse,
    ProcessingJobResponse,
    TransformationResponse,
    ValidationResponse,
)
from schlep_sdk.utils import build_path, require


class DataClient(SubClient):
    """Client for the Data Processing API.

    Usage::

        with open("data.csv", "rb") as f:
            job = client.data.process_file(f.read(), "csv")
        client.data.transform_data(job.job_id, {
            "operations": [{"type": "filter", "column": "age", "operator": ">", "value": 18}],
        })
    """

    def process_file(self, file: bytes, format: str) -> MaybeAwaitable[ProcessingJobResponse]:
        """POST /data/process (multipart). Upload a file and start a processing job.

        ``format`` is the declared data format, e.g. "csv", "json" or "parquet".
        """
        require("format", format)
        return self._executor.execute_multipart(
            "/data/process",
            ProcessingJobResponse,
            files={"file": file_part(file, "upload")},
            data={"format": format},
        )

    def transform_data(self, job_id: str, transformations: Any) -> MaybeAwaitable[TransformationResponse]:
        """POST /data/transform"""
        body = {"job_id": require("job_id", job_id), "transformations": transformations}
        return self._executor.execute("POST", "/data/transform", TransformationResponse, json=body)

    def validate_schema(self, job_id: str, schema: Any) -> MaybeAwaitable[ValidationResponse]:
        """POST /data/validate"""
        body = {"job_id": require("job_id", job_id), "schema": schema}
        return self._executor.execute("POST", "/data/validate", ValidationResponse, json=body)

    def get_job(self, job_id: str) -> MaybeAwaitable[ProcessingJobResponse]:
        """GET /data/jobs/{job_id}"""
        path = build_path("/data/jobs/{job_id}", job_id=job_id)
        return self._executor.execute("GET", path, ProcessingJobResponse)

    def list_jobs(
        self,
        params: Optional[ListParams] = None,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        offset: Optional[int] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        status: Optional[str] = None,
    ) -> MaybeAwaitable[PaginatedResponse[ProcessingJobResponse]]:
        """GET /data/jobs"""
        return self._list(
            "/data/jobs", ProcessingJobResponse, params,
            limit=limit, cursor=cursor, offset=offset,
            page=page, page_size=page_size, status=status,
        )
