"""Pydantic request/response models for the Schlep-engine SDK.

These mirror the platform's JSON shapes so callers get typed access to fields.
Fields the server always sends are required; everything else defaults to None.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


# ── Pagination ───────────────────────────────────────────────────

class ListParams(BaseModel):
    """Optional pagination and filtering parameters for ``list_*`` calls."""

    model_config = ConfigDict(extra="forbid")

    limit: Optional[int] = None
    cursor: Optional[str] = None
    offset: Optional[int] = None
    page: Optional[int] = None
    page_size: Optional[int] = None
    status: Optional[str] = None

    def to_query(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of a list endpoint. Items keep the server's order."""

    items: List[T]
    total: Optional[int] = None
    page: Optional[int] = None
    page_size: Optional[int] = None
    total_pages: Optional[int] = None
    next_cursor: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_list(cls, data: Any) -> Any:
        # Some list endpoints return a plain JSON array.
        if isinstance(data, list):
            return {"items": data}
        return data


# ── Legacy surface ───────────────────────────────────────────────

class UploadResponse(BaseModel):
    job_id: str
    status: str
    message: Optional[str] = None


class TrainConfig(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_type: str
    dataset_id: str
    parameters: Dict[str, Any] = Field(default_factory=dict)


class TrainResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    job_id: str
    status: str
    model_id: Optional[str] = None
    message: Optional[str] = None


class DeployResponse(BaseModel):
    deployment_id: str
    endpoint_url: str
    status: str
    message: Optional[str] = None


class StatusResponse(BaseModel):
    job_id: str
    status: str
    progress: Optional[float] = None
    result: Optional[Any] = None
    error: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


# ── Data processing ──────────────────────────────────────────────

class ProcessingJobResponse(BaseModel):
    job_id: str
    status: str
    result: Optional[Any] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class TransformationResponse(BaseModel):
    job_id: str
    status: str
    transformations_applied: Optional[List[str]] = None


class ValidationResponse(BaseModel):
    valid: bool
    errors: Optional[List[str]] = None
    warnings: Optional[List[str]] = None


# ── ML pipelines ─────────────────────────────────────────────────

class PipelineResponse(BaseModel):
    pipeline_id: str
    name: str
    status: str
    config: Optional[Any] = None
    created_at: Optional[str] = None


class TrainingJobResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    job_id: str
    status: str
    pipeline_id: Optional[str] = None
    progress: Optional[float] = None
    model_id: Optional[str] = None
    metrics: Optional[Any] = None


class DeploymentResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    deployment_id: str
    model_id: str
    endpoint_url: str
    status: str


class PredictionResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    predictions: Any
    model_id: str
    probabilities: Optional[Any] = None


# ── Analytics ────────────────────────────────────────────────────

class QueryResponse(BaseModel):
    query_id: str
    results: Any
    row_count: int
    execution_time_ms: Optional[int] = None


class ReportResponse(BaseModel):
    report_id: str
    name: str
    status: str
    data: Optional[Any] = None


class DatasetResponse(BaseModel):
    dataset_id: str
    name: str
    row_count: Optional[int] = None
    column_count: Optional[int] = None


# ── Document extraction ──────────────────────────────────────────

class ExtractionResponse(BaseModel):
    text: str
    metadata: Optional[Any] = None
    page_count: Optional[int] = None


class TableExtractionResponse(BaseModel):
    tables: List[Any]
    table_count: int


class ImageExtractionResponse(BaseModel):
    images: List[str]
    image_count: int


class OCRResponse(BaseModel):
    text: str
    confidence: Optional[float] = None
    language: Optional[str] = None


# ── Data quality ─────────────────────────────────────────────────

class QualityIssue(BaseModel):
    issue_type: str
    severity: str
    description: str
    affected: Optional[Any] = None


class QualityAssessmentResponse(BaseModel):
    quality_score: float
    issues: Optional[List[QualityIssue]] = None
    metrics: Optional[Any] = None


class QualityRuleResponse(BaseModel):
    rule_id: str
    name: str
    config: Any


class ValidationResult(BaseModel):
    rule_id: str
    passed: bool
    error: Optional[str] = None


class ValidationResultResponse(BaseModel):
    passed: bool
    results: List[ValidationResult]


# ── Storage ──────────────────────────────────────────────────────

class FileUploadResponse(BaseModel):
    file_id: str
    url: str
    size: int


class FileMetadata(BaseModel):
    file_id: str
    filename: str
    size: int
    content_type: Optional[str] = None
    uploaded_at: Optional[str] = None


# ── Monitoring ───────────────────────────────────────────────────

class MetricsResponse(BaseModel):
    metrics: Any
    timestamp: str


class HealthResponse(BaseModel):
    status: str
    version: Optional[str] = None
    components: Optional[Dict[str, str]] = None


class AlertResponse(BaseModel):
    alert_id: str
    alert_type: str
    severity: str
    message: str
    timestamp: str


# ── Users ────────────────────────────────────────────────────────

class UserProfile(BaseModel):
    user_id: str
    email: str
    name: Optional[str] = None
    created_at: Optional[str] = None


class ApiKeyInfo(BaseModel):
    key_id: str
    name: str
    key_prefix: str
    created_at: Optional[str] = None
    last_used_at: Optional[str] = None


# ── Admin ────────────────────────────────────────────────────────

class UserSummary(BaseModel):
    user_id: str
    email: str
    status: str
    registered_at: Optional[str] = None


class SystemStats(BaseModel):
    total_users: int
    total_jobs: int
    active_jobs: int
    additional_stats: Optional[Dict[str, Any]] = None


# ── Streaming ────────────────────────────────────────────────────

class StreamConfig(BaseModel):
    """Event types to subscribe to and server-side filter criteria."""

    event_types: List[str]
    filters: Dict[str, Any] = Field(default_factory=dict)


class StreamEvent(BaseModel):
    event_type: str
    data: Any
    timestamp: str
