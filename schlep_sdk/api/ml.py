"""ML Pipeline API: pipelines, training, deployment, predictions."""

from __future__ import annotations

from typing import Any, Dict, Optional

from schlep_sdk.api._base import MaybeAwaitable, SubClient
from schlep_sdk.models import (
    DeploymentResponse,
    ListParams,
    PaginatedResponse,
    PipelineResponse,
    PredictionResponse,
    TrainingJobResponse,
)
from schlep_sdk.utils import build_path, require


class MLClient(SubClient):
    """Client for the ML Pipeline API.

    Usage::

        pipeline = client.ml.create_pipeline({
            "name": "Classification Pipeline",
            "task_type": "classification",
            "model_type": "random_forest",
        })
        job = client.ml.train_pipeline(pipeline.pipeline_id, {"epochs": 10})
    """

    def create_pipeline(self, config: Dict[str, Any]) -> MaybeAwaitable[PipelineResponse]:
        """POST /ml/pipelines"""
        return self._executor.execute("POST", "/ml/pipelines", PipelineResponse, json=config)

    def get_pipeline(self, pipeline_id: str) -> MaybeAwaitable[PipelineResponse]:
        """GET /ml/pipelines/{pipeline_id}"""
        path = build_path("/ml/pipelines/{pipeline_id}", pipeline_id=pipeline_id)
        return self._executor.execute("GET", path, PipelineResponse)

    def list_pipelines(
        self,
        params: Optional[ListParams] = None,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        offset: Optional[int] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        status: Optional[str] = None,
    ) -> MaybeAwaitable[PaginatedResponse[PipelineResponse]]:
        """GET /ml/pipelines"""
        return self._list(
            "/ml/pipelines", PipelineResponse, params,
            limit=limit, cursor=cursor, offset=offset,
            page=page, page_size=page_size, status=status,
        )

    def train_pipeline(self, pipeline_id: str, config: Dict[str, Any]) -> MaybeAwaitable[TrainingJobResponse]:
        """POST /ml/train. Start training; config carries epochs, batch_size, etc."""
        body = {"pipeline_id": require("pipeline_id", pipeline_id), "config": config}
        return self._executor.execute("POST", "/ml/train", TrainingJobResponse, json=body)

    def get_training_job(self, job_id: str) -> MaybeAwaitable[TrainingJobResponse]:
        """GET /ml/training/{job_id}"""
        path = build_path("/ml/training/{job_id}", job_id=job_id)
        return self._executor.execute("GET", path, TrainingJobResponse)

    def deploy_model(
        self,
        model_id: str,
        config: Optional[Dict[str, Any]] = None,
    ) -> MaybeAwaitable[DeploymentResponse]:
        """POST /ml/deploy

        An omitted config is sent as an empty object.
        """
        body = {"model_id": require("model_id", model_id), "config": config if config is not None else {}}
        return self._executor.execute("POST", "/ml/deploy", DeploymentResponse, json=body)

    def predict(self, endpoint: str, data: Any) -> MaybeAwaitable[PredictionResponse]:
        """POST /ml/predict. ``endpoint`` is the deployed model's URL or identifier."""
        body = {"endpoint": require("endpoint", endpoint), "data": data}
        return self._executor.execute("POST", "/ml/predict", PredictionResponse, json=body)
