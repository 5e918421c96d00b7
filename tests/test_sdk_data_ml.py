"""Tests for the data processing and ML pipeline sub-clients."""

from __future__ import annotations

import pytest

from schlep_sdk.models import (
    DeploymentResponse,
    PipelineResponse,
    PredictionResponse,
    ProcessingJobResponse,
    TrainingJobResponse,
)

JOB = {
    "job_id": "job_abc123",
    "status": "processing",
    "created_at": "2024-01-01T00:00:00Z",
}


# ── Data ─────────────────────────────────────────────────────────

class TestDataProcessFile:
    def test_process_file_returns_job_id(self, client, mock_api):
        mock_api.reply(json_body=JOB)
        job = client.data.process_file(b"name,age\nAda,36\n", "csv")
        assert isinstance(job, ProcessingJobResponse)
        assert job.job_id == "job_abc123"
        assert job.status == "processing"

    def test_process_file_sends_multipart(self, client, mock_api):
        mock_api.reply(json_body=JOB)
        client.data.process_file(b"name,age\nAda,36\n", "csv")
        req = mock_api.last
        assert req.method == "POST"
        assert req.url.path == "/v1/data/process"
        assert req.headers["content-type"].startswith("multipart/form-data; boundary=")
        assert req.headers["authorization"] == "Bearer test-api-key"
        body = req.content
        assert b'name="file"; filename="upload"' in body
        assert b"Content-Type: application/octet-stream" in body
        assert b"name,age\nAda,36\n" in body
        assert b'name="format"' in body
        assert b"csv" in body

    def test_process_file_requires_format(self, client, mock_api):
        with pytest.raises(ValueError):
            client.data.process_file(b"x", "")


class TestDataJobs:
    def test_transform_data(self, client, mock_api):
        mock_api.reply(json_body={
            "job_id": "job_abc123",
            "status": "completed",
            "transformations_applied": ["rename", "filter"],
        })
        transformations = {"operations": [
            {"type": "rename", "from": "old_name", "to": "new_name"},
            {"type": "filter", "column": "age", "operator": ">", "value": 18},
        ]}
        r = client.data.transform_data("job_abc123", transformations)
        assert r.transformations_applied == ["rename", "filter"]
        assert mock_api.last.url.path == "/v1/data/transform"
        assert mock_api.last_json() == {"job_id": "job_abc123", "transformations": transformations}

    def test_validate_schema(self, client, mock_api):
        mock_api.reply(json_body={"valid": False, "errors": ["email: invalid format"]})
        schema = {"fields": [{"name": "email", "type": "string", "format": "email"}]}
        r = client.data.validate_schema("job_abc123", schema)
        assert r.valid is False
        assert r.errors == ["email: invalid format"]
        assert r.warnings is None
        assert mock_api.last_json() == {"job_id": "job_abc123", "schema": schema}

    def test_get_job(self, client, mock_api):
        mock_api.reply(json_body={**JOB, "status": "completed", "result": {"rows": 1000}})
        job = client.data.get_job("job_abc123")
        assert job.result == {"rows": 1000}
        assert mock_api.last.method == "GET"
        assert mock_api.last.url.path == "/v1/data/jobs/job_abc123"

    def test_job_id_is_percent_encoded(self, client, mock_api):
        mock_api.reply(json_body=JOB)
        client.data.get_job("a/b c")
        assert mock_api.last.url.raw_path == b"/v1/data/jobs/a%2Fb%20c"


# ── ML ───────────────────────────────────────────────────────────

PIPELINE = {
    "pipeline_id": "pipe_1",
    "name": "Classification Pipeline",
    "status": "created",
    "config": {"task_type": "classification"},
}


class TestMLPipelines:
    def test_create_pipeline_posts_config(self, client, mock_api):
        mock_api.reply(json_body=PIPELINE)
        config = {"name": "Classification Pipeline", "task_type": "classification",
                  "model_type": "random_forest"}
        p = client.ml.create_pipeline(config)
        assert isinstance(p, PipelineResponse)
        assert p.pipeline_id == "pipe_1"
        assert mock_api.last.url.path == "/v1/ml/pipelines"
        assert mock_api.last_json() == config

    def test_get_pipeline(self, client, mock_api):
        mock_api.reply(json_body=PIPELINE)
        p = client.ml.get_pipeline("pipe_1")
        assert p.config == {"task_type": "classification"}
        assert mock_api.last.url.path == "/v1/ml/pipelines/pipe_1"

    def test_train_pipeline(self, client, mock_api):
        mock_api.reply(json_body={"job_id": "train_1", "pipeline_id": "pipe_1",
                                  "status": "training", "progress": 12.5})
        job = client.ml.train_pipeline("pipe_1", {"epochs": 50, "batch_size": 32})
        assert isinstance(job, TrainingJobResponse)
        assert job.progress == 12.5
        assert job.model_id is None
        assert mock_api.last.url.path == "/v1/ml/train"
        assert mock_api.last_json() == {"pipeline_id": "pipe_1",
                                        "config": {"epochs": 50, "batch_size": 32}}

    def test_get_training_job(self, client, mock_api):
        mock_api.reply(json_body={"job_id": "train_1", "status": "completed",
                                  "model_id": "model_9", "metrics": {"f1": 0.91}})
        job = client.ml.get_training_job("train_1")
        assert job.model_id == "model_9"
        assert job.metrics == {"f1": 0.91}
        assert mock_api.last.url.path == "/v1/ml/training/train_1"


class TestMLDeployPredict:
    def test_deploy_model_defaults_config_to_empty_object(self, client, mock_api):
        mock_api.reply(json_body={"deployment_id": "dep_1", "model_id": "model_9",
                                  "endpoint_url": "https://models.test/model_9", "status": "deploying"})
        d = client.ml.deploy_model("model_9")
        assert isinstance(d, DeploymentResponse)
        assert d.endpoint_url == "https://models.test/model_9"
        assert mock_api.last_json() == {"model_id": "model_9", "config": {}}

    def test_deploy_model_with_config(self, client, mock_api):
        mock_api.reply(json_body={"deployment_id": "dep_1", "model_id": "model_9",
                                  "endpoint_url": "https://models.test/model_9", "status": "deploying"})
        client.ml.deploy_model("model_9", {"replicas": 3, "auto_scale": True})
        assert mock_api.last_json()["config"] == {"replicas": 3, "auto_scale": True}

    def test_predict(self, client, mock_api):
        mock_api.reply(json_body={"predictions": [1, 0], "model_id": "model_9",
                                  "probabilities": [[0.1, 0.9], [0.8, 0.2]]})
        r = client.ml.predict("model_9", {"features": [[1.5, 2.3], [3.1, 4.2]]})
        assert isinstance(r, PredictionResponse)
        assert r.predictions == [1, 0]
        assert mock_api.last.url.path == "/v1/ml/predict"
        assert mock_api.last_json() == {"endpoint": "model_9",
                                        "data": {"features": [[1.5, 2.3], [3.1, 4.2]]}}
