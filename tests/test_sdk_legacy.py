"""Tests for the flat upload/train/deploy/status surface."""

from __future__ import annotations

import pytest

from schlep_sdk import TrainConfig
from schlep_sdk.errors import DeserializationError


class TestLegacySurface:
    def test_upload(self, client, mock_api):
        mock_api.reply(json_body={"job_id": "job_1", "status": "queued", "message": "accepted"})
        r = client.upload("name,age\nAda,36\n")
        assert r.job_id == "job_1"
        assert r.message == "accepted"
        assert mock_api.last.url.path == "/v1/upload"
        assert mock_api.last_json() == {"data": "name,age\nAda,36\n"}

    def test_train_with_model(self, client, mock_api):
        mock_api.reply(json_body={"job_id": "train_1", "status": "training"})
        cfg = TrainConfig(model_type="random_forest", dataset_id="ds_1", parameters={"trees": 100})
        r = client.train(cfg)
        assert r.model_id is None
        assert mock_api.last.url.path == "/v1/train"
        assert mock_api.last_json() == {"model_type": "random_forest", "dataset_id": "ds_1",
                                        "parameters": {"trees": 100}}

    def test_train_with_dict(self, client, mock_api):
        mock_api.reply(json_body={"job_id": "train_1", "status": "training", "model_id": "m_1"})
        r = client.train({"model_type": "xgboost", "dataset_id": "ds_2"})
        assert r.model_id == "m_1"
        assert mock_api.last_json() == {"model_type": "xgboost", "dataset_id": "ds_2"}

    def test_deploy(self, client, mock_api):
        mock_api.reply(json_body={"deployment_id": "dep_1", "endpoint_url": "https://models.test/m_1",
                                  "status": "deploying"})
        r = client.deploy("m_1")
        assert r.endpoint_url == "https://models.test/m_1"
        assert mock_api.last_json() == {"model_id": "m_1"}

    def test_status(self, client, mock_api):
        mock_api.reply(json_body={"job_id": "job_1", "status": "failed", "error": "out of memory"})
        r = client.status("job_1")
        assert r.error == "out of memory"
        assert mock_api.last.method == "GET"
        assert mock_api.last.url.path == "/v1/status/job_1"

    def test_status_missing_job_id_in_body(self, client, mock_api):
        mock_api.reply(json_body={"status": "running"})
        with pytest.raises(DeserializationError):
            client.status("job_1")
