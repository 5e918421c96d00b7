"""Data Quality API."""

from __future__ import annotations

from typing import Any, Dict, List

from schlep_sdk.api._base import MaybeAwaitable, SubClient
from schlep_sdk.models import (
    QualityAssessmentResponse,
    QualityRuleResponse,
    ValidationResultResponse,
)
from schlep_sdk.utils import build_path, require


class QualityClient(SubClient):
    def assess_quality(self, job_id: str) -> MaybeAwaitable[QualityAssessmentResponse]:
        """GET /quality/assess/{job_id}"""
        path = build_path("/quality/assess/{job_id}", job_id=job_id)
        return self._executor.execute("GET", path, QualityAssessmentResponse)

    def create_rule(self, rule: Dict[str, Any]) -> MaybeAwaitable[QualityRuleResponse]:
        """POST /quality/rules"""
        return self._executor.execute("POST", "/quality/rules", QualityRuleResponse, json=rule)

    def validate_data(self, job_id: str, rules: List[str]) -> MaybeAwaitable[ValidationResultResponse]:
        """POST /quality/validate. Run the given rule ids against a job's data."""
        body = {"job_id": require("job_id", job_id), "rules": list(rules)}
        return self._executor.execute("POST", "/quality/validate", ValidationResultResponse, json=body)
