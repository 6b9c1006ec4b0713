"""API response models."""

from pydantic import BaseModel
from typing import Literal

from photo_delivery.validators import DeliveryReport, ValidationResult, ValidationSummary


class ValidationResponse(BaseModel):
    """Validation result plus both renderings the operator UI needs."""

    result: ValidationResult
    summary: ValidationSummary
    text_report: str


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    rule_count: int


class DeliveryReportResponse(BaseModel):
    """Delivery report with its text, CSV, and folder tree renderings."""

    report: DeliveryReport
    text_report: str
    photo_list_csv: str
    folder_tree: str
