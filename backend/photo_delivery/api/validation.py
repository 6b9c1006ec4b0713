"""Validation API — check a delivery package or a metadata document, report on a package."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

import structlog

from photo_delivery.config import get_settings
from photo_delivery.models.requests import ValidateDocumentRequest, ValidatePackageRequest
from photo_delivery.models.responses import DeliveryReportResponse, ValidationResponse
from photo_delivery.validators import (
    DeliveryPackage,
    ValidationResult,
    ValidatorConfig,
    format_canonical_document,
    format_delivery_report,
    format_folder_tree,
    format_photo_list_csv,
    format_text_report,
    generate_delivery_report,
    summarize,
    validation_engine,
)

logger = structlog.get_logger()

router = APIRouter()


def _config_for(request_body: ValidatePackageRequest) -> ValidatorConfig:
    """Per-request options; the server default fills in what the caller left out."""
    threshold = request_body.max_file_size_mb
    if threshold is None:
        threshold = get_settings().MAX_FILE_SIZE_MB
    return ValidatorConfig(max_file_size_mb=threshold)


def _respond(result: ValidationResult) -> ValidationResponse:
    return ValidationResponse(
        result=result,
        summary=summarize(result),
        text_report=format_text_report(result),
    )


@router.post("/validate", response_model=ValidationResponse)
async def validate_package(request_body: ValidatePackageRequest):
    """Validate a delivery package. Defects come back as findings, never as HTTP errors."""
    result = validation_engine.validate(request_body.package, _config_for(request_body))

    logger.info(
        "package_validated",
        target_folder=result.target_folder,
        is_valid=result.is_valid,
        errors=len(result.errors),
        warnings=len(result.warnings),
    )

    return _respond(result)


@router.post("/validate/document", response_model=ValidationResponse)
async def validate_document(request_body: ValidateDocumentRequest):
    """Check a metadata document on its own."""
    result = validation_engine.validate_metadata_document(request_body.document)
    return _respond(result)


@router.post("/validate/canonical", response_class=PlainTextResponse)
async def validate_package_canonical(request_body: ValidatePackageRequest):
    """Validate a package and return the canonical result document verbatim."""
    result = validation_engine.validate(request_body.package, _config_for(request_body))
    return PlainTextResponse(format_canonical_document(result), media_type="application/json")


@router.post("/report", response_model=DeliveryReportResponse)
async def delivery_report(request_body: ValidatePackageRequest):
    """Describe a package's contents along with its validation verdict.

    A package that cannot be assembled is rejected with 422; use /validate to
    get those defects as findings.
    """
    package = DeliveryPackage.model_validate(request_body.package)
    result = validation_engine.validate(package, _config_for(request_body))
    report = generate_delivery_report(package, result)

    return DeliveryReportResponse(
        report=report,
        text_report=format_delivery_report(report),
        photo_list_csv=format_photo_list_csv(report),
        folder_tree=format_folder_tree(package),
    )
