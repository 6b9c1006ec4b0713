"""Delivery Validator — deterministic compliance checks for electronic delivery packages.

Usage:
    from photo_delivery.validators import validation_engine, format_text_report

    result = validation_engine.validate(package)
    if not result.is_valid:
        print(format_text_report(result))
"""

from photo_delivery.validators.delivery_report import (
    DeliveryReport,
    FileStatistics,
    PhotoListItem,
    format_delivery_report,
    format_file_size,
    format_folder_tree,
    format_photo_list_csv,
    generate_delivery_report,
)
from photo_delivery.validators.engine import (
    ValidationEngine,
    validate,
    validate_metadata_document,
    validation_engine,
)
from photo_delivery.validators.models import (
    DeliveryPackage,
    DrawingFileEntry,
    ErrorCode,
    Finding,
    FindingKind,
    PhotoCategory,
    PhotoFileEntry,
    PhotoInfo,
    PhotoMajorCategory,
    ValidationResult,
    ValidatorConfig,
    WarningCode,
)
from photo_delivery.validators.report import (
    ValidationSummary,
    format_canonical_document,
    format_text_report,
    parse_canonical_document,
    summarize,
)

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate",
    "validate_metadata_document",
    "DeliveryPackage",
    "DrawingFileEntry",
    "PhotoFileEntry",
    "PhotoInfo",
    "PhotoCategory",
    "PhotoMajorCategory",
    "ValidatorConfig",
    "ValidationResult",
    "Finding",
    "FindingKind",
    "ErrorCode",
    "WarningCode",
    "ValidationSummary",
    "format_text_report",
    "format_canonical_document",
    "parse_canonical_document",
    "summarize",
    "DeliveryReport",
    "FileStatistics",
    "PhotoListItem",
    "generate_delivery_report",
    "format_delivery_report",
    "format_photo_list_csv",
    "format_folder_tree",
    "format_file_size",
]
