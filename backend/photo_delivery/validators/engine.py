"""Validation Engine — orchestrates all rule groups and produces a ValidationResult.

This is the main entry point for delivery package validation. It runs the
fixed rule chain against the package and splits the findings into errors
and warnings.

Usage:
    engine = ValidationEngine()
    result = engine.validate(package)
    if not result.is_valid:
        # Show format_text_report(result) to the operator
"""

import json
import time
from typing import Optional, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from photo_delivery.validators.base import BaseValidator
from photo_delivery.validators.document_validator import DocumentValidator
from photo_delivery.validators.models import (
    DeliveryPackage,
    ErrorCode,
    Finding,
    ValidationResult,
    ValidatorConfig,
)

# Import all rule groups
from photo_delivery.validators.structure_validator import StructureValidator
from photo_delivery.validators.naming_validator import NamingValidator
from photo_delivery.validators.metadata_validator import MetadataValidator
from photo_delivery.validators.sequence_validator import SequenceValidator
from photo_delivery.validators.warning_validator import WarningValidator

logger = structlog.get_logger()

PackageInput = Union[DeliveryPackage, dict, str, bytes]


class ValidationEngine:
    """Runs the rule chain and produces a unified validation result.

    Design principles:
        - Deterministic: same package → same findings, in the same order
        - Exhaustive: every rule runs, one failure never hides another
        - Total: always returns a result for package input, even garbage
        - Observable: logs every validation run with timing
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        """Initialize with the default rule chain.

        Args:
            config: Default options for calls that don't pass their own.
        """
        self.config = config or ValidatorConfig()
        self.validators = self._default_validators()
        self.document_validator = DocumentValidator()

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the rule chain in execution order. Reports follow this order."""
        return [
            StructureValidator(),  # Folders, metadata document, photo list
            NamingValidator(),     # P0000001.JPG pattern + duplicates
            MetadataValidator(),   # Title, shooting date, category
            SequenceValidator(),   # Photo numbers form 1..N
            WarningValidator(),    # Non-blocking review flags
        ]

    def validate(
        self,
        package: PackageInput,
        config: Optional[ValidatorConfig] = None,
    ) -> ValidationResult:
        """Run all rules against the package and produce a result.

        Args:
            package: DeliveryPackage, or its dict / JSON form
            config: Options for this call; falls back to the engine default

        Returns:
            ValidationResult with is_valid, errors, and warnings
        """
        start_time = time.perf_counter()
        config = config or self.config

        if not isinstance(package, DeliveryPackage):
            package, findings = self._coerce_package(package)
            if package is None:
                result = ValidationResult.build(findings)
                logger.warning(
                    "validation_rejected_input",
                    total_errors=len(result.errors),
                )
                return result

        # Run all rules
        all_findings: list[Finding] = []
        validator_timings: dict[str, float] = {}

        for validator in self.validators:
            v_start = time.perf_counter()
            try:
                all_findings.extend(validator.validate(package, config))
            except Exception as e:
                logger.error(
                    "validator_failed",
                    validator=validator.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                # Don't let one broken rule hide the others
                all_findings.append(Finding(
                    code=ErrorCode.RULE_EXECUTION_FAILED,
                    message=f"検証ルール '{validator.name}' の実行に失敗しました",
                    details=f"{type(e).__name__}: {e}",
                ))
            finally:
                v_duration = (time.perf_counter() - v_start) * 1000
                validator_timings[validator.name] = round(v_duration, 2)

        result = ValidationResult.build(all_findings, target_folder=package.root_folder_name)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            target_folder=result.target_folder,
            is_valid=result.is_valid,
            photo_count=len(package.photo_files),
            total_errors=len(result.errors),
            total_warnings=len(result.warnings),
            error_codes=sorted({f.code for f in result.errors}),
            duration_ms=round(total_duration, 2),
            validator_timings=validator_timings,
        )

        return result

    def validate_metadata_document(self, raw: str) -> ValidationResult:
        """Check the metadata document on its own, independent of any package.

        Raises:
            TypeError: raw is not a str
        """
        findings = self.document_validator.validate(raw)
        result = ValidationResult.build(findings)

        logger.info(
            "document_validation_complete",
            is_valid=result.is_valid,
            document_length=len(raw),
            total_errors=len(result.errors),
        )

        return result

    def _coerce_package(
        self, raw: Union[dict, str, bytes]
    ) -> tuple[Optional[DeliveryPackage], list[Finding]]:
        """Assemble a DeliveryPackage from raw input, or explain why it can't be."""
        if not isinstance(raw, (dict, str, bytes)):
            raise TypeError(f"Package must be a DeliveryPackage, dict, or JSON string, got {type(raw).__name__}")

        if isinstance(raw, (str, bytes)):
            try:
                raw = json.loads(raw)
            except ValueError as e:  # JSONDecodeError, UnicodeDecodeError
                return None, [Finding(
                    code=ErrorCode.INVALID_PACKAGE_MODEL,
                    message="納品データを解析できません",
                    details=str(e),
                )]

        try:
            return DeliveryPackage.model_validate(raw), []
        except PydanticValidationError as e:
            return None, [
                Finding(
                    code=ErrorCode.INVALID_PACKAGE_MODEL,
                    message="納品データの形式が不正です",
                    target_field=".".join(str(part) for part in err["loc"]) or None,
                    details=err["msg"],
                )
                for err in e.errors()
            ]


# Module-level singleton
validation_engine = ValidationEngine()


def validate(package: PackageInput, config: Optional[ValidatorConfig] = None) -> ValidationResult:
    """Validate a package with the shared engine."""
    return validation_engine.validate(package, config)


def validate_metadata_document(raw: str) -> ValidationResult:
    """Check a raw metadata document with the shared engine."""
    return validation_engine.validate_metadata_document(raw)
