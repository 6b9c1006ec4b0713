"""Report rendering — text report for operators, canonical JSON for other systems.

Both renderings are pure functions of the ValidationResult.
"""

import json

from pydantic import BaseModel, Field

from photo_delivery.validators.models import Finding, ValidationResult, identifier_of

BANNER_WIDTH = 60
SECTION_WIDTH = 40


class ValidationSummary(BaseModel):
    """Condensed view of a result: verdict, counts, and one line per finding."""

    is_valid: bool
    error_count: int = 0
    warning_count: int = 0
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


def _label(finding: Finding) -> str:
    """[E101 INVALID_PHOTO_FILE_NAME] — identifier first when the code has one."""
    identifier = identifier_of(finding.code)
    return f"[{identifier} {finding.code}]" if identifier else f"[{finding.code}]"


def format_text_report(result: ValidationResult) -> str:
    """Render the result for a human correcting a submission package."""
    lines = [
        "=" * BANNER_WIDTH,
        "電子納品検証結果",
        "=" * BANNER_WIDTH,
        f"検証日時: {result.validated_at}",
        f"対象フォルダ: {result.target_folder}",
        f"結果: {'合格' if result.is_valid else '不合格'}",
        "",
    ]

    if result.errors:
        lines.append(f"エラー ({len(result.errors)}件):")
        lines.append("-" * SECTION_WIDTH)
        for error in result.errors:
            lines.append(f"  {_label(error)} {error.message}")
            if error.target_file:
                lines.append(f"    ファイル: {error.target_file}")
            if error.target_field:
                lines.append(f"    項目: {error.target_field}")
            if error.details:
                lines.append(f"    詳細: {error.details}")
        lines.append("")

    if result.warnings:
        lines.append(f"警告 ({len(result.warnings)}件):")
        lines.append("-" * SECTION_WIDTH)
        for warning in result.warnings:
            lines.append(f"  {_label(warning)} {warning.message}")
            if warning.target_file:
                lines.append(f"    ファイル: {warning.target_file}")
            if warning.details:
                lines.append(f"    詳細: {warning.details}")

    lines.append("=" * BANNER_WIDTH)

    return "\n".join(lines)


def format_canonical_document(result: ValidationResult) -> str:
    """Key-ordered JSON document. parse_canonical_document() inverts it exactly."""
    payload = result.model_dump(mode="json", exclude_none=True)
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def parse_canonical_document(document: str) -> ValidationResult:
    """Rebuild a ValidationResult from format_canonical_document() output.

    Raises:
        pydantic.ValidationError: the document is not a rendered result
    """
    return ValidationResult.model_validate_json(document)


def summarize(result: ValidationResult) -> ValidationSummary:
    """One line per finding: [CODE] message (file)."""

    def line(finding: Finding) -> str:
        suffix = f" ({finding.target_file})" if finding.target_file else ""
        return f"[{finding.code}] {finding.message}{suffix}"

    return ValidationSummary(
        is_valid=result.is_valid,
        error_count=len(result.errors),
        warning_count=len(result.warnings),
        errors=[line(e) for e in result.errors],
        warnings=[line(w) for w in result.warnings],
    )
