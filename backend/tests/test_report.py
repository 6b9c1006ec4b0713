"""Tests for report rendering: text report, canonical document, summary."""

import json

from photo_delivery.validators import (
    ErrorCode,
    Finding,
    ValidationResult,
    WarningCode,
    format_canonical_document,
    format_text_report,
    parse_canonical_document,
    summarize,
)
from tests.builders import make_entry, make_package

VALIDATED_AT = "2024-01-15T10:00:00.000Z"


def _result(errors=(), warnings=()) -> ValidationResult:
    return ValidationResult(
        errors=list(errors),
        warnings=list(warnings),
        validated_at=VALIDATED_AT,
        target_folder="PHOTO",
    )


ERROR = Finding(
    code=ErrorCode.INVALID_PHOTO_FILE_NAME,
    message="ファイル名が規則に準拠していません",
    target_file="test.jpg",
    target_field="delivery_file_name",
    details="P + 7桁連番",
)
WARNING = Finding(
    code=WarningCode.MISSING_SHOOTING_LOCATION,
    message="撮影箇所が設定されていません",
    target_file="P0000001.JPG",
)


class TestTextReport:

    def test_passing_result(self):
        text = format_text_report(_result())

        assert "結果: 合格" in text
        assert "対象フォルダ: PHOTO" in text
        assert f"検証日時: {VALIDATED_AT}" in text
        assert "エラー" not in text

    def test_failing_result_lists_error_context(self):
        text = format_text_report(_result(errors=[ERROR]))

        assert "結果: 不合格" in text
        assert "エラー (1件):" in text
        assert "  [E101 INVALID_PHOTO_FILE_NAME] ファイル名が規則に準拠していません" in text
        assert "    ファイル: test.jpg" in text
        assert "    項目: delivery_file_name" in text
        assert "    詳細: P + 7桁連番" in text

    def test_warnings_listed(self):
        text = format_text_report(_result(warnings=[WARNING]))

        assert "結果: 合格" in text
        assert "警告 (1件):" in text
        assert "[W001 MISSING_SHOOTING_LOCATION] 撮影箇所が設定されていません" in text

    def test_errors_rendered_in_result_order(self):
        second = Finding(code=ErrorCode.MISSING_ROOT_FOLDER, message="root")
        text = format_text_report(_result(errors=[ERROR, second]))

        assert text.index("INVALID_PHOTO_FILE_NAME") < text.index("MISSING_ROOT_FOLDER")

    def test_deterministic(self):
        result = _result(errors=[ERROR], warnings=[WARNING])

        assert format_text_report(result) == format_text_report(result)

    def test_banner_lines(self):
        lines = format_text_report(_result()).split("\n")

        assert lines[0] == "=" * 60
        assert lines[1] == "電子納品検証結果"
        assert lines[-1] == "=" * 60


class TestCanonicalDocument:

    def test_round_trip(self):
        result = _result(errors=[ERROR], warnings=[WARNING])

        assert parse_canonical_document(format_canonical_document(result)) == result

    def test_round_trip_of_engine_output(self, engine):
        result = engine.validate(make_package([make_entry("bad.jpg", photo_number=3, shooting_location=None)]))

        parsed = parse_canonical_document(format_canonical_document(result))

        assert parsed == result
        assert parsed.validated_at == result.validated_at
        assert parsed.is_valid is False

    def test_keys_sorted_and_validity_included(self):
        document = json.loads(format_canonical_document(_result(errors=[ERROR])))

        assert list(document) == sorted(document)
        assert document["is_valid"] is False
        assert document["errors"][0]["code"] == "INVALID_PHOTO_FILE_NAME"

    def test_unset_optionals_omitted(self):
        document = json.loads(format_canonical_document(_result(warnings=[
            Finding(code=WarningCode.NO_REPRESENTATIVE_PHOTO, message="none"),
        ])))

        assert document["warnings"][0] == {"code": "NO_REPRESENTATIVE_PHOTO", "message": "none"}

    def test_non_ascii_kept_verbatim(self):
        assert "ファイル名" in format_canonical_document(_result(errors=[ERROR]))


class TestSummary:

    def test_summary_lines(self):
        summary = summarize(_result(errors=[ERROR], warnings=[WARNING]))

        assert summary.is_valid is False
        assert summary.error_count == 1
        assert summary.warning_count == 1
        assert summary.errors == ["[INVALID_PHOTO_FILE_NAME] ファイル名が規則に準拠していません (test.jpg)"]

    def test_summary_without_target_file(self):
        summary = summarize(_result(errors=[Finding(code=ErrorCode.EMPTY_PHOTO_LIST, message="empty")]))

        assert summary.errors == ["[EMPTY_PHOTO_LIST] empty"]
