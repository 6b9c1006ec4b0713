"""Metadata Validator — required PhotoInfo fields and the shooting date format."""

from datetime import datetime

from photo_delivery.validators.base import BaseValidator
from photo_delivery.validators.models import DeliveryPackage, ErrorCode, Finding, ValidatorConfig
from photo_delivery.validators.reference_data import SHOOTING_DATE_FORMAT, SHOOTING_DATE_PATTERN


class MetadataValidator(BaseValidator):
    """Validates that every photo carries the metadata the standard requires."""

    @property
    def name(self) -> str:
        return "MetadataValidator"

    def validate(self, package: DeliveryPackage, config: ValidatorConfig) -> list[Finding]:
        findings = []

        for entry in package.photo_files:
            photo = entry.photo_info
            target = entry.delivery_file_name

            if self._is_blank(photo.title):
                findings.append(self._finding(
                    code=ErrorCode.MISSING_PHOTO_TITLE,
                    message="写真タイトルが設定されていません",
                    target_file=target,
                    target_field="title",
                ))

            if not photo.shooting_date:
                findings.append(self._finding(
                    code=ErrorCode.MISSING_SHOOTING_DATE,
                    message="撮影日が設定されていません",
                    target_file=target,
                    target_field="shooting_date",
                ))
            elif not is_valid_shooting_date(photo.shooting_date):
                findings.append(self._finding(
                    code=ErrorCode.INVALID_DATE_FORMAT,
                    message="撮影日の形式が不正です",
                    target_file=target,
                    target_field="shooting_date",
                    details=f"YYYY-MM-DD形式で指定してください (値: {photo.shooting_date})",
                ))

            if not photo.category:
                findings.append(self._finding(
                    code=ErrorCode.MISSING_PHOTO_CATEGORY,
                    message="写真区分が設定されていません",
                    target_file=target,
                    target_field="category",
                ))

        return findings


def is_valid_shooting_date(value: str) -> bool:
    """Exact YYYY-MM-DD that is also a real calendar date.

    2024/01/15 and 2024-1-15 are rejected even though they parse as dates.
    """
    if not SHOOTING_DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, SHOOTING_DATE_FORMAT)
    except ValueError:
        return False
    return True
