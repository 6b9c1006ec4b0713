"""Naming Validator — delivery file name pattern and uniqueness.

Photos must be named P + 7 digits + extension (P0000001.JPG), drawings
D + 7 digits + extension (D0000001.PDF). Delivery names must be unique
within the package.
"""

from collections import Counter

from photo_delivery.validators.base import BaseValidator
from photo_delivery.validators.file_naming import is_valid_drawing_file_name, is_valid_photo_file_name
from photo_delivery.validators.models import DeliveryPackage, ErrorCode, Finding, ValidatorConfig
from photo_delivery.validators.reference_data import DRAWING_EXTENSIONS, PHOTO_EXTENSIONS


class NamingValidator(BaseValidator):
    """Validates delivery file names against the standard's naming rules."""

    @property
    def name(self) -> str:
        return "NamingValidator"

    def validate(self, package: DeliveryPackage, config: ValidatorConfig) -> list[Finding]:
        findings = []

        # 1. Photo name pattern
        for entry in package.photo_files:
            if not is_valid_photo_file_name(entry.delivery_file_name):
                findings.append(self._finding(
                    code=ErrorCode.INVALID_PHOTO_FILE_NAME,
                    message="ファイル名が規則に準拠していません",
                    target_file=entry.delivery_file_name,
                    target_field="delivery_file_name",
                    details=f"P + 7桁連番 + 拡張子 ({'/'.join(PHOTO_EXTENSIONS)}) 形式で指定してください",
                ))

        # 2. Duplicates: one finding per repeat beyond the first occurrence
        findings.extend(self._check_duplicates(package))

        # 3. Drawing name pattern
        for entry in package.drawing_files:
            if not is_valid_drawing_file_name(entry.delivery_file_name):
                findings.append(self._finding(
                    code=ErrorCode.INVALID_DRAWING_FILE_NAME,
                    message="参考図ファイル名が規則に準拠していません",
                    target_file=entry.delivery_file_name,
                    target_field="delivery_file_name",
                    details=f"D + 7桁連番 + 拡張子 ({'/'.join(DRAWING_EXTENSIONS)}) 形式で指定してください",
                ))

        return findings

    def _check_duplicates(self, package: DeliveryPackage) -> list[Finding]:
        """Flag every photo whose delivery name was already used earlier in the package.

        Names are compared case-insensitively, so P0000001.JPG and p0000001.jpg collide.
        """
        findings = []
        totals = Counter(entry.delivery_file_name.upper() for entry in package.photo_files)
        seen: set[str] = set()

        for entry in package.photo_files:
            key = entry.delivery_file_name.upper()
            if key in seen:
                findings.append(self._finding(
                    code=ErrorCode.DUPLICATE_FILE_NAME,
                    message="ファイル名が重複しています",
                    target_file=entry.delivery_file_name,
                    target_field="delivery_file_name",
                    details=f"{totals[key]}件のファイルが同じ名前です",
                ))
            seen.add(key)

        return findings
