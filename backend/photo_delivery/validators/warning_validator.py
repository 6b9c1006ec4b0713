"""Warning Validator — conditions that flag a package for review without blocking it."""

from photo_delivery.validators.base import BaseValidator
from photo_delivery.validators.models import DeliveryPackage, Finding, ValidatorConfig, WarningCode
from photo_delivery.validators.reference_data import BYTES_PER_MB


class WarningValidator(BaseValidator):
    """Representative photo, shooting location, and file size checks."""

    @property
    def name(self) -> str:
        return "WarningValidator"

    def validate(self, package: DeliveryPackage, config: ValidatorConfig) -> list[Finding]:
        findings = []

        # 1. At least one representative photo across the package
        if not any(entry.photo_info.is_representative_photo for entry in package.photo_files):
            findings.append(self._finding(
                code=WarningCode.NO_REPRESENTATIVE_PHOTO,
                message="代表写真が設定されていません",
                target_field="is_representative_photo",
                details="代表写真を1枚以上設定することを推奨します",
            ))

        # 2. Per-photo checks
        for entry in package.photo_files:
            if self._is_blank(entry.photo_info.shooting_location):
                findings.append(self._finding(
                    code=WarningCode.MISSING_SHOOTING_LOCATION,
                    message="撮影箇所が設定されていません",
                    target_file=entry.delivery_file_name,
                    target_field="shooting_location",
                ))

            size_mb = entry.file_size_bytes / BYTES_PER_MB
            if size_mb > config.max_file_size_mb:
                findings.append(self._finding(
                    code=WarningCode.LARGE_FILE_SIZE,
                    message=f"ファイルサイズが大きいです ({size_mb:.2f}MB)",
                    target_file=entry.delivery_file_name,
                    target_field="file_size_bytes",
                    details=f"推奨: {config.max_file_size_mb:g}MB以下",
                ))

        return findings
