"""Structure Validator — root folder, metadata document, PIC/DRA folders, photo list."""

from photo_delivery.validators.base import BaseValidator
from photo_delivery.validators.models import DeliveryPackage, ErrorCode, Finding, ValidatorConfig


class StructureValidator(BaseValidator):
    """Validates the folder layout of the delivery package."""

    @property
    def name(self) -> str:
        return "StructureValidator"

    def validate(self, package: DeliveryPackage, config: ValidatorConfig) -> list[Finding]:
        findings = []

        # 1. Required folders and the metadata document
        if not package.root_folder_name:
            findings.append(self._finding(
                code=ErrorCode.MISSING_ROOT_FOLDER,
                message="ルートフォルダが設定されていません",
                target_field="root_folder_name",
            ))

        if not package.metadata_document_path:
            findings.append(self._finding(
                code=ErrorCode.MISSING_PHOTO_XML,
                message="PHOTO.XMLパスが設定されていません",
                target_field="metadata_document_path",
            ))

        if not package.picture_folder_path:
            findings.append(self._finding(
                code=ErrorCode.MISSING_PIC_FOLDER,
                message="PICフォルダパスが設定されていません",
                target_field="picture_folder_path",
            ))

        if package.drawing_files and not package.drawing_folder_path:
            findings.append(self._finding(
                code=ErrorCode.MISSING_DRA_FOLDER,
                message="DRAフォルダパスが設定されていません",
                target_field="drawing_folder_path",
                details=f"参考図ファイル {len(package.drawing_files)}件",
            ))

        # 2. At least one photo
        if len(package.photo_files) == 0:
            findings.append(self._finding(
                code=ErrorCode.EMPTY_PHOTO_LIST,
                message="写真ファイルが含まれていません",
                target_field="photo_files",
            ))

        # 3. File sizes reported by the storage layer must be sane
        for entry in [*package.photo_files, *package.drawing_files]:
            if entry.file_size_bytes < 0:
                findings.append(self._finding(
                    code=ErrorCode.INVALID_FILE_SIZE,
                    message="ファイルサイズが不正です",
                    target_file=entry.delivery_file_name,
                    target_field="file_size_bytes",
                    details=f"{entry.file_size_bytes} bytes",
                ))

        return findings
