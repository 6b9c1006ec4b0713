"""API request models."""

from pydantic import BaseModel, Field
from typing import Any, Optional


class ValidatePackageRequest(BaseModel):
    """Request to validate an assembled delivery package."""

    # Kept as a raw mapping so malformed packages come back as findings, not 422s
    package: dict[str, Any] = Field(
        ...,
        description="Delivery package as assembled by the storage/metadata layer",
        examples=[{
            "root_folder_name": "PHOTO",
            "metadata_document_path": "PHOTO/PHOTO.XML",
            "picture_folder_path": "PHOTO/PIC",
            "photo_files": [{
                "original_file_name": "IMG_0001.jpg",
                "delivery_file_name": "P0000001.JPG",
                "file_path": "PHOTO/PIC/P0000001.JPG",
                "file_size_bytes": 2_400_000,
                "photo_info": {
                    "photo_number": 1,
                    "major_category": "工事写真",
                    "category": "施工状況",
                    "title": "床掘状況",
                    "shooting_date": "2024-01-15",
                    "shooting_location": "No.12+5.0",
                    "is_representative_photo": True,
                },
            }],
        }],
    )
    max_file_size_mb: Optional[float] = Field(
        default=None,
        gt=0,
        description="LARGE_FILE_SIZE threshold in MiB; server default when omitted",
    )


class ValidateDocumentRequest(BaseModel):
    """Request to check a raw metadata document (PHOTO.XML)."""

    document: str = Field(..., description="PHOTO.XML contents as text")
