"""Validation models — delivery package shapes, finding codes, and result structure.

All validation is deterministic: same package → same findings, no I/O, no randomness.
The only ambient input is the clock used to stamp ``validated_at``.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, computed_field

from photo_delivery.validators.reference_data import DEFAULT_MAX_FILE_SIZE_MB


class FindingKind(str, Enum):
    """Whether a finding blocks submission."""

    ERROR = "error"      # Package cannot be submitted
    WARNING = "warning"  # Package may be submitted but is flagged for review


class ErrorCode(str, Enum):
    """Error codes — one per rule condition. Values are a stable public contract.

    Naming convention: CONDITION_SUBJECT
    """

    # Structure
    MISSING_ROOT_FOLDER = "MISSING_ROOT_FOLDER"
    MISSING_PHOTO_XML = "MISSING_PHOTO_XML"
    MISSING_PIC_FOLDER = "MISSING_PIC_FOLDER"
    MISSING_DRA_FOLDER = "MISSING_DRA_FOLDER"
    EMPTY_PHOTO_LIST = "EMPTY_PHOTO_LIST"
    INVALID_FILE_SIZE = "INVALID_FILE_SIZE"

    # Naming
    INVALID_PHOTO_FILE_NAME = "INVALID_PHOTO_FILE_NAME"
    INVALID_DRAWING_FILE_NAME = "INVALID_DRAWING_FILE_NAME"
    DUPLICATE_FILE_NAME = "DUPLICATE_FILE_NAME"

    # Sequence
    NON_SEQUENTIAL_NUMBER = "NON_SEQUENTIAL_NUMBER"

    # Metadata
    MISSING_PHOTO_TITLE = "MISSING_PHOTO_TITLE"
    MISSING_SHOOTING_DATE = "MISSING_SHOOTING_DATE"
    MISSING_PHOTO_CATEGORY = "MISSING_PHOTO_CATEGORY"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"

    # Metadata document
    INVALID_XML_STRUCTURE = "INVALID_XML_STRUCTURE"
    XML_ENCODING_ERROR = "XML_ENCODING_ERROR"

    # Engine
    INVALID_PACKAGE_MODEL = "INVALID_PACKAGE_MODEL"
    RULE_EXECUTION_FAILED = "RULE_EXECUTION_FAILED"


class WarningCode(str, Enum):
    """Warning codes. Never share a value with ErrorCode."""

    MISSING_SHOOTING_LOCATION = "MISSING_SHOOTING_LOCATION"
    NO_REPRESENTATIVE_PHOTO = "NO_REPRESENTATIVE_PHOTO"
    LARGE_FILE_SIZE = "LARGE_FILE_SIZE"


# Short identifiers printed by the standard's checking tools
CODE_IDENTIFIERS = {
    ErrorCode.MISSING_ROOT_FOLDER: "E001",
    ErrorCode.MISSING_PHOTO_XML: "E002",
    ErrorCode.MISSING_PIC_FOLDER: "E003",
    ErrorCode.MISSING_DRA_FOLDER: "E006",
    ErrorCode.EMPTY_PHOTO_LIST: "E004",
    ErrorCode.INVALID_FILE_SIZE: "E005",
    ErrorCode.INVALID_PHOTO_FILE_NAME: "E101",
    ErrorCode.INVALID_DRAWING_FILE_NAME: "E102",
    ErrorCode.DUPLICATE_FILE_NAME: "E103",
    ErrorCode.NON_SEQUENTIAL_NUMBER: "E104",
    ErrorCode.MISSING_PHOTO_TITLE: "E201",
    ErrorCode.MISSING_SHOOTING_DATE: "E202",
    ErrorCode.MISSING_PHOTO_CATEGORY: "E203",
    ErrorCode.INVALID_DATE_FORMAT: "E204",
    ErrorCode.INVALID_XML_STRUCTURE: "E301",
    ErrorCode.XML_ENCODING_ERROR: "E302",
    ErrorCode.INVALID_PACKAGE_MODEL: "E901",
    ErrorCode.RULE_EXECUTION_FAILED: "E902",
    WarningCode.MISSING_SHOOTING_LOCATION: "W001",
    WarningCode.NO_REPRESENTATIVE_PHOTO: "W003",
    WarningCode.LARGE_FILE_SIZE: "W005",
}

_ERROR_VALUES = {code.value for code in ErrorCode}
_WARNING_VALUES = {code.value for code in WarningCode}


def kind_of(code: str) -> FindingKind:
    """Look up which catalogue a code belongs to."""
    value = code.value if isinstance(code, Enum) else code
    if value in _ERROR_VALUES:
        return FindingKind.ERROR
    if value in _WARNING_VALUES:
        return FindingKind.WARNING
    raise ValueError(f"Unknown finding code: {code!r}")


def identifier_of(code: str) -> Optional[str]:
    """Standard short identifier (E001, W003, ...) for a code, if it has one."""
    value = code.value if isinstance(code, Enum) else code
    for member, identifier in CODE_IDENTIFIERS.items():
        if member.value == value:
            return identifier
    return None


# ── Standard vocabularies ──


class PhotoMajorCategory(str, Enum):
    """写真大分類 — major photo category."""

    CONSTRUCTION = "工事写真"
    COMPLETION = "完成写真"
    OTHER = "その他写真"


class PhotoCategory(str, Enum):
    """写真区分 — photo category within the major category."""

    CONSTRUCTION = "工事"
    BEFORE_START = "着工前"
    COMPLETED = "完成"
    IN_PROGRESS = "施工状況"
    SAFETY = "安全管理"
    MATERIALS = "使用材料"
    QUALITY = "品質管理"
    AS_BUILT = "出来形管理"
    OTHER = "その他"


# ── Package model (input) ──


class PhotoInfo(BaseModel):
    """Metadata record for one photo, as it appears in the metadata document."""

    model_config = {"frozen": True, "use_enum_values": True}

    photo_number: int
    major_category: str = ""
    category: str = ""
    title: str = ""
    shooting_date: str = ""
    shooting_location: Optional[str] = None
    is_representative_photo: bool = False
    is_submission_frequency_photo: bool = False
    has_drawing: bool = False
    construction_type: Optional[str] = None  # 工種
    work_type: Optional[str] = None          # 種別
    detail_type: Optional[str] = None        # 細別
    remarks: Optional[str] = None


class PhotoFileEntry(BaseModel):
    """A photo binary inside the PIC folder."""

    model_config = {"frozen": True, "use_enum_values": True}

    original_file_name: str = ""
    delivery_file_name: str
    file_path: str = ""
    file_size_bytes: int = 0
    photo_info: PhotoInfo


class DrawingFileEntry(BaseModel):
    """A reference drawing inside the DRA folder."""

    model_config = {"frozen": True, "use_enum_values": True}

    original_file_name: str = ""
    delivery_file_name: str
    file_path: str = ""
    file_size_bytes: int = 0


class DeliveryPackage(BaseModel):
    """A complete delivery package — the immutable input to validation."""

    model_config = {"frozen": True, "use_enum_values": True}

    root_folder_name: str = ""
    metadata_document_path: str = ""
    picture_folder_path: str = ""
    drawing_folder_path: Optional[str] = None
    photo_files: list[PhotoFileEntry] = Field(default_factory=list)
    drawing_files: list[DrawingFileEntry] = Field(default_factory=list)


class ValidatorConfig(BaseModel):
    """Engine options. Everything else is fixed by the standard."""

    model_config = {"frozen": True}

    max_file_size_mb: float = Field(default=DEFAULT_MAX_FILE_SIZE_MB, gt=0, description="LARGE_FILE_SIZE threshold in MiB")


# ── Result model (output) ──


class Finding(BaseModel):
    """A single error or warning produced by one rule."""

    model_config = {"frozen": True, "use_enum_values": True}

    code: Union[ErrorCode, WarningCode]
    message: str
    target_file: Optional[str] = None   # Which delivery file is affected
    target_field: Optional[str] = None  # Which metadata field triggered this
    details: Optional[str] = None       # How to fix it / what was found

    @property
    def kind(self) -> FindingKind:
        return kind_of(self.code)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-01-15T10:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ValidationResult(BaseModel):
    """Complete validation result — the output of the validation engine."""

    model_config = {"frozen": True}

    errors: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)
    validated_at: str = Field(default_factory=utc_timestamp)
    target_folder: str = ""

    @computed_field
    @property
    def is_valid(self) -> bool:
        """True iff there are no errors. Warnings never affect validity."""
        return len(self.errors) == 0

    @classmethod
    def build(cls, findings: list[Finding], target_folder: str = "") -> "ValidationResult":
        """Split findings by kind, keeping their order, and stamp the result."""
        errors = [f for f in findings if f.kind is FindingKind.ERROR]
        warnings = [f for f in findings if f.kind is FindingKind.WARNING]
        return cls(
            errors=errors,
            warnings=warnings,
            validated_at=utc_timestamp(),
            target_folder=target_folder,
        )
