"""Reference data — folder names, file naming patterns, and limits fixed by the standard.

Encodes the digital photo management standard (デジタル写真管理情報基準) so the
rules stay deterministic. Nothing here is configurable at runtime.
"""

import re

# ──────────────────────────────────────────────────────────────────────
# FOLDER LAYOUT
# ──────────────────────────────────────────────────────────────────────

FOLDER_NAMES: dict[str, str] = {
    "root": "PHOTO",
    "pic": "PIC",
    "dra": "DRA",
    "photo_xml": "PHOTO.XML",
    "index_xml": "INDEX_D.XML",
}

# ──────────────────────────────────────────────────────────────────────
# FILE NAMING: prefix + 7-digit sequence + extension
# ──────────────────────────────────────────────────────────────────────

PHOTO_FILE_PREFIX = "P"
DRAWING_FILE_PREFIX = "D"
SEQUENCE_DIGITS = 7
MAX_SEQUENCE_NUMBER = 9_999_999

PHOTO_EXTENSIONS = ("JPG", "JPEG", "TIF", "TIFF")
DRAWING_EXTENSIONS = ("JPG", "JPEG", "TIF", "TIFF", "PDF")

# Canonical spelling written into delivery file names
EXTENSION_ALIASES: dict[str, str] = {
    "JPEG": "JPG",
    "TIFF": "TIF",
}

PHOTO_FILE_NAME_PATTERN = re.compile(r"^P\d{7}\.(JPG|JPEG|TIF|TIFF)$", re.IGNORECASE | re.ASCII)
DRAWING_FILE_NAME_PATTERN = re.compile(r"^D\d{7}\.(JPG|JPEG|TIF|TIFF|PDF)$", re.IGNORECASE | re.ASCII)
SEQUENCE_NUMBER_PATTERN = re.compile(r"^[PD](\d{7})\.", re.IGNORECASE | re.ASCII)

# ──────────────────────────────────────────────────────────────────────
# METADATA
# ──────────────────────────────────────────────────────────────────────

SHOOTING_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
SHOOTING_DATE_FORMAT = "%Y-%m-%d"

DEFAULT_MAX_FILE_SIZE_MB = 10.0
BYTES_PER_MB = 1024 * 1024

# ──────────────────────────────────────────────────────────────────────
# METADATA DOCUMENT (PHOTO.XML)
# ──────────────────────────────────────────────────────────────────────

DOCUMENT_ROOT_ELEMENT = "photoInformation"
DOCUMENT_REQUIRED_SECTIONS = ("commonInformation", "photoList")

# Encodings accepted for the metadata document, compared case-insensitively
DOCUMENT_ENCODINGS = {"utf-8", "shift_jis"}
