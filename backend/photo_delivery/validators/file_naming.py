"""Delivery file naming — P0000001.JPG for photos, D0000001.PDF for drawings."""

from typing import Optional

from photo_delivery.validators.reference_data import (
    DRAWING_FILE_NAME_PATTERN,
    DRAWING_FILE_PREFIX,
    EXTENSION_ALIASES,
    MAX_SEQUENCE_NUMBER,
    PHOTO_FILE_NAME_PATTERN,
    PHOTO_FILE_PREFIX,
    SEQUENCE_DIGITS,
    SEQUENCE_NUMBER_PATTERN,
)


def normalize_extension(extension: str) -> str:
    """Uppercase, strip a leading dot, and fold JPEG→JPG / TIFF→TIF."""
    ext = extension.lstrip(".").upper()
    return EXTENSION_ALIASES.get(ext, ext)


def generate_photo_file_name(sequence_number: int, extension: str = "JPG") -> str:
    _check_sequence_number(sequence_number)
    return f"{PHOTO_FILE_PREFIX}{sequence_number:0{SEQUENCE_DIGITS}d}.{normalize_extension(extension)}"


def generate_drawing_file_name(sequence_number: int, extension: str) -> str:
    _check_sequence_number(sequence_number)
    return f"{DRAWING_FILE_PREFIX}{sequence_number:0{SEQUENCE_DIGITS}d}.{normalize_extension(extension)}"


def extract_sequence_number(file_name: str) -> Optional[int]:
    """Sequence number embedded in a delivery file name, or None if it has none."""
    match = SEQUENCE_NUMBER_PATTERN.match(file_name)
    if not match:
        return None
    return int(match.group(1))


def is_valid_photo_file_name(file_name: str) -> bool:
    return bool(PHOTO_FILE_NAME_PATTERN.fullmatch(file_name))


def is_valid_drawing_file_name(file_name: str) -> bool:
    return bool(DRAWING_FILE_NAME_PATTERN.fullmatch(file_name))


def _check_sequence_number(sequence_number: int) -> None:
    if isinstance(sequence_number, bool) or not isinstance(sequence_number, int):
        raise ValueError(f"Sequence number must be an integer, got {sequence_number!r}")
    if sequence_number < 1:
        raise ValueError(f"Sequence number must be at least 1, got {sequence_number}")
    if sequence_number > MAX_SEQUENCE_NUMBER:
        raise ValueError(f"Sequence number must be at most {MAX_SEQUENCE_NUMBER}, got {sequence_number}")
