"""Delivery report — what a package contains, for the operator preparing a submission.

Everything here is computed from the DeliveryPackage alone (plus an optional
ValidationResult); no files are read.

Usage:
    report = generate_delivery_report(package, validation_engine.validate(package))
    print(format_delivery_report(report))
"""

import csv
import io
import unicodedata
from typing import Optional

from pydantic import BaseModel, Field

from photo_delivery.validators.models import DeliveryPackage, ValidationResult, utc_timestamp
from photo_delivery.validators.reference_data import FOLDER_NAMES
from photo_delivery.validators.report import ValidationSummary, summarize

REPORT_WIDTH = 70
PHOTO_TABLE_WIDTH = 80
SIZE_UNITS = ("B", "KB", "MB", "GB")

# PHOTO.XML + INDEX_D.XML
METADATA_DOCUMENTS = (FOLDER_NAMES["photo_xml"], FOLDER_NAMES["index_xml"])

# (header, display width) of the photo table in the text report
PHOTO_TABLE_COLUMNS = (
    ("No.", 6),
    ("ファイル名", 16),
    ("タイトル", 30),
    ("撮影日", 12),
    ("サイズ", 0),
)

CSV_HEADERS = [
    "番号",
    "納品ファイル名",
    "元ファイル名",
    "タイトル",
    "大分類",
    "区分",
    "撮影日",
    "撮影箇所",
    "代表写真",
    "ファイルサイズ",
]


class FileStatistics(BaseModel):
    """File counts and sizes across the package."""

    total_files: int
    photo_count: int
    drawing_count: int
    xml_count: int
    total_size_bytes: int
    total_size_formatted: str
    representative_photo_count: int


class PhotoListItem(BaseModel):
    """One row of the photo list."""

    photo_number: int
    delivery_file_name: str
    original_file_name: str
    title: str
    major_category: str
    category: str
    shooting_date: str
    shooting_location: Optional[str] = None
    is_representative_photo: bool
    file_size_bytes: int
    file_size_formatted: str


class DeliveryReport(BaseModel):
    """Contents of a delivery package, optionally with its validation verdict."""

    generated_at: str = Field(default_factory=utc_timestamp)
    root_folder: str
    folders: list[str]
    file_statistics: FileStatistics
    validation_summary: Optional[ValidationSummary] = None
    photo_list: list[PhotoListItem] = Field(default_factory=list)


def format_file_size(size_bytes: int) -> str:
    """1536 → '1.50 KB'. Whole bytes below 1 KB, two decimals above."""
    if size_bytes < 1024:
        return f"{size_bytes} B"

    size = float(size_bytes)
    unit = 0
    while size >= 1024 and unit < len(SIZE_UNITS) - 1:
        size /= 1024
        unit += 1
    return f"{size:.2f} {SIZE_UNITS[unit]}"


def generate_delivery_report(
    package: DeliveryPackage,
    result: Optional[ValidationResult] = None,
) -> DeliveryReport:
    """Build the report for a package. Pass the validation result to include its summary."""
    root = package.root_folder_name or FOLDER_NAMES["root"]

    folders = [root, f"{root}/{FOLDER_NAMES['pic']}"]
    if package.drawing_folder_path:
        folders.append(f"{root}/{FOLDER_NAMES['dra']}")

    photo_count = len(package.photo_files)
    drawing_count = len(package.drawing_files)
    total_size = (
        sum(entry.file_size_bytes for entry in package.photo_files)
        + sum(entry.file_size_bytes for entry in package.drawing_files)
    )

    statistics = FileStatistics(
        total_files=photo_count + drawing_count + len(METADATA_DOCUMENTS),
        photo_count=photo_count,
        drawing_count=drawing_count,
        xml_count=len(METADATA_DOCUMENTS),
        total_size_bytes=total_size,
        total_size_formatted=format_file_size(total_size),
        representative_photo_count=sum(
            1 for entry in package.photo_files if entry.photo_info.is_representative_photo
        ),
    )

    photo_list = [
        PhotoListItem(
            photo_number=entry.photo_info.photo_number,
            delivery_file_name=entry.delivery_file_name,
            original_file_name=entry.original_file_name,
            title=entry.photo_info.title,
            major_category=entry.photo_info.major_category,
            category=entry.photo_info.category,
            shooting_date=entry.photo_info.shooting_date,
            shooting_location=entry.photo_info.shooting_location,
            is_representative_photo=entry.photo_info.is_representative_photo,
            file_size_bytes=entry.file_size_bytes,
            file_size_formatted=format_file_size(entry.file_size_bytes),
        )
        for entry in package.photo_files
    ]

    return DeliveryReport(
        root_folder=root,
        folders=folders,
        file_statistics=statistics,
        validation_summary=summarize(result) if result is not None else None,
        photo_list=photo_list,
    )


def format_folder_tree(package: DeliveryPackage) -> str:
    """Folder layout as a tree, one delivery file per line."""
    root = package.root_folder_name or FOLDER_NAMES["root"]
    has_drawings = bool(package.drawing_folder_path)

    lines = [
        f"{root}/",
        f"├── {FOLDER_NAMES['photo_xml']}",
        f"├── {FOLDER_NAMES['pic']}/",
    ]

    for index, entry in enumerate(package.photo_files):
        is_last = index == len(package.photo_files) - 1 and not has_drawings
        branch = "│   └──" if is_last else "│   ├──"
        lines.append(f"{branch} {entry.delivery_file_name}")

    if has_drawings:
        lines.append(f"└── {FOLDER_NAMES['dra']}/")
        for index, entry in enumerate(package.drawing_files):
            branch = "    └──" if index == len(package.drawing_files) - 1 else "    ├──"
            lines.append(f"{branch} {entry.delivery_file_name}")

    return "\n".join(lines)


def format_delivery_report(report: DeliveryReport) -> str:
    """Render the report as fixed-width text."""
    divider = "=" * REPORT_WIDTH
    sub_divider = "-" * REPORT_WIDTH
    stats = report.file_statistics

    lines = [
        divider,
        "電子納品レポート",
        divider,
        "",
        f"生成日時: {report.generated_at}",
        "",
        sub_divider,
        "ファイル統計",
        sub_divider,
        f"総ファイル数: {stats.total_files}",
        f"  - 写真ファイル: {stats.photo_count}",
        f"  - 参考図ファイル: {stats.drawing_count}",
        f"  - XMLファイル: {stats.xml_count}",
        f"総ファイルサイズ: {stats.total_size_formatted}",
        f"代表写真数: {stats.representative_photo_count}",
        "",
        sub_divider,
        "フォルダ構造",
        sub_divider,
    ]
    lines.extend(f"  {folder}/" for folder in report.folders)
    lines.append("")

    summary = report.validation_summary
    if summary is not None:
        lines.extend([
            sub_divider,
            "検証結果",
            sub_divider,
            f"結果: {'合格' if summary.is_valid else '不合格'}",
            f"エラー: {summary.error_count}件",
            f"警告: {summary.warning_count}件",
        ])
        if summary.errors:
            lines.extend(["", "エラー一覧:"])
            lines.extend(f"  - {error}" for error in summary.errors)
        if summary.warnings:
            lines.extend(["", "警告一覧:"])
            lines.extend(f"  - {warning}" for warning in summary.warnings)
        lines.append("")

    lines.extend([
        sub_divider,
        "写真一覧",
        sub_divider,
        "",
        "".join(_pad(header, width) for header, width in PHOTO_TABLE_COLUMNS),
        "-" * PHOTO_TABLE_WIDTH,
    ])

    for photo in report.photo_list:
        marker = "*" if photo.is_representative_photo else " "
        cells = (
            f"{photo.photo_number}{marker}",
            photo.delivery_file_name,
            _truncate(photo.title, 28),
            photo.shooting_date,
            photo.file_size_formatted,
        )
        lines.append("".join(_pad(cell, width) for cell, (_, width) in zip(cells, PHOTO_TABLE_COLUMNS)))

    lines.extend(["", "* = 代表写真", "", divider])

    return "\n".join(lines)


def format_photo_list_csv(report: DeliveryReport) -> str:
    """Photo list as CSV with Japanese headers, one row per photo."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for photo in report.photo_list:
        writer.writerow([
            photo.photo_number,
            photo.delivery_file_name,
            photo.original_file_name,
            photo.title,
            photo.major_category,
            photo.category,
            photo.shooting_date,
            photo.shooting_location or "",
            "Yes" if photo.is_representative_photo else "No",
            photo.file_size_formatted,
        ])
    return output.getvalue()


# ── Fixed-width helpers ──


def _display_width(text: str) -> int:
    """Terminal columns: full-width (East Asian wide) characters count as two."""
    return sum(2 if unicodedata.east_asian_width(char) in ("W", "F") else 1 for char in text)


def _pad(text: str, width: int) -> str:
    return text + " " * max(0, width - _display_width(text))


def _truncate(text: str, width: int) -> str:
    if _display_width(text) <= width:
        return text

    kept = ""
    for char in text:
        if _display_width(kept + char) > width - 3:
            break
        kept += char
    return kept + "..."
