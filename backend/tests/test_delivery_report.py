"""Tests for the delivery report — statistics, folder tree, text and CSV renderings."""

import csv
import io

import pytest

from photo_delivery.validators import (
    format_delivery_report,
    format_file_size,
    format_folder_tree,
    format_photo_list_csv,
    generate_delivery_report,
)
from tests.builders import MB, make_drawing, make_entry, make_package, make_sequence


@pytest.fixture
def package_with_drawing():
    return make_package(make_sequence(2), drawing_files=[make_drawing()])


class TestFileSize:

    @pytest.mark.parametrize("size, expected", [
        (0, "0 B"),
        (512, "512 B"),
        (1536, "1.50 KB"),
        (10 * MB, "10.00 MB"),
        (3 * 1024 * MB, "3.00 GB"),
        (5 * 1024 * 1024 * MB, "5120.00 GB"),
    ])
    def test_format(self, size, expected):
        assert format_file_size(size) == expected


class TestGenerate:

    def test_statistics(self, package_with_drawing):
        stats = generate_delivery_report(package_with_drawing).file_statistics

        assert stats.photo_count == 2
        assert stats.drawing_count == 1
        assert stats.xml_count == 2
        assert stats.total_files == 5
        assert stats.total_size_bytes == 3 * MB
        assert stats.total_size_formatted == "3.00 MB"
        assert stats.representative_photo_count == 1

    def test_folders(self, package_with_drawing):
        assert generate_delivery_report(package_with_drawing).folders == ["PHOTO", "PHOTO/PIC", "PHOTO/DRA"]
        assert generate_delivery_report(make_package()).folders == ["PHOTO", "PHOTO/PIC"]

    def test_default_root_folder(self):
        report = generate_delivery_report(make_package(root_folder_name=""))

        assert report.root_folder == "PHOTO"

    def test_photo_list_follows_package_order(self, package_with_drawing):
        photos = generate_delivery_report(package_with_drawing).photo_list

        assert [p.delivery_file_name for p in photos] == ["P0000001.JPG", "P0000002.JPG"]
        assert photos[0].is_representative_photo is True
        assert photos[0].file_size_formatted == "1.00 MB"
        assert photos[0].title == "床掘状況"

    def test_summary_only_with_result(self, engine, valid_package):
        assert generate_delivery_report(valid_package).validation_summary is None

        report = generate_delivery_report(valid_package, engine.validate(valid_package))

        assert report.validation_summary.is_valid is True

    def test_generated_at_is_utc(self, valid_package):
        assert generate_delivery_report(valid_package).generated_at.endswith("Z")


class TestFolderTree:

    def test_with_drawings(self, package_with_drawing):
        assert format_folder_tree(package_with_drawing) == "\n".join([
            "PHOTO/",
            "├── PHOTO.XML",
            "├── PIC/",
            "│   ├── P0000001.JPG",
            "│   ├── P0000002.JPG",
            "└── DRA/",
            "    └── D0000001.PDF",
        ])

    def test_photos_only(self):
        assert format_folder_tree(make_package(make_sequence(2))).split("\n")[-2:] == [
            "│   ├── P0000001.JPG",
            "│   └── P0000002.JPG",
        ]


class TestTextReport:

    def test_sections(self, package_with_drawing):
        text = format_delivery_report(generate_delivery_report(package_with_drawing))
        lines = text.split("\n")

        assert lines[0] == "=" * 70
        assert lines[1] == "電子納品レポート"
        assert "総ファイル数: 5" in lines
        assert "  - 参考図ファイル: 1" in lines
        assert "総ファイルサイズ: 3.00 MB" in lines
        assert "  PHOTO/DRA/" in lines
        assert "検証結果" not in lines
        assert lines[-1] == "=" * 70

    def test_photo_rows_padded_by_display_width(self, package_with_drawing):
        lines = format_delivery_report(generate_delivery_report(package_with_drawing)).split("\n")

        assert "1*    P0000001.JPG    床掘状況" + " " * 22 + "2024-01-15  1.00 MB" in lines
        assert "2     P0000002.JPG    床掘状況" + " " * 22 + "2024-01-15  1.00 MB" in lines

    def test_long_title_truncated(self):
        package = make_package([make_entry(title="あ" * 20)])

        text = format_delivery_report(generate_delivery_report(package))

        assert "あ" * 12 + "..." in text
        assert "あ" * 13 not in text

    def test_validation_section(self, engine):
        package = make_package([make_entry("bad.jpg")])
        report = generate_delivery_report(package, engine.validate(package))

        lines = format_delivery_report(report).split("\n")

        assert "結果: 不合格" in lines
        assert "エラー: 1件" in lines
        assert "  - [INVALID_PHOTO_FILE_NAME] ファイル名が規則に準拠していません (bad.jpg)" in lines


class TestPhotoListCsv:

    def test_rows(self, package_with_drawing):
        rows = list(csv.reader(io.StringIO(format_photo_list_csv(generate_delivery_report(package_with_drawing)))))

        assert rows[0] == [
            "番号", "納品ファイル名", "元ファイル名", "タイトル", "大分類",
            "区分", "撮影日", "撮影箇所", "代表写真", "ファイルサイズ",
        ]
        assert rows[1] == [
            "1", "P0000001.JPG", "IMG_0001.jpg", "床掘状況", "工事写真",
            "施工状況", "2024-01-15", "No.12+5.0", "Yes", "1.00 MB",
        ]
        assert rows[2][8] == "No"
        assert len(rows) == 3

    def test_title_with_separators_survives(self):
        package = make_package([make_entry(title='A, "B"', shooting_location=None)])

        rows = list(csv.reader(io.StringIO(format_photo_list_csv(generate_delivery_report(package)))))

        assert rows[1][3] == 'A, "B"'
        assert rows[1][7] == ""
