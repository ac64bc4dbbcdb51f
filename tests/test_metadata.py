import pytest
from datetime import datetime
from PIL import Image

import photo_renamer.metadata.extract as extract_module
from photo_renamer.metadata.extract import MetadataExtractor


def test_capture_datetime_from_exif(monkeypatch, tmp_path):
    # Mock exifread so the test doesn't depend on writing real EXIF blocks
    monkeypatch.setattr(
        extract_module.exifread, "process_file",
        lambda f, details=False: {"EXIF DateTimeOriginal": "2023:04:01 12:00:00"},
    )
    img = tmp_path / "photo.jpg"
    img.write_bytes(b"jpeg")

    assert MetadataExtractor().get_capture_datetime(img) == datetime(2023, 4, 1, 12, 0, 0)


def test_missing_tag_is_none(monkeypatch, tmp_path):
    monkeypatch.setattr(
        extract_module.exifread, "process_file",
        lambda f, details=False: {"Image DateTime": "2023:04:01 12:00:00"},
    )
    img = tmp_path / "photo.jpg"
    img.write_bytes(b"jpeg")

    assert MetadataExtractor().get_capture_datetime(img) is None


@pytest.mark.parametrize("value", ["0000:00:00 00:00:00", "garbage", ""])
def test_unparsable_tag_is_none(monkeypatch, tmp_path, value):
    monkeypatch.setattr(
        extract_module.exifread, "process_file",
        lambda f, details=False: {"EXIF DateTimeOriginal": value},
    )
    img = tmp_path / "photo.jpg"
    img.write_bytes(b"jpeg")

    assert MetadataExtractor().get_capture_datetime(img) is None


def test_reader_error_is_none(monkeypatch, tmp_path):
    def boom(f, details=False):
        raise ValueError("corrupt container")

    monkeypatch.setattr(extract_module.exifread, "process_file", boom)
    img = tmp_path / "photo.jpg"
    img.write_bytes(b"jpeg")

    assert MetadataExtractor().get_capture_datetime(img) is None


def test_real_jpeg_without_exif(tmp_path):
    img = tmp_path / "plain.jpg"
    Image.new("RGB", (8, 8), color="red").save(img)

    assert MetadataExtractor().get_capture_datetime(img) is None


def test_missing_file_is_none(tmp_path):
    assert MetadataExtractor().get_capture_datetime(tmp_path / "gone.jpg") is None
