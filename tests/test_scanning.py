import pytest
from pathlib import Path

from photo_renamer.exceptions import ScanError
from photo_renamer.models import MediaFile, MediaType
from photo_renamer.scanning.filesystem import DirectoryScanner, classify


@pytest.mark.parametrize(
    "name,expected",
    [
        ("a.jpg", MediaType.IMAGE),
        ("a.JPEG", MediaType.IMAGE),
        ("a.png", MediaType.IMAGE),
        ("a.gif", MediaType.IMAGE),
        ("a.webp", MediaType.IMAGE),
        ("a.avif", MediaType.IMAGE),
        ("clip.mp4", MediaType.VIDEO),
        ("clip.MP4", MediaType.VIDEO),
        ("clip.mov", MediaType.UNRECOGNIZED),
        ("notes.txt", MediaType.UNRECOGNIZED),
        ("README", MediaType.UNRECOGNIZED),
    ],
)
def test_classify_by_extension(name, expected):
    assert classify(Path(name)) is expected


def test_media_file_derived_attributes():
    media = MediaFile(Path("/pics/IMG_1.final.JPG"), MediaType.IMAGE)
    assert media.name == "IMG_1.final.JPG"
    assert media.stem == "IMG_1.final"
    assert media.ext == "jpg"
    assert media.parent == Path("/pics")


def test_scanner_filters_types_and_skips_subdirs(src_dir, make_file):
    make_file("b.jpg")
    make_file("a.mp4")
    make_file("notes.txt")
    sub = src_dir / "2023"
    sub.mkdir()
    (sub / "nested.jpg").write_bytes(b"x")

    scanner = DirectoryScanner()

    images = scanner.collect(src_dir, [MediaType.IMAGE])
    assert [m.name for m in images] == ["b.jpg"]

    both = scanner.collect(src_dir, [MediaType.IMAGE, MediaType.VIDEO])
    assert [m.name for m in both] == ["a.mp4", "b.jpg"]
    assert both[0].media_type is MediaType.VIDEO


def test_scanner_missing_directory_raises(tmp_path):
    with pytest.raises(ScanError):
        DirectoryScanner().collect(tmp_path / "missing", [MediaType.IMAGE])
