import os
import pytest
from datetime import datetime


@pytest.fixture
def src_dir(tmp_path):
    """An empty source directory to organize."""
    d = tmp_path / "photos"
    d.mkdir()
    return d


@pytest.fixture
def make_file(src_dir):
    """Factory that writes a file into src_dir, optionally with a fixed mtime."""
    def _make(name, content=b"data", mtime=None):
        p = src_dir / name
        p.write_bytes(content)
        if mtime is not None:
            os.utime(p, (mtime, mtime))
        return p
    return _make


class FakeExtractor:
    """Stands in for MetadataExtractor, keyed by file name."""

    def __init__(self, dates=None):
        self.dates = dates or {}
        self.calls = []

    def get_capture_datetime(self, path):
        self.calls.append(path)
        return self.dates.get(path.name)


@pytest.fixture
def fake_extractor():
    return FakeExtractor({
        "holiday.jpg": datetime(2022, 12, 24, 18, 5, 9),
        "beach.PNG": datetime(2021, 8, 1, 7, 0, 0),
    })
