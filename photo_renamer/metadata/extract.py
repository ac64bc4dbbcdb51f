import logging
from pathlib import Path
from datetime import datetime
from typing import Optional

import exifread

from .. import config
from ..exceptions import MetadataExtractionError


class MetadataExtractor:
    """
    Reads the original capture time embedded in image files.

    Uses 'exifread' (fast, Python-native). Only DateTimeOriginal is consulted;
    a file without it gets no decision rather than a guess.
    """

    def get_capture_datetime(self, path: Path) -> Optional[datetime]:
        """
        Returns the capture datetime (naive, camera local time) or None if the
        tag is missing or the container cannot be read.
        """
        try:
            tags = self._read_tags(path)
        except MetadataExtractionError as e:
            logging.warning(str(e))
            return None

        if config.CAPTURE_DATE_TAG not in tags:
            logging.debug(f"No {config.CAPTURE_DATE_TAG} in {path}")
            return None

        return self._parse_exif_date(str(tags[config.CAPTURE_DATE_TAG]), path)

    def _read_tags(self, path: Path) -> dict:
        try:
            with path.open('rb') as f:
                # details=False skips makernotes, much faster
                return exifread.process_file(f, details=False) or {}
        except Exception as e:
            raise MetadataExtractionError(f"ExifRead failed for {path}: {e}") from e

    def _parse_exif_date(self, value: str, path: Path) -> Optional[datetime]:
        """EXIF format is "YYYY:MM:DD HH:MM:SS"."""
        try:
            dt_str = value.strip().replace(':', '-', 2)
            return datetime.strptime(dt_str, config.EXIF_DATE_FORMAT)
        except ValueError:
            logging.warning(f"Unparsable capture date {value!r} in {path}")
            return None
