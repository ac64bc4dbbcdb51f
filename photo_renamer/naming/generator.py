import os
import re
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from .. import config
from ..metadata.extract import MetadataExtractor
from ..models import MediaFile, MediaType, NameResult, NamingStrategy
from .canonical import format_canonical_name, format_from_parts


def compile_patterns(patterns: Sequence[str]) -> tuple:
    return tuple(re.compile(p) for p in patterns)


IMAGE_PATTERNS = compile_patterns(config.IMAGE_NAME_PATTERNS)
VIDEO_PATTERNS = compile_patterns(config.VIDEO_NAME_PATTERNS)

PATTERNS_BY_TYPE = {
    MediaType.IMAGE: IMAGE_PATTERNS,
    MediaType.VIDEO: VIDEO_PATTERNS,
}


class NameGenerator:
    """
    Proposes a canonical name for one file using a single naming strategy.

    Strategies:
      - FILE_NAME_PATTERN: camera/phone names such as IMG_20230401_120000.jpg
      - LAST_MODIFIED: the filesystem mtime, read as local time
      - IMAGE_PROPERTIES: EXIF DateTimeOriginal (images only)
    """

    def __init__(self,
                 strategy: NamingStrategy,
                 change_last_modified: bool = False,
                 dry_run: bool = False,
                 extractor: Optional[MetadataExtractor] = None):
        self.strategy = strategy
        self.change_last_modified = change_last_modified
        self.dry_run = dry_run
        self.metadata = extractor or MetadataExtractor()

    def generate(self, media: MediaFile) -> NameResult:
        if self.strategy is NamingStrategy.IMAGE_PROPERTIES:
            if media.media_type is not MediaType.IMAGE:
                return NameResult.no_decision()
            return self._from_image_properties(media)
        if self.strategy is NamingStrategy.LAST_MODIFIED:
            return self._from_last_modified(media)
        return self._from_file_name(media)

    # --- Strategies ---

    def _from_file_name(self, media: MediaFile) -> NameResult:
        patterns = PATTERNS_BY_TYPE.get(media.media_type, ())
        for pattern in patterns:
            m = pattern.search(media.name)
            if m:
                new_name = format_from_parts(m.groups()[:6], m.group(7))
                return NameResult.matched(media.parent / new_name)
        return NameResult.no_decision()

    def _from_last_modified(self, media: MediaFile) -> NameResult:
        if not media.ext:
            return NameResult.no_decision()
        try:
            mtime = media.path.stat().st_mtime
        except OSError as e:
            return NameResult.failed(e)

        modified = datetime.fromtimestamp(mtime)
        return NameResult.matched(media.parent / format_canonical_name(modified, media.ext))

    def _from_image_properties(self, media: MediaFile) -> NameResult:
        created_on = self.metadata.get_capture_datetime(media.path)
        if created_on is None or not media.ext:
            return NameResult.no_decision()

        new_path = media.parent / format_canonical_name(created_on, media.ext)

        if self.change_last_modified and not new_path.exists():
            self._set_mtime(media.path, created_on)

        return NameResult.matched(new_path)

    def _set_mtime(self, path: Path, created_on: datetime):
        """Sets mtime to the capture time. Failure is logged, the rename still goes ahead."""
        if self.dry_run:
            logging.info(f"[DRY RUN] Set modified time of {path} to {created_on}")
            return
        try:
            st = path.stat()
            # Naive capture time is local time, as the camera recorded it
            os.utime(path, (st.st_atime, created_on.timestamp()))
        except OSError as e:
            logging.error(f"Couldn't change modified time of {path}: {e}")
