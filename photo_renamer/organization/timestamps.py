import os
import logging
from datetime import datetime, timezone
from typing import List

from tqdm import tqdm

from .. import config
from ..models import BatchSummary, MediaFile, Outcome
from ..naming.canonical import parse_canonical_datetime


def mtime_for(dt: datetime, offset_seconds: int = config.TIMEZONE_OFFSET_SECONDS) -> float:
    """
    Reads the naive datetime as UTC and shifts it back by offset_seconds.

    With the default offset, a name recorded in UTC+05:30 gets the matching
    UTC instant as its mtime.
    """
    return dt.replace(tzinfo=timezone.utc).timestamp() - offset_seconds


class TimestampRewriter:
    """Rewrites each canonical file's modification time from its name."""

    def __init__(self, offset_seconds: int = config.TIMEZONE_OFFSET_SECONDS, dry_run: bool = False):
        self.offset_seconds = offset_seconds
        self.dry_run = dry_run

    def execute(self, files: List[MediaFile]) -> BatchSummary:
        summary = BatchSummary("Updating last modified")

        if not files:
            logging.info("No files need a timestamp update.")
            return summary

        for media in tqdm(files, desc="Updating timestamps"):
            summary.record(self.rewrite_one(media))

        logging.info(str(summary))
        return summary

    def rewrite_one(self, media: MediaFile) -> Outcome:
        try:
            dt = parse_canonical_datetime(media.stem)
        except ValueError as e:
            logging.warning(f"Invalid date/time in {media.path}: {e}")
            return Outcome.SKIPPED

        if dt is None:
            logging.debug(f"Pattern not matched {media.path}")
            return Outcome.SKIPPED

        new_mtime = mtime_for(dt, self.offset_seconds)

        if self.dry_run:
            logging.info(f"[DRY RUN] Set modified time of {media.path} to {new_mtime}")
            return Outcome.UPDATED

        try:
            st = media.path.stat()
            os.utime(media.path, (st.st_atime, new_mtime))
        except OSError as e:
            logging.error(f"Error changing last modified time of {media.path}: {e}")
            return Outcome.FAILED

        logging.info(f"Updated last modified time of {media.path}")
        return Outcome.UPDATED
