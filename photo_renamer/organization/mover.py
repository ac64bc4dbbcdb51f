import shutil
import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from ..models import BatchSummary, MediaFile, Outcome
from ..naming.canonical import parse_canonical_parts


class FileMover:
    """
    Moves canonically named files into <source>/<year>/<month>/.

    Only the year and month groups of the name decide the folder.
    Files whose names are not canonical are left where they are.
    """

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run

    def destination_for(self, media: MediaFile) -> Optional[Path]:
        parts = parse_canonical_parts(media.stem)
        if parts is None:
            return None
        year, month = parts[0], parts[1]
        return media.parent / year / month / media.name

    def execute(self, files: List[MediaFile]) -> BatchSummary:
        summary = BatchSummary("Moving")

        # Filter out names that were never canonicalized
        to_process = []
        for media in files:
            dest = self.destination_for(media)
            if dest is None:
                logging.debug(f"Not a canonical name, leaving {media.path}")
                continue
            to_process.append((media, dest))

        if not to_process:
            logging.info("No files need moving.")
            return summary

        logging.info(f"Processing {len(to_process)} files (DryRun={self.dry_run})...")

        for media, dest in tqdm(to_process, desc="Moving"):
            summary.record(self.move_one(media.path, dest))

        logging.info(str(summary))
        return summary

    def move_one(self, src: Path, dest: Path) -> Outcome:
        # Idempotency: an existing destination is never overwritten
        if dest.exists():
            logging.info(f"Skipped {src} ({dest} already exists)")
            return Outcome.SKIPPED

        if self.dry_run:
            logging.info(f"[DRY RUN] Move {src} -> {dest}")
            return Outcome.MOVED

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(src), str(dest))
        except OSError as e:
            logging.error(f"Failed to move {src} -> {dest}: {e}")
            return Outcome.FAILED

        logging.info(f"Moved {src} -> {dest}")
        return Outcome.MOVED
