import logging
from typing import List

from tqdm import tqdm

from ..models import BatchSummary, MediaFile, NameStatus, Outcome
from ..naming.generator import NameGenerator


class FileRenamer:
    """
    Applies the names proposed by a NameGenerator.

    Never overwrites: an existing target means the file is skipped. A failure
    on one file is logged and the batch carries on.
    """

    def __init__(self, generator: NameGenerator, dry_run: bool = False):
        self.generator = generator
        self.dry_run = dry_run

    def execute(self, files: List[MediaFile], phase: str = "Renaming") -> BatchSummary:
        summary = BatchSummary(phase)

        if not files:
            logging.info(f"{phase}: no candidate files.")
            return summary

        for media in tqdm(files, desc=phase):
            summary.record(self.rename_one(media))

        logging.info(str(summary))
        return summary

    def rename_one(self, media: MediaFile) -> Outcome:
        result = self.generator.generate(media)

        if result.status is NameStatus.ERROR:
            logging.error(f"Couldn't get new name for {media.path}: {result.error}")
            return Outcome.FAILED

        if result.status is NameStatus.NO_DECISION:
            logging.info(f"Skipped {media.path} (no name could be derived)")
            return Outcome.SKIPPED

        new_path = result.new_path
        if new_path == media.path:
            logging.debug(f"Skipped {media.path} (already named)")
            return Outcome.SKIPPED

        if new_path.exists():
            logging.info(f"Skipped {media.path} ({new_path.name} already exists)")
            return Outcome.SKIPPED

        if self.dry_run:
            logging.info(f"[DRY RUN] Rename {media.path} -> {new_path}")
            return Outcome.RENAMED

        try:
            media.path.rename(new_path)
        except OSError as e:
            logging.error(f"Error renaming {media.path}: {e}")
            return Outcome.FAILED

        logging.info(f"Renamed {media.path} -> {new_path}")
        return Outcome.RENAMED
