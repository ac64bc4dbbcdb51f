import logging
from typing import List, Optional

from .exceptions import ScanError
from .metadata.extract import MetadataExtractor
from .models import BatchSummary, MediaType, RunOptions
from .naming.generator import NameGenerator
from .organization.mover import FileMover
from .organization.renamer import FileRenamer
from .organization.timestamps import TimestampRewriter
from .scanning.filesystem import DirectoryScanner

ALL_MEDIA = (MediaType.IMAGE, MediaType.VIDEO)


class PhotoRenamerApp:
    def __init__(self, extractor: Optional[MetadataExtractor] = None):
        self.scanner = DirectoryScanner()
        self.metadata = extractor or MetadataExtractor()

    def run(self, options: RunOptions) -> List[BatchSummary]:
        """
        Executes the selected phases, in order:
        1. Rename images
        2. Rename videos
        3. Rewrite last-modified times from canonical names
        4. Move canonical files into <year>/<month>/

        Each phase lists the directory afresh so it sees the previous phase's renames.
        A phase that cannot list the directory is logged and the next one still runs.
        """
        src = options.source_dir
        summaries = []

        if options.rename_images:
            summaries += self._phase("Renaming images", self._rename, options, MediaType.IMAGE)

        if options.rename_videos:
            summaries += self._phase("Renaming videos", self._rename, options, MediaType.VIDEO)

        if options.update_last_modified:
            summaries += self._phase("Updating last modified", self._update_last_modified, options)

        if options.move_files:
            summaries += self._phase("Moving", self._move, options)

        logging.info(f"Done with {src}.")
        return summaries

    def _phase(self, name: str, func, *args) -> List[BatchSummary]:
        logging.info(f"--- {name} ---")
        try:
            return [func(*args)]
        except ScanError as e:
            logging.error(f"{name} aborted: {e}")
            return []

    def _rename(self, options: RunOptions, media_type: MediaType) -> BatchSummary:
        strategy = options.strategy_for(media_type)
        generator = NameGenerator(
            strategy,
            change_last_modified=options.change_last_modified,
            dry_run=options.dry_run,
            extractor=self.metadata,
        )
        files = self.scanner.collect(options.source_dir, [media_type])
        phase = "Renaming images" if media_type is MediaType.IMAGE else "Renaming videos"
        logging.info(f"{phase} by {strategy.value} ({len(files)} candidates)")
        return FileRenamer(generator, dry_run=options.dry_run).execute(files, phase=phase)

    def _update_last_modified(self, options: RunOptions) -> BatchSummary:
        files = self.scanner.collect(options.source_dir, ALL_MEDIA)
        rewriter = TimestampRewriter(options.utc_offset_seconds, dry_run=options.dry_run)
        return rewriter.execute(files)

    def _move(self, options: RunOptions) -> BatchSummary:
        files = self.scanner.collect(options.source_dir, ALL_MEDIA)
        return FileMover(dry_run=options.dry_run).execute(files)
