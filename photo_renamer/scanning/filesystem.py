import os
import logging
from pathlib import Path
from typing import Iterable, Iterator, List

from .. import config
from ..exceptions import ScanError
from ..models import MediaFile, MediaType


def classify(path: Path) -> MediaType:
    """Classifies a path by its lowercased extension only. No content sniffing."""
    ext = path.suffix.lstrip('.').lower()
    ftype = config.EXT_TO_TYPE.get(ext)
    if ftype == 'image':
        return MediaType.IMAGE
    if ftype == 'video':
        return MediaType.VIDEO
    return MediaType.UNRECOGNIZED


class DirectoryScanner:
    """
    Lists the media files directly inside a source directory.

    Sub-directories are not descended into, so files already moved into
    <year>/<month>/ folders are left alone on later runs.
    """

    def iter_media(self, root: Path, media_types: Iterable[MediaType]) -> Iterator[MediaFile]:
        """Yields MediaFiles of the requested types, sorted by name."""
        wanted = set(media_types)
        for path in self._list_files(root):
            media_type = classify(path)
            if media_type is MediaType.UNRECOGNIZED:
                logging.debug(f"Ignoring unrecognized file {path}")
                continue
            if media_type in wanted:
                yield MediaFile(path=path, media_type=media_type)

    def collect(self, root: Path, media_types: Iterable[MediaType]) -> List[MediaFile]:
        # Materialized up front so renames/moves don't disturb the listing
        return list(self.iter_media(root, media_types))

    def _list_files(self, root: Path) -> List[Path]:
        try:
            with os.scandir(root) as it:
                entries = list(it)
        except OSError as e:
            raise ScanError(f"Cannot list {root}: {e}") from e

        # Sort for stable processing order
        entries.sort(key=lambda e: e.name)
        return [Path(e.path) for e in entries if e.is_file(follow_symlinks=False)]
