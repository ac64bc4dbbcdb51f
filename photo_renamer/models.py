from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from . import config


class MediaType(Enum):
    IMAGE = 'image'
    VIDEO = 'video'
    UNRECOGNIZED = 'unrecognized'


class NamingStrategy(Enum):
    FILE_NAME_PATTERN = 'file_name'
    LAST_MODIFIED = 'last_modified'
    IMAGE_PROPERTIES = 'image_properties'


class NameStatus(Enum):
    MATCHED = 'matched'
    NO_DECISION = 'no_decision'
    ERROR = 'error'


class Outcome(Enum):
    RENAMED = 'renamed'
    MOVED = 'moved'
    UPDATED = 'updated'
    SKIPPED = 'skipped'
    FAILED = 'failed'


@dataclass
class MediaFile:
    """
    A file found in the source directory. Recomputed on every scan.
    """
    path: Path
    media_type: MediaType

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        # Everything before the last dot, so "a.b.jpg" -> "a.b"
        name = self.path.name
        pos = name.rfind('.')
        return name[:pos] if pos > 0 else name

    @property
    def ext(self) -> str:
        return self.path.suffix.lstrip('.').lower()

    @property
    def parent(self) -> Path:
        return self.path.parent


@dataclass
class NameResult:
    """
    Outcome of asking a naming strategy for a new name.

    MATCHED carries new_path, ERROR carries error, NO_DECISION carries nothing.
    """
    status: NameStatus
    new_path: Optional[Path] = None
    error: Optional[Exception] = None

    @classmethod
    def matched(cls, new_path: Path) -> "NameResult":
        return cls(NameStatus.MATCHED, new_path=new_path)

    @classmethod
    def no_decision(cls) -> "NameResult":
        return cls(NameStatus.NO_DECISION)

    @classmethod
    def failed(cls, error: Exception) -> "NameResult":
        return cls(NameStatus.ERROR, error=error)


@dataclass
class BatchSummary:
    """Per-phase counters."""
    phase: str
    processed: int = 0
    changed: int = 0
    skipped: int = 0
    failed: int = 0

    def record(self, outcome: Outcome):
        self.processed += 1
        if outcome is Outcome.SKIPPED:
            self.skipped += 1
        elif outcome is Outcome.FAILED:
            self.failed += 1
        else:
            self.changed += 1

    def __str__(self) -> str:
        return (f"{self.phase}: {self.processed} processed, {self.changed} changed, "
                f"{self.skipped} skipped, {self.failed} failed")


@dataclass
class RunOptions:
    """
    Validated configuration for one run.
    """
    source_dir: Path
    rename_images: bool = False
    rename_videos: bool = False
    move_files: bool = False
    update_last_modified: bool = False

    # Strategy selectors (validated to exactly one per renamed media type)
    use_file_name: bool = False
    use_last_modified: bool = False
    use_image_properties: bool = False

    # Image-only: also set mtime to the capture time when renaming by metadata
    change_last_modified: bool = False

    utc_offset_seconds: int = config.TIMEZONE_OFFSET_SECONDS
    dry_run: bool = False

    def strategy_for(self, media_type: MediaType) -> Optional[NamingStrategy]:
        if media_type is MediaType.IMAGE and self.use_image_properties:
            return NamingStrategy.IMAGE_PROPERTIES
        if self.use_last_modified:
            return NamingStrategy.LAST_MODIFIED
        if self.use_file_name:
            return NamingStrategy.FILE_NAME_PATTERN
        return None
