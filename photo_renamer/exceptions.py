"""
Custom exception hierarchy for the photo renamer application.

Configuration problems are fatal and stop the run before the filesystem is
touched. Everything else is raised per file and handled by the batch loops.
"""


class PhotoRenamerError(Exception):
    """Base exception for all photo renamer errors."""
    pass


class InvalidArgumentsError(PhotoRenamerError):
    """Raised when the command line flags do not form a valid run."""
    pass


class ScanError(PhotoRenamerError):
    """Raised when the source directory cannot be listed."""
    pass


class MetadataExtractionError(PhotoRenamerError):
    """Raised when metadata cannot be extracted from a file."""
    pass
