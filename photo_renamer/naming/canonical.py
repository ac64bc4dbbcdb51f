"""
The canonical "YYYY-MM-DD HH.MM.SS.ext" name.

Renaming produces it, moving and timestamp rewriting parse it back. Both
directions live here so the format has a single definition.
"""
import re
from datetime import datetime
from typing import Optional, Tuple

from .. import config

CANONICAL_RE = re.compile(config.CANONICAL_NAME_PATTERN)


def format_canonical_name(dt: datetime, ext: str) -> str:
    """format_canonical_name(datetime(2023, 4, 1, 12), 'JPG') -> '2023-04-01 12.00.00.jpg'"""
    return f"{dt.strftime(config.CANONICAL_DATE_FORMAT)}.{ext.lstrip('.').lower()}"


def format_from_parts(parts: Tuple[str, ...], ext: str) -> str:
    """Builds a canonical name from six captured strings (Y, M, D, h, m, s)."""
    year, month, day, hour, minute, second = parts
    return f"{year}-{month}-{day} {hour}.{minute}.{second}.{ext.lower()}"


def parse_canonical_parts(stem: str) -> Optional[Tuple[str, ...]]:
    """
    Returns the six captured groups of a canonical stem, or None.

    The search is unanchored, so a canonical date anywhere in the stem counts.
    """
    m = CANONICAL_RE.search(stem)
    if not m:
        return None
    return m.groups()


def parse_canonical_datetime(stem: str) -> Optional[datetime]:
    """
    Parses a canonical stem into a naive datetime.

    Returns None when the stem does not look canonical.
    Raises ValueError when it does but the calendar values are invalid.
    """
    parts = parse_canonical_parts(stem)
    if parts is None:
        return None
    return datetime(*(int(p) for p in parts))
