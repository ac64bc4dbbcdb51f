"""
Configuration constants for the photo renamer.
"""

# --- File Type Definitions ---
IMAGE_EXTS = {'avif', 'jpg', 'jpeg', 'png', 'gif', 'webp'}
VIDEO_EXTS = {'mp4'}

# Extension to Type Mapping (extensions are stored lowercase, without the dot)
EXT_TO_TYPE = {}
for ext in IMAGE_EXTS: EXT_TO_TYPE[ext] = 'image'
for ext in VIDEO_EXTS: EXT_TO_TYPE[ext] = 'video'

# --- File Name Patterns ---
# Tried in order, first match wins.
# Groups 1-6: year, month, day, hour, minute, second. Group 7: extension.
IMAGE_NAME_PATTERNS = (
    r'IMG_(\d{4})(\d{2})(\d{2})_(\d{2})(\d{2})(\d{2})\.((?i:jpg))$',
    r'IMG_(\d{4})(\d{2})(\d{2})_(\d{2})(\d{2})(\d{2})~\d+\.((?i:jpg))$',
)
VIDEO_NAME_PATTERNS = (
    r'VID_(\d{4})(\d{2})(\d{2})_(\d{2})(\d{2})(\d{2})\.((?i:mp4))$',
    r'VID_(\d{4})(\d{2})(\d{2})_(\d{2})(\d{2})(\d{2})_HSR_\d{3}\.((?i:mp4))$',
)

# --- Canonical Names ---
# "2023-04-01 12.00.00.jpg"
CANONICAL_DATE_FORMAT = "%Y-%m-%d %H.%M.%S"
CANONICAL_NAME_PATTERN = r'(\d{4})-(\d{2})-(\d{2}) (\d{2}).(\d{2}).(\d{2})'

# --- Metadata Parsing ---
CAPTURE_DATE_TAG = 'EXIF DateTimeOriginal'
EXIF_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# --- Timestamp Rewriting ---
# Subtracted from the UTC reading of a canonical name before it is written as mtime.
# Assumes names were recorded in UTC+05:30.
TIMEZONE_OFFSET_SECONDS = 5 * 3600 + 30 * 60  # 19800
