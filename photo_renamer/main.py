import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import config
from .core import PhotoRenamerApp
from .exceptions import InvalidArgumentsError
from .models import RunOptions


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to the console and, optionally, a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )

    # Silence chatty libraries
    logging.getLogger("exifread").setLevel(logging.ERROR)
    logging.getLogger("PIL").setLevel(logging.WARNING)


def parse_args(argv: Optional[Sequence[str]] = None):
    p = argparse.ArgumentParser(
        description="Rename photos/videos to 'YYYY-MM-DD HH.MM.SS.ext' and file them by year/month")

    p.add_argument("--source-dir", type=Path, default=Path("."), help="Directory to process (default: .)")

    # Actions
    p.add_argument("--rename-images", action="store_true", help="Rename images")
    p.add_argument("--rename-videos", action="store_true", help="Rename videos")
    p.add_argument("--move-files", action="store_true", help="Move canonical files into <year>/<month>/")
    p.add_argument("--update-last-modified", action="store_true",
                   help="Set each canonical file's modified time from its name")

    # Naming strategies
    p.add_argument("--use-file-name", action="store_true",
                   help="Derive names from camera patterns like IMG_20230401_120000.jpg")
    p.add_argument("--use-last-modified", action="store_true", help="Derive names from the file's modified time")
    p.add_argument("--use-image-properties", action="store_true",
                   help="Derive image names from EXIF DateTimeOriginal")
    p.add_argument("--change-last-modified", action="store_true",
                   help="With --use-image-properties, also set modified time to the capture time")

    p.add_argument("--utc-offset-seconds", type=int, default=config.TIMEZONE_OFFSET_SECONDS,
                   help="Offset subtracted by --update-last-modified (default: %(default)s, i.e. UTC+05:30)")
    p.add_argument("--dry-run", action="store_true", help="Simulate actions without modifying disk")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")

    return p.parse_args(argv)


def validate_options(args) -> RunOptions:
    """Turns parsed flags into RunOptions, raising InvalidArgumentsError on bad combinations."""
    if not (args.rename_images or args.rename_videos or args.move_files or args.update_last_modified):
        raise InvalidArgumentsError(
            "Kindly use at least --rename-images, --rename-videos, --move-files or --update-last-modified")

    if args.rename_videos:
        count = sum([args.use_file_name, args.use_last_modified])
        if count != 1:
            raise InvalidArgumentsError(
                "Kindly use exactly one of --use-last-modified or --use-file-name along with --rename-videos")
        if args.use_image_properties:
            raise InvalidArgumentsError("--use-image-properties only applies to --rename-images")

    if args.rename_images:
        count = sum([args.use_file_name, args.use_last_modified, args.use_image_properties])
        if count != 1:
            raise InvalidArgumentsError(
                "Kindly use exactly one of --use-image-properties, --use-last-modified or --use-file-name "
                "along with --rename-images")

    source_dir = args.source_dir
    if not source_dir.is_dir():
        raise InvalidArgumentsError(f"Source directory {source_dir} does not exist or is not a directory")

    if args.change_last_modified and not (args.rename_images and args.use_image_properties):
        logging.warning("--change-last-modified has no effect without --rename-images --use-image-properties")

    return RunOptions(
        source_dir=source_dir.resolve(),
        rename_images=args.rename_images,
        rename_videos=args.rename_videos,
        move_files=args.move_files,
        update_last_modified=args.update_last_modified,
        use_file_name=args.use_file_name,
        use_last_modified=args.use_last_modified,
        use_image_properties=args.use_image_properties,
        change_last_modified=args.change_last_modified,
        utc_offset_seconds=args.utc_offset_seconds,
        dry_run=args.dry_run,
    )


def main(argv: Optional[Sequence[str]] = None):
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        options = validate_options(args)
    except InvalidArgumentsError as e:
        logging.error(str(e))
        sys.exit(1)

    logging.info("=== Photo Renamer Started ===")
    logging.info(f"Source: {options.source_dir}")

    app = PhotoRenamerApp()

    try:
        app.run(options)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error while organizing.")
        sys.exit(1)


if __name__ == "__main__":
    main()
