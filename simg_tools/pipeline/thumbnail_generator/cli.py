"""CLI entrypoint and logging/argument utilities for thumbnail generation.

Two modes are supported:

- ``--all`` generates thumbnails for every event markdown file in the content
  directory selected by ``--lang``.
- ``--title`` (with the optional ``--date``, ``--type``, ``--tags``,
  ``--meeting-link``, ``--time`` and ``--location``) generates the thumbnail
  for a single event described on the command line.

Without either flag a usage message is printed and the exit code is 1. All
rendering and writing is delegated to :mod:`.runner`; this module only parses
arguments, configures logging and maps outcomes to exit codes.

Examples
--------
>>> # In shell
>>> python -m simg_tools.pipeline.thumbnail_generator.cli --all --lang both
>>> simg-thumbnail --title "Lecture 5 - GPU Memory Coalescing" --date 2026-02-27 --tags "CUDA, GPU"
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from simg_tools.config import (
    CONTENT_LANGUAGES,
    LOG_DIR,
    LOG_FILENAME_THUMBNAILS,
    LOG_FORMAT,
    THUMBNAIL_OUTPUT_DIR,
)
from simg_tools.exceptions import (
    ConfigurationError,
    DataValidationError,
    OutputWriteError,
    UserInputError,
)
from simg_tools.pipeline.frontmatter import resolve_language_dirs
from simg_tools.pipeline.image_backend import BananaConfig

from .models import EventDescriptor
from .runner import print_summary, run_batch, run_single

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure logging output for the thumbnail CLI.

    Installs a console handler and, optionally, a file handler writing to
    ``LOG_DIR / LOG_FILENAME_THUMBNAILS``. Existing root handlers are removed
    first, so repeated calls do not duplicate output. A file handler that
    cannot be created is skipped.

    Parameters
    ----------
    level : str, optional
        Logging level name, e.g. "DEBUG" or "INFO". Defaults to "INFO".
    enable_file : bool, optional
        Whether to add the file handler. Defaults to True.

    Examples
    --------
    >>> from simg_tools.pipeline.thumbnail_generator.cli import configure_logging
    >>> configure_logging("DEBUG", enable_file=False)
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0, logging.FileHandler(LOG_DIR / LOG_FILENAME_THUMBNAILS, mode="a")
            )
        except OSError:
            logging.getLogger(__name__).debug("File logging unavailable")
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the thumbnail CLI."""
    parser = argparse.ArgumentParser(
        prog="simg-thumbnail",
        description="Generate event thumbnails for the SIMG website.",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Generate thumbnails for every event markdown file.",
    )
    parser.add_argument(
        "--lang",
        choices=[*CONTENT_LANGUAGES, "both"],
        default="en",
        help="Content language directory used with --all (default: en).",
    )
    parser.add_argument(
        "--events-dir",
        type=Path,
        default=None,
        help="Root of the events content collection.",
    )
    parser.add_argument("--title", type=str, default=None)
    parser.add_argument("--date", type=str, default=None, help="ISO date.")
    parser.add_argument(
        "--type",
        dest="event_type",
        type=str,
        default=None,
        help="in-person, virtual or hybrid (default: in-person).",
    )
    parser.add_argument(
        "--tags", type=str, default=None, help='Comma list or "[a, b]" list.'
    )
    parser.add_argument(
        "--meeting-link", "--meetingLink", dest="meeting_link", default=None
    )
    parser.add_argument("--time", type=str, default=None)
    parser.add_argument("--location", type=str, default=None)
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=THUMBNAIL_OUTPUT_DIR
    )
    parser.add_argument(
        "--log-level", type=str, default=os.environ.get("LOG_LEVEL", "INFO")
    )
    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments; see :func:`build_parser` for the attributes.
    """
    return build_parser().parse_args(argv)


def select_mode(args: argparse.Namespace) -> str:
    """Return ``"all"`` or ``"single"``; ``--all`` wins when both are given.

    Raises
    ------
    UserInputError
        If neither ``--all`` nor ``--title`` was supplied.
    """
    if args.all:
        return "all"
    if args.title and args.title.strip():
        return "single"
    raise UserInputError("Either --all or --title must be given")


def descriptor_from_args(args: argparse.Namespace) -> EventDescriptor:
    """Build an event descriptor from single-event CLI options.

    The options go through the same conversion as frontmatter records.
    """
    fields = {
        "title": args.title,
        "date": args.date,
        "eventType": args.event_type,
        "tags": args.tags,
        "meetingLink": args.meeting_link,
        "time": args.time,
        "location": args.location,
    }
    return EventDescriptor.from_frontmatter(
        {key: value for key, value in fields.items() if value is not None}
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the thumbnail CLI and return the process exit code.

    Returns
    -------
    int
        0 on success; 1 for missing mode flags, an invalid title or when any
        thumbnail could not be written. A bad image service setting only
        disables the remote backend.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        mode = select_mode(args)
    except UserInputError as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc.message}", file=sys.stderr)
        return 1

    disable_file = bool(
        os.environ.get("DISABLE_FILE_LOGS") or os.environ.get("PYTEST_CURRENT_TEST")
    )
    configure_logging(args.log_level, enable_file=not disable_file)
    logger.info(f"Starting thumbnail generation ({mode})")

    cfg: BananaConfig | None
    try:
        cfg = BananaConfig()
    except ConfigurationError as exc:
        logger.warning(f"Image service disabled, rendering SVG locally: {exc}")
        cfg = None
    if cfg is not None and not cfg.is_available:
        logger.info("Image service credentials not set; rendering SVG locally.")

    try:
        if mode == "all":
            input_dirs = resolve_language_dirs(args.lang, args.events_dir)
            stats = run_batch(input_dirs, args.output_dir, cfg)
            print_summary(stats)
            return 1 if stats.get("failed", 0) else 0
        try:
            event = descriptor_from_args(args)
        except DataValidationError as exc:
            logger.error(f"Invalid event: {exc}")
            return 1
        try:
            result = run_single(event, args.output_dir, cfg)
        except OutputWriteError as exc:
            logger.error(f"Could not write thumbnail: {exc}")
            return 1
        if result.status == "skipped":
            logger.info(f"Kept existing thumbnail: {result.path}")
        else:
            logger.info(f"Thumbnail written: {result.path}")
        return 0
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 1


__all__ = [
    "build_parser",
    "configure_logging",
    "descriptor_from_args",
    "main",
    "parse_arguments",
    "select_mode",
]


if __name__ == "__main__":
    sys.exit(main())
