"""Thumbnail Generator Runner Module.

Programmatic entrypoints for thumbnail generation. The CLI parses arguments
and configures logging, then calls into this module; tests and other tooling
can call the same functions directly without going through ``argparse``.

No rendering happens here. Events are read with
:mod:`simg_tools.pipeline.frontmatter`, turned into descriptors and handed to
:class:`ThumbnailComposer`.

Examples
--------
>>> from pathlib import Path
>>> from simg_tools.pipeline.thumbnail_generator.runner import run_batch
>>> stats = run_batch([Path("src/content/events/en")], Path("public/images/events"))  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

import aiohttp
from rich.console import Console
from rich.table import Table

from simg_tools.exceptions import DataValidationError
from simg_tools.pipeline.frontmatter import find_markdown_files, read_frontmatter

from .composer import ThumbnailComposer
from .models import ComposeResult, EventDescriptor

logger = logging.getLogger(__name__)

SUMMARY_ROWS: tuple[tuple[str, str], ...] = (
    ("total_events", "Events found"),
    ("skipped_existing_png", "Skipped (PNG exists)"),
    ("written_png", "Written PNG (remote)"),
    ("written_svg", "Written SVG (local)"),
    ("failed", "Failed"),
)


def load_event_descriptors(
    input_dirs: Iterable[Path], today: date | None = None
) -> list[EventDescriptor]:
    """Read every event markdown file in ``input_dirs`` into descriptors.

    Files without a frontmatter block, files that cannot be read and records
    without a title are logged and skipped; they never abort the batch.

    Parameters
    ----------
    input_dirs : Iterable[Path]
        Content directories, searched in the given order.
    today : date | None, optional
        Date used for records that have no ``date``.

    Returns
    -------
    list[EventDescriptor]
        Descriptors in directory order, files sorted by name.
    """
    descriptors: list[EventDescriptor] = []
    for input_dir in input_dirs:
        files = find_markdown_files(input_dir)
        if not files:
            logger.warning(f"No markdown files found in {input_dir}")
            continue
        logger.info(f"Found {len(files)} event files in {input_dir}")
        for md_file in files:
            try:
                frontmatter = read_frontmatter(md_file)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning(f"Could not read {md_file}: {exc}")
                continue
            if frontmatter is None:
                logger.warning(f"No frontmatter in {md_file.name}, skipping.")
                continue
            try:
                descriptors.append(
                    EventDescriptor.from_frontmatter(frontmatter, today=today)
                )
            except DataValidationError as exc:
                logger.warning(f"Skipping {md_file.name}: {exc}")
    return descriptors


def run_batch(
    input_dirs: Iterable[Path],
    output_dir: Path,
    config: Any = None,
) -> dict[str, int]:
    """Generate thumbnails for every event found in ``input_dirs``.

    Returns
    -------
    dict[str, int]
        Statistics produced by :meth:`ThumbnailComposer.process_all`.
    """
    descriptors = load_event_descriptors(input_dirs)
    composer = ThumbnailComposer(output_dir, config)
    return asyncio.run(composer.process_all(descriptors))


def run_single(
    event: EventDescriptor, output_dir: Path, config: Any = None
) -> ComposeResult:
    """Generate the thumbnail for one event.

    Raises
    ------
    OutputWriteError
        If the thumbnail cannot be written.
    """
    composer = ThumbnailComposer(output_dir, config)
    return asyncio.run(_compose_single(composer, event))


async def _compose_single(
    composer: ThumbnailComposer, event: EventDescriptor
) -> ComposeResult:
    if not composer.remote_enabled:
        return await composer.compose(event)
    async with aiohttp.ClientSession() as session:
        return await composer.compose(event, session)


def print_summary(stats: dict[str, int], console: Console | None = None) -> None:
    """Print batch statistics as a table."""
    table = Table(
        title="Thumbnail generation", show_header=True, header_style="bold blue"
    )
    table.add_column("Metric")
    table.add_column("Count", justify="right")
    for key, label in SUMMARY_ROWS:
        table.add_row(label, str(stats.get(key, 0)))
    (console or Console()).print(table)
    logger.info(
        "Thumbnail summary: total=%d skipped=%d png=%d svg=%d failed=%d",
        *(int(stats.get(key, 0)) for key, _ in SUMMARY_ROWS),
    )


__all__ = [
    "load_event_descriptors",
    "print_summary",
    "run_batch",
    "run_single",
]
