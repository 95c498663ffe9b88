"""File discovery helpers for event content directories.

This module only lists files; it never parses or writes them.
"""

from pathlib import Path

from simg_tools.config import CONTENT_LANGUAGES, EVENTS_CONTENT_DIR


def find_markdown_files(input_dir: Path) -> list[Path]:
    """Find markdown files in the given directory.

    Parameters
    ----------
    input_dir : Path
        Directory to search for ``*.md`` files. A missing directory yields
        an empty list.

    Returns
    -------
    list[Path]
        Sorted list of markdown file paths found in `input_dir`.
    """
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        return []
    return sorted(input_dir.glob("*.md"))


def resolve_language_dirs(lang: str, events_dir: Path | None = None) -> list[Path]:
    """Return the per-language content directories selected by ``lang``.

    Parameters
    ----------
    lang : str
        ``"en"``, ``"es"`` or ``"both"``.
    events_dir : Path | None, optional
        Root of the events collection; defaults to ``EVENTS_CONTENT_DIR``.

    Returns
    -------
    list[Path]
        One directory per selected language, in ``CONTENT_LANGUAGES`` order.

    Raises
    ------
    ValueError
        If ``lang`` is not a known language selector.
    """
    root = Path(events_dir) if events_dir is not None else EVENTS_CONTENT_DIR
    if lang == "both":
        return [root / code for code in CONTENT_LANGUAGES]
    if lang not in CONTENT_LANGUAGES:
        raise ValueError(f"Unknown content language: {lang!r}")
    return [root / lang]
