"""File-system sink for rendered thumbnails.

Knows how event titles map to output file names and how documents reach the
disk. It performs only file I/O.
"""

import logging
import re
from pathlib import Path
from typing import Any

from simg_tools.config import FALLBACK_SLUG, REMOTE_IMAGE_EXTENSION
from simg_tools.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


def slugify(text: str) -> str:
    """Return a lower-case, hyphen-separated, filesystem-safe form of ``text``.

    Examples
    --------
    >>> slugify("Lecture 5 - GPU Memory Coalescing")
    'lecture-5-gpu-memory-coalescing'
    >>> slugify("¡Sesión 2!")
    'sesi-n-2'
    >>> slugify("***")
    'untitled-event'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug or FALLBACK_SLUG


def target_path(output_dir: Path, slug: str, extension: str) -> Path:
    """Return ``<output_dir>/<slug>.<extension>``."""
    return Path(output_dir) / f"{slug}.{extension}"


def pinned_png_path(output_dir: Path, slug: str) -> Path | None:
    """Return the existing PNG for ``slug``, or None when there is none.

    A PNG at the target path pins the thumbnail: whether produced by the
    remote service or dropped in by hand, it is never regenerated.
    """
    path = target_path(output_dir, slug, REMOTE_IMAGE_EXTENSION)
    return path if path.exists() else None


def write_document(document: Any, path: Path) -> Path:
    """Write a thumbnail document to ``path``, creating parent directories.

    Parameters
    ----------
    document : ThumbnailDocument
        Document whose ``content`` is ``bytes`` (written verbatim) or ``str``
        (written as UTF-8).
    path : Path
        Destination file.

    Returns
    -------
    Path
        The path written.

    Raises
    ------
    OutputWriteError
        If the directory cannot be created or the file cannot be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if document.is_binary:
            path.write_bytes(document.content)
        else:
            path.write_text(document.content, encoding="utf-8")
    except OSError as error:
        raise OutputWriteError(
            f"Error writing {path}: {error}", context={"path": str(path)}
        ) from error
    logger.debug(f"Wrote {path}")
    return path
