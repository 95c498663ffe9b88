"""Frontmatter parsing utilities for event markdown files.

This module reads the restricted ``key: value`` header that the website's
content files carry between two ``---`` lines. It is deliberately not a YAML
parser: nested structures are not supported, lines that do not look like
``key: value`` are ignored, and list-like values are left as text until a
caller decodes them with :func:`parse_list_value`.

No business logic lives here; turning a mapping into an event record is the
job of :mod:`simg_tools.pipeline.thumbnail_generator.models`.
"""

import re
from pathlib import Path

FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)
KEY_VALUE_PATTERN = re.compile(r"^(\w[\w-]*)\s*:\s*(.+)")


def _strip_matching_quotes(value: str) -> str:
    """Remove one pair of matching single or double quotes around ``value``."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_frontmatter(content: str) -> dict[str, str] | None:
    """
    Extract the frontmatter block of a markdown document as a mapping.

    The block must open on the very first line with exactly three hyphens
    and close with another three-hyphen line. Each line inside that matches
    ``key: value`` contributes one entry; quoted values have their quotes
    stripped. Later duplicates overwrite earlier ones.

    Parameters
    ----------
    content : str
        Raw markdown text.

    Returns
    -------
    dict[str, str] | None
        The parsed mapping, or ``None`` when the document has no frontmatter.

    Examples
    --------
    >>> parse_frontmatter('---\\ntitle: "GPU Day"\\ndate: 2026-02-27\\n---\\nBody')
    {'title': 'GPU Day', 'date': '2026-02-27'}
    >>> parse_frontmatter("# No header") is None
    True
    """
    normalized = content.replace("\r\n", "\n").lstrip("\ufeff")
    match = FRONTMATTER_PATTERN.match(normalized)
    if not match:
        return None
    frontmatter: dict[str, str] = {}
    for line in match.group(1).split("\n"):
        kv_match = KEY_VALUE_PATTERN.match(line)
        if not kv_match:
            continue
        frontmatter[kv_match.group(1)] = _strip_matching_quotes(
            kv_match.group(2).strip()
        )
    return frontmatter


def parse_list_value(raw: str | None) -> list[str]:
    """
    Decode a list-like frontmatter value into an ordered list of strings.

    Accepts both the inline YAML form ``[a, b, "c"]`` and a bare
    comma-separated form ``a, b, c``. Bracket and quote characters are
    removed, items are trimmed and empty items dropped.

    Parameters
    ----------
    raw : str | None
        The raw value as read from the frontmatter.

    Returns
    -------
    list[str]
        Items in their original order.

    Examples
    --------
    >>> parse_list_value('["CUDA", "Performance"]')
    ['CUDA', 'Performance']
    >>> parse_list_value("AI, , Research")
    ['AI', 'Research']
    >>> parse_list_value("[]")
    []
    """
    if not raw:
        return []
    cleaned = re.sub(r"[\[\]\"']", "", raw)
    return [item.strip() for item in cleaned.split(",") if item.strip()]


def read_frontmatter(markdown_path: Path) -> dict[str, str] | None:
    """Read a markdown file and return its frontmatter mapping or ``None``.

    Raises
    ------
    OSError
        If the file cannot be read.
    """
    return parse_frontmatter(Path(markdown_path).read_text(encoding="utf-8"))
