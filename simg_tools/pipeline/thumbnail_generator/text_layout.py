"""Title layout for event thumbnails.

Pure functions: a title goes in, an optional lecture badge and at most three
display lines come out. Wrapping is greedy and word based; words are never
split, so a single word longer than the line width gets a line of its own.
"""

import re

from simg_tools.config import TITLE_MAX_CHARS_PER_LINE, TITLE_MAX_LINES

from .models import ParsedTitle

LECTURE_PREFIX_PATTERN = re.compile(
    r"^\s*(lecture|sesi[oó]n)\s+(\d+)(?=[\s\-–—:|]|$)[\s\-–—:|]*", re.IGNORECASE
)
SUBTITLE_SEPARATOR = " - "


def extract_lecture_prefix(title: str) -> tuple[str | None, int | None, str]:
    """Split a leading ``Lecture N`` / ``Sesión N`` token off a title.

    Parameters
    ----------
    title : str
        The full event title.

    Returns
    -------
    tuple[str | None, int | None, str]
        ``(label, number, remainder)`` where ``label`` is the upper-cased
        prefix word. Without a prefix, ``label`` and ``number`` are None and
        ``remainder`` is the stripped title.

    Examples
    --------
    >>> extract_lecture_prefix("Lecture 5 - GPU Memory Coalescing")
    ('LECTURE', 5, 'GPU Memory Coalescing')
    >>> extract_lecture_prefix("sesión 12: Modelos de Difusión")
    ('SESIÓN', 12, 'Modelos de Difusión')
    >>> extract_lecture_prefix("Reading Group")
    (None, None, 'Reading Group')
    """
    match = LECTURE_PREFIX_PATTERN.match(title)
    if not match:
        return None, None, title.strip()
    return match.group(1).upper(), int(match.group(2)), title[match.end() :].strip()


def wrap_words(
    text: str,
    max_chars: int = TITLE_MAX_CHARS_PER_LINE,
    max_lines: int = TITLE_MAX_LINES,
) -> list[str]:
    """Greedily pack words into lines of at most ``max_chars`` characters.

    Lines beyond ``max_lines`` are dropped.

    Examples
    --------
    >>> wrap_words("Diffusion Models for Medical Imaging", 20)
    ['Diffusion Models for', 'Medical Imaging']
    >>> wrap_words("Supercalifragilisticexpialidocious GPUs", 10)
    ['Supercalifragilisticexpialidocious', 'GPUs']
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and len(candidate) > max_chars:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines[:max_lines]


def wrap_title(
    text: str,
    max_chars: int = TITLE_MAX_CHARS_PER_LINE,
    max_lines: int = TITLE_MAX_LINES,
) -> list[str]:
    """Wrap a title, starting a new line group after a ``" - "`` separator.

    Examples
    --------
    >>> wrap_title("Attention - Why Softmax Works")
    ['Attention', 'Why Softmax Works']
    """
    if SUBTITLE_SEPARATOR in text:
        head, tail = text.split(SUBTITLE_SEPARATOR, 1)
        lines = wrap_words(head, max_chars, max_lines) + wrap_words(
            tail, max_chars, max_lines
        )
        return lines[:max_lines]
    return wrap_words(text, max_chars, max_lines)


def parse_title(
    title: str,
    max_chars: int = TITLE_MAX_CHARS_PER_LINE,
    max_lines: int = TITLE_MAX_LINES,
) -> ParsedTitle:
    """Turn a raw event title into badge data and display lines.

    When nothing is left after removing the lecture prefix the whole title
    is wrapped so the title area is never empty.

    Examples
    --------
    >>> parsed = parse_title("Lecture 3 - Warps - Divergence")
    >>> parsed.badge_text, parsed.lines
    ('LECTURE 3', ('Warps', 'Divergence'))
    """
    label, number, remainder = extract_lecture_prefix(title)
    lines = wrap_title(remainder, max_chars, max_lines)
    if not lines:
        lines = wrap_title(title.strip(), max_chars, max_lines)
    return ParsedTitle(
        lines=tuple(lines), lecture_label=label, lecture_number=number
    )
