"""Keyword-based theme classification for thumbnail panels.

The keyword groups are tested in order and the first hit wins. CUDA terms go
first because several of them (occupancy, scheduling) would otherwise land in
the broader GPU bucket.
"""

import re
from collections.abc import Iterable

from .models import Theme

THEME_KEYWORDS: tuple[tuple[Theme, re.Pattern[str]], ...] = (
    (
        Theme.CUDA,
        re.compile(
            r"\b(cuda|kernels?|warps?|occupancy|nsight|profil(?:er|ers|ing)"
            r"|thread ?blocks?|streaming multiprocessors?|scheduling|ptx|triton)\b"
        ),
    ),
    (
        Theme.PYTHON,
        re.compile(
            r"\b(python|numpy|pandas|scipy|jupyter|notebooks?|numba|cupy"
            r"|pytorch|torch)\b"
        ),
    ),
    (
        Theme.NEURAL,
        re.compile(
            r"\b(neural|diffusion|generative|transformers?|attention|llms?"
            r"|gans?|vaes?|autoencoders?|deep learning|embeddings?)\b"
        ),
    ),
    (
        Theme.GPU,
        re.compile(
            r"\b(gpus?|memory|coalesc(?:ing|ed)|caches?|bandwidth|hardware"
            r"|architecture|dram|hbm|registers?|tensor cores?)\b"
        ),
    ),
)


def build_search_text(title: str, tags: Iterable[str]) -> str:
    """Lower-case and join the title and tags into one search string."""
    return " ".join([title, *tags]).lower()


def classify_theme(title: str, tags: Iterable[str] = ()) -> Theme:
    """Return the panel theme for a title and its tags.

    Total and deterministic: every input maps to exactly one theme, with
    ``Theme.DEFAULT`` when no keyword group matches.

    Examples
    --------
    >>> classify_theme("CUDA kernel occupancy")
    <Theme.CUDA: 'cuda'>
    >>> classify_theme("Diffusion Models for Medical Imaging", ["neural"])
    <Theme.NEURAL: 'neural'>
    >>> classify_theme("Welcome Meeting")
    <Theme.DEFAULT: 'simg-default'>
    """
    search_text = build_search_text(title, tags)
    for theme, pattern in THEME_KEYWORDS:
        if pattern.search(search_text):
            return theme
    return Theme.DEFAULT
