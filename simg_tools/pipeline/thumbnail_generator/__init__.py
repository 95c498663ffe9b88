"""The thumbnail_generator package turns event descriptions into thumbnails.

It holds the event data model, the title layout and theme classification
rules, the local SVG renderer with its themed side panels, the file-system
sink, and the composer that tries the remote image service before falling
back to local rendering. The command line lives in :mod:`.cli` and is not
re-exported here.

Modules exported
----------------
EventDescriptor, EventType, Theme, ParsedTitle, ThumbnailDocument, ComposeResult
    Value types shared by every stage.
parse_title, classify_theme, render_panel, render_local_thumbnail
    Pure layout and rendering functions.
ThumbnailComposer, LocalSvgBackend, RemoteImageBackend
    Backend chain and per-event orchestration.
load_event_descriptors, run_batch, run_single
    Programmatic entrypoints used by the CLI.

Examples
--------
>>> from simg_tools.pipeline.thumbnail_generator import classify_theme, parse_title
>>> classify_theme("Lecture 5 - GPU Memory Coalescing").value
'gpu'
>>> parse_title("Lecture 5 - GPU Memory Coalescing").badge_text
'LECTURE 5'
"""

from __future__ import annotations

from .composer import LocalSvgBackend, RemoteImageBackend, ThumbnailComposer
from .file_sink import slugify
from .models import (
    ComposeResult,
    EventDescriptor,
    EventType,
    ParsedTitle,
    Theme,
    ThumbnailDocument,
)
from .panels import render_panel
from .renderer import render_local_thumbnail
from .runner import load_event_descriptors, run_batch, run_single
from .text_layout import parse_title
from .themes import classify_theme

__all__ = [
    "ComposeResult",
    "EventDescriptor",
    "EventType",
    "LocalSvgBackend",
    "ParsedTitle",
    "RemoteImageBackend",
    "Theme",
    "ThumbnailComposer",
    "ThumbnailDocument",
    "classify_theme",
    "load_event_descriptors",
    "parse_title",
    "render_local_thumbnail",
    "render_panel",
    "run_batch",
    "run_single",
    "slugify",
]
