"""Local SVG rendering for event thumbnails.

This module assembles the offline "event card": a 1280x720 SVG with the SIMG
branding header, optional lecture badge, event-type badge, wrapped title,
topic tags, an info bar with date, time and place, and the themed side panel.
It is the fallback whenever the remote image service is unavailable, so it
must never fail and never depend on anything but its input.

System Boundaries
-----------------
- Accepts an already validated :class:`EventDescriptor`.
- Does not touch the filesystem or the network.
- Output is byte-for-byte deterministic for a given descriptor.

Example
-------
>>> from simg_tools.pipeline.thumbnail_generator.models import EventDescriptor, EventType
>>> from simg_tools.pipeline.thumbnail_generator import renderer
>>> event = EventDescriptor("Reading Group", EventType.VIRTUAL, "2026-03-06")
>>> svg, theme = renderer.render_local_thumbnail(event)
>>> svg.startswith("<?xml")
True
"""

import html
from datetime import date

from simg_tools.config import (
    BRAND_NAME,
    BRAND_TAGLINE,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    COLORS,
    FONT_FAMILY,
    INFO_FIELD_MAX_CHARS,
    MAX_DISPLAY_TAGS,
    ONLINE_LOCATION_LABEL,
    PANEL_X,
    TAG_COLOR_CYCLE,
    TAG_MAX_CHARS,
    TITLE_FIRST_BASELINE,
    TITLE_FONT_SIZE,
    TITLE_LINE_HEIGHT,
)

from .models import EventDescriptor, EventType, ParsedTitle, Theme
from .panels import render_panel
from .text_layout import parse_title
from .themes import classify_theme

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

EVENT_TYPE_BADGES: dict[EventType, tuple[str, str, str]] = {
    EventType.IN_PERSON: ("IN-PERSON", COLORS["blue"], COLORS["light_text"]),
    EventType.VIRTUAL: ("VIRTUAL", COLORS["green"], COLORS["light_text"]),
    EventType.HYBRID: ("HYBRID", COLORS["yellow"], COLORS["dark_bg"]),
}

LEFT_MARGIN = 60
BADGE_Y = 140
BADGE_HEIGHT = 34
TAG_HEIGHT = 32
TAG_PANEL_GAP = 20
INFO_BAR_Y = 628


def escape_xml(text: str) -> str:
    """Escape text for use in SVG element content and attribute values."""
    return html.escape(text, quote=True)


def truncate(text: str, limit: int = INFO_FIELD_MAX_CHARS) -> str:
    """Shorten ``text`` to ``limit`` characters, ending with an ellipsis.

    Examples
    --------
    >>> truncate("Universidad Nacional de Colombia, Bogotá", 20)
    'Universidad Naciona…'
    >>> truncate("Room 202", 20)
    'Room 202'
    """
    text = text.strip()
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


def format_event_date(raw: str) -> str:
    """Render an ISO date as ``Feb 27, 2026``; other text is returned as given.

    Month names are fixed English abbreviations so output does not depend on
    the process locale.

    Examples
    --------
    >>> format_event_date("2026-02-27")
    'Feb 27, 2026'
    >>> format_event_date("2026-02-27T00:00:00.000Z")
    'Feb 27, 2026'
    >>> format_event_date("next Friday")
    'next Friday'
    """
    try:
        parsed = date.fromisoformat(raw.strip()[:10])
    except ValueError:
        return raw.strip()
    return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def location_label(event: EventDescriptor) -> str:
    """Return the place shown in the info bar, or an empty string."""
    if event.location:
        return event.location
    if event.meeting_link or event.event_type is EventType.VIRTUAL:
        return ONLINE_LOCATION_LABEL
    return ""


def _badge(x: int, label: str, fill: str, text_fill: str) -> tuple[list[str], int]:
    """Return a pill badge starting at ``x`` and its width."""
    width = len(label) * 11 + 32
    parts = [
        f'<rect x="{x}" y="{BADGE_Y}" width="{width}" height="{BADGE_HEIGHT}" '
        f'rx="{BADGE_HEIGHT // 2}" fill="{fill}" opacity="0.95"/>',
        f'<text x="{x + width // 2}" y="{BADGE_Y + 23}" text-anchor="middle" '
        f'fill="{text_fill}" font-family="{FONT_FAMILY}" font-size="15" '
        f'font-weight="bold" letter-spacing="2">{escape_xml(label)}</text>',
    ]
    return parts, width


def render_badges(parsed: ParsedTitle, event_type: EventType) -> list[str]:
    """Lecture badge (when the title has one) followed by the event-type badge."""
    parts: list[str] = []
    x = LEFT_MARGIN
    if parsed.badge_text:
        badge, width = _badge(
            x, parsed.badge_text, COLORS["yellow"], COLORS["dark_bg"]
        )
        parts.extend(badge)
        x += width + 12
    label, fill, text_fill = EVENT_TYPE_BADGES[event_type]
    badge, _ = _badge(x, label, fill, text_fill)
    parts.extend(badge)
    return parts


def render_title(lines: tuple[str, ...]) -> list[str]:
    return [
        f'<text x="{LEFT_MARGIN}" y="{TITLE_FIRST_BASELINE + index * TITLE_LINE_HEIGHT}" '
        f'fill="{COLORS["light_text"]}" font-family="{FONT_FAMILY}" '
        f'font-size="{TITLE_FONT_SIZE}" font-weight="bold">{escape_xml(line)}</text>'
        for index, line in enumerate(lines)
    ]


def render_tags(tags: tuple[str, ...], line_count: int) -> list[str]:
    """Render up to ``MAX_DISPLAY_TAGS`` pills below the title.

    Colours follow ``TAG_COLOR_CYCLE`` by position. Long tags are truncated,
    and pills that would reach the side panel are dropped.
    """
    y = TITLE_FIRST_BASELINE + max(line_count - 1, 0) * TITLE_LINE_HEIGHT + 36
    x = LEFT_MARGIN
    parts: list[str] = []
    for index, raw_tag in enumerate(tags[:MAX_DISPLAY_TAGS]):
        color = TAG_COLOR_CYCLE[index % len(TAG_COLOR_CYCLE)]
        tag = truncate(raw_tag, TAG_MAX_CHARS)
        width = len(tag) * 9 + 28
        if x + width > PANEL_X - TAG_PANEL_GAP:
            break
        parts.append(
            f'<rect x="{x}" y="{y}" width="{width}" height="{TAG_HEIGHT}" '
            f'rx="{TAG_HEIGHT // 2}" fill="{color}" fill-opacity="0.18" '
            f'stroke="{color}" stroke-width="1.5"/>'
        )
        parts.append(
            f'<text x="{x + width // 2}" y="{y + 21}" text-anchor="middle" '
            f'fill="{color}" font-family="{FONT_FAMILY}" font-size="15" '
            f'font-weight="bold">{escape_xml(tag)}</text>'
        )
        x += width + 10
    return parts


def render_info_bar(event: EventDescriptor) -> list[str]:
    """Bottom bar with date, time and (when known) location."""
    fields = [
        ("DATE", format_event_date(event.date), COLORS["yellow"], LEFT_MARGIN),
        ("TIME", event.time, COLORS["light_text"], 330),
    ]
    place = location_label(event)
    if place:
        fields.append(("WHERE", place, COLORS["light_text"], 600))
    parts = [
        f'<rect x="0" y="{INFO_BAR_Y}" width="{CANVAS_WIDTH}" height="86" '
        f'fill="{COLORS["panel_bar"]}" opacity="0.9"/>'
    ]
    for caption, value, color, x in fields:
        parts.append(
            f'<text x="{x}" y="{INFO_BAR_Y + 28}" fill="{COLORS["muted_text"]}" '
            f'font-family="{FONT_FAMILY}" font-size="11" font-weight="bold" '
            f'letter-spacing="2">{caption}</text>'
        )
        parts.append(
            f'<text x="{x}" y="{INFO_BAR_Y + 58}" fill="{color}" '
            f'font-family="{FONT_FAMILY}" font-size="20">'
            f"{escape_xml(truncate(value))}</text>"
        )
    return parts


def render_svg(event: EventDescriptor, parsed: ParsedTitle, theme: Theme) -> str:
    """Assemble the complete SVG document for one event.

    Parameters
    ----------
    event : EventDescriptor
        The event being rendered.
    parsed : ParsedTitle
        Title lines and badge produced by :func:`parse_title`.
    theme : Theme
        Panel theme produced by :func:`classify_theme`.

    Returns
    -------
    str
        A standalone SVG document.
    """
    body = [
        *render_badges(parsed, event.event_type),
        *render_title(parsed.lines),
        *render_tags(event.tags, len(parsed.lines)),
        *render_info_bar(event),
    ]
    content = "\n  ".join(body)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="{CANVAS_WIDTH}" height="{CANVAS_HEIGHT}" viewBox="0 0 {CANVAS_WIDTH} {CANVAS_HEIGHT}">
  <defs>
    <linearGradient id="bg" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" style="stop-color:{COLORS['dark_bg']};stop-opacity:1" />
      <stop offset="100%" style="stop-color:{COLORS['dark_bg_alt']};stop-opacity:1" />
    </linearGradient>
    <linearGradient id="accent" x1="0%" y1="0%" x2="100%" y2="0%">
      <stop offset="0%" style="stop-color:{COLORS['yellow']};stop-opacity:1" />
      <stop offset="100%" style="stop-color:{COLORS['blue']};stop-opacity:1" />
    </linearGradient>
  </defs>
  <rect width="{CANVAS_WIDTH}" height="{CANVAS_HEIGHT}" fill="url(#bg)"/>
  <circle cx="100" cy="560" r="60" fill="{COLORS['blue']}" opacity="0.12"/>
  <circle cx="1200" cy="640" r="80" fill="{COLORS['yellow']}" opacity="0.08"/>
  <circle cx="700" cy="60" r="35" fill="{COLORS['green']}" opacity="0.12"/>
  <rect x="0" y="0" width="{CANVAS_WIDTH}" height="6" fill="url(#accent)"/>
  <text x="{LEFT_MARGIN}" y="72" fill="{COLORS['yellow']}" font-family="{FONT_FAMILY}" font-size="28" font-weight="bold" letter-spacing="8">{BRAND_NAME}</text>
  <text x="{LEFT_MARGIN}" y="100" fill="{COLORS['light_text']}" font-family="{FONT_FAMILY}" font-size="15" opacity="0.7">{escape_xml(BRAND_TAGLINE)}</text>
  {content}
  {render_panel(theme)}
  <rect x="0" y="{CANVAS_HEIGHT - 6}" width="{CANVAS_WIDTH}" height="6" fill="url(#accent)"/>
</svg>
"""


def render_local_thumbnail(event: EventDescriptor) -> tuple[str, Theme]:
    """Classify, lay out and render an event; return the SVG and its theme."""
    theme = classify_theme(event.title, event.tags)
    parsed = parse_title(event.title)
    return render_svg(event, parsed, theme), theme
