"""Value types for thumbnail generation.

Frontmatter values arrive as untyped text. They are converted into the strict
types below at a single boundary, :meth:`EventDescriptor.from_frontmatter`,
so the rest of the pipeline only ever sees closed enums and tuples.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Mapping

from simg_tools.config import DEFAULT_EVENT_TIME, DEFAULT_EVENT_TYPE
from simg_tools.exceptions import DataValidationError
from simg_tools.pipeline.frontmatter import parse_list_value

from .file_sink import slugify

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    """How attendees join an event."""

    IN_PERSON = "in-person"
    VIRTUAL = "virtual"
    HYBRID = "hybrid"

    @classmethod
    def parse(cls, raw: str | None) -> EventType:
        """Parse frontmatter or CLI text, defaulting unknown values to in-person.

        Examples
        --------
        >>> EventType.parse(" Virtual ")
        <EventType.VIRTUAL: 'virtual'>
        >>> EventType.parse("webinar")
        <EventType.IN_PERSON: 'in-person'>
        """
        value = (raw or "").strip().lower()
        for member in cls:
            if member.value == value:
                return member
        if value:
            logger.warning(f"Unknown event type {raw!r}, using in-person.")
        return cls(DEFAULT_EVENT_TYPE)


class Theme(str, Enum):
    """Visual style bucket for the decorative side panel."""

    CUDA = "cuda"
    PYTHON = "python"
    NEURAL = "neural"
    GPU = "gpu"
    DEFAULT = "simg-default"


@dataclass(frozen=True)
class EventDescriptor:
    """Everything a single thumbnail render needs to know about an event."""

    title: str
    event_type: EventType
    date: str
    time: str = DEFAULT_EVENT_TIME
    tags: tuple[str, ...] = ()
    meeting_link: str | None = None
    location: str | None = None

    @property
    def slug(self) -> str:
        """Filesystem-safe identifier derived from the title."""
        return slugify(self.title)

    @classmethod
    def from_frontmatter(
        cls, frontmatter: Mapping[str, str], today: date | None = None
    ) -> EventDescriptor:
        """Build a descriptor from a parsed frontmatter mapping.

        Parameters
        ----------
        frontmatter : Mapping[str, str]
            Output of :func:`simg_tools.pipeline.frontmatter.parse_frontmatter`.
        today : date | None, optional
            Date used when the record has no ``date``; defaults to the
            current local date.

        Returns
        -------
        EventDescriptor
            The validated event.

        Raises
        ------
        DataValidationError
            If the record has no usable title.
        """
        title = (frontmatter.get("title") or "").strip()
        if not title:
            raise DataValidationError(
                "Event frontmatter has no title",
                context={"keys": sorted(frontmatter)},
            )
        event_date = (frontmatter.get("date") or "").strip()
        if not event_date:
            event_date = (today or date.today()).isoformat()
        return cls(
            title=title,
            event_type=EventType.parse(frontmatter.get("eventType")),
            date=event_date,
            time=(frontmatter.get("time") or "").strip() or DEFAULT_EVENT_TIME,
            tags=tuple(parse_list_value(frontmatter.get("tags"))),
            meeting_link=(frontmatter.get("meetingLink") or "").strip() or None,
            location=(frontmatter.get("location") or "").strip() or None,
        )


@dataclass(frozen=True)
class ParsedTitle:
    """A title split into an optional lecture badge and 1-3 display lines."""

    lines: tuple[str, ...]
    lecture_label: str | None = None
    lecture_number: int | None = None

    @property
    def badge_text(self) -> str | None:
        """Return e.g. ``"LECTURE 5"``, or None when the title has no prefix."""
        if self.lecture_number is None:
            return None
        return f"{self.lecture_label} {self.lecture_number}"


@dataclass(frozen=True)
class ThumbnailDocument:
    """A rendered thumbnail: PNG bytes from the remote service or SVG text.

    ``theme`` is set for locally rendered cards only.
    """

    content: bytes | str
    extension: str
    source: str
    theme: Theme | None = None

    @property
    def is_binary(self) -> bool:
        return isinstance(self.content, bytes)


@dataclass(frozen=True)
class ComposeResult:
    """Outcome of composing one event's thumbnail."""

    status: str
    path: Path
    extension: str
    theme: Theme | None = None
