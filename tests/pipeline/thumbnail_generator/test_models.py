"""Tests for the thumbnail value types."""

from datetime import date

import pytest

from simg_tools.exceptions import DataValidationError
from simg_tools.pipeline.thumbnail_generator.models import (
    EventDescriptor,
    EventType,
    ParsedTitle,
    ThumbnailDocument,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("in-person", EventType.IN_PERSON),
        ("Virtual", EventType.VIRTUAL),
        (" hybrid ", EventType.HYBRID),
        ("", EventType.IN_PERSON),
        (None, EventType.IN_PERSON),
    ],
)
def test_event_type_parse(raw, expected):
    assert EventType.parse(raw) is expected


def test_event_type_parse_unknown_warns(caplog):
    with caplog.at_level("WARNING"):
        assert EventType.parse("webinar") is EventType.IN_PERSON
    assert "webinar" in caplog.text


def test_from_frontmatter_full_record():
    event = EventDescriptor.from_frontmatter(
        {
            "title": "Lecture 5 - GPU Memory Coalescing",
            "date": "2026-02-27",
            "eventType": "virtual",
            "tags": '["CUDA", "Performance"]',
            "meetingLink": "https://meet.example.org/abc",
            "time": "3:00 PM – 5:00 PM",
            "location": "Lab 3",
        }
    )
    assert event.title == "Lecture 5 - GPU Memory Coalescing"
    assert event.event_type is EventType.VIRTUAL
    assert event.tags == ("CUDA", "Performance")
    assert event.meeting_link == "https://meet.example.org/abc"
    assert event.time == "3:00 PM – 5:00 PM"
    assert event.location == "Lab 3"
    assert event.slug == "lecture-5-gpu-memory-coalescing"


def test_from_frontmatter_defaults():
    event = EventDescriptor.from_frontmatter(
        {"title": "Reading Group", "meetingLink": ""}, today=date(2026, 3, 6)
    )
    assert event.date == "2026-03-06"
    assert event.event_type is EventType.IN_PERSON
    assert event.time == "2:00 PM – 4:00 PM"
    assert event.tags == ()
    assert event.meeting_link is None and event.location is None


@pytest.mark.parametrize("record", [{}, {"title": "   "}, {"date": "2026-01-01"}])
def test_from_frontmatter_requires_title(record):
    with pytest.raises(DataValidationError):
        EventDescriptor.from_frontmatter(record)


def test_descriptor_is_immutable():
    event = EventDescriptor("T", EventType.HYBRID, "2026-01-01")
    with pytest.raises(AttributeError):
        event.title = "changed"  # type: ignore[misc]


def test_parsed_title_badge_text():
    assert ParsedTitle(("GPU",), "LECTURE", 5).badge_text == "LECTURE 5"
    assert ParsedTitle(("GPU",)).badge_text is None


def test_thumbnail_document_is_binary():
    assert ThumbnailDocument(b"png", "png", "remote").is_binary is True
    assert ThumbnailDocument("<svg/>", "svg", "local").is_binary is False
