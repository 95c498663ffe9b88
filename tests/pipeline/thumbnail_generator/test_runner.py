"""Tests for the programmatic batch and single-event entrypoints."""

import io
from datetime import date
from pathlib import Path

from rich.console import Console

from simg_tools.pipeline.thumbnail_generator.models import EventDescriptor, EventType
from simg_tools.pipeline.thumbnail_generator.runner import (
    load_event_descriptors,
    print_summary,
    run_batch,
    run_single,
)


def write_event(directory: Path, name: str, body: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(body, encoding="utf-8")
    return path


def populate(events_dir: Path) -> None:
    write_event(
        events_dir / "en",
        "gpu.md",
        '---\ntitle: "Lecture 5 - GPU Memory Coalescing"\ndate: 2026-02-27\n'
        'tags: ["CUDA", "Performance"]\n---\nBody\n',
    )
    write_event(events_dir / "en", "no-frontmatter.md", "# Just notes\n")
    write_event(events_dir / "en", "no-title.md", "---\ndate: 2026-01-01\n---\n")
    write_event(
        events_dir / "es",
        "difusion.md",
        "---\ntitle: Sesión 2 - Modelos de Difusión\neventType: hybrid\n---\n",
    )


def test_load_event_descriptors_skips_invalid_files(tmp_path: Path, caplog):
    populate(tmp_path)
    with caplog.at_level("WARNING"):
        events = load_event_descriptors([tmp_path / "en"], today=date(2026, 1, 2))
    assert [e.title for e in events] == ["Lecture 5 - GPU Memory Coalescing"]
    assert "no-frontmatter.md" in caplog.text
    assert "no-title.md" in caplog.text


def test_load_event_descriptors_multiple_dirs_in_order(tmp_path: Path):
    populate(tmp_path)
    events = load_event_descriptors(
        [tmp_path / "en", tmp_path / "es"], today=date(2026, 1, 2)
    )
    assert [e.event_type for e in events] == [EventType.IN_PERSON, EventType.HYBRID]
    assert events[1].date == "2026-01-02"


def test_load_event_descriptors_missing_dir(tmp_path: Path, caplog):
    with caplog.at_level("WARNING"):
        assert load_event_descriptors([tmp_path / "missing"]) == []
    assert "No markdown files" in caplog.text


def test_run_batch_writes_svgs(tmp_path: Path):
    populate(tmp_path)
    out = tmp_path / "out"
    stats = run_batch([tmp_path / "en", tmp_path / "es"], out)
    assert stats == {
        "total_events": 2,
        "skipped_existing_png": 0,
        "written_png": 0,
        "written_svg": 2,
        "failed": 0,
    }
    assert sorted(p.name for p in out.iterdir()) == [
        "lecture-5-gpu-memory-coalescing.svg",
        "sesi-n-2-modelos-de-difusi-n.svg",
    ]


def test_run_single(tmp_path: Path):
    event = EventDescriptor("Intro to NumPy", EventType.VIRTUAL, "2026-04-10")
    result = run_single(event, tmp_path)
    assert result.status == "written"
    assert result.path == tmp_path / "intro-to-numpy.svg"
    assert 'class="panel panel-python"' in result.path.read_text(encoding="utf-8")


def test_print_summary_renders_table():
    buffer = io.StringIO()
    stats = {
        "total_events": 4,
        "skipped_existing_png": 1,
        "written_png": 0,
        "written_svg": 2,
        "failed": 1,
    }
    print_summary(stats, Console(file=buffer, width=100, color_system=None))
    output = buffer.getvalue()
    assert "Thumbnail generation" in output
    assert "Written SVG (local)" in output
    assert "Skipped (PNG exists)" in output
