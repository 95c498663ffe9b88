"""Tests for the file-system sink."""

from pathlib import Path

import pytest

from simg_tools.exceptions import OutputWriteError
from simg_tools.pipeline.thumbnail_generator.file_sink import (
    pinned_png_path,
    slugify,
    target_path,
    write_document,
)
from simg_tools.pipeline.thumbnail_generator.models import ThumbnailDocument


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Lecture 5 - GPU Memory Coalescing", "lecture-5-gpu-memory-coalescing"),
        ("Diffusion Models for Medical Imaging", "diffusion-models-for-medical-imaging"),
        ("  --Hello,   World!--  ", "hello-world"),
        ("¿Qué?", "qu"),
        ("!!!", "untitled-event"),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_target_path(tmp_path: Path):
    assert target_path(tmp_path, "gpu-day", "svg") == tmp_path / "gpu-day.svg"


def test_pinned_png_path(tmp_path: Path):
    assert pinned_png_path(tmp_path, "gpu-day") is None
    (tmp_path / "gpu-day.svg").write_text("<svg/>", encoding="utf-8")
    assert pinned_png_path(tmp_path, "gpu-day") is None
    (tmp_path / "gpu-day.png").write_bytes(b"png")
    assert pinned_png_path(tmp_path, "gpu-day") == tmp_path / "gpu-day.png"


def test_write_document_text_creates_parents(tmp_path: Path):
    path = tmp_path / "public" / "images" / "events" / "a.svg"
    written = write_document(ThumbnailDocument("<svg>é</svg>", "svg", "local"), path)
    assert written == path
    assert path.read_text(encoding="utf-8") == "<svg>é</svg>"


def test_write_document_bytes(tmp_path: Path):
    path = tmp_path / "a.png"
    write_document(ThumbnailDocument(b"\x89PNG", "png", "remote"), path)
    assert path.read_bytes() == b"\x89PNG"


def test_write_document_mode_follows_is_binary(tmp_path: Path):
    png = ThumbnailDocument(b"\x00\xff", "png", "remote")
    svg = ThumbnailDocument("<svg>ñ</svg>", "svg", "local")
    assert png.is_binary and not svg.is_binary
    write_document(png, tmp_path / "a.png")
    write_document(svg, tmp_path / "a.svg")
    assert (tmp_path / "a.png").read_bytes() == b"\x00\xff"
    assert (tmp_path / "a.svg").read_bytes() == "<svg>ñ</svg>".encode("utf-8")


def test_write_document_failure_raises_output_write_error(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")
    with pytest.raises(OutputWriteError) as excinfo:
        write_document(ThumbnailDocument("<svg/>", "svg", "local"), blocker / "a.svg")
    assert excinfo.value.code == "OUTPUT_WRITE_ERROR"
    assert excinfo.value.context["path"].endswith("a.svg")
