"""Tests for event file discovery helpers."""

from pathlib import Path

import pytest

from simg_tools.config import EVENTS_CONTENT_DIR
from simg_tools.pipeline.frontmatter import find_markdown_files, resolve_language_dirs


def test_find_markdown_files_sorted_and_filtered(tmp_path: Path):
    (tmp_path / "b.md").write_text("x", encoding="utf-8")
    (tmp_path / "a.md").write_text("x", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "c.md").write_text("x", encoding="utf-8")
    assert [p.name for p in find_markdown_files(tmp_path)] == ["a.md", "b.md"]


def test_find_markdown_files_missing_dir(tmp_path: Path):
    assert find_markdown_files(tmp_path / "nope") == []


def test_resolve_language_dirs_single(tmp_path: Path):
    assert resolve_language_dirs("es", tmp_path) == [tmp_path / "es"]


def test_resolve_language_dirs_both_in_order(tmp_path: Path):
    assert resolve_language_dirs("both", tmp_path) == [tmp_path / "en", tmp_path / "es"]


def test_resolve_language_dirs_defaults_to_content_root():
    assert resolve_language_dirs("en") == [EVENTS_CONTENT_DIR / "en"]


def test_resolve_language_dirs_rejects_unknown(tmp_path: Path):
    with pytest.raises(ValueError):
        resolve_language_dirs("fr", tmp_path)
