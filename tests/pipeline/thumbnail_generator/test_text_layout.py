"""Tests for lecture prefix extraction and title wrapping."""

import pytest

from simg_tools.pipeline.thumbnail_generator.text_layout import (
    extract_lecture_prefix,
    parse_title,
    wrap_title,
    wrap_words,
)


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Lecture 5 - GPU Memory Coalescing", ("LECTURE", 5, "GPU Memory Coalescing")),
        ("lecture 12: Warps", ("LECTURE", 12, "Warps")),
        ("Sesión 3 — Modelos de Difusión", ("SESIÓN", 3, "Modelos de Difusión")),
        ("Sesion 4 | Atención", ("SESION", 4, "Atención")),
        ("  Lecture 7 Profiling", ("LECTURE", 7, "Profiling")),
        ("Guest Lecture 2", (None, None, "Guest Lecture 2")),
        ("Lectures on GPUs", (None, None, "Lectures on GPUs")),
        ("Lecture 5th Anniversary", (None, None, "Lecture 5th Anniversary")),
        ("Sesión 2b: Repaso", (None, None, "Sesión 2b: Repaso")),
        ("Lecture 9", ("LECTURE", 9, "")),
    ],
)
def test_extract_lecture_prefix(title, expected):
    assert extract_lecture_prefix(title) == expected


def test_wrap_words_respects_line_width():
    text = "Efficient Attention Mechanisms for Long Context Medical Report Generation"
    lines = wrap_words(text)
    assert 1 <= len(lines) <= 3
    assert all(len(line) <= 32 for line in lines)


def test_wrap_words_never_splits_words():
    word = "Electroencephalographically-Informed"
    lines = wrap_words(f"{word} Networks")
    assert lines == [word, "Networks"]
    assert len(lines[0]) > 32


def test_wrap_words_truncates_to_three_lines():
    text = " ".join(["token"] * 40)
    lines = wrap_words(text)
    assert len(lines) == 3
    assert all(set(line.split()) == {"token"} for line in lines)


def test_wrap_words_is_greedy():
    assert wrap_words("aaaa bbbb cccc dddd", max_chars=9) == ["aaaa bbbb", "cccc dddd"]


def test_wrap_words_empty():
    assert wrap_words("   ") == []


def test_wrap_title_splits_once_on_separator():
    assert wrap_title("Attention - Why It Works - Part 2") == [
        "Attention",
        "Why It Works - Part 2",
    ]


def test_wrap_title_separator_still_capped():
    lines = wrap_title("A - " + " ".join(["word"] * 30))
    assert len(lines) == 3 and lines[0] == "A"


def test_parse_title_with_badge():
    parsed = parse_title("Lecture 5 - GPU Memory Coalescing")
    assert parsed.badge_text == "LECTURE 5"
    assert parsed.lines == ("GPU Memory Coalescing",)


def test_parse_title_without_prefix():
    parsed = parse_title("Diffusion Models for Medical Imaging")
    assert parsed.badge_text is None
    assert parsed.lines == ("Diffusion Models for Medical", "Imaging")


def test_parse_title_prefix_only_keeps_full_title():
    parsed = parse_title("Lecture 9")
    assert parsed.badge_text == "LECTURE 9"
    assert parsed.lines == ("Lecture 9",)


def test_parse_title_ordinal_is_not_a_lecture_number():
    parsed = parse_title("Lecture 5th Anniversary Celebration")
    assert parsed.badge_text is None
    assert parsed.lines == ("Lecture 5th Anniversary", "Celebration")


def test_parse_title_is_deterministic():
    title = "Sesión 2 - Introducción a CUDA y Programación Paralela en GPUs"
    assert parse_title(title) == parse_title(title)


@pytest.mark.parametrize("number", [1, 7, 42, 305])
@pytest.mark.parametrize(
    "a, b",
    [
        ("Warps", "Divergence"),
        ("Shared Memory Bank Conflicts Explained", "Tiling Strategies for Matrix Multiply"),
        ("Lecture Notes", "Review"),
    ],
)
def test_lecture_titles_never_repeat_prefix(number, a, b):
    parsed = parse_title(f"Lecture {number} - {a} - {b}")
    assert parsed.lecture_number == number
    assert 1 <= len(parsed.lines) <= 3
    assert not any(f"Lecture {number}" in line for line in parsed.lines)
