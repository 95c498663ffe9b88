"""Tests for the themed side panels."""

import re

import pytest

from simg_tools.pipeline.thumbnail_generator.models import Theme
from simg_tools.pipeline.thumbnail_generator.panels import (
    NEURAL_LAYER_SIZES,
    compute_neural_layout,
    render_neural_panel,
    render_panel,
)


@pytest.mark.parametrize("theme", list(Theme))
def test_every_theme_renders_positioned_group(theme):
    fragment = render_panel(theme)
    assert fragment.startswith(f'<g class="panel panel-{theme.value}" ')
    assert 'transform="translate(780,100)"' in fragment
    assert fragment.rstrip().endswith("</g>")
    assert 'width="450" height="500"' in fragment


def test_panels_are_distinct():
    fragments = {render_panel(theme) for theme in Theme}
    assert len(fragments) == len(Theme)


def test_panels_are_deterministic():
    for theme in Theme:
        assert render_panel(theme) == render_panel(theme)


def test_compute_neural_layout_geometry():
    layout = compute_neural_layout()
    assert [len(layer) for layer in layout] == list(NEURAL_LAYER_SIZES)
    xs = [layer[0][0] for layer in layout]
    assert xs[0] == 70 and xs[-1] == pytest.approx(380)
    steps = [round(b - a, 6) for a, b in zip(xs, xs[1:])]
    assert len(set(steps)) == 1
    for layer in layout:
        ys = [y for _, y in layer]
        assert sum(ys) / len(ys) == pytest.approx(270)
        assert all(round(b - a, 6) == 64 for a, b in zip(ys, ys[1:]))


def test_neural_panel_draws_full_bipartite_edges_before_nodes():
    parts = render_neural_panel()
    markup = "\n".join(parts)
    expected_edges = sum(a * b for a, b in zip(NEURAL_LAYER_SIZES, NEURAL_LAYER_SIZES[1:]))
    assert expected_edges == 50
    assert markup.count("<line ") == expected_edges
    assert markup.count("<circle ") == sum(NEURAL_LAYER_SIZES)
    last_line = max(i for i, part in enumerate(parts) if part.startswith("<line"))
    first_circle = min(i for i, part in enumerate(parts) if part.startswith("<circle"))
    assert last_line < first_circle
    assert 'opacity="0.25"' in markup


def test_panel_coordinates_have_at_most_one_decimal():
    fragment = render_panel(Theme.NEURAL)
    for number in re.findall(r'(?:x1|y1|x2|y2|cx|cy)="([^"]+)"', fragment):
        assert re.fullmatch(r"-?\d+(\.\d)?", number)
