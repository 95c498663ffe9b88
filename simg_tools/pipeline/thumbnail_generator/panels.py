"""Decorative side panels for local thumbnails.

Each theme gets a fixed mock-up drawn inside a 450x500 "window" on the right
side of the card: a profiler timeline for CUDA, a memory-hierarchy dashboard
for GPU architecture, a console transcript for Python, a layered network
graph for neural models and a lab status board otherwise. Only the neural
graph computes geometry; everything else reproduces fixed design constants.

All functions return SVG markup fragments as strings and are deterministic.
"""

import html
import re

from simg_tools.config import (
    COLORS,
    FONT_FAMILY,
    MONO_FONT_FAMILY,
    PANEL_HEIGHT,
    PANEL_WIDTH,
    PANEL_X,
    PANEL_Y,
)

from .models import Theme

# CUDA profiler: (start, width, colour) spans per SM lane
CUDA_TIMELINE_SPANS: tuple[tuple[tuple[int, int, str], ...], ...] = (
    ((0, 96, "yellow"), (112, 64, "blue"), (190, 140, "green")),
    ((20, 150, "blue"), (184, 84, "yellow"), (282, 60, "coral")),
    ((0, 60, "green"), (76, 120, "yellow"), (210, 112, "blue")),
    ((40, 80, "coral"), (136, 170, "green")),
)
CUDA_OCCUPANCY: tuple[float, ...] = (0.92, 0.78, 0.85, 0.64)
CUDA_METRICS: tuple[tuple[str, str], ...] = (
    ("87%", "OCCUPANCY"),
    ("1.24 ms", "KERNEL"),
    ("412 GB/s", "DRAM"),
)

# GPU memory hierarchy: (tier, relative bandwidth, colour, label)
GPU_SM_COLUMNS: int = 8
GPU_SM_ROWS: int = 3
GPU_MEMORY_TIERS: tuple[tuple[str, float, str, str], ...] = (
    ("Registers", 1.0, "yellow", "~20 TB/s"),
    ("L1 / Shared", 0.8, "green", "~12 TB/s"),
    ("L2 Cache", 0.55, "blue", "~5 TB/s"),
    ("HBM", 0.3, "coral", "~2 TB/s"),
)

# Python console transcript
PYTHON_TRANSCRIPT: tuple[str, ...] = (
    ">>> import numpy as np",
    ">>> x = np.linspace(0, 1, 5)",
    ">>> x.mean()",
    "0.5",
    ">>> from numba import cuda",
    ">>> cuda.is_available()",
    "True",
    ">>> def saxpy(a, x, y):",
    "...     return a * x + y",
    ">>> saxpy(2.0, x, x)[:3]",
    "array([0.  , 0.75, 1.5 ])",
    ">>> ",
)
PYTHON_KEYWORDS: frozenset[str] = frozenset(
    {"import", "as", "from", "def", "return", "True", "False", "None"}
)
PYTHON_LINE_HEIGHT: int = 30

# Neural graph geometry
NEURAL_LAYER_SIZES: tuple[int, ...] = (3, 5, 5, 2)
NEURAL_LAYER_LABELS: tuple[str, ...] = ("input", "hidden", "hidden", "output")
NEURAL_LAYER_COLORS: tuple[str, ...] = ("yellow", "blue", "blue", "green")
NEURAL_MARGIN_X: int = 70
NEURAL_CENTER_Y: int = 270
NEURAL_NODE_SPACING: int = 64
NEURAL_NODE_RADIUS: int = 16
NEURAL_EDGE_OPACITY: float = 0.25

# Default lab dashboard: (task, progress, colour)
LAB_PROGRESS: tuple[tuple[str, float, str], ...] = (
    ("Literature review", 0.9, "green"),
    ("Dataset curation", 0.7, "blue"),
    ("Model training", 0.55, "yellow"),
    ("Evaluation", 0.35, "coral"),
    ("Paper draft", 0.2, "blue"),
)

PANEL_CAPTIONS: dict[Theme, str] = {
    Theme.CUDA: "nsight · kernel timeline",
    Theme.GPU: "memory hierarchy · bandwidth",
    Theme.PYTHON: "python3 · interactive console",
    Theme.NEURAL: "model graph · 3-5-5-2",
    Theme.DEFAULT: "simg lab · status",
}
PANEL_ACCENTS: dict[Theme, str] = {
    Theme.CUDA: COLORS["green"],
    Theme.GPU: COLORS["blue"],
    Theme.PYTHON: COLORS["yellow"],
    Theme.NEURAL: COLORS["blue"],
    Theme.DEFAULT: COLORS["yellow"],
}


def _num(value: float) -> str:
    """Format a coordinate with at most one decimal place.

    Examples
    --------
    >>> _num(173.33333), _num(270.0), _num(-0.0)
    ('173.3', '270', '0')
    """
    text = f"{value:.1f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _section_label(text: str, y: int) -> str:
    return (
        f'<text x="24" y="{y}" fill="{COLORS["muted_text"]}" '
        f'font-family="{FONT_FAMILY}" font-size="12" font-weight="bold" '
        f'letter-spacing="2">{html.escape(text)}</text>'
    )


def _bar(x: int, y: int, width: int, height: int, fraction: float, color: str) -> list[str]:
    """Return a track rect and a filled rect covering ``fraction`` of it."""
    radius = height // 2
    return [
        f'<rect x="{x}" y="{y}" width="{width}" height="{height}" rx="{radius}" '
        f'fill="{COLORS["panel_bar"]}"/>',
        f'<rect x="{x}" y="{y}" width="{round(width * fraction)}" height="{height}" '
        f'rx="{radius}" fill="{color}" opacity="0.9"/>',
    ]


def panel_frame(caption: str, accent: str) -> list[str]:
    """Window chrome shared by every panel: body, title bar, dots and caption."""
    return [
        f'<rect x="0" y="0" width="{PANEL_WIDTH}" height="{PANEL_HEIGHT}" rx="16" '
        f'fill="{COLORS["panel_bg"]}" stroke="{accent}" stroke-opacity="0.6" '
        'stroke-width="2"/>',
        f'<rect x="0" y="0" width="{PANEL_WIDTH}" height="40" rx="16" '
        f'fill="{COLORS["panel_bar"]}"/>',
        f'<rect x="0" y="24" width="{PANEL_WIDTH}" height="16" '
        f'fill="{COLORS["panel_bar"]}"/>',
        f'<circle cx="24" cy="20" r="6" fill="{COLORS["coral"]}"/>',
        f'<circle cx="44" cy="20" r="6" fill="{COLORS["yellow"]}"/>',
        f'<circle cx="64" cy="20" r="6" fill="{COLORS["green"]}"/>',
        f'<text x="{PANEL_WIDTH // 2}" y="25" text-anchor="middle" '
        f'fill="{COLORS["muted_text"]}" font-family="{MONO_FONT_FAMILY}" '
        f'font-size="13">{html.escape(caption)}</text>',
    ]


def render_cuda_panel() -> list[str]:
    """Profiler-style dashboard: kernel timeline, occupancy bars and metrics."""
    parts = [_section_label("KERNEL TIMELINE", 72)]
    for lane, spans in enumerate(CUDA_TIMELINE_SPANS):
        y = 86 + lane * 36
        parts.append(
            f'<text x="24" y="{y + 17}" fill="{COLORS["light_text"]}" '
            f'font-family="{MONO_FONT_FAMILY}" font-size="13">SM{lane}</text>'
        )
        parts.append(
            f'<rect x="70" y="{y}" width="356" height="24" rx="4" '
            f'fill="{COLORS["panel_bar"]}"/>'
        )
        for start, width, color in spans:
            parts.append(
                f'<rect x="{70 + start}" y="{y + 3}" width="{width}" height="18" '
                f'rx="3" fill="{COLORS[color]}" opacity="0.85"/>'
            )
    parts.append(_section_label("OCCUPANCY", 250))
    for index, fraction in enumerate(CUDA_OCCUPANCY):
        y = 264 + index * 30
        parts.append(
            f'<text x="24" y="{y + 13}" fill="{COLORS["light_text"]}" '
            f'font-family="{MONO_FONT_FAMILY}" font-size="13">SM{index}</text>'
        )
        parts.extend(_bar(70, y, 300, 16, fraction, COLORS["green"]))
        parts.append(
            f'<text x="426" y="{y + 13}" text-anchor="end" '
            f'fill="{COLORS["light_text"]}" font-family="{MONO_FONT_FAMILY}" '
            f'font-size="13">{round(fraction * 100)}%</text>'
        )
    for index, (value, label) in enumerate(CUDA_METRICS):
        x = 24 + index * 142
        parts.append(
            f'<rect x="{x}" y="400" width="118" height="72" rx="10" '
            f'fill="{COLORS["panel_bar"]}" stroke="{COLORS["green"]}" '
            'stroke-opacity="0.4"/>'
        )
        parts.append(
            f'<text x="{x + 59}" y="436" text-anchor="middle" '
            f'fill="{COLORS["yellow"]}" font-family="{FONT_FAMILY}" '
            f'font-size="20" font-weight="bold">{html.escape(value)}</text>'
        )
        parts.append(
            f'<text x="{x + 59}" y="458" text-anchor="middle" '
            f'fill="{COLORS["muted_text"]}" font-family="{FONT_FAMILY}" '
            f'font-size="11" letter-spacing="1">{label}</text>'
        )
    return parts


def render_gpu_panel() -> list[str]:
    """Hardware dashboard: SM grid and memory tiers with bandwidth bars."""
    parts = [_section_label("STREAMING MULTIPROCESSORS", 72)]
    for row in range(GPU_SM_ROWS):
        for column in range(GPU_SM_COLUMNS):
            opacity = 0.35 + 0.15 * ((row * GPU_SM_COLUMNS + column) % 4)
            parts.append(
                f'<rect x="{24 + column * 51}" y="{86 + row * 34}" width="42" '
                f'height="26" rx="4" fill="{COLORS["blue"]}" '
                f'opacity="{opacity:.2f}"/>'
            )
    parts.append(_section_label("MEMORY TIERS", 210))
    for index, (tier, fraction, color, bandwidth) in enumerate(GPU_MEMORY_TIERS):
        y = 226 + index * 56
        parts.append(
            f'<text x="24" y="{y + 16}" fill="{COLORS["light_text"]}" '
            f'font-family="{FONT_FAMILY}" font-size="15">{html.escape(tier)}</text>'
        )
        parts.extend(_bar(24, y + 24, 300, 18, fraction, COLORS[color]))
        parts.append(
            f'<text x="426" y="{y + 38}" text-anchor="end" '
            f'fill="{COLORS["muted_text"]}" font-family="{MONO_FONT_FAMILY}" '
            f'font-size="13">{html.escape(bandwidth)}</text>'
        )
    parts.append(
        f'<text x="24" y="470" fill="{COLORS["muted_text"]}" '
        f'font-family="{MONO_FONT_FAMILY}" font-size="13">'
        "coalesced loads = fewer transactions</text>"
    )
    return parts


def _python_line_spans(line: str) -> str:
    """Colour one transcript line as ``<tspan>`` runs."""
    if line.startswith(">>>") or line.startswith("..."):
        prompt, code = line[:3], line[3:]
        spans = [f'<tspan fill="{COLORS["green"]}">{html.escape(prompt)}</tspan>']
        for token in re.findall(r"\w+|\s+|[^\w\s]+", code):
            if token in PYTHON_KEYWORDS:
                color = COLORS["coral"]
            elif re.fullmatch(r"\d+(?:\.\d+)?", token):
                color = COLORS["yellow"]
            else:
                color = COLORS["light_text"]
            spans.append(f'<tspan fill="{color}">{html.escape(token)}</tspan>')
        return "".join(spans)
    return f'<tspan fill="{COLORS["muted_text"]}">{html.escape(line)}</tspan>'


def render_python_panel() -> list[str]:
    """Console transcript with prompt, keyword and number highlighting."""
    parts = []
    for index, line in enumerate(PYTHON_TRANSCRIPT):
        y = 80 + index * PYTHON_LINE_HEIGHT
        parts.append(
            f'<text x="24" y="{y}" xml:space="preserve" '
            f'font-family="{MONO_FONT_FAMILY}" font-size="16">'
            f"{_python_line_spans(line)}</text>"
        )
    cursor_y = 80 + (len(PYTHON_TRANSCRIPT) - 1) * PYTHON_LINE_HEIGHT
    parts.append(
        f'<rect x="64" y="{cursor_y - 15}" width="10" height="19" '
        f'fill="{COLORS["light_text"]}" opacity="0.8"/>'
    )
    return parts


def compute_neural_layout(
    layer_sizes: tuple[int, ...] = NEURAL_LAYER_SIZES,
    width: int = PANEL_WIDTH,
    margin_x: int = NEURAL_MARGIN_X,
    center_y: int = NEURAL_CENTER_Y,
    spacing: int = NEURAL_NODE_SPACING,
) -> list[list[tuple[float, float]]]:
    """Return node centres per layer for the network diagram.

    Layers are spread evenly between the horizontal margins; the nodes of
    each layer are spread evenly around ``center_y``.

    Examples
    --------
    >>> compute_neural_layout((1, 2), width=200, margin_x=50)
    [[(50.0, 270.0)], [(150.0, 238.0), (150.0, 302.0)]]
    """
    step = (width - 2 * margin_x) / max(len(layer_sizes) - 1, 1)
    layout: list[list[tuple[float, float]]] = []
    for layer_index, count in enumerate(layer_sizes):
        x = margin_x + layer_index * step
        layout.append(
            [
                (float(x), center_y + (node - (count - 1) / 2) * spacing)
                for node in range(count)
            ]
        )
    return layout


def render_neural_panel() -> list[str]:
    """Layered graph with every node connected to every node of the next layer."""
    layout = compute_neural_layout()
    parts = []
    for left, right in zip(layout, layout[1:]):
        for x1, y1 in left:
            for x2, y2 in right:
                parts.append(
                    f'<line x1="{_num(x1)}" y1="{_num(y1)}" x2="{_num(x2)}" '
                    f'y2="{_num(y2)}" stroke="{COLORS["light_text"]}" '
                    f'stroke-width="1.5" opacity="{NEURAL_EDGE_OPACITY}"/>'
                )
    for layer_index, nodes in enumerate(layout):
        color = COLORS[NEURAL_LAYER_COLORS[layer_index % len(NEURAL_LAYER_COLORS)]]
        for x, y in nodes:
            parts.append(
                f'<circle cx="{_num(x)}" cy="{_num(y)}" r="{NEURAL_NODE_RADIUS}" '
                f'fill="{color}" stroke="{COLORS["dark_bg"]}" stroke-width="3"/>'
            )
        label = NEURAL_LAYER_LABELS[layer_index % len(NEURAL_LAYER_LABELS)]
        parts.append(
            f'<text x="{_num(nodes[0][0])}" y="462" text-anchor="middle" '
            f'fill="{COLORS["muted_text"]}" font-family="{MONO_FONT_FAMILY}" '
            f'font-size="13">{label}</text>'
        )
    return parts


def render_default_panel() -> list[str]:
    """Lab dashboard with labelled progress bars."""
    parts = [_section_label("RESEARCH PIPELINE", 76)]
    for index, (task, fraction, color) in enumerate(LAB_PROGRESS):
        y = 100 + index * 64
        parts.append(
            f'<text x="24" y="{y + 14}" fill="{COLORS["light_text"]}" '
            f'font-family="{FONT_FAMILY}" font-size="15">{html.escape(task)}</text>'
        )
        parts.append(
            f'<text x="426" y="{y + 14}" text-anchor="end" '
            f'fill="{COLORS["muted_text"]}" font-family="{MONO_FONT_FAMILY}" '
            f'font-size="13">{round(fraction * 100)}%</text>'
        )
        parts.extend(_bar(24, y + 26, 402, 14, fraction, COLORS[color]))
    parts.append(
        f'<text x="24" y="462" fill="{COLORS["muted_text"]}" '
        f'font-family="{MONO_FONT_FAMILY}" font-size="13">'
        "next session: friday · 2:00 PM</text>"
    )
    return parts


PANEL_RENDERERS = {
    Theme.CUDA: render_cuda_panel,
    Theme.GPU: render_gpu_panel,
    Theme.PYTHON: render_python_panel,
    Theme.NEURAL: render_neural_panel,
    Theme.DEFAULT: render_default_panel,
}


def render_panel(theme: Theme) -> str:
    """Return the complete, positioned panel group for ``theme``.

    Parameters
    ----------
    theme : Theme
        Theme chosen by :func:`classify_theme`.

    Returns
    -------
    str
        A ``<g>`` element translated to the panel position.
    """
    body = panel_frame(PANEL_CAPTIONS[theme], PANEL_ACCENTS[theme])
    body.extend(PANEL_RENDERERS[theme]())
    inner = "\n    ".join(body)
    return (
        f'<g class="panel panel-{theme.value}" '
        f'transform="translate({PANEL_X},{PANEL_Y})">\n    {inner}\n  </g>'
    )
