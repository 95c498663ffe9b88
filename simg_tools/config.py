"""Global configuration constants for the project.

Defines paths, layout constants and remote-backend defaults used across the
thumbnail pipeline.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
LOG_DIR: Path = PROJECT_ROOT / "logs"

# Website content directories (Astro content collections)
EVENTS_CONTENT_DIR: Path = PROJECT_ROOT / "src" / "content" / "events"
CONTENT_LANGUAGES: tuple[str, ...] = ("en", "es")

# Thumbnail output
THUMBNAIL_OUTPUT_DIR: Path = PROJECT_ROOT / "public" / "images" / "events"
REMOTE_IMAGE_EXTENSION: str = "png"
LOCAL_IMAGE_EXTENSION: str = "svg"
FALLBACK_SLUG: str = "untitled-event"

# Event defaults
DEFAULT_EVENT_TYPE: str = "in-person"
DEFAULT_EVENT_TIME: str = "2:00 PM – 4:00 PM"
ONLINE_LOCATION_LABEL: str = "Online"

# Canvas and panel geometry
CANVAS_WIDTH: int = 1280
CANVAS_HEIGHT: int = 720
PANEL_X: int = 780
PANEL_Y: int = 100
PANEL_WIDTH: int = 450
PANEL_HEIGHT: int = 500

# Title and info bar limits
TITLE_MAX_CHARS_PER_LINE: int = 32
TITLE_MAX_LINES: int = 3
TITLE_FONT_SIZE: int = 40
TITLE_LINE_HEIGHT: int = 52
TITLE_FIRST_BASELINE: int = 250
MAX_DISPLAY_TAGS: int = 4
TAG_MAX_CHARS: int = 18
INFO_FIELD_MAX_CHARS: int = 38

# SIMG brand colours
COLORS: dict[str, str] = {
    "yellow": "#F4C542",
    "blue": "#2E6DB4",
    "green": "#5FA36A",
    "coral": "#E07A5F",
    "dark_bg": "#0C1A26",
    "dark_bg_alt": "#142238",
    "panel_bg": "#101F30",
    "panel_bar": "#0A1520",
    "light_text": "#E6E9EF",
    "muted_text": "#8A97A8",
}
TAG_COLOR_CYCLE: tuple[str, ...] = (
    COLORS["yellow"],
    COLORS["blue"],
    COLORS["green"],
    COLORS["coral"],
)
FONT_FAMILY: str = "Arial, sans-serif"
MONO_FONT_FAMILY: str = "'Courier New', monospace"
BRAND_NAME: str = "SIMG"
BRAND_TAGLINE: str = "Semillero de Investigación en Modelos Generativos"

# Remote image backend (Nano Banana on Banana.dev)
BANANA_API_KEY_ENV: str = "BANANA_API_KEY"
BANANA_MODEL_KEY_ENV: str = "BANANA_MODEL_KEY"
DEFAULT_BANANA_API_URL: str = "https://api.banana.dev/start/v4"
DEFAULT_REMOTE_REQUEST_TIMEOUT: int = 120
DEFAULT_REMOTE_TARGET_RPM: int = 30
REMOTE_PROMPT_TEMPLATE: str = (
    "Professional academic event poster, modern minimalist design, dark blue "
    "background (#2E6DB4), golden accent elements (#F4C542), tech/AI theme, "
    'clean typography area for title "{title}", 16:9 aspect ratio, high '
    "quality, digital art"
)
REMOTE_NEGATIVE_PROMPT: str = "blurry, low quality, text, watermark, distorted"
REMOTE_INFERENCE_STEPS: int = 30
REMOTE_GUIDANCE_SCALE: float = 7.5

# CLI defaults and logging
LOG_FILENAME_THUMBNAILS: str = "generate_thumbnails.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
