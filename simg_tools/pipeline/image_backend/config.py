"""Configuration and environment loader for the remote image backend.

This module provides BananaConfig, which loads the credentials and limits for
the Nano Banana (Banana.dev) image generation service.

Role in Architecture
--------------------
- Forms the boundary between the process environment (and an optional
  project ``.env`` file) and the pipeline's typed runtime config.
- Decides, once, whether the remote backend is usable at all: both
  credentials must be present. Their absence is not an error; it is the
  signal to render thumbnails locally.

Examples
--------
>>> from simg_tools.pipeline.image_backend.config import BananaConfig
>>> cfg = BananaConfig()
>>> isinstance(cfg.is_available, bool)
True
"""

import os
from pathlib import Path

from dotenv import load_dotenv

import simg_tools.config as _project_config
from simg_tools.config import (
    BANANA_API_KEY_ENV,
    BANANA_MODEL_KEY_ENV,
    DEFAULT_BANANA_API_URL,
    DEFAULT_REMOTE_REQUEST_TIMEOUT,
    DEFAULT_REMOTE_TARGET_RPM,
)
from simg_tools.exceptions import ConfigurationError


def _read_positive_int(name: str, default: int) -> int:
    """Read a positive integer environment variable or fall back to ``default``.

    Raises
    ------
    ConfigurationError
        If the variable is set but is not a positive integer.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{name} must be an integer", context={"value": raw}
        ) from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive", context={"value": raw})
    return value


class BananaConfig:
    r"""Configuration loader for the Nano Banana image generation service.

    Attributes
    ----------
    api_key : str | None
        Banana.dev API key (``BANANA_API_KEY``).
    model_key : str | None
        Nano Banana model key (``BANANA_MODEL_KEY``).
    endpoint : str
        URL the generation request is POSTed to (``BANANA_API_URL``).
    request_timeout : int
        Total timeout in seconds for one generation request
        (``BANANA_REQUEST_TIMEOUT``).
    target_rpm : int
        Maximum generation requests per minute (``BANANA_TARGET_RPM``).

    Notes
    -----
    Instantiate once at process start; no runtime mutation is intended.
    """

    def __init__(self) -> None:
        r"""Read configuration from a project ``.env`` file and the environment.

        Raises
        ------
        ConfigurationError
            If a numeric setting is present but not a positive integer.
        """
        # Resolve project root dynamically so tests can monkeypatch
        # ``simg_tools.config.PROJECT_ROOT``.
        env_path = Path(_project_config.PROJECT_ROOT) / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=True)
        self.api_key: str | None = os.getenv(BANANA_API_KEY_ENV) or None
        self.model_key: str | None = os.getenv(BANANA_MODEL_KEY_ENV) or None
        self.endpoint: str = os.getenv("BANANA_API_URL") or DEFAULT_BANANA_API_URL
        self.request_timeout = _read_positive_int(
            "BANANA_REQUEST_TIMEOUT", DEFAULT_REMOTE_REQUEST_TIMEOUT
        )
        self.target_rpm = _read_positive_int(
            "BANANA_TARGET_RPM", DEFAULT_REMOTE_TARGET_RPM
        )

    @property
    def is_available(self) -> bool:
        """Return True when both credentials needed by the remote backend are set."""
        return bool(self.api_key and self.model_key)
