"""The image_backend package wraps the optional remote image generation service.

It exposes the configuration loader that decides whether the service can be
used and the asynchronous client that talks to it. Nothing in this package
writes files or falls back to local rendering; that is the composer's job.

Modules exported
----------------
BananaConfig
    Credentials, endpoint and limits read from the environment.
BananaAPIClient
    Single-attempt aiohttp client returning ``(ok, image, raw)`` tuples.
extract_image_bytes
    Decoder for the base64 image inside a service response.
"""

from __future__ import annotations

from .client import BananaAPIClient, extract_image_bytes
from .config import BananaConfig

__all__ = ["BananaAPIClient", "BananaConfig", "extract_image_bytes"]
