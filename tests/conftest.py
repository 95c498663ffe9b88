"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Clears the image service credentials so no test reaches the network.
"""

import os
import sys

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
from pathlib import Path

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    """Keep a developer's ``.env`` and credentials out of every test."""
    import simg_tools.config as cfg

    monkeypatch.setattr(cfg, "PROJECT_ROOT", tmp_path)
    for name in (
        "BANANA_API_KEY",
        "BANANA_MODEL_KEY",
        "BANANA_API_URL",
        "BANANA_REQUEST_TIMEOUT",
        "BANANA_TARGET_RPM",
    ):
        monkeypatch.delenv(name, raising=False)


class FakeLimiter:
    """Async context manager standing in for ``aiolimiter.AsyncLimiter``."""

    async def __aenter__(self):
        return None

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeResponse:
    def __init__(self, status: int, text: str):
        self.status = status
        self._text = text

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Session whose ``post`` hands out canned responses in order."""

    def __init__(self, responses):
        self._responses = iter(responses)
        self.calls = []

    def post(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        try:
            return next(self._responses)
        except StopIteration:
            return FakeResponse(500, "{}")


@pytest.fixture
def fake_session_factory():
    return FakeSession


@pytest.fixture
def fake_response_factory():
    return FakeResponse


@pytest.fixture
def fake_limiter():
    return FakeLimiter()
