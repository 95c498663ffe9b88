"""Configuration-related tests for the remote image backend."""

from pathlib import Path

import pytest

from simg_tools.exceptions import ConfigurationError
from simg_tools.pipeline.image_backend import BananaConfig


def test_banana_config_defaults_without_credentials():
    cfg = BananaConfig()
    assert cfg.is_available is False
    assert cfg.api_key is None and cfg.model_key is None
    assert cfg.endpoint == "https://api.banana.dev/start/v4"
    assert cfg.request_timeout == 120
    assert cfg.target_rpm == 30


def test_banana_config_requires_both_keys(monkeypatch):
    monkeypatch.setenv("BANANA_API_KEY", "k")
    assert BananaConfig().is_available is False
    monkeypatch.setenv("BANANA_MODEL_KEY", "m")
    assert BananaConfig().is_available is True


def test_banana_config_empty_values_count_as_missing(monkeypatch):
    monkeypatch.setenv("BANANA_API_KEY", "")
    monkeypatch.setenv("BANANA_MODEL_KEY", "m")
    cfg = BananaConfig()
    assert cfg.api_key is None and cfg.is_available is False


def test_banana_config_env_overrides(monkeypatch):
    monkeypatch.setenv("BANANA_API_URL", "https://images.example.invalid/run")
    monkeypatch.setenv("BANANA_REQUEST_TIMEOUT", "15")
    monkeypatch.setenv("BANANA_TARGET_RPM", "6")
    cfg = BananaConfig()
    assert cfg.endpoint == "https://images.example.invalid/run"
    assert cfg.request_timeout == 15 and cfg.target_rpm == 6


@pytest.mark.parametrize("value", ["soon", "0", "-3"])
def test_banana_config_rejects_bad_timeout(monkeypatch, value):
    monkeypatch.setenv("BANANA_REQUEST_TIMEOUT", value)
    with pytest.raises(ConfigurationError):
        BananaConfig()


def test_banana_config_loads_project_env_file(monkeypatch, tmp_path: Path):
    # Registered with monkeypatch so the values loaded from .env are undone.
    monkeypatch.setenv("BANANA_API_KEY", "placeholder")
    monkeypatch.setenv("BANANA_MODEL_KEY", "placeholder")
    (tmp_path / ".env").write_text(
        "BANANA_API_KEY=from-file\nBANANA_MODEL_KEY=model-from-file\n",
        encoding="utf-8",
    )
    cfg = BananaConfig()
    assert cfg.api_key == "from-file"
    assert cfg.model_key == "model-from-file"
    assert cfg.is_available is True
