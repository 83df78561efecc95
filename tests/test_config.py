"""Tests for settings loading."""

from pathlib import Path

from fluxstudio.config import FluxStudioSettings


def test_settings_defaults(monkeypatch):
    """Test the default endpoints and timeout."""
    for name in ("FLUXSTUDIO_MODEL", "FLUXSTUDIO_REPLICATE_API_BASE", "FLUXSTUDIO_REQUEST_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    settings = FluxStudioSettings(_env_file=None)

    assert settings.replicate_api_base == "https://api.replicate.com/v1"
    assert settings.model == "black-forest-labs/flux-1.1-pro-ultra"
    assert settings.request_timeout_seconds == 60.0


def test_settings_from_environment(monkeypatch, tmp_path):
    """Test that FLUXSTUDIO_ variables override defaults."""
    monkeypatch.setenv("FLUXSTUDIO_MODEL", "black-forest-labs/flux-schnell")
    monkeypatch.setenv("FLUXSTUDIO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FLUXSTUDIO_REQUEST_TIMEOUT_SECONDS", "15")

    settings = FluxStudioSettings(_env_file=None)

    assert settings.model == "black-forest-labs/flux-schnell"
    assert settings.data_dir == Path(tmp_path)
    assert settings.request_timeout_seconds == 15.0
