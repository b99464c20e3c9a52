"""Tests for SpotifySettings."""

import pytest

from spotify_listening.config import SpotifySettings, get_settings


def test_defaults() -> None:
    """Settings have sensible defaults."""
    settings = SpotifySettings(SPOTIFY_CLIENT_ID="cid", SPOTIFY_CLIENT_SECRET="csecret")
    assert settings.SPOTIFY_API_BASE == "https://api.spotify.com/v1"
    assert settings.SPOTIFY_TOKEN_URL == "https://accounts.spotify.com/api/token"
    assert settings.SPOTIFY_REQUEST_TIMEOUT == 30.0
    assert settings.LOG_LEVEL == "INFO"


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings can be overridden via environment variables."""
    monkeypatch.setenv("SPOTIFY_CLIENT_ID", "env-id")
    monkeypatch.setenv("SPOTIFY_REFRESH_TOKEN", "env-refresh")
    monkeypatch.setenv("SPOTIFY_REQUEST_TIMEOUT", "5.5")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = SpotifySettings()
    assert settings.SPOTIFY_CLIENT_ID == "env-id"
    assert settings.SPOTIFY_REFRESH_TOKEN == "env-refresh"
    assert settings.SPOTIFY_REQUEST_TIMEOUT == 5.5
    assert settings.LOG_LEVEL == "DEBUG"


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
