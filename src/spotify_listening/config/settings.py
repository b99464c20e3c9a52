"""Spotify client settings loaded from environment variables."""

import functools

from pydantic_settings import BaseSettings

from spotify_listening.spotify.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    SPOTIFY_API_BASE,
    SPOTIFY_TOKEN_URL,
)


class SpotifySettings(BaseSettings):
    """Credentials and endpoints for talking to Spotify."""

    # Spotify app credentials, used to refresh the access token
    SPOTIFY_CLIENT_ID: str = ""
    SPOTIFY_CLIENT_SECRET: str = ""
    SPOTIFY_REFRESH_TOKEN: str = ""

    # A ready access token skips the refresh entirely
    SPOTIFY_ACCESS_TOKEN: str = ""

    # Endpoints
    SPOTIFY_API_BASE: str = SPOTIFY_API_BASE
    SPOTIFY_TOKEN_URL: str = SPOTIFY_TOKEN_URL
    SPOTIFY_REQUEST_TIMEOUT: float = DEFAULT_REQUEST_TIMEOUT

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = {"env_prefix": ""}


@functools.lru_cache(maxsize=1)
def get_settings() -> SpotifySettings:
    """Return cached settings singleton."""
    return SpotifySettings()
