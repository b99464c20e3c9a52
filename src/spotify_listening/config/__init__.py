"""Library configuration."""

from spotify_listening.config.settings import SpotifySettings, get_settings

__all__ = [
    "SpotifySettings",
    "get_settings",
]
