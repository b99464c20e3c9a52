"""Spotify API client and models."""

from spotify_listening.spotify.auth import refresh_access_token
from spotify_listening.spotify.client import SpotifyClient, decode_error
from spotify_listening.spotify.exceptions import (
    SpotifyAPIError,
    SpotifyAuthError,
    SpotifyClientError,
    SpotifyRateLimitError,
    SpotifyRequestError,
    SpotifyServerError,
    SpotifyValidationError,
)
from spotify_listening.spotify.models import TimeRange

__all__ = [
    "SpotifyClient",
    "SpotifyAPIError",
    "SpotifyAuthError",
    "SpotifyClientError",
    "SpotifyRateLimitError",
    "SpotifyRequestError",
    "SpotifyServerError",
    "SpotifyValidationError",
    "TimeRange",
    "decode_error",
    "refresh_access_token",
]
