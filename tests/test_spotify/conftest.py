"""Shared fixtures for Spotify client tests."""

from collections.abc import Iterator

import pytest

from spotify_listening.spotify.client import SpotifyClient


@pytest.fixture
def client() -> Iterator[SpotifyClient]:
    """A client with a fixed access token, closed after the test."""
    with SpotifyClient("test-token") as spotify_client:
        yield spotify_client
