"""Typed client for Spotify listening history, top items and audio analysis."""

__version__ = "0.1.0"
