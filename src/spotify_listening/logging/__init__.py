"""Structured logging: JSON formatter and setup."""

from spotify_listening.logging.formatter import JSONLogFormatter
from spotify_listening.logging.setup import configure_logging

__all__ = ["JSONLogFormatter", "configure_logging"]
