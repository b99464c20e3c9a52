"""Logging configuration for applications built on the client."""

import logging
import sys

from spotify_listening.logging.formatter import JSONLogFormatter

DEFAULT_SERVICE_NAME = "spotify-listening"


def configure_logging(service: str = DEFAULT_SERVICE_NAME, level: int | str = logging.INFO) -> None:
    """Set up structured JSON logging on the root logger.

    The library itself only emits through module loggers; call this from an
    application entry point, e.g. with ``get_settings().LOG_LEVEL``.
    """
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONLogFormatter(service=service))
    root.addHandler(handler)
