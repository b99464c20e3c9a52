"""Tests for JSON log formatting and setup."""

import json
import logging
import sys
from collections.abc import Iterator

import pytest

from spotify_listening.logging import JSONLogFormatter, configure_logging


def _record(msg: str, *args: object, exc_info: object = None, **context: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="spotify_listening.spotify.client",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=exc_info,  # type: ignore[arg-type]
    )
    record.__dict__.update(context)
    return record


def test_formatter_emits_single_line_json() -> None:
    formatter = JSONLogFormatter(service="spotify-listening")
    line = formatter.format(_record("Spotify returned %d for %s", 503, "/me/top/tracks"))

    assert "\n" not in line
    entry = json.loads(line)
    assert entry["level"] == "WARNING"
    assert entry["service"] == "spotify-listening"
    assert entry["logger"] == "spotify_listening.spotify.client"
    assert entry["message"] == "Spotify returned 503 for /me/top/tracks"
    assert entry["timestamp"].endswith("+00:00")
    assert "exception" not in entry


def test_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record("failed", exc_info=sys.exc_info())

    entry = json.loads(JSONLogFormatter(service="svc").format(record))
    assert "RuntimeError: boom" in entry["exception"]


def test_formatter_lifts_request_context() -> None:
    record = _record("Spotify returned %d", 503, path="/me/top/tracks", status_code=503, reason=None)

    entry = json.loads(JSONLogFormatter(service="svc").format(record))

    assert entry["path"] == "/me/top/tracks"
    assert entry["status_code"] == 503
    assert "reason" not in entry

@pytest.fixture
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.usefixtures("_restore_root_logger")
def test_configure_logging_installs_json_handler() -> None:
    configure_logging(service="history-export", level="DEBUG")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    formatter = root.handlers[0].formatter
    assert isinstance(formatter, JSONLogFormatter)
    assert json.loads(formatter.format(_record("hello")))["service"] == "history-export"
