"""JSON log formatter for structured logging output."""

import json
import logging
from datetime import UTC, datetime

# Request context the client attaches via ``extra=`` on failed calls
CONTEXT_FIELDS = ("path", "status_code", "reason")


class JSONLogFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Besides the message, any request context passed through ``extra`` is
    lifted to top-level keys, so a failed call logs as::

        {"timestamp": "...", "level": "WARNING", "service": "spotify-listening",
         "logger": "spotify_listening.spotify.client", "message": "...",
         "path": "/me/top/tracks", "status_code": 503}
    """

    def __init__(self, service: str) -> None:
        super().__init__()
        self._service = service

    def _base_entry(self, record: logging.LogRecord) -> dict[str, object]:
        return {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }

    def format(self, record: logging.LogRecord) -> str:
        entry = self._base_entry(record)
        entry.update(
            (field, getattr(record, field)) for field in CONTEXT_FIELDS if getattr(record, field, None) is not None
        )
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)
