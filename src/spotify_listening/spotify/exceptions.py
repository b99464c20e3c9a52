"""Spotify API client exceptions."""


class SpotifyClientError(Exception):
    """Base exception for Spotify client errors."""


class SpotifyValidationError(SpotifyClientError, ValueError):
    """A caller-supplied parameter is outside the range Spotify accepts."""


class SpotifyAPIError(SpotifyClientError):
    """Spotify answered with a non-success status.

    ``message`` and ``reason`` are taken verbatim from the upstream error body.
    """

    label = "Spotify API error"

    def __init__(self, status_code: int, message: str = "", reason: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.reason = reason
        super().__init__(f"{self.label}: HTTP {status_code}" + (f" - {message}" if message else ""))


class SpotifyAuthError(SpotifyAPIError):
    """Spotify returned 401 Unauthorized, or a token refresh was rejected."""

    label = "Spotify auth error"


class SpotifyRateLimitError(SpotifyAPIError):
    """Spotify returned 429 Too Many Requests."""

    label = "Spotify rate limit exceeded"

    def __init__(
        self,
        status_code: int = 429,
        message: str = "",
        reason: str | None = None,
        *,
        retry_after: float | None = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(status_code, message, reason)
        if retry_after is not None:
            self.args = (f"{self.args[0]} (retry-after: {retry_after}s)",)


class SpotifyServerError(SpotifyAPIError):
    """Spotify returned a 5xx server error."""

    label = "Spotify server error"


class SpotifyRequestError(SpotifyAPIError):
    """Spotify rejected the request (any other non-success status)."""

    label = "Spotify request error"
