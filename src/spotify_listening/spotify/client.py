"""Spotify Web API client for listening history, top items and audio analysis."""

import logging
from types import TracebackType
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from spotify_listening.spotify.auth import refresh_access_token
from spotify_listening.spotify.constants import (
    AUDIO_ANALYSIS_PATH,
    DEFAULT_REQUEST_TIMEOUT,
    ERROR_TEXT_MAX_CHARS,
    MAX_LIMIT,
    MIN_LIMIT,
    RECENTLY_PLAYED_PATH,
    SPOTIFY_API_BASE,
    TOP_ARTISTS_PATH,
    TOP_TRACKS_PATH,
)
from spotify_listening.spotify.exceptions import (
    SpotifyAPIError,
    SpotifyAuthError,
    SpotifyRateLimitError,
    SpotifyRequestError,
    SpotifyServerError,
    SpotifyValidationError,
)
from spotify_listening.spotify.models import (
    AudioAnalysis,
    RecentlyPlayedResponse,
    SpotifyErrorResponse,
    TimeRange,
    TopArtistsResponse,
    TopTracksResponse,
)

if TYPE_CHECKING:
    from spotify_listening.config import SpotifySettings

logger = logging.getLogger(__name__)


def decode_error(response: httpx.Response) -> SpotifyAPIError:
    """Turn a non-success response into the matching exception.

    Spotify wraps errors as ``{"error": {"status": ..., "message": ...}}``.
    Bodies of any other shape fall back to their raw text, then to the bare
    status line.
    """
    status = response.status_code
    message = f"HTTP {status}"
    reason: str | None = None
    try:
        body = SpotifyErrorResponse.model_validate_json(response.content)
        message = body.error.message or message
        reason = body.error.reason
    except ValidationError:
        if response.text:
            message = response.text[:ERROR_TEXT_MAX_CHARS]

    if status == 401:
        return SpotifyAuthError(status, message, reason)
    if status == 429:
        retry_after_header = response.headers.get("Retry-After")
        retry_after: float | None = None
        if retry_after_header:
            try:
                retry_after = float(retry_after_header)
            except ValueError:
                retry_after = None
        return SpotifyRateLimitError(status, message, reason, retry_after=retry_after)
    if status >= 500:
        return SpotifyServerError(status, message, reason)
    return SpotifyRequestError(status, message, reason)


def _check_limit(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not MIN_LIMIT <= value <= MAX_LIMIT:
        raise SpotifyValidationError(f"{name} must be an integer between {MIN_LIMIT} and {MAX_LIMIT}, got {value!r}")
    return value


def _check_non_negative(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SpotifyValidationError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def _check_time_range(value: str | TimeRange) -> TimeRange:
    try:
        return TimeRange(value)
    except ValueError:
        valid = ", ".join(member.value for member in TimeRange)
        raise SpotifyValidationError(f"time_range must be one of {valid}, got {value!r}") from None


def _top_items_params(
    limit: int | None,
    time_range: str | TimeRange | None,
    offset: int | None,
) -> dict[str, str | int]:
    """Validate top-items options; options left as None are not sent."""
    params: dict[str, str | int] = {}
    if limit is not None:
        params["limit"] = _check_limit("limit", limit)
    if time_range is not None:
        params["time_range"] = _check_time_range(time_range).value
    if offset is not None:
        params["offset"] = _check_non_negative("offset", offset)
    return params


class SpotifyClient:
    """Blocking Spotify Web API client.

    Either takes an ``access_token`` and sends it as a Bearer header on every
    request, or an already-authenticated ``http_client`` which is used as-is.
    Every call is one GET: non-200 responses raise the decoded upstream error,
    nothing is retried or cached.
    """

    def __init__(
        self,
        access_token: str | None = None,
        *,
        http_client: httpx.Client | None = None,
        api_base: str = SPOTIFY_API_BASE,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        if not access_token and http_client is None:
            raise SpotifyValidationError("SpotifyClient needs an access_token or an authenticated http_client")
        self._access_token = access_token
        self._api_base = api_base.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=request_timeout)

    @classmethod
    def from_settings(cls, settings: "SpotifySettings") -> "SpotifyClient":
        """Build a client from settings, refreshing the access token if none is configured."""
        access_token = settings.SPOTIFY_ACCESS_TOKEN
        if not access_token:
            token = refresh_access_token(
                settings.SPOTIFY_CLIENT_ID,
                settings.SPOTIFY_CLIENT_SECRET,
                settings.SPOTIFY_REFRESH_TOKEN,
                token_url=settings.SPOTIFY_TOKEN_URL,
                timeout=settings.SPOTIFY_REQUEST_TIMEOUT,
            )
            access_token = token.access_token
        return cls(
            access_token,
            api_base=settings.SPOTIFY_API_BASE,
            request_timeout=settings.SPOTIFY_REQUEST_TIMEOUT,
        )

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SpotifyClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _get(self, path: str, *, params: dict[str, str | int] | None = None) -> bytes:
        """GET ``path`` and return the raw body, raising on any status but 200."""
        url = f"{self._api_base}{path}"
        headers = {"Authorization": f"Bearer {self._access_token}"} if self._access_token else None
        logger.debug("GET %s params=%s", url, params)
        response = self._client.get(url, params=params, headers=headers)

        if response.status_code != httpx.codes.OK:
            error = decode_error(response)
            logger.warning(
                "Spotify returned %d for %s: %s",
                response.status_code,
                path,
                error.message,
                extra={"path": path, "status_code": response.status_code, "reason": error.reason},
            )
            raise error
        return response.content

    # -------------------------------------------------------------------
    # Listening history
    # -------------------------------------------------------------------

    def get_recently_played(
        self,
        total: int = MAX_LIMIT,
        *,
        before: int | None = None,
        after: int | None = None,
    ) -> RecentlyPlayedResponse:
        """GET /me/player/recently-played.

        Spotify only keeps the 50 most recent plays per user, so ``total``
        must be within 1..50. ``before`` and ``after`` are Unix timestamps in
        milliseconds and are mutually exclusive. Requires the
        ``user-read-recently-played`` scope.
        """
        params: dict[str, str | int] = {"limit": _check_limit("total", total)}
        if before is not None and after is not None:
            raise SpotifyValidationError("before and after cannot both be set")
        if before is not None:
            params["before"] = _check_non_negative("before", before)
        if after is not None:
            params["after"] = _check_non_negative("after", after)
        return RecentlyPlayedResponse.model_validate_json(self._get(RECENTLY_PLAYED_PATH, params=params))

    # -------------------------------------------------------------------
    # Top items
    # -------------------------------------------------------------------

    def get_top_tracks(
        self,
        *,
        limit: int | None = None,
        time_range: str | TimeRange | None = None,
        offset: int | None = None,
    ) -> TopTracksResponse:
        """GET /me/top/tracks. Requires the ``user-top-read`` scope."""
        params = _top_items_params(limit, time_range, offset)
        return TopTracksResponse.model_validate_json(self._get(TOP_TRACKS_PATH, params=params))

    def get_top_artists(
        self,
        *,
        limit: int | None = None,
        time_range: str | TimeRange | None = None,
        offset: int | None = None,
    ) -> TopArtistsResponse:
        """GET /me/top/artists. Requires the ``user-top-read`` scope."""
        params = _top_items_params(limit, time_range, offset)
        return TopArtistsResponse.model_validate_json(self._get(TOP_ARTISTS_PATH, params=params))

    # -------------------------------------------------------------------
    # Audio analysis
    # -------------------------------------------------------------------

    def get_audio_analysis(self, track_id: str) -> AudioAnalysis:
        """GET /audio-analysis/{id}: bars, beats, sections, segments and tatums of a track."""
        if not track_id:
            raise SpotifyValidationError("track_id must be a non-empty Spotify ID")
        path = f"{AUDIO_ANALYSIS_PATH}/{quote(track_id, safe='')}"
        return AudioAnalysis.model_validate_json(self._get(path))
