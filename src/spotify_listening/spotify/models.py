"""Pydantic models for Spotify Web API responses.

Field names are Spotify's JSON keys, kept verbatim. Models are frozen once
validated and ignore keys they do not declare.
"""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SpotifyModel(BaseModel):
    """Base for every decoded Spotify payload."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class TimeRange(enum.StrEnum):
    """Time frames over which top items are computed."""

    SHORT_TERM = "short_term"  # ~4 weeks
    MEDIUM_TERM = "medium_term"  # ~6 months
    LONG_TERM = "long_term"  # several years


# ---------------------------------------------------------------------------
# Shared objects
# ---------------------------------------------------------------------------


class SpotifyImage(SpotifyModel):
    """Image object returned by Spotify (album art, artist photos, etc.)."""

    url: str
    height: int | None = None
    width: int | None = None


class SpotifyFollowers(SpotifyModel):
    """Follower count of an artist."""

    href: str | None = None
    total: int | None = None


class SpotifyExternalIds(SpotifyModel):
    """External IDs (ISRC, EAN, UPC)."""

    isrc: str | None = None
    ean: str | None = None
    upc: str | None = None


# ---------------------------------------------------------------------------
# Artists
# ---------------------------------------------------------------------------


class SpotifyArtistSimplified(SpotifyModel):
    """Simplified artist object (embedded in tracks, albums)."""

    id: str | None = None
    name: str
    type: str | None = None
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifyArtistFull(SpotifyArtistSimplified):
    """Full artist object, as listed by /me/top/artists."""

    genres: list[str] = Field(default_factory=list)
    popularity: int | None = None
    images: list[SpotifyImage] = Field(default_factory=list)
    followers: SpotifyFollowers | None = None


# ---------------------------------------------------------------------------
# Albums
# ---------------------------------------------------------------------------


class SpotifyAlbumSimplified(SpotifyModel):
    """Simplified album object (embedded in tracks)."""

    id: str | None = None
    name: str
    type: str | None = None
    uri: str | None = None
    href: str | None = None
    album_type: str | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    images: list[SpotifyImage] = Field(default_factory=list)
    external_urls: dict[str, str] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Tracks
# ---------------------------------------------------------------------------


class SpotifyTrack(SpotifyModel):
    """Full track object from Spotify."""

    id: str | None = None
    name: str
    type: str | None = None
    uri: str | None = None
    href: str | None = None
    duration_ms: int | None = None
    explicit: bool | None = None
    popularity: int | None = None
    preview_url: str | None = None
    track_number: int | None = None
    disc_number: int | None = None
    is_local: bool = False
    is_playable: bool | None = None
    artists: list[SpotifyArtistSimplified] = Field(default_factory=list)
    album: SpotifyAlbumSimplified | None = None
    external_ids: SpotifyExternalIds | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Play History
# ---------------------------------------------------------------------------


class SpotifyContext(SpotifyModel):
    """Playback context (playlist, album, artist, etc.)."""

    type: str | None = None
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifyPlayHistoryItem(SpotifyModel):
    """Single item from /me/player/recently-played.

    ``played_at`` keeps Spotify's ISO 8601 string as sent, e.g.
    ``2016-12-13T20:44:04.589Z``; ``played_at_datetime`` parses it.
    """

    track: SpotifyTrack
    played_at: str
    context: SpotifyContext | None = None

    @property
    def played_at_datetime(self) -> datetime:
        """Aware UTC datetime of the play."""
        return datetime.fromisoformat(self.played_at)


class SpotifyCursors(SpotifyModel):
    """Cursors for cursor-based paging."""

    after: str | None = None
    before: str | None = None


class RecentlyPlayedResponse(SpotifyModel):
    """Response from GET /me/player/recently-played."""

    items: list[SpotifyPlayHistoryItem] = Field(default_factory=list)
    next: str | None = None
    cursors: SpotifyCursors | None = None
    limit: int | None = None
    href: str | None = None


# ---------------------------------------------------------------------------
# Top items
# ---------------------------------------------------------------------------


class TopArtistsResponse(SpotifyModel):
    """Response from GET /me/top/artists."""

    items: list[SpotifyArtistFull] = Field(default_factory=list)
    total: int | None = None
    limit: int | None = None
    offset: int | None = None
    next: str | None = None
    previous: str | None = None
    href: str | None = None


class TopTracksResponse(SpotifyModel):
    """Response from GET /me/top/tracks."""

    items: list[SpotifyTrack] = Field(default_factory=list)
    total: int | None = None
    limit: int | None = None
    offset: int | None = None
    next: str | None = None
    previous: str | None = None
    href: str | None = None


# ---------------------------------------------------------------------------
# Audio analysis
# ---------------------------------------------------------------------------


class TimeInterval(SpotifyModel):
    """Position and duration of a bar, beat or tatum, in seconds."""

    start: float | None = None
    duration: float | None = None
    confidence: float | None = None


class AnalysisSection(TimeInterval):
    """Section of a track bounded by large variations in rhythm or timbre."""

    loudness: float | None = None
    tempo: float | None = None
    tempo_confidence: float | None = None
    key: int | None = None
    key_confidence: float | None = None
    mode: int | None = None
    mode_confidence: float | None = None
    time_signature: int | None = None
    time_signature_confidence: float | None = None


class AnalysisSegment(TimeInterval):
    """Segment of roughly uniform loudness, pitch and timbre.

    ``pitches`` holds 12 chroma values and ``timbre`` 12 basis coefficients.
    """

    loudness_start: float | None = None
    loudness_max_time: float | None = None
    loudness_max: float | None = None
    loudness_end: float | None = None
    pitches: list[float] = Field(default_factory=list)
    timbre: list[float] = Field(default_factory=list)


class AnalysisMeta(SpotifyModel):
    """Metadata on the analysis run itself."""

    analyzer_version: str | None = None
    platform: str | None = None
    detailed_status: str | None = None
    status_code: int | None = None
    timestamp: int | None = None
    analysis_time: float | None = None
    input_process: str | None = None


class AnalysisTrack(SpotifyModel):
    """Whole-track analysis values plus rhythm and sync fingerprints."""

    num_samples: int | None = None
    duration: float | None = None
    sample_md5: str | None = None
    offset_seconds: float | None = None
    window_seconds: float | None = None
    analysis_sample_rate: int | None = None
    analysis_channels: int | None = None
    end_of_fade_in: float | None = None
    start_of_fade_out: float | None = None
    loudness: float | None = None
    tempo: float | None = None
    tempo_confidence: float | None = None
    time_signature: int | None = None
    time_signature_confidence: float | None = None
    key: int | None = None
    key_confidence: float | None = None
    mode: int | None = None
    mode_confidence: float | None = None
    codestring: str | None = None
    code_version: float | None = None
    echoprintstring: str | None = None
    echoprint_version: float | None = None
    synchstring: str | None = None
    synch_version: float | None = None
    rhythmstring: str | None = None
    rhythm_version: float | None = None


class AudioAnalysis(SpotifyModel):
    """Response from GET /audio-analysis/{id}."""

    bars: list[TimeInterval] = Field(default_factory=list)
    beats: list[TimeInterval] = Field(default_factory=list)
    meta: AnalysisMeta | None = None
    sections: list[AnalysisSection] = Field(default_factory=list)
    segments: list[AnalysisSegment] = Field(default_factory=list)
    tatums: list[TimeInterval] = Field(default_factory=list)
    track: AnalysisTrack | None = None


# ---------------------------------------------------------------------------
# Errors and auth
# ---------------------------------------------------------------------------


class SpotifyErrorDetail(SpotifyModel):
    """Regular error object: ``{"status": 401, "message": "..."}``."""

    status: int | None = None
    message: str | None = None
    reason: str | None = None


class SpotifyErrorResponse(SpotifyModel):
    """Error envelope returned with every non-success Web API status."""

    error: SpotifyErrorDetail


class SpotifyTokenResponse(SpotifyModel):
    """Response from POST accounts.spotify.com/api/token."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None
    scope: str | None = None
    refresh_token: str | None = None
