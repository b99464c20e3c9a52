"""Spotify API URLs, paths and request defaults."""

# Spotify Auth
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"

# Spotify Web API base
SPOTIFY_API_BASE = "https://api.spotify.com/v1"

# Spotify Web API endpoints, relative to SPOTIFY_API_BASE
RECENTLY_PLAYED_PATH = "/me/player/recently-played"
TOP_ARTISTS_PATH = "/me/top/artists"
TOP_TRACKS_PATH = "/me/top/tracks"
AUDIO_ANALYSIS_PATH = "/audio-analysis"

# Per-call item bounds for recently-played and top items
MIN_LIMIT = 1
MAX_LIMIT = 50

DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds

# Longest slice of a non-JSON error body kept in exception messages
ERROR_TEXT_MAX_CHARS = 200
