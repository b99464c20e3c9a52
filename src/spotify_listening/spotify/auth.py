"""Access-token refresh against the Spotify accounts service."""

import logging

import httpx

from spotify_listening.spotify.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    ERROR_TEXT_MAX_CHARS,
    SPOTIFY_TOKEN_URL,
)
from spotify_listening.spotify.exceptions import SpotifyAuthError, SpotifyValidationError
from spotify_listening.spotify.models import SpotifyTokenResponse

logger = logging.getLogger(__name__)


def _token_error_detail(response: httpx.Response) -> tuple[str, str | None]:
    """Extract ``(message, reason)`` from a rejected token request.

    The accounts service answers with flat OAuth errors,
    ``{"error": "invalid_grant", "error_description": "..."}``, but proxies
    in front of it may send the Web API envelope ``{"error": {"message": ...}}``
    or plain text.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str):
            description = body.get("error_description")
            return (description if isinstance(description, str) and description else error), error
        if isinstance(error, dict):
            message = error.get("message")
            reason = error.get("reason")
            return (
                message if isinstance(message, str) and message else f"HTTP {response.status_code}",
                reason if isinstance(reason, str) else None,
            )

    if response.text:
        return response.text[:ERROR_TEXT_MAX_CHARS], None
    return f"HTTP {response.status_code}", None


def refresh_access_token(
    client_id: str,
    client_secret: str,
    refresh_token: str,
    *,
    token_url: str = SPOTIFY_TOKEN_URL,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> SpotifyTokenResponse:
    """Exchange a refresh token for a new access token.

    Spotify may rotate the refresh token; when it does, the new one is on
    ``refresh_token`` of the result and the old one stops working.

    Raises:
        SpotifyValidationError: If any credential is empty.
        SpotifyAuthError: If the accounts service rejects the refresh.
    """
    if not (client_id and client_secret and refresh_token):
        raise SpotifyValidationError("client_id, client_secret and refresh_token are all required")

    with httpx.Client(timeout=timeout) as client:
        response = client.post(
            token_url,
            data={
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
                "client_id": client_id,
                "client_secret": client_secret,
            },
        )

    if response.status_code != httpx.codes.OK:
        message, reason = _token_error_detail(response)
        raise SpotifyAuthError(response.status_code, message, reason)

    logger.info("Refreshed Spotify access token")
    return SpotifyTokenResponse.model_validate_json(response.content)
