"""Search URL construction for the Kodik API.

Every operation talks to the same ``search`` endpoint and differs only
in the query string: the access check and id lookups send ``id``, title
searches send ``title``.  The token is always the first parameter.

All functions here are pure.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from kodik_client.core.models import SourceConfig
from kodik_client.exceptions import (
    EmptyQueryError,
    InvalidArgumentError,
    QueryTooShortError,
)

PROBE_ID: str = "movie-0"
"""Placeholder id used by the access check."""

SEARCH_SEGMENT: str = "search"

MIN_TITLE_LENGTH: int = 3


# ---------------------------------------------------------------------------
# URL construction
# ---------------------------------------------------------------------------

def build_search_url(
    config: SourceConfig,
    *,
    id: str | None = None,
    title: str | None = None,
) -> str:
    """Build the ``search`` URL for exactly one of *id* or *title*."""
    if (id is None) == (title is None):
        raise ValueError("Exactly one of 'id' or 'title' must be given.")

    params: list[tuple[str, str]] = [("token", config.token)]
    if id is not None:
        params.append(("id", id))
    else:
        params.append(("title", title or ""))

    path = _join_path(config.base_path, SEARCH_SEGMENT)
    return urlunsplit(
        (_normalise_scheme(config.scheme), config.host.strip("/"), path, urlencode(params), "")
    )


def build_probe_url(config: SourceConfig) -> str:
    """URL of the synthetic lookup used to validate the token."""
    return build_search_url(config, id=PROBE_ID)


def build_title_url(config: SourceConfig, title: str) -> str:
    return build_search_url(config, title=title)


def build_id_url(config: SourceConfig, id: str) -> str:
    return build_search_url(config, id=id)


# ---------------------------------------------------------------------------
# Pre-flight guards
# ---------------------------------------------------------------------------

def validate_title(title: str) -> None:
    """Reject queries the API would not accept, before any request.

    Raises
    ------
    InvalidArgumentError
        If *title* is not a string.
    EmptyQueryError
        If *title* is empty.
    QueryTooShortError
        If *title* has fewer than :data:`MIN_TITLE_LENGTH` characters.
    """
    if not isinstance(title, str):
        raise InvalidArgumentError("Search query must be a string.")
    if not title:
        raise EmptyQueryError("Search query is missing.")
    if len(title) < MIN_TITLE_LENGTH:
        raise QueryTooShortError(
            "Search query is too short.",
            hint=f"Use at least {MIN_TITLE_LENGTH} characters.",
        )


# ---------------------------------------------------------------------------
# Logging helpers
# ---------------------------------------------------------------------------

def redact_token(url: str) -> str:
    """Return *url* with the ``token`` query value masked."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [
        (key, "***" if key == "token" else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _normalise_scheme(scheme: str) -> str:
    """Accept ``https``, ``https:`` and ``https://`` alike."""
    return scheme.strip().rstrip("/").rstrip(":") or "https"


def _join_path(*segments: str) -> str:
    """Join path segments with single slashes, skipping empty ones."""
    parts = [part for segment in segments for part in segment.split("/") if part]
    return "/" + "/".join(parts)
