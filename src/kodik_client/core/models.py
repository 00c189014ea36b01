"""Domain models for kodik-client.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

RawRecord = dict[str, Any]
"""A single entry of the ``results`` array as decoded from JSON."""


# ---------------------------------------------------------------------------
# Source configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SourceConfig:
    """Connection details and record conversion for one Kodik source."""

    token: str
    """Kodik API token sent with every request."""

    scheme: str
    """URL scheme, e.g. ``https``."""

    host: str
    """API host, e.g. ``kodikapi.com``."""

    base_path: str
    """Path prefix placed before the ``search`` segment.  May be empty."""

    origin: str
    """Identifier of the configured endpoint, used in token-cache keys."""

    video_factory: Callable[[RawRecord], Any]
    """Converts one usable raw record into a domain video."""


# ---------------------------------------------------------------------------
# Transport response
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Status code and raw body of a completed HTTP exchange."""

    status_code: int
    body: bytes

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises :class:`ValueError` when the body is not valid JSON.
        """
        return json.loads(self.body)


# ---------------------------------------------------------------------------
# Feed descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FeedDescriptor:
    """A downloadable Kodik material feed."""

    name: str
    url: str


# ---------------------------------------------------------------------------
# Default video entity
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class KodikVideo:
    """The commonly used subset of a Kodik search record.

    Other projects are free to supply their own factory; this one backs
    the CLI and :meth:`KodikSettings.to_source_config` by default.
    """

    id: str
    """Kodik material id (e.g. ``movie-12345`` or ``serial-678``)."""

    type: str
    """Material type, e.g. ``foreign-movie`` or ``anime-serial``."""

    link: str
    """Protocol-relative player link."""

    title: str
    title_orig: str
    other_title: str
    year: int | None
    quality: str
    translation: str
    """Title of the voice-over / subtitle translation."""

    kinopoisk_id: str | None
    imdb_id: str | None
    episodes_count: int | None
    last_season: int | None
    camrip: bool

    @classmethod
    def from_record(cls, record: RawRecord) -> KodikVideo:
        """Build a :class:`KodikVideo` from a usable raw record."""
        translation = record.get("translation")
        translation_title = (
            str(translation.get("title", "")) if isinstance(translation, dict) else ""
        )
        return cls(
            id=str(record["id"]),
            type=str(record.get("type", "")),
            link=str(record.get("link", "")),
            title=str(record.get("title", "")),
            title_orig=str(record.get("title_orig") or ""),
            other_title=str(record.get("other_title") or ""),
            year=_optional_int(record.get("year")),
            quality=str(record.get("quality") or ""),
            translation=translation_title,
            kinopoisk_id=_optional_str(record.get("kinopoisk_id")),
            imdb_id=_optional_str(record.get("imdb_id")),
            episodes_count=_optional_int(record.get("episodes_count")),
            last_season=_optional_int(record.get("last_season")),
            camrip=bool(record.get("camrip", False)),
        )


def _optional_str(value: object) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _optional_int(value: object) -> int | None:
    """Convert *value* to ``int`` or return ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float, str)):
            return int(value)
        return None
    except (TypeError, ValueError):
        return None
