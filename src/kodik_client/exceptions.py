"""Custom exception hierarchy for kodik-client.

Two families live here.

User-facing errors inherit from :class:`KodikError`.  Every outcome of a
public :class:`~kodik_client.core.kodik_api.KodikApi` operation that is
not a success maps to one of them, so callers can branch on the error
type alone.

Transport signals inherit from :class:`TransportFailure`.  They are
raised by :class:`~kodik_client.core.protocols.Transport`
implementations and consumed by the error mapping table in
:mod:`kodik_client.core.error_mapping`.  Raw third-party exceptions
(e.g. from httpx) must NEVER propagate beyond the infrastructure layer;
they are re-raised as one of these signals.

Hierarchy
---------
KodikError
├── InvalidTokenError
├── NotFoundError
├── UnexpectedResponseError
├── EmptyQueryError
├── QueryTooShortError
├── InvalidArgumentError
├── ConfigurationError
└── EnvironmentError

TransportFailure
├── ConnectFailure
└── HttpErrorResponse
    ├── ClientErrorResponse
    └── ServerErrorResponse
"""

from __future__ import annotations


class KodikError(Exception):
    """Base exception for all kodik-client errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- API outcomes ------------------------------------------------------------

class InvalidTokenError(KodikError):
    """Raised when the API rejects the configured token."""


class NotFoundError(KodikError):
    """Raised when the requested material does not exist."""


class UnexpectedResponseError(KodikError):
    """Raised when the API is unreachable or answers in an unknown way."""


# --- Client-side guards --------------------------------------------------------

class EmptyQueryError(KodikError):
    """Raised when a title search is attempted with an empty query."""


class QueryTooShortError(KodikError):
    """Raised when a title search query has fewer than three characters."""


TooLargeResponseError = QueryTooShortError
"""Legacy name of :class:`QueryTooShortError`."""


class InvalidArgumentError(KodikError, ValueError):
    """Raised when a required argument is missing or malformed."""


# --- Environment / configuration ---------------------------------------------

class ConfigurationError(KodikError):
    """Raised when the client settings cannot produce a usable source."""


class EnvironmentError(KodikError):
    """Raised when an optional runtime dependency is not available."""


# --- Transport boundary ------------------------------------------------------

class TransportFailure(Exception):
    """A request could not be completed by the transport.

    Plain instances describe failures that have no mapping rule (for
    instance a read timeout or a redirect loop); they propagate out of
    the client unchanged.
    """


class ConnectFailure(TransportFailure):
    """The remote host could not be reached."""


class HttpErrorResponse(TransportFailure):
    """The server answered with an error status code."""

    def __init__(self, status_code: int, body: bytes = b"") -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code: int = status_code
        self.body: bytes = body


class ClientErrorResponse(HttpErrorResponse):
    """The server answered with a 4xx status code."""


class ServerErrorResponse(HttpErrorResponse):
    """The server answered with a 5xx status code."""
