"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the HTTP library and cache storage stay
replaceable.
"""

from __future__ import annotations

from typing import Any, Protocol

from kodik_client.core.models import HttpResponse, RawRecord


class Transport(Protocol):
    """Contract for HTTP backends.

    Any object that implements :meth:`send_get` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def send_get(self, url: str) -> HttpResponse:
        """Send a single GET request to *url* and return the response.

        Only 2xx/3xx responses are returned.  Implementations must map
        all backend-specific exceptions to
        :class:`~kodik_client.exceptions.TransportFailure` subclasses.

        Raises
        ------
        ConnectFailure
            When the host cannot be reached.
        ClientErrorResponse
            When the server answers with a 4xx status code.
        ServerErrorResponse
            When the server answers with a 5xx status code.
        TransportFailure
            For any other failure of the exchange.
        """
        ...  # pragma: no cover


class TokenCache(Protocol):
    """Contract for remembering tokens that passed an access check.

    Entries are keyed by ``(token, origin)``.  Expiry policy belongs to
    the implementation.
    """

    def has(self, token: str, origin: str) -> bool:
        """Return ``True`` when *token* was validated for *origin*."""
        ...  # pragma: no cover

    def add(self, token: str, origin: str) -> None:
        """Record that *token* was validated for *origin*."""
        ...  # pragma: no cover


class RawRecordToVideo(Protocol):
    """Converts one usable raw record into a domain video.

    Plain functions and classmethods such as
    :meth:`~kodik_client.core.models.KodikVideo.from_record` satisfy
    this protocol.
    """

    def __call__(self, record: RawRecord) -> Any:
        ...  # pragma: no cover
