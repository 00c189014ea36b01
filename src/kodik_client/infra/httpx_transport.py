"""httpx backed implementation of :class:`~kodik_client.core.protocols.Transport`.

This module is the **only** place in the codebase that imports ``httpx``.
All httpx exceptions and error status codes are re-raised here as
:class:`~kodik_client.exceptions.TransportFailure` subclasses — nothing
raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging

import httpx

from kodik_client.core.models import HttpResponse
from kodik_client.core.request_builder import redact_token
from kodik_client.exceptions import (
    ClientErrorResponse,
    ConnectFailure,
    ServerErrorResponse,
    TransportFailure,
)
from kodik_client.version import __version__

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: float = 10.0


class HttpxTransport:
    """Concrete :class:`Transport` backed by a synchronous ``httpx.Client``.

    Usage::

        with HttpxTransport(timeout=5.0) as transport:
            response = transport.send_get("https://kodikapi.com/search?...")

    A preconfigured *client* may be supplied (e.g. one built on
    ``httpx.MockTransport`` in tests); it is then closed together with
    this transport.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        if client is None:
            client = httpx.Client(
                timeout=timeout,
                follow_redirects=True,
                headers={"User-Agent": f"kodik-client/{__version__}"},
            )
        self._client: httpx.Client = client

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self._client.close()

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def send_get(self, url: str) -> HttpResponse:
        """GET *url* and return the response for any non-error status.

        Raises
        ------
        ConnectFailure
            When the connection cannot be established.
        ClientErrorResponse
            On a 4xx answer.
        ServerErrorResponse
            On a 5xx answer.
        TransportFailure
            For every other httpx error (timeouts, redirect loops, malformed
            URLs, ...).
        """
        safe_url = redact_token(url)
        logger.debug("GET %s", safe_url)

        try:
            response = self._client.get(url)
        except (httpx.ConnectError, httpx.ConnectTimeout) as exc:
            logger.warning("Cannot connect: %s (%s)", safe_url, type(exc).__name__)
            raise ConnectFailure(str(exc)) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Request failed: %s (%s)", safe_url, type(exc).__name__)
            raise TransportFailure(str(exc)) from exc

        status = response.status_code
        body = response.content
        logger.debug("GET %s -> %d (%d bytes)", safe_url, status, len(body))

        if 400 <= status < 500:
            raise ClientErrorResponse(status, body)
        if status >= 500:
            raise ServerErrorResponse(status, body)

        return HttpResponse(status_code=status, body=body)
