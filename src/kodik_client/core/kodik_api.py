"""Kodik API client — build, send and interpret search requests.

This is the central class consumed by the CLI layer.  Its collaborators
(:class:`~kodik_client.core.protocols.Transport` and
:class:`~kodik_client.core.protocols.TokenCache`) are injected at
construction time, keeping the core free of any HTTP or storage
imports.

Guarantees
----------
* One outbound request per operation at most; no retries.
* Transport failures leave as :class:`~kodik_client.exceptions.KodikError`
  subclasses, except failures without a mapping rule, which propagate
  unchanged.
* Pre-flight guards fail before the transport is touched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from kodik_client.core import request_builder
from kodik_client.core.error_mapping import map_transport_failure
from kodik_client.core.models import FeedDescriptor, HttpResponse, SourceConfig
from kodik_client.core.protocols import TokenCache, Transport
from kodik_client.core.response_interpreter import (
    extract_results,
    interpret_video,
    interpret_videos,
)
from kodik_client.exceptions import InvalidArgumentError, TransportFailure

logger = logging.getLogger(__name__)


class KodikApi:
    """Stateless client for the Kodik ``search`` endpoint.

    Parameters
    ----------
    config:
        Source settings and the video factory.
    transport:
        Any object satisfying the :class:`Transport` protocol.
    token_cache:
        Any object satisfying the :class:`TokenCache` protocol.
    """

    def __init__(
        self,
        config: SourceConfig,
        transport: Transport,
        token_cache: TokenCache,
    ) -> None:
        self._config: SourceConfig = config
        self._transport: Transport = transport
        self._token_cache: TokenCache = token_cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def access_checking(self, cache: bool = False) -> bool:
        """Verify that the configured token is accepted by the API.

        With *cache* set, a token already validated for this origin is
        accepted without a request.  A successful probe is remembered in
        the token cache.

        Raises
        ------
        InvalidTokenError
            If the API rejects the token.
        NotFoundError
            If the API reports the probe id as malformed.
        UnexpectedResponseError
            If the API is unreachable or answers unexpectedly.
        """
        token = self._config.token
        origin = self._config.origin

        if cache and self._token_cache.has(token, origin):
            return True

        self._send(request_builder.build_probe_url(self._config))
        self._token_cache.add(token, origin)
        return True

    def get_videos(self, title: str) -> list[Any]:
        """Search materials by *title*.

        Returns the converted videos in the order the API listed them.

        Raises
        ------
        InvalidArgumentError
            If *title* is not a string.
        EmptyQueryError
            If *title* is empty.
        QueryTooShortError
            If *title* is shorter than three characters.
        NotFoundError
            If the API returns no usable record.
        InvalidTokenError, UnexpectedResponseError
            On API or transport errors.
        """
        request_builder.validate_title(title)
        response = self._send(request_builder.build_title_url(self._config, title))
        return interpret_videos(extract_results(response), self._config.video_factory)

    def get_video(self, id: str) -> Any:
        """Look up a single material by its Kodik *id*.

        Raises
        ------
        InvalidArgumentError
            If *id* is empty.
        UnexpectedResponseError
            If the first result is missing or unusable, or on
            transport errors.
        NotFoundError, InvalidTokenError
            On API errors.
        """
        if not isinstance(id, str) or not id:
            raise InvalidArgumentError("Requested material id is missing.")
        response = self._send(request_builder.build_id_url(self._config, id))
        return interpret_video(extract_results(response), self._config.video_factory)

    def download_feed(
        self,
        feed: FeedDescriptor,
        file_path: str | Path,
        on_progress: Callable[[int], None] | None = None,
    ) -> None:
        """Accept a feed download request.

        Kodik feeds are not downloaded by this client; the call returns
        without touching the network or the filesystem.
        """
        logger.debug("Feed download not supported: %s -> %s", feed.name, file_path)

    # ------------------------------------------------------------------
    # Transport delegation (safe boundary)
    # ------------------------------------------------------------------

    def _send(self, url: str) -> HttpResponse:
        """Issue one GET and translate transport failures."""
        try:
            return self._transport.send_get(url)
        except TransportFailure as exc:
            mapped = map_transport_failure(exc)
            if mapped is None:
                raise
            raise mapped from exc
