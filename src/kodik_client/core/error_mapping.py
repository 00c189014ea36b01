"""Translation of transport failures into typed client errors.

:func:`map_transport_failure` is the single place that knows how the
Kodik API reports problems.  It is a pure function: it inspects the
failure and *returns* the error to raise, leaving the raising (and
exception chaining) to the caller.

Server-side errors are told apart by the exact, localised ``error``
string the API puts in its 5xx bodies.  Those strings are listed in
:data:`SERVER_ERROR_MESSAGES` and nowhere else.
"""

from __future__ import annotations

import json
from collections.abc import Callable

from kodik_client.exceptions import (
    ClientErrorResponse,
    ConnectFailure,
    InvalidTokenError,
    KodikError,
    NotFoundError,
    ServerErrorResponse,
    TransportFailure,
    UnexpectedResponseError,
)

INVALID_TOKEN_MESSAGE: str = "Отсутствует или неверный токен"
"""API error text for a missing or invalid token."""

INVALID_ID_FORMAT_MESSAGE: str = "Неправильный формат: id"
"""API error text for an id that matches no material."""

SERVER_ERROR_MESSAGES: dict[str, Callable[[], KodikError]] = {
    INVALID_TOKEN_MESSAGE: lambda: InvalidTokenError(
        "Invalid Kodik API token.",
        hint="Check the KODIK_TOKEN setting.",
    ),
    INVALID_ID_FORMAT_MESSAGE: lambda: NotFoundError(
        "Requested material not found.",
    ),
}


def map_transport_failure(failure: TransportFailure) -> KodikError | None:
    """Return the typed error for *failure*, or ``None`` if it has no rule.

    Rules
    -----
    * Connection failure → :class:`UnexpectedResponseError`.
    * 4xx → :class:`UnexpectedResponseError` carrying the status code.
    * 5xx → looked up in :data:`SERVER_ERROR_MESSAGES` by the body's
      ``error`` field; anything else → :class:`UnexpectedResponseError`.
    * Other failures → ``None``; the caller re-raises them unchanged.
    """
    if isinstance(failure, ConnectFailure):
        return UnexpectedResponseError(
            "Cannot connect to Kodik.",
            hint="Check your network connection and the KODIK_HOST setting.",
        )

    if isinstance(failure, ClientErrorResponse):
        return UnexpectedResponseError(
            f"Unexpected Kodik response code: {failure.status_code}",
        )

    if isinstance(failure, ServerErrorResponse):
        factory = SERVER_ERROR_MESSAGES.get(_server_error_text(failure.body) or "")
        if factory is not None:
            return factory()
        return UnexpectedResponseError("Unexpected Kodik API response.")

    return None


def _server_error_text(body: bytes) -> str | None:
    """Pull the ``error`` string out of a 5xx body, if there is one."""
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    return error if isinstance(error, str) else None
