"""Process exit codes of the ``kodik-client`` command.

Scripts calling the CLI can tell a rejected token from a missing
material or a broken connection without parsing stderr.
:func:`for_error` picks the code for an error caught by the boundary in
:func:`kodik_client.cli.app.cli`.
"""

from __future__ import annotations

from kodik_client.exceptions import (
    InvalidTokenError,
    KodikError,
    NotFoundError,
    TransportFailure,
)

SUCCESS: int = 0
"""Command completed."""

GENERAL_ERROR: int = 1
"""Any other :class:`KodikError`: bad query, configuration, unexpected answer."""

UNEXPECTED_ERROR: int = 2
"""A bug: an exception outside the known hierarchies."""

INVALID_TOKEN: int = 3
"""The API rejected ``KODIK_TOKEN``."""

NOT_FOUND: int = 4
"""No usable material matched the title or id."""

TRANSPORT_ERROR: int = 5
"""The request failed in a way the client has no rule for (timeout, redirect loop)."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C (128 + SIGINT)."""


def for_error(exc: KodikError | TransportFailure) -> int:
    """Return the exit code for an error caught at the CLI boundary."""
    if isinstance(exc, InvalidTokenError):
        return INVALID_TOKEN
    if isinstance(exc, NotFoundError):
        return NOT_FOUND
    if isinstance(exc, TransportFailure):
        return TRANSPORT_ERROR
    return GENERAL_ERROR
