"""Tests for the transport-failure mapping table (core/error_mapping.py).

The mapping is a pure function, so these tests call it directly with
hand-built failures — no client, no transport.
"""

from __future__ import annotations

import json

import pytest

from kodik_client.core.error_mapping import (
    INVALID_ID_FORMAT_MESSAGE,
    INVALID_TOKEN_MESSAGE,
    map_transport_failure,
)
from kodik_client.exceptions import (
    ClientErrorResponse,
    ConnectFailure,
    InvalidTokenError,
    NotFoundError,
    ServerErrorResponse,
    TransportFailure,
    UnexpectedResponseError,
)


def _server_error(payload: object, status_code: int = 500) -> ServerErrorResponse:
    return ServerErrorResponse(status_code, json.dumps(payload).encode("utf-8"))


class TestConnectionFailures:
    def test_connect_failure_is_unexpected_response(self) -> None:
        error = map_transport_failure(ConnectFailure("refused"))
        assert isinstance(error, UnexpectedResponseError)
        assert "Cannot connect to Kodik" in str(error)

    def test_connect_message_differs_from_http_message(self) -> None:
        connect = map_transport_failure(ConnectFailure("refused"))
        client = map_transport_failure(ClientErrorResponse(404))
        assert str(connect) != str(client)


class TestClientErrors:
    @pytest.mark.parametrize("status_code", [400, 403, 404, 429])
    def test_4xx_reports_status_code(self, status_code: int) -> None:
        error = map_transport_failure(ClientErrorResponse(status_code))
        assert isinstance(error, UnexpectedResponseError)
        assert str(error) == f"Unexpected Kodik response code: {status_code}"


class TestServerErrors:
    def test_invalid_token(self) -> None:
        error = map_transport_failure(_server_error({"error": INVALID_TOKEN_MESSAGE}))
        assert isinstance(error, InvalidTokenError)
        assert str(error) == "Invalid Kodik API token."

    def test_invalid_id_format_is_not_found(self) -> None:
        error = map_transport_failure(
            _server_error({"error": INVALID_ID_FORMAT_MESSAGE}, status_code=502)
        )
        assert isinstance(error, NotFoundError)
        assert str(error) == "Requested material not found."

    @pytest.mark.parametrize(
        "body",
        [
            json.dumps({"error": "Что-то другое"}).encode("utf-8"),
            json.dumps({"message": INVALID_TOKEN_MESSAGE}).encode("utf-8"),
            json.dumps({"error": None}).encode("utf-8"),
            json.dumps([INVALID_TOKEN_MESSAGE]).encode("utf-8"),
            b"<html>Bad Gateway</html>",
            b"",
        ],
    )
    def test_other_bodies_are_unexpected_response(self, body: bytes) -> None:
        error = map_transport_failure(ServerErrorResponse(500, body))
        assert isinstance(error, UnexpectedResponseError)
        assert str(error) == "Unexpected Kodik API response."

    def test_match_is_exact(self) -> None:
        error = map_transport_failure(_server_error({"error": INVALID_TOKEN_MESSAGE + "."}))
        assert isinstance(error, UnexpectedResponseError)

    def test_each_call_returns_a_fresh_error(self) -> None:
        failure = _server_error({"error": INVALID_TOKEN_MESSAGE})
        assert map_transport_failure(failure) is not map_transport_failure(failure)


class TestUnmappedFailures:
    def test_generic_failure_has_no_mapping(self) -> None:
        assert map_transport_failure(TransportFailure("read timeout")) is None
