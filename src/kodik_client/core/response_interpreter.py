"""Validation of successful search payloads.

A successful Kodik answer is a JSON object whose ``results`` array holds
raw records.  Only *usable* records — non-empty mappings with a truthy
``id`` — are ever handed to the video factory.
"""

from __future__ import annotations

from typing import Any

from kodik_client.core.models import HttpResponse, RawRecord
from kodik_client.core.protocols import RawRecordToVideo
from kodik_client.exceptions import NotFoundError, UnexpectedResponseError

_UNPROCESSABLE = "Cannot process Kodik response."


def extract_results(response: HttpResponse) -> list[Any]:
    """Decode *response* and return its ``results`` array.

    Raises
    ------
    UnexpectedResponseError
        If the body is not JSON or carries no ``results`` list.
    """
    try:
        payload = response.json()
    except ValueError as exc:
        raise UnexpectedResponseError(_UNPROCESSABLE) from exc

    results = payload.get("results") if isinstance(payload, dict) else None
    if not isinstance(results, list):
        raise UnexpectedResponseError(_UNPROCESSABLE)
    return results


def is_usable_record(record: object) -> bool:
    """``True`` for a non-empty mapping with a truthy ``id`` value."""
    return isinstance(record, dict) and bool(record) and bool(record.get("id"))


def interpret_videos(results: list[Any], factory: RawRecordToVideo) -> list[Any]:
    """Convert every usable record of a title search, keeping order.

    Raises
    ------
    NotFoundError
        If no usable record is left after filtering.
    """
    usable: list[RawRecord] = [record for record in results if is_usable_record(record)]
    if not usable:
        raise NotFoundError("No material found for this query.")
    return [factory(record) for record in usable]


def interpret_video(results: list[Any], factory: RawRecordToVideo) -> Any:
    """Convert the first record of an id lookup.

    Raises
    ------
    UnexpectedResponseError
        If there is no first record or it is not usable.
    """
    first = results[0] if results else None
    if not is_usable_record(first):
        raise UnexpectedResponseError(_UNPROCESSABLE)
    return factory(first)
