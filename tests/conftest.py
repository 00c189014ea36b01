"""Shared pytest fixtures and configuration for the kodik-client test suite.

Guidelines
----------
* No internet access in any test.
* httpx is mocked at the infra boundary with ``httpx.MockTransport``.
* Core tests use ``MagicMock`` collaborators and must be pure.
* Tests must not depend on the caller's ``KODIK_*`` environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from kodik_client.core.models import SourceConfig
from kodik_client.settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Drop ``KODIK_*`` variables, hide any ``.env`` and reset the cache."""
    for name in list(os.environ):
        if name.startswith("KODIK_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

    # The CLI detaches the package logger from root; undo it for caplog.
    package_logger = logging.getLogger("kodik_client")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def video_factory() -> MagicMock:
    """Factory that returns ``("video", record_id)`` for every call."""
    return MagicMock(side_effect=lambda record: ("video", record["id"]))


@pytest.fixture
def source_config(video_factory: MagicMock) -> SourceConfig:
    return SourceConfig(
        token="secret-token",
        scheme="https",
        host="kodikapi.com",
        base_path="",
        origin="kodik",
        video_factory=video_factory,
    )

