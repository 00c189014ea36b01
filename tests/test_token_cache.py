"""Tests for the token caches (infra/token_cache.py).

A controllable clock replaces real time so expiry is deterministic.
"""

from __future__ import annotations

import hashlib
import json
import threading
from pathlib import Path

import pytest

from kodik_client.infra.token_cache import FileTokenCache, InMemoryTokenCache


class _Clock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


# ---------------------------------------------------------------------------
# InMemoryTokenCache
# ---------------------------------------------------------------------------

class TestInMemoryTokenCache:
    def test_unknown_token_is_not_cached(self) -> None:
        assert not InMemoryTokenCache().has("token", "kodik")

    def test_added_token_is_cached(self) -> None:
        cache = InMemoryTokenCache()
        cache.add("token", "kodik")
        assert cache.has("token", "kodik")

    def test_key_includes_origin(self) -> None:
        cache = InMemoryTokenCache()
        cache.add("token", "kodik")
        assert not cache.has("token", "mirror")
        assert not cache.has("other", "kodik")

    def test_entry_expires_after_ttl(self) -> None:
        clock = _Clock()
        cache = InMemoryTokenCache(ttl=60, clock=clock)
        cache.add("token", "kodik")

        clock.now += 59
        assert cache.has("token", "kodik")
        clock.now += 1
        assert not cache.has("token", "kodik")

    def test_non_positive_ttl_rejected(self) -> None:
        with pytest.raises(ValueError):
            InMemoryTokenCache(ttl=0)

    def test_concurrent_adds_store_one_entry(self) -> None:
        cache = InMemoryTokenCache()
        threads = [
            threading.Thread(target=cache.add, args=("token", "kodik")) for _ in range(16)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(cache._expires) == 1


# ---------------------------------------------------------------------------
# FileTokenCache
# ---------------------------------------------------------------------------

class TestFileTokenCache:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert not FileTokenCache(tmp_path / "tokens.json").has("token", "kodik")

    def test_entries_survive_new_instance(self, tmp_path: Path) -> None:
        path = tmp_path / "cache" / "tokens.json"
        FileTokenCache(path).add("token", "kodik")

        assert FileTokenCache(path).has("token", "kodik")
        assert not FileTokenCache(path).has("token", "mirror")

    def test_token_not_stored_in_clear_text(self, tmp_path: Path) -> None:
        path = tmp_path / "tokens.json"
        FileTokenCache(path).add("super-secret", "kodik")

        content = path.read_text(encoding="utf-8")
        assert "super-secret" not in content
        digest = hashlib.sha256(b"super-secret").hexdigest()
        assert list(json.loads(content)) == [f"kodik:{digest}"]

    def test_entry_expires_after_ttl(self, tmp_path: Path) -> None:
        clock = _Clock()
        cache = FileTokenCache(tmp_path / "tokens.json", ttl=60, clock=clock)
        cache.add("token", "kodik")

        clock.now += 61
        assert not cache.has("token", "kodik")

    def test_expired_entries_pruned_on_add(self, tmp_path: Path) -> None:
        path = tmp_path / "tokens.json"
        clock = _Clock()
        cache = FileTokenCache(path, ttl=60, clock=clock)
        cache.add("old", "kodik")

        clock.now += 120
        cache.add("new", "kodik")

        assert len(json.loads(path.read_text(encoding="utf-8"))) == 1

    @pytest.mark.parametrize("content", ["not json", "[1, 2]", '{"kodik:x": "soon"}'])
    def test_unreadable_file_is_treated_as_empty(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "tokens.json"
        path.write_text(content, encoding="utf-8")
        cache = FileTokenCache(path)

        assert not cache.has("token", "kodik")
        cache.add("token", "kodik")
        assert cache.has("token", "kodik")
