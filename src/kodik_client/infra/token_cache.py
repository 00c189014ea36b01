"""Token-cache implementations of :class:`~kodik_client.core.protocols.TokenCache`.

Both caches remember that a ``(token, origin)`` pair passed an access
check for ``ttl`` seconds.  Writes are serialised with a lock, so
concurrent ``add`` calls for the same key store a single entry.

:class:`FileTokenCache` persists entries as JSON so the CLI can skip
re-validation across invocations.  Tokens are stored as SHA-256
digests, never in clear text.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
import time
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TTL: float = 24 * 60 * 60


class InMemoryTokenCache:
    """Process-local token cache with per-entry expiry."""

    def __init__(
        self,
        ttl: float = DEFAULT_TTL,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self._ttl = ttl
        self._clock = clock
        self._expires: dict[tuple[str, str], float] = {}
        self._lock = threading.Lock()

    def has(self, token: str, origin: str) -> bool:
        with self._lock:
            expires_at = self._expires.get((token, origin))
            if expires_at is None:
                return False
            if expires_at <= self._clock():
                del self._expires[(token, origin)]
                return False
            return True

    def add(self, token: str, origin: str) -> None:
        with self._lock:
            self._expires[(token, origin)] = self._clock() + self._ttl


class FileTokenCache:
    """JSON-file backed token cache.

    The file maps ``"<origin>:<sha256(token)>"`` to a UNIX expiry
    timestamp.  A missing or unreadable file is treated as empty; it is
    rewritten on the next :meth:`add`.
    """

    def __init__(
        self,
        path: str | Path,
        ttl: float = DEFAULT_TTL,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self._path = Path(path)
        self._ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()

    def has(self, token: str, origin: str) -> bool:
        with self._lock:
            expires_at = self._load().get(self._key(token, origin))
        hit = expires_at is not None and expires_at > self._clock()
        logger.debug("Token cache %s for origin %s", "hit" if hit else "miss", origin)
        return hit

    def add(self, token: str, origin: str) -> None:
        with self._lock:
            now = self._clock()
            entries = {
                key: expires_at
                for key, expires_at in self._load().items()
                if expires_at > now
            }
            entries[self._key(token, origin)] = now + self._ttl
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(entries, sort_keys=True), encoding="utf-8")
            tmp_path.replace(self._path)
        logger.debug("Token cached for origin %s in %s", origin, self._path)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _key(token: str, origin: str) -> str:
        digest = hashlib.sha256(token.encode("utf-8")).hexdigest()
        return f"{origin}:{digest}"

    def _load(self) -> dict[str, float]:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable token cache %s: %s", self._path, exc)
            return {}
        if not isinstance(raw, dict):
            return {}
        return {
            str(key): float(value)
            for key, value in raw.items()
            if isinstance(value, (int, float)) and not isinstance(value, bool)
        }
