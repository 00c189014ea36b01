"""Infrastructure layer — external system integration.

This layer wraps all interaction with httpx and the filesystem.  Every
raw third-party exception must be caught here and re-raised as a
:class:`~kodik_client.exceptions.TransportFailure` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from kodik_client.infra.httpx_transport import HttpxTransport
from kodik_client.infra.token_cache import FileTokenCache, InMemoryTokenCache

__all__: list[str] = [
    "FileTokenCache",
    "HttpxTransport",
    "InMemoryTokenCache",
]
