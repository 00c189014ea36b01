"""Core / service layer — request construction and response interpretation.

Rules
-----
* No ``print()`` calls.
* No direct network or filesystem I/O; the transport and token cache
  are injected.
* No imports from ``cli`` or ``infra``.
"""

from kodik_client.core.kodik_api import KodikApi
from kodik_client.core.models import FeedDescriptor, HttpResponse, KodikVideo, SourceConfig
from kodik_client.core.protocols import RawRecordToVideo, TokenCache, Transport

__all__: list[str] = [
    "FeedDescriptor",
    "HttpResponse",
    "KodikApi",
    "KodikVideo",
    "RawRecordToVideo",
    "SourceConfig",
    "TokenCache",
    "Transport",
]
