"""kodik-client — typed client for the Kodik video search API.

Builds search requests, sends them through an injected transport and
translates API failures into a small exception hierarchy.
"""

from kodik_client.version import __version__

__all__: list[str] = ["__version__"]
