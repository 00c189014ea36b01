"""Single source of truth for the kodik-client version."""

__version__: str = "0.1.0"
