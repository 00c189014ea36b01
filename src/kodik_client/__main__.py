"""``python -m kodik_client check|search|get``: the same commands and exit codes as ``kodik-client``."""

from __future__ import annotations

from kodik_client.cli.app import cli

if __name__ == "__main__":
    cli()
