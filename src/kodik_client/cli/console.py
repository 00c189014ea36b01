"""CLI console helpers with optional Rich support.

Two proxies are exported: :data:`console` writes status and error
messages to stderr, :data:`output` writes command results to stdout so
they can be piped.  Rich is imported lazily, so ``--help`` and
``--version`` keep working when it is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any, TextIO

from kodik_client.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z0-9 #_.=-]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console targeting stderr (default) or stdout."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


def strip_markup(text: str) -> str:
    """Remove Rich markup tags such as ``[bold]`` from *text*."""
    return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain-text fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    @property
    def _stream(self) -> TextIO:
        return sys.stderr if self._stderr else sys.stdout

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain ``print``."""
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            plain = [strip_markup(obj) if isinstance(obj, str) else obj for obj in objects]
            print(*plain, file=self._stream)
            return
        rich_console.print(*objects)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
