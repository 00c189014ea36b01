"""CLI application entry point and command routing for kodik-client.

This module is the **sole error boundary** for the entire application.
It catches :class:`~kodik_client.exceptions.KodikError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :class:`~kodik_client.core.kodik_api.KodikApi`.
* Command results go to stdout, messages to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from kodik_client.cli import exit_codes
from kodik_client.cli.console import console
from kodik_client.cli.logging_setup import configure_logging
from kodik_client.core.kodik_api import KodikApi
from kodik_client.exceptions import KodikError, TransportFailure
from kodik_client.settings import KodikSettings, get_settings
from kodik_client.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``kodik-client check [--cache]``  — validate the token
    * ``kodik-client search TITLE``     — search materials by title
    * ``kodik-client get ID``           — look up one material
    * ``kodik-client --version``
    """
    parser = argparse.ArgumentParser(
        prog="kodik-client",
        description="Search the Kodik video database.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log HTTP requests and cache activity to stderr.",
    )

    commands = parser.add_subparsers(dest="command")

    check = commands.add_parser("check", help="Validate the configured API token.")
    check.add_argument(
        "--cache",
        action="store_true",
        help="Skip the request when the token was validated recently.",
    )

    search = commands.add_parser("search", help="Search materials by title.")
    search.add_argument("title", help="Title to search for (at least 3 characters).")

    get = commands.add_parser("get", help="Look up a material by its Kodik id.")
    get.add_argument("id", help="Kodik material id, e.g. movie-12345.")

    return parser


# ---------------------------------------------------------------------------
# Client wiring
# ---------------------------------------------------------------------------

@contextmanager
def _open_api(settings: KodikSettings) -> Iterator[KodikApi]:
    """Build a :class:`KodikApi` from *settings* and close it afterwards."""
    from kodik_client.infra.httpx_transport import HttpxTransport
    from kodik_client.infra.token_cache import FileTokenCache, InMemoryTokenCache

    config = settings.to_source_config()
    token_cache = (
        FileTokenCache(settings.cache_path, ttl=settings.cache_ttl)
        if settings.cache_path is not None
        else InMemoryTokenCache(ttl=settings.cache_ttl)
    )
    with HttpxTransport(timeout=settings.timeout) as transport:
        yield KodikApi(config, transport, token_cache)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_check(api: KodikApi, args: argparse.Namespace) -> int:
    api.access_checking(cache=args.cache)
    console.print("[bold green]Kodik API token is valid.[/bold green]")
    return exit_codes.SUCCESS


def _handle_search(api: KodikApi, args: argparse.Namespace) -> int:
    from kodik_client.cli.render import render_videos

    videos = api.get_videos(args.title)
    render_videos(videos, title=f"Kodik results for “{args.title}”")
    console.print(f"[dim]{len(videos)} material(s) found.[/dim]")
    return exit_codes.SUCCESS


def _handle_get(api: KodikApi, args: argparse.Namespace) -> int:
    from kodik_client.cli.render import render_video

    render_video(api.get_video(args.id))
    return exit_codes.SUCCESS


_HANDLERS: dict[str, Callable[[KodikApi, argparse.Namespace], int]] = {
    "check": _handle_check,
    "search": _handle_search,
    "get": _handle_get,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the kodik-client CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)

    handler = _HANDLERS[args.command]
    with _open_api(get_settings()) as api:
        return handler(api, args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except KodikError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.for_error(exc))
    except TransportFailure as exc:
        console.print(f"[bold red]Request failed:[/bold red] {exc}")
        sys.exit(exit_codes.for_error(exc))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
