"""Result rendering for the CLI layer.

Search results are shown as a Rich table; without Rich a fixed-width
plain-text table is printed instead.  Nothing here talks to the API.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from kodik_client.cli.console import output
from kodik_client.core.models import KodikVideo


def _import_rich_table() -> type[Any] | None:
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return None
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _format_year(year: int | None) -> str:
    return str(year) if year is not None else "—"


def _format_title(video: KodikVideo) -> str:
    """``"Title (Original)"`` or just the title when they match."""
    if video.title_orig and video.title_orig != video.title:
        return f"{video.title} ({video.title_orig})"
    return video.title


def _format_episodes(video: KodikVideo) -> str:
    if video.episodes_count is None:
        return "—"
    if video.last_season is not None:
        return f"S{video.last_season} / {video.episodes_count} ep."
    return f"{video.episodes_count} ep."


def video_row(video: KodikVideo) -> tuple[str, ...]:
    """Cells of one table row, in column order."""
    return (
        video.id,
        _format_title(video),
        _format_year(video.year),
        video.type,
        video.translation or "—",
        video.quality or "—",
        _format_episodes(video),
    )


_COLUMNS: tuple[str, ...] = (
    "ID",
    "Title",
    "Year",
    "Type",
    "Translation",
    "Quality",
    "Episodes",
)


# ---------------------------------------------------------------------------
# Public renderers
# ---------------------------------------------------------------------------

def render_videos(videos: Sequence[KodikVideo], *, title: str = "Kodik results") -> None:
    """Print *videos* as a table."""
    table_class = _import_rich_table()
    rows = [video_row(video) for video in videos]

    if table_class is None:
        _print_plain_table(rows)
        return

    table = table_class(
        title=title,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title")
    table.add_column("Year", justify="right")
    table.add_column("Type")
    table.add_column("Translation")
    table.add_column("Quality")
    table.add_column("Episodes", justify="right")
    for row in rows:
        table.add_row(*row)

    output.print(table)


def render_video(video: KodikVideo) -> None:
    """Print the details of a single video."""
    output.print(f"[bold cyan]Title:[/bold cyan]  {_format_title(video)}")
    output.print(f"[bold cyan]ID:[/bold cyan]     {video.id}")
    output.print(f"[bold cyan]Type:[/bold cyan]   {video.type}")
    output.print(f"[bold cyan]Year:[/bold cyan]   {_format_year(video.year)}")
    if video.translation:
        output.print(f"[bold cyan]Voice:[/bold cyan]  {video.translation}")
    if video.quality:
        output.print(f"[bold cyan]Quality:[/bold cyan] {video.quality}")
    if video.episodes_count is not None:
        output.print(f"[bold cyan]Episodes:[/bold cyan] {_format_episodes(video)}")
    if video.link:
        output.print(f"[bold cyan]Player:[/bold cyan] {video.link}")


def _print_plain_table(rows: list[tuple[str, ...]]) -> None:
    """Render rows without Rich."""
    widths = [
        max([len(column)] + [len(row[index]) for row in rows])
        for index, column in enumerate(_COLUMNS)
    ]
    header = "  ".join(column.ljust(width) for column, width in zip(_COLUMNS, widths))
    print(header)
    print("-" * len(header))
    for row in rows:
        print("  ".join(cell.ljust(width) for cell, width in zip(row, widths)))
