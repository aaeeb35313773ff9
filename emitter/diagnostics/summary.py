"""Summaries of what an emitter currently holds."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from ..core import Emitter, OnceListener


def describe(emitter: Emitter) -> dict[str, dict[str, int]]:
    """Return listener counts per event name."""
    summary: dict[str, dict[str, int]] = {}
    for event in emitter.event_names():
        listeners = emitter.listeners(event)
        summary[event] = {
            "listeners": len(listeners),
            "once": sum(1 for listener in listeners if isinstance(listener, OnceListener)),
        }
    return summary


def render_table(emitter: Emitter, console: Console | None = None) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Event")
    table.add_column("Listeners", justify="right")
    table.add_column("Once", justify="right")
    for event, counts in sorted(describe(emitter).items()):
        table.add_row(event, str(counts["listeners"]), str(counts["once"]))
    if console is None:
        console = Console()
    console.print(table)
    return table
