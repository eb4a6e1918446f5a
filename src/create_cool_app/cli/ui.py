"""Reusable UI helpers for create-cool-app interactions."""

from __future__ import annotations

from typing import Dict

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table


def get_key() -> str:
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()

    if key in (readchar.key.UP, readchar.key.CTRL_P):
        return "up"
    if key in (readchar.key.DOWN, readchar.key.CTRL_N):
        return "down"
    if key == readchar.key.ENTER:
        return "enter"
    if key in (readchar.key.ESC, "\x1b"):
        return "escape"
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt
    return key


def select_with_arrows(
    options: Dict[str, str],
    prompt_text: str = "Select an option",
    default_key: str | None = None,
    console: Console | None = None,
) -> str:
    """Pick one key of ``options`` with the arrow keys.

    A single option is returned without drawing anything.
    """
    console = console or Console()
    option_keys = list(options.keys())
    if len(option_keys) == 1:
        return option_keys[0]
    selected_index = option_keys.index(default_key) if default_key in option_keys else 0

    def build_panel() -> Panel:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")
        for i, key in enumerate(option_keys):
            pointer = "▶" if i == selected_index else " "
            table.add_row(pointer, f"[cyan]{key}[/cyan] [dim]({options[key]})[/dim]")
        table.add_row("", "")
        table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")
        return Panel(table, title=f"[bold]{prompt_text}[/bold]", border_style="cyan", padding=(1, 2))

    console.print()
    with Live(build_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Exit(1)
            if key == "up":
                selected_index = (selected_index - 1) % len(option_keys)
            elif key == "down":
                selected_index = (selected_index + 1) % len(option_keys)
            elif key == "enter":
                return option_keys[selected_index]
            elif key == "escape":
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Exit(1)
            live.update(build_panel(), refresh=True)


__all__ = [
    "get_key",
    "select_with_arrows",
]
