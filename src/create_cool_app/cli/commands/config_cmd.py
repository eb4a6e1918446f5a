"""Top-level ``create-cool-app config`` command."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from create_cool_app.core.settings import config_file, load_settings, save_setting
from create_cool_app.errors import SettingsError

console = Console()


def config(
    set_value: Optional[str] = typer.Option(
        None,
        "--set",
        help="Persist a default as KEY=VALUE (e.g. defaults.package_manager=npm)",
    ),
) -> None:
    """Display the effective settings, or change one with --set."""
    if set_value is not None:
        key, sep, value = set_value.partition("=")
        if not sep:
            console.print("[red]Error:[/red] --set expects KEY=VALUE")
            raise typer.Exit(1)
        try:
            path = save_setting(key.strip(), value.strip())
        except SettingsError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1)
        console.print(f"[green]✓[/green] {key.strip()} set to [cyan]{value.strip()}[/cyan] in {path}")
        return

    try:
        settings = load_settings()
    except SettingsError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)

    origin = str(settings.source) if settings.source else "built-in defaults"
    table = Table(title="create-cool-app settings", show_lines=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="bold")
    table.add_row("defaults.template", settings.template)
    table.add_row("defaults.package_manager", settings.package_manager)
    table.add_row("defaults.commit_message", settings.commit_message)
    table.add_row("templates.root", str(settings.template_root) if settings.template_root else "(bundled)")
    console.print(table)
    console.print(f"[dim]Source: {origin} (config file: {config_file()})[/dim]")


__all__ = ["config"]
