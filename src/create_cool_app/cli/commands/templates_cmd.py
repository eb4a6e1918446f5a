"""Top-level ``create-cool-app templates`` command."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from create_cool_app.core.config import TEMPLATE_CHOICES, TEMPLATE_PACKAGE_MANAGERS
from create_cool_app.template.manager import bundled_templates_root, list_templates

console = Console()


def templates() -> None:
    """List the bundled templates and the package managers each supports."""
    available = set(list_templates())
    table = Table(title="Bundled templates")
    table.add_column("Template", style="cyan")
    table.add_column("Description")
    table.add_column("Package managers", style="magenta")
    for key, description in TEMPLATE_CHOICES.items():
        name = key if key in available else f"{key} [red](missing)[/red]"
        table.add_row(name, description, ", ".join(TEMPLATE_PACKAGE_MANAGERS[key]))
    console.print(table)
    console.print(f"[dim]Location: {bundled_templates_root()}[/dim]")


__all__ = ["templates"]
