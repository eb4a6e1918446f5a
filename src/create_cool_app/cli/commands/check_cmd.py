"""The ``check`` command: report which external tools are installed."""

from __future__ import annotations

import shutil

from rich.console import Console

from create_cool_app.core.tracker import StepTracker

console = Console()

TOOL_REQUIREMENTS: dict[str, tuple[str, str]] = {
    "git": ("Git version control", "https://git-scm.com/downloads"),
    "pnpm": ("pnpm package manager", "https://pnpm.io/installation"),
    "npm": ("npm package manager", "https://nodejs.org/en/download"),
    "yarn": ("Yarn package manager", "https://yarnpkg.com/getting-started/install"),
}


def check_tool(tool: str) -> bool:
    """Check if a tool is installed."""
    return shutil.which(tool) is not None


def check_tool_for_tracker(tool: str, tracker: StepTracker) -> bool:
    """Check if a tool is installed and update tracker."""
    if check_tool(tool):
        tracker.complete(tool, "available")
        return True
    tracker.error(tool, f"not found, see {TOOL_REQUIREMENTS[tool][1]}")
    return False


def check() -> None:
    """Check that git and the supported package managers are installed."""
    console.print("[bold]Checking for installed tools...[/bold]\n")
    tracker = StepTracker("Check Available Tools")
    for tool, (label, _url) in TOOL_REQUIREMENTS.items():
        tracker.add(tool, label)

    found = {tool: check_tool_for_tracker(tool, tracker) for tool in TOOL_REQUIREMENTS}
    console.print(tracker.render())

    if not any(found[manager] for manager in ("pnpm", "npm", "yarn")):
        console.print("\n[yellow]No package manager found; projects can be created but not installed.[/yellow]")
    else:
        console.print("\n[bold green]create-cool-app is ready to use![/bold green]")
    if not found["git"]:
        console.print("[dim]Tip: Install git to initialize repositories with --git[/dim]")


__all__ = ["TOOL_REQUIREMENTS", "check", "check_tool", "check_tool_for_tracker"]
