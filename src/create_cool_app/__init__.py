"""
create-cool-app - scaffold JavaScript and TypeScript projects from templates.

Usage:
    create-cool-app create
    create-cool-app create ~/code --name demo --template library --yes
    create-cool-app create --name demo --dry
"""

import sys

import typer
from rich.align import Align
from rich.console import Console
from rich.text import Text
from typer.core import TyperGroup

from create_cool_app.cli.commands import check, config, register_create_command, templates
from create_cool_app.core.config import BANNER, TAGLINE

__version__ = "0.1.0"

console = Console()


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help."""

    def format_help(self, ctx, formatter):
        show_banner()
        super().format_help(ctx, formatter)


app = typer.Typer(
    name="create-cool-app",
    help="Scaffold a new project from a bundled template",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


def show_banner():
    """Display the ASCII art banner."""
    banner_lines = BANNER.strip("\n").split("\n")
    colors = ["bright_blue", "blue", "cyan", "bright_cyan", "white"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        styled_banner.append(line + "\n", style=colors[i % len(colors)])

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


@app.callback()
def callback(ctx: typer.Context):
    """Show banner when no subcommand is provided."""
    if ctx.invoked_subcommand is None and "--help" not in sys.argv and "-h" not in sys.argv:
        show_banner()
        console.print(Align.center("[dim]Run 'create-cool-app --help' for usage information[/dim]"))
        console.print()


register_create_command(app, console=console, show_banner=show_banner)
app.command("check")(check)
app.command("config")(config)
app.command("templates")(templates)


def main():
    app()


if __name__ == "__main__":
    main()
