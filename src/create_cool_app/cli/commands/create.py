"""The ``create`` command: collect answers, then run the scaffolding pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from create_cool_app.cli.commands.create_help import CREATE_COMMAND_DOC
from create_cool_app.cli.prompts import collect_answers
from create_cool_app.core.answers import AnswerSet
from create_cool_app.core.logs import configure_logging
from create_cool_app.core.process import CommandRunner
from create_cool_app.core.settings import load_settings
from create_cool_app.core.tracker import StepTracker
from create_cool_app.errors import PreconditionError, ScaffoldError
from create_cool_app.orchestrator.pipeline import ScaffoldPipeline
from create_cool_app.template.manager import resolve_template_dir

RunnerFactory = Callable[..., CommandRunner]


def _setup_panel(answers: AnswerSet, base_dir: Path, template_dir: Path, dry_run: bool) -> Panel:
    lines = [
        "[cyan]Project Setup[/cyan]" + (" [blue](dry run)[/blue]" if dry_run else ""),
        "",
        f"{'Project':<16} [green]{answers.project_name}[/green]",
        f"{'Target Path':<16} [dim]{base_dir / answers.project_name}[/dim]",
        f"{'Template':<16} {answers.template} [dim]({template_dir})[/dim]",
        f"{'Package Manager':<16} {answers.package_manager}",
        f"{'Install':<16} {'yes' if answers.need_install else 'no'}",
        f"{'Git':<16} {'yes' if answers.need_git_init else 'no'}",
    ]
    if answers.remote_url:
        lines.append(f"{'Remote':<16} {answers.remote_url}")
        lines.append(f"{'Push':<16} {'yes' if answers.should_push else 'no'}")
    return Panel("\n".join(lines), border_style="cyan", padding=(1, 2))


def register_create_command(
    app: typer.Typer,
    *,
    console: Console,
    show_banner: Callable[[], None],
    runner_factory: RunnerFactory = CommandRunner,
) -> None:
    """Attach ``create`` to ``app`` with injectable console and process runner."""

    @app.command("create", help=CREATE_COMMAND_DOC)
    def create(
        target_dir: Path = typer.Argument(Path("."), help="Directory the project folder is created in"),
        dry: bool = typer.Option(False, "--dry", "--dry-run", help="Print every command and file operation instead of running it"),
        name: Optional[str] = typer.Option(None, "--name", "-n", help="Project name (no spaces or commas)"),
        template: Optional[str] = typer.Option(None, "--template", "-t", help="Template: library, library-ts or ts-mono"),
        package_manager: Optional[str] = typer.Option(None, "--pm", help="Package manager: pnpm, npm or yarn"),
        install: Optional[bool] = typer.Option(None, "--install/--no-install", help="Install dependencies after copying"),
        git: Optional[bool] = typer.Option(None, "--git/--no-git", help="Initialize a git repository"),
        remote: Optional[str] = typer.Option(None, "--remote", help="URL added as git remote 'origin' (requires --git)"),
        push: Optional[bool] = typer.Option(None, "--push/--no-push", help="Commit and push to the remote"),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not prompt; use flags and configured defaults"),
        template_root: Optional[str] = typer.Option(None, "--template-root", help="Directory containing template-* folders"),
        debug: bool = typer.Option(False, "--debug", help="Show verbose diagnostic logging"),
    ) -> None:
        configure_logging(debug)
        show_banner()

        base_dir = target_dir.expanduser().resolve()
        try:
            settings = load_settings()
            answers = collect_answers(
                base_dir,
                console=console,
                settings=settings,
                interactive=not yes,
                project_name=name,
                template=template,
                package_manager=package_manager,
                install=install,
                git_init=git,
                remote_url=remote,
                push=push,
            )
            template_dir = resolve_template_dir(answers.template, template_root, settings, output=console)
        except ScaffoldError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1)

        console.print(_setup_panel(answers, base_dir, template_dir, dry))

        tracker = StepTracker(f"Create {answers.project_name}")
        pipeline = ScaffoldPipeline(
            answers,
            template_dir=template_dir,
            base_dir=base_dir,
            runner=runner_factory(console, dry_run=dry),
            console=console,
            settings=settings,
            dry_run=dry,
            tracker=tracker,
            show_tracker=True,
        )
        try:
            pipeline.run()
        except PreconditionError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1)
        except (ScaffoldError, OSError) as exc:
            console.print(tracker.render())
            console.print(Panel(f"Scaffolding failed: {exc}", title="Failure", border_style="red"))
            raise typer.Exit(1)


__all__ = ["register_create_command"]
