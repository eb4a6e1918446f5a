"""Collect an :class:`AnswerSet` from flags and interactive prompts."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Sequence

import typer
from rich.console import Console

from create_cool_app.cli.ui import select_with_arrows
from create_cool_app.core.answers import (
    AnswerSet,
    allowed_package_managers,
    ensure_empty_directory,
    validate_project_name,
    validate_remote_url,
)
from create_cool_app.core.config import PACKAGE_MANAGER_CHOICES, TEMPLATE_CHOICES
from create_cool_app.core.settings import UserSettings
from create_cool_app.errors import InvalidChoiceError, InvalidProjectNameError, PreconditionError


def _ask_text(message: str, default: Optional[str] = None) -> str:
    return typer.prompt(message, default=default, show_default=default is not None)


def _ask_confirm(message: str, default: bool = True) -> bool:
    return typer.confirm(message, default=default)


def _ask_choice(options: Dict[str, str], message: str, default: str, console: Console) -> str:
    return select_with_arrows(options, message, default_key=default, console=console)


def check_project_name(base_dir: Path, name: str) -> str:
    """Validate ``name`` and make sure ``base_dir / name`` can be scaffolded into."""
    validate_project_name(name)
    ensure_empty_directory(base_dir / name)
    return name


def _collect_project_name(base_dir: Path, given: Optional[str], interactive: bool, console: Console) -> str:
    if given is not None:
        return check_project_name(base_dir, given)
    if not interactive:
        raise InvalidProjectNameError("", "The name cannot be empty. Pass --name when using --yes.")
    while True:
        name = _ask_text("What's your project name?").strip()
        try:
            return check_project_name(base_dir, name)
        except PreconditionError as exc:
            console.print(f"[red]{exc}[/red]")


def _collect_choice(
    field: str,
    options: Dict[str, str],
    allowed: Sequence[str],
    given: Optional[str],
    default: str,
    message: str,
    interactive: bool,
    console: Console,
) -> str:
    if given is not None:
        if given not in allowed:
            raise InvalidChoiceError(field, given, allowed)
        return given
    if default not in allowed:
        default = allowed[0]
    if not interactive:
        return default
    return _ask_choice({key: options[key] for key in allowed}, message, default, console)


def _collect_remote_url(console: Console) -> str:
    while True:
        url = _ask_text("What's your remote git repository url?")
        try:
            return validate_remote_url(url)
        except PreconditionError as exc:
            console.print(f"[red]{exc}[/red]")


def collect_answers(
    base_dir: Path,
    *,
    console: Console,
    settings: UserSettings | None = None,
    interactive: bool = True,
    project_name: Optional[str] = None,
    template: Optional[str] = None,
    package_manager: Optional[str] = None,
    install: Optional[bool] = None,
    git_init: Optional[bool] = None,
    remote_url: Optional[str] = None,
    push: Optional[bool] = None,
) -> AnswerSet:
    """Build the answers for one run.

    Values passed as arguments are validated and never asked for. Missing
    values are prompted for when ``interactive`` is true and otherwise take
    the configured defaults (no install, no git). Precondition failures on
    given values raise; prompted values are asked again until valid.
    """
    settings = settings or UserSettings()

    name = _collect_project_name(base_dir, project_name, interactive, console)
    chosen_template = _collect_choice(
        "template",
        TEMPLATE_CHOICES,
        list(TEMPLATE_CHOICES),
        template,
        settings.template,
        "Select a template",
        interactive,
        console,
    )
    manager = _collect_choice(
        "package manager",
        PACKAGE_MANAGER_CHOICES,
        allowed_package_managers(chosen_template),
        package_manager,
        settings.package_manager,
        "Choose a package manager",
        interactive,
        console,
    )

    if install is None:
        install = interactive and _ask_confirm("Whether to install dependencies?")

    if git_init is None:
        git_init = interactive and _ask_confirm("Whether to init your project as a Git repository?")

    url: Optional[str] = None
    if git_init:
        if remote_url is not None:
            url = validate_remote_url(remote_url)
        elif interactive and _ask_confirm("Whether to set a git remote origin?"):
            url = _collect_remote_url(console)
    elif remote_url is not None or push:
        console.print("[yellow]--remote and --push need git init (--git). Ignoring them.[/yellow]")

    need_push = False
    if url is not None:
        if push is None:
            push = interactive and _ask_confirm(
                "Whether to push the current project to your remote repository?"
            )
        need_push = bool(push)

    return AnswerSet(
        project_name=name,
        template=chosen_template,
        package_manager=manager,
        need_install=bool(install),
        need_git_init=bool(git_init),
        need_git_remote=url is not None,
        git_remote_url=url,
        need_git_push=need_push,
    )


__all__ = ["check_project_name", "collect_answers"]
