"""Template discovery helpers."""

from __future__ import annotations

import os
from importlib.resources import files
from pathlib import Path

from rich.console import Console

from create_cool_app.core.config import TEMPLATE_CHOICES, TEMPLATE_DIR_PREFIX
from create_cool_app.core.settings import TEMPLATE_ROOT_ENV_VAR, UserSettings
from create_cool_app.errors import InvalidChoiceError, TemplateNotFoundError

console = Console()


def bundled_templates_root() -> Path:
    """Directory holding the ``template-*`` folders shipped with the package."""
    return Path(str(files("create_cool_app").joinpath("templates")))


def template_dir_name(template: str) -> str:
    return f"{TEMPLATE_DIR_PREFIX}{template}"


def _override_candidates(override_path: str | None, settings: UserSettings | None) -> list[tuple[str, Path]]:
    candidates: list[tuple[str, Path]] = []
    if override_path:
        candidates.append(("--template-root", Path(override_path).expanduser().resolve()))
    env_root = os.environ.get(TEMPLATE_ROOT_ENV_VAR)
    if env_root:
        candidates.append((TEMPLATE_ROOT_ENV_VAR, Path(env_root).expanduser().resolve()))
    if settings is not None and settings.template_root is not None:
        candidates.append(("templates.root", settings.template_root.resolve()))
    return candidates


def resolve_template_dir(
    template: str,
    override_path: str | None = None,
    settings: UserSettings | None = None,
    *,
    output: Console | None = None,
) -> Path:
    """Return the directory to copy for ``template``.

    Checks the ``--template-root`` flag, then ``CREATE_COOL_APP_TEMPLATE_ROOT``,
    then ``templates.root`` from the user config, and finally the templates
    bundled with the package. An override lacking the template is reported
    and skipped.
    """
    if template not in TEMPLATE_CHOICES:
        raise InvalidChoiceError("template", template, list(TEMPLATE_CHOICES))
    out = output or console
    dir_name = template_dir_name(template)

    for label, root in _override_candidates(override_path, settings):
        candidate = root / dir_name
        if candidate.is_dir():
            return candidate
        out.print(f"[yellow]{label} set to {root}, but {dir_name} not found there. Ignoring.[/yellow]")

    bundled = bundled_templates_root() / dir_name
    if not bundled.is_dir():
        raise TemplateNotFoundError(template, bundled)
    return bundled


def list_templates(root: Path | None = None) -> list[str]:
    """Template identifiers available under ``root`` (default: bundled)."""
    root = root or bundled_templates_root()
    if not root.is_dir():
        return []
    return sorted(
        entry.name[len(TEMPLATE_DIR_PREFIX):]
        for entry in root.iterdir()
        if entry.is_dir() and entry.name.startswith(TEMPLATE_DIR_PREFIX)
    )


__all__ = [
    "bundled_templates_root",
    "list_templates",
    "resolve_template_dir",
    "template_dir_name",
]
