"""User decisions collected before scaffolding, plus their validators."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from create_cool_app.core.config import (
    TEMPLATE_CHOICES,
    TEMPLATE_PACKAGE_MANAGERS,
    VCS_DIRECTORY,
)
from create_cool_app.errors import (
    DirectoryNotEmptyError,
    InvalidChoiceError,
    InvalidProjectNameError,
    InvalidRemoteUrlError,
)

_FORBIDDEN_NAME_CHARS = re.compile(r"[\s,]")


def validate_project_name(name: str) -> str:
    """Return ``name`` unchanged or raise :class:`InvalidProjectNameError`."""
    if not name:
        raise InvalidProjectNameError(name, "The name cannot be empty.")
    if _FORBIDDEN_NAME_CHARS.search(name):
        raise InvalidProjectNameError(name, "The name cannot include space and comma.")
    return name


def validate_remote_url(url: str | None) -> str:
    if url is None or not url.strip():
        raise InvalidRemoteUrlError(url or "")
    if _FORBIDDEN_NAME_CHARS.search(url.strip()):
        raise InvalidRemoteUrlError(url, "The url cannot include whitespace or commas.")
    return url.strip()


def existing_entries(path: Path) -> list[str]:
    """List entries of ``path`` that block scaffolding (everything except ``.git``)."""
    if not path.exists():
        return []
    if not path.is_dir():
        return [path.name]
    return sorted(entry.name for entry in path.iterdir() if entry.name != VCS_DIRECTORY)


def ensure_empty_directory(path: Path) -> None:
    entries = existing_entries(path)
    if entries:
        raise DirectoryNotEmptyError(path, entries)


def allowed_package_managers(template: str) -> tuple[str, ...]:
    if template not in TEMPLATE_PACKAGE_MANAGERS:
        raise InvalidChoiceError("template", template, list(TEMPLATE_CHOICES))
    return TEMPLATE_PACKAGE_MANAGERS[template]


@dataclass(frozen=True)
class AnswerSet:
    """Immutable record of everything the user decided.

    ``git_remote_url`` and ``need_git_push`` are conditional: they only mean
    something when ``need_git_init`` (and, for the URL, ``need_git_remote``)
    is true. Read them through :attr:`remote_url` and :attr:`should_push`.
    """

    project_name: str
    template: str
    package_manager: str
    need_install: bool = False
    need_git_init: bool = False
    need_git_remote: bool = False
    git_remote_url: str | None = None
    need_git_push: bool = False

    def __post_init__(self) -> None:
        validate_project_name(self.project_name)
        allowed = allowed_package_managers(self.template)
        if self.package_manager not in allowed:
            raise InvalidChoiceError("package manager", self.package_manager, allowed)
        if self.need_git_init and self.need_git_remote:
            validate_remote_url(self.git_remote_url)

    @property
    def remote_url(self) -> str | None:
        if self.need_git_init and self.need_git_remote:
            return self.git_remote_url
        return None

    @property
    def should_push(self) -> bool:
        return self.remote_url is not None and self.need_git_push


__all__ = [
    "AnswerSet",
    "allowed_package_managers",
    "ensure_empty_directory",
    "existing_entries",
    "validate_project_name",
    "validate_remote_url",
]
