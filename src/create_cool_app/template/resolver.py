"""Values substituted into template placeholders."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from create_cool_app.core.answers import AnswerSet
from create_cool_app.core.config import RUNNER_COMMANDS
from create_cool_app.core.process import CommandRunner
from create_cool_app.errors import CommandError

logger = logging.getLogger(__name__)

GIT_IDENTITY = "git-identity"
PACKAGE_MANAGER_VERSION = "package-manager-version"

_MISSING = object()


class ResolverCache:
    """Per-run memo of values that need an external process to compute.

    ``None`` results are cached as well so a missing tool is only looked up once.
    """

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def __contains__(self, category: str) -> bool:
        return category in self._values

    def get_or_compute(self, category: str, compute: Callable[[], Any]) -> Any:
        value = self._values.get(category, _MISSING)
        if value is _MISSING:
            value = compute()
            self._values[category] = value
            logger.debug("Resolved %s -> %r", category, value)
        return value


def parse_git_config(output: str) -> Dict[str, Any]:
    """Fold ``git config --list`` lines into a nested mapping.

    ``user.name=Ada`` becomes ``{"user": {"name": "Ada"}}``. Lines without
    ``=`` are ignored and values keep any further ``=`` characters. When the
    same key appears twice the last line wins, matching git's precedence.
    """
    pairs: Dict[str, Any] = {}
    for line in output.splitlines():
        if "=" not in line:
            continue
        dotted, value = line.split("=", 1)
        keys = [key for key in dotted.strip().split(".") if key]
        if not keys:
            continue
        node = pairs
        for key in keys[:-1]:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        node[keys[-1]] = value
    return pairs


class ValueResolver:
    """Answer placeholder lookups for one scaffolding run."""

    def __init__(
        self,
        answers: AnswerSet,
        project_root: Path,
        runner: CommandRunner,
        cache: ResolverCache | None = None,
    ):
        self.answers = answers
        self.project_root = project_root
        self.runner = runner
        self.cache = cache if cache is not None else ResolverCache()
        self.warnings: List[str] = []
        self._handlers: Dict[str, Callable[[], Optional[str]]] = {
            "projectname": self.project_name,
            "yourname": self.git_user_name,
            "pkgmanager": self.package_manager,
            "pkgmanagerversion": self.package_manager_version,
            "pkgmanagerx": self.package_manager_runner,
        }

    def __call__(self, identifier: str) -> Optional[str]:
        return self.resolve(identifier)

    def resolve(self, identifier: str) -> Optional[str]:
        """Return the value for ``identifier`` or ``None`` when unrecognized."""
        handler = self._handlers.get(identifier.lower())
        if handler is None:
            logger.debug("Leaving unknown placeholder %r untouched", identifier)
            return None
        return handler()

    def project_name(self) -> str:
        return self.project_root.resolve().name

    def package_manager(self) -> str:
        return self.answers.package_manager

    def package_manager_runner(self) -> str:
        return RUNNER_COMMANDS[self.answers.package_manager]

    def git_user_name(self) -> Optional[str]:
        """``user.name`` from the global git config, or ``None`` if unavailable."""
        return self.cache.get_or_compute(GIT_IDENTITY, self._read_git_user_name)

    def package_manager_version(self) -> Optional[str]:
        return self.cache.get_or_compute(PACKAGE_MANAGER_VERSION, self._query_package_manager_version)

    def _read_git_user_name(self) -> Optional[str]:
        try:
            result = self.runner.run(["git", "config", "--global", "--list"], capture=True)
        except CommandError as exc:
            self._note(f"Could not read your git identity ({exc}); '${{yourname}}' was left as is.")
            return None
        user = parse_git_config(result.stdout).get("user")
        name = user.get("name") if isinstance(user, dict) else None
        if not isinstance(name, str) or not name.strip():
            self._note("No global git user.name is configured; '${yourname}' was left as is.")
            return None
        return name.strip()

    def _query_package_manager_version(self) -> Optional[str]:
        manager = self.answers.package_manager
        try:
            result = self.runner.run([manager, "--version"], capture=True)
        except CommandError as exc:
            self._note(f"Could not query the {manager} version ({exc}); '${{pkgManagerVersion}}' was left as is.")
            return None
        version = result.stdout.strip()
        return version or None

    def _note(self, message: str) -> None:
        logger.debug("%s", message)
        self.warnings.append(message)


__all__ = [
    "GIT_IDENTITY",
    "PACKAGE_MANAGER_VERSION",
    "ResolverCache",
    "ValueResolver",
    "parse_git_config",
]
