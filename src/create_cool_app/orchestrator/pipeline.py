"""Sequence template materialization, install and git bootstrap for one run."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from create_cool_app.core.answers import AnswerSet, ensure_empty_directory
from create_cool_app.core.config import TOOL_NAME
from create_cool_app.core.process import CommandRunner, dry_step
from create_cool_app.core.settings import UserSettings
from create_cool_app.core.tracker import StepTracker
from create_cool_app.errors import CommandError, CommandFailedError, CommandNotFoundError
from create_cool_app.template.materializer import (
    MaterializeResult,
    build_copy_plan,
    materialize,
)
from create_cool_app.template.placeholders import substitute
from create_cool_app.template.resolver import ResolverCache, ValueResolver

logger = logging.getLogger(__name__)

__all__ = [
    "DeferredFailure",
    "ScaffoldPipeline",
    "ScaffoldReport",
    "Stage",
]


class Stage(str, Enum):
    MATERIALIZE = "materialize"
    SUBSTITUTE = "substitute"
    INSTALL = "install"
    GIT_INIT = "git-init"
    GIT_REMOTE = "git-remote"
    GIT_PUSH = "git-push"
    REPORT = "report"


STAGE_LABELS = {
    Stage.MATERIALIZE: "Copy template files",
    Stage.SUBSTITUTE: "Fill in placeholders",
    Stage.INSTALL: "Install dependencies",
    Stage.GIT_INIT: "Initialize git repository",
    Stage.GIT_REMOTE: "Add git remote origin",
    Stage.GIT_PUSH: "Commit and push",
    Stage.REPORT: "Report",
}

GIT_STAGES = (Stage.GIT_INIT, Stage.GIT_REMOTE, Stage.GIT_PUSH)


@dataclass
class DeferredFailure:
    """A soft failure shown in the final report."""

    kind: str
    message: str
    stage: Stage

    def render(self) -> str:
        return f"[{TOOL_NAME}/{self.kind}]: {self.message}"


@dataclass
class ScaffoldReport:
    """Outcome of one pipeline run."""

    answers: AnswerSet
    project_root: Path
    display_path: str
    dry_run: bool = False
    materialized: Optional[MaterializeResult] = None
    installed: bool = False
    git_initialized: bool = False
    remote_added: bool = False
    pushed: bool = False
    failures: List[DeferredFailure] = field(default_factory=list)
    stages: List[Stage] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def guidance_lines(self) -> List[str]:
        manager = self.answers.package_manager
        lines = ["Done. Now run:", f"  cd {self.display_path}"]
        if not self.installed:
            lines.append(f"  {manager} install")
        lines.append(f"  {manager} run dev")
        return lines


class ScaffoldPipeline:
    """Run the scaffolding stages strictly in order.

    Precondition and filesystem errors propagate and end the run. Install
    and push failures, and placeholders that could not be resolved, are
    collected and printed together at the end. A failing ``git init``,
    ``git remote add`` or pre-push commit stops the remaining git steps.
    """

    def __init__(
        self,
        answers: AnswerSet,
        *,
        template_dir: Path,
        base_dir: Path | None = None,
        runner: CommandRunner | None = None,
        console: Console | None = None,
        settings: UserSettings | None = None,
        dry_run: bool = False,
        tracker: StepTracker | None = None,
        show_tracker: bool = False,
    ):
        self.answers = answers
        self.template_dir = template_dir
        self.base_dir = (base_dir or Path.cwd()).resolve()
        self.project_root = self.base_dir / answers.project_name
        self.console = console or Console()
        self.runner = runner or CommandRunner(self.console, dry_run=dry_run)
        self.settings = settings or UserSettings()
        self.dry_run = dry_run
        self.tracker = tracker or StepTracker(f"Create {answers.project_name}")
        self.show_tracker = show_tracker
        self.cache = ResolverCache()
        self.resolver = ValueResolver(answers, self.project_root, self.runner, self.cache)
        self.report = ScaffoldReport(
            answers=answers,
            project_root=self.project_root,
            display_path=_display_path(self.project_root),
            dry_run=dry_run,
        )
        for stage in Stage:
            self.tracker.add(stage.value, STAGE_LABELS[stage])

    def run(self) -> ScaffoldReport:
        ensure_empty_directory(self.project_root)

        self._materialize()
        self._install()
        self._git()
        self._finish()
        return self.report

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _enter(self, stage: Stage, detail: str = "") -> None:
        logger.info("Stage %s", stage.value)
        self.report.stages.append(stage)
        self.tracker.start(stage.value, detail)

    def _defer(self, kind: str, message: str, stage: Stage) -> None:
        logger.info("Deferred %s failure: %s", kind, message)
        self.report.failures.append(DeferredFailure(kind, message, stage))

    def _materialize(self) -> None:
        self._enter(Stage.MATERIALIZE, self.template_dir.name)
        if self.dry_run:
            plan = build_copy_plan(self.template_dir, self.project_root)
            self.console.print()
            dry_step(self.console, f"copying {self.template_dir.name} into {self.report.display_path}")
            for entry in plan:
                relative = entry.destination.relative_to(self.project_root)
                action = "mkdir" if entry.is_dir else "write" if entry.replaceable else "copy"
                dry_step(self.console, f"{action} {relative}")
            self.tracker.complete(Stage.MATERIALIZE.value, f"{len(plan)} entries (dry run)")
            self._enter(Stage.SUBSTITUTE)
            rewritten = sum(1 for entry in plan if entry.replaceable)
            self.tracker.complete(Stage.SUBSTITUTE.value, f"{rewritten} files (dry run)")
            return

        try:
            result = materialize(
                self.template_dir,
                self.project_root,
                transform=lambda content: substitute(content, self.resolver),
            )
        except Exception as exc:
            self.tracker.error(Stage.MATERIALIZE.value, str(exc))
            raise
        self.report.materialized = result
        self.tracker.complete(Stage.MATERIALIZE.value, f"{len(result.copied)} files")

        # Substitution runs per file inside materialize(); this records its outcome.
        self._enter(Stage.SUBSTITUTE)
        for message in self.resolver.warnings:
            self._defer("placeholder", message, Stage.SUBSTITUTE)
        names = ", ".join(path.name for path in result.substituted) or "none"
        self.tracker.complete(Stage.SUBSTITUTE.value, names)

    def _install(self) -> None:
        manager = self.answers.package_manager
        if not self.answers.need_install:
            self.tracker.skip(Stage.INSTALL.value, "not requested")
            return

        self._enter(Stage.INSTALL, f"{manager} install")
        self.console.print()
        try:
            self.runner.run([manager, "install"], cwd=self.project_root)
        except CommandNotFoundError:
            self._defer("install", f"Please install '{manager}' first.", Stage.INSTALL)
            self.tracker.error(Stage.INSTALL.value, f"{manager} not found")
            return
        except CommandFailedError as exc:
            self._defer(
                "install",
                f"'{manager} install' exited with status {exc.returncode}. Run it again inside the project.",
                Stage.INSTALL,
            )
            self.tracker.error(Stage.INSTALL.value, f"exit {exc.returncode}")
            return
        self.report.installed = True
        self.tracker.complete(Stage.INSTALL.value)

    def _git(self) -> None:
        if not self.answers.need_git_init:
            for stage in GIT_STAGES:
                self.tracker.skip(stage.value, "not requested")
            return

        current = Stage.GIT_INIT
        self.console.print()
        try:
            self._enter(Stage.GIT_INIT)
            self._git_run(["init"])
            self.report.git_initialized = True
            self.tracker.complete(Stage.GIT_INIT.value)

            current = Stage.GIT_REMOTE
            remote_url = self.answers.remote_url
            if remote_url is not None:
                self._enter(Stage.GIT_REMOTE, remote_url)
                self._git_run(["remote", "add", "origin", remote_url])
                self.report.remote_added = True
                self.tracker.complete(Stage.GIT_REMOTE.value)
            else:
                self.tracker.skip(Stage.GIT_REMOTE.value, "no remote")

            current = Stage.GIT_PUSH
            if not self.answers.should_push:
                self.tracker.skip(Stage.GIT_PUSH.value, "not requested")
                return
            self._enter(Stage.GIT_PUSH, remote_url or "")
            self._git_run(["add", "-A"])
            self._git_run(["commit", "-m", self.settings.commit_message])
        except CommandError as exc:
            self._defer("git", f"{exc}. The remaining git steps were skipped.", current)
            self.tracker.error(current.value, str(exc))
            for stage in GIT_STAGES[GIT_STAGES.index(current) + 1:]:
                self.tracker.skip(stage.value, "skipped after git failure")
            return

        try:
            self._git_run(["push", "-u", "origin"])
        except CommandError as exc:
            logger.debug("git push failed: %s", exc)
            self._defer(
                "git",
                "Failed to push the current project to your remote repository. "
                f"Please check that your remote url '{self.answers.remote_url}' is accurate.",
                Stage.GIT_PUSH,
            )
            self.tracker.error(Stage.GIT_PUSH.value, "push failed")
            return
        self.report.pushed = True
        self.tracker.complete(Stage.GIT_PUSH.value)

    def _git_run(self, args: List[str]) -> None:
        self.runner.run(["git", *args], cwd=self.project_root)

    def _finish(self) -> None:
        self._enter(Stage.REPORT)
        detail = f"{len(self.report.failures)} warning(s)" if self.report.failures else "ok"
        self.tracker.complete(Stage.REPORT.value, detail)
        if self.show_tracker:
            self.console.print()
            self.console.print(self.tracker.render())

        if self.report.failures:
            self.console.print()
            for failure in self.report.failures:
                self.console.print(failure.render(), style="red", markup=False)

        self.console.print()
        for line in self.report.guidance_lines():
            self.console.print(line, style="green", markup=False)
        self.console.print()


def _display_path(project_root: Path) -> str:
    """Path to show in ``cd`` guidance, relative to the working directory when possible."""
    try:
        relative = os.path.relpath(project_root, Path.cwd())
    except ValueError:
        return str(project_root)
    return str(project_root) if relative.startswith("..") else relative
