"""Blocking child-process execution with a dry-run mode."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from create_cool_app.errors import CommandFailedError, CommandNotFoundError

logger = logging.getLogger(__name__)

__all__ = [
    "CommandResult",
    "CommandRunner",
    "dry_step",
]


@dataclass
class CommandResult:
    """Normalized outcome of one external command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    dry_run: bool = False

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def dry_step(console: Console, message: str) -> None:
    """Print a trace line for an action skipped by dry-run mode."""
    console.print(f"[blue]\\[dryrun] {escape(message)}[/blue]")


class CommandRunner:
    """Run external tools (git, package managers) one at a time.

    Commands with ``capture=False`` inherit the terminal so install and push
    progress stays visible; ``capture=True`` collects stdout for parsing.
    In dry-run mode nothing is executed and a trace line is printed instead.
    """

    def __init__(self, console: Console | None = None, *, dry_run: bool = False):
        self.console = console or Console()
        self.dry_run = dry_run

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        capture: bool = False,
        check: bool = True,
    ) -> CommandResult:
        """Run ``args`` and wait for it to exit.

        Raises:
            CommandNotFoundError: the executable is not installed.
            CommandFailedError: non-zero exit status and ``check`` is true.
        """
        argv = [str(arg) for arg in args]
        if self.dry_run:
            suffix = f" (cwd: {cwd})" if cwd else ""
            dry_step(self.console, f"{' '.join(argv)}{suffix}")
            return CommandResult(args=argv, returncode=0, dry_run=True)

        logger.debug("Running %s in %s", argv, cwd or Path.cwd())
        try:
            if capture:
                completed = subprocess.run(
                    argv,
                    cwd=str(cwd) if cwd else None,
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                    check=False,
                )
            else:
                completed = subprocess.run(argv, cwd=str(cwd) if cwd else None, check=False)
        except FileNotFoundError as exc:
            raise CommandNotFoundError(argv) from exc

        result = CommandResult(
            args=argv,
            returncode=completed.returncode,
            stdout=(completed.stdout or "") if capture else "",
            stderr=(completed.stderr or "") if capture else "",
        )
        if check and not result.ok:
            logger.debug("%s exited with %s", argv, result.returncode)
            raise CommandFailedError(argv, result.returncode, result.stderr)
        return result
