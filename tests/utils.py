"""Shared helpers for the create-cool-app test suite."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Dict, Iterable, Mapping, Tuple, Union

from rich.console import Console

from create_cool_app.core.process import CommandResult, CommandRunner
from create_cool_app.errors import CommandFailedError, CommandNotFoundError

Response = Tuple[int, str]

GIT_IDENTITY_OUTPUT = "user.name=Ada Lovelace\nuser.email=ada@example.com\ncore.editor=vim\n"


def make_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=200)


def console_output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


def write_tree(root: Path, files: Mapping[str, Union[str, bytes]]) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
    return root


def list_tree(root: Path) -> Dict[str, bytes]:
    """Map every file under ``root`` (relative posix path) to its bytes."""
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


class FakeRunner(CommandRunner):
    """Records commands instead of running them.

    ``responses`` maps an argv prefix to ``(returncode, stdout)``; the
    longest matching prefix wins and unmatched commands succeed with empty
    output. Executables listed in ``missing`` raise ``CommandNotFoundError``.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        dry_run: bool = False,
        responses: Mapping[Tuple[str, ...], Response] | None = None,
        missing: Iterable[str] = (),
    ):
        super().__init__(console or make_console(), dry_run=dry_run)
        self.responses = dict(responses or {})
        self.missing = set(missing)
        self.calls: list[list[str]] = []
        self.cwds: list[Path | None] = []

    def run(self, args, *, cwd=None, capture=False, check=True):
        argv = [str(arg) for arg in args]
        self.calls.append(argv)
        self.cwds.append(cwd)
        if self.dry_run:
            return super().run(argv, cwd=cwd, capture=capture, check=check)
        if argv[0] in self.missing:
            raise CommandNotFoundError(argv)

        returncode, stdout = 0, ""
        best = -1
        for prefix, response in self.responses.items():
            if tuple(argv[: len(prefix)]) == prefix and len(prefix) > best:
                best = len(prefix)
                returncode, stdout = response
        result = CommandResult(args=argv, returncode=returncode, stdout=stdout if capture else "")
        if check and returncode != 0:
            raise CommandFailedError(argv, returncode, "")
        return result

    def commands(self, executable: str) -> list[list[str]]:
        return [call for call in self.calls if call[0] == executable]
