"""Exception hierarchy for create-cool-app."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ScaffoldError(Exception):
    """Base exception for scaffolding errors."""
    pass


class PreconditionError(ScaffoldError):
    """Raised before any filesystem mutation when the requested run is invalid."""
    pass


class InvalidProjectNameError(PreconditionError):
    """Project name is empty or contains whitespace/commas."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(reason)


class DirectoryNotEmptyError(PreconditionError):
    """Target project directory already contains files."""

    def __init__(self, path: Path, entries: Sequence[str] = ()):
        self.path = path
        self.entries = list(entries)
        super().__init__(f"The {path.name} directory already exists and is not empty.")


class InvalidRemoteUrlError(PreconditionError):
    """Git remote URL is empty or malformed."""

    def __init__(self, url: str, reason: str = "The url cannot be empty."):
        self.url = url
        super().__init__(reason)


class InvalidChoiceError(PreconditionError):
    """A template or package manager value outside the supported set."""

    def __init__(self, field: str, value: str, allowed: Sequence[str]):
        self.field = field
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid {field} '{value}'. Choose from: {', '.join(self.allowed)}"
        )


class TemplateNotFoundError(ScaffoldError):
    """The requested template directory does not exist."""

    def __init__(self, template: str, path: Path):
        self.template = template
        self.path = path
        super().__init__(f"Template '{template}' not found at {path}")


class TemplateLayoutError(ScaffoldError):
    """Two template entries would be written to the same destination."""

    def __init__(self, directory: Path, name: str):
        self.directory = directory
        self.name = name
        super().__init__(
            f"Template directory {directory} produces '{name}' twice after renaming"
        )


class TemplateEncodingError(ScaffoldError):
    """A manifest or readme in the template is not valid UTF-8."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path} as UTF-8 text: {reason}")


class CommandError(ScaffoldError):
    """An external command could not be run or did not succeed."""

    def __init__(self, args: Sequence[str], message: str):
        self.args_list = list(args)
        super().__init__(message)

    @property
    def command_line(self) -> str:
        return " ".join(self.args_list)


class CommandNotFoundError(CommandError):
    """The executable is not on PATH."""

    def __init__(self, args: Sequence[str]):
        super().__init__(args, f"'{args[0]}' executable not found on PATH")

    @property
    def executable(self) -> str:
        return self.args_list[0]


class CommandFailedError(CommandError):
    """The command exited with a non-zero status."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        detail = f"'{' '.join(args)}' exited with status {returncode}"
        first_line = next((line.strip() for line in stderr.splitlines() if line.strip()), "")
        if first_line:
            detail = f"{detail}: {first_line}"
        super().__init__(args, detail)


class SettingsError(ScaffoldError):
    """User configuration file holds an invalid value."""
    pass


__all__ = [
    "CommandError",
    "CommandFailedError",
    "CommandNotFoundError",
    "DirectoryNotEmptyError",
    "InvalidChoiceError",
    "InvalidProjectNameError",
    "InvalidRemoteUrlError",
    "PreconditionError",
    "ScaffoldError",
    "SettingsError",
    "TemplateEncodingError",
    "TemplateLayoutError",
    "TemplateNotFoundError",
]
