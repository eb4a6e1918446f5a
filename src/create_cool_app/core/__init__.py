"""Core models, configuration and process helpers."""

from .answers import AnswerSet, ensure_empty_directory, validate_project_name
from .config import (
    PACKAGE_MANAGER_CHOICES,
    RUNNER_COMMANDS,
    TEMPLATE_CHOICES,
    TEMPLATE_PACKAGE_MANAGERS,
    TOOL_NAME,
)
from .process import CommandResult, CommandRunner, dry_step
from .settings import UserSettings, load_settings
from .tracker import StepTracker

__all__ = [
    "AnswerSet",
    "CommandResult",
    "CommandRunner",
    "PACKAGE_MANAGER_CHOICES",
    "RUNNER_COMMANDS",
    "StepTracker",
    "TEMPLATE_CHOICES",
    "TEMPLATE_PACKAGE_MANAGERS",
    "TOOL_NAME",
    "UserSettings",
    "dry_step",
    "ensure_empty_directory",
    "load_settings",
    "validate_project_name",
]
