from __future__ import annotations

from pathlib import Path
from types import ModuleType

import pytest
import toml
from typer.testing import CliRunner

import create_cool_app
from create_cool_app.cli.commands import check_cmd, config_cmd, templates_cmd
from create_cool_app.core.tracker import StepTracker
from tests.utils import console_output, make_console


@pytest.fixture()
def console(monkeypatch: pytest.MonkeyPatch):
    console = make_console()
    monkeypatch.setattr(check_cmd, "console", console)
    monkeypatch.setattr(config_cmd, "console", console)
    monkeypatch.setattr(templates_cmd, "console", console)
    monkeypatch.setattr(create_cool_app, "console", console)
    return console


def invoke(args: list[str]):
    return CliRunner().invoke(create_cool_app.app, args, catch_exceptions=False)


def test_check_reports_each_tool(console, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(check_cmd, "check_tool", lambda tool: tool in {"git", "npm"})

    result = invoke(["check"])

    assert result.exit_code == 0
    output = console_output(console)
    assert "Git version control (available)" in output
    assert "https://pnpm.io/installation" in output
    assert "create-cool-app is ready to use!" in output


def test_check_warns_without_package_managers(console, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(check_cmd, "check_tool", lambda tool: False)

    result = invoke(["check"])

    assert result.exit_code == 0
    output = console_output(console)
    assert "No package manager found" in output
    assert "Install git" in output


def test_check_tool_for_tracker_marks_status(monkeypatch: pytest.MonkeyPatch) -> None:
    tracker = StepTracker("tools")
    monkeypatch.setattr(check_cmd, "check_tool", lambda tool: tool == "git")

    assert check_cmd.check_tool_for_tracker("git", tracker)
    assert not check_cmd.check_tool_for_tracker("yarn", tracker)
    assert tracker.status_of("git") == "done"
    assert tracker.status_of("yarn") == "error"


def test_command_modules_stay_reachable_beside_exported_commands() -> None:
    from create_cool_app.cli import commands

    assert isinstance(check_cmd, ModuleType)
    assert commands.check is check_cmd.check
    assert commands.check_cmd is check_cmd
    assert callable(commands.check)


def test_config_shows_defaults(console, isolated_settings: Path) -> None:
    result = invoke(["config"])

    assert result.exit_code == 0
    output = console_output(console)
    assert "defaults.template" in output
    assert "library" in output
    assert "chore: init" in output
    assert "built-in defaults" in output


def test_config_set_persists_value(console, isolated_settings: Path) -> None:
    result = invoke(["config", "--set", "defaults.package_manager=yarn"])

    assert result.exit_code == 0
    assert toml.load(isolated_settings / "config.toml") == {"defaults": {"package_manager": "yarn"}}
    assert "defaults.package_manager set to yarn" in console_output(console)


@pytest.mark.parametrize(
    ("value", "message"),
    [
        ("defaults.package_manager", "--set expects KEY=VALUE"),
        ("defaults.package_manager=bun", "Unknown package manager 'bun'"),
        ("nope=1", "Unknown setting 'nope'"),
    ],
)
def test_config_set_rejects_bad_input(console, isolated_settings: Path, value: str, message: str) -> None:
    result = invoke(["config", "--set", value])

    assert result.exit_code == 1
    assert message in console_output(console)
    assert not (isolated_settings / "config.toml").exists()


def test_config_reports_broken_file(console, isolated_settings: Path) -> None:
    (isolated_settings / "config.toml").write_text("[defaults\n", encoding="utf-8")

    result = invoke(["config"])

    assert result.exit_code == 1
    assert "Cannot parse" in console_output(console)


def test_templates_lists_bundled_templates(console) -> None:
    result = invoke(["templates"])

    assert result.exit_code == 0
    output = console_output(console)
    for name in ("library", "library-ts", "ts-mono"):
        assert name in output
    assert "(missing)" not in output
    assert "Location:" in output


def test_root_without_command_shows_banner(console) -> None:
    result = invoke([])

    assert result.exit_code == 0
    assert "create-cool-app --help" in console_output(console)
