from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pytest

from create_cool_app.cli import prompts
from create_cool_app.cli.prompts import collect_answers
from create_cool_app.core.settings import UserSettings
from create_cool_app.errors import DirectoryNotEmptyError, InvalidChoiceError, InvalidProjectNameError
from tests.utils import console_output, make_console


class ScriptedPrompts:
    """Answer prompts from queues and record what was asked."""

    def __init__(self, monkeypatch: pytest.MonkeyPatch):
        self.texts: List[str] = []
        self.confirms: List[bool] = []
        self.choices: List[str] = []
        self.asked: List[str] = []
        self.choice_options: List[Dict[str, str]] = []
        monkeypatch.setattr(prompts, "_ask_text", self._text)
        monkeypatch.setattr(prompts, "_ask_confirm", self._confirm)
        monkeypatch.setattr(prompts, "_ask_choice", self._choice)

    def _text(self, message, default=None):
        self.asked.append(message)
        return self.texts.pop(0)

    def _confirm(self, message, default=True):
        self.asked.append(message)
        return self.confirms.pop(0)

    def _choice(self, options, message, default, console):
        self.asked.append(message)
        self.choice_options.append(dict(options))
        return self.choices.pop(0) if self.choices else default


@pytest.fixture()
def scripted(monkeypatch: pytest.MonkeyPatch) -> ScriptedPrompts:
    return ScriptedPrompts(monkeypatch)


def test_interactive_flow_asks_every_question(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    scripted.texts = ["demo", " git@github.com:ada/demo.git "]
    scripted.choices = ["library-ts", "yarn"]
    scripted.confirms = [True, True, True, True]

    answers = collect_answers(tmp_path, console=make_console())

    assert answers.project_name == "demo"
    assert answers.template == "library-ts"
    assert answers.package_manager == "yarn"
    assert answers.need_install and answers.need_git_init
    assert answers.remote_url == "git@github.com:ada/demo.git"
    assert answers.should_push
    assert scripted.asked == [
        "What's your project name?",
        "Select a template",
        "Choose a package manager",
        "Whether to install dependencies?",
        "Whether to init your project as a Git repository?",
        "Whether to set a git remote origin?",
        "What's your remote git repository url?",
        "Whether to push the current project to your remote repository?",
    ]


def test_declining_git_skips_remote_questions(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    scripted.texts = ["demo"]
    scripted.confirms = [False, False]

    answers = collect_answers(tmp_path, console=make_console())

    assert not answers.need_git_init
    assert answers.remote_url is None
    assert not any("remote" in question for question in scripted.asked)


def test_declining_remote_skips_push_question(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    scripted.texts = ["demo"]
    scripted.confirms = [False, True, False]

    answers = collect_answers(tmp_path, console=make_console())

    assert answers.need_git_init
    assert not answers.need_git_remote
    assert not any("push" in question for question in scripted.asked)


def test_invalid_names_are_asked_again(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    (tmp_path / "taken").mkdir()
    (tmp_path / "taken" / "file.txt").write_text("", encoding="utf-8")
    scripted.texts = ["", "my app", "taken", "demo"]
    scripted.confirms = [False, False]
    console = make_console()

    answers = collect_answers(tmp_path, console=console)

    assert answers.project_name == "demo"
    output = console_output(console)
    assert "The name cannot be empty." in output
    assert "The name cannot include space and comma." in output
    assert "The taken directory already exists and is not empty." in output


def test_empty_remote_url_is_asked_again(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    scripted.texts = ["demo", "   ", "git@github.com:ada/demo.git"]
    scripted.confirms = [False, True, True, False]
    console = make_console()

    answers = collect_answers(tmp_path, console=console)

    assert answers.remote_url == "git@github.com:ada/demo.git"
    assert not answers.should_push
    assert "The url cannot be empty." in console_output(console)


def test_ts_mono_offers_only_pnpm(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    scripted.texts = ["demo"]
    scripted.choices = ["ts-mono"]
    scripted.confirms = [False, False]

    answers = collect_answers(tmp_path, console=make_console())

    assert answers.package_manager == "pnpm"
    assert list(scripted.choice_options[1]) == ["pnpm"]


def test_flags_are_never_asked_for(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    answers = collect_answers(
        tmp_path,
        console=make_console(),
        project_name="demo",
        template="library",
        package_manager="npm",
        install=False,
        git_init=True,
        remote_url="git@github.com:ada/demo.git",
        push=False,
    )

    assert scripted.asked == []
    assert answers.package_manager == "npm"
    assert answers.remote_url == "git@github.com:ada/demo.git"
    assert not answers.should_push


def test_non_interactive_uses_configured_defaults(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    settings = UserSettings(template="library-ts", package_manager="yarn")

    answers = collect_answers(tmp_path, console=make_console(), settings=settings, interactive=False, project_name="demo")

    assert scripted.asked == []
    assert (answers.template, answers.package_manager) == ("library-ts", "yarn")
    assert not answers.need_install
    assert not answers.need_git_init


def test_non_interactive_default_manager_falls_back_for_ts_mono(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    settings = UserSettings(package_manager="npm")

    answers = collect_answers(
        tmp_path, console=make_console(), settings=settings, interactive=False, project_name="demo", template="ts-mono"
    )

    assert answers.package_manager == "pnpm"


def test_non_interactive_requires_a_name(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    with pytest.raises(InvalidProjectNameError):
        collect_answers(tmp_path, console=make_console(), interactive=False)


def test_given_name_for_busy_directory_raises(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    (tmp_path / "demo").mkdir()
    (tmp_path / "demo" / "a").write_text("", encoding="utf-8")

    with pytest.raises(DirectoryNotEmptyError):
        collect_answers(tmp_path, console=make_console(), project_name="demo")


def test_given_choice_outside_template_raises(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    with pytest.raises(InvalidChoiceError):
        collect_answers(
            tmp_path, console=make_console(), interactive=False, project_name="demo", template="ts-mono", package_manager="npm"
        )


def test_remote_and_push_without_git_print_a_notice(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    console = make_console()

    answers = collect_answers(
        tmp_path,
        console=console,
        interactive=False,
        project_name="demo",
        git_init=False,
        remote_url="git@github.com:ada/demo.git",
        push=True,
    )

    assert not answers.need_git_init
    assert answers.remote_url is None
    assert not answers.should_push
    assert "--remote and --push need git init (--git). Ignoring them." in console_output(console)


def test_declining_git_without_remote_flags_prints_no_notice(scripted: ScriptedPrompts, tmp_path: Path) -> None:
    console = make_console()

    collect_answers(tmp_path, console=console, interactive=False, project_name="demo", git_init=False)

    assert "Ignoring them" not in console_output(console)
