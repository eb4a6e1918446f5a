"""User configuration stored in ``~/.create-cool-app/config.toml``."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import toml  # type: ignore[import-untyped]

from create_cool_app.core.config import (
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_PACKAGE_MANAGER,
    DEFAULT_TEMPLATE,
    PACKAGE_MANAGER_CHOICES,
    TEMPLATE_CHOICES,
)
from create_cool_app.errors import SettingsError

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "CREATE_COOL_APP_HOME"
TEMPLATE_ROOT_ENV_VAR = "CREATE_COOL_APP_TEMPLATE_ROOT"

# dotted key -> (section, option)
SETTING_KEYS: dict[str, tuple[str, str]] = {
    "defaults.template": ("defaults", "template"),
    "defaults.package_manager": ("defaults", "package_manager"),
    "defaults.commit_message": ("defaults", "commit_message"),
    "templates.root": ("templates", "root"),
}


@dataclass(frozen=True)
class UserSettings:
    """Defaults that seed prompts and the git bootstrap."""

    template: str = DEFAULT_TEMPLATE
    package_manager: str = DEFAULT_PACKAGE_MANAGER
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    template_root: Path | None = None
    source: Path | None = None


def config_dir() -> Path:
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".create-cool-app"


def config_file() -> Path:
    return config_dir() / "config.toml"


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name)
    return section if isinstance(section, dict) else {}


def _validate(key: str, value: str) -> str:
    if key == "defaults.template" and value not in TEMPLATE_CHOICES:
        raise SettingsError(
            f"Unknown template '{value}' for {key}. Choose from: {', '.join(TEMPLATE_CHOICES)}"
        )
    if key == "defaults.package_manager" and value not in PACKAGE_MANAGER_CHOICES:
        raise SettingsError(
            f"Unknown package manager '{value}' for {key}. "
            f"Choose from: {', '.join(PACKAGE_MANAGER_CHOICES)}"
        )
    if key == "defaults.commit_message" and not value.strip():
        raise SettingsError("defaults.commit_message cannot be empty")
    return value


def load_settings(path: Path | None = None) -> UserSettings:
    """Read settings, falling back to built-in defaults for anything unset."""
    path = path or config_file()
    if not path.exists():
        return UserSettings()

    try:
        config: dict[str, Any] = toml.load(path)
    except toml.TomlDecodeError as exc:
        raise SettingsError(f"Cannot parse {path}: {exc}") from exc

    values: dict[str, str] = {}
    for key, (section, option) in SETTING_KEYS.items():
        raw = _section(config, section).get(option)
        if raw is None:
            continue
        if not isinstance(raw, str):
            raise SettingsError(f"{key} in {path} must be a string")
        values[key] = _validate(key, raw)

    root = values.get("templates.root")
    logger.debug("Loaded settings from %s: %s", path, values)
    return UserSettings(
        template=values.get("defaults.template", DEFAULT_TEMPLATE),
        package_manager=values.get("defaults.package_manager", DEFAULT_PACKAGE_MANAGER),
        commit_message=values.get("defaults.commit_message", DEFAULT_COMMIT_MESSAGE),
        template_root=Path(root).expanduser() if root else None,
        source=path,
    )


def save_setting(key: str, value: str, path: Path | None = None) -> Path:
    """Persist one dotted ``key`` and return the file written."""
    if key not in SETTING_KEYS:
        raise SettingsError(f"Unknown setting '{key}'. Valid keys: {', '.join(SETTING_KEYS)}")
    _validate(key, value)

    path = path or config_file()
    path.parent.mkdir(parents=True, exist_ok=True)

    config: dict[str, Any] = {}
    if path.exists():
        config = toml.load(path)

    section_name, option = SETTING_KEYS[key]
    section = config.get(section_name)
    if not isinstance(section, dict):
        section = {}
        config[section_name] = section
    section[option] = value

    with open(path, "w", encoding="utf-8") as f:
        toml.dump(config, f)
    return path


__all__ = [
    "HOME_ENV_VAR",
    "SETTING_KEYS",
    "TEMPLATE_ROOT_ENV_VAR",
    "UserSettings",
    "config_dir",
    "config_file",
    "load_settings",
    "save_setting",
]
