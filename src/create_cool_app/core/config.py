"""Static choices and copy rules shared across create-cool-app."""

from __future__ import annotations

TOOL_NAME = "create-cool-app"

TEMPLATE_CHOICES: dict[str, str] = {
    "library": "JavaScript library bundled with Rollup",
    "library-ts": "TypeScript library with commit linting",
    "ts-mono": "TypeScript monorepo driven by pnpm workspaces",
}

DEFAULT_TEMPLATE = "library"

PACKAGE_MANAGER_CHOICES: dict[str, str] = {
    "pnpm": "Fast, disk space efficient package manager",
    "npm": "The package manager bundled with Node.js",
    "yarn": "Yarn classic or berry",
}

DEFAULT_PACKAGE_MANAGER = "pnpm"

# Workspaces in ts-mono rely on pnpm-workspace.yaml.
TEMPLATE_PACKAGE_MANAGERS: dict[str, tuple[str, ...]] = {
    "library": ("pnpm", "npm", "yarn"),
    "library-ts": ("pnpm", "npm", "yarn"),
    "ts-mono": ("pnpm",),
}

# Command used to run a package binary without a global install.
RUNNER_COMMANDS: dict[str, str] = {
    "pnpm": "pnpm",
    "npm": "npx",
    "yarn": "yarn",
}

EXCLUDED_ENTRIES: frozenset[str] = frozenset({"node_modules", "dist", "pnpm-lock.yaml"})

RENAMED_ENTRIES: dict[str, str] = {"_gitignore": ".gitignore"}

REPLACEABLE_FILES: frozenset[str] = frozenset({"package.json", "README.md"})

VCS_DIRECTORY = ".git"

DEFAULT_COMMIT_MESSAGE = "chore: init"

TEMPLATE_DIR_PREFIX = "template-"

BANNER = r"""
   ___              _                          _
  / __|_ _ ___ __ _| |_ ___   __ ___  ___ | |  __ _ _ __ _ __
 | (__| '_/ -_) _` |  _/ -_) / _/ _ \/ _ \| | / _` | '_ \ '_ \
  \___|_| \___\__,_|\__\___| \__\___/\___/|_| \__,_| .__/ .__/
                                                   |_|  |_|
"""

TAGLINE = "Scaffold a JavaScript or TypeScript project from a bundled template"

__all__ = [
    "BANNER",
    "DEFAULT_COMMIT_MESSAGE",
    "DEFAULT_PACKAGE_MANAGER",
    "DEFAULT_TEMPLATE",
    "EXCLUDED_ENTRIES",
    "PACKAGE_MANAGER_CHOICES",
    "RENAMED_ENTRIES",
    "REPLACEABLE_FILES",
    "RUNNER_COMMANDS",
    "TAGLINE",
    "TEMPLATE_CHOICES",
    "TEMPLATE_DIR_PREFIX",
    "TEMPLATE_PACKAGE_MANAGERS",
    "TOOL_NAME",
    "VCS_DIRECTORY",
]
