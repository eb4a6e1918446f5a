"""CLI command modules for create-cool-app."""

from .check_cmd import check
from .config_cmd import config
from .create import register_create_command
from .templates_cmd import templates

__all__ = ["check", "config", "register_create_command", "templates"]
