"""Configuration module for termctl."""

from .settings import Settings, get_settings
from .command_registry import (
    CommandSpec,
    CommandRegistry,
    get_command_registry,
    resolve_command,
    list_commands,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Command Registry
    "CommandSpec",
    "CommandRegistry",
    "get_command_registry",
    "resolve_command",
    "list_commands",
]
