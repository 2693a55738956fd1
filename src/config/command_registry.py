"""
Command registry loader for termctl.
Loads the interactive CLI's utility commands from command_registry.yaml.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional
import yaml
from pydantic import BaseModel, Field, ValidationError

from .settings import get_settings

logger = logging.getLogger(__name__)


class CommandSpec(BaseModel):
    """A utility command understood by the interactive CLI."""

    name: str = Field(..., description="Canonical command name")
    aliases: List[str] = Field(default_factory=list, description="Alternative spellings")
    description: str = Field(..., description="One-line help text")


class CommandRegistry:
    """Loads and resolves CLI commands from the YAML registry."""

    def __init__(self, registry_path: Optional[Path] = None):
        """
        Initialize the command registry.

        Args:
            registry_path: YAML file to load; defaults to the configured registry path
        """
        self._registry_path = registry_path or get_settings().command_registry_path
        self._commands: Dict[str, CommandSpec] = {}
        self._lookup: Dict[str, str] = {}
        self._load_registry()

    def _load_registry(self) -> None:
        """Load the command registry from YAML file."""
        try:
            with open(self._registry_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

        except FileNotFoundError:
            logger.error(f"Command registry file not found: {self._registry_path}")
            raise FileNotFoundError(f"Command registry not found at {self._registry_path}")
        except yaml.YAMLError as e:
            logger.error(f"Error parsing command registry YAML: {e}")
            raise ValueError(f"Invalid YAML in command registry: {e}")

        for name, entry in (data.get('commands') or {}).items():
            try:
                command = CommandSpec(name=name, **(entry or {}))
            except (TypeError, ValidationError) as e:
                logger.error(f"Invalid command entry '{name}': {e}")
                raise ValueError(f"Invalid command entry '{name}': {e}")

            self._commands[command.name] = command
            for key in [command.name, *command.aliases]:
                self._lookup[key.lower()] = command.name

        logger.info(f"Loaded command registry with {len(self._commands)} commands")

    def resolve(self, user_input: str) -> Optional[str]:
        """
        Resolve raw user input to a canonical command name.

        Args:
            user_input: Text typed at the prompt

        Returns:
            str: Canonical command name, or None if the input is not a command
        """
        return self._lookup.get(user_input.strip().lower())

    def get_command(self, name: str) -> CommandSpec:
        """
        Get a command by canonical name.

        Args:
            name: Canonical command name

        Returns:
            CommandSpec: The command definition

        Raises:
            ValueError: If the command is not registered
        """
        if name not in self._commands:
            available = list(self._commands.keys())
            raise ValueError(
                f"Command '{name}' not found. "
                f"Available commands: {available}"
            )

        return self._commands[name]

    def list_commands(self) -> List[CommandSpec]:
        """
        Get all registered commands in registry order.

        Returns:
            list: Command definitions
        """
        return list(self._commands.values())


# Singleton instance
_command_registry: Optional[CommandRegistry] = None


def get_command_registry() -> CommandRegistry:
    """
    Get the singleton CommandRegistry instance.

    Returns:
        CommandRegistry: The command registry instance
    """
    global _command_registry
    if _command_registry is None:
        _command_registry = CommandRegistry()
    return _command_registry


def resolve_command(user_input: str) -> Optional[str]:
    """Resolve user input through the default registry."""
    return get_command_registry().resolve(user_input)


def list_commands() -> List[CommandSpec]:
    """List commands from the default registry."""
    return get_command_registry().list_commands()
