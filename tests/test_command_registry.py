"""Tests for the YAML command registry."""

import pytest

from src.config import CommandRegistry, get_command_registry, list_commands, resolve_command


def test_resolves_names_and_aliases(registry_file):
    registry = CommandRegistry(registry_file)
    assert registry.resolve("help") == "help"
    assert registry.resolve("?") == "help"
    assert registry.resolve("  QUIT ") == "exit"
    assert registry.resolve("q") == "exit"


def test_unknown_input_resolves_to_none(registry_file):
    assert CommandRegistry(registry_file).resolve("make coffee") is None


def test_list_commands_keeps_file_order(registry_file):
    commands = CommandRegistry(registry_file).list_commands()
    assert [command.name for command in commands] == ["help", "exit"]
    assert commands[1].aliases == ["Quit", "q"]


def test_get_command_unknown_raises(registry_file):
    registry = CommandRegistry(registry_file)
    assert registry.get_command("exit").description == "Leave"
    with pytest.raises(ValueError, match="Available commands"):
        registry.get_command("status")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CommandRegistry(tmp_path / "nope.yaml")


def test_invalid_yaml_raises_value_error(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("commands: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        CommandRegistry(path)


def test_entry_without_description_raises(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("commands:\n  help:\n    aliases: [h]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid command entry 'help'"):
        CommandRegistry(path)


def test_bundled_registry_has_cli_commands():
    names = {command.name for command in list_commands()}
    assert names == {"help", "status", "clear", "exit"}
    assert resolve_command("demo") == "status"
    assert resolve_command("cls") == "clear"
    assert get_command_registry() is get_command_registry()
