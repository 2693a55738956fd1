"""Pytest configuration and shared fixtures for termctl."""

# pylint: disable=wrong-import-position

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from src.config import command_registry, settings
from src.terminal import screen

SETTINGS_ENV_VARS = ("APP_NAME", "LOG_LEVEL", "LOG_FILE", "STATUS_LINES", "STATUS_DELAY")


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Drop cached settings, registry and controller so each test starts clean."""
    monkeypatch.setattr(settings, "_settings", None)
    monkeypatch.setattr(command_registry, "_command_registry", None)
    monkeypatch.setattr(screen, "_screen", None)
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(name="registry_file")
def fixture_registry_file(tmp_path):
    """Write a small command registry and return its path."""
    path = tmp_path / "commands.yaml"
    path.write_text(
        "commands:\n"
        "  help:\n"
        "    aliases: ['?']\n"
        "    description: Show help\n"
        "  exit:\n"
        "    aliases: [Quit, q]\n"
        "    description: Leave\n",
        encoding="utf-8",
    )
    return path
