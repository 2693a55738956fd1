"""CLI module for termctl."""

from .terminal import (
    console,
    show_welcome,
    show_help,
    render_status_block,
    show_status_demo,
    display_error,
    display_success,
    get_input,
    clear_screen,
)

__all__ = [
    "console",
    "show_welcome",
    "show_help",
    "render_status_block",
    "show_status_demo",
    "display_error",
    "display_success",
    "get_input",
    "clear_screen",
]
