"""Terminal output control for termctl."""

from .screen import (
    ScreenController,
    get_screen,
    clear_lines,
    clear_screen,
    cursor_up,
    clear_from_cursor,
    cursor_down,
    save_cursor_position,
    restore_cursor_position,
    clear_prompt_output,
    clear_terminal,
)

__all__ = [
    # Controller
    "ScreenController",
    "get_screen",
    # Screen operations
    "clear_lines",
    "clear_screen",
    "cursor_up",
    "clear_from_cursor",
    "cursor_down",
    "save_cursor_position",
    "restore_cursor_position",
    "clear_prompt_output",
    "clear_terminal",
]
