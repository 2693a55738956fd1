"""
Escape sequence construction for termctl.
Builds rich Control objects for each terminal intent without writing anything.
"""

from rich.control import Control
from rich.segment import ControlType, Segment

# Sequences rich has no ControlType for
ERASE_DOWN = "\x1b[J"
ERASE_SCROLLBACK = "\x1b[3J"
SAVE_CURSOR = "\x1b7"
RESTORE_CURSOR = "\x1b8"


def _raw(code: str) -> Control:
    """Wrap a literal control sequence in a Control."""
    control = Control()
    control.segment = Segment(code, None, [])
    return control


def erase_lines(count: int) -> Control:
    """
    Build the sequence that erases `count` lines from the cursor line upward.

    Each line is erased in full; the cursor moves up one row between lines
    and finishes in the first column of the topmost erased line.

    Args:
        count: Number of lines to erase

    Returns:
        Control: Erase sequence, empty when count is not positive
    """
    if count <= 0:
        return Control()

    codes = []
    for index in range(count):
        codes.append((ControlType.ERASE_IN_LINE, 2))
        if index < count - 1:
            codes.append((ControlType.CURSOR_UP, 1))
    codes.append((ControlType.CURSOR_MOVE_TO_COLUMN, 0))
    return Control(*codes)


def clear_screen() -> Control:
    """Clear the visible screen and move the cursor home."""
    return Control(ControlType.CLEAR, ControlType.HOME)


def cursor_up(count: int) -> Control:
    """Move the cursor up `count` rows; empty when count is not positive."""
    if count <= 0:
        return Control()
    return Control.move(y=-count)


def cursor_down(count: int) -> Control:
    """Move the cursor down `count` rows; empty when count is not positive."""
    if count <= 0:
        return Control()
    return Control.move(y=count)


def erase_down() -> Control:
    """Erase from the cursor to the end of the screen."""
    return _raw(ERASE_DOWN)


def save_cursor() -> Control:
    return _raw(SAVE_CURSOR)


def restore_cursor() -> Control:
    return _raw(RESTORE_CURSOR)


def clear_prompt(lines: int = 1) -> Control:
    """
    Build the sequence that wipes a prompt echo spanning `lines` rows.

    Args:
        lines: Rows occupied by the prompt and its echoed input

    Returns:
        Control: Carriage return plus erase for each row, moving up between rows
    """
    if lines <= 0:
        return Control()

    codes = [ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2)]
    for _ in range(lines - 1):
        codes.append((ControlType.CURSOR_UP, 1))
        codes.append((ControlType.ERASE_IN_LINE, 2))
    return Control(*codes)


def clear_terminal() -> Control:
    """Clear the screen and the scrollback buffer, then move the cursor home."""
    return _raw(f"{Control.clear()}{ERASE_SCROLLBACK}{Control.home()}")
