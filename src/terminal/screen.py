"""
Terminal output controller for termctl.
Writes escape sequences for clearing lines, clearing the screen and moving the cursor.
"""

import logging
import sys
from typing import Optional, TextIO

from rich.control import Control

from . import sequences

logger = logging.getLogger(__name__)


class ScreenController:
    """
    Stateless facade that writes terminal control sequences to a stream.

    Sequences come from the sequences module; this class only writes them.
    Write errors from the stream are not caught.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the controller.

        Args:
            stream: Target stream. None writes to sys.stdout as bound at call time.
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Get the stream writes currently go to."""
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, control: Control) -> None:
        """Write one control sequence and flush."""
        code = str(control)
        logger.debug(f"Writing control sequence {code!r}")
        stream = self.stream
        stream.write(code)
        stream.flush()

    def clear_lines(self, count: int) -> None:
        """
        Erase `count` lines, counted from the cursor line upward.

        Args:
            count: Number of previously printed lines to erase
        """
        self._write(sequences.erase_lines(count))

    def clear_screen(self) -> None:
        """Clear the whole screen and move the cursor home."""
        self._write(sequences.clear_screen())

    def cursor_up(self, count: int) -> None:
        """
        Move the cursor up without erasing.

        Args:
            count: Rows to move; zero or less writes nothing
        """
        self._write(sequences.cursor_up(count))

    def clear_from_cursor(self) -> None:
        """Erase from the cursor to the end of the screen."""
        self._write(sequences.erase_down())

    def cursor_down(self, count: int) -> None:
        """Move the cursor down `count` rows."""
        self._write(sequences.cursor_down(count))

    def save_cursor_position(self) -> None:
        """Save the cursor position and attributes."""
        self._write(sequences.save_cursor())

    def restore_cursor_position(self) -> None:
        """Restore the cursor saved by save_cursor_position."""
        self._write(sequences.restore_cursor())

    def clear_prompt_output(self, lines: int = 1) -> None:
        """
        Wipe a prompt and its echoed input.

        Args:
            lines: Rows the prompt occupies, including the current one
        """
        self._write(sequences.clear_prompt(lines))

    def clear_terminal(self) -> None:
        """Clear the screen together with the scrollback buffer."""
        self._write(sequences.clear_terminal())


# Singleton instance
_screen: Optional[ScreenController] = None


def get_screen() -> ScreenController:
    """
    Get the singleton ScreenController writing to standard output.

    Returns:
        ScreenController: The default controller
    """
    global _screen
    if _screen is None:
        _screen = ScreenController()
    return _screen


def clear_lines(count: int) -> None:
    """Erase `count` lines on standard output."""
    get_screen().clear_lines(count)


def clear_screen() -> None:
    """Clear the screen on standard output."""
    get_screen().clear_screen()


def cursor_up(count: int) -> None:
    """Move the standard output cursor up `count` rows."""
    get_screen().cursor_up(count)


def clear_from_cursor() -> None:
    """Erase standard output from the cursor to the end of the screen."""
    get_screen().clear_from_cursor()


def cursor_down(count: int) -> None:
    """Move the standard output cursor down `count` rows."""
    get_screen().cursor_down(count)


def save_cursor_position() -> None:
    """Save the standard output cursor position."""
    get_screen().save_cursor_position()


def restore_cursor_position() -> None:
    """Restore the saved standard output cursor position."""
    get_screen().restore_cursor_position()


def clear_prompt_output(lines: int = 1) -> None:
    """Wipe a prompt spanning `lines` rows on standard output."""
    get_screen().clear_prompt_output(lines)


def clear_terminal() -> None:
    """Clear the screen and scrollback on standard output."""
    get_screen().clear_terminal()
