"""
Terminal interface for termctl.
Provides rich console UI for user interaction and status display.
"""

import logging
import time
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.config import CommandSpec
from src.terminal import get_screen

logger = logging.getLogger(__name__)
console = Console()


def show_welcome(app_name: str) -> None:
    """
    Display welcome message.

    Args:
        app_name: Application name shown in the panel title
    """
    welcome_text = f"""[bold cyan]{app_name}[/bold cyan]
Terminal output control playground

[dim]Available commands:[/dim]
• [yellow]help[/yellow] - List commands
• [yellow]status[/yellow] - Run the status line demo
• [yellow]clear[/yellow] - Clear terminal screen
• [yellow]exit[/yellow] - Quit

[dim]Type a command below:[/dim]"""

    console.print(Panel.fit(
        welcome_text,
        border_style="cyan",
        padding=(1, 2)
    ))


def show_help(commands: List[CommandSpec]) -> None:
    """
    Display the registered commands.

    Args:
        commands: Command definitions from the registry
    """
    table = Table(title="Commands", border_style="blue")
    table.add_column("Command", style="cyan")
    table.add_column("Aliases", style="dim")
    table.add_column("Description", style="white")

    for command in commands:
        table.add_row(command.name, ", ".join(command.aliases), command.description)

    console.print()
    console.print(table)
    console.print()


def render_status_block(step: int, total: int) -> None:
    """
    Print one frame of the status block.

    Args:
        step: Number of steps already finished
        total: Number of lines in the block
    """
    for index in range(1, total + 1):
        if index <= step:
            console.print(f"  [green]✓[/green] Step {index} of {total}")
        elif index == step + 1:
            console.print(f"  [yellow]…[/yellow] Step {index} of {total}")
        else:
            console.print(f"  [dim]·[/dim] [dim]Step {index} of {total}[/dim]")


def show_status_demo(total: int, delay: float) -> None:
    """
    Render a status block that redraws in place, then erase it.

    Each frame leaves the cursor on the empty row under the block, so
    erasing `total + 1` lines removes the whole frame.

    Args:
        total: Number of status lines
        delay: Seconds to wait between frames
    """
    screen = get_screen()
    logger.info(f"Running status demo with {total} lines")

    for step in range(total + 1):
        if step:
            screen.clear_lines(total + 1)
        render_status_block(step, total)
        time.sleep(delay)

    screen.clear_lines(total + 1)
    display_success("Status demo complete")


def display_error(error_message: str, helpful_hint: Optional[str] = None) -> None:
    """
    Display error message with optional helpful hint.

    Args:
        error_message: Error message to display
        helpful_hint: Optional helpful hint for user
    """
    console.print(f"\n[red]✗ Error:[/red] {error_message}")

    if helpful_hint:
        console.print(f"[dim]{helpful_hint}[/dim]")

    console.print()


def display_success(message: str) -> None:
    """
    Display success message.

    Args:
        message: Success message to display
    """
    console.print(f"[green]✓ {message}[/green]")


def get_input(prompt: str = "termctl") -> str:
    """
    Get user input with custom prompt.

    Args:
        prompt: Prompt text

    Returns:
        str: User input
    """
    return console.input(f"\n[bold cyan]{prompt}:[/bold cyan] ")


def clear_screen() -> None:
    """Clear the terminal screen."""
    get_screen().clear_screen()
