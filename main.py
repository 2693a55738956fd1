"""
termctl
Main application entry point
"""

import logging
import sys

from rich.markup import escape

from src.config import get_settings, get_command_registry
from src.cli.terminal import (
    console,
    show_welcome,
    show_help,
    show_status_demo,
    display_error,
    get_input,
    clear_screen
)

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file: str) -> None:
    """
    Configure root logging with a file handler and a stderr stream handler.

    Args:
        level: Logging level name
        log_file: Path of the log file
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )


def main() -> int:
    """Main application loop."""
    try:
        # Load settings
        settings = get_settings()
        configure_logging(settings.log_level, settings.log_file)
        logger.info(f"{settings.app_name} starting up...")

        registry = get_command_registry()

        # Show welcome
        show_welcome(settings.app_name)

        # Main interaction loop
        while True:
            try:
                user_input = get_input()

                # Handle empty input
                if not user_input.strip():
                    continue

                command = registry.resolve(user_input)

                if command == "exit":
                    console.print("\n[yellow]Goodbye![/yellow]\n")
                    break

                elif command == "help":
                    show_help(registry.list_commands())

                elif command == "clear":
                    clear_screen()
                    show_welcome(settings.app_name)

                elif command == "status":
                    show_status_demo(settings.status_lines, settings.status_delay)

                else:
                    logger.warning(f"Unknown command: {user_input.strip()}")
                    display_error(
                        f"Unknown command: {escape(user_input.strip())}",
                        "Type 'help' to list the available commands."
                    )

            except KeyboardInterrupt:
                console.print("\n[yellow]Use 'exit' to quit.[/yellow]")
                continue

            except EOFError:
                logger.info("Input stream closed")
                console.print("\n[yellow]Goodbye![/yellow]\n")
                break

            except Exception as e:
                logger.error(f"Unexpected error in main loop: {e}", exc_info=True)
                display_error(
                    "An unexpected error occurred.",
                    "Please try again or type 'exit' to quit."
                )
                continue

        logger.info(f"{settings.app_name} shutting down...")
        return 0

    except Exception as e:
        console.print(f"\n[red]✗ Fatal error:[/red] {escape(str(e))}")
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
