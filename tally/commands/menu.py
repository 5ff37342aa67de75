"""Interactive menu loop for viewing and changing the balance."""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console

from tally.config import load_settings
from tally.logging_config import setup_logging
from tally.operations import AccountOperations, OperationResult
from tally.store import BalanceStore

logger = logging.getLogger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True)

MENU_RULE = "-" * 32

MENU_LINES = (
    MENU_RULE,
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    MENU_RULE,
)

INVALID_CHOICE = "Invalid choice, please select 1-4."
GOODBYE = "Exiting the program. Goodbye!"


def display_menu() -> None:
    """Print the main menu."""
    for line in MENU_LINES:
        console.print(line)


def prompt_line(prompt: str) -> str:
    """Read one line of input after showing prompt followed by ': '.

    Empty input is returned as an empty string rather than re-prompting.
    """
    result: str = typer.prompt(prompt, type=str, default="", show_default=False)
    return result


def show_result(result: OperationResult) -> None:
    """Print an operation's message, highlighting rejections."""
    if result.succeeded:
        console.print(result.message)
    else:
        console.print(result.message, style="red")


def process_choice(choice: str, operations: AccountOperations) -> bool:
    """Dispatch a menu selection.

    Args:
        choice: User's menu selection, already stripped.
        operations: Account operations to run.

    Returns:
        False if the user chose to exit, True to keep looping.
    """
    if choice == "1":
        show_result(operations.inquire())
    elif choice == "2":
        show_result(operations.credit(prompt_line("Enter credit amount")))
    elif choice == "3":
        show_result(operations.debit(prompt_line("Enter debit amount")))
    elif choice == "4":
        return False
    else:
        logger.debug("Unrecognized menu choice %r", choice)
        console.print(INVALID_CHOICE, style="red")
    return True


def menu_command(operations: AccountOperations) -> None:
    """Run the menu until the user exits or input ends."""
    logger.info("Session started with balance %s", operations.store.read())
    running = True

    while running:
        display_menu()
        try:
            choice = prompt_line("Enter your choice (1-4)").strip()
            running = process_choice(choice, operations)
        except typer.Abort:
            # EOF or Ctrl+C at a prompt
            console.print()
            running = False

    console.print(GOODBYE)
    logger.info("Session ended with balance %s", operations.store.read())


def session_command(config_path: Path | None = None, verbose: bool = False) -> None:
    """Load settings, configure logging and run a session on a fresh balance."""
    try:
        settings = load_settings(config_path)
    except (ValueError, OSError) as e:
        # tomllib.TOMLDecodeError is a ValueError
        err_console.print(f"[red]Config error: {e}[/red]", style="bold")
        sys.exit(1)

    setup_logging("DEBUG" if verbose else settings.log_level)

    menu_command(AccountOperations(BalanceStore()))
