"""CLI entry point for tally."""

from pathlib import Path

import typer

from tally.commands.admin import init_command
from tally.commands.menu import session_command

app = typer.Typer(
    name="tally",
    help="tally - a single-account balance tracker",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Path = typer.Option(None, "--config", "-c", help="Config file (default: ~/.config/tally/config.toml)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Track one account balance through an interactive menu."""
    if ctx.invoked_subcommand is None:
        session_command(config, verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
    config: Path = typer.Option(None, "--config", "-c", help="Config file (default: ~/.config/tally/config.toml)"),
) -> None:
    """Write a default configuration file."""
    init_command(force, config)


if __name__ == "__main__":
    app()
