"""Admin commands for managing the config file."""

import sys
from pathlib import Path

from rich.console import Console

from tally.config import create_default_config, get_config_path

console = Console(stderr=True)


def init_command(force: bool = False, config_path: Path | None = None) -> None:
    """Write a default configuration file."""
    if config_path is None:
        config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {config_path}[/red]", style="bold")
        console.print("[yellow]Use 'tally init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Config file created at {config_path} (permissions: 600)")
