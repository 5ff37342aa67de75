"""Configuration file management for tally."""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    log_level: str = DEFAULT_LOG_LEVEL


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "tally" / "config.toml"


def default_config() -> dict[str, Any]:
    """Build the default configuration document."""
    return {
        "logging": {"level": DEFAULT_LOG_LEVEL},
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config(), f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def parse_settings(config: dict[str, Any]) -> Settings:
    """Validate a configuration dictionary into Settings.

    Missing sections and keys fall back to defaults.

    Args:
        config: Configuration dictionary as loaded from TOML.

    Returns:
        Validated settings.

    Raises:
        ValueError: If the log level is invalid.
    """
    logging_section = config.get("logging", {})

    log_level = str(logging_section.get("level", DEFAULT_LOG_LEVEL)).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"logging level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(log_level=log_level)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, using defaults when the config file is absent.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Validated settings.

    Raises:
        ValueError: If the file is malformed or holds invalid values.
    """
    if config_path is None:
        config_path = get_config_path()

    try:
        config = load_config(config_path)
    except FileNotFoundError:
        logger.debug("No config at %s, using defaults", config_path)
        return Settings()

    return parse_settings(config)
