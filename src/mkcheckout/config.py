"""
Configuration loading for mkcheckout.

This module loads optional defaults from TOML files and merges them with the
command-line flags into an immutable Options value. Configuration is never written.
"""

import argparse
import os
import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import platformdirs
from loguru import logger

__all__ = [
    "APPLICATION_NAME",
    "Options",
    "load_config",
    "load_options",
]

APPLICATION_NAME: str = "mkcheckout"
CONFIG_ENV_VAR: str = "MKCHECKOUT_CONFIG"


@dataclass(frozen=True)
class Options:
    """
    Run options, built once at startup and passed explicitly.

    Attributes:
        debug: Print the options and log at DEBUG level.
        execute: Run the generated command instead of only printing it.
        gui: Ask for input with Qt dialogs instead of the terminal.
        log_file: Write a rotating debug log under the user log directory.
    """

    debug: bool = False
    execute: bool = False
    gui: bool = False
    log_file: bool = True


def find_pyproject_config(start_path: Path) -> dict[str, Any]:
    """
    Walk backwards from start_path to root, looking for a pyproject.toml file.

    Args:
        start_path: The directory to start searching from.

    Returns:
        dict: The [tool.mkcheckout] section of the nearest pyproject.toml, or {}.
    """
    current = start_path.expanduser().resolve()
    logger.debug(f"Searching for pyproject.toml starting from {current}")
    for parent in [current] + list(current.parents):
        pyproject = parent / "pyproject.toml"
        if not pyproject.is_file():
            continue
        logger.debug(f"Found pyproject.toml at {pyproject}")
        data = find_toml_config(pyproject)
        tool_section = data.get("tool")
        if not isinstance(tool_section, dict):
            logger.debug(f"No [tool] section in {pyproject}")
            continue
        section = tool_section.get(APPLICATION_NAME)
        if isinstance(section, dict):
            logger.debug(f"Found [tool.{APPLICATION_NAME}] section in {pyproject}")
            return section
        logger.debug(f"No [tool.{APPLICATION_NAME}] section in {pyproject}")
        return {}
    logger.debug(f"No pyproject.toml with [tool.{APPLICATION_NAME}] found in any parent directory")
    return {}


def find_toml_config(path: Path) -> dict[str, Any]:
    """
    Load a TOML config file if it exists.

    Args:
        path: Path to the TOML file.

    Returns:
        dict: The parsed file, or {} if missing or invalid.
    """
    if not path.is_file():
        logger.debug(f"No config file found at {path}")
        return {}
    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        logger.exception(f"Failed to read config at {path}")
        return {}
    logger.debug(f"Loaded config from {path}")
    return config


@lru_cache(maxsize=1)
def load_config() -> dict[str, Any]:
    """
    Load configuration from the first available source:
    1. the file named by $MKCHECKOUT_CONFIG
    2. pyproject.toml [tool.mkcheckout] (searching upwards from cwd)
    3. mkcheckout.toml in $XDG_CONFIG_HOME/mkcheckout/
    4. mkcheckout.toml in platformdirs.user_config_dir
    5. .mkcheckout.toml in the user home directory

    Returns:
        dict: Configuration dictionary. Empty if nothing was found.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit).expanduser().resolve()
        logger.debug(f"Attempting to load config from {path} (${CONFIG_ENV_VAR})")
        config = find_toml_config(path)
        if config:
            return config

    pyproject_config = find_pyproject_config(Path.cwd())
    if pyproject_config:
        logger.debug(f"Using configuration from pyproject.toml [tool.{APPLICATION_NAME}]")
        return pyproject_config

    candidates = []
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        candidates.append(
            Path(xdg_config_home).expanduser().resolve() / APPLICATION_NAME / f"{APPLICATION_NAME}.toml"
        )
    candidates.append(
        Path(platformdirs.user_config_dir(APPLICATION_NAME)).expanduser().resolve()
        / f"{APPLICATION_NAME}.toml"
    )
    candidates.append(Path.home().expanduser().resolve() / f".{APPLICATION_NAME}.toml")
    for path in candidates:
        config = find_toml_config(path)
        if config:
            logger.debug(f"Using configuration from {path}")
            return config

    logger.debug("No configuration file found, using empty config")
    return {}


def _config_flag(config: dict[str, Any], key: str, default: bool) -> bool:
    value = config.get(key, default)
    if not isinstance(value, bool):
        logger.error(f"Config key {key!r} must be a boolean, got {value!r} - using {default}")
        return default
    return value


def load_options(args: argparse.Namespace, config: dict[str, Any] | None = None) -> Options:
    """
    Merge parsed flags with configuration defaults.

    A flag on the command line always enables its feature; configuration can only
    enable features by default.

    Args:
        args: Parsed command-line arguments.
        config: Configuration dictionary, loaded with load_config() when omitted.

    Returns:
        Options: The immutable run options.
    """
    if config is None:
        config = load_config()
    return Options(
        debug=args.debug,
        execute=args.execute or _config_flag(config, "execute", False),
        gui=args.gui or _config_flag(config, "gui", False),
        log_file=_config_flag(config, "log_file", True),
    )
