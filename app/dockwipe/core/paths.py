"""XDG-compliant path management for dockwipe.

This module provides the paths dockwipe reads its own settings from, and
the XDG base directories used to locate the engine's per-user data.

XDG defaults:
- Config: ~/.config/dockwipe/
- Cache base: ~/.cache/
"""

import os
from collections.abc import Mapping
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "dockwipe"


def _get_xdg_base(
    env_var: str,
    default_subdir: str,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Path:
    """Get an XDG base directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CACHE_HOME").
        default_subdir: Default subdirectory under home (e.g., ".cache").
        environ: Environment to read. Defaults to os.environ.
        home: Home directory. Defaults to Path.home().

    Returns:
        Path to the base directory (not application-specific).
    """
    env = os.environ if environ is None else environ
    base = env.get(env_var)
    if base:
        return Path(base)
    return (home or Path.home()) / default_subdir


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/dockwipe/ (or XDG_CONFIG_HOME/dockwipe/).
    """
    return _get_xdg_base("XDG_CONFIG_HOME", ".config") / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/dockwipe/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/dockwipe/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_cache_home(
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Path:
    """Get the XDG cache base directory shared by all applications.

    Args:
        environ: Environment to read. Defaults to os.environ.
        home: Home directory. Defaults to Path.home().

    Returns:
        XDG_CACHE_HOME if set, otherwise ~/.cache.
    """
    return _get_xdg_base("XDG_CACHE_HOME", ".cache", environ, home)
