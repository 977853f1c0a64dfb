"""dockwipe configuration and settings.

This module provides the configuration model and I/O functions. Every
setting has a default matching a stock Docker installation, so the file is
optional.

Configuration is stored in ~/.config/dockwipe/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dockwipe.core.paths import get_config_path

logger = logging.getLogger(__name__)

# Basenames treated as engine installation components under the review root
DEFAULT_EXCLUDE_NAMES: tuple[str, ...] = (
    "containerd",
    "docker",
    "dockerd",
    "docker-cli",
    "docker-compose",
    "docker-buildx",
)

# Name fragments that make a directory look like a user project
DEFAULT_PROJECT_PATTERNS: tuple[str, ...] = (
    "project",
    "app",
    "service",
    "stack",
    "infra",
    "deployment",
    "solution",
)


class EngineConfig(BaseModel):
    """Identity of the container engine being reset.

    Attributes:
        name: Engine name; used for data roots (/var/lib/<name>), /etc/<name>
            and per-user paths (~/.<name>).
        runtime: Container runtime name; its data root is /var/lib/<runtime>.
        group: Access-control group granting unprivileged engine access.
        services: Service units stopped before the purge, in stop order.
        packages: Package names upgraded by the update dispatcher.
    """

    model_config = ConfigDict(extra="forbid")

    name: Annotated[str, Field(min_length=1)] = "docker"
    runtime: Annotated[str, Field(min_length=1)] = "containerd"
    group: Annotated[str, Field(min_length=1)] = "docker"
    services: list[str] = Field(default_factory=lambda: ["docker.socket", "docker", "containerd"])
    packages: list[str] = Field(
        default_factory=lambda: ["docker-ce", "docker-ce-cli", "containerd.io"]
    )


class ReviewConfig(BaseModel):
    """Settings for the directory review stage.

    Attributes:
        root: Directory whose immediate subdirectories are reviewed.
        exclude_names: Case-insensitive substrings that exclude a directory.
        project_patterns: Case-insensitive substrings marking project directories.
    """

    model_config = ConfigDict(extra="forbid")

    root: Path = Path("/opt")
    exclude_names: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_NAMES))
    project_patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_PROJECT_PATTERNS))


class ReadinessConfig(BaseModel):
    """Timing of the service stop and readiness poll.

    Attributes:
        max_attempts: Liveness probes before giving up (1-120).
        poll_interval: Seconds between probes.
        settle_delay: Seconds to wait after stopping services.
    """

    model_config = ConfigDict(extra="forbid")

    max_attempts: Annotated[int, Field(ge=1, le=120)] = 15
    poll_interval: Annotated[float, Field(ge=0.0, le=60.0)] = 2.0
    settle_delay: Annotated[float, Field(ge=0.0, le=60.0)] = 2.0


class DockwipeConfig(BaseModel):
    """Top-level dockwipe configuration."""

    model_config = ConfigDict(extra="forbid")

    engine: EngineConfig = Field(default_factory=EngineConfig)
    review: ReviewConfig = Field(default_factory=ReviewConfig)
    readiness: ReadinessConfig = Field(default_factory=ReadinessConfig)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> DockwipeConfig:
    """Load configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated DockwipeConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or its content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return DockwipeConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return DockwipeConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: DockwipeConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The DockwipeConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config.model_dump(mode="json")

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        # os.replace() is atomic on POSIX
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {config_path}: {e}") from e

    return config_path


def dump_config(config: DockwipeConfig) -> str:
    """Render configuration as TOML text.

    Args:
        config: The configuration to render.

    Returns:
        TOML document string.
    """
    return tomli_w.dumps(config.model_dump(mode="json"))
