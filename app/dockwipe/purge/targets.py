"""Purge target tables for the two operating modes.

The total wipe removes everything the engine left on disk, including its
data roots. The scoped wipe only touches user-domain paths and leaves the
engine installation alone; engine state is cleared through the engine CLI.
"""

from collections.abc import Mapping
from pathlib import Path

from dockwipe.core.config import EngineConfig
from dockwipe.core.paths import get_cache_home
from dockwipe.models.purge import ResourceSelector, Subsystem, SubsystemPurgeTarget


def _user_config_dir(engine: EngineConfig, home: Path) -> Path:
    return home / f".{engine.name}"


def _generic_cache_target(
    engine: EngineConfig,
    home: Path,
    environ: Mapping[str, str] | None,
) -> SubsystemPurgeTarget:
    return SubsystemPurgeTarget(
        subsystem=Subsystem.GENERIC_CACHE,
        paths=(
            get_cache_home(environ, home) / engine.name,
            home / ".local" / "share" / engine.name,
        ),
    )


def build_engine_resource_target() -> SubsystemPurgeTarget:
    """Build the target that clears engine state through the engine CLI.

    Containers are stopped first so the prune can remove them.
    """
    return SubsystemPurgeTarget(
        subsystem=Subsystem.ENGINE_RESOURCES,
        paths=(
            ResourceSelector.RUNNING_CONTAINERS,
            ResourceSelector.ALL_RESOURCES,
            ResourceSelector.BUILD_CACHE,
        ),
    )


def build_total_targets(
    engine: EngineConfig,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[SubsystemPurgeTarget]:
    """Build the total-wipe targets.

    Engine resources are cleared by a separate stage while the engine is
    still running; these targets cover what is left on disk afterwards.
    Subsystem directories inside ~/.<engine> come before ~/.<engine> itself
    so each subsystem is reported on its own.

    Args:
        engine: Engine identity.
        home: Home directory. Defaults to Path.home().
        environ: Environment for XDG lookups. Defaults to os.environ.

    Returns:
        Targets in removal order.
    """
    home = home or Path.home()
    user_dir = _user_config_dir(engine, home)

    return [
        SubsystemPurgeTarget(
            subsystem=Subsystem.CORE_RUNTIME,
            paths=(
                Path("/var/lib") / engine.name,
                Path("/var/lib") / engine.runtime,
                Path("/etc") / engine.name,
            ),
            privileged=True,
        ),
        SubsystemPurgeTarget(
            subsystem=Subsystem.MODEL_RUNNER,
            paths=(
                user_dir / "model-runner",
                home / ".cache" / "model-runner",
                home / ".local" / "share" / "model-runner",
                user_dir / "ai" / "models",
                user_dir / "ai" / "cache",
            ),
        ),
        SubsystemPurgeTarget(
            subsystem=Subsystem.SCAN_TOOL,
            paths=(user_dir / "scout", home / ".cache" / "scout"),
        ),
        SubsystemPurgeTarget(
            subsystem=Subsystem.CLI_PLUGINS,
            paths=(user_dir / "cli-plugins",),
        ),
        SubsystemPurgeTarget(
            subsystem=Subsystem.USER_CONFIG,
            paths=(user_dir,),
        ),
        _generic_cache_target(engine, home, environ),
    ]


def build_scoped_targets(
    engine: EngineConfig,
    home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[SubsystemPurgeTarget]:
    """Build the scoped-wipe targets.

    Engine resources are pruned through the engine first, then the
    user-domain remnants are removed. No target is privileged.

    Args:
        engine: Engine identity.
        home: Home directory. Defaults to Path.home().
        environ: Environment for XDG lookups. Defaults to os.environ.

    Returns:
        Targets in removal order.
    """
    home = home or Path.home()

    return [
        build_engine_resource_target(),
        SubsystemPurgeTarget(
            subsystem=Subsystem.USER_CONFIG,
            paths=(_user_config_dir(engine, home),),
        ),
        _generic_cache_target(engine, home, environ),
    ]
