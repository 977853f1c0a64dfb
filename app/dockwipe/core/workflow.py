"""Reset and clean workflows.

Wires the confirmation gate, service controller, purge engine, directory
reviewer, state reporter and update dispatcher into the stage sequences of
the two operating modes:

- total reset: confirm, prune through the engine, stop, purge everything,
  start and verify, report, review directories, offer an upgrade;
- scoped clean: check installed, confirm, prune and purge user data, review
  project directories, verify, report.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dockwipe.cli.display import (
    create_candidates_table,
    create_purge_results_table,
    print_clean_banner,
    print_reset_banner,
)
from dockwipe.core.confirm import ConfirmFn, confirm
from dockwipe.core.lifecycle import ServiceController
from dockwipe.core.pipeline import Stage, StageResult
from dockwipe.core.updates import detect_and_upgrade
from dockwipe.engine.docker import DockerEngineClient
from dockwipe.engine.reporter import StateReporter
from dockwipe.purge.engine import PurgeEngine
from dockwipe.purge.targets import (
    build_engine_resource_target,
    build_scoped_targets,
    build_total_targets,
)
from dockwipe.review.classifier import scan_candidates
from dockwipe.review.reviewer import DirectoryReviewer
from dockwipe.utils.formatting import (
    console,
    print_error,
    print_info,
    print_section,
    print_step,
    print_success,
    print_warning,
)

if TYPE_CHECKING:
    from dockwipe.core.config import DockwipeConfig
    from dockwipe.engine.base import EngineClient
    from dockwipe.models.purge import PurgeResult, SubsystemPurgeTarget
    from dockwipe.operators.base import UpgradeResult

logger = logging.getLogger(__name__)

UpgradeFn = Callable[[list[str]], "UpgradeResult | None"]


@dataclass
class Workflow:
    """Stages of both operating modes, sharing one set of collaborators.

    Attributes:
        config: Effective configuration.
        client: Engine client.
        confirm_fn: Confirmation gate.
        sleep: Sleep function for the service controller.
        upgrade_fn: Update dispatcher.
        home: Home directory for per-user paths (defaults to Path.home()).
        environ: Environment for XDG lookups (defaults to os.environ).
    """

    config: DockwipeConfig
    client: EngineClient
    confirm_fn: ConfirmFn = confirm
    sleep: Callable[[float], None] = time.sleep
    upgrade_fn: UpgradeFn = detect_and_upgrade
    home: Path | None = None
    environ: Mapping[str, str] | None = None
    purge_results: list[PurgeResult] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.controller = ServiceController(
            self.client,
            settle_delay=self.config.readiness.settle_delay,
            sleep=self.sleep,
        )
        self.purge_engine = PurgeEngine(self.client, self.confirm_fn)
        self.reviewer = DirectoryReviewer(self.confirm_fn)
        self.reporter = StateReporter(self.client)

    @classmethod
    def from_config(cls, config: DockwipeConfig, **kwargs: Any) -> Workflow:
        """Create a workflow driving the Docker CLI described by config.

        Args:
            config: Effective configuration.
            **kwargs: Overrides for the remaining fields.

        Returns:
            Workflow instance.
        """
        client = DockerEngineClient(binary=config.engine.name, services=config.engine.services)
        return cls(config=config, client=client, **kwargs)

    # =========================================================================
    # Stage sequences
    # =========================================================================

    def reset_stages(self, project_only: bool = False) -> list[Stage]:
        """Stages of the total reset.

        Args:
            project_only: Only offer directories matching a project pattern.

        Returns:
            Stages in execution order.
        """
        return [
            Stage("confirm", self.confirm_reset),
            Stage("prune engine", self.prune_engine),
            Stage("stop services", self.stop_services),
            Stage("purge", self.purge_total),
            Stage("start services", self.start_services),
            Stage("report state", self.report_state),
            Stage("review directories", lambda: self.review_directories(project_only)),
            Stage("update", self.offer_update),
            Stage("final report", self.final_reset_report),
        ]

    def clean_stages(self, project_only: bool = True) -> list[Stage]:
        """Stages of the scoped clean.

        Args:
            project_only: Only offer directories matching a project pattern.

        Returns:
            Stages in execution order.
        """
        return [
            Stage("check installed", self.check_installed),
            Stage("confirm", self.confirm_clean),
            Stage("purge", self.purge_scoped),
            Stage("review directories", lambda: self.review_directories(project_only)),
            Stage("verify engine", self.verify_engine),
            Stage("report state", lambda: self.report_state(include_all=False)),
            Stage("final report", self.final_clean_report),
        ]

    # =========================================================================
    # Individual stages
    # =========================================================================

    def check_installed(self) -> StageResult:
        """Fail unless the engine CLI is installed."""
        if not self.client.is_installed():
            print_error(f"{self._engine_title} is not installed. Nothing to clean.")
            return StageResult.FAILED
        return StageResult.PROCEEDED

    def confirm_reset(self) -> StageResult:
        """Show the reset banner and ask the top-level confirmation."""
        print_reset_banner(self.config)
        if not self.confirm_fn("PROCEED WITH FULL RESET? (THIS CANNOT BE UNDONE)"):
            print_info("Aborted by user. No changes made.")
            return StageResult.ABORTED
        return StageResult.PROCEEDED

    def confirm_clean(self) -> StageResult:
        """Show the clean banner and ask the top-level confirmation."""
        print_clean_banner(self.config)
        if not self.confirm_fn("PROCEED WITH STACK CLEANUP? (THIS CANNOT BE UNDONE)"):
            print_info("Aborted by user. No changes made.")
            return StageResult.ABORTED
        return StageResult.PROCEEDED

    def stop_services(self) -> StageResult:
        """Stop engine services before touching their data."""
        print_step(f"Stopping {self.config.engine.name} services...")
        self.controller.stop_services()
        return StageResult.PROCEEDED

    def prune_engine(self) -> StageResult:
        """Clear containers, images, volumes and build cache while the engine runs.

        Failures are recorded like any other purge item; the disk purge that
        follows removes whatever the engine could not.
        """
        print_step(f"Clearing {self.config.engine.name} resources through the engine...")
        return self._purge([build_engine_resource_target()])

    def purge_total(self) -> StageResult:
        """Remove all engine data from disk."""
        print_step("Purging engine data...")
        targets = build_total_targets(self.config.engine, self.home, self.environ)
        return self._purge(targets)

    def purge_scoped(self) -> StageResult:
        """Prune engine resources and remove user-domain data."""
        print_step("Purging engine data...")
        targets = build_scoped_targets(self.config.engine, self.home, self.environ)
        return self._purge(targets)

    def start_services(self) -> StageResult:
        """Start engine services and wait until the engine answers."""
        readiness = self.config.readiness
        print_step(f"Starting {self.config.engine.name} services...")
        state = self.controller.start_and_await_ready(
            max_attempts=readiness.max_attempts,
            interval=readiness.poll_interval,
        )
        if not state.ready:
            print_error(
                f"{self._engine_title} did not become ready after {state.attempt} attempts."
            )
            print_info(f"Check the service log: journalctl -u {self.config.engine.name}")
            return StageResult.FAILED

        print_success(f"{self._engine_title} is up (attempt {state.attempt}).")
        return StageResult.PROCEEDED

    def verify_engine(self) -> StageResult:
        """Fail unless the engine still answers after a scoped clean."""
        print_step(f"Verifying {self.config.engine.name} is still fully operational...")
        if not self.client.info():
            print_error(f"{self._engine_title} is not working properly!")
            print_info(
                f"Your {self.config.engine.name} installation may be damaged. "
                f"Check journalctl -u {self.config.engine.name} or consider reinstalling."
            )
            return StageResult.FAILED
        return StageResult.PROCEEDED

    def report_state(self, include_all: bool = True) -> StageResult:
        """List what the engine holds now; never fatal."""
        print_section("Current engine state")
        self.reporter.report(include_all=include_all)
        return StageResult.PROCEEDED

    def review_directories(self, project_only: bool) -> StageResult:
        """Offer directories under the review root for deletion.

        Args:
            project_only: Only offer directories matching a project pattern.
        """
        review = self.config.review
        if not review.root.is_dir():
            logger.debug("Review root %s does not exist", review.root)
            return StageResult.PROCEEDED

        print_step(f"Scanning {review.root} for user directories...")
        candidates = scan_candidates(
            review.root,
            review.exclude_names,
            review.project_patterns,
            require_project_pattern=project_only,
        )
        if not candidates:
            print_info(f"{review.root} contains no user directories to review.")
            print_info(
                f"System directories like '{review.root / self.config.engine.runtime}' "
                "are protected from deletion."
            )
            return StageResult.PROCEEDED

        console.print(create_candidates_table(candidates))
        if not self.confirm_fn("Would you like to review these directories for deletion?"):
            print_info("Directory review skipped.")
            return StageResult.PROCEEDED

        self.reviewer.review(candidates)
        return StageResult.PROCEEDED

    def offer_update(self) -> StageResult:
        """Offer to upgrade engine packages; never fatal."""
        packages = self.config.engine.packages
        if not self.confirm_fn(f"Upgrade {', '.join(packages)} now?"):
            print_info("Update skipped.")
            return StageResult.PROCEEDED

        try:
            result = self.upgrade_fn(packages)
        except OSError as e:
            logger.debug("Upgrade could not run", exc_info=True)
            print_warning(f"Package upgrade could not run: {e}")
            return StageResult.PROCEEDED

        if result is not None and not result.success:
            print_error(f"{result.manager} upgrade failed with exit code {result.returncode}.")
        elif result is not None:
            print_success(f"Packages upgraded with {result.manager}.")
        return StageResult.PROCEEDED

    def final_reset_report(self) -> StageResult:
        """Print the closing message of a reset."""
        print_success(f"{self._engine_title} has been reset to a clean state and is running.")
        return StageResult.PROCEEDED

    def final_clean_report(self) -> StageResult:
        """Print the closing message of a clean."""
        print_success(
            f"Your {self.config.engine.name} stack has been cleaned "
            f"while keeping {self.config.engine.name} fully operational!"
        )
        print_info(f"{self._engine_title} is ready for fresh containers and images.")
        return StageResult.PROCEEDED

    # =========================================================================
    # Helpers
    # =========================================================================

    @property
    def _engine_title(self) -> str:
        return self.config.engine.name.capitalize()

    def _purge(self, targets: list[SubsystemPurgeTarget]) -> StageResult:
        """Run the purge engine and show its results.

        Per-item failures are reported but never stop the run.
        """
        results = self.purge_engine.purge_all(targets)
        self.purge_results.extend(results)
        console.print(create_purge_results_table(results))
        return StageResult.PROCEEDED
