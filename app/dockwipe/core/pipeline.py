"""Sequential stage pipeline.

A run is an ordered list of stages. Each stage reports whether the run may
continue; the first stage that does not proceed ends the run.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class StageResult(str, Enum):
    """Result of a single stage.

    Attributes:
        PROCEEDED: Continue with the next stage.
        ABORTED: The operator declined; stop without error.
        FAILED: A fatal condition; stop with an error.
    """

    PROCEEDED = "proceeded"
    ABORTED = "aborted"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class Stage:
    """A named step of a run.

    Attributes:
        name: Stage name used in logs.
        run: Callable performing the stage.
    """

    name: str
    run: Callable[[], StageResult]


@dataclass(frozen=True, slots=True)
class PipelineOutcome:
    """Outcome of a whole run.

    Attributes:
        result: PROCEEDED if every stage proceeded, else the stopping result.
        stopped_at: Name of the stage that stopped the run, if any.
        completed: Names of stages that proceeded, in order.
    """

    result: StageResult
    stopped_at: str | None
    completed: tuple[str, ...]

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome (0 on success or abort)."""
        return 1 if self.result == StageResult.FAILED else 0


def run_pipeline(stages: Sequence[Stage]) -> PipelineOutcome:
    """Run stages in order until one does not proceed.

    Args:
        stages: Stages in execution order.

    Returns:
        PipelineOutcome describing where and how the run ended.
    """
    completed: list[str] = []
    for stage in stages:
        logger.debug("Stage %s: starting", stage.name)
        result = stage.run()
        logger.debug("Stage %s: %s", stage.name, result.value)
        if result != StageResult.PROCEEDED:
            return PipelineOutcome(result, stage.name, tuple(completed))
        completed.append(stage.name)
    return PipelineOutcome(StageResult.PROCEEDED, None, tuple(completed))
