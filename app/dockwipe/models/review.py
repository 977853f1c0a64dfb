"""Directory review models.

This module defines the directories discovered under the review root and
the operator decisions taken on them.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

UNKNOWN_SIZE = "unknown"


@dataclass(frozen=True, slots=True)
class DirectoryCandidate:
    """A subdirectory of the review root considered for deletion.

    Attributes:
        path: Absolute directory path.
        size_label: Human-readable size ("unknown" when it can't be measured).
        is_excluded_system_dir: Basename matches the exclusion list.
        matches_project_pattern: Basename matches a project pattern.
    """

    path: Path
    size_label: str = UNKNOWN_SIZE
    is_excluded_system_dir: bool = False
    matches_project_pattern: bool = False

    @property
    def name(self) -> str:
        """Basename of the candidate directory."""
        return self.path.name

    def offerable(self, require_project_pattern: bool) -> bool:
        """Check if this candidate may be offered for deletion.

        Args:
            require_project_pattern: Also require a project-pattern match.

        Returns:
            False for excluded system directories, always.
        """
        if self.is_excluded_system_dir:
            return False
        return self.matches_project_pattern or not require_project_pattern


class ReviewOutcome(str, Enum):
    """Operator decision and result for one candidate.

    Attributes:
        DELETED: Removed without privileges.
        DELETED_ELEVATED: Removed with sudo after explicit confirmation.
        SKIPPED: Operator declined, or declined the sudo retry.
        FAILED: Removal failed.
    """

    DELETED = "deleted"
    DELETED_ELEVATED = "deleted (sudo)"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ReviewResult:
    """Result of reviewing one candidate.

    Attributes:
        path: Candidate directory path.
        outcome: Decision and result.
        error: Error message when outcome is FAILED.
    """

    path: Path
    outcome: ReviewOutcome
    error: str | None = None
