"""Interactive per-directory deletion review.

Each candidate gets its own prompt and nothing is deleted without one.
Permission failures are never escalated silently: the operator is warned
and asked once more before a sudo retry.
"""

import logging
import shutil
import subprocess

from dockwipe.core.confirm import ConfirmFn, confirm
from dockwipe.models.review import DirectoryCandidate, ReviewOutcome, ReviewResult
from dockwipe.utils.formatting import print_info, print_success, print_warning
from dockwipe.utils.shell import sudo_remove

logger = logging.getLogger(__name__)


class DirectoryReviewer:
    """Walks the operator through deletion decisions one directory at a time.

    Args:
        confirm_fn: Confirmation gate.
    """

    def __init__(self, confirm_fn: ConfirmFn = confirm) -> None:
        self._confirm = confirm_fn

    def review(self, candidates: list[DirectoryCandidate]) -> list[ReviewResult]:
        """Offer every candidate for deletion.

        Args:
            candidates: Offerable candidates in review order.

        Returns:
            One ReviewResult per candidate that still existed when reviewed.
        """
        results: list[ReviewResult] = []
        for candidate in candidates:
            if not candidate.path.is_dir():
                logger.debug("Candidate vanished before review: %s", candidate.path)
                continue
            results.append(self.review_one(candidate))
        return results

    def review_one(self, candidate: DirectoryCandidate) -> ReviewResult:
        """Ask about a single candidate and act on the answer.

        Args:
            candidate: Directory to review.

        Returns:
            ReviewResult with the operator's decision and its result.
        """
        path = candidate.path
        print_info(f"Reviewing: {path} ({candidate.size_label})")

        if not self._confirm(f"Delete '{path}'?"):
            print_info(f"Skipping {path}")
            return ReviewResult(path, ReviewOutcome.SKIPPED)

        try:
            shutil.rmtree(path)
        except PermissionError as e:
            logger.info("Unprivileged removal of %s failed: %s", path, e)
            return self._elevated_retry(candidate)
        except OSError as e:
            print_warning(f"Failed to remove {path}: {e}")
            return ReviewResult(path, ReviewOutcome.FAILED, str(e))

        print_success(f"Removed {path}")
        return ReviewResult(path, ReviewOutcome.DELETED)

    def _elevated_retry(self, candidate: DirectoryCandidate) -> ReviewResult:
        """Offer a sudo retry after a permission failure.

        Permission denial does not prove the directory belongs to the system,
        nor that it doesn't; the operator decides.

        Args:
            candidate: Directory whose removal was denied.

        Returns:
            ReviewResult of the retry, or SKIPPED if declined.
        """
        path = candidate.path
        print_warning(f"Permission denied for {path}")
        print_warning("This directory may contain system-managed files.")

        if not self._confirm(f"Retry deleting '{path}' with sudo? (USE WITH CAUTION)"):
            print_info(f"Skipping {path} (permission issues)")
            return ReviewResult(path, ReviewOutcome.SKIPPED)

        try:
            result = sudo_remove(str(path))
        except (OSError, subprocess.SubprocessError) as e:
            print_warning(f"Failed to remove {path} with sudo: {e}")
            return ReviewResult(path, ReviewOutcome.FAILED, str(e))

        if not result.success:
            error = result.stderr.strip() or "sudo rm failed"
            print_warning(f"Failed to remove {path} even with sudo: {error}")
            return ReviewResult(path, ReviewOutcome.FAILED, error)

        print_success(f"Removed {path} (with sudo)")
        return ReviewResult(path, ReviewOutcome.DELETED_ELEVATED)
