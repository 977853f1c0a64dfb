"""Classification of directories under the review root.

A directory is excluded when its basename contains any exclusion string,
case-insensitively. Substring matching deliberately over-excludes:
"docker" also excludes "docker-compose-data". Skipping a user directory is
recoverable, offering an engine directory for deletion is not.
"""

import logging
import os
import subprocess
from collections.abc import Iterable
from pathlib import Path

from dockwipe.models.review import UNKNOWN_SIZE, DirectoryCandidate
from dockwipe.utils.shell import run_command

logger = logging.getLogger(__name__)

# Timeout for a single du invocation
_SIZE_TIMEOUT: float = 120.0


def _contains_any(name: str, fragments: Iterable[str]) -> bool:
    lowered = name.lower()
    return any(fragment.lower() in lowered for fragment in fragments if fragment)


def is_excluded(name: str, exclusions: Iterable[str]) -> bool:
    """Check if a directory name matches the exclusion list.

    Args:
        name: Directory basename.
        exclusions: Exclusion substrings.

    Returns:
        True if any exclusion is a case-insensitive substring of name.
    """
    return _contains_any(name, exclusions)


def matches_project_pattern(name: str, patterns: Iterable[str]) -> bool:
    """Check if a directory name looks like a user project.

    Args:
        name: Directory basename.
        patterns: Project name fragments (e.g. "app", "stack").

    Returns:
        True if any pattern is a case-insensitive substring of name.
    """
    return _contains_any(name, patterns)


def size_label(path: Path) -> str:
    """Measure a directory with ``du -sh``.

    Args:
        path: Directory to measure.

    Returns:
        Human-readable size such as "1.2G", or "unknown" on any failure.
    """
    try:
        result = run_command(["du", "-sh", str(path)], timeout=_SIZE_TIMEOUT)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("du failed for %s: %s", path, e)
        return UNKNOWN_SIZE

    fields = result.stdout.split()
    if not result.success or not fields:
        return UNKNOWN_SIZE
    return fields[0]


def list_subdirectories(root: Path) -> list[Path]:
    """List readable immediate subdirectories of root, sorted.

    Symbolic links are skipped even when they point at a directory.

    Args:
        root: Directory to list (not recursed).

    Returns:
        Sorted subdirectory paths; empty if root is missing or unreadable.
    """
    try:
        entries = sorted(root.iterdir())
    except FileNotFoundError:
        return []
    except PermissionError:
        logger.warning("Permission denied scanning directory: %s", root)
        return []

    subdirs: list[Path] = []
    for entry in entries:
        try:
            if entry.is_symlink() or not entry.is_dir():
                continue
        except OSError:
            logger.warning("Cannot determine type of: %s", entry)
            continue
        if os.access(entry, os.R_OK):
            subdirs.append(entry)
    return subdirs


def classify(
    path: Path,
    exclude_names: Iterable[str],
    project_patterns: Iterable[str],
) -> DirectoryCandidate:
    """Classify a directory without measuring its size.

    Args:
        path: Directory path.
        exclude_names: Exclusion substrings.
        project_patterns: Project name fragments.

    Returns:
        DirectoryCandidate with both classification flags set.
    """
    return DirectoryCandidate(
        path=path,
        is_excluded_system_dir=is_excluded(path.name, exclude_names),
        matches_project_pattern=matches_project_pattern(path.name, project_patterns),
    )


def scan_candidates(
    root: Path,
    exclude_names: Iterable[str],
    project_patterns: Iterable[str],
    require_project_pattern: bool,
    measure: bool = True,
) -> list[DirectoryCandidate]:
    """Find the directories under root that may be offered for deletion.

    Args:
        root: Review root, scanned one level deep.
        exclude_names: Exclusion substrings.
        project_patterns: Project name fragments.
        require_project_pattern: Drop directories that match no project pattern.
        measure: Compute size labels for the survivors.

    Returns:
        Offerable candidates in lexical order.
    """
    exclusions = list(exclude_names)
    patterns = list(project_patterns)

    candidates: list[DirectoryCandidate] = []
    for path in list_subdirectories(root):
        candidate = classify(path, exclusions, patterns)
        if not candidate.offerable(require_project_pattern):
            logger.debug("Not offering %s", path)
            continue
        if measure:
            candidate = DirectoryCandidate(
                path=candidate.path,
                size_label=size_label(path),
                is_excluded_system_dir=candidate.is_excluded_system_dir,
                matches_project_pattern=candidate.matches_project_pattern,
            )
        candidates.append(candidate)

    return candidates
