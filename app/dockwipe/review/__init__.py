"""Directory review module.

This module classifies subdirectories of the review root and walks the
operator through deleting them.
"""

from dockwipe.review.classifier import (
    classify,
    is_excluded,
    matches_project_pattern,
    scan_candidates,
)
from dockwipe.review.reviewer import DirectoryReviewer

__all__ = [
    "DirectoryReviewer",
    "classify",
    "is_excluded",
    "matches_project_pattern",
    "scan_candidates",
]
