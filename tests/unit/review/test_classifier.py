"""Unit tests for review root classification."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from dockwipe.core.config import DEFAULT_EXCLUDE_NAMES, DEFAULT_PROJECT_PATTERNS
from dockwipe.models.review import UNKNOWN_SIZE
from dockwipe.review.classifier import (
    classify,
    is_excluded,
    list_subdirectories,
    matches_project_pattern,
    scan_candidates,
    size_label,
)
from dockwipe.utils.shell import CommandResult


class TestNameMatching:
    """Tests for exclusion and project pattern matching."""

    @pytest.mark.parametrize(
        "name", ["containerd", "containerd-helper", "Docker", "my-docker-data", "DOCKERD"]
    )
    def test_excluded(self, name: str) -> None:
        """Any exclusion substring, in any case, excludes."""
        assert is_excluded(name, DEFAULT_EXCLUDE_NAMES) is True

    @pytest.mark.parametrize("name", ["my-app-project", "random-notes", "backups"])
    def test_not_excluded(self, name: str) -> None:
        """Names without an exclusion substring are kept."""
        assert is_excluded(name, DEFAULT_EXCLUDE_NAMES) is False

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("my-app-project", True),
            ("customer-service-app", True),
            ("INFRA", True),
            ("random-notes", False),
            ("backups", False),
        ],
    )
    def test_project_patterns(self, name: str, expected: bool) -> None:
        """Project patterns match case-insensitive substrings."""
        assert matches_project_pattern(name, DEFAULT_PROJECT_PATTERNS) is expected

    def test_empty_fragment_never_matches(self) -> None:
        """An empty exclusion string does not exclude everything."""
        assert is_excluded("anything", [""]) is False

    def test_classify_sets_both_flags(self) -> None:
        """classify records exclusion and project match independently."""
        candidate = classify(
            Path("/opt/docker-app"), DEFAULT_EXCLUDE_NAMES, DEFAULT_PROJECT_PATTERNS
        )

        assert candidate.is_excluded_system_dir is True
        assert candidate.matches_project_pattern is True


class TestSizeLabel:
    """Tests for size_label function."""

    @patch("dockwipe.review.classifier.run_command")
    def test_parses_du(self, mock_run: MagicMock) -> None:
        """The first du field is the size."""
        mock_run.return_value = CommandResult(stdout="1.2G\t/opt/app\n", stderr="", returncode=0)

        assert size_label(Path("/opt/app")) == "1.2G"
        assert mock_run.call_args.args[0] == ["du", "-sh", "/opt/app"]

    @patch("dockwipe.review.classifier.run_command")
    def test_failure_is_unknown(self, mock_run: MagicMock) -> None:
        """A failing du yields the unknown label."""
        mock_run.return_value = CommandResult(stdout="", stderr="denied", returncode=1)

        assert size_label(Path("/opt/app")) == UNKNOWN_SIZE

    @patch("dockwipe.review.classifier.run_command")
    def test_timeout_is_unknown(self, mock_run: MagicMock) -> None:
        """A du that takes too long yields the unknown label."""
        mock_run.side_effect = subprocess.TimeoutExpired(cmd=["du"], timeout=120)

        assert size_label(Path("/opt/app")) == UNKNOWN_SIZE


class TestListSubdirectories:
    """Tests for list_subdirectories function."""

    def test_lists_directories_only(self, review_root: Path) -> None:
        """Files are ignored and the result is sorted."""
        (review_root / "b").mkdir()
        (review_root / "a").mkdir()
        (review_root / "file.txt").write_text("x")

        assert list_subdirectories(review_root) == [review_root / "a", review_root / "b"]

    def test_does_not_recurse(self, review_root: Path) -> None:
        """Only immediate children are listed."""
        (review_root / "outer" / "inner").mkdir(parents=True)

        assert list_subdirectories(review_root) == [review_root / "outer"]

    def test_missing_root(self, tmp_path: Path) -> None:
        """A missing root lists nothing."""
        assert list_subdirectories(tmp_path / "nope") == []

    def test_skips_symlinked_directories(self, review_root: Path, tmp_path: Path) -> None:
        """A link to a directory elsewhere is never offered."""
        target = tmp_path / "elsewhere"
        target.mkdir()
        (review_root / "foo-app").symlink_to(target, target_is_directory=True)
        (review_root / "real-app").mkdir()

        assert list_subdirectories(review_root) == [review_root / "real-app"]


class TestScanCandidates:
    """Tests for scan_candidates function."""

    @pytest.fixture
    def populated(self, review_root: Path) -> Path:
        """Review root with an engine dir, a project and a plain dir."""
        for name in ("docker-data", "customer-service-app", "backups"):
            (review_root / name).mkdir()
        return review_root

    def test_project_only(self, populated: Path) -> None:
        """Only project-looking, non-excluded directories are offered."""
        candidates = scan_candidates(
            populated,
            DEFAULT_EXCLUDE_NAMES,
            DEFAULT_PROJECT_PATTERNS,
            require_project_pattern=True,
            measure=False,
        )

        assert [c.name for c in candidates] == ["customer-service-app"]

    def test_any_directory(self, populated: Path) -> None:
        """Without the project filter only exclusions apply."""
        candidates = scan_candidates(
            populated,
            DEFAULT_EXCLUDE_NAMES,
            DEFAULT_PROJECT_PATTERNS,
            require_project_pattern=False,
            measure=False,
        )

        assert [c.name for c in candidates] == ["backups", "customer-service-app"]

    @patch("dockwipe.review.classifier.run_command")
    def test_measures_offered_only(self, mock_run: MagicMock, populated: Path) -> None:
        """Sizes are measured for offered candidates, not excluded ones."""
        mock_run.return_value = CommandResult(stdout="4.0K\tx\n", stderr="", returncode=0)

        candidates = scan_candidates(
            populated,
            DEFAULT_EXCLUDE_NAMES,
            DEFAULT_PROJECT_PATTERNS,
            require_project_pattern=True,
        )

        assert candidates[0].size_label == "4.0K"
        mock_run.assert_called_once()
