"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules, including an
in-memory engine client standing in for the Docker CLI.
"""

from pathlib import Path

import pytest
from dockwipe.core.config import DockwipeConfig, ReadinessConfig, ReviewConfig
from dockwipe.engine.base import EngineClient, EngineError


class FakeEngineClient(EngineClient):
    """In-memory EngineClient recording every call.

    Attributes:
        installed: Returned by is_installed().
        info_results: Successive info() answers; the last one repeats.
        calls: Names of invoked methods, in order.
        rows: Listing results per resource kind.
        fail_listing: Resource kinds whose listing raises EngineError.
        fail_mutations: Method names that report failure.
    """

    def __init__(self) -> None:
        self.installed = True
        self.info_results: list[bool] = [True]
        self.info_calls = 0
        self.calls: list[str] = []
        self.rows: dict[str, list[dict[str, str]]] = {
            "containers": [],
            "images": [],
            "volumes": [],
            "networks": [],
        }
        self.fail_listing: set[str] = set()
        self.fail_mutations: set[str] = set()

    @property
    def name(self) -> str:
        return "docker"

    def is_installed(self) -> bool:
        self.calls.append("is_installed")
        return self.installed

    def info(self) -> bool:
        self.calls.append("info")
        index = min(self.info_calls, len(self.info_results) - 1)
        self.info_calls += 1
        return self.info_results[index]

    def start(self) -> bool:
        return self._mutate("start")

    def stop(self) -> bool:
        return self._mutate("stop")

    def stop_all_containers(self) -> bool:
        return self._mutate("stop_all_containers")

    def prune_all(self) -> bool:
        return self._mutate("prune_all")

    def prune_build_cache(self) -> bool:
        return self._mutate("prune_build_cache")

    def list_containers(self) -> list[dict[str, str]]:
        return self._list("containers")

    def list_images(self) -> list[dict[str, str]]:
        return self._list("images")

    def list_volumes(self) -> list[dict[str, str]]:
        return self._list("volumes")

    def list_networks(self) -> list[dict[str, str]]:
        return self._list("networks")

    def _mutate(self, name: str) -> bool:
        self.calls.append(name)
        return name not in self.fail_mutations

    def _list(self, kind: str) -> list[dict[str, str]]:
        self.calls.append(f"list_{kind}")
        if kind in self.fail_listing:
            raise EngineError(f"cannot list {kind}")
        return self.rows[kind]


class ScriptedConfirm:
    """Confirmation gate answering from a script and recording prompts.

    Args:
        answers: Answers in prompt order. Once exhausted, ``default`` is used.
        default: Answer after the script runs out.
    """

    def __init__(self, answers: list[bool] | None = None, default: bool = False) -> None:
        self._answers = list(answers or [])
        self._default = default
        self.prompts: list[str] = []

    def __call__(self, message: str) -> bool:
        self.prompts.append(message)
        if self._answers:
            return self._answers.pop(0)
        return self._default


@pytest.fixture
def fake_engine() -> FakeEngineClient:
    """In-memory engine client that is installed and healthy."""
    return FakeEngineClient()


@pytest.fixture
def scripted_confirm() -> type[ScriptedConfirm]:
    """Factory for scripted confirmation gates."""
    return ScriptedConfirm


@pytest.fixture
def review_root(tmp_path: Path) -> Path:
    """Empty directory standing in for /opt."""
    root = tmp_path / "opt"
    root.mkdir()
    return root


@pytest.fixture
def fake_home(tmp_path: Path) -> Path:
    """Empty directory standing in for the operator's home."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def test_config(review_root: Path) -> DockwipeConfig:
    """Default configuration with a temporary review root and no delays."""
    return DockwipeConfig(
        review=ReviewConfig(root=review_root),
        readiness=ReadinessConfig(max_attempts=3, poll_interval=0.0, settle_delay=0.0),
    )
