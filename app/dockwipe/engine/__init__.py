"""Container engine clients.

This module exports the EngineClient interface, the Docker implementation
and the state reporter.
"""

from dockwipe.engine.base import EngineClient, EngineError
from dockwipe.engine.docker import DockerEngineClient
from dockwipe.engine.reporter import StateReporter

__all__ = ["DockerEngineClient", "EngineClient", "EngineError", "StateReporter"]
