"""Engine service lifecycle control.

Stops the engine before its data is mutated and brings it back afterwards,
polling a liveness probe with a bounded, fixed-interval retry loop.
"""

import logging
import time
from collections.abc import Callable

from dockwipe.engine.base import EngineClient
from dockwipe.models.readiness import ReadinessState

logger = logging.getLogger(__name__)

# Seconds to wait after stopping so an in-flight shutdown can finish
DEFAULT_SETTLE_DELAY: float = 2.0


class ServiceController:
    """Stops, starts and health-checks engine services.

    Args:
        client: Engine client performing service control and probes.
        settle_delay: Seconds to wait after stopping services.
        sleep: Sleep function (replaceable in tests).
    """

    def __init__(
        self,
        client: EngineClient,
        settle_delay: float = DEFAULT_SETTLE_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._settle_delay = settle_delay
        self._sleep = sleep

    def stop_services(self) -> None:
        """Stop engine services, best effort.

        A failed stop usually means the service was not running, so it is
        logged and ignored. The settle delay always follows.
        """
        if not self._client.stop():
            logger.info(
                "Some %s services did not stop cleanly (already stopped?)", self._client.name
            )
        self._sleep(self._settle_delay)

    def start_and_await_ready(
        self,
        max_attempts: int = 15,
        interval: float = 2.0,
    ) -> ReadinessState:
        """Start engine services and wait until the engine answers.

        The probe runs at most ``max_attempts`` times, sleeping ``interval``
        seconds between consecutive probes, and stops at the first success.

        Args:
            max_attempts: Maximum number of liveness probes.
            interval: Seconds between probes.

        Returns:
            Terminal ReadinessState; ``ready`` is False on timeout.
        """
        state = ReadinessState(max_attempts=max_attempts, poll_interval=interval)

        if not self._client.start():
            logger.warning("Starting %s services reported errors", self._client.name)

        while not state.terminal:
            if state.attempt > 0:
                self._sleep(state.poll_interval)
            state.attempt += 1
            state.ready = self._client.info()
            logger.debug(
                "Readiness probe %d/%d: %s",
                state.attempt,
                state.max_attempts,
                "ready" if state.ready else "not ready",
            )

        return state
