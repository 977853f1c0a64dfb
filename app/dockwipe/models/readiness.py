"""Engine readiness state for the post-restart poll."""

from dataclasses import dataclass


@dataclass(slots=True)
class ReadinessState:
    """Progress of the readiness poll.

    Only the service controller mutates this state. It is terminal once
    ``ready`` is True or ``attempt`` reaches ``max_attempts``.

    Attributes:
        max_attempts: Probes allowed before giving up.
        poll_interval: Seconds between probes.
        attempt: Probes performed so far.
        ready: Whether a probe succeeded.
    """

    max_attempts: int = 15
    poll_interval: float = 2.0
    attempt: int = 0
    ready: bool = False

    def __post_init__(self) -> None:
        """Validate poll settings after initialization."""
        if self.max_attempts < 1:
            msg = f"max_attempts must be at least 1, got {self.max_attempts}"
            raise ValueError(msg)
        if self.poll_interval < 0:
            msg = f"poll_interval cannot be negative, got {self.poll_interval}"
            raise ValueError(msg)

    @property
    def exhausted(self) -> bool:
        """Check if all attempts were used without success."""
        return not self.ready and self.attempt >= self.max_attempts

    @property
    def terminal(self) -> bool:
        """Check if the poll is finished."""
        return self.ready or self.exhausted
