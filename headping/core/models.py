"""Domain models for the headping probe loop.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum


class ProbeOutcome(Enum):
    """Classification of a single HEAD probe.

    A failed first-round probe is not an outcome of its own: the probe
    loop derives it from any non-success outcome seen in round 0.
    """

    SUCCESS = "success"
    TIMEOUT = "timeout"
    CONNECTION_ERROR = "connection_error"
    OTHER_ERROR = "other_error"


@dataclass(frozen=True)
class ProbeResult:
    """Result of one HEAD request against one domain.

    `size` is the rough header-block estimate (sum of "name:value"
    lengths), not the wire size. It is 0 for failed probes.
    """

    domain: str
    outcome: ProbeOutcome
    elapsed_ms: int
    size: int = 0
    status_code: int | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate probe result invariants on creation."""
        if self.elapsed_ms < 0:
            raise ValueError(
                f"elapsed_ms must be non-negative, got {self.elapsed_ms}"
            )
        if self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}")

    @property
    def ok(self) -> bool:
        """True when the request produced a response."""
        return self.outcome is ProbeOutcome.SUCCESS


class StopReason(Enum):
    """Why a probe loop run returned."""

    COUNT_REACHED = "count_reached"
    ALL_EXCLUDED = "all_excluded"


@dataclass(frozen=True)
class RunSummary:
    """Final state of a probe loop run."""

    probes_issued: int
    rounds_started: int
    excluded: tuple[str, ...]  # in exclusion order
    stop_reason: StopReason
