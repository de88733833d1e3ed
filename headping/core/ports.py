"""Port interfaces for the headping probe loop.

These abstract base classes define the boundaries between the core
probe loop and external adapters. Implementations live in the
adapters/ package.

Driven Ports (core calls out to adapters):
   - RequesterPort: Issue one HEAD request and classify the outcome
   - ReportPort: Emit human-readable report lines
"""

from abc import ABC, abstractmethod

from .models import ProbeResult


class RequesterPort(ABC):
    """Port for probing a single domain over HTTP.

    Implementations must never raise for transport failures: every
    failure is folded into a ProbeResult with a non-success outcome.
    No retry is attempted; classification consequences belong to the
    caller.
    """

    @abstractmethod
    async def probe(self, domain: str, timeout: float) -> ProbeResult:
        """Send one HEAD request to http://<domain>.

        Args:
            domain: Bare host name to probe.
            timeout: Seconds allowed for the whole request (connect +
                response) before it is classified as a timeout.

        Returns:
            ProbeResult carrying the outcome, elapsed milliseconds and,
            on success, the header size estimate.
        """

    async def close(self) -> None:
        """Release any transport resources (connection pools, etc.)."""


class ReportPort(ABC):
    """Port for the per-probe report lines.

    Report lines are the primary output of the tool and are emitted
    regardless of log verbosity.
    """

    @abstractmethod
    async def success(self, result: ProbeResult, seq: int) -> None:
        """Report a probe that produced a response."""

    @abstractmethod
    async def failure(self, result: ProbeResult, seq: int) -> None:
        """Report a probe that failed after the first round."""
