"""Fake RequesterPort implementation for testing."""

from headping.core.models import ProbeOutcome, ProbeResult
from headping.core.ports import RequesterPort


class FakeRequesterPort(RequesterPort):
    """In-memory requester for testing.

    Each domain is scripted with a sequence of outcomes. The last
    outcome repeats once the script is exhausted; unscripted domains
    always succeed.
    """

    def __init__(self, default_size: int = 42, default_elapsed_ms: int = 7) -> None:
        """Initialize with no scripts."""
        self.scripts: dict[str, list[ProbeOutcome]] = {}
        self._positions: dict[str, int] = {}
        self.calls: list[tuple[str, float]] = []
        self.default_size = default_size
        self.default_elapsed_ms = default_elapsed_ms
        self.closed = False

    def script(self, domain: str, *outcomes: ProbeOutcome) -> None:
        """Set the outcomes returned for successive probes of a domain."""
        if not outcomes:
            raise ValueError("at least one outcome is required")
        self.scripts[domain] = list(outcomes)
        self._positions[domain] = 0

    def always(self, domain: str, outcome: ProbeOutcome) -> None:
        """Make every probe of a domain return the same outcome."""
        self.script(domain, outcome)

    async def probe(self, domain: str, timeout: float) -> ProbeResult:
        """Return the next scripted outcome for the domain."""
        self.calls.append((domain, timeout))
        outcome = self._next_outcome(domain)

        if outcome is ProbeOutcome.SUCCESS:
            return ProbeResult(
                domain=domain,
                outcome=outcome,
                elapsed_ms=self.default_elapsed_ms,
                size=self.default_size,
                status_code=200,
            )
        return ProbeResult(
            domain=domain,
            outcome=outcome,
            elapsed_ms=self.default_elapsed_ms,
            error=f"scripted {outcome.value}",
        )

    async def close(self) -> None:
        self.closed = True

    def probed_domains(self) -> list[str]:
        """Domains in the order they were probed."""
        return [domain for domain, _ in self.calls]

    def _next_outcome(self, domain: str) -> ProbeOutcome:
        script = self.scripts.get(domain)
        if not script:
            return ProbeOutcome.SUCCESS
        position = self._positions[domain]
        self._positions[domain] = position + 1
        return script[min(position, len(script) - 1)]
