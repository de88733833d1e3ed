"""Stdout report adapter.

Implements ReportPort by printing one ping-style line per issued probe.
"""

import asyncio

from headping.core.models import ProbeOutcome, ProbeResult
from headping.core.ports import ReportPort

_FAILURE_PREFIXES = {
    ProbeOutcome.TIMEOUT: "Request timeout",
    ProbeOutcome.CONNECTION_ERROR: "Connection error",
    ProbeOutcome.OTHER_ERROR: "Unknown error",
}


class StdoutReportAdapter(ReportPort):
    """Prints probe report lines to stdout."""

    async def success(self, result: ProbeResult, seq: int) -> None:
        await asyncio.to_thread(print, self.format_success(result, seq), flush=True)

    async def failure(self, result: ProbeResult, seq: int) -> None:
        await asyncio.to_thread(print, self.format_failure(result, seq), flush=True)

    @staticmethod
    def format_success(result: ProbeResult, seq: int) -> str:
        """Format "<size> bytes from <domain>: seq=<seq> time=<elapsed>ms"."""
        return (
            f"{result.size} bytes from {result.domain}: "
            f"seq={seq} time={result.elapsed_ms}ms"
        )

    @staticmethod
    def format_failure(result: ProbeResult, seq: int) -> str:
        """Format "<kind> for <domain> seq <seq>".

        Raises:
            ValueError: If the result is a success.
        """
        prefix = _FAILURE_PREFIXES.get(result.outcome)
        if prefix is None:
            raise ValueError(f"not a failed probe: {result.outcome.value}")
        return f"{prefix} for {result.domain} seq {seq}"
