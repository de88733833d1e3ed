"""Probe loop for headping.

This module implements the main loop that walks the target list in
rounds, probes each live domain, excludes domains that fail their very
first probe, and reports every later probe.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from .models import ProbeOutcome, ProbeResult, RunSummary, StopReason
from .ports import ReportPort, RequesterPort

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


class ProbeLoop:
    """Drives rounds of HEAD probes over an ordered target list.

    The loop owns the excluded set and the sequence counter for the
    lifetime of a run. Probes, reports and waits are awaited strictly in
    sequence, so one domain is fully handled before the next starts.
    """

    def __init__(
        self,
        requester: RequesterPort,
        report: ReportPort,
        wait_seconds: float = 1.0,
        timeout_seconds: float = 1.0,
        count: int | None = None,
        sleep: Sleeper = asyncio.sleep,
    ):
        """Initialize the probe loop.

        Args:
            requester: RequesterPort used for every probe.
            report: ReportPort receiving report lines.
            wait_seconds: Pause after each issued probe.
            timeout_seconds: Per-probe timeout handed to the requester.
            count: Stop after this many issued probes (None = unbounded).
            sleep: Awaitable sleep, replaceable in tests.

        Raises:
            ValueError: If wait, timeout or count are out of range.
        """
        if wait_seconds < 0:
            raise ValueError("wait_seconds must be non-negative")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if count is not None and count <= 0:
            raise ValueError("count must be positive")

        self.requester = requester
        self.report = report
        self.wait_seconds = wait_seconds
        self.timeout_seconds = timeout_seconds
        self.count = count
        self.sleep = sleep

    async def run(self, targets: Sequence[str]) -> RunSummary:
        """Probe the targets round after round until a stop condition.

        Returns only when the count cutoff is reached or no domain is
        left to probe; otherwise runs until cancelled.
        """
        excluded: set[str] = set()
        exclusion_order: list[str] = []
        seq = 0
        round_index = 0

        while True:
            # An empty round would neither probe nor sleep.
            if all(domain in excluded for domain in targets):
                logger.warning(
                    f"No domains left to probe ({len(excluded)} excluded), stopping"
                )
                return RunSummary(
                    probes_issued=seq,
                    rounds_started=round_index,
                    excluded=tuple(exclusion_order),
                    stop_reason=StopReason.ALL_EXCLUDED,
                )

            logger.debug(f"Starting round {round_index}")

            for domain in targets:
                if domain in excluded:
                    continue

                result = await self.requester.probe(domain, self.timeout_seconds)

                if result.ok:
                    await self.report.success(result, seq)
                elif round_index == 0:
                    logger.info(
                        f"{domain} failed its very first request and will be ignored"
                    )
                    excluded.add(domain)
                    exclusion_order.append(domain)
                else:
                    self._log_failure(result, seq)
                    await self.report.failure(result, seq)

                await self.sleep(self.wait_seconds)

                seq += 1
                if self.count is not None and seq >= self.count:
                    logger.debug(f"Reached probe count {self.count}, stopping")
                    return RunSummary(
                        probes_issued=seq,
                        rounds_started=round_index + 1,
                        excluded=tuple(exclusion_order),
                        stop_reason=StopReason.COUNT_REACHED,
                    )

            round_index += 1

    @staticmethod
    def _log_failure(result: ProbeResult, seq: int) -> None:
        """Log classification details for a failed probe."""
        if result.outcome is ProbeOutcome.OTHER_ERROR:
            logger.debug(
                f"Probe seq {seq} to {result.domain} failed "
                f"after {result.elapsed_ms}ms: {result.error}"
            )
        else:
            logger.debug(
                f"Probe seq {seq} to {result.domain} classified as "
                f"{result.outcome.value} after {result.elapsed_ms}ms"
            )
