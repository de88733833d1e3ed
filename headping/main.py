"""Composition root for headping.

This module is the ONLY location that imports both the core probe loop
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Argument parsing and configuration loading
- Logging setup
- Adapter instantiation
- Probe loop initialization and run
"""

import asyncio
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from headping.adapters.cli.arguments import build_parser, settings_overrides
from headping.adapters.report.stdout import StdoutReportAdapter
from headping.adapters.requester.httpx_requester import HttpxRequester
from headping.adapters.targets.builtin import select_targets
from headping.config import Settings, load_settings
from headping.core.models import RunSummary
from headping.core.probe_loop import ProbeLoop
from headping.logging_setup import configure_logging, level_for_verbosity

logger = logging.getLogger(__name__)


def _format_validation_error(error: ValidationError) -> str:
    """Render pydantic errors as a single usage-friendly line."""
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "settings"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


async def bootstrap(settings: Settings, targets: Sequence[str]) -> RunSummary:
    """Wire adapters into the probe loop and run it.

    Steps:
    1. Instantiate the HTTP requester with the configured timeout
    2. Instantiate the stdout report adapter
    3. Run the probe loop over the targets
    4. Release the requester's connection pool

    Returns:
        RunSummary of the finished run.
    """
    logger.info(
        f"Probing {len(targets)} domains "
        f"(wait {settings.wait_ms}ms, timeout {settings.timeout_ms}ms, "
        f"count {settings.count if settings.count is not None else 'unbounded'})"
    )

    requester = HttpxRequester(timeout=settings.timeout_seconds)
    report = StdoutReportAdapter()

    probe_loop = ProbeLoop(
        requester=requester,
        report=report,
        wait_seconds=settings.wait_seconds,
        timeout_seconds=settings.timeout_seconds,
        count=settings.count,
    )

    try:
        summary = await probe_loop.run(targets)
    finally:
        await requester.close()

    logger.debug(
        f"Run finished ({summary.stop_reason.value}): "
        f"{summary.probes_issued} probes over {summary.rounds_started} rounds, "
        f"{len(summary.excluded)} domains excluded"
    )
    return summary


def main(argv: Sequence[str] | None = None) -> None:
    """Application entry point.

    Parses arguments, loads configuration, and runs the probe loop.

    Exit codes:
        0: Probe count reached, or no domain left to probe
        1: Fatal runtime error
        2: Invalid arguments or settings
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(**settings_overrides(args))
    except ValidationError as e:
        parser.error(_format_validation_error(e))

    configure_logging(
        settings.log_level or level_for_verbosity(args.verbose),
        settings.log_format,
    )
    targets = select_targets(args.domains)

    try:
        asyncio.run(bootstrap(settings, targets))
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
