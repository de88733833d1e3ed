"""Core domain logic for headping.

This package contains zero external dependencies and holds the probe
loop and its exclusion policy. HTTP transport, report output and the
target list are handled by the adapters package.
"""

from .models import ProbeOutcome, ProbeResult, RunSummary, StopReason

__all__ = [
    "ProbeOutcome",
    "ProbeResult",
    "RunSummary",
    "StopReason",
]
