"""Fake implementations of core ports for testing.

These in-memory implementations allow the probe loop to be tested
without network access:

- FakeRequesterPort: Scripted probe outcomes per domain
- FakeReportPort: Captured report lines for assertion
"""

from .report import FakeReportPort
from .requester import FakeRequesterPort

__all__ = [
    "FakeReportPort",
    "FakeRequesterPort",
]
