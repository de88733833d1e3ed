"""Requester adapters for issuing probes.

Implementations:
- httpx (pooled asyncio HEAD requests)
"""

from .httpx_requester import HttpxRequester

__all__ = ["HttpxRequester"]
