"""httpx requester adapter.

Implements RequesterPort by sending a single HEAD request per probe
through a pooled httpx.AsyncClient and folding every transport failure
into a classified ProbeResult.
"""

import asyncio
import logging
import time
from typing import Any

import httpx

from headping.core.models import ProbeOutcome, ProbeResult
from headping.core.ports import RequesterPort
from headping.logging_setup import TRACE

logger = logging.getLogger(__name__)


def _header_text(value: bytes) -> str:
    """Decode a raw header value, or return "" if it is not visible ASCII.

    Tab and 0x20-0x7E are accepted; anything else makes the whole value
    count as empty.
    """
    if all(b == 0x09 or 0x20 <= b <= 0x7E for b in value):
        return value.decode("ascii")
    return ""


def estimate_header_size(headers: httpx.Headers) -> int:
    """Rough header-block size: sum of len("name:value") per header line.

    Repeated headers contribute once per occurrence.
    """
    return sum(
        len(name.decode("ascii", errors="replace")) + 1 + len(_header_text(value))
        for name, value in headers.raw
    )


def classify_error(error: BaseException) -> ProbeOutcome:
    """Map a transport exception to a probe outcome."""
    if isinstance(error, (httpx.TimeoutException, asyncio.TimeoutError)):
        return ProbeOutcome.TIMEOUT
    if isinstance(error, httpx.ConnectError):
        return ProbeOutcome.CONNECTION_ERROR
    return ProbeOutcome.OTHER_ERROR


class HttpxRequester(RequesterPort):
    """HEAD prober backed by a shared httpx.AsyncClient."""

    def __init__(
        self,
        timeout: float = 1.0,
        client: httpx.AsyncClient | None = None,
        follow_redirects: bool = True,
    ):
        """Initialize the requester.

        Args:
            timeout: Default per-request timeout in seconds for the client.
            client: Optional pre-built client (tests inject a MockTransport).
            follow_redirects: Follow 3xx responses to their target.

        Raises:
            ValueError: If timeout is not positive.
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self.timeout = timeout
        if client is None:
            client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout),
                follow_redirects=follow_redirects,
            )
        self.client = client

    async def __aenter__(self) -> "HttpxRequester":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the httpx client and clean up resources."""
        await self.client.aclose()

    async def probe(self, domain: str, timeout: float) -> ProbeResult:
        """Send HEAD http://<domain> and classify the outcome."""
        url = f"http://{domain}"
        logger.log(TRACE, f"HEAD {url} (timeout {timeout:.3f}s)")

        start_time = time.perf_counter()
        try:
            response = await asyncio.wait_for(
                self.client.head(url, timeout=httpx.Timeout(timeout)),
                timeout=timeout,
            )
        except (httpx.HTTPError, httpx.InvalidURL, asyncio.TimeoutError) as e:
            elapsed_ms = self._elapsed_ms(start_time)
            outcome = classify_error(e)
            logger.debug(
                f"HEAD {url} failed after {elapsed_ms}ms "
                f"({type(e).__name__}): {e}"
            )
            return ProbeResult(
                domain=domain,
                outcome=outcome,
                elapsed_ms=elapsed_ms,
                error=str(e) or type(e).__name__,
            )
        except Exception as e:
            elapsed_ms = self._elapsed_ms(start_time)
            logger.debug(f"Unexpected error probing {url}: {e}", exc_info=True)
            return ProbeResult(
                domain=domain,
                outcome=ProbeOutcome.OTHER_ERROR,
                elapsed_ms=elapsed_ms,
                error=str(e) or type(e).__name__,
            )

        result = ProbeResult(
            domain=domain,
            outcome=ProbeOutcome.SUCCESS,
            elapsed_ms=self._elapsed_ms(start_time),
            size=estimate_header_size(response.headers),
            status_code=response.status_code,
        )
        logger.log(
            TRACE,
            f"HEAD {url} -> {result.status_code} in {result.elapsed_ms}ms, "
            f"{len(response.headers.raw)} headers",
        )
        return result

    @staticmethod
    def _elapsed_ms(start_time: float) -> int:
        return int((time.perf_counter() - start_time) * 1000)
