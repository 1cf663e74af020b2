"""
Async HTTP client for fetching blog pages.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, Optional

import httpx
import structlog

from ..config.config import ScraperConfig
from ..exceptions import FetchFailure

logger = structlog.get_logger(__name__)

BROWSER_HEADERS: Dict[str, str] = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}


@dataclass
class FetchedDocument:
    """Response body of one page fetch with timing information."""

    url: str
    html: str
    status: int
    final_url: str
    elapsed: float
    attempts: int = 1


class HttpClient:
    """Thin wrapper over ``httpx.AsyncClient`` that maps every failure to FetchFailure."""

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or ScraperConfig()
        self._transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def initialize(self) -> None:
        """Open the underlying connection pool."""
        if self.client is None:
            headers = {"User-Agent": self.config.user_agent, **BROWSER_HEADERS}
            self.client = httpx.AsyncClient(
                headers=headers,
                timeout=httpx.Timeout(self.config.timeout),
                follow_redirects=True,
                transport=self._transport,
            )
            logger.debug("HTTP client session initialized", timeout=self.config.timeout)

    async def close(self) -> None:
        """Close the underlying connection pool."""
        if self.client is not None:
            await self.client.aclose()
            self.client = None
            logger.debug("HTTP client closed")

    async def __aenter__(self) -> "HttpClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch(self, url: str) -> FetchedDocument:
        """
        Fetch ``url`` and return its decoded body.

        Args:
            url: Absolute http(s) URL

        Returns:
            FetchedDocument with status and final URL after redirects

        Raises:
            FetchFailure: On network errors, timeouts and non-2xx responses
        """
        await self.initialize()
        assert self.client is not None

        start = time.monotonic()
        try:
            response = await self.client.get(url)
        except httpx.TimeoutException as e:
            raise FetchFailure(f"Request timed out after {self.config.timeout}s", url=url) from e
        except httpx.HTTPError as e:
            raise FetchFailure(f"Request failed: {e}", url=url) from e

        if not response.is_success:
            raise FetchFailure(
                f"HTTP {response.status_code}: {response.reason_phrase}",
                url=url,
                status=response.status_code,
            )

        elapsed = time.monotonic() - start
        logger.debug("Fetched document", url=url, status=response.status_code, elapsed=round(elapsed, 3))
        return FetchedDocument(
            url=url,
            html=response.text,
            status=response.status_code,
            final_url=str(response.url),
            elapsed=elapsed,
        )
