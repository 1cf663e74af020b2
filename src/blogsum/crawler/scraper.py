"""
Scrape orchestration: fetch, extract and quality-gate one or many blog URLs.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence, Union
from urllib.parse import urlparse

import structlog
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt, wait_incrementing

from ..config.config import ScraperConfig
from ..exceptions import ExtractionFailure, FetchFailure, InvalidURLError, LowQualityContent, ScrapeFailure
from ..extractor import BlogContentExtractor, ExtractedArticle
from .http_client import HttpClient

logger = structlog.get_logger(__name__)

RETRYABLE_ERRORS = (FetchFailure, ExtractionFailure, LowQualityContent)


def validate_url(url: str) -> str:
    """Return the stripped URL, or raise InvalidURLError unless it is absolute http(s)."""
    candidate = (url or "").strip()
    parsed = urlparse(candidate)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidURLError(f"Invalid URL: {url!r}")
    return candidate


class WebScraper:
    """Fetch a page, extract its article and retry with linear backoff on failure."""

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        *,
        http_client: Optional[HttpClient] = None,
        extractor: Optional[BlogContentExtractor] = None,
    ) -> None:
        self.config = config or ScraperConfig()
        self.http_client = http_client or HttpClient(self.config)
        self.extractor = extractor or BlogContentExtractor(min_content_length=self.config.min_content_length)
        self.logger = logger.bind(component="scraper")

    async def close(self) -> None:
        await self.http_client.close()

    async def __aenter__(self) -> "WebScraper":
        await self.http_client.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def scrape(self, url: str) -> ExtractedArticle:
        """
        Scrape a single URL.

        Args:
            url: Absolute http(s) URL of a blog post

        Returns:
            ExtractedArticle for the page

        Raises:
            InvalidURLError: If the URL is not absolute http(s)
            ScrapeFailure: After ``max_retries`` failed attempts, chained to the last error
        """
        url = validate_url(url)
        max_retries = self.config.max_retries
        base_delay = self.config.retry_base_delay

        def log_retry(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception() if retry_state.outcome else None
            self.logger.warning(
                "Scrape attempt failed, retrying",
                url=url,
                attempt=retry_state.attempt_number,
                max_retries=max_retries,
                error=str(error),
                error_type=type(error).__name__,
            )

        # Attempt N is followed by a wait of N * base_delay.
        retrying = AsyncRetrying(
            stop=stop_after_attempt(max_retries),
            wait=wait_incrementing(start=base_delay, increment=base_delay),
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            before_sleep=log_retry,
            reraise=True,
        )

        try:
            article = await retrying(self._attempt, url)
        except RETRYABLE_ERRORS as e:
            self.logger.warning("Scrape failed after all retries", url=url, attempts=max_retries, error=str(e))
            raise ScrapeFailure(
                f"Failed to scrape {url} after {max_retries} attempts: {e}",
                url=url,
                attempts=max_retries,
            ) from e

        self.logger.info(
            "Scraped article",
            url=url,
            title=article.title,
            word_count=article.metadata.word_count,
            quality_score=article.metadata.quality.score,
            strategy=article.strategy,
        )
        return article

    async def _attempt(self, url: str) -> ExtractedArticle:
        document = await self.http_client.fetch(url)
        # BeautifulSoup parsing is CPU bound
        article = await asyncio.to_thread(self.extractor.extract, document.html, url)

        if self.config.validate_content:
            quality = article.metadata.quality
            if quality.score < self.config.min_quality_score:
                raise LowQualityContent(
                    f"Content quality too low ({quality.score:.2f})",
                    score=quality.score,
                    issues=list(quality.issues),
                )
        return article

    async def scrape_many(self, urls: Sequence[str]) -> List[Union[ExtractedArticle, BaseException]]:
        """Scrape all URLs concurrently; the result list is aligned with ``urls``."""
        results = await asyncio.gather(*(self.scrape(url) for url in urls), return_exceptions=True)
        failed = sum(1 for result in results if isinstance(result, BaseException))
        self.logger.info("Batch scrape completed", total=len(urls), succeeded=len(urls) - failed, failed=failed)
        return list(results)
