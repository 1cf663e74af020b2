"""
End-to-end orchestration: scrape, summarize, translate and persist one or many blog URLs.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import structlog

from blogsum.container import DependencyContainer
from blogsum.exceptions import StorageError
from blogsum.extractor import ExtractedArticle
from blogsum.protocols import ArticleRecord, SummaryResult, TranslationResult

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Everything produced for one article."""

    article: ExtractedArticle
    summary: SummaryResult
    translation: TranslationResult
    record_id: Optional[int] = None
    storage_error: Optional[str] = None
    duration: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.article.title,
            "url": self.article.url,
            "scraped_at": self.article.scraped_at.isoformat(),
            "word_count": self.summary.word_count,
            "original_length": self.summary.original_length,
            "quality_score": self.article.metadata.quality.score,
            "summary": self.summary.summary,
            "summary_urdu": self.translation.translated_text,
            "key_points": list(self.summary.key_points),
            "summary_source": self.summary.source,
            "translation_source": self.translation.source,
            "translation_confidence": self.translation.confidence,
            "record_id": self.record_id,
            "storage_error": self.storage_error,
        }


class BlogPipeline:
    """Runs the full blog summarization flow against a DependencyContainer."""

    def __init__(self, container: DependencyContainer) -> None:
        self.container = container
        self.logger = logger.bind(component="pipeline")

    async def process(self, url: str, *, store: bool = True) -> PipelineResult:
        """
        Process a single blog URL.

        Args:
            url: Blog post URL
            store: Persist the result when storage is enabled

        Returns:
            PipelineResult; storage failures are reported in ``storage_error``

        Raises:
            InvalidURLError: If the URL is not absolute http(s)
            ScrapeFailure: If the page could not be scraped after all retries
        """
        start = time.monotonic()
        with structlog.contextvars.bound_contextvars(request_url=url):
            scraper = await self.container.get_scraper()
            article = await scraper.scrape(url)

            summary, translation = await self._summarize_and_translate(article.body)

            record_id: Optional[int] = None
            storage_error: Optional[str] = None
            config = self.container.config
            if store and config is not None and config.storage.enabled:
                record_id, storage_error = await self._store(article, summary, translation)

            duration = time.monotonic() - start
            self.logger.info(
                "Article processed",
                title=article.title,
                summary_source=summary.source,
                translation_source=translation.source,
                record_id=record_id,
                duration=round(duration, 3),
            )

        return PipelineResult(
            article=article,
            summary=summary,
            translation=translation,
            record_id=record_id,
            storage_error=storage_error,
            duration=duration,
        )

    async def process_many(
        self, urls: Sequence[str], *, store: bool = True
    ) -> List[Union[PipelineResult, BaseException]]:
        """Process URLs concurrently; each entry is a result or the error for that URL."""
        results = await asyncio.gather(*(self.process(url, store=store) for url in urls), return_exceptions=True)
        failed = sum(1 for result in results if isinstance(result, BaseException))
        self.logger.info("Batch processed", total=len(urls), succeeded=len(urls) - failed, failed=failed)
        return list(results)

    async def _summarize_and_translate(self, text: str) -> Tuple[SummaryResult, TranslationResult]:
        combined = await self.container.get_combined_provider()
        if combined is not None:
            try:
                return await combined.summarize_and_translate(text)
            except Exception as e:
                self.logger.warning(
                    "Combined generation failed, using separate calls", error=str(e), error_type=type(e).__name__
                )

        summary_chain = await self.container.get_summary_chain()
        summary = await summary_chain.summarize(text)
        translation_chain = await self.container.get_translation_chain()
        translation = await translation_chain.translate(summary.summary)
        return summary, translation

    async def _store(
        self, article: ExtractedArticle, summary: SummaryResult, translation: TranslationResult
    ) -> Tuple[Optional[int], Optional[str]]:
        record = ArticleRecord(
            title=article.title,
            url=article.url,
            content=article.body,
            summary=summary.summary,
            summary_urdu=translation.translated_text,
            key_points=list(summary.key_points),
            word_count=summary.word_count,
            original_length=summary.original_length,
            scraped_at=article.scraped_at,
            created_at=datetime.now(timezone.utc),
        )
        try:
            store = await self.container.get_storage()
            return await store.store(record), None
        except StorageError as e:
            self.logger.warning("Failed to persist article", error=str(e))
            return None, str(e)

    async def health(self) -> Dict[str, Any]:
        """Report configuration and dependency health."""
        config = self.container.config
        cohere = await self.container.get_cohere()
        status: Dict[str, Any] = {
            "container": self.container.get_health_status(),
            "cohere": {"enabled": cohere.enabled, "model": cohere.config.model},
        }
        if config is not None and config.storage.enabled:
            try:
                store = await self.container.get_storage()
            except StorageError as e:
                status["storage"] = {"healthy": False, "error": str(e)}
            else:
                status["storage"] = await store.health()
        else:
            status["storage"] = {"healthy": True, "enabled": False}
        status["healthy"] = bool(status["storage"].get("healthy"))
        return status
