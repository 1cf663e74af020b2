"""
BeautifulSoup-based blog content extractor.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import structlog
from bs4 import BeautifulSoup

from ..exceptions import ExtractionFailure
from .models import ArticleMetadata, ExtractedArticle
from .protocols import ContentStrategy
from .quality import count_words, validate_content
from .strategies import DEFAULT_STRATEGIES, clean_text

logger = structlog.get_logger(__name__)

DEFAULT_TITLE = "Untitled Article"
MAX_TITLE_LENGTH = 200

TITLE_SELECTORS: Tuple[str, ...] = (
    "h1.entry-title",
    "h1.post-title",
    "h1.article-title",
    ".title h1",
    "header h1",
    "h1",
    "title",
)

# (selector, attribute) pairs; attribute None means the element's text.
DESCRIPTION_SOURCES = (
    ('meta[name="description"]', "content"),
    ('meta[property="og:description"]', "content"),
)
AUTHOR_SOURCES = (
    ('meta[name="author"]', "content"),
    ('meta[property="article:author"]', "content"),
    (".author", None),
    ('[rel="author"]', None),
)
PUBLISH_DATE_SOURCES = (
    ('meta[property="article:published_time"]', "content"),
    ('meta[name="date"]', "content"),
    ("time[datetime]", "datetime"),
    (".date", None),
)


class BlogContentExtractor:
    """Extract title, readable body and metadata from a blog page."""

    name = "soup"

    def __init__(
        self,
        strategies: Optional[Sequence[ContentStrategy]] = None,
        min_content_length: int = 100,
        parser: str = "html.parser",
    ) -> None:
        self.strategies: Tuple[ContentStrategy, ...] = tuple(
            strategies if strategies is not None else (cls() for cls in DEFAULT_STRATEGIES)
        )
        self.min_content_length = min_content_length
        self.parser = parser

    def extract(self, html: str, url: str) -> ExtractedArticle:
        """Extract the main article from raw HTML.

        Args:
            html: Raw markup
            url: Source URL, carried through to the result

        Returns:
            ExtractedArticle with quality assessment attached

        Raises:
            ExtractionFailure: If no strategy produced any text
        """
        if not html or not html.strip():
            raise ExtractionFailure("insufficient content")

        soup = BeautifulSoup(html, self.parser)

        # Title and metadata are read from the full document, noise regions included.
        title = self.extract_title(soup)
        description = _first_value(soup, DESCRIPTION_SOURCES)
        author = _first_value(soup, AUTHOR_SOURCES)
        publish_date = _first_value(soup, PUBLISH_DATE_SOURCES)

        body, strategy = self._extract_body(soup)
        if not body:
            logger.debug("No strategy produced content", url=url)
            raise ExtractionFailure("insufficient content")

        quality = validate_content(body, self.min_content_length)
        metadata = ArticleMetadata(
            word_count=count_words(body),
            quality=quality,
            description=description,
            author=author,
            publish_date=publish_date,
        )

        logger.debug(
            "Extraction completed",
            url=url,
            strategy=strategy,
            text_length=len(body),
            quality_score=quality.score,
        )
        return ExtractedArticle(title=title, body=body, url=url, metadata=metadata, strategy=strategy)

    def extract_title(self, soup: BeautifulSoup) -> str:
        """Return the first plausible headline, the page title, or a default."""
        for selector in TITLE_SELECTORS:
            element = soup.select_one(selector)
            if element is None:
                continue
            title = element.get_text(" ").strip()
            if title and len(title) < MAX_TITLE_LENGTH:
                cleaned = clean_text(title)
                if cleaned:
                    return cleaned

        page_title = soup.title.get_text(" ").strip() if soup.title else ""
        if page_title:
            cleaned = clean_text(page_title)
            if cleaned:
                return cleaned

        return DEFAULT_TITLE

    def _extract_body(self, soup: BeautifulSoup) -> Tuple[str, str]:
        for strategy in self.strategies:
            text = strategy.extract(soup)
            if text:
                return text, strategy.name
        return "", ""


def _first_value(soup: BeautifulSoup, sources: Sequence[Tuple[str, Optional[str]]]) -> Optional[str]:
    """Return the first non-empty value among ``sources``, or None."""
    for selector, attribute in sources:
        element = soup.select_one(selector)
        if element is None:
            continue
        if attribute is None:
            value = element.get_text(" ")
        else:
            raw = element.get(attribute)
            value = raw if isinstance(raw, str) else ""
        value = " ".join(value.split())
        if value:
            return value
    return None
