"""
Data models for extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass(slots=True, frozen=True)
class ContentQuality:
    """Heuristic quality assessment of extracted article text."""

    score: float  # 0-1
    issues: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate the assessment."""
        if not (0.0 <= self.score <= 1.0):
            raise ValueError("Score must be between 0.0 and 1.0")


@dataclass(slots=True, frozen=True)
class ArticleMetadata:
    """Best-effort page metadata. Missing values are None, never empty strings."""

    word_count: int
    quality: ContentQuality
    description: Optional[str] = None
    author: Optional[str] = None
    publish_date: Optional[str] = None


@dataclass(slots=True, frozen=True)
class ExtractedArticle:
    """Result of extracting the readable body of one blog post."""

    title: str
    body: str
    url: str
    metadata: ArticleMetadata
    strategy: str = "selector"
    scraped_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
