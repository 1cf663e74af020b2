"""
Shared contracts and dataclasses for blogsum.

The pipeline depends on three capabilities it does not implement itself:
a summary provider, a translation provider and an article store. Hosted
(network) and local (deterministic) providers satisfy the same protocols so
callers never branch on where a result came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Protocol, runtime_checkable

PLACEHOLDER_SUMMARY = "Unable to generate summary from provided content."
MAX_KEY_POINTS = 5


@dataclass(frozen=True)
class SummaryResult:
    """Summary of one article, independent of the provider that produced it."""

    summary: str
    key_points: List[str]
    word_count: int
    original_length: int
    source: str = "extractive"

    def __post_init__(self) -> None:
        if not self.summary.strip():
            raise ValueError("summary must not be empty")
        if len(self.key_points) > MAX_KEY_POINTS:
            raise ValueError(f"at most {MAX_KEY_POINTS} key points are allowed")


@dataclass(frozen=True)
class TranslationResult:
    """Urdu rendering of a source text."""

    original_text: str
    translated_text: str
    language: str = "urdu"
    confidence: Optional[float] = None
    source: str = "dictionary"


@dataclass
class ArticleRecord:
    """Persisted pipeline output for one article."""

    title: str
    url: str
    content: str
    summary: str
    summary_urdu: str
    key_points: List[str] = field(default_factory=list)
    word_count: int = 0
    original_length: int = 0
    scraped_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    id: Optional[int] = None


@runtime_checkable
class SummaryProvider(Protocol):
    """Produces a summary and key points for an article body.

    Any error from a provider that is not ``deterministic`` makes the chain
    move on to the next provider.
    """

    name: str
    deterministic: bool

    async def summarize(self, text: str) -> SummaryResult:
        """Summarize ``text``; raise on any failure so the next provider can run."""
        ...


@runtime_checkable
class TranslationProvider(Protocol):
    """Translates English text to Urdu.

    ``deterministic`` providers are trusted as-is; the output of the others is
    validated for Urdu script before it is accepted.
    """

    name: str
    deterministic: bool

    async def translate(self, text: str) -> str:
        """Return the raw Urdu rendering of ``text``; raise on failure."""
        ...


@runtime_checkable
class ArticleStore(Protocol):
    """Persistence capability used after the pipeline has produced its results."""

    async def store(self, record: ArticleRecord) -> int:
        """Persist ``record`` and return its id."""
        ...
