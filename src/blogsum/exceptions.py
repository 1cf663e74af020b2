"""
Exception hierarchy for blogsum.

Only ``ScrapeFailure`` (after all retries) and ``InputError`` are meant to
reach the end user. Every other error is recovered inside the pipeline.
"""

from __future__ import annotations


class BlogsumError(Exception):
    """Base exception for blogsum errors."""

    pass


class InvalidURLError(BlogsumError, ValueError):
    """Raised when a URL is not an absolute http(s) URL."""

    pass


class FetchFailure(BlogsumError):
    """Raised when a document cannot be retrieved (network, timeout, HTTP status)."""

    def __init__(self, message: str, *, url: str | None = None, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class ExtractionFailure(BlogsumError):
    """Raised when no extraction strategy produced any text."""

    pass


class LowQualityContent(BlogsumError):
    """Raised when extracted content scores below the accepted quality floor."""

    def __init__(self, message: str, *, score: float, issues: list[str] | None = None) -> None:
        super().__init__(message)
        self.score = score
        self.issues = list(issues or [])


class ScrapeFailure(BlogsumError):
    """Raised when every scrape attempt for a URL failed."""

    def __init__(self, message: str, *, url: str, attempts: int) -> None:
        super().__init__(message)
        self.url = url
        self.attempts = attempts


class InputError(BlogsumError, ValueError):
    """Raised for empty or whitespace-only input text."""

    pass


class ProviderError(BlogsumError):
    """Base exception for hosted provider failures."""

    pass


class ProviderUnavailable(ProviderError):
    """Raised when a hosted provider is not configured (e.g. missing API key)."""

    pass


class SummarizationFailure(ProviderError):
    """Raised when a summary provider fails or returns an unusable response."""

    pass


class TranslationFailure(ProviderError):
    """Raised when a translation provider fails."""

    pass


class TranslationQualityFailure(TranslationFailure):
    """Raised when a translation candidate fails validation (e.g. has no Urdu script)."""

    def __init__(self, message: str, *, issues: list[str] | None = None) -> None:
        super().__init__(message)
        self.issues = list(issues or [])


class StorageError(BlogsumError):
    """Raised when persisting or reading an article record fails."""

    pass
