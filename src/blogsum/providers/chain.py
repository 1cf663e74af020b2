"""
Ordered fallback chains over summary and translation providers.

Hosted providers come first and the deterministic local provider last, so a
chain only fails when the local provider itself fails. No partial results
are merged: the first provider that succeeds wins. Any exception from a
hosted provider is logged and skipped; unexpected errors from a
deterministic provider propagate.
"""

from __future__ import annotations

import asyncio
from typing import List, Sequence

import structlog
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt, wait_incrementing

from ..exceptions import InputError, ProviderError, SummarizationFailure, TranslationFailure
from ..protocols import SummaryProvider, SummaryResult, TranslationProvider, TranslationResult
from ..urdu import accept_translation, post_process_urdu_translation, translate_fallback

logger = structlog.get_logger(__name__)

DICTIONARY_CONFIDENCE = 0.5


class SummaryChain:
    """Try each summary provider in order until one succeeds."""

    def __init__(self, providers: Sequence[SummaryProvider]) -> None:
        if not providers:
            raise ValueError("SummaryChain needs at least one provider")
        self.providers = list(providers)
        self.logger = logger.bind(component="summary_chain")

    async def summarize(self, text: str) -> SummaryResult:
        """
        Summarize ``text`` with the first provider that succeeds.

        Raises:
            InputError: If ``text`` is empty or whitespace only
            SummarizationFailure: If every provider failed
        """
        if not text or not text.strip():
            raise InputError("Content is required for summarization")

        last_error: Exception | None = None
        for provider in self.providers:
            try:
                result = await provider.summarize(text)
            except Exception as e:
                if provider.deterministic and not isinstance(e, ProviderError):
                    raise
                last_error = e
                self.logger.warning(
                    "Summary provider failed, falling back",
                    provider=provider.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                continue

            self.logger.debug("Summary generated", provider=provider.name, key_points=len(result.key_points))
            return result

        raise SummarizationFailure("All summary providers failed") from last_error


class TranslationChain:
    """Try each translation provider in order; hosted output is validated before it is accepted."""

    def __init__(
        self,
        providers: Sequence[TranslationProvider],
        *,
        max_retries: int = 3,
        retry_base_delay: float = 1.0,
        min_quality_score: float = 0.5,
    ) -> None:
        if not providers:
            raise ValueError("TranslationChain needs at least one provider")
        self.providers = list(providers)
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay
        self.min_quality_score = min_quality_score
        self.logger = logger.bind(component="translation_chain")

    async def _translate_with_retry(self, provider: TranslationProvider, text: str) -> str:
        def log_retry(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception() if retry_state.outcome else None
            self.logger.warning(
                "Translation attempt failed, retrying",
                provider=provider.name,
                attempt=retry_state.attempt_number,
                error=str(error),
            )

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_incrementing(start=self.retry_base_delay, increment=self.retry_base_delay),
            retry=retry_if_exception_type(TranslationFailure),
            before_sleep=log_retry,
            reraise=True,
        )
        return await retrying(provider.translate, text)

    async def translate(self, text: str) -> TranslationResult:
        """
        Translate ``text`` to Urdu.

        Raises:
            InputError: If ``text`` is empty or whitespace only
            TranslationFailure: If every provider failed
        """
        if not text or not text.strip():
            raise InputError("Text is required for translation")

        last_error: Exception | None = None
        for provider in self.providers:
            try:
                if provider.deterministic:
                    raw = await provider.translate(text)
                    return TranslationResult(
                        original_text=text,
                        translated_text=post_process_urdu_translation(raw),
                        confidence=DICTIONARY_CONFIDENCE,
                        source=provider.name,
                    )

                raw = await self._translate_with_retry(provider, text)
                translated, validation = accept_translation(text, raw, self.min_quality_score)
                return TranslationResult(
                    original_text=text,
                    translated_text=translated,
                    confidence=validation.confidence,
                    source=provider.name,
                )
            except Exception as e:
                if provider.deterministic and not isinstance(e, ProviderError):
                    raise
                last_error = e
                self.logger.warning(
                    "Translation provider failed, falling back",
                    provider=provider.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )

        raise TranslationFailure("All translation providers failed") from last_error

    async def translate_many(self, texts: Sequence[str]) -> List[TranslationResult]:
        """Translate all texts concurrently; failed items get the dictionary translation."""
        outcomes = await asyncio.gather(*(self.translate(text) for text in texts), return_exceptions=True)

        results: List[TranslationResult] = []
        for index, (text, outcome) in enumerate(zip(texts, outcomes)):
            if isinstance(outcome, TranslationResult):
                results.append(outcome)
                continue
            if not isinstance(outcome, Exception):
                raise outcome
            self.logger.warning("Translation failed for item, using dictionary", index=index, error=str(outcome))
            results.append(
                TranslationResult(
                    original_text=text,
                    translated_text=post_process_urdu_translation(translate_fallback(text)),
                    confidence=DICTIONARY_CONFIDENCE,
                    source="dictionary",
                )
            )
        return results
