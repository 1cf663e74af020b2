"""
Cohere chat API client and the hosted summary and translation providers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

import httpx
import structlog

from ..config.config import CohereConfig
from ..exceptions import (
    ProviderError,
    ProviderUnavailable,
    SummarizationFailure,
    TranslationFailure,
    TranslationQualityFailure,
)
from ..protocols import MAX_KEY_POINTS, SummaryResult, TranslationResult
from ..urdu import accept_translation, post_process_urdu_translation, translate_fallback

logger = structlog.get_logger(__name__)

SUMMARY_PROMPT = """Please analyze the following blog content and provide a structured summary.

Requirements:
1. Create a concise summary (3-5 sentences) that captures the main message
2. Extract 3-5 key points as bullet points
3. Focus on the most important information and insights
4. Maintain clarity and readability

Content to analyze:
{content}

Please format your response exactly as follows:
SUMMARY: [Your 3-5 sentence summary here]

KEY POINTS:
- [First key point]
- [Second key point]
- [Third key point]
- [Additional points if relevant]"""

TRANSLATION_PROMPT = """Translate the following English text to natural, fluent Urdu.

Requirements:
- Provide only the Urdu translation (no explanations)
- Use proper Urdu vocabulary and grammar
- Maintain the original meaning and tone
- Use correct Urdu script (Arabic script)
- Make it sound natural to native Urdu speakers

English text:
{text}

Urdu translation:"""

COMBINED_PROMPT = """Analyze the following blog content and provide both an English summary and its Urdu translation.

Requirements:
1. Create a concise English summary (3-5 sentences)
2. Extract 3-5 key points
3. Provide a natural Urdu translation of the summary
4. Ensure the Urdu translation is fluent and grammatically correct

Content:
{content}

Format your response exactly as follows:
SUMMARY: [Your English summary here]

KEY POINTS:
- [First key point]
- [Second key point]
- [Third key point]

URDU TRANSLATION: [اردو ترجمہ یہاں لکھیں]"""

_SUMMARY_SECTION = re.compile(r"SUMMARY:\s*(.*?)(?=KEY POINTS:|URDU TRANSLATION:|\Z)", re.DOTALL)
_KEY_POINTS_SECTION = re.compile(r"KEY POINTS:\s*(.*?)(?=URDU TRANSLATION:|\Z)", re.DOTALL)
_URDU_SECTION = re.compile(r"URDU TRANSLATION:\s*(.*)\Z", re.DOTALL)
_BULLET_PREFIX = re.compile(r"^[-*•]\s*")


@dataclass(frozen=True)
class ParsedResponse:
    summary: str
    key_points: List[str]
    urdu: str = ""


def parse_key_points(section: str) -> List[str]:
    points = [_BULLET_PREFIX.sub("", line.strip()).strip() for line in section.splitlines()]
    return [point for point in points if point][:MAX_KEY_POINTS]


def parse_response(response: str) -> ParsedResponse:
    """Split a structured SUMMARY / KEY POINTS / URDU TRANSLATION response into its parts."""
    summary_match = _SUMMARY_SECTION.search(response)
    if summary_match:
        summary = summary_match.group(1).strip()
    else:
        # Unlabelled answers: everything before the first section header
        summary = re.split(r"KEY POINTS:|URDU TRANSLATION:", response, maxsplit=1)[0].strip()

    key_points_match = _KEY_POINTS_SECTION.search(response)
    key_points = parse_key_points(key_points_match.group(1)) if key_points_match else []

    urdu_match = _URDU_SECTION.search(response)
    urdu = urdu_match.group(1).strip() if urdu_match else ""

    return ParsedResponse(summary=summary, key_points=key_points, urdu=urdu)


class CohereClient:
    """Minimal async client for Cohere's v2 chat endpoint."""

    def __init__(
        self,
        config: Optional[CohereConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or CohereConfig()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        if not self.enabled:
            logger.warning("COHERE_API_KEY not configured, hosted providers disabled")

    @property
    def enabled(self) -> bool:
        return bool(self.config.api_key)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={
                    "Authorization": f"Bearer {self.config.api_key}",
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
                timeout=httpx.Timeout(self.config.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CohereClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def chat(self, prompt: str, *, temperature: float = 0.3, max_tokens: int = 1000) -> str:
        """
        Send a single-turn chat request and return the response text.

        Raises:
            ProviderUnavailable: If no API key is configured
            ProviderError: On transport errors, non-2xx statuses or malformed bodies
        """
        if not self.enabled:
            raise ProviderUnavailable("Cohere API is not available. Please check your API key.")

        payload = {
            "model": self.config.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        try:
            response = await self._get_client().post("/v2/chat", json=payload)
        except httpx.HTTPError as e:
            raise ProviderError(f"Cohere request failed: {e}") from e

        if not response.is_success:
            raise ProviderError(f"Cohere returned HTTP {response.status_code}")

        try:
            body = response.json()
            content = body.get("message", {}).get("content") or []
        except (ValueError, AttributeError) as e:
            raise ProviderError("Malformed Cohere response") from e

        text = content[0].get("text", "") if content and isinstance(content[0], dict) else ""
        if not isinstance(text, str):
            raise ProviderError("Malformed Cohere response")
        logger.debug("Cohere chat completed", model=self.config.model, response_length=len(text))
        return text


class CohereSummaryProvider:
    """Hosted summary provider."""

    name = "cohere"
    deterministic = False

    def __init__(self, client: CohereClient) -> None:
        self.client = client

    async def summarize(self, text: str) -> SummaryResult:
        try:
            response = await self.client.chat(SUMMARY_PROMPT.format(content=text), temperature=0.3, max_tokens=1000)
        except ProviderUnavailable:
            raise
        except ProviderError as e:
            raise SummarizationFailure(str(e)) from e

        parsed = parse_response(response)
        if not parsed.summary:
            raise SummarizationFailure("Cohere returned an empty summary")

        return SummaryResult(
            summary=parsed.summary,
            key_points=parsed.key_points,
            word_count=len(text.split()),
            original_length=len(text),
            source=self.name,
        )


class CohereTranslationProvider:
    """Hosted translation provider; returns the raw model output for validation."""

    name = "cohere"
    deterministic = False

    def __init__(self, client: CohereClient) -> None:
        self.client = client

    async def translate(self, text: str) -> str:
        try:
            return await self.client.chat(TRANSLATION_PROMPT.format(text=text), temperature=0.2, max_tokens=500)
        except ProviderUnavailable:
            raise
        except ProviderError as e:
            raise TranslationFailure(str(e)) from e


class CohereCombinedProvider:
    """Summary and translation from a single hosted call."""

    name = "cohere"

    def __init__(self, client: CohereClient, min_quality_score: float = 0.5) -> None:
        self.client = client
        self.min_quality_score = min_quality_score

    async def summarize_and_translate(self, text: str) -> Tuple[SummaryResult, TranslationResult]:
        """
        Summarize ``text`` and translate the summary in one request.

        An Urdu section without Urdu script is replaced by the dictionary
        translation of the summary.

        Raises:
            ProviderUnavailable: If no API key is configured
            SummarizationFailure: On request failure or an empty summary
        """
        try:
            response = await self.client.chat(COMBINED_PROMPT.format(content=text), temperature=0.3, max_tokens=1500)
        except ProviderUnavailable:
            raise
        except ProviderError as e:
            raise SummarizationFailure(str(e)) from e

        parsed = parse_response(response)
        if not parsed.summary:
            raise SummarizationFailure("Cohere returned an empty summary")

        summary = SummaryResult(
            summary=parsed.summary,
            key_points=parsed.key_points,
            word_count=len(text.split()),
            original_length=len(text),
            source=self.name,
        )

        try:
            if not parsed.urdu:
                raise TranslationQualityFailure("Response has no Urdu translation section")
            translated, validation = accept_translation(parsed.summary, parsed.urdu, self.min_quality_score)
            translation = TranslationResult(
                original_text=parsed.summary,
                translated_text=translated,
                confidence=validation.confidence,
                source=self.name,
            )
        except TranslationQualityFailure as e:
            logger.warning("Combined translation rejected, using dictionary fallback", error=str(e))
            translation = TranslationResult(
                original_text=parsed.summary,
                translated_text=post_process_urdu_translation(translate_fallback(parsed.summary)),
                confidence=0.5,
                source="dictionary",
            )

        return summary, translation
