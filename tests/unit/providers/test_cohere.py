"""
Unit tests for the Cohere client, response parsing and hosted providers.
"""

import json

import httpx
import pytest

from blogsum.config import CohereConfig
from blogsum.exceptions import ProviderError, ProviderUnavailable, SummarizationFailure, TranslationFailure
from blogsum.providers import (
    CohereClient,
    CohereCombinedProvider,
    CohereSummaryProvider,
    CohereTranslationProvider,
    parse_response,
)
from blogsum.providers.cohere import SUMMARY_PROMPT, TRANSLATION_PROMPT
from blogsum.urdu import post_process_urdu_translation

STRUCTURED = """SUMMARY: AI is changing how hospitals diagnose disease. Faster diagnosis improves outcomes.

KEY POINTS:
- Machine learning detects early signs of illness
* Training data must be reviewed for bias
• Hospitals are investing in infrastructure"""


def status_transport(status: int, body: str = "") -> httpx.MockTransport:
    return httpx.MockTransport(lambda request: httpx.Response(status, text=body))


class TestParseResponse:
    def test_structured(self):
        parsed = parse_response(STRUCTURED)

        assert parsed.summary == "AI is changing how hospitals diagnose disease. Faster diagnosis improves outcomes."
        assert parsed.key_points == [
            "Machine learning detects early signs of illness",
            "Training data must be reviewed for bias",
            "Hospitals are investing in infrastructure",
        ]
        assert parsed.urdu == ""

    def test_combined(self, urdu_text):
        parsed = parse_response(f"{STRUCTURED}\n\nURDU TRANSLATION: {urdu_text}")

        assert parsed.urdu == urdu_text
        assert len(parsed.key_points) == 3
        assert "URDU" not in parsed.key_points[-1]

    def test_unlabelled_summary(self):
        parsed = parse_response("Just a plain answer.\n\nKEY POINTS:\n- One point only")

        assert parsed.summary == "Just a plain answer."
        assert parsed.key_points == ["One point only"]

    def test_key_points_capped(self):
        points = "\n".join(f"- point {i}" for i in range(8))
        assert len(parse_response(f"SUMMARY: s\nKEY POINTS:\n{points}").key_points) == 5


class TestCohereClient:
    def test_disabled_without_key(self):
        assert not CohereClient(CohereConfig(api_key=None)).enabled

    @pytest.mark.asyncio
    async def test_chat_without_key_raises(self):
        client = CohereClient(CohereConfig(api_key=None))
        with pytest.raises(ProviderUnavailable):
            await client.chat("hello")

    @pytest.mark.asyncio
    async def test_chat_request_and_response(self, hosted_config, make_cohere_transport):
        calls = []
        async with CohereClient(hosted_config.cohere, transport=make_cohere_transport(["Hi there"], calls)) as client:
            text = await client.chat("Say hi", temperature=0.2, max_tokens=50)

        assert text == "Hi there"
        request = calls[0]
        assert request.method == "POST"
        assert request.url == "https://cohere.test/v2/chat"
        assert request.headers["Authorization"] == "Bearer test-key"
        payload = json.loads(request.content)
        assert payload["model"] == hosted_config.cohere.model
        assert payload["messages"] == [{"role": "user", "content": "Say hi"}]
        assert payload["temperature"] == 0.2
        assert payload["max_tokens"] == 50

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "transport",
        [
            status_transport(500, "error"),
            status_transport(200, "not json"),
            status_transport(200, "[]"),
            status_transport(200, json.dumps({"message": {"content": [{"text": None}]}})),
        ],
    )
    async def test_chat_errors(self, hosted_config, transport):
        async with CohereClient(hosted_config.cohere, transport=transport) as client:
            with pytest.raises(ProviderError):
                await client.chat("hello")

    @pytest.mark.asyncio
    async def test_transport_error(self, hosted_config):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        async with CohereClient(hosted_config.cohere, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ProviderError, match="Cohere request failed"):
                await client.chat("hello")


class TestSummaryProvider:
    @pytest.mark.asyncio
    async def test_summarize(self, hosted_config, make_cohere_transport, article_text):
        calls = []
        client = CohereClient(hosted_config.cohere, transport=make_cohere_transport([STRUCTURED], calls))
        result = await CohereSummaryProvider(client).summarize(article_text)
        await client.close()

        assert result.source == "cohere"
        assert result.summary.startswith("AI is changing")
        assert len(result.key_points) == 3
        assert result.word_count == len(article_text.split())
        assert result.original_length == len(article_text)
        prompt = json.loads(calls[0].content)["messages"][0]["content"]
        assert prompt == SUMMARY_PROMPT.format(content=article_text)

    @pytest.mark.asyncio
    async def test_empty_summary_fails(self, hosted_config, make_cohere_transport):
        client = CohereClient(hosted_config.cohere, transport=make_cohere_transport(["KEY POINTS:\n- only points"]))
        with pytest.raises(SummarizationFailure):
            await CohereSummaryProvider(client).summarize("Some article text")
        await client.close()

    @pytest.mark.asyncio
    async def test_http_error_becomes_summarization_failure(self, hosted_config):
        client = CohereClient(hosted_config.cohere, transport=status_transport(502))
        with pytest.raises(SummarizationFailure):
            await CohereSummaryProvider(client).summarize("Some article text")
        await client.close()

    @pytest.mark.asyncio
    async def test_unavailable_passes_through(self):
        with pytest.raises(ProviderUnavailable):
            await CohereSummaryProvider(CohereClient(CohereConfig(api_key=None))).summarize("text")


class TestTranslationProvider:
    @pytest.mark.asyncio
    async def test_returns_raw_text(self, hosted_config, make_cohere_transport, urdu_text):
        calls = []
        client = CohereClient(hosted_config.cohere, transport=make_cohere_transport([urdu_text], calls))
        provider = CohereTranslationProvider(client)

        assert await provider.translate("Some text") == urdu_text
        assert provider.deterministic is False
        assert json.loads(calls[0].content)["messages"][0]["content"] == TRANSLATION_PROMPT.format(text="Some text")
        await client.close()

    @pytest.mark.asyncio
    async def test_http_error_becomes_translation_failure(self, hosted_config):
        client = CohereClient(hosted_config.cohere, transport=status_transport(429))
        with pytest.raises(TranslationFailure):
            await CohereTranslationProvider(client).translate("Some text")
        await client.close()


class TestCombinedProvider:
    @pytest.mark.asyncio
    async def test_summary_and_translation(self, hosted_config, make_cohere_transport, urdu_text, article_text):
        response = f"{STRUCTURED}\n\nURDU TRANSLATION: {urdu_text}"
        client = CohereClient(hosted_config.cohere, transport=make_cohere_transport([response]))
        summary, translation = await CohereCombinedProvider(client).summarize_and_translate(article_text)
        await client.close()

        assert summary.source == "cohere"
        assert translation.source == "cohere"
        assert translation.original_text == summary.summary
        assert translation.translated_text == post_process_urdu_translation(urdu_text)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("urdu_section", ["", "\n\nURDU TRANSLATION: Sorry, I cannot translate."])
    async def test_missing_urdu_falls_back_to_dictionary(
        self, hosted_config, make_cohere_transport, article_text, urdu_section
    ):
        client = CohereClient(hosted_config.cohere, transport=make_cohere_transport([STRUCTURED + urdu_section]))
        summary, translation = await CohereCombinedProvider(client).summarize_and_translate(article_text)
        await client.close()

        assert summary.source == "cohere"
        assert translation.source == "dictionary"
        assert translation.confidence == 0.5
        assert translation.translated_text

    @pytest.mark.asyncio
    async def test_request_failure(self, hosted_config):
        client = CohereClient(hosted_config.cohere, transport=status_transport(500))
        with pytest.raises(SummarizationFailure):
            await CohereCombinedProvider(client).summarize_and_translate("text")
        await client.close()
