"""
Shared fixtures for the blogsum test suite.

Network collaborators are replaced with ``httpx.MockTransport`` and every
test gets its own configuration with zero retry delays and a temporary
database.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

import httpx
import pytest
import pytest_asyncio

from blogsum.config import (
    CohereConfig,
    Config,
    MonitoringConfig,
    ScraperConfig,
    StorageConfig,
    SummarizerConfig,
    TranslatorConfig,
)
from blogsum.storage import SQLiteArticleStore

ARTICLE_PARAGRAPHS = [
    "Artificial intelligence is changing how hospitals diagnose disease and plan treatment for patients.",
    "Researchers at several universities published a study showing that machine learning models detect early signs of illness.",
    "The key finding of the research is that faster diagnosis leads to significantly better outcomes for patients.",
    "However, experts warn that the data used to train these systems must be carefully reviewed for bias.",
    "Hospitals are now investing in digital infrastructure so that doctors can use these tools every day.",
    "In conclusion, the analysis suggests that artificial intelligence will become an essential part of modern care.",
]

BLOG_HTML = """<!DOCTYPE html>
<html>
<head>
  <title>AI in Healthcare | Example Blog</title>
  <meta name="description" content="How AI is transforming diagnosis">
  <meta name="author" content="Jane Writer">
  <meta property="article:published_time" content="2024-05-01T10:00:00Z">
</head>
<body>
  <header><nav><a href="/">Home</a> <a href="/about">About</a></nav></header>
  <article>
    <h1 class="entry-title">AI in Healthcare</h1>
    <div class="post-content">
      {paragraphs}
    </div>
    <aside class="sidebar">Subscribe to our newsletter for more stories</aside>
  </article>
  <footer>Copyright Example Blog</footer>
</body>
</html>
""".format(paragraphs="\n      ".join(f"<p>{p}</p>" for p in ARTICLE_PARAGRAPHS))

URDU_SENTENCE = "مصنوعی ذہانت صحت کے شعبے کو تبدیل کر رہی ہے۔ محققین کہتے ہیں کہ اس کا اہم فائدہ تیز تشخیص ہے۔"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep host configuration (API keys, config files) out of tests."""
    monkeypatch.delenv("COHERE_API_KEY", raising=False)
    for name in list(os.environ):
        if name.startswith("BLOGSUM_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def blog_html() -> str:
    return BLOG_HTML


@pytest.fixture
def article_text() -> str:
    return "\n\n".join(ARTICLE_PARAGRAPHS)


@pytest.fixture
def urdu_text() -> str:
    return URDU_SENTENCE


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Offline configuration: no API key, no retry delays, temporary database."""
    return Config(
        scraper=ScraperConfig(max_retries=3, retry_base_delay=0.0, timeout=5.0),
        summarizer=SummarizerConfig(use_hosted=True),
        translator=TranslatorConfig(max_retries=2, retry_base_delay=0.0),
        cohere=CohereConfig(api_key=None),
        storage=StorageConfig(db_path=tmp_path / "data" / "test.db"),
        monitoring=MonitoringConfig(log_level="DEBUG"),
    )


@pytest.fixture
def hosted_config(test_config: Config) -> Config:
    """Configuration with a (fake) Cohere key so hosted providers are enabled."""
    return test_config.model_copy(
        update={"cohere": CohereConfig(api_key="test-key", base_url="https://cohere.test", timeout=5.0)}
    )


@pytest_asyncio.fixture
async def article_store(tmp_path: Path):
    store = SQLiteArticleStore(StorageConfig(db_path=tmp_path / "store" / "articles.db"))
    await store.initialize()
    yield store
    await store.close()


def html_transport(pages: Dict[str, Union[str, Tuple[int, str]]]) -> httpx.MockTransport:
    """MockTransport answering from a URL -> body (or (status, body)) table; unknown URLs get 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        page = pages.get(str(request.url))
        if page is None:
            return httpx.Response(404, text="not found")
        status, body = page if isinstance(page, tuple) else (200, page)
        return httpx.Response(status, text=body, headers={"Content-Type": "text/html; charset=utf-8"})

    return httpx.MockTransport(handler)


def cohere_transport(texts: List[str], calls: List[httpx.Request] | None = None) -> httpx.MockTransport:
    """MockTransport replaying Cohere v2 chat responses in order (the last one repeats)."""
    queue = list(texts)

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        text = queue.pop(0) if len(queue) > 1 else queue[0]
        body = {"id": "chat-1", "message": {"role": "assistant", "content": [{"type": "text", "text": text}]}}
        return httpx.Response(200, content=json.dumps(body).encode("utf-8"), headers={"Content-Type": "application/json"})

    return httpx.MockTransport(handler)


@pytest.fixture
def make_html_transport() -> Callable[..., httpx.MockTransport]:
    return html_transport


@pytest.fixture
def make_cohere_transport() -> Callable[..., httpx.MockTransport]:
    return cohere_transport
