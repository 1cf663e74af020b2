"""
Unit tests for HttpClient.
"""

import httpx
import pytest

from blogsum.config import ScraperConfig
from blogsum.crawler import FetchedDocument, HttpClient
from blogsum.exceptions import FetchFailure

URL = "https://blog.example.com/post"


@pytest.mark.asyncio
async def test_fetch_returns_document(make_html_transport):
    async with HttpClient(transport=make_html_transport({URL: "<p>hello</p>"})) as client:
        document = await client.fetch(URL)

    assert isinstance(document, FetchedDocument)
    assert document.html == "<p>hello</p>"
    assert document.status == 200
    assert document.final_url == URL
    assert document.elapsed >= 0


@pytest.mark.asyncio
async def test_sends_browser_headers():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="ok")

    config = ScraperConfig(user_agent="blogsum-test/1.0")
    async with HttpClient(config, transport=httpx.MockTransport(handler)) as client:
        await client.fetch(URL)

    assert seen[0].headers["User-Agent"] == "blogsum-test/1.0"
    assert seen[0].headers["Accept-Language"] == "en-US,en;q=0.5"


@pytest.mark.asyncio
async def test_follows_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://blog.example.com/new"})
        return httpx.Response(200, text="moved")

    async with HttpClient(transport=httpx.MockTransport(handler)) as client:
        document = await client.fetch("https://blog.example.com/old")

    assert document.html == "moved"
    assert document.final_url == "https://blog.example.com/new"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [403, 404, 500, 503])
async def test_error_status_raises(make_html_transport, status):
    async with HttpClient(transport=make_html_transport({URL: (status, "nope")})) as client:
        with pytest.raises(FetchFailure) as exc_info:
            await client.fetch(URL)

    assert exc_info.value.status == status
    assert exc_info.value.url == URL
    assert str(status) in str(exc_info.value)


@pytest.mark.asyncio
async def test_network_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with HttpClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(FetchFailure, match="Request failed") as exc_info:
            await client.fetch(URL)

    assert exc_info.value.status is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_timeout_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    async with HttpClient(ScraperConfig(timeout=2.5), transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(FetchFailure, match="timed out after 2.5s"):
            await client.fetch(URL)


@pytest.mark.asyncio
async def test_close_is_idempotent(make_html_transport):
    client = HttpClient(transport=make_html_transport({}))
    await client.initialize()
    assert client.client is not None

    await client.close()
    await client.close()
    assert client.client is None
