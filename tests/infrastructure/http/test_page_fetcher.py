"""
🧪 test_page_fetcher.py — GET сторінки та відсікання сторінок блокування
"""

import httpx
import pytest

from zozo_scraper.errors import BlockedPageError
from zozo_scraper.infrastructure.http import PageFetcher


@pytest.mark.asyncio
async def test_returns_html_and_sends_browser_headers(mock_transport, make_page):
    html = make_page("<title>Tee</title>")
    transport, seen = mock_transport(lambda request: httpx.Response(200, text=html))

    body = await PageFetcher(transport=transport).fetch_html("https://zozo.jp/shop/a/goods/1/")

    assert body == html
    assert "iPhone" in seen[0].headers["User-Agent"]
    assert seen[0].headers["Accept-Language"].startswith("ja-JP")


@pytest.mark.asyncio
@pytest.mark.parametrize("size", [0, 999, 1000])
async def test_short_body_is_blocked(mock_transport, size):
    transport, _ = mock_transport(lambda request: httpx.Response(200, text="a" * size))

    with pytest.raises(BlockedPageError) as exc_info:
        await PageFetcher(transport=transport).fetch_html("https://zozo.jp/x")
    assert exc_info.value.body_chars == size


@pytest.mark.asyncio
async def test_threshold_counts_characters_not_bytes(mock_transport):
    # 1001 японских символа > 1000, хотя байтов втрое больше
    transport, _ = mock_transport(lambda request: httpx.Response(200, text="商" * 1001))
    body = await PageFetcher(transport=transport).fetch_html("https://zozo.jp/x")
    assert len(body) == 1001


@pytest.mark.asyncio
async def test_invalid_utf8_raises(mock_transport):
    transport, _ = mock_transport(lambda request: httpx.Response(200, content=b"\xff" * 2000))
    with pytest.raises(UnicodeDecodeError):
        await PageFetcher(transport=transport).fetch_html("https://zozo.jp/x")


@pytest.mark.asyncio
async def test_follows_redirects(mock_transport, make_page):
    html = make_page("<title>Moved</title>")

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://zozo.jp/new"})
        return httpx.Response(200, text=html)

    transport, seen = mock_transport(handler)
    body = await PageFetcher(transport=transport).fetch_html("https://zozo.jp/old")

    assert body == html
    assert [r.url.path for r in seen] == ["/old", "/new"]
