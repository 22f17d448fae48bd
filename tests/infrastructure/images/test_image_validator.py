"""
🧪 test_image_validator.py — послідовна HEAD-перевірка кандидатів зображення

Перевіряє:
- Кандидати перевіряються строго по черзі, перший 200 повертається одразу
- Іконки-фолбеки ніколи не перевіряються
- Таймаути/збої/інші статуси = «невалідний» без винятків
"""

import httpx
import pytest

from zozo_scraper.config import ConfigService
from zozo_scraper.infrastructure.images import ImageUrlValidator

TEMPLATES = [f"https://img.test/{{pid}}/{n}.jpg" for n in range(1, 6)]
FALLBACKS = ["https://icons.test/clothes.png", "https://icons.test/t-shirt.png"]


def _validator(transport) -> ImageUrlValidator:
    return ImageUrlValidator(templates=TEMPLATES, fallbacks=FALLBACKS, transport=transport)


def test_candidates_order():
    validator = ImageUrlValidator(templates=TEMPLATES, fallbacks=FALLBACKS)
    candidates = validator.candidates("777")
    assert candidates[0] == "https://img.test/777/1.jpg"
    assert candidates[-2:] == FALLBACKS
    assert len(candidates) == 7


def test_exactly_two_fallbacks_required():
    with pytest.raises(ValueError):
        ImageUrlValidator(fallbacks=["https://icons.test/one.png"])


@pytest.mark.asyncio
async def test_third_candidate_wins_and_stops(mock_transport):
    winner = "https://img.test/42/3.jpg"
    transport, seen = mock_transport(
        lambda request: httpx.Response(200 if str(request.url) == winner else 404)
    )

    result = await _validator(transport).find_valid_image("42")

    assert result == winner
    # ровно три HEAD-запроса, по порядку, четвёртый не делаем
    assert [str(r.url) for r in seen] == [
        "https://img.test/42/1.jpg",
        "https://img.test/42/2.jpg",
        winner,
    ]
    assert all(r.method == "HEAD" for r in seen)


@pytest.mark.asyncio
async def test_nothing_valid_returns_first_fallback(mock_transport):
    transport, seen = mock_transport(lambda request: httpx.Response(404))

    result = await _validator(transport).find_valid_image("42")

    assert result == FALLBACKS[0]
    assert len(seen) == len(TEMPLATES)
    # иконки-фолбеки не проверяются
    assert not any("icons.test" in str(r.url) for r in seen)


@pytest.mark.asyncio
async def test_errors_count_as_invalid(mock_transport):
    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url.endswith("/1.jpg"):
            raise httpx.ConnectTimeout("slow", request=request)
        if url.endswith("/2.jpg"):
            raise httpx.ConnectError("refused", request=request)
        if url.endswith("/3.jpg"):
            return httpx.Response(500)
        if url.endswith("/4.jpg"):
            return httpx.Response(204)          # только 200 считается успехом
        return httpx.Response(200)

    transport, seen = mock_transport(handler)
    result = await _validator(transport).find_valid_image("9")

    assert result == "https://img.test/9/5.jpg"
    assert len(seen) == 5


@pytest.mark.asyncio
async def test_probe_sends_referer(mock_transport):
    transport, seen = mock_transport(lambda request: httpx.Response(200))
    validator = ImageUrlValidator.from_config(ConfigService(), transport=transport)

    result = await validator.find_valid_image("123456")

    assert result == "https://c.imgz.jp/123456/123456_1_D_500.jpg"
    assert seen[0].headers["Referer"] == "https://zozo.jp"
    assert seen[0].headers["Cache-Control"] == "no-cache"
