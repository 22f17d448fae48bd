"""
🧪 test_zozo_url_strategy.py — розбір URL товарів без завантаження сторінки

Перевіряє:
- Перевірку домену
- Мобільний варіант хоста
- slug магазину, ID товару, ознаку розпродажу та розмір
- Таблицю аліасів магазинів і підпис сайту
"""

import pytest

from zozo_scraper.config import ConfigService
from zozo_scraper.infrastructure.url import ZozoUrlStrategy, site_label


class _CfgStub:
    """Минимальный конфиг-сервис с .get() для стратегии."""

    def __init__(self, values: dict):
        self._values = values

    def get(self, key: str, default=None):
        return self._values.get(key, default)


@pytest.fixture()
def strategy() -> ZozoUrlStrategy:
    return ZozoUrlStrategy(ConfigService())


# ─────────────────────────────────────────────────────────────────────
# supports(url)
# ─────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://zozo.jp/shop/beams/goods/1/", True),
        ("https://ZOZO.JP/shop/beams/goods/1/", True),
        ("https://m.zozo.jp/shop/beams/goods/1/", True),
        ("https://www.zozo.jp/", True),
        ("https://example.com/shop/beams/goods/1/", False),
        ("https://example.com/?ref=zozo.jp", False),   # токен в query не считается
        ("not a url", False),
        ("", False),
    ],
)
def test_supports(strategy, url, expected):
    assert strategy.supports(url) is expected


# ─────────────────────────────────────────────────────────────────────
# to_mobile_url(url)
# ─────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://zozo.jp/shop/a/goods/1/", "https://m.zozo.jp/shop/a/goods/1/"),
        ("https://www.zozo.jp/shop/a/goods/1/?size=M", "https://m.zozo.jp/shop/a/goods/1/?size=M"),
        ("https://m.zozo.jp/shop/a/goods/1/", "https://m.zozo.jp/shop/a/goods/1/"),
    ],
)
def test_to_mobile_url(strategy, url, expected):
    assert strategy.to_mobile_url(url) == expected


# ─────────────────────────────────────────────────────────────────────
# parse(url)
# ─────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "url,slug,pid,on_sale",
    [
        ("https://zozo.jp/shop/uniqlo/goods-sale/123456/", "uniqlo", "123456", True),
        ("https://zozo.jp/shop/beams/goods/987/?did=1", "beams", "987", False),
        ("https://zozo.jp/shop/gu/goodsx/555/", "gu", "555", False),   # общий шаблон goods*
        ("https://zozo.jp/shop/gu/", "gu", None, False),
        ("https://zozo.jp/goods/42/", None, "42", False),
    ],
)
def test_parse(strategy, url, slug, pid, on_sale):
    parsed = strategy.parse(url)
    assert parsed.shop_slug == slug
    assert parsed.product_id == pid
    assert parsed.on_sale is on_sale
    assert parsed.is_complete is bool(slug and pid)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://zozo.jp/shop/a/goods/1/?size=M", "M"),
        ("https://zozo.jp/shop/a/goods/1/?did=2&size=XL", "XL"),
        ("https://zozo.jp/shop/a/goods/1/?size=", None),
        ("https://zozo.jp/shop/a/goods/1/", None),
    ],
)
def test_extract_size(url, expected):
    assert ZozoUrlStrategy.extract_size(url) == expected


# ─────────────────────────────────────────────────────────────────────
# shop_display_name(slug)
# ─────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "slug,expected",
    [
        ("uniqlo", "ユニクロ"),
        ("UNIQLO", "ユニクロ"),        # поиск без учёта регистра
        ("nano", "nano・universe"),
        ("freak", "FREAK'S STORE"),
        ("unknownshop", "UNKNOWNSHOP"),
    ],
)
def test_shop_display_name(strategy, slug, expected):
    assert strategy.shop_display_name(slug) == expected


def test_aliases_from_config_stub():
    stub = _CfgStub({"inference.shop_aliases": {"MyShop": "My Shop"}})
    strategy = ZozoUrlStrategy(config=stub)  # type: ignore[arg-type]
    assert strategy.shop_display_name("myshop") == "My Shop"
    # встроенные алиасы заменены полностью
    assert strategy.shop_display_name("uniqlo") == "UNIQLO"


def test_defaults_without_config():
    strategy = ZozoUrlStrategy()
    assert strategy.supports("https://zozo.jp/")
    assert strategy.shop_display_name("beams") == "BEAMS"


# ─────────────────────────────────────────────────────────────────────
# site_label(url)
# ─────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://zozo.jp/shop/a/goods/1/", "ZOZOTOWN"),
        ("https://www.amazon.co.jp/dp/B0", "Amazon"),
        ("https://item.rakuten.co.jp/x/", "楽天"),
        ("https://shop.example.com/p/1", "SHOP.EXAMPLE.COM"),
        ("nonsense", "BRAND"),
    ],
)
def test_site_label(url, expected):
    assert site_label(url) == expected
