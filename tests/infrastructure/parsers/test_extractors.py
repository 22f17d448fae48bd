"""
🧪 test_extractors.py — каскади полів назви, ціни, зображення та бренду

Перевіряє:
- Пріоритет шаблонів (перший крок, що дав валідне значення, перемагає)
- Правила відхилення (назва сайту, «сторінку не знайдено», непозитивна ціна, сторонній хост)
- Нормалізацію URL зображень
"""

import pytest

from zozo_scraper.infrastructure.parsers.extractors import (
    BrandExtractor,
    ImageExtractor,
    NameExtractor,
    PriceExtractor,
    format_price,
    normalize_image_url,
)


# ─────────────────────────────────────────────────────────────────────
# 🏷️ Назва
# ─────────────────────────────────────────────────────────────────────
@pytest.fixture()
def names() -> NameExtractor:
    return NameExtractor()


def test_name_prefers_og_title(names):
    html = (
        '<meta property="og:title" content="Oversized Tee">'
        "<title>Other | ZOZOTOWN</title>"
    )
    assert names.extract(html) == "Oversized Tee"


def test_name_strips_site_suffix_from_title(names):
    assert names.extract("<title>ロゴTシャツ | ZOZOTOWN</title>") == "ロゴTシャツ"


def test_bare_site_name_is_rejected(names):
    # единственный кандидат — "ZOZOTOWN" → имени нет
    assert names.extract("<html><title>ZOZOTOWN</title></html>") is None


def test_not_found_page_is_rejected_and_cascade_continues(names):
    html = (
        '<meta property="og:title" content="ページが見つかりません">'
        '<div data-product-name="Real Name"></div>'
    )
    assert names.extract(html) == "Real Name"


def test_name_from_json(names):
    assert names.extract('{"productName": "Denim &amp; Co"}') == "Denim & Co"


def test_name_absent(names):
    assert names.extract("<html><body>nothing</body></html>") is None
    assert names.extract("") is None


def test_name_cascade_order():
    cascade = NameExtractor().cascade
    assert len(cascade) == 7
    assert "og:title" in next(iter(cascade)).pattern.pattern


# ─────────────────────────────────────────────────────────────────────
# 💰 Ціна
# ─────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "captured,expected",
    [
        ("12,345", "¥12,345"),
        ("1000", "¥1,000"),
        ("0", None),
        ("-5", None),
        (",", None),
        ("abc", None),
    ],
)
def test_format_price(captured, expected):
    assert format_price(captured) == expected


def test_price_from_yen_glyph():
    assert PriceExtractor().extract("<span>￥12,345</span>") == "¥12,345"


def test_zero_price_falls_through_to_sale_price():
    html = '{"price": 0, "salePrice": 5000}'
    assert PriceExtractor().extract(html) == "¥5,000"


def test_price_from_data_attribute():
    assert PriceExtractor().extract('<div data-price="3,990"></div>') == "¥3,990"


def test_price_absent():
    assert PriceExtractor().extract("<p>no price here</p>") is None


# ─────────────────────────────────────────────────────────────────────
# 🖼️ Зображення
# ─────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "src,expected",
    [
        ("//c.imgz.jp/1/1.jpg", "https://c.imgz.jp/1/1.jpg"),
        ("/goods/1.jpg", "https://zozo.jp/goods/1.jpg"),
        ("https://img.zozo.jp/a.jpg", "https://img.zozo.jp/a.jpg"),
        ("data:image/png;base64,AAAA", None),
        ("images/a.jpg", None),
        ("", None),
    ],
)
def test_normalize_image_url(src, expected):
    assert normalize_image_url(src) == expected


def test_image_from_og_protocol_relative():
    html = '<meta property="og:image" content="//c.imgz.jp/123/123_1_D_500.jpg">'
    assert ImageExtractor().extract(html) == "https://c.imgz.jp/123/123_1_D_500.jpg"


def test_foreign_host_is_rejected_and_cascade_continues():
    html = (
        '<meta property="og:image" content="https://cdn.example.com/a.jpg">'
        '<img data-src="https://img.zozo.jp/goodsimages/1/1.jpg">'
    )
    assert ImageExtractor().extract(html) == "https://img.zozo.jp/goodsimages/1/1.jpg"


def test_product_img_tag_by_alt():
    html = '<img src="/goodsimages/9/9.jpg" alt="商品画像">'
    assert ImageExtractor().extract(html) == "https://zozo.jp/goodsimages/9/9.jpg"


def test_image_absent():
    assert ImageExtractor().extract('<img data-src="data:image/gif;base64,R0">') is None


# ─────────────────────────────────────────────────────────────────────
# 🏷️ Бренд
# ─────────────────────────────────────────────────────────────────────
def test_brand_from_link():
    html = '<a class="x" href="/brand/beams/">BEAMS &amp; Co</a><a href="/brand/other/">Other</a>'
    assert BrandExtractor().extract(html) == "BEAMS & Co"


def test_brand_strips_inner_tags():
    assert BrandExtractor().extract('<a href="/brand/gu/"><span>GU</span></a>') == "GU"


def test_brand_pattern_is_case_sensitive():
    assert BrandExtractor().extract('<A HREF="/brand/gu/">GU</A>') is None


def test_brand_absent():
    assert BrandExtractor().extract("<a href='/shop/gu/'>GU</a>") is None
