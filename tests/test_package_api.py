"""
🧪 test_package_api.py — публічний API пакету zozo_scraper
"""

import pytest

import zozo_scraper
from zozo_scraper import ProductInfo, fetch_many, fetch_product_info


def test_public_names_exported():
    for name in ("fetch_product_info", "fetch_many", "ProductScraper", "ProductInfo", "site_label", "init_logging"):
        assert hasattr(zozo_scraper, name)


@pytest.mark.asyncio
async def test_off_domain_url_short_circuits():
    # чужой домен → пустой результат без сетевых запросов
    info = await fetch_product_info("https://example.com/item/1")
    assert info == ProductInfo.empty("https://example.com/item/1")


@pytest.mark.asyncio
async def test_fetch_many_off_domain():
    results = await fetch_many(["https://a.example/1", "https://b.example/2"])
    assert [r.original_url for r in results] == ["https://a.example/1", "https://b.example/2"]
    assert all(r.is_empty for r in results)
