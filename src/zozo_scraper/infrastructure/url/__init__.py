# 🔗 zozo_scraper/infrastructure/url/__init__.py
"""🔗 Розбір URL товарів: домен, мобільний хост, slug/ID, розмір, підпис сайту."""

from .zozo_url_strategy import ParsedProductUrl, ZozoUrlStrategy, site_label

__all__ = ["ZozoUrlStrategy", "ParsedProductUrl", "site_label"]
