# 🛍️ zozo_scraper/__init__.py
"""
🛍️ zozo_scraper — метадані товару ZOZOTOWN за URL сторінки.

🔹 `fetch_product_info(url)` — прямий запит → мобільний запит → вивід з URL.
🔹 `fetch_many(urls)` — те саме для кількох URL з обмеженим паралелізмом.
🔹 Логування не налаштовується автоматично: викличте `init_logging()` у застосунку.
"""

from .config import ConfigService
from .domain.products import ProductInfo
from .infrastructure.services import ProductScraper, fetch_many, fetch_product_info
from .infrastructure.url import site_label
from .shared.utils.logger import init_logging

__all__ = [
    "ConfigService",
    "ProductInfo",
    "ProductScraper",
    "fetch_product_info",
    "fetch_many",
    "site_label",
    "init_logging",
]
