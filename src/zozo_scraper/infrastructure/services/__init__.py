# 🧠 zozo_scraper/infrastructure/services/__init__.py
"""🧠 Сервіси верхнього рівня: оркестратор стратегій."""

from .product_info_service import FetchStage, ProductScraper, fetch_many, fetch_product_info

__all__ = ["FetchStage", "ProductScraper", "fetch_product_info", "fetch_many"]
