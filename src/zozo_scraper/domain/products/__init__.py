# 📦 zozo_scraper/domain/products/__init__.py
"""📦 Доменний шар товарів: сутність `ProductInfo` та контракт стратегій."""

from .entities import ProductInfo
from .interfaces import IProductStrategy

__all__ = ["ProductInfo", "IProductStrategy"]
