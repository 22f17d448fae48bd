# 🧩 zozo_scraper/domain/products/interfaces.py
"""
🧩 Контракт стратегії отримання даних товару.

🔹 Стратегія — самодостатній спосіб отримати `ProductInfo` з URL.
🔹 `fetch` ніколи не підіймає винятки назовні (крім скасування задачі).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .entities import ProductInfo


@runtime_checkable
class IProductStrategy(Protocol):
    """Контракт для прямого/мобільного запиту та виводу з URL."""

    name: str                                                       # 🏷️ Мітка для логів і метрик

    async def fetch(self, url: str) -> ProductInfo:
        """Повертає `ProductInfo` (можливо, повністю порожній)."""
        ...


__all__ = ["IProductStrategy"]
