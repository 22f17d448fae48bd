# 💰 zozo_scraper/infrastructure/parsers/extractors/price.py
"""
💰 Каскад ціни товару.

🔹 Порядок: «¥/￥ + число» → JSON price → JSON salePrice → data-price → евристика за class.
🔹 Захоплення без ком має бути цілим числом > 0, інакше крок відхиляється.
🔹 Результат — `¥` + число з роздільниками тисяч (`12,345` → `¥12,345`).
"""

from __future__ import annotations

import re
from typing import List, Optional

from .base import PatternCascade, PatternSpec, logger

CURRENCY_GLYPH = "¥"
_INT_RE = re.compile(r"[+-]?\d+")

PRICE_PATTERNS: List[PatternSpec] = [
    r"[￥¥]\s*([0-9,]+)",
    r"""["']price["']\s*:\s*["']?([0-9,]+)["']?""",
    r"""["']salePrice["']\s*:\s*["']?([0-9,]+)["']?""",
    r"""data-price=["']([0-9,]+)["']""",
    r"""class=["'][^"']*price[^"']*["'][^>]*>.*?([0-9,]+)""",
]


def format_price(captured: str, glyph: str = CURRENCY_GLYPH) -> Optional[str]:
    """
    Перетворює захоплений рядок на відформатовану ціну.

    Args:
        captured: Сире захоплення, напр. ``"12,345"``.
        glyph: Символ валюти-префікс.

    Returns:
        ``"¥12,345"`` або None для нечислових, нульових і відʼємних значень.
    """
    cleaned = (captured or "").replace(",", "").strip()
    if not _INT_RE.fullmatch(cleaned):
        return None
    amount = int(cleaned)
    if amount <= 0:
        logger.debug("💰 Відхилено непозитивну ціну: %r", captured)
        return None
    return f"{glyph}{amount:,}"


class PriceExtractor:
    """Витягує ціну з сирого HTML."""

    def __init__(self, *, glyph: str = CURRENCY_GLYPH) -> None:
        self._glyph = glyph
        self._cascade = PatternCascade.compile("price", PRICE_PATTERNS)

    @property
    def cascade(self) -> PatternCascade:
        return self._cascade

    def extract(self, html: str) -> Optional[str]:
        return self._cascade.first(html, lambda captured: format_price(captured, self._glyph))


__all__ = ["PriceExtractor", "PRICE_PATTERNS", "format_price", "CURRENCY_GLYPH"]
