# 🏷️ zozo_scraper/infrastructure/parsers/extractors/brand.py
"""🏷️ Бренд: текст першого посилання на `/brand/…` (без правил відхилення)."""

from __future__ import annotations

from typing import List, Optional

from zozo_scraper.infrastructure.parsers.text_normalizer import clean_html_text
from .base import PatternCascade, PatternSpec

# Чутливий до регістру; `.` не перетинає переноси рядків.
BRAND_PATTERNS: List[PatternSpec] = [
    r"""<a[^>]*href="/brand/[^"]*"[^>]*>(.*?)</a>""",
]


class BrandExtractor:
    """Витягує бренд з сирого HTML."""

    def __init__(self) -> None:
        self._cascade = PatternCascade.compile("brand", BRAND_PATTERNS, flags=0)

    @property
    def cascade(self) -> PatternCascade:
        return self._cascade

    def extract(self, html: str) -> Optional[str]:
        return self._cascade.first(html, lambda captured: clean_html_text(captured) or None)


__all__ = ["BrandExtractor", "BRAND_PATTERNS"]
