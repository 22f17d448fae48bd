# 🏷️ zozo_scraper/infrastructure/parsers/extractors/name.py
"""
🏷️ Каскад назви товару.

🔹 Порядок: og:title → <title> без суфікса сайту → <title> як є → JSON productName/name
   → data-product-name → евристика за class.
🔹 Відхиляє назву, що дорівнює назві сайту або містить фразу «сторінку не знайдено».
"""

from __future__ import annotations

import re
from typing import List, Optional

from zozo_scraper.infrastructure.parsers.text_normalizer import clean_html_text
from .base import PatternCascade, PatternSpec

DEFAULT_SITE_NAME = "ZOZOTOWN"
DEFAULT_NOT_FOUND_PHRASE = "ページが見つかりません"


def name_patterns(site_name: str = DEFAULT_SITE_NAME) -> List[PatternSpec]:
    """Шаблони назви від найбільш структурованого до найменш."""
    return [
        r"""<meta\s+property=["']og:title["']\s+content=["']([^"']*)["']""",
        r"<title>([^<]*?)\s*\|\s*" + re.escape(site_name),
        r"<title>([^<]*)</title>",
        r"""["']productName["']\s*:\s*["']([^"']*)["']""",
        r"""["']name["']\s*:\s*["']([^"']*)["']""",
        r"""data-product-name=["']([^"']*)["']""",
        r"""class=["'][^"']*product[^"']*name[^"']*["'][^>]*>([^<]*)""",
    ]


class NameExtractor:
    """Витягує назву товару з сирого HTML."""

    def __init__(
        self,
        *,
        site_name: str = DEFAULT_SITE_NAME,
        not_found_phrase: str = DEFAULT_NOT_FOUND_PHRASE,
    ) -> None:
        self._site_name = site_name
        self._not_found_phrase = not_found_phrase
        self._cascade = PatternCascade.compile("name", name_patterns(site_name))

    @property
    def cascade(self) -> PatternCascade:
        return self._cascade

    def _accept(self, captured: str) -> Optional[str]:
        cleaned = clean_html_text(captured)
        if not cleaned or cleaned == self._site_name:
            return None
        if self._not_found_phrase and self._not_found_phrase in cleaned:
            return None
        return cleaned

    def extract(self, html: str) -> Optional[str]:
        return self._cascade.first(html, self._accept)


__all__ = ["NameExtractor", "name_patterns"]
