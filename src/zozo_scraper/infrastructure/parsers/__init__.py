# 🧠 zozo_scraper/infrastructure/parsers/__init__.py
"""
🧠 Пакет парсерів сторінок товару.

🔹 `HtmlDataExtractor` — повний витяг полів із сирого HTML.
🔹 `clean_html_text` — очищення фрагментів від тегів і сутностей.
"""

from __future__ import annotations

from .html_data_extractor import HtmlDataExtractor
from .text_normalizer import clean_html_text

__all__ = ["HtmlDataExtractor", "clean_html_text"]
