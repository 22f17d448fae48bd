# 🌐 zozo_scraper/infrastructure/http/__init__.py
"""🌐 HTTP-шар: завантаження сторінок товару."""

from .page_fetcher import DEFAULT_MIN_BODY_CHARS, DEFAULT_PAGE_HEADERS, PageFetcher

__all__ = ["PageFetcher", "DEFAULT_PAGE_HEADERS", "DEFAULT_MIN_BODY_CHARS"]
