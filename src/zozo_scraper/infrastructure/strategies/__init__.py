# 🧭 zozo_scraper/infrastructure/strategies/__init__.py
"""🧭 Стратегії отримання даних: прямий запит, мобільний запит, вивід з URL."""

from .fetch_strategies import DirectFetchStrategy, MobileFetchStrategy
from .url_inference import UrlInferenceStrategy

__all__ = ["DirectFetchStrategy", "MobileFetchStrategy", "UrlInferenceStrategy"]
