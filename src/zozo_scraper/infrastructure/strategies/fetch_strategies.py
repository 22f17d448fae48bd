# 📡 zozo_scraper/infrastructure/strategies/fetch_strategies.py
"""
📡 Стратегії прямого та мобільного запиту сторінки товару.

🔹 `DirectFetchStrategy` — GET вихідного URL із заголовками мобільного браузера.
🔹 `MobileFetchStrategy` — те саме, але хост переписано на мобільний сабдомен.
🔹 Обидві: тіло ≤ порогу → порожній результат без витягу; будь-який збій → порожній результат.
🔹 `original_url` у результаті — завжди URL від викликача, навіть для мобільного запиту.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування стратегій

# 🧩 Внутрішні модулі проєкту
from zozo_scraper.domain.products.entities import ProductInfo		# 📦 Результат
from zozo_scraper.errors import absorb_errors						# 🛡️ Тотальність `fetch`
from zozo_scraper.infrastructure.http.page_fetcher import PageFetcher	# 🌐 GET сторінки
from zozo_scraper.infrastructure.parsers.html_data_extractor import HtmlDataExtractor	# 🧾 Каскади
from zozo_scraper.infrastructure.url.zozo_url_strategy import ZozoUrlStrategy	# 🔗 Мобільний хост
from zozo_scraper.shared.metrics import inc_miss					# 📊 Метрики
from zozo_scraper.shared.utils.logger import LOG_NAME				# 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.strategies")


# ================================
# 🧱 СПІЛЬНА ЛОГІКА
# ================================
class _PageStrategy:
    """🧱 Завантаження сторінки + каскади; без поглинання помилок."""

    name = "page"

    def __init__(self, fetcher: PageFetcher, extractor: HtmlDataExtractor) -> None:
        self._fetcher = fetcher
        self._extractor = extractor

    def target_url(self, url: str) -> str:
        """URL, який реально запитується."""
        return url

    async def _fetch_and_extract(self, url: str) -> ProductInfo:
        target = self.target_url(url)
        logger.info("📡 [%s] Запит сторінки: %s", self.name, target)
        html = await self._fetcher.fetch_html(target)
        info = self._extractor.extract(html, original_url=url)
        if not info.has_name:
            logger.info("🕳️ [%s] Назву не знайдено", self.name)
            inc_miss(self.name, "no_name")
        return info


# ================================
# 📡 ПРЯМИЙ ЗАПИТ
# ================================
class DirectFetchStrategy(_PageStrategy):
    """📡 Сторінка за вихідним URL."""

    name = "direct"

    @absorb_errors("direct")
    async def fetch(self, url: str) -> ProductInfo:
        return await self._fetch_and_extract(url)


# ================================
# 📱 МОБІЛЬНИЙ ЗАПИТ
# ================================
class MobileFetchStrategy(_PageStrategy):
    """📱 Сторінка через мобільний сабдомен (`m.`)."""

    name = "mobile"

    def __init__(
        self,
        fetcher: PageFetcher,
        extractor: HtmlDataExtractor,
        url_strategy: ZozoUrlStrategy,
    ) -> None:
        super().__init__(fetcher, extractor)
        self._urls = url_strategy

    def target_url(self, url: str) -> str:
        return self._urls.to_mobile_url(url)

    @absorb_errors("mobile")
    async def fetch(self, url: str) -> ProductInfo:
        return await self._fetch_and_extract(url)


__all__ = ["DirectFetchStrategy", "MobileFetchStrategy"]
