# 🧠 zozo_scraper/infrastructure/services/product_info_service.py
"""
🧠 `ProductScraper` — оркестратор стратегій отримання метаданих товару.

🔹 Спершу перевіряє домен: URL поза сайтом → порожній результат без жодного запиту.
🔹 Далі по черзі: прямий запит → мобільний запит → вивід з URL.
🔹 Кожна стратегія пробується не більше одного разу; перша з назвою перемагає.
🔹 Жодна стратегія не дала назви → `ProductInfo` лише з `original_url`.
🔹 `fetch_many` обробляє кілька URL з обмеженим паралелізмом, порядок збережено.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx														# 🌐 Тип транспорту для тестів

# 🔠 Системні імпорти
import asyncio														# ⏳ Семафор і gather для пакетів
import logging														# 🧾 Логування подій сервісу
from enum import Enum, auto											# 🏷️ Стадії обробки
from typing import Any, List, Optional, Sequence					# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from zozo_scraper.config import ConfigService						# ⚙️ Налаштування
from zozo_scraper.domain.products import IProductStrategy, ProductInfo	# 📦 Контракт і результат
from zozo_scraper.errors import InputRejectedError					# 🚫 Відмова за доменом
from zozo_scraper.infrastructure.http import PageFetcher			# 🌐 GET сторінки
from zozo_scraper.infrastructure.images import ImageUrlValidator	# 🖼️ Пошук зображення
from zozo_scraper.infrastructure.parsers import HtmlDataExtractor	# 🧾 Каскади полів
from zozo_scraper.infrastructure.strategies import (
    DirectFetchStrategy,											# 📡 Прямий запит
    MobileFetchStrategy,											# 📱 Мобільний запит
    UrlInferenceStrategy,											# 🧠 Вивід з URL
)
from zozo_scraper.infrastructure.url import ZozoUrlStrategy		# 🔗 Домен і мобільний хост
from zozo_scraper.shared.metrics import inc_hit, inc_miss			# 📊 Метрики
from zozo_scraper.shared.utils.logger import LOG_NAME				# 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.service")

DEFAULT_MAX_CONCURRENCY = 4


# ================================
# 🏷️ СТАДІЇ ОБРОБКИ
# ================================
class FetchStage(Enum):
    """🏷️ Де зараз перебуває обробка одного URL."""

    NOT_STARTED = auto()											# ⏸️ Ще нічого не пробували
    TRYING_DIRECT = auto()											# 📡 Прямий запит
    TRYING_MOBILE = auto()											# 📱 Мобільний запит
    TRYING_INFERENCE = auto()										# 🧠 Вивід з URL
    DONE = auto()													# ✅ Результат повернуто


_STAGE_BY_STRATEGY = {
    "direct": FetchStage.TRYING_DIRECT,
    "mobile": FetchStage.TRYING_MOBILE,
    "inference": FetchStage.TRYING_INFERENCE,
}


# ================================
# 🧠 ОРКЕСТРАТОР
# ================================
class ProductScraper:
    """
    🧠 Повертає найкращий доступний `ProductInfo` для URL товару.

    Виклик тотальний: для будь-якого рядка повертається результат,
    назовні не виходить жоден виняток, крім скасування задачі.
    """

    def __init__(
        self,
        config: Optional[Any] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        strategies: Optional[Sequence[IProductStrategy]] = None,
    ) -> None:
        self._config = config if config is not None else ConfigService()
        self._urls = ZozoUrlStrategy(self._config)
        self._max_concurrency = max(
            1, int(self._config.get("batch.max_concurrency", DEFAULT_MAX_CONCURRENCY))
        )
        self._strategies: List[IProductStrategy] = (
            list(strategies) if strategies is not None else self._build_default_strategies(transport)
        )
        logger.debug(
            "⚙️ ProductScraper готовий: %s",
            ", ".join(strategy.name for strategy in self._strategies),
        )

    @classmethod
    def from_config(
        cls,
        config: Any,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ProductScraper":
        return cls(config, transport=transport)

    def _build_default_strategies(
        self, transport: Optional[httpx.AsyncBaseTransport]
    ) -> List[IProductStrategy]:
        """🧩 Прямий → мобільний → вивід з URL, з одним конфігом і транспортом."""
        fetcher = PageFetcher.from_config(self._config, transport=transport)
        extractor = HtmlDataExtractor.from_config(self._config)
        validator = ImageUrlValidator.from_config(self._config, transport=transport)
        return [
            DirectFetchStrategy(fetcher, extractor),
            MobileFetchStrategy(fetcher, extractor, self._urls),
            UrlInferenceStrategy.from_config(self._config, self._urls, validator),
        ]

    @property
    def strategies(self) -> List[IProductStrategy]:
        return list(self._strategies)

    # ================================
    # 🔄 ПУБЛІЧНИЙ API
    # ================================
    async def fetch_product_info(self, url: str) -> ProductInfo:
        """
        📦 Отримує метадані товару за URL.

        Args:
            url: Рядок, переданий викликачем (зберігається як `original_url`).

        Returns:
            ProductInfo: Результат першої стратегії з назвою або порожній результат.
        """
        stage = FetchStage.NOT_STARTED

        if not isinstance(url, str) or not self._urls.supports(url):
            rejected = InputRejectedError("URL не належить цільовому сайту", url=str(url))
            logger.warning("🚫 %s: %s", rejected.message, url, extra=rejected.to_log_extra())
            inc_miss("input", rejected.code)
            return ProductInfo.empty(url if isinstance(url, str) else str(url))

        for strategy in self._strategies:
            stage = _STAGE_BY_STRATEGY.get(strategy.name, stage)
            logger.info("🧭 %s → %s", stage.name, url)
            info = await strategy.fetch(url)
            if info.has_name:
                inc_hit(strategy.name)
                logger.info("✅ %s дала назву: %s", strategy.name, info.name)
                stage = FetchStage.DONE
                return info

        stage = FetchStage.DONE
        logger.warning("🕳️ Жодна стратегія не дала назви: %s (%s)", url, stage.name)
        return ProductInfo.empty(url)

    async def fetch_many(self, urls: Sequence[str]) -> List[ProductInfo]:
        """
        📦 Обробляє кілька URL паралельно (не більше `batch.max_concurrency` одночасно).

        Returns:
            Список результатів у тому ж порядку, що й вхідні URL.
        """
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _one(item: str) -> ProductInfo:
            async with semaphore:
                return await self.fetch_product_info(item)

        results = await asyncio.gather(*(_one(item) for item in urls))
        return list(results)


# ================================
# 🚪 ЗРУЧНІ ФУНКЦІЇ
# ================================
async def fetch_product_info(url: str) -> ProductInfo:
    """📦 Один URL із глобальною конфігурацією."""
    return await ProductScraper().fetch_product_info(url)


async def fetch_many(urls: Sequence[str]) -> List[ProductInfo]:
    """📦 Кілька URL із глобальною конфігурацією."""
    return await ProductScraper().fetch_many(urls)


__all__ = ["FetchStage", "ProductScraper", "fetch_product_info", "fetch_many"]
