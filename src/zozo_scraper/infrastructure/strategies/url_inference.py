# 🧠 zozo_scraper/infrastructure/strategies/url_inference.py
"""
🧠 `UrlInferenceStrategy` — відновлення даних товару лише з URL.

🔹 Сторінку не завантажує: назва, бренд і ціна синтезуються зі шляху.
🔹 Назва: `【セール】` (лише для розпродажу) + бренд + ` - 商品ID: ` + ID.
🔹 Ціна/ціна розпродажу: `セール価格` для розпродажу, інакше відсутні.
🔹 Зображення — через `ImageUrlValidator` за ID (єдині мережеві запити стратегії).
🔹 Без slug магазину або ID — порожній результат.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування кроків
from typing import Any, Optional									# 🧰 Типи

# 🧩 Внутрішні модулі проєкту
from zozo_scraper.domain.products.entities import ProductInfo		# 📦 Результат
from zozo_scraper.errors import absorb_errors						# 🛡️ Тотальність `fetch`
from zozo_scraper.infrastructure.images.image_validator import ImageUrlValidator	# 🖼️ Пошук зображення
from zozo_scraper.infrastructure.url.zozo_url_strategy import ZozoUrlStrategy	# 🔗 Розбір URL
from zozo_scraper.shared.metrics import inc_miss					# 📊 Метрики
from zozo_scraper.shared.utils.logger import LOG_NAME				# 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.strategies.inference")

DEFAULT_SALE_PREFIX = "【セール】"
DEFAULT_SALE_PRICE_LABEL = "セール価格"
DEFAULT_ID_SEPARATOR = " - 商品ID: "


class UrlInferenceStrategy:
    """🧠 Синтезує назву/бренд/ціну зі шляху URL."""

    name = "inference"

    def __init__(
        self,
        url_strategy: ZozoUrlStrategy,
        image_validator: ImageUrlValidator,
        *,
        sale_prefix: str = DEFAULT_SALE_PREFIX,
        sale_price_label: str = DEFAULT_SALE_PRICE_LABEL,
        id_separator: str = DEFAULT_ID_SEPARATOR,
    ) -> None:
        self._urls = url_strategy
        self._images = image_validator
        self._sale_prefix = sale_prefix
        self._sale_price_label = sale_price_label
        self._id_separator = id_separator

    @classmethod
    def from_config(
        cls,
        config: Any,
        url_strategy: ZozoUrlStrategy,
        image_validator: ImageUrlValidator,
    ) -> "UrlInferenceStrategy":
        return cls(
            url_strategy,
            image_validator,
            sale_prefix=config.get("inference.sale_prefix", DEFAULT_SALE_PREFIX),
            sale_price_label=config.get("inference.sale_price_label", DEFAULT_SALE_PRICE_LABEL),
            id_separator=config.get("inference.id_separator", DEFAULT_ID_SEPARATOR),
        )

    def build_name(self, brand: str, product_id: str, on_sale: bool) -> str:
        prefix = self._sale_prefix if on_sale else ""
        return f"{prefix}{brand}{self._id_separator}{product_id}"

    @absorb_errors("inference")
    async def fetch(self, url: str) -> ProductInfo:
        parsed = self._urls.parse(url)
        if not parsed.is_complete:
            logger.info(
                "🕳️ Не вдалося вивести товар з URL (shop=%r, id=%r)",
                parsed.shop_slug,
                parsed.product_id,
            )
            inc_miss(self.name, "url_incomplete")
            return ProductInfo.empty(url)

        shop_slug: str = parsed.shop_slug or ""
        product_id: str = parsed.product_id or ""
        brand = self._urls.shop_display_name(shop_slug)
        name = self.build_name(brand, product_id, parsed.on_sale)
        logger.info("🧠 Побудована назва: %s (sale=%s)", name, parsed.on_sale)

        image_url = await self._images.find_valid_image(product_id)
        sale_label: Optional[str] = self._sale_price_label if parsed.on_sale else None

        return ProductInfo(
            original_url=url,
            name=name,
            price=sale_label,
            image_url=image_url,
            brand=brand,
            size=self._urls.extract_size(url),
            sale_price=sale_label,
        )


__all__ = ["UrlInferenceStrategy"]
