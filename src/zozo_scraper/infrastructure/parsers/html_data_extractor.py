# 🧾 zozo_scraper/infrastructure/parsers/html_data_extractor.py
"""
🧾 HtmlDataExtractor — застосовує чотири каскади до сирого HTML і збирає `ProductInfo`.

🔹 Назва / ціна / зображення / бренд витягуються незалежно одне від одного.
🔹 `sale_price` дублює знайдену ціну; `size` береться з query-параметра вихідного URL.
🔹 Опис, колір і стара ціна на цьому шляху не визначаються.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging	# 🧾 Логування сценаріїв
from typing import Any, Optional	# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from zozo_scraper.domain.products.entities import ProductInfo	# 📦 Результат
from zozo_scraper.infrastructure.url.zozo_url_strategy import ZozoUrlStrategy	# 🔗 Параметр size
from zozo_scraper.shared.utils.logger import LOG_NAME	# 🏷️ Імʼя базового логера
from .extractors.brand import BrandExtractor	# 🏷️ Бренд
from .extractors.images import DEFAULT_HOST_TOKENS, ImageExtractor	# 🖼️ Зображення
from .extractors.name import DEFAULT_NOT_FOUND_PHRASE, DEFAULT_SITE_NAME, NameExtractor	# 🏷️ Назва
from .extractors.price import PriceExtractor	# 💰 Ціна

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parser.extractor")


# ================================
# 🏛️ ОСНОВНИЙ ЕКСТРАКТОР
# ================================
class HtmlDataExtractor:
    """🏛️ Оркеструє каскади полів для однієї сторінки товару."""

    def __init__(
        self,
        *,
        name: Optional[NameExtractor] = None,
        price: Optional[PriceExtractor] = None,
        image: Optional[ImageExtractor] = None,
        brand: Optional[BrandExtractor] = None,
    ) -> None:
        self._name = name or NameExtractor()
        self._price = price or PriceExtractor()
        self._image = image or ImageExtractor()
        self._brand = brand or BrandExtractor()

    @classmethod
    def from_config(cls, config: Any) -> "HtmlDataExtractor":
        """⚙️ Налаштовує каскади з вузлів `site` та `images` конфігурації."""
        return cls(
            name=NameExtractor(
                site_name=config.get("site.name", DEFAULT_SITE_NAME),
                not_found_phrase=config.get("site.not_found_phrase", DEFAULT_NOT_FOUND_PHRASE),
            ),
            image=ImageExtractor(
                base_url=config.get("site.home_url", "https://zozo.jp"),
                host_tokens=config.get("images.host_tokens") or DEFAULT_HOST_TOKENS,
            ),
        )

    def extract(self, html: str, original_url: str) -> ProductInfo:
        """🔎 Повертає `ProductInfo` з усім, що вдалося витягнути з HTML."""
        name = self._name.extract(html)
        price = self._price.extract(html)
        image_url = self._image.extract(html)
        brand = self._brand.extract(html)
        logger.info(
            "🧾 Витяг HTML: name=%r price=%r image=%r brand=%r",
            name,
            price,
            image_url,
            brand,
        )
        return ProductInfo(
            original_url=original_url,
            name=name,
            price=price,
            image_url=image_url,
            brand=brand,
            size=ZozoUrlStrategy.extract_size(original_url),
            sale_price=price,
        )


__all__ = ["HtmlDataExtractor"]
