# 📦 zozo_scraper/domain/products/entities.py
"""
📦 Доменна сутність `ProductInfo` — результат одного виклику рушія.

🔹 Іммʼютабельна (frozen dataclass) і без власної ідентичності: рівність за значенням.
🔹 Кожне опційне поле або має вміст, або `None`; порожній рядок на вході → `None`.
🔹 `original_url` — завжди рядок, переданий викликачем, без змін.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування нормалізації
from dataclasses import asdict, dataclass                           # 🧱 Опис сутності
from typing import Any, Dict, Optional                              # 🧰 Типізація

# ================================
# 🪵 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(__name__)

_OPTIONAL_FIELDS = (
    "name",
    "price",
    "image_url",
    "brand",
    "size",
    "description",
    "color",
    "sale_price",
    "original_price",
)                                                                   # 🗂️ Поля, що можуть бути відсутні


# ================================
# 🧽 НОРМАЛІЗАЦІЙНІ ХЕЛПЕРИ
# ================================
def _absent_if_blank(value: Any) -> Optional[str]:
    """Порожній або пробільний рядок → `None`; інше — як рядок."""
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


# ================================
# 📦 СУТНІСТЬ ТОВАРУ
# ================================
@dataclass(frozen=True, slots=True)
class ProductInfo:
    """
    Метадані товару, визначені однією зі стратегій.

    Відсутність поля (`None`) означає «не визначено» і ніколи не плутається
    з порожнім рядком: `__post_init__` зводить обидва випадки до `None`.
    """

    original_url: str
    name: Optional[str] = None
    price: Optional[str] = None
    image_url: Optional[str] = None
    brand: Optional[str] = None
    size: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    sale_price: Optional[str] = None
    original_price: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.original_url, str):
            raise TypeError(f"original_url must be str, got {type(self.original_url).__name__}")
        for field_name in _OPTIONAL_FIELDS:
            raw = getattr(self, field_name)
            normalized = _absent_if_blank(raw)
            if normalized is not raw:
                if normalized is None:
                    logger.debug("🧼 ProductInfo.%s: порожнє значення → None", field_name)
                object.__setattr__(self, field_name, normalized)    # 🔐 Фіксуємо нормалізоване значення

    # ================================
    # 🏭 ФАБРИКИ
    # ================================
    @classmethod
    def empty(cls, original_url: str) -> "ProductInfo":
        """Запис, де всі опційні поля відсутні."""
        return cls(original_url=original_url)

    # ================================
    # 🔍 ВЛАСТИВОСТІ
    # ================================
    @property
    def has_name(self) -> bool:
        return self.name is not None

    @property
    def is_empty(self) -> bool:
        """True, якщо жодне опційне поле не визначено."""
        return all(getattr(self, f) is None for f in _OPTIONAL_FIELDS)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Плоский словник для шару збереження/відображення."""
        return asdict(self)


__all__ = ["ProductInfo"]
