# 🛠️ zozo_scraper/errors/error_handler.py
"""
🛠️ Декоратор, що робить async-метод стратегії тотальним.

🔹 Не змінює сигнатуру методу `fetch(url)`.
🔹 Коректно пропускає `asyncio.CancelledError`, щоб не ламати зупинку задач.
🔹 Будь-який інший виняток → лог + порожній `ProductInfo` для того ж URL.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio														# ⏱️ CancelledError
import functools													# 🧱 wraps для збереження метаданих
import logging														# 🧾 Логи обробки помилок
from typing import Any, Awaitable, Callable, Optional, TypeVar		# 📐 Типи для сигнатур

# 🧩 Внутрішні модулі проєкту
from zozo_scraper.domain.products.entities import ProductInfo		# 📦 Результат стратегії
from zozo_scraper.shared.metrics import inc_miss					# 📊 Метрики промахів
from .strategies import to_scraper_error							# 🔁 Конвертація винятків


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger("zozo_scraper.errors.error_handler")

F = TypeVar("F", bound=Callable[..., Awaitable[ProductInfo]])


def _find_url(args: tuple, kwargs: dict) -> Optional[str]:
    """Шукає URL у kwargs, інакше — останній рядковий позиційний аргумент."""
    url = kwargs.get("url")
    if isinstance(url, str):
        return url
    for arg in reversed(args):
        if isinstance(arg, str):
            return arg
    return None


# ================================
# 🏭 ФАБРИКА ДЕКОРАТОРІВ
# ================================
def absorb_errors(strategy_name: str) -> Callable[[F], F]:
    """
    Створює декоратор, що поглинає всі збої стратегії.

    Args:
        strategy_name: Мітка стратегії для логів і метрик.

    Returns:
        Callable, що обгортає async-метод `fetch`.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> ProductInfo:
            url = _find_url(args, kwargs) or ""
            try:
                return await func(*args, **kwargs)
            except asyncio.CancelledError:
                logger.info("⏹️ %s скасовано", strategy_name, extra={"url": url})
                raise												# ⚠️ Ніколи не глотаємо cancel
            except Exception as exc:								# noqa: BLE001
                known = to_scraper_error(exc)
                if known is not None:
                    logger.warning(
                        "⚠️ %s: %s (%s)",
                        strategy_name,
                        known.message,
                        url,
                        extra={"strategy": strategy_name, **known.to_log_extra()},
                    )
                    inc_miss(strategy_name, known.code)
                else:
                    logger.error(
                        "🔥 %s: неочікуваний збій для %s",
                        strategy_name,
                        url,
                        extra={"strategy": strategy_name},
                        exc_info=True,
                    )
                    inc_miss(strategy_name, "unexpected")
                return ProductInfo.empty(url)

        return wrapper											# type: ignore[return-value]

    return decorator


__all__ = ["absorb_errors"]
