# 📜 zozo_scraper/errors/strategies.py
"""
📜 Стратегії конвертації сторонніх винятків у доменні `ScraperError`.

🔹 Тримають логіку розпізнавання поза стратегіями отримання даних.
🔹 Нові стратегії можна додавати, не змінюючи ядро.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт (винятки)

# 🔠 Системні імпорти
import logging															# 🧾 Логування стратегій
from typing import Iterable, Optional, Protocol						# 📐 Типи

# 🧩 Внутрішні модулі проєкту
from .custom_errors import NetworkRequestError, ScraperError			# ⚠️ Доменні помилки


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger("zozo_scraper.errors.strategies")


# ================================
# 🧠 КОНТРАКТ СТРАТЕГІЙ
# ================================
class IErrorHandlingStrategy(Protocol):
    """🧠 Контракт, що визначає єдиний метод `handle`."""

    def handle(self, error: Exception) -> Optional[ScraperError]:
        """Вертає `ScraperError`, якщо виняток розпізнано, або None."""


def _request_url(error: Exception) -> str:
    """Безпечно дістає URL запиту з httpx-винятку."""
    try:
        return str(error.request.url)									# type: ignore[attr-defined]
    except (AttributeError, RuntimeError):
        return "N/A"


# ================================
# 🌐 HTTPX-СТРАТЕГІЯ
# ================================
class HttpxErrorStrategy(IErrorHandlingStrategy):
    """🌐 Перетворює httpx-помилки на `NetworkRequestError`."""

    def handle(self, error: Exception) -> Optional[ScraperError]:
        if isinstance(error, httpx.TimeoutException):					# ⏱️ Таймаути запиту
            url = _request_url(error)
            logger.debug("⏱️ httpx timeout", extra={"url": url})
            return NetworkRequestError("Час очікування відповіді вичерпано", url=url, details=str(error))

        if isinstance(error, httpx.ConnectError):						# 🌐 Не вдалося підʼєднатися
            url = _request_url(error)
            logger.debug("🌐 httpx connect error", extra={"url": url})
            return NetworkRequestError("Не вдалося встановити з'єднання", url=url, details=str(error))

        if isinstance(error, httpx.HTTPStatusError):					# 🔢 Неочікуваний статус
            url = _request_url(error)
            status = error.response.status_code
            logger.debug("🔢 httpx status error", extra={"url": url, "status": status})
            return NetworkRequestError(
                f"Неочікуваний HTTP-статус {status}",
                url=url,
                status_code=status,
                details=str(error),
            )

        if isinstance(error, httpx.HTTPError):							# 🌐 Решта транспортних збоїв
            url = _request_url(error)
            logger.debug("🌐 httpx transport error", extra={"url": url})
            return NetworkRequestError("Помилка HTTP-транспорту", url=url, details=str(error))

        if isinstance(error, httpx.InvalidURL):							# 🧨 URL не вдалося зібрати
            logger.debug("🧨 httpx invalid url")
            return NetworkRequestError("Некоректний URL запиту", details=str(error))

        return None


# ================================
# 🔤 ДЕКОДУВАННЯ
# ================================
class DecodingErrorStrategy(IErrorHandlingStrategy):
    """🔤 Тіло відповіді не є коректним UTF-8."""

    def handle(self, error: Exception) -> Optional[ScraperError]:
        if isinstance(error, UnicodeDecodeError):
            logger.debug("🔤 decode error", extra={"encoding": error.encoding})
            return NetworkRequestError("Не вдалося декодувати тіло відповіді", details=str(error))
        return None


DEFAULT_STRATEGIES: tuple[IErrorHandlingStrategy, ...] = (
    HttpxErrorStrategy(),
    DecodingErrorStrategy(),
)																		# 🧭 Порядок перевірки


def to_scraper_error(
    error: Exception,
    strategies: Iterable[IErrorHandlingStrategy] = DEFAULT_STRATEGIES,
) -> Optional[ScraperError]:
    """Повертає доменну помилку для першої стратегії, що розпізнала виняток."""
    if isinstance(error, ScraperError):
        return error
    for strategy in strategies:
        converted = strategy.handle(error)
        if converted is not None:
            return converted
    return None


__all__ = [
    "IErrorHandlingStrategy",
    "HttpxErrorStrategy",
    "DecodingErrorStrategy",
    "DEFAULT_STRATEGIES",
    "to_scraper_error",
]																		# 📤 Публічний API
