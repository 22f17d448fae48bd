# 🚨 zozo_scraper/errors/custom_errors.py
"""
🚨 Ієрархія винятків рушія.

🔹 Усі винятки поглинаються всередині стратегій і ніколи не доходять до викликача.
🔹 Промахи шаблонів і перевірки зображень — це `None`, а не винятки.
🔹 `to_log_extra()` дає словник для `logger.extra`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення помилок
from typing import Dict, Optional									# 📐 Типізація

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger("zozo_scraper.errors")


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Категорії збоїв для логів і метрик."""

    INPUT_REJECTED = "input_rejected"								# 🚫 Хост поза доменом
    NETWORK = "network_error"										# 🌐 З'єднання/таймаут/декодування
    BLOCKED_PAGE = "blocked_page"									# 🧱 Тіло замале — сторінка-блокування
    UNKNOWN = "unknown_error"										# ❓ Резервний код


# ================================
# 🧠 БАЗОВИЙ ВИНЯТОК
# ================================
class ScraperError(Exception):
    """🧠 Базовий виняток рушія."""

    code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, url: Optional[str] = None, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url												# 🔗 URL, де сталася помилка
        self.details = details										# 🧾 Технічні деталі

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для логів."""
        extra: Dict[str, object] = {"error_code": self.code}
        if self.url:
            extra["url"] = self.url
        if self.details:
            extra["details"] = self.details
        return extra


# ================================
# 🧾 КОНКРЕТНІ ВИНЯТКИ
# ================================
class InputRejectedError(ScraperError):
    """🚫 URL не належить цільовому сайту."""

    code = ErrorCode.INPUT_REJECTED


class NetworkRequestError(ScraperError):
    """🌐 Мережевий, транспортний або декодувальний збій."""

    code = ErrorCode.NETWORK

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        details: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, url=url, details=details)
        self.status_code = status_code								# 🔢 HTTP-код відповіді (якщо був)
        logger.debug("🌐 NetworkRequestError created", extra={"url": url, "status_code": status_code})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.status_code is not None:
            extra["status_code"] = self.status_code
        return extra


class BlockedPageError(ScraperError):
    """🧱 Відповідь надто коротка — вважаємо її сторінкою блокування/помилки."""

    code = ErrorCode.BLOCKED_PAGE

    def __init__(self, message: str, *, url: Optional[str] = None, body_chars: int = 0) -> None:
        super().__init__(message, url=url, details=f"body_chars={body_chars}")
        self.body_chars = body_chars								# 📏 Фактична довжина тіла


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "ScraperError",
    "InputRejectedError",
    "NetworkRequestError",
    "BlockedPageError",
]
