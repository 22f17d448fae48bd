# 🌐 zozo_scraper/infrastructure/http/page_fetcher.py
"""
🌐 `PageFetcher` — один GET сторінки товару з заголовками мобільного браузера.

🔹 Новий `httpx.AsyncClient` на кожен запит: жодного спільного пулу між викликами.
🔹 Тіло декодується як строгий UTF-8; збій декодування — мережевий збій.
🔹 Тіло довжиною ≤ `min_body_chars` вважається сторінкою блокування → `BlockedPageError`.
🔹 Власного таймауту немає — діє стандартний таймаут httpx.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт

# 🔠 Системні імпорти
import logging															# 🧾 Логування результатів
from typing import Any, Dict, Mapping, Optional						# 🧰 Типи

# 🧩 Внутрішні модулі проєкту
from zozo_scraper.errors import BlockedPageError						# 🧱 Сторінка-блокування
from zozo_scraper.shared.utils.logger import LOG_NAME					# 🏷️ Ім'я базового логера

logger = logging.getLogger(f"{LOG_NAME}.http.page")


# ================================
# 📦 КОНСТАНТИ
# ================================
DEFAULT_MIN_BODY_CHARS = 1000											# 📏 Поріг «справжньої» сторінки
DEFAULT_PAGE_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "ja-JP,ja;q=0.9,en;q=0.8",
    "Sec-Fetch-Site": "same-origin",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-User": "?1",
}


# ================================
# 🌐 ЗАВАНТАЖУВАЧ СТОРІНОК
# ================================
class PageFetcher:
    """🌐 Завантажує HTML сторінки та відсікає сторінки блокування."""

    def __init__(
        self,
        *,
        headers: Optional[Mapping[str, str]] = None,
        min_body_chars: int = DEFAULT_MIN_BODY_CHARS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.headers = {**DEFAULT_PAGE_HEADERS, **dict(headers or {})}	# 📨 Підсумкові HTTP-заголовки
        self.min_body_chars = int(min_body_chars)						# 📏 Мінімальна довжина тіла
        self._transport = transport										# 🧪 Підміна транспорту в тестах

    @classmethod
    def from_config(cls, config: Any, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> "PageFetcher":
        """Збирає завантажувач із вузла `page_fetch` конфігурації."""
        return cls(
            headers=config.get("page_fetch.headers") or {},
            min_body_chars=config.get("page_fetch.min_body_chars", DEFAULT_MIN_BODY_CHARS),
            transport=transport,
        )

    def _client(self) -> httpx.AsyncClient:
        kwargs: Dict[str, Any] = {"headers": self.headers, "follow_redirects": True}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def fetch_html(self, url: str) -> str:
        """
        📥 Повертає HTML сторінки.

        Raises:
            httpx.HTTPError: Транспортний збій.
            UnicodeDecodeError: Тіло не є UTF-8.
            BlockedPageError: Тіло коротше за поріг.
        """
        async with self._client() as client:
            response = await client.get(url)
        logger.info("📡 GET %s → HTTP %s", url, response.status_code)

        html = response.content.decode("utf-8")
        logger.debug("📏 Розмір тіла: %d символів", len(html))
        if len(html) <= self.min_body_chars:
            raise BlockedPageError(
                "Відповідь надто коротка — ймовірно, сторінка блокування",
                url=url,
                body_chars=len(html),
            )
        return html


__all__ = ["PageFetcher", "DEFAULT_PAGE_HEADERS", "DEFAULT_MIN_BODY_CHARS"]
