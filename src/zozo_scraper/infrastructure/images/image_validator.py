# 🖼️ zozo_scraper/infrastructure/images/image_validator.py
"""
🖼️ Пошук робочого URL зображення товару за його числовим ID.

🔹 Кандидати: шаблони CDN (новий CDN, старий сервер зображень, сторінковий шлях)
   з підставленим ID, а за ними рівно дві універсальні іконки-фолбеки.
🔹 Кандидати перевіряються строго по черзі HEAD-запитом із коротким таймаутом;
   перший зі статусом 200 повертається одразу, решта не перевіряються.
🔹 Іконки-фолбеки ніколи не перевіряються: якщо жоден кандидат не пройшов,
   повертається перша з них.
🔹 Таймаут, збій з'єднання чи інший статус — однаково «невалідний», без винятків назовні.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт

# 🔠 Системні імпорти
import logging															# 🧾 Логування результатів
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple	# 🧰 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from zozo_scraper.shared.metrics import inc_probe						# 📊 Метрики перевірок
from zozo_scraper.shared.utils.logger import LOG_NAME					# 🏷️ Ім'я базового логера

logger = logging.getLogger(f"{LOG_NAME}.images")


# ================================
# 📦 КОНСТАНТИ
# ================================
PID_PLACEHOLDER = "{pid}"
DEFAULT_CANDIDATE_TEMPLATES: Tuple[str, ...] = (
    "https://c.imgz.jp/{pid}/{pid}_1_D_500.jpg",
    "https://c.imgz.jp/{pid}/{pid}_B_01_500.jpg",
    "https://c.imgz.jp/{pid}/{pid}_1_D_300.jpg",
    "https://img.zozo.jp/goodsimages/{pid}/{pid}_1_D_500.jpg",
    "https://img.zozo.jp/goodsimages/{pid}/{pid}_B_01_500.jpg",
    "https://img.zozo.jp/goodsimages/{pid}/{pid}_1_D_300.jpg",
    "https://zozo.jp/shop/goods/{pid}/image/{pid}_1.jpg",
)
DEFAULT_FALLBACKS: Tuple[str, str] = (
    "https://img.icons8.com/color/300/clothes.png",
    "https://img.icons8.com/color/300/t-shirt.png",
)
DEFAULT_PROBE_TIMEOUT_S = 3.0
DEFAULT_PROBE_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
    ),
    "Accept": "image/webp,image/apng,image/jpeg,image/png,image/*,*/*;q=0.8",
    "Referer": "https://zozo.jp",
    "Sec-Fetch-Site": "same-origin",
    "Cache-Control": "no-cache",
}
SUCCESS_STATUS = 200


# ================================
# 🖼️ ВАЛІДАТОР
# ================================
class ImageUrlValidator:
    """🖼️ Будує список кандидатів і послідовно перевіряє їх HEAD-запитами."""

    def __init__(
        self,
        *,
        templates: Sequence[str] = DEFAULT_CANDIDATE_TEMPLATES,
        fallbacks: Sequence[str] = DEFAULT_FALLBACKS,
        timeout_s: float = DEFAULT_PROBE_TIMEOUT_S,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if len(fallbacks) != 2:
            raise ValueError(f"exactly two fallback icons are required, got {len(fallbacks)}")
        self.templates = tuple(templates)								# 🧩 Шаблони з `{pid}`
        self.fallbacks = tuple(fallbacks)								# 👕 Іконки-фолбеки
        self.timeout_s = float(timeout_s)								# ⏳ Таймаут однієї перевірки
        self.headers = {**DEFAULT_PROBE_HEADERS, **dict(headers or {})}	# 📨 Заголовки з Referer
        self._transport = transport
        logger.debug(
            "⚙️ ImageUrlValidator init templates=%d timeout=%.1fs",
            len(self.templates),
            self.timeout_s,
        )

    @classmethod
    def from_config(cls, config: Any, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> "ImageUrlValidator":
        """Збирає валідатор із вузлів `images` та `probe` конфігурації."""
        return cls(
            templates=config.get("images.candidates") or DEFAULT_CANDIDATE_TEMPLATES,
            fallbacks=config.get("images.fallbacks") or DEFAULT_FALLBACKS,
            timeout_s=config.get("probe.timeout_s", DEFAULT_PROBE_TIMEOUT_S),
            headers=config.get("probe.headers") or {},
            transport=transport,
        )

    # ================================
    # 🔄 ПУБЛІЧНИЙ API
    # ================================
    def candidates(self, product_id: str) -> List[str]:
        """Упорядкований список кандидатів; останні два — фолбеки."""
        real = [template.replace(PID_PLACEHOLDER, product_id) for template in self.templates]
        return real + list(self.fallbacks)

    async def find_valid_image(self, product_id: str) -> str:
        """
        📦 Повертає перший кандидат зі статусом 200 або першу іконку-фолбек.

        Args:
            product_id: Числовий ID товару.

        Returns:
            URL зображення (завжди непорожній).
        """
        all_candidates = self.candidates(product_id)
        probed = all_candidates[:-2]
        logger.info("🔍 Перевірка зображень для ID %s (%d кандидатів)", product_id, len(probed))

        async with self._client() as client:
            for index, url in enumerate(probed, start=1):
                logger.debug("🔍 Кандидат #%d: %s", index, url)
                if await self._probe(client, url):
                    logger.info("✅ Зображення знайдено: %s", url)
                    return url

        fallback = all_candidates[-2]
        logger.info("👕 Використовуємо іконку-фолбек: %s", fallback)
        return fallback

    # ================================
    # 🔧 ВНУТРІШНЄ
    # ================================
    def _client(self) -> httpx.AsyncClient:
        kwargs: Dict[str, Any] = {
            "headers": self.headers,
            "timeout": httpx.Timeout(self.timeout_s),
            "follow_redirects": True,
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def _probe(self, client: httpx.AsyncClient, url: str) -> bool:
        """HEAD-перевірка; будь-який збій означає «невалідний»."""
        try:
            response = await client.head(url)
        except httpx.TimeoutException:
            logger.debug("⏱️ Таймаут перевірки: %s", url)
            inc_probe("timeout")
            return False
        except httpx.HTTPError as exc:
            logger.debug("❌ Помилка перевірки %s: %s", url, exc)
            inc_probe("error")
            return False
        except httpx.InvalidURL as exc:							# 🧨 Некоректний URL-шаблон
            logger.warning("⚠️ Некоректний URL кандидата %s: %s", url, exc)
            inc_probe("error")
            return False

        valid = response.status_code == SUCCESS_STATUS
        logger.debug("📊 %s → %s (%s)", url, response.status_code, "ok" if valid else "invalid")
        inc_probe("ok" if valid else "bad_status")
        return valid


__all__ = [
    "ImageUrlValidator",
    "DEFAULT_CANDIDATE_TEMPLATES",
    "DEFAULT_FALLBACKS",
    "DEFAULT_PROBE_HEADERS",
    "DEFAULT_PROBE_TIMEOUT_S",
]
