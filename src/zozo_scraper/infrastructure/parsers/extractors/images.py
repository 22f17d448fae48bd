# 🖼️ zozo_scraper/infrastructure/parsers/extractors/images.py
"""
🖼️ Каскад головного зображення товару.

🔹 Порядок: og:image → <img src> товару (alt «商品» або class product) → data-src → JSON imageUrl → JSON image.
🔹 Нормалізує `//…` → `https://…` і `/…` → абсолютний URL на домені сайту.
🔹 Відкидає URL, що після нормалізації не є http(s) або не містить жодного з токенів хостів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Iterable, List, Optional, Tuple	# 🧰 Типізації

# 🧩 Внутрішні модулі проєкту
from .base import PatternCascade, PatternSpec, logger	# 🔗 Спільні утиліти екстракторів

DEFAULT_BASE_URL = "https://zozo.jp"
DEFAULT_HOST_TOKENS: Tuple[str, ...] = ("zozo", "img")

IMAGE_PATTERNS: List[PatternSpec] = [
    r"""<meta\s+property=["']og:image["']\s+content=["']([^"']*)["']""",
    r"""<img[^>]*src=["']([^"']*)["'][^>]*(?:alt=["'][^"']*商品|class=["'][^"']*product)""",
    r"""<img[^>]*data-src=["']([^"']*)["']""",
    r"""["']imageUrl["']\s*:\s*["']([^"']*)["']""",
    r"""["']image["']\s*:\s*["']([^"']*)["']""",
]


def normalize_image_url(src: str, base_url: str = DEFAULT_BASE_URL) -> Optional[str]:
    """Уніфікує URL зображення; повертає None для не-http посилань."""
    head = (src or "").strip()
    if not head:
        return None
    if head.startswith("//"):	# 🌐 Протокол-відносний URL
        return f"https:{head}"
    if head.startswith("/"):	# 🏠 Кореневий шлях сайту
        return f"{base_url.rstrip('/')}{head}"
    if not head.startswith("http"):	# 🚫 data:, blob:, відносні шляхи тощо
        return None
    return head


class ImageExtractor:
    """Витягує URL головного зображення з сирого HTML."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        host_tokens: Iterable[str] = DEFAULT_HOST_TOKENS,
    ) -> None:
        self._base_url = base_url
        self._host_tokens = tuple(t for t in host_tokens if t)
        self._cascade = PatternCascade.compile("image", IMAGE_PATTERNS)

    @property
    def cascade(self) -> PatternCascade:
        return self._cascade

    def _accept(self, captured: str) -> Optional[str]:
        url = normalize_image_url(captured, self._base_url)
        if url is None:
            return None
        if not any(token in url for token in self._host_tokens):
            logger.debug("🖼️ Відкинуто сторонній хост: %s", url)
            return None
        return url

    def extract(self, html: str) -> Optional[str]:
        return self._cascade.first(html, self._accept)


__all__ = ["ImageExtractor", "IMAGE_PATTERNS", "normalize_image_url"]
