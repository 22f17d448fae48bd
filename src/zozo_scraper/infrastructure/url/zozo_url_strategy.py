# 🔗 zozo_scraper/infrastructure/url/zozo_url_strategy.py
"""
🔗 `ZozoUrlStrategy` — розбір URL товарів ZOZOTOWN без завантаження сторінки.

🔹 Перевіряє, що хост містить доменний токен сайту (`zozo.jp`).
🔹 Будує мобільний варіант URL (`m.` перед хостом, якщо його ще немає).
🔹 Видобуває slug магазину, числовий ID товару та ознаку розпродажу зі шляху.
🔹 Перетворює slug на «людську» назву через таблицю аліасів.
🔹 Читає параметр `size=` з query-рядка.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import re                                             # 🧵 Робота з шаблонами шляху
from dataclasses import dataclass                     # 🧱 Результат розбору
from typing import Any, Dict, Mapping, Optional, Tuple  # 🧰 Анотації типів
from urllib.parse import parse_qs, urlsplit, urlunsplit  # 🌐 Нормалізація URL

__all__ = ["ZozoUrlStrategy", "ParsedProductUrl", "site_label"]


# ================================
# 🧱 ВНУТРІШНІ КОНСТАНТИ
# ================================
_DEFAULT_DOMAIN_TOKEN = "zozo.jp"
_DEFAULT_MOBILE_PREFIX = "m."

_SHOP_RE = re.compile(r"/shop/([^/?#]+)")                # 🏪 /shop/<slug>/

# Порядок фіксований: перший збіг перемагає; прапорець — «шаблон розпродажу».
_ID_PATTERNS: Tuple[Tuple[re.Pattern[str], bool], ...] = (
    (re.compile(r"/goods-sale/(\d+)"), True),
    (re.compile(r"/goods/(\d+)"), False),
    (re.compile(r"goods[^/]*/(\d+)"), False),
)

_DEFAULT_SHOP_ALIASES: Dict[str, str] = {
    "multisize": "MULTISIZE",
    "diavel": "Diavel",
    "bonjoursagan": "Bonjour Sagan",
    "uniqlo": "ユニクロ",
    "gu": "GU",
    "beams": "BEAMS",
    "ships": "SHIPS",
    "urbanresearch": "URBAN RESEARCH",
    "nanamica": "nanamica",
    "tomorrowland": "TOMORROWLAND",
    "studious": "STUDIOUS",
    "nano": "nano・universe",
    "journal": "JOURNAL STANDARD",
    "freak": "FREAK'S STORE",
}  # 🧭 Фолбек, якщо аліаси не задані в конфігу


def _no_config(_key: str, default: Any = None) -> Any:
    return default


# ================================
# 📦 РЕЗУЛЬТАТ РОЗБОРУ
# ================================
@dataclass(frozen=True)
class ParsedProductUrl:
    """Те, що вдалося дізнатися лише зі шляху URL."""

    shop_slug: Optional[str]
    product_id: Optional[str]
    on_sale: bool = False

    @property
    def is_complete(self) -> bool:
        return bool(self.shop_slug and self.product_id)


# ================================
# 🔗 СТРАТЕГІЯ ДЛЯ ZOZOTOWN
# ================================
class ZozoUrlStrategy:
    """Розбір і перетворення URL товарів ZOZOTOWN."""

    def __init__(self, config: Optional[Any] = None) -> None:
        get = config.get if config is not None else _no_config
        self._domain_token: str = (get("site.domain_token") or _DEFAULT_DOMAIN_TOKEN).lower()
        self._mobile_prefix: str = get("site.mobile_prefix") or _DEFAULT_MOBILE_PREFIX

        raw_aliases = get("inference.shop_aliases")                               # 🏷️ Аліаси з конфігу
        aliases: Mapping[str, str] = raw_aliases if isinstance(raw_aliases, dict) else _DEFAULT_SHOP_ALIASES
        self._aliases: Dict[str, str] = {str(k).lower(): str(v) for k, v in aliases.items()}

    # ================================
    # 🌍 ДОМЕН
    # ================================
    def supports(self, url: str) -> bool:
        """True, якщо хост URL містить доменний токен сайту."""
        host = self._host(url)
        return bool(host) and self._domain_token in host

    def to_mobile_url(self, url: str) -> str:
        """
        Переписує хост на мобільний сабдомен (`zozo.jp` → `m.zozo.jp`).

        `www.` прибирається; якщо мобільний префікс уже є, URL не змінюється.
        """
        parts = urlsplit(url)
        host = (parts.hostname or "").lower()
        if not host or host.startswith(self._mobile_prefix):
            return url
        if host.startswith("www."):
            host = host[4:]
        netloc = f"{self._mobile_prefix}{host}"
        if parts.port:
            netloc = f"{netloc}:{parts.port}"
        return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))

    # ================================
    # 🧩 ШЛЯХ ТА QUERY
    # ================================
    def parse(self, url: str) -> ParsedProductUrl:
        """Видобуває slug магазину, ID товару і ознаку розпродажу."""
        product_id, on_sale = self.extract_product_id(url)
        return ParsedProductUrl(
            shop_slug=self.extract_shop_slug(url),
            product_id=product_id,
            on_sale=on_sale,
        )

    @staticmethod
    def extract_shop_slug(url: str) -> Optional[str]:
        match = _SHOP_RE.search(url or "")
        return match.group(1) if match else None

    @staticmethod
    def extract_product_id(url: str) -> Tuple[Optional[str], bool]:
        """Повертає (ID, on_sale) за першим шаблоном, що спрацював."""
        for pattern, implies_sale in _ID_PATTERNS:
            match = pattern.search(url or "")
            if match:
                return match.group(1), implies_sale
        return None, False

    @staticmethod
    def extract_size(url: str) -> Optional[str]:
        """Значення параметра `size` з query-рядка або None."""
        query = urlsplit(url or "").query
        values = parse_qs(query, keep_blank_values=False).get("size")
        return values[0] if values else None

    def shop_display_name(self, slug: str) -> str:
        """Назва магазину з таблиці аліасів або slug у верхньому регістрі."""
        return self._aliases.get(slug.lower(), slug.upper())

    # ================================
    # 🔧 ДОПОМІЖНІ МЕТОДИ
    # ================================
    @staticmethod
    def _host(url: str) -> str:
        try:
            return (urlsplit(url or "").hostname or "").lower()
        except ValueError:                                                      # ⚠️ Биті IPv6-літерали тощо
            return ""


# ================================
# 🏷️ ПІДПИС САЙТУ ДЛЯ UI
# ================================
_SITE_LABELS: Tuple[Tuple[str, str], ...] = (
    ("zozo", "ZOZOTOWN"),
    ("amazon", "Amazon"),
    ("rakuten", "楽天"),
)


def site_label(url: str) -> str:
    """Людська назва магазину за хостом: ZOZOTOWN / Amazon / 楽天 / ХОСТ / BRAND."""
    try:
        host = urlsplit(url or "").hostname or ""
    except ValueError:
        host = ""
    if not host:
        return "BRAND"
    lowered = host.lower()
    for token, label in _SITE_LABELS:
        if token in lowered:
            return label
    return host.upper()
