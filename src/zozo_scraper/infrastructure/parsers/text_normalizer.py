# 🧼 zozo_scraper/infrastructure/parsers/text_normalizer.py
"""
🧼 Очищення фрагментів HTML, витягнутих регулярними виразами.

🔹 Прибирає теги `<...>`.
🔹 Декодує лише п'ять сутностей: `&amp;`, `&lt;`, `&gt;`, `&quot;`, `&#39;` (саме в цьому порядку).
🔹 Обрізає пробіли та переноси рядків з обох боків.
"""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"<[^>]+>")

# Порядок важливий: `&amp;` першим, тож `&amp;lt;` стає `<`.
_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def clean_html_text(fragment: str) -> str:
    """Повертає текст фрагмента без тегів і з декодованими сутностями."""
    if not fragment:
        return ""
    text = _TAG_RE.sub("", fragment)
    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    return text.strip()


__all__ = ["clean_html_text"]
