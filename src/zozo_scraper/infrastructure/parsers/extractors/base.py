# 🧾 zozo_scraper/infrastructure/parsers/extractors/base.py
"""
🧾 Спільні абстракції каскадів регулярних виразів.

🔹 `CascadeStep` — пара (скомпільований шаблон, індекс групи).
🔹 `PatternCascade` — іммʼютабельна впорядкована послідовність кроків.
🔹 `first_match()` — перша група першого збігу шаблону, як у класичному `re.search`.
🔹 Каскад — чиста функція від рядка HTML: жодного стану між викликами.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging	# 🧾 Логування подій
import re	# 🧵 Робота з регулярними виразами
from dataclasses import dataclass	# 🧱 Створення датакласів
from typing import Callable, Iterator, Optional, Sequence, Tuple, Union	# 🧰 Типи

# 🧩 Внутрішні модулі проєкту
from zozo_scraper.shared.utils.logger import LOG_NAME	# 🏷️ Базова назва логера

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parser.extractor")	# 🧾 Логер для екстракторів

# ================================
# 📦 КОНСТАНТИ МОДУЛЯ
# ================================
DEFAULT_FLAGS = re.IGNORECASE	# 🔠 Усі шаблони нечутливі до регістру

PatternSpec = Union[str, Tuple[str, int]]	# 🧩 "шаблон" або ("шаблон", група)


# ================================
# 🧱 СТРУКТУРИ КАСКАДУ
# ================================
@dataclass(frozen=True)
class CascadeStep:
    """Один крок каскаду: шаблон і номер групи захоплення."""
    pattern: re.Pattern[str]
    group: int = 1

    def capture(self, html: str) -> Optional[str]:
        """Повертає групу першого збігу або None."""
        match = self.pattern.search(html)	# 🔍 Лише перший збіг
        if match is None:
            return None
        try:
            return match.group(self.group)
        except IndexError:	# ⚠️ Шаблон без потрібної групи
            logger.debug("🐛 Шаблон %r не має групи %d", self.pattern.pattern, self.group)
            return None


@dataclass(frozen=True)
class PatternCascade:
    """Впорядкований незмінний список кроків для одного поля."""
    field: str
    steps: Tuple[CascadeStep, ...]

    @classmethod
    def compile(cls, field: str, specs: Sequence[PatternSpec], flags: int = DEFAULT_FLAGS) -> "PatternCascade":
        """Компілює шаблони, зберігаючи порядок."""
        steps = []
        for spec in specs:
            pattern, group = (spec, 1) if isinstance(spec, str) else spec
            steps.append(CascadeStep(re.compile(pattern, flags), group))
        return cls(field=field, steps=tuple(steps))

    def __iter__(self) -> Iterator[CascadeStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def first(self, html: str, accept: Callable[[str], Optional[str]]) -> Optional[str]:
        """
        Перебирає кроки по порядку й повертає перше значення, яке прийняв `accept`.

        Args:
            html: Сирий HTML сторінки.
            accept: Перетворює захоплення на фінальне значення або повертає None (відмова).

        Returns:
            Перше прийняте значення або None, якщо жоден крок не спрацював.
        """
        if not html:
            return None
        for idx, step in enumerate(self.steps, start=1):
            captured = step.capture(html)
            if captured is None:
                continue
            value = accept(captured)
            if value:
                logger.debug("✅ %s: крок #%d спрацював → %r", self.field, idx, value)
                return value
            logger.debug("↩️ %s: крок #%d відхилено (%r)", self.field, idx, captured[:80])
        logger.debug("🕳️ %s: жоден шаблон не спрацював", self.field)
        return None


def first_match(html: str, pattern: str, group: int = 1, flags: int = DEFAULT_FLAGS) -> Optional[str]:
    """Група першого збігу довільного шаблону (хелпер для разових пошуків)."""
    return CascadeStep(re.compile(pattern, flags), group).capture(html or "")


__all__ = ["CascadeStep", "PatternCascade", "PatternSpec", "first_match", "logger"]
