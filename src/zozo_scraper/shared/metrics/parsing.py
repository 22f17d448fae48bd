# 📊 zozo_scraper/shared/metrics/parsing.py
"""
📊 Лічильники Prometheus для стратегій і перевірки зображень.

🔹 `STRATEGY_HIT` / `STRATEGY_MISS` — результат кожної стратегії.
🔹 `IMAGE_PROBES` — підсумки HEAD-перевірок кандидатів.
🔹 Збої метрик ніколи не ламають виклик.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter									# 📈 Лічильники

# 🔠 Системні імпорти
import logging															# 🧾 Логування збоїв метрик

logger = logging.getLogger("zozo_scraper.metrics")


# ================================
# 📈 ЛІЧИЛЬНИКИ
# ================================
STRATEGY_HIT = Counter(
    "zozo_strategy_hit_total",
    "Стратегії, що повернули назву товару",
    ["strategy"],
)
STRATEGY_MISS = Counter(
    "zozo_strategy_miss_total",
    "Стратегії без назви товару за причинами",
    ["strategy", "reason"],
)
IMAGE_PROBES = Counter(
    "zozo_image_probes_total",
    "HEAD-перевірки кандидатів зображень",
    ["outcome"],
)


def inc_hit(strategy: str) -> None:
    """🔢 Фіксуємо успішну стратегію."""
    try:
        STRATEGY_HIT.labels(strategy=strategy).inc()
    except Exception as exc:											# noqa: BLE001
        logger.debug("🤫 Метрика STRATEGY_HIT недоступна: %s", exc)


def inc_miss(strategy: str, reason: str) -> None:
    """🔢 Фіксуємо промах стратегії."""
    try:
        STRATEGY_MISS.labels(strategy=strategy, reason=reason).inc()
    except Exception as exc:											# noqa: BLE001
        logger.debug("🤫 Метрика STRATEGY_MISS недоступна: %s", exc)


def inc_probe(outcome: str) -> None:
    """🔢 Фіксуємо результат HEAD-перевірки."""
    try:
        IMAGE_PROBES.labels(outcome=outcome).inc()
    except Exception as exc:											# noqa: BLE001
        logger.debug("🤫 Метрика IMAGE_PROBES недоступна: %s", exc)
