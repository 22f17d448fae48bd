# 📊 zozo_scraper/shared/metrics/__init__.py
"""
📊 Пакет метрик Prometheus рушія.

🔹 Охоплює стратегії отримання та HEAD-перевірки зображень.
🔹 Експортер `/metrics` не стартує — це справа застосунку.
"""

from __future__ import annotations

from .parsing import IMAGE_PROBES, STRATEGY_HIT, STRATEGY_MISS, inc_hit, inc_miss, inc_probe

__all__ = [
    "STRATEGY_HIT",
    "STRATEGY_MISS",
    "IMAGE_PROBES",
    "inc_hit",
    "inc_miss",
    "inc_probe",
]
