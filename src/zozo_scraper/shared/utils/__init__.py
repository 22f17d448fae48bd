# 🧰 zozo_scraper/shared/utils/__init__.py
"""🧰 Спільні утиліти: логування."""

from .logger import LOG_NAME, JsonFormatter, get_logger, init_logging, init_logging_from_config

__all__ = [
    "LOG_NAME",
    "JsonFormatter",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
]
