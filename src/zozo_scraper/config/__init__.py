# ⚙️ zozo_scraper/config/__init__.py
"""⚙️ Конфігурація рушія: `ConfigService` поверх вбудованого `scraper.yaml`."""

from .config_service import ConfigService

__all__ = ["ConfigService"]
