# 🖼️ zozo_scraper/infrastructure/images/__init__.py
"""🖼️ Пошук валідного зображення товару за ID."""

from .image_validator import ImageUrlValidator

__all__ = ["ImageUrlValidator"]
