# 🧩 zozo_scraper/infrastructure/parsers/extractors/__init__.py
"""🧩 Каскади полів: назва, ціна, зображення, бренд."""

from .base import CascadeStep, PatternCascade, first_match
from .brand import BrandExtractor
from .images import ImageExtractor, normalize_image_url
from .name import NameExtractor
from .price import PriceExtractor, format_price

__all__ = [
    "CascadeStep",
    "PatternCascade",
    "first_match",
    "NameExtractor",
    "PriceExtractor",
    "ImageExtractor",
    "BrandExtractor",
    "format_price",
    "normalize_image_url",
]
