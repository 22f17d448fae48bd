# 🚨 zozo_scraper/errors/__init__.py
"""🚨 Винятки рушія, їх конвертація та поглинаючий декоратор."""

from .custom_errors import (
    BlockedPageError,
    ErrorCode,
    InputRejectedError,
    NetworkRequestError,
    ScraperError,
)
from .error_handler import absorb_errors
from .strategies import DecodingErrorStrategy, HttpxErrorStrategy, to_scraper_error

__all__ = [
    "ErrorCode",
    "ScraperError",
    "InputRejectedError",
    "NetworkRequestError",
    "BlockedPageError",
    "HttpxErrorStrategy",
    "DecodingErrorStrategy",
    "to_scraper_error",
    "absorb_errors",
]
