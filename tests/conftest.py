# tests/conftest.py
import sys
from pathlib import Path

import httpx
import pytest

# Добавляем src в sys.path, чтобы работал импорт "zozo_scraper.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def product_page(body: str) -> str:
    """Дополняет HTML до размера «настоящей» страницы (> 1000 символов)."""
    padding = "<!-- " + ("x" * 1200) + " -->"
    return f"<html><head>{body}</head><body>{padding}</body></html>"


@pytest.fixture()
def make_page():
    return product_page


@pytest.fixture()
def mock_transport():
    """
    Фабрика MockTransport, который запоминает все запросы.

    mock_transport(handler) → (transport, seen), где seen — список httpx.Request.
    """

    def _factory(handler):
        seen: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        return httpx.MockTransport(_record), seen

    return _factory
