"""
🧪 test_config_service.py — unit-тести для ConfigService

Перевіряє:
- Singleton і завантаження вбудованого scraper.yaml
- Доступ за крапковим ключем і дефолти
- Окремі екземпляри з оверрайдами
"""

from zozo_scraper.config import ConfigService


def test_singleton():
    assert ConfigService() is ConfigService()


def test_builtin_values_loaded():
    cfg = ConfigService()
    assert cfg.get("site.domain_token") == "zozo.jp"
    assert cfg.get("page_fetch.min_body_chars") == 1000
    assert cfg.get("probe.timeout_s") == 3.0
    assert cfg.get("probe.headers")["Referer"] == "https://zozo.jp"
    # ровно два фолбека-иконки
    assert len(cfg.get("images.fallbacks")) == 2
    assert cfg.get("inference.shop_aliases")["uniqlo"] == "ユニクロ"


def test_missing_key_returns_default():
    cfg = ConfigService()
    assert cfg.get("nope.nothing") is None
    assert cfg.get("site.nothing", "fallback") == "fallback"


def test_with_overrides_is_isolated():
    custom = ConfigService.with_overrides(
        {"batch.max_concurrency": 1, "site": {"name": "OTHER"}}
    )
    assert custom is not ConfigService()
    assert custom.get("batch.max_concurrency") == 1
    assert custom.get("site.name") == "OTHER"
    # соседние ключи не потерялись при глубоком слиянии
    assert custom.get("site.domain_token") == "zozo.jp"
    # глобальный конфиг не тронут
    assert ConfigService().get("batch.max_concurrency") == 4
    assert ConfigService().get("site.name") == "ZOZOTOWN"
