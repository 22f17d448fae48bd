"""
🧪 test_product_info.py — unit-тести для сутності ProductInfo

Перевіряє:
- Нормалізацію порожніх рядків у None
- Рівність за значенням та іммʼютабельність
- Фабрику empty() і to_dict()
"""

import dataclasses

import pytest

from zozo_scraper.domain.products import ProductInfo


def test_blank_strings_become_absent():
    info = ProductInfo(original_url="https://zozo.jp/x", name="", price="   ", brand="BEAMS")
    # пустые и пробельные строки → None, остальное как есть
    assert info.name is None
    assert info.price is None
    assert info.brand == "BEAMS"
    assert info.has_name is False


def test_empty_factory_keeps_url_only():
    info = ProductInfo.empty("not a url at all")
    assert info.original_url == "not a url at all"
    assert info.is_empty
    assert info == ProductInfo(original_url="not a url at all")


def test_value_equality_and_frozen():
    a = ProductInfo(original_url="u", name="Tee", price="¥1,000")
    b = ProductInfo(original_url="u", name="Tee", price="¥1,000")
    assert a == b
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.name = "Other"  # type: ignore[misc]


def test_to_dict_contains_all_fields():
    data = ProductInfo(original_url="u", name="Tee").to_dict()
    assert data["original_url"] == "u"
    assert data["name"] == "Tee"
    assert set(data) >= {"price", "image_url", "brand", "size", "description", "color", "sale_price", "original_price"}
    assert data["color"] is None


def test_original_url_must_be_str():
    with pytest.raises(TypeError):
        ProductInfo(original_url=None)  # type: ignore[arg-type]
