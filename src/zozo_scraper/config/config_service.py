# ⚙️ zozo_scraper/config/config_service.py
"""
⚙️ config_service.py — Сервіс для доступу до статичної конфігурації скрапера.

🔹 Клас `ConfigService`:
- Завантажує вбудований `scraper.yaml` (домен, заголовки, шаблони CDN, аліаси магазинів).
- Надає єдиний метод .get() для доступу до будь-якого параметра через крапковий ключ.
- Працює як Singleton; для тестів є `with_overrides()` з окремим екземпляром.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг

# 🔠 Системні імпорти
import copy                                  # 🧬 Глибокі копії оверрайдів
import importlib.resources as pkg_resources  # 📦 Доступ до ресурсів пакету
import logging                               # 🧾 Логування
from typing import Any, Dict, Mapping, Optional  # 🧩 Типізація

# ================================
# 🧾 ЛОГЕР ТА КОНСТАНТИ
# ================================
logger = logging.getLogger("zozo_scraper.config")  # 🧾 Не імпортуємо LOG_NAME, щоб уникнути циклу
_RESOURCE_NAME = "scraper.yaml"                     # 📄 Вбудований файл налаштувань


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних параметрів рушія.
    Працює як Singleton — конфігурація зчитується лише один раз.
    """

    _instance: Optional["ConfigService"] = None   # 🧩 Singleton-екземпляр

    def __new__(cls) -> "ConfigService":
        # ✅ Патерн Singleton: створюємо лише один екземпляр
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs()       # 🔄 Завантаження конфігурації під час першого виклику
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def with_overrides(cls, overrides: Mapping[str, Any]) -> "ConfigService":
        """
        🧪 Створює окремий (не singleton) екземпляр із перекритими значеннями.

        Args:
            overrides: Вкладений словник або словник із крапковими ключами.

        Returns:
            ConfigService: Новий сервіс, що не впливає на глобальний.
        """
        instance = super().__new__(cls)
        instance._config = {}
        instance._load_all_configs()
        flat_keys = {k: v for k, v in overrides.items() if "." in k}
        nested = {k: v for k, v in overrides.items() if "." not in k}
        instance._deep_update(instance._config, copy.deepcopy(nested))
        instance._deep_update(instance._config, instance._unflatten_dict(flat_keys))
        return instance

    def _load_all_configs(self) -> None:
        """📥 Зчитує вбудований YAML у словник конфігурації."""
        try:
            logger.debug("📘 Завантаження %s", _RESOURCE_NAME)
            raw = pkg_resources.files(__package__).joinpath(_RESOURCE_NAME).read_text(encoding="utf-8")
            self._deep_update(self._config, yaml.safe_load(raw) or {})
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити %s: %s", _RESOURCE_NAME, e)

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'probe.timeout_s').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split("."):                  # ⛓️ Розбиваємо ключ за крапкою
            if isinstance(value, dict) and k in value:
                value = value[k]                  # 🔎 Переходимо глибше в структуру
            else:
                return default                    # ❌ Ключ не знайдено — повертаємо дефолт
        return value

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================
    @staticmethod
    def _unflatten_dict(d: Mapping[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'probe.timeout_s' → {'probe': {'timeout_s': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")                   # 🧩 Розбиваємо ключ на частини
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value                 # 🧷 Вставляємо значення у найглибший рівень
        return result

    def _deep_update(self, source: Dict[str, Any], overrides: Mapping[str, Any]) -> None:
        """
        🔁 Рекурсивно обʼєднує два словники (оновлення значень).
        Якщо значення — словник, обʼєднує його глибоко.
        """
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                self._deep_update(source[key], value)  # 🔁 Глибоке обʼєднання
            else:
                source[key] = value                    # 🧩 Перезапис простого значення
