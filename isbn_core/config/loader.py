"""
Загрузчик конфигурации и справочника диапазонов ISBN.

Обеспечивает загрузку настроек и диапазонов регистрационных групп
из JSON-файлов.
"""

import json
from functools import lru_cache
from typing import Optional
from pathlib import Path
import logging

from .base import ISBNSettings, RangeDataset

logger = logging.getLogger(__name__)

DEFAULT_RANGES_PATH = Path(__file__).parent / "data" / "ranges.json"


class ConfigLoader:
    """Загрузчик и валидатор конфигурации."""

    def __init__(self, config_dir: str = "config"):
        """
        Инициализация загрузчика конфигурации.

        Args:
            config_dir: Директория с конфигурационными файлами
        """
        self.config_dir = Path(config_dir)

        # Кэшированные конфигурации
        self._settings: Optional[ISBNSettings] = None
        self._ranges: Optional[RangeDataset] = None

    def load_settings(self, config_path: Optional[str] = None) -> ISBNSettings:
        """
        Загрузить настройки обработки ISBN.

        Args:
            config_path: Путь к JSON-файлу настроек.
                        Если None, используется config/isbn_config.json

        Returns:
            ISBNSettings: Загруженные настройки
        """
        if config_path is None:
            config_path = self.config_dir / "isbn_config.json"
        else:
            config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Файл настроек не найден: {config_path}")
            logger.info("Использую настройки по умолчанию")
            self._settings = ISBNSettings()
            return self._settings

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = json.load(f)

            self._settings = ISBNSettings(**config_data)
            logger.info(f"Настройки загружены из {config_path}")
            return self._settings

        except json.JSONDecodeError as e:
            logger.error(f"Ошибка парсинга JSON в {config_path}: {e}")
            raise
        except Exception as e:
            logger.error(f"Ошибка загрузки настроек из {config_path}: {e}")
            raise

    def load_ranges(self, ranges_path: Optional[str] = None) -> RangeDataset:
        """
        Загрузить справочник диапазонов регистрационных групп.

        Args:
            ranges_path: Путь к ranges.json. Если None, используется
                        путь из настроек или встроенный справочник

        Returns:
            RangeDataset: Справочник диапазонов
        """
        if ranges_path is None and self._settings is not None:
            ranges_path = self._settings.ranges_path

        if ranges_path is None:
            self._ranges = get_default_ranges()
            return self._ranges

        self._ranges = load_ranges_file(Path(ranges_path))
        return self._ranges

    def save_settings(self, settings: ISBNSettings, config_path: Optional[str] = None):
        """Сохранить настройки в JSON-файл."""
        if config_path is None:
            config_path = self.config_dir / "isbn_config.json"
        else:
            config_path = Path(config_path)

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(settings.model_dump(), f, indent=2, ensure_ascii=False)

        logger.info(f"Настройки сохранены в {config_path}")

    @property
    def settings(self) -> ISBNSettings:
        """Текущие настройки (загружаются при первом обращении)."""
        if self._settings is None:
            self.load_settings()
        return self._settings

    @property
    def ranges(self) -> RangeDataset:
        """Текущий справочник (загружается при первом обращении)."""
        if self._ranges is None:
            self.load_ranges()
        return self._ranges


def load_ranges_file(path: Path) -> RangeDataset:
    """
    Прочитать и провалидировать файл диапазонов.

    Args:
        path: Путь к JSON-файлу справочника

    Returns:
        RangeDataset: Справочник диапазонов
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        dataset = RangeDataset(**data)
        logger.info(f"Справочник диапазонов загружен из {path}")
        logger.debug(f"Регистрационных групп: {len(dataset)}")
        return dataset

    except json.JSONDecodeError as e:
        logger.error(f"Ошибка парсинга JSON в {path}: {e}")
        raise
    except Exception as e:
        logger.error(f"Ошибка загрузки справочника из {path}: {e}")
        raise


@lru_cache(maxsize=1)
def get_default_ranges() -> RangeDataset:
    """Встроенный справочник диапазонов (загружается один раз на процесс)."""
    return load_ranges_file(DEFAULT_RANGES_PATH)
