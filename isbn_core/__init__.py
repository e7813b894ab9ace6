"""
ISBN Core - вычисление, проверка, конвертация и форматирование ISBN.

Основные компоненты:
- isbn.utils: Нормализация, контрольные цифры, конвертация ISBN-10 <-> ISBN-13
- isbn.resolver: Разрешение регистрационной группы и элемента издателя
- isbn.formatter: Расстановка дефисов
- isbn.processor: Обработчик ISBN с учетом настроек
- config: Настройки и справочник диапазонов (ISBNSettings, RangeDataset)

Версия: 1.0.0
"""

__version__ = "1.0.0"

from .errors import InvalidISBNError, InvalidISBNReason

from .config.base import ISBNSettings, RangeDataset, RegistrationGroup, RegistrantRange
from .config.loader import ConfigLoader, get_default_ranges

from .isbn.utils import (
    normalize,
    isbn10_checkdigit,
    isbn13_checkdigit,
    checkdigit_correct,
    is_valid,
    isbn10_to_13,
    isbn13_to_10,
)
from .isbn.resolver import (
    RegistrationResolver,
    ResolvedISBN,
    fetch_prefix,
    fetch_checkdigit,
    fetch_registrant_element,
    fetch_publication_element,
    publisher_zone,
    resolve,
)
from .isbn.formatter import hyphenate, correct_hyphens
from .isbn.processor import ISBNProcessor

__all__ = [
    # Ошибки
    "InvalidISBNError",
    "InvalidISBNReason",
    # Конфигурация
    "ISBNSettings",
    "RangeDataset",
    "RegistrationGroup",
    "RegistrantRange",
    "ConfigLoader",
    "get_default_ranges",
    # ISBN
    "normalize",
    "isbn10_checkdigit",
    "isbn13_checkdigit",
    "checkdigit_correct",
    "is_valid",
    "isbn10_to_13",
    "isbn13_to_10",
    "RegistrationResolver",
    "ResolvedISBN",
    "fetch_prefix",
    "fetch_checkdigit",
    "fetch_registrant_element",
    "fetch_publication_element",
    "publisher_zone",
    "resolve",
    "hyphenate",
    "correct_hyphens",
    "ISBNProcessor",
]
