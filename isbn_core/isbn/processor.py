"""
Обработчик ISBN.

Обеспечивает нормализацию, валидацию, конвертацию и форматирование
ISBN номеров с учетом настроек ISBNSettings.
"""

from typing import List, Optional, Dict, Any
import logging

from isbn_core.config.base import ISBNSettings, RangeDataset
from isbn_core.config.loader import ConfigLoader
from isbn_core.errors import InvalidISBNError
from .formatter import correct_hyphens, hyphenate
from .resolver import RegistrationResolver, ResolvedISBN
from .utils import is_valid, isbn13_to_10, normalize, to_isbn13

logger = logging.getLogger(__name__)


class ISBNProcessor:
    """Обработчик ISBN номеров."""

    def __init__(
        self,
        settings: Optional[ISBNSettings] = None,
        ranges: Optional[RangeDataset] = None,
    ):
        """
        Инициализация обработчика ISBN.

        Args:
            settings: Настройки обработки (по умолчанию ISBNSettings())
            ranges: Справочник диапазонов. Если None, загружается
                    по settings.ranges_path или используется встроенный
        """
        self.settings = settings or ISBNSettings()

        if ranges is None:
            ranges = ConfigLoader().load_ranges(self.settings.ranges_path)
        self.resolver = RegistrationResolver(ranges)

    @property
    def strict_validation(self) -> bool:
        return self.settings.strict_validation

    def normalize_isbn(self, isbn: str) -> str:
        """
        Нормализация ISBN номера.

        Args:
            isbn: ISBN номер для нормализации

        Returns:
            str: Нормализованный ISBN (только цифры и 'X')
        """
        return normalize(isbn, accept_lowercase_x=self.settings.accept_lowercase_x)

    def _with_upper_x(self, isbn):
        if isinstance(isbn, str) and self.settings.accept_lowercase_x:
            return isbn.replace("x", "X")
        return isbn

    def validate_isbn(self, isbn: str) -> bool:
        """
        Валидация ISBN номера.

        Длина исходной строки проверяется так же, как в is_valid:
        посторонний текст вокруг номера делает его невалидным.

        Args:
            isbn: ISBN номер для валидации

        Returns:
            bool: True если ISBN валиден
        """
        return is_valid(self._with_upper_x(isbn))

    def correct_hyphens(self, isbn: str) -> bool:
        """Проверка расстановки дефисов по справочнику обработчика."""
        return correct_hyphens(self._with_upper_x(isbn), self.resolver)

    def process_isbn(self, raw_isbn: str) -> Optional[str]:
        """
        Обработка ISBN номера: нормализация и валидация.

        Args:
            raw_isbn: Сырой ISBN номер

        Returns:
            Optional[str]: Нормализованный ISBN или None если невалиден
        """
        normalized = self.normalize_isbn(raw_isbn)

        if self.strict_validation:
            if not is_valid(normalized):
                logger.warning(f"Невалидный ISBN: {raw_isbn} -> {normalized}")
                return None

        return normalized

    def process_isbn_list(self, raw_isbns: List[str]) -> List[str]:
        """
        Обработка списка ISBN номеров.

        Args:
            raw_isbns: Список сырых ISBN номеров

        Returns:
            List[str]: Список нормализованных валидных ISBN
        """
        processed = []

        for raw_isbn in raw_isbns:
            processed_isbn = self.process_isbn(raw_isbn)
            if processed_isbn:
                processed.append(processed_isbn)

        logger.info(f"Обработано ISBN: {len(processed)}/{len(raw_isbns)} валидных")
        return processed

    def to_isbn13(self, isbn: str) -> str:
        """ISBN-13 без дефисов для ISBN-10 или ISBN-13."""
        return to_isbn13(self.normalize_isbn(isbn))

    def to_isbn10(self, isbn: str) -> str:
        """ISBN-10 без дефисов (только для префикса 978)."""
        normalized = self.normalize_isbn(isbn)
        if len(normalized) == 10 and is_valid(normalized):
            return normalized
        return isbn13_to_10(normalized)

    def hyphenate(self, isbn: str) -> str:
        """ISBN с дефисами (форма 10 или 13 сохраняется)."""
        return hyphenate(self.normalize_isbn(isbn), self.resolver)

    def describe(self, isbn: str) -> ResolvedISBN:
        """Полный разбор ISBN по справочнику диапазонов."""
        return self.resolver.resolve(self.normalize_isbn(isbn))

    def batch_process(
        self, items: List[Dict[str, Any]], isbn_field: str = "isbn"
    ) -> List[Dict[str, Any]]:
        """
        Пакетная обработка элементов с ISBN полями.

        Валидные ISBN заменяются нормализованной формой, рядом
        добавляется поле '<isbn_field>_hyphenated'.

        Args:
            items: Список словарей с ISBN полями
            isbn_field: Название поля с ISBN

        Returns:
            List[Dict[str, Any]]: Обработанные элементы
        """
        processed_items = []

        for item in items:
            if isbn_field not in item:
                # Элемент без ISBN поля - добавляем как есть
                processed_items.append(item)
                continue

            raw_isbn = item[isbn_field]
            processed_isbn = self.process_isbn(raw_isbn)
            if not processed_isbn:
                logger.debug(f"Пропущен невалидный ISBN: {raw_isbn}")
                continue

            item[isbn_field] = processed_isbn
            try:
                item[f"{isbn_field}_hyphenated"] = hyphenate(
                    processed_isbn, self.resolver
                )
            except InvalidISBNError as e:
                logger.debug(f"Не удалось расставить дефисы для {raw_isbn}: {e}")
                item[f"{isbn_field}_hyphenated"] = None
            processed_items.append(item)

        return processed_items
