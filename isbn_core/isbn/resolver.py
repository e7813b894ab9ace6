"""
Разрешение регистрационной группы и элемента издателя ISBN.

По 13-значной форме ISBN находит префикс регистрационной группы
(последовательное наращивание кандидата до первого совпадения в
справочнике), затем делит оставшееся тело на элемент издателя и
элемент издания по диапазонам найденной группы.
"""

from dataclasses import dataclass, asdict
from functools import lru_cache
from typing import Dict, Optional, Tuple
import logging

from isbn_core.config.base import RangeDataset, RegistrationGroup
from isbn_core.config.loader import get_default_ranges
from isbn_core.errors import InvalidISBNError, InvalidISBNReason
from .utils import normalize, to_isbn13

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedISBN:
    """Разобранный ISBN-13."""

    prefix: str
    registrant: str
    publication: str
    checkdigit: str
    zone: str

    @property
    def isbn13(self) -> str:
        """ISBN-13 без дефисов."""
        return (
            self.prefix.replace("-", "")
            + self.registrant
            + self.publication
            + self.checkdigit
        )

    @property
    def hyphenated(self) -> str:
        """ISBN-13 с дефисами."""
        return "-".join(
            [self.prefix, self.registrant, self.publication, self.checkdigit]
        )

    def to_dict(self) -> Dict[str, str]:
        """Преобразует результат в словарь."""
        data = asdict(self)
        data["isbn13"] = self.isbn13
        data["hyphenated"] = self.hyphenated
        return data


class RegistrationResolver:
    """Разрешение элементов ISBN по справочнику диапазонов."""

    def __init__(self, ranges: Optional[RangeDataset] = None):
        """
        Args:
            ranges: Справочник диапазонов. Если None, используется встроенный
        """
        self.ranges = ranges if ranges is not None else get_default_ranges()

    def _match_prefix(self, isbn: str, isbn13: str) -> str:
        gs1, body = isbn13[:3], isbn13[3:12]

        for k in range(len(body) + 1):
            candidate = f"{gs1}-{body[:k]}"
            if candidate in self.ranges:
                logger.debug(f"Префикс {candidate} для {isbn13}")
                return candidate

        logger.debug(f"Регистрационная группа не найдена: {isbn13}")
        raise InvalidISBNError(isbn, InvalidISBNReason.PREFIX)

    def _split(
        self, isbn: str, isbn13: str
    ) -> Tuple[str, RegistrationGroup, str, str]:
        prefix = self._match_prefix(isbn, isbn13)
        group = self.ranges.get(prefix)

        # Тело: цифры после префикса и до контрольной цифры
        body = isbn13[len(prefix) - 1 : 12]

        registrant_range = group.find_range(body)
        if registrant_range is not None:
            width = registrant_range.width
            return prefix, group, body[:width], body[width:]

        logger.debug(f"Диапазон издателя не найден: {isbn13} ({prefix})")
        raise InvalidISBNError(isbn, InvalidISBNReason.REGISTRANT)

    def fetch_prefix(self, isbn: str) -> str:
        """
        Префикс регистрационной группы.

        Args:
            isbn: Валидный ISBN-10 или ISBN-13

        Returns:
            Префикс вида '978-85'

        Raises:
            InvalidISBNError: ISBN невалиден или группа не найдена
        """
        return self._match_prefix(isbn, to_isbn13(isbn))

    def fetch_registrant_element(self, isbn: str) -> str:
        """Элемент издателя (например, '359' для 978-85-359-0277-8)."""
        _, _, registrant, _ = self._split(isbn, to_isbn13(isbn))
        return registrant

    def fetch_publication_element(self, isbn: str) -> str:
        """Элемент издания: тело без элемента издателя."""
        _, _, _, publication = self._split(isbn, to_isbn13(isbn))
        return publication

    def fetch_checkdigit(self, isbn: str) -> str:
        """Контрольный символ валидного ISBN (для ISBN-10 - его собственный)."""
        to_isbn13(isbn)
        return normalize(isbn)[-1]

    def publisher_zone(self, isbn: str) -> str:
        """Название регистрационной группы (страна или языковая зона)."""
        prefix = self.fetch_prefix(isbn)
        return self.ranges.get(prefix).name

    def resolve(self, isbn: str) -> ResolvedISBN:
        """
        Полный разбор ISBN.

        Args:
            isbn: Валидный ISBN-10 или ISBN-13

        Returns:
            ResolvedISBN для 13-значной формы

        Raises:
            InvalidISBNError: ISBN невалиден или не разрешается по справочнику
        """
        isbn13 = to_isbn13(isbn)
        prefix, group, registrant, publication = self._split(isbn, isbn13)
        return ResolvedISBN(
            prefix=prefix,
            registrant=registrant,
            publication=publication,
            checkdigit=isbn13[-1],
            zone=group.name,
        )


@lru_cache(maxsize=1)
def get_resolver() -> RegistrationResolver:
    """Резолвер со встроенным справочником."""
    return RegistrationResolver()


def fetch_prefix(isbn: str) -> str:
    return get_resolver().fetch_prefix(isbn)


def fetch_registrant_element(isbn: str) -> str:
    return get_resolver().fetch_registrant_element(isbn)


def fetch_publication_element(isbn: str) -> str:
    return get_resolver().fetch_publication_element(isbn)


def fetch_checkdigit(isbn: str) -> str:
    return get_resolver().fetch_checkdigit(isbn)


def publisher_zone(isbn: str) -> str:
    return get_resolver().publisher_zone(isbn)


def resolve(isbn: str) -> ResolvedISBN:
    return get_resolver().resolve(isbn)
