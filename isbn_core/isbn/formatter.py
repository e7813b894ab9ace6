"""
Форматирование ISBN с дефисами по справочнику диапазонов.
"""

from typing import Optional
import logging

from isbn_core.errors import InvalidISBNError
from .resolver import RegistrationResolver, get_resolver
from .utils import ISBN13_PREFIX, is_valid, normalize

logger = logging.getLogger(__name__)


def hyphenate(isbn: str, resolver: Optional[RegistrationResolver] = None) -> str:
    """
    Форматирование ISBN с дефисами в стандартном формате.

    ISBN-10 разбирается через 13-значную форму; в результат попадает
    только регистрационная группа без '978' и собственная контрольная
    цифра ISBN-10.

    Args:
        isbn: Валидный ISBN-10 или ISBN-13
        resolver: Резолвер (по умолчанию со встроенным справочником)

    Returns:
        Отформатированный ISBN

    Raises:
        InvalidISBNError: ISBN невалиден или не разрешается по справочнику

    Пример:
        >>> hyphenate("9788535902778")
        "978-85-359-0277-8"
        >>> hyphenate("0306406152")
        "0-306-40615-2"
    """
    resolver = resolver or get_resolver()
    resolved = resolver.resolve(isbn)

    normalized = normalize(isbn)
    if len(normalized) == 13:
        return resolved.hyphenated

    group = resolved.prefix[len(ISBN13_PREFIX) + 1 :]
    return "-".join([group, resolved.registrant, resolved.publication, normalized[-1]])


def correct_hyphens(isbn: str, resolver: Optional[RegistrationResolver] = None) -> bool:
    """
    Проверка, что ISBN уже записан с правильными дефисами.

    Пример:
        >>> correct_hyphens("978-85-359-0277-8")
        True
        >>> correct_hyphens("97-8853590277-8")
        False
    """
    if not is_valid(isbn):
        return False

    try:
        return hyphenate(isbn, resolver) == isbn
    except InvalidISBNError as e:
        logger.debug(f"Не удалось расставить дефисы: {e}")
        return False
