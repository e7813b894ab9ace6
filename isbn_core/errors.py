"""
Исключения пакета isbn_core.

Все ошибки разбора ISBN сводятся к одному типу InvalidISBNError;
причина (reason) носит справочный характер.
"""

from enum import Enum
from typing import Optional


class InvalidISBNReason(str, Enum):
    """Причины, по которым ISBN признан невалидным."""

    LENGTH = "length"  # Недопустимая длина
    CHARACTERS = "characters"  # Недопустимые символы
    CHECKDIGIT = "checkdigit"  # Контрольная цифра не совпала
    PREFIX = "prefix"  # Регистрационная группа не найдена
    REGISTRANT = "registrant"  # Диапазон издателя не найден
    NOT_CONVERTIBLE = "not_convertible"  # Нет эквивалента ISBN-10 (979)


class InvalidISBNError(ValueError):
    """Невалидный или неразрешимый ISBN."""

    def __init__(
        self,
        isbn: Optional[str],
        reason: InvalidISBNReason = InvalidISBNReason.CHECKDIGIT,
        message: Optional[str] = None,
    ):
        self.isbn = isbn
        self.reason = reason
        if message is None:
            message = f"Невалидный ISBN: {isbn!r} ({reason.value})"
        super().__init__(message)
