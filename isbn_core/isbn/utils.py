"""
Утилиты для работы с ISBN: нормализация, контрольные цифры, конвертация.

Все функции чистые: не обращаются к справочнику диапазонов и не имеют
побочных эффектов.
"""

import re
from typing import Optional

from isbn_core.errors import InvalidISBNError, InvalidISBNReason

# Допустимые длины: ISBN-10, ISBN-13 и ISBN-13 с четырьмя дефисами
VALID_LENGTHS = (10, 13, 17)

ISBN13_PREFIX = "978"

_NOISE = re.compile(r"[^0-9X]")


def normalize(isbn: Optional[str], accept_lowercase_x: bool = False) -> str:
    """
    Нормализация ISBN: удаление всех символов, кроме цифр и 'X'.

    Строчная 'x' по умолчанию отбрасывается как любой другой символ.

    Args:
        isbn: ISBN строка (может содержать дефисы, пробелы)
        accept_lowercase_x: Приводить строчную 'x' к 'X'

    Returns:
        Очищенная ISBN строка (может быть пустой)

    Пример:
        >>> normalize("978-0-306-40615-7")
        "9780306406157"
        >>> normalize("0-8044-2957-x", accept_lowercase_x=True)
        "080442957X"
    """
    if not isbn:
        return ""

    isbn = str(isbn)
    if accept_lowercase_x:
        isbn = isbn.replace("x", "X")

    return _NOISE.sub("", isbn)


def isbn10_checkdigit(isbn: str) -> str:
    """
    Контрольная цифра ISBN-10 (модуль 11, веса 10..2).

    Допускается нормализованная длина 8-10, поэтому функция подходит
    для 9-значного тела без контрольной цифры.

    Args:
        isbn: ISBN-10 с контрольной цифрой или без нее

    Returns:
        Контрольный символ: цифра или 'X'

    Raises:
        InvalidISBNError: Недопустимая длина или символы

    Пример:
        >>> isbn10_checkdigit("85-359-0277")
        "5"
        >>> isbn10_checkdigit("887385107")
        "X"
    """
    normalized = normalize(isbn)
    if not 8 <= len(normalized) <= 10:
        raise InvalidISBNError(isbn, InvalidISBNReason.LENGTH)

    body = normalized[:9]
    if not body.isdigit():
        raise InvalidISBNError(isbn, InvalidISBNReason.CHARACTERS)

    total = 0
    for i, char in enumerate(body):
        total += int(char) * (10 - i)

    digit = (11 - total % 11) % 11
    return "X" if digit == 10 else str(digit)


def isbn13_checkdigit(isbn: str) -> str:
    """
    Контрольная цифра ISBN-13 (модуль 10, веса 1 и 3).

    Args:
        isbn: ISBN-13 с контрольной цифрой или без нее (длина 11-13)

    Returns:
        Контрольная цифра

    Raises:
        InvalidISBNError: Недопустимая длина или символы

    Пример:
        >>> isbn13_checkdigit("978-5-12345-678")
        "1"
    """
    normalized = normalize(isbn)
    if not 11 <= len(normalized) <= 13:
        raise InvalidISBNError(isbn, InvalidISBNReason.LENGTH)

    body = normalized[:12]
    if not body.isdigit():
        raise InvalidISBNError(isbn, InvalidISBNReason.CHARACTERS)

    total = 0
    for i, char in enumerate(body):
        total += int(char) * (1 if i % 2 == 0 else 3)

    return str((10 - total % 10) % 10)


def checkdigit_correct(isbn: str) -> bool:
    """
    Проверка контрольной цифры ISBN-10 или ISBN-13.

    Нормализованная длина, отличная от 10 и 13, дает False.

    Пример:
        >>> checkdigit_correct("85-359-0277-5")
        True
        >>> checkdigit_correct("978-5-12345-678")
        False
    """
    normalized = normalize(isbn)

    try:
        if len(normalized) == 10:
            digit = isbn10_checkdigit(normalized)
        elif len(normalized) == 13:
            digit = isbn13_checkdigit(normalized)
        else:
            return False
    except InvalidISBNError:
        return False

    return digit == normalized[-1]


def is_valid(isbn: str) -> bool:
    """
    Проверка валидности ISBN: длина исходной строки, длина
    нормализованной строки и контрольная цифра.

    Args:
        isbn: ISBN строка (может содержать дефисы)

    Returns:
        True если ISBN валиден, иначе False

    Пример:
        >>> is_valid("978-5-12345-678-1")
        True
        >>> is_valid("85-359-0277")
        False
    """
    if not isinstance(isbn, str):
        return False

    return all(
        [
            len(isbn) in VALID_LENGTHS,
            len(normalize(isbn)) in VALID_LENGTHS,
            checkdigit_correct(isbn),
        ]
    )


def _invalid(isbn: str, normalized: str, expected_length: int) -> InvalidISBNError:
    if len(normalized) != expected_length:
        return InvalidISBNError(isbn, InvalidISBNReason.LENGTH)
    return InvalidISBNError(isbn, InvalidISBNReason.CHECKDIGIT)


def isbn10_to_13(isbn: str) -> str:
    """
    Конвертация ISBN-10 в ISBN-13 с префиксом 978.

    Args:
        isbn: Валидный ISBN-10 (может содержать дефисы)

    Returns:
        ISBN-13 без дефисов

    Raises:
        InvalidISBNError: Вход не является валидным ISBN-10

    Пример:
        >>> isbn10_to_13("85-359-0277-5")
        "9788535902778"
    """
    normalized = normalize(isbn)
    if len(normalized) != 10 or not is_valid(normalized):
        raise _invalid(isbn, normalized, 10)

    core = ISBN13_PREFIX + normalized[:9]
    return core + isbn13_checkdigit(core)


def isbn13_to_10(isbn: str) -> str:
    """
    Конвертация ISBN-13 в ISBN-10 (только для префикса 978).

    Args:
        isbn: Валидный ISBN-13 с префиксом 978

    Returns:
        ISBN-10 без дефисов

    Raises:
        InvalidISBNError: Вход невалиден или имеет префикс 979,
            для которого нет эквивалента ISBN-10

    Пример:
        >>> isbn13_to_10("9780306406157")
        "0306406152"
    """
    normalized = normalize(isbn)
    if len(normalized) != 13 or not is_valid(normalized):
        raise _invalid(isbn, normalized, 13)

    if not normalized.startswith(ISBN13_PREFIX):
        raise InvalidISBNError(
            isbn,
            InvalidISBNReason.NOT_CONVERTIBLE,
            f"ISBN {isbn!r} не имеет эквивалента ISBN-10 (префикс {normalized[:3]})",
        )

    core = normalized[3:12]
    return core + isbn10_checkdigit(core)


def to_isbn13(isbn: str) -> str:
    """
    Каноническая 13-значная форма валидного ISBN-10 или ISBN-13.

    Raises:
        InvalidISBNError: Вход не является валидным ISBN
    """
    normalized = normalize(isbn)
    if len(normalized) == 10:
        return isbn10_to_13(normalized)
    if len(normalized) != 13 or not is_valid(normalized):
        raise _invalid(isbn, normalized, 13)
    return normalized
