"""Нормализация, проверка, конвертация и форматирование ISBN."""

from .utils import (
    normalize,
    isbn10_checkdigit,
    isbn13_checkdigit,
    checkdigit_correct,
    is_valid,
    isbn10_to_13,
    isbn13_to_10,
    to_isbn13,
)
from .resolver import (
    RegistrationResolver,
    ResolvedISBN,
    fetch_prefix,
    fetch_checkdigit,
    fetch_registrant_element,
    fetch_publication_element,
    publisher_zone,
    resolve,
)
from .formatter import hyphenate, correct_hyphens
from .processor import ISBNProcessor
