"""
Командная строка для проверки, конвертации и форматирования ISBN.

Примеры:
    python -m isbn_core validate 978-85-359-0277-8 0306406152
    python -m isbn_core hyphenate 9788535902778
    python -m isbn_core convert 0306406152
    python -m isbn_core info 978-1-86197-876-9
"""

import argparse
import logging
import sys
from typing import List, Optional

from tabulate import tabulate

from .config.base import ISBNSettings
from .config.loader import ConfigLoader
from .errors import InvalidISBNError
from .isbn.processor import ISBNProcessor

logger = logging.getLogger("isbn_core")


def setup_logging(level: str = "INFO", verbose: bool = False):
    """Настройка логирования."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def cmd_validate(processor: ISBNProcessor, isbns: List[str]) -> int:
    rows = []
    failed = 0
    for isbn in isbns:
        valid = processor.validate_isbn(isbn)
        if not valid:
            failed += 1
        hyphens_ok = processor.correct_hyphens(isbn)
        rows.append([isbn, "да" if valid else "нет", "да" if hyphens_ok else "нет"])

    print(tabulate(rows, headers=["ISBN", "Валиден", "Дефисы верны"], tablefmt="github"))
    return 1 if failed else 0


def cmd_hyphenate(processor: ISBNProcessor, isbns: List[str]) -> int:
    code = 0
    for isbn in isbns:
        try:
            print(processor.hyphenate(isbn))
        except InvalidISBNError as e:
            logger.error(str(e))
            code = 1
    return code


def cmd_convert(processor: ISBNProcessor, isbns: List[str]) -> int:
    rows = []
    code = 0
    for isbn in isbns:
        try:
            normalized = processor.normalize_isbn(isbn)
            if len(normalized) == 10:
                rows.append([isbn, processor.to_isbn13(isbn)])
            else:
                rows.append([isbn, processor.to_isbn10(isbn)])
        except InvalidISBNError as e:
            logger.error(str(e))
            rows.append([isbn, "-"])
            code = 1

    print(tabulate(rows, headers=["ISBN", "Результат"], tablefmt="github"))
    return code


def cmd_info(processor: ISBNProcessor, isbns: List[str]) -> int:
    rows = []
    code = 0
    for isbn in isbns:
        try:
            resolved = processor.describe(isbn)
        except InvalidISBNError as e:
            logger.error(str(e))
            code = 1
            continue
        rows.append(
            [
                isbn,
                resolved.hyphenated,
                resolved.prefix,
                resolved.registrant,
                resolved.publication,
                resolved.checkdigit,
                resolved.zone,
            ]
        )

    if rows:
        print(
            tabulate(
                rows,
                headers=["ISBN", "ISBN-13", "Группа", "Издатель", "Издание", "КЦ", "Зона"],
                tablefmt="github",
            )
        )
    return code


COMMANDS = {
    "validate": cmd_validate,
    "hyphenate": cmd_hyphenate,
    "convert": cmd_convert,
    "info": cmd_info,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="isbn-core",
        description="Проверка, конвертация и форматирование ISBN",
    )
    parser.add_argument("command", choices=sorted(COMMANDS), help="Команда")
    parser.add_argument("isbns", nargs="+", help="ISBN (10 или 13, с дефисами или без)")
    parser.add_argument("--config", type=str, default=None,
                        help="Путь к JSON-файлу настроек")
    parser.add_argument("--ranges", type=str, default=None,
                        help="Путь к ranges.json (по умолчанию встроенный)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Подробное логирование")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    loader = ConfigLoader()
    settings = loader.load_settings(args.config) if args.config else ISBNSettings()
    setup_logging(settings.log_level, args.verbose)

    ranges = loader.load_ranges(args.ranges)
    processor = ISBNProcessor(settings, ranges)

    return COMMANDS[args.command](processor, args.isbns)


if __name__ == "__main__":
    sys.exit(main())
