#!/usr/bin/env python3
"""
Скрипт сборки справочника диапазонов ISBN.

Преобразует скачанный RangeMessage.xml (https://www.isbn-international.org/range_file_generation)
в isbn_core/config/data/ranges.json.
"""

import json
import sys
import logging
from pathlib import Path

# Добавляем путь к корню проекта для импорта модулей
sys.path.insert(0, str(Path(__file__).parent.parent))

from isbn_core.config.loader import DEFAULT_RANGES_PATH
from isbn_core.config.rangemessage import parse_range_message

# Настройка логирования
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_ranges(input_path: Path, output_path: Path) -> int:
    """
    Собрать ranges.json из RangeMessage.xml.

    Returns:
        Количество регистрационных групп
    """
    with open(input_path, "r", encoding="utf-8") as f:
        dataset = parse_range_message(f.read())

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(dataset.to_json_dict(), f, indent=2, ensure_ascii=False)

    logger.info(f"Справочник записан в {output_path}")
    return len(dataset)


def main():
    """Основная функция скрипта."""
    import argparse

    parser = argparse.ArgumentParser(description="Сборка ranges.json из RangeMessage.xml")
    parser.add_argument("input", type=Path, help="Путь к RangeMessage.xml")
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=DEFAULT_RANGES_PATH,
        help=f"Путь к ranges.json (по умолчанию: {DEFAULT_RANGES_PATH})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Подробный вывод")

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    count = build_ranges(args.input, args.output)
    print(f"Регистрационных групп: {count}")


if __name__ == "__main__":
    main()
