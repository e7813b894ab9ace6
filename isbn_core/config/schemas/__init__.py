"""
JSON-схемы для валидации конфигурационных файлов.

Содержит схемы в формате JSON Schema для валидации
isbn_config.json и ranges.json.
"""

SCHEMA_ISBN_CONFIG = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "ISBN Settings",
    "description": "Настройки обработки ISBN",
    "type": "object",
    "properties": {
        "accept_lowercase_x": {
            "type": "boolean",
            "default": False,
            "description": "Считать строчную 'x' контрольным символом 'X'",
        },
        "strict_validation": {
            "type": "boolean",
            "default": True,
            "description": "Отбрасывать невалидные ISBN при обработке",
        },
        "ranges_path": {
            "type": ["string", "null"],
            "default": None,
            "description": "Путь к ranges.json",
        },
        "log_level": {
            "type": "string",
            "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            "default": "INFO",
            "description": "Уровень логирования",
        },
    },
    "additionalProperties": True,
}

SCHEMA_REGISTRATION_GROUP = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Registration Group",
    "description": "Регистрационная группа и диапазоны издателей",
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "minLength": 1,
            "description": "Название зоны",
        },
        "ranges": {
            "type": "array",
            "description": "Пары [low, high] в порядке проверки",
            "items": {
                "type": "array",
                "items": {"type": "string", "pattern": "^[0-9]+$"},
                "minItems": 2,
                "maxItems": 2,
            },
        },
    },
    "required": ["name", "ranges"],
    "additionalProperties": False,
}

SCHEMA_RANGES_FILE = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "ISBN Ranges File",
    "description": "Файл справочника диапазонов ISBN",
    "type": "object",
    "properties": {
        "source": {"type": ["string", "null"]},
        "date": {"type": ["string", "null"]},
        "groups": {
            "type": "object",
            "propertyNames": {"pattern": "^97[89]-[0-9]+$"},
            "additionalProperties": SCHEMA_REGISTRATION_GROUP,
        },
    },
    "required": ["groups"],
}
