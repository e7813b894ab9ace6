"""
Базовые модели конфигурации и справочника диапазонов ISBN.

Содержит Pydantic-модели для валидации файла диапазонов регистрационных
групп (ranges.json) и настроек библиотеки.
"""

import re
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

PREFIX_PATTERN = re.compile(r"^97[89]-\d+$")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class RegistrantRange(BaseModel):
    """Диапазон элемента издателя внутри регистрационной группы."""

    model_config = ConfigDict(frozen=True)

    low: str = Field(..., description="Нижняя граница (например, '00')")
    high: str = Field(..., description="Верхняя граница (например, '19')")

    @field_validator("low", "high")
    @classmethod
    def validate_digits(cls, v):
        if not v or not v.isdigit():
            raise ValueError("граница диапазона должна состоять из цифр")
        return v

    @model_validator(mode="after")
    def validate_bounds(self):
        if len(self.low) != len(self.high):
            raise ValueError(
                f"границы диапазона разной длины: {self.low}-{self.high}"
            )
        if int(self.low) > int(self.high):
            raise ValueError(
                f"нижняя граница больше верхней: {self.low}-{self.high}"
            )
        return self

    @property
    def width(self) -> int:
        """Длина элемента издателя для этого диапазона."""
        return len(self.low)

    def matches(self, body: str) -> bool:
        """
        Проверить, попадают ли первые width цифр тела ISBN в диапазон.

        Диапазон, не оставляющий цифр элементу издания, не подходит.

        Args:
            body: Цифры ISBN после префикса и до контрольной цифры

        Returns:
            True если значение лежит в [low, high]
        """
        if len(body) <= self.width:
            return False
        value = int(body[: self.width])
        return int(self.low) <= value <= int(self.high)


class RegistrationGroup(BaseModel):
    """Регистрационная группа (страна или языковая зона)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Название зоны (например, 'Brazil')")
    ranges: Tuple[RegistrantRange, ...] = Field(
        default_factory=tuple,
        description="Диапазоны издателей в порядке из справочника",
    )

    @field_validator("ranges", mode="before")
    @classmethod
    def parse_pairs(cls, v):
        # В JSON диапазоны хранятся парами ["00", "19"]
        parsed = []
        for item in v:
            if isinstance(item, (list, tuple)):
                if len(item) != 2:
                    raise ValueError("диапазон должен содержать 2 значения [low, high]")
                parsed.append({"low": item[0], "high": item[1]})
            else:
                parsed.append(item)
        return parsed

    def find_range(self, body: str) -> Optional[RegistrantRange]:
        """Первый диапазон (в порядке справочника), содержащий тело ISBN."""
        for registrant_range in self.ranges:
            if registrant_range.matches(body):
                return registrant_range
        return None


class RangeDataset(BaseModel):
    """Справочник диапазонов: префикс группы -> RegistrationGroup."""

    model_config = ConfigDict(frozen=True)

    source: Optional[str] = Field(None, description="Источник данных")
    date: Optional[str] = Field(None, description="Дата выгрузки справочника")
    groups: Mapping[str, RegistrationGroup] = Field(
        default_factory=dict, description="Группы по префиксу вида '978-85'"
    )

    @field_validator("groups")
    @classmethod
    def validate_prefixes(cls, v):
        for prefix in v:
            if not PREFIX_PATTERN.match(prefix):
                raise ValueError(f"некорректный префикс группы: {prefix!r}")
        return MappingProxyType(dict(v))

    def get(self, prefix: str) -> Optional[RegistrationGroup]:
        """Получить группу по префиксу."""
        return self.groups.get(prefix)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self.groups

    def __len__(self) -> int:
        return len(self.groups)

    def to_json_dict(self) -> Dict[str, Any]:
        """Преобразует справочник в формат файла ranges.json."""
        return {
            "source": self.source,
            "date": self.date,
            "groups": {
                prefix: {
                    "name": group.name,
                    "ranges": [[r.low, r.high] for r in group.ranges],
                }
                for prefix, group in self.groups.items()
            },
        }


class ISBNSettings(BaseModel):
    """Настройки обработки ISBN."""

    # Нормализация
    accept_lowercase_x: bool = Field(
        False, description="Считать строчную 'x' контрольным символом 'X'"
    )
    strict_validation: bool = Field(
        True, description="Отбрасывать невалидные ISBN при обработке"
    )

    # Пути к файлам
    ranges_path: Optional[str] = Field(
        None, description="Путь к ranges.json (None - встроенный справочник)"
    )

    # Параметры логирования
    log_level: str = Field("INFO", description="Уровень логирования")

    model_config = ConfigDict(extra="allow")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level должен быть одним из {', '.join(LOG_LEVELS)}")
        return v
