"""Конфигурация и справочник диапазонов ISBN."""

from .base import ISBNSettings, RangeDataset, RegistrationGroup, RegistrantRange
from .loader import ConfigLoader, get_default_ranges, load_ranges_file
from .rangemessage import parse_range_message

__all__ = [
    "ISBNSettings",
    "RangeDataset",
    "RegistrationGroup",
    "RegistrantRange",
    "ConfigLoader",
    "get_default_ranges",
    "load_ranges_file",
    "parse_range_message",
]
