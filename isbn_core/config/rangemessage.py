"""
Преобразование RangeMessage.xml Международного агентства ISBN
в справочник диапазонов RangeDataset.

Файл скачивается вручную; модуль только разбирает локальную копию.
"""

import xml.etree.ElementTree as ET
from typing import Dict, List
import logging

from .base import RangeDataset

logger = logging.getLogger(__name__)


def _rule_to_pair(range_text: str, length: int) -> List[str]:
    # "0000000-1999999" при длине 2 -> ["00", "19"]
    start, end = range_text.split("-")
    return [start[:length], end[:length]]


def parse_range_message(xml_content: str) -> RangeDataset:
    """
    Разобрать RangeMessage.xml.

    Правила с длиной 0 (диапазон не выделен) пропускаются, порядок
    остальных правил сохраняется.

    Args:
        xml_content: Содержимое RangeMessage.xml

    Returns:
        RangeDataset: Справочник диапазонов
    """
    root = ET.fromstring(xml_content)

    groups: Dict[str, Dict] = {}
    for group in root.findall(".//RegistrationGroups/Group"):
        prefix = group.findtext("Prefix", "").strip()
        agency = group.findtext("Agency", "").strip()

        ranges = []
        for rule in group.findall("./Rules/Rule"):
            length = int(rule.findtext("Length", "0"))
            if length == 0:
                continue
            ranges.append(_rule_to_pair(rule.findtext("Range", "").strip(), length))

        groups[prefix] = {"name": agency, "ranges": ranges}

    logger.info(f"Разобрано регистрационных групп: {len(groups)}")

    return RangeDataset(
        source=root.findtext("MessageSource"),
        date=root.findtext("MessageDate"),
        groups=groups,
    )
