import pytest

from isbn_core.config.base import RangeDataset
from isbn_core.isbn.resolver import RegistrationResolver


@pytest.fixture()
def small_ranges() -> RangeDataset:
    """Небольшой справочник для проверки порядка диапазонов."""
    return RangeDataset(
        source="test",
        groups={
            "978-0": {"name": "English language", "ranges": [["306", "306"], ["3", "3"]]},
            "978-85": {"name": "Brazil", "ranges": [["00", "19"]]},
            "978-99901": {"name": "Bahrain", "ranges": [["0000", "9999"]]},
        },
    )


@pytest.fixture()
def small_resolver(small_ranges) -> RegistrationResolver:
    """Резолвер с небольшим справочником."""
    return RegistrationResolver(small_ranges)


@pytest.fixture()
def ranges_file(tmp_path, small_ranges):
    """Файл ranges.json с небольшим справочником."""
    import json

    path = tmp_path / "ranges.json"
    path.write_text(json.dumps(small_ranges.to_json_dict()), encoding="utf-8")
    return path
