"""
Тесты разрешения регистрационной группы и элементов ISBN.
"""

import pytest

from isbn_core.config.base import RangeDataset
from isbn_core.errors import InvalidISBNError, InvalidISBNReason
from isbn_core.isbn.resolver import (
    RegistrationResolver,
    ResolvedISBN,
    fetch_prefix,
    fetch_checkdigit,
    fetch_registrant_element,
    fetch_publication_element,
    publisher_zone,
    resolve,
)
from isbn_core.isbn.utils import to_isbn13

# ISBN-13 с корректной контрольной цифрой, но без группы: 978-610 не выделена
UNKNOWN_GROUP = "9786100000003"


class TestFetchPrefix:
    """Тесты поиска префикса регистрационной группы."""

    def test_isbn13(self):
        assert fetch_prefix("9788535902778") == "978-85"
        assert fetch_prefix("978-1-86197-876-9") == "978-1"
        assert fetch_prefix("9789990100013") == "978-99901"

    def test_isbn10(self):
        assert fetch_prefix("0306406152") == "978-0"
        assert fetch_prefix("85-359-0277-5") == "978-85"

    def test_979(self):
        assert fetch_prefix("9791090636071") == "979-10"

    def test_unknown_group(self):
        with pytest.raises(InvalidISBNError) as exc_info:
            fetch_prefix(UNKNOWN_GROUP)
        assert exc_info.value.reason == InvalidISBNReason.PREFIX

    def test_group_missing_from_custom_dataset(self, small_resolver):
        with pytest.raises(InvalidISBNError) as exc_info:
            small_resolver.fetch_prefix("9781861978769")
        assert exc_info.value.reason == InvalidISBNReason.PREFIX

    def test_first_existing_candidate_wins(self):
        """Кандидаты перебираются от короткого к длинному без возврата."""
        ranges = RangeDataset(
            groups={
                "978-8": {"name": "Short", "ranges": [["0", "9"]]},
                "978-85": {"name": "Brazil", "ranges": [["00", "19"]]},
            }
        )
        resolver = RegistrationResolver(ranges)
        assert resolver.fetch_prefix("9788535902778") == "978-8"

    def test_invalid_isbn(self):
        with pytest.raises(InvalidISBNError):
            fetch_prefix("str")
        with pytest.raises(InvalidISBNError):
            fetch_prefix("9788535902779")


class TestRegistrantElement:
    """Тесты элементов издателя и издания."""

    def test_registrant(self):
        assert fetch_registrant_element("978-1-86197-876-9") == "86197"
        assert fetch_registrant_element("9788535902778") == "359"
        assert fetch_registrant_element("0306406152") == "306"
        assert fetch_registrant_element("978-5-12345-678-1") == "12"

    def test_publication(self):
        assert fetch_publication_element("978-1-86197-876-9") == "876"
        assert fetch_publication_element("9788535902778") == "0277"
        assert fetch_publication_element("0306406152") == "40615"
        assert fetch_publication_element("978-5-12345-678-1") == "345678"

    def test_ranges_checked_in_order(self, small_resolver):
        """Побеждает первый подходящий диапазон, а не самый узкий."""
        assert small_resolver.fetch_registrant_element("9780306406157") == "306"
        assert small_resolver.fetch_registrant_element("9780312345679") == "3"

    def test_no_matching_range(self, small_resolver):
        with pytest.raises(InvalidISBNError) as exc_info:
            small_resolver.fetch_registrant_element("9788535902778")
        assert exc_info.value.reason == InvalidISBNReason.REGISTRANT

    def test_range_leaving_no_publication_is_skipped(self, small_resolver):
        with pytest.raises(InvalidISBNError) as exc_info:
            small_resolver.fetch_registrant_element("9789990100013")
        assert exc_info.value.reason == InvalidISBNReason.REGISTRANT

    def test_invalid_isbn(self):
        with pytest.raises(InvalidISBNError):
            fetch_registrant_element("str")
        with pytest.raises(InvalidISBNError):
            fetch_publication_element("str")
        with pytest.raises(InvalidISBNError):
            fetch_registrant_element(UNKNOWN_GROUP)


class TestZoneAndCheckdigit:
    """Тесты зоны и контрольной цифры."""

    def test_publisher_zone(self):
        assert publisher_zone("9788535902778") == "Brazil"
        assert publisher_zone("0306406152") == "English language"
        assert publisher_zone("9791090636071") == "France"

    def test_fetch_checkdigit(self):
        assert fetch_checkdigit("9780306406157") == "7"
        assert fetch_checkdigit("0306406152") == "2"
        assert fetch_checkdigit("88-7385-107-X") == "X"

    def test_invalid_isbn(self):
        with pytest.raises(InvalidISBNError):
            publisher_zone("str")
        with pytest.raises(InvalidISBNError):
            fetch_checkdigit("str")
        with pytest.raises(InvalidISBNError):
            fetch_checkdigit("0306406153")


class TestResolve:
    """Тесты полного разбора."""

    def test_resolve(self):
        resolved = resolve("978-85-359-0277-8")

        assert resolved == ResolvedISBN(
            prefix="978-85",
            registrant="359",
            publication="0277",
            checkdigit="8",
            zone="Brazil",
        )
        assert resolved.hyphenated == "978-85-359-0277-8"

    def test_resolve_isbn10_uses_isbn13_checkdigit(self):
        resolved = resolve("0306406152")
        assert resolved.checkdigit == "7"
        assert resolved.isbn13 == "9780306406157"

    @pytest.mark.parametrize(
        "isbn",
        [
            "9788535902778",
            "978-1-86197-876-9",
            "0306406152",
            "887385107X",
            "9791090636071",
            "9789990100013",
            "978-5-12345-678-1",
        ],
    )
    def test_parts_concatenate_to_isbn13(self, isbn):
        resolved = resolve(isbn)

        assert resolved.isbn13 == to_isbn13(isbn)
        assert resolved.registrant
        assert resolved.publication

    def test_to_dict(self):
        data = resolve("978-1-86197-876-9").to_dict()

        assert data["prefix"] == "978-1"
        assert data["registrant"] == "86197"
        assert data["publication"] == "876"
        assert data["checkdigit"] == "9"
        assert data["zone"] == "English language"
        assert data["isbn13"] == "9781861978769"
        assert data["hyphenated"] == "978-1-86197-876-9"
