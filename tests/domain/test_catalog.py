"""Tests for the closed-set catalog: every describer accepts every variant."""

import pytest

from enumplay.domain.catalog import CATALOG, CatalogEntry, UnknownSetError, get_entry
from enumplay.domain.closed_set import ClosedSet

ENTRIES = list(CATALOG.values())


def test_keys() -> None:
    assert list(CATALOG) == [
        "course",
        "weekday",
        "weekday-zero",
        "weekday-one",
        "face-name",
        "face",
        "direction",
        "month",
    ]


@pytest.mark.parametrize("entry", ENTRIES, ids=lambda e: e.key)
def test_describers_are_total(entry: CatalogEntry) -> None:
    """Every describer returns non-empty text for every declared variant."""
    for variant in entry.set_cls:
        described = entry.describe(variant)
        assert set(described) == set(entry.describers)
        for text in described.values():
            assert isinstance(text, str)
            assert text


@pytest.mark.parametrize("entry", ENTRIES, ids=lambda e: e.key)
def test_sets_are_closed_sets(entry: CatalogEntry) -> None:
    assert issubclass(entry.set_cls, ClosedSet)
    assert len(entry.set_cls) > 0


def test_raw_value_flags() -> None:
    assert not CATALOG["course"].has_raw_values
    assert not CATALOG["weekday"].has_raw_values
    assert CATALOG["month"].has_raw_values


def test_describe_renders_set_members_as_raw_value() -> None:
    face = CATALOG["face-name"]
    assert face.describe(face.set_cls.from_name("sad")) == {"emoticon": ":-("}


def test_get_entry_case_insensitive() -> None:
    assert get_entry(" Month ") is CATALOG["month"]


def test_get_entry_unknown() -> None:
    with pytest.raises(UnknownSetError, match="planet"):
        get_entry("planet")
