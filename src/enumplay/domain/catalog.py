"""Registry of every closed set in the playground, keyed for the CLI.

Each entry pairs a closed set with its describers, the functions that map
one of its variants to text. Sets without describers are still listed so
their raw values can be inspected and looked up.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from enumplay.domain.closed_set import ClosedSet, RawValueSet
from enumplay.domain.courses import (
    FirstQuarterTechnicalCourse,
    course_name,
    course_type,
    is_mobile_course,
)
from enumplay.domain.directions import CardinalDirection, help_ship, leads_home
from enumplay.domain.faces import Face1, Face2, face_for
from enumplay.domain.months import Month, month_position, ordinal_suffix
from enumplay.domain.weekdays import (
    Weekday,
    Weekday1,
    Weekday2,
    is_it_finally_weekend,
    is_weekend,
    weekday_name,
)

Describer = Callable[[Any], object]


class UnknownSetError(LookupError):
    """Raised when no closed set is registered under a key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No closed set named {key!r}")


@dataclass(frozen=True)
class CatalogEntry:
    """A registered closed set and the describers that accept its variants."""

    key: str
    set_cls: type[ClosedSet]
    summary: str
    describers: Mapping[str, Describer] = field(default_factory=dict)

    @property
    def has_raw_values(self) -> bool:
        return issubclass(self.set_cls, RawValueSet)

    def describe(self, variant: ClosedSet) -> dict[str, str]:
        """Run every describer on *variant*, rendering results as text."""
        return {name: _as_text(fn(variant)) for name, fn in self.describers.items()}


def _as_text(value: object) -> str:
    if isinstance(value, ClosedSet):
        return str(value.value) if isinstance(value, RawValueSet) else value.label
    return str(value)


CATALOG: dict[str, CatalogEntry] = {
    entry.key: entry
    for entry in (
        CatalogEntry(
            key="course",
            set_cls=FirstQuarterTechnicalCourse,
            summary="First-quarter technical courses (no raw values)",
            describers={
                "name": course_name,
                "type": course_type,
                "mobile": is_mobile_course,
            },
        ),
        CatalogEntry(
            key="weekday",
            set_cls=Weekday,
            summary="Days of the week (no raw values)",
            describers={
                "name": weekday_name,
                "weekend": is_it_finally_weekend,
                "is_weekend": is_weekend,
            },
        ),
        CatalogEntry(
            key="weekday-zero",
            set_cls=Weekday1,
            summary="Days of the week, implicit integer raw values from 0",
        ),
        CatalogEntry(
            key="weekday-one",
            set_cls=Weekday2,
            summary="Days of the week, integer raw values from an explicit 1",
        ),
        CatalogEntry(
            key="face-name",
            set_cls=Face1,
            summary="Faces, implicit text raw values",
            describers={"emoticon": face_for},
        ),
        CatalogEntry(
            key="face",
            set_cls=Face2,
            summary="Faces, explicit emoticon raw values",
        ),
        CatalogEntry(
            key="direction",
            set_cls=CardinalDirection,
            summary="Cardinal directions with map arrows",
            describers={"help": help_ship, "leads_home": leads_home},
        ),
        CatalogEntry(
            key="month",
            set_cls=Month,
            summary="Months of the year, explicit raw values 1..12",
            describers={"position": month_position, "suffix": ordinal_suffix},
        ),
    )
}


def get_entry(key: str, catalog: Mapping[str, CatalogEntry] = CATALOG) -> CatalogEntry:
    """Look up a registered closed set by key (case-insensitive).

    Raises:
        UnknownSetError: nothing is registered under *key*.
    """
    try:
        return catalog[key.strip().lower()]
    except KeyError:
        raise UnknownSetError(key) from None
