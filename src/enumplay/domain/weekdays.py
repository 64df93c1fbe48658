"""Weekday closed sets.

``Weekday`` is a plain set used by the control-flow page. ``Weekday1`` and
``Weekday2`` show implicit integer raw values: one counting from ``0``, the
other from an explicit ``1``.
"""

from __future__ import annotations

from enum import auto, unique

from enumplay.domain.closed_set import ClosedSet, IntRawSet
from enumplay.domain.matching import exhaustive


@unique
class Weekday(ClosedSet):
    MONDAY = auto()
    TUESDAY = auto()
    WEDNESDAY = auto()
    THURSDAY = auto()
    FRIDAY = auto()
    SATURDAY = auto()
    SUNDAY = auto()


@unique
class Weekday1(IntRawSet):
    """Implicit raw values: ``MONDAY`` is 0, ``SUNDAY`` is 6."""

    MONDAY = auto()
    TUESDAY = auto()
    WEDNESDAY = auto()
    THURSDAY = auto()
    FRIDAY = auto()
    SATURDAY = auto()
    SUNDAY = auto()


@unique
class Weekday2(IntRawSet):
    """``MONDAY`` is explicitly 1; the rest follow on to ``SUNDAY`` = 7."""

    MONDAY = 1
    TUESDAY = auto()
    WEDNESDAY = auto()
    THURSDAY = auto()
    FRIDAY = auto()
    SATURDAY = auto()
    SUNDAY = auto()


_D = Weekday

WEEKEND_DAYS: frozenset[Weekday] = frozenset({_D.SATURDAY, _D.SUNDAY})

# Saturday and Sunday take separate branches; only Saturday is shouted.
_WEEKEND_MESSAGES = exhaustive(
    _D,
    {
        (_D.MONDAY, _D.TUESDAY, _D.WEDNESDAY, _D.THURSDAY, _D.FRIDAY): "{day} is a regular workday.",
        _D.SATURDAY: "Wuhuuuu, it's SATURDAYYYYYY.",
        _D.SUNDAY: "It's a weekend day.",
    },
)


def weekday_name(day: Weekday) -> str:
    return f"This weekday is called {day.label}"


def is_it_finally_weekend(day: Weekday) -> str:
    """Describe whether *day* is a workday, Saturday, or Sunday."""
    return _WEEKEND_MESSAGES[day].format(day=day.label)


def is_weekend(day: Weekday) -> bool:
    return day in WEEKEND_DAYS
