"""Months of the year with explicit raw values 1..12."""

from __future__ import annotations

from enum import unique

from enumplay.domain.closed_set import IntRawSet
from enumplay.domain.matching import with_default


@unique
class Month(IntRawSet):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


_M = Month

# Catch-all: every month after March takes "th". A new variant would
# silently get "th" as well.
_ORDINAL_SUFFIXES = with_default(
    _M,
    {
        _M.JANUARY: "st",
        _M.FEBRUARY: "nd",
        _M.MARCH: "rd",
    },
    default="th",
)


def ordinal_suffix(month: Month) -> str:
    return _ORDINAL_SUFFIXES[month]


def month_position(month: Month) -> str:
    """E.g. ``March is the 3rd month of the year``."""
    return f"{month.label} is the {month.raw_value}{ordinal_suffix(month)} month of the year"
