"""Case tables: exhaustive matching over a closed set, checked at definition time.

A case table maps each branch to its result. A branch is either a single
variant or a tuple of variants sharing one result::

    _COURSE_TYPES = exhaustive(
        FirstQuarterTechnicalCourse,
        {
            (PYTHON, FRONTEND, RUBY): "Web",
            (IOS_ACCELERATED, IOS_ADVANCED): "Mobile",
        },
    )

:func:`exhaustive` refuses to build unless every variant is covered exactly
once, so adding a variant without updating its describers fails on import.
:func:`with_default` is the explicit catch-all: uncovered variants share a
default and are no longer flagged when the set grows.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeVar, Union

from enumplay.domain.closed_set import ClosedSet

E = TypeVar("E", bound=ClosedSet)
T = TypeVar("T")

Branch = Union[ClosedSet, tuple[ClosedSet, ...]]


class MatchCoverageError(TypeError):
    """A case table does not cover its closed set exactly once per variant."""


def _expand(set_cls: type[E], cases: Mapping[Branch, T]) -> dict[E, T]:
    table: dict[E, T] = {}
    for branch, result in cases.items():
        members = branch if isinstance(branch, tuple) else (branch,)
        if not members:
            raise MatchCoverageError(f"{set_cls.__name__} case table has an empty branch")
        for member in members:
            if not isinstance(member, set_cls):
                raise MatchCoverageError(f"{member!r} is not a variant of {set_cls.__name__}")
            if member in table:
                raise MatchCoverageError(
                    f"{set_cls.__name__}.{member.name} is matched by more than one branch"
                )
            table[member] = result
    return table


def exhaustive(set_cls: type[E], cases: Mapping[Branch, T]) -> Mapping[E, T]:
    """Build a total, read-only case table over *set_cls*.

    Raises:
        MatchCoverageError: a variant is missing, matched twice, or foreign.
    """
    table = _expand(set_cls, cases)
    missing = [member.name for member in set_cls if member not in table]
    if missing:
        raise MatchCoverageError(f"{set_cls.__name__} case table is missing: {', '.join(missing)}")
    return MappingProxyType({member: table[member] for member in set_cls})


def with_default(set_cls: type[E], cases: Mapping[Branch, T], default: T) -> Mapping[E, T]:
    """Build a case table where every uncovered variant maps to *default*.

    Overlapping and foreign branches are still rejected.
    """
    table = _expand(set_cls, cases)
    return MappingProxyType({member: table.get(member, default) for member in set_cls})
