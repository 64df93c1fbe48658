"""First-quarter technical courses: a plain closed set with no raw values.

Modelling the course as free text would accept any string; the closed set
only admits the five courses known up front.
"""

from __future__ import annotations

from enum import auto, unique

from enumplay.domain.closed_set import ClosedSet
from enumplay.domain.matching import exhaustive


@unique
class FirstQuarterTechnicalCourse(ClosedSet):
    """The five technical courses offered in the first quarter."""

    PYTHON = auto()
    FRONTEND = auto()
    RUBY = auto()
    IOS_ADVANCED = auto()
    IOS_ACCELERATED = auto()

    @property
    def label(self) -> str:
        return _COURSE_LABELS[self]


_C = FirstQuarterTechnicalCourse

_COURSE_LABELS = exhaustive(
    _C,
    {
        _C.PYTHON: "Python",
        _C.FRONTEND: "Frontend",
        _C.RUBY: "Ruby",
        _C.IOS_ADVANCED: "iOS Advanced",
        _C.IOS_ACCELERATED: "iOS Accelerated",
    },
)

MOBILE_COURSES: frozenset[FirstQuarterTechnicalCourse] = frozenset(
    {_C.IOS_ADVANCED, _C.IOS_ACCELERATED}
)

_COURSE_NAMES = exhaustive(
    _C,
    {
        _C.PYTHON: "Back-end Web: API Services with Python & Flask",
        _C.FRONTEND: "Front-end Web: Interactive Websites with JavaScript",
        _C.RUBY: "Full-stack development with Ruby",
        _C.IOS_ADVANCED: "Advanced Topics in iOS & Swift",
        _C.IOS_ACCELERATED: "Mobile Apps with iOS & Swift",
    },
)

_COURSE_TYPES = exhaustive(
    _C,
    {
        (_C.PYTHON, _C.FRONTEND, _C.RUBY): "Web",
        (_C.IOS_ACCELERATED, _C.IOS_ADVANCED): "Mobile",
    },
)


def course_name(course: FirstQuarterTechnicalCourse) -> str:
    """Full catalogue title of *course*."""
    return _COURSE_NAMES[course]


def course_type(course: FirstQuarterTechnicalCourse) -> str:
    """``Web`` or ``Mobile``."""
    return _COURSE_TYPES[course]


def is_mobile_course(course: FirstQuarterTechnicalCourse) -> bool:
    return course in MOBILE_COURSES
