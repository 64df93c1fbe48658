"""Page: control flow with closed sets.

Comparison with ``==``, case tables that map each course to its name,
grouped branches, and the weekday challenges.

Run with ``python -m enumplay.pages.control_flow``.
"""

from __future__ import annotations

from collections.abc import Iterator

from enumplay.domain.courses import (
    FirstQuarterTechnicalCourse,
    course_name,
    course_type,
    is_mobile_course,
)
from enumplay.domain.weekdays import Weekday, is_it_finally_weekend, weekday_name


def statements() -> Iterator[str]:
    course1 = FirstQuarterTechnicalCourse.PYTHON
    course2 = FirstQuarterTechnicalCourse.from_name("frontend")

    if course1 == course2:
        yield "these two are the same"
    else:
        yield "these two are different"

    yield f"The course is called: {course_name(course1)}"
    yield f"The course is of type: {course_type(course1)}"
    yield f"The course is a mobile course: {is_mobile_course(course1)}"

    yield weekday_name(Weekday.TUESDAY)
    yield is_it_finally_weekend(Weekday.SATURDAY)


def main() -> None:
    for line in statements():
        print(line)


if __name__ == "__main__":
    main()
