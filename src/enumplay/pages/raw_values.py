"""Page: closed sets with raw values.

Implicit and explicit raw values for text and integer sets, then the
direction and month challenges.

Run with ``python -m enumplay.pages.raw_values``.
"""

from __future__ import annotations

from collections.abc import Iterator

from enumplay.domain.directions import CardinalDirection, help_ship
from enumplay.domain.faces import Face1, Face2
from enumplay.domain.months import Month, month_position
from enumplay.domain.weekdays import Weekday1, Weekday2


def statements() -> Iterator[str]:
    yield Face1.HAPPY.raw_value
    yield Face2.HAPPY.raw_value
    yield str(Weekday1.MONDAY.raw_value)
    yield str(Weekday2.MONDAY.raw_value)

    yield help_ship(CardinalDirection.SOUTH)

    for month in (
        Month.JANUARY,
        Month.FEBRUARY,
        Month.MARCH,
        Month.APRIL,
        Month.MAY,
        Month.NOVEMBER,
    ):
        yield month_position(month)


def main() -> None:
    for line in statements():
        print(line)


if __name__ == "__main__":
    main()
