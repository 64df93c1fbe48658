"""Cardinal directions for a lost ship that needs to head north-east."""

from __future__ import annotations

from enum import unique

from enumplay.domain.closed_set import TextRawSet
from enumplay.domain.matching import exhaustive


@unique
class CardinalDirection(TextRawSet):
    """Each direction carries the arrow drawn for it on a map."""

    NORTH = "↑"
    SOUTH = "↓"
    EAST = "→"
    WEST = "←"


_N = CardinalDirection

HOMEWARD_DIRECTIONS: frozenset[CardinalDirection] = frozenset({_N.NORTH, _N.EAST})

_HELP_MESSAGES = exhaustive(
    _N,
    {
        (_N.NORTH, _N.EAST): "The ship needs to go {direction}",
        (_N.SOUTH, _N.WEST): "This direction {direction} does not help the ship to get home",
    },
)


def help_ship(direction: CardinalDirection) -> str:
    """Say whether heading in *direction* brings the ship home."""
    return _HELP_MESSAGES[direction].format(direction=direction.label)


def leads_home(direction: CardinalDirection) -> bool:
    return direction in HOMEWARD_DIRECTIONS
