"""Face closed sets: implicit vs explicit text raw values."""

from __future__ import annotations

from enum import auto, unique

from enumplay.domain.closed_set import TextRawSet


@unique
class Face1(TextRawSet):
    """Implicit raw values: each face's raw value is its own name."""

    HAPPY = auto()
    SAD = auto()
    NERD = auto()


@unique
class Face2(TextRawSet):
    """Explicit raw values: each face carries its emoticon."""

    HAPPY = ":-)"
    SAD = ":-("
    NERD = "8-)"


def face_for(mood: Face1) -> Face2:
    """Emoticon face for a named mood, matched by variant name."""
    return Face2[mood.name]
