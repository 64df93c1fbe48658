"""Closed value sets: the base classes every enumeration in the playground uses.

Three flavours cover the two representations a closed set can take:

- :class:`ClosedSet`: plain variant tags, identity only.
- :class:`IntRawSet`: integer raw values. Omitted values are generated
  sequentially: the first variant gets ``0``, every later one the previous
  value plus one (so ``MONDAY = 1`` followed by ``auto()`` yields ``2``).
- :class:`TextRawSet`: text raw values. Omitted values default to the
  lower-cased variant name, the same rule ``StrEnum`` uses for ``auto()``.

Raw values are not mixed into the member type (no
``IntEnum`` / ``StrEnum``): equality stays variant-by-variant, so
``Month.JANUARY != 1`` and ``Weekday1.TUESDAY != Weekday2.MONDAY`` even
though both carry ``1``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Self


class UnknownVariantError(LookupError):
    """Raised when a variant name is not declared by a closed set."""

    def __init__(self, set_cls: type[ClosedSet], name: str) -> None:
        self.set_cls = set_cls
        self.name = name
        super().__init__(f"{set_cls.__name__} has no variant named {name!r}")


class ClosedSet(Enum):
    """Base for every closed value set: a fixed, ordered list of variants."""

    @property
    def label(self) -> str:
        """Human display name, e.g. ``DAY_OFF`` -> ``Day Off``.

        Sets whose names do not title-case cleanly override this.
        """
        return self.name.replace("_", " ").title()

    @classmethod
    def variants(cls) -> tuple[Self, ...]:
        """All variants in declaration order."""
        return tuple(cls)

    @classmethod
    def from_name(cls, name: str) -> Self:
        """Select a variant by its literal name.

        Matching is case-insensitive and treats ``-`` like ``_`` so CLI
        arguments such as ``ios-advanced`` resolve.

        Raises:
            UnknownVariantError: *name* is not a declared variant.
        """
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise UnknownVariantError(cls, name) from None


class RawValueSet(ClosedSet):
    """A closed set whose variants each carry one scalar raw value."""

    @property
    def raw_value(self) -> Any:
        return self.value

    @classmethod
    def _accepts_raw(cls, raw: object) -> bool:
        return True

    @classmethod
    def from_raw(cls, raw: object) -> Self | None:
        """Return the variant whose raw value equals *raw*, or ``None``.

        There is no partial or default match: an unmatched value, or a
        value of the wrong scalar type, yields ``None``.
        """
        if not cls._accepts_raw(raw):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


class IntRawSet(RawValueSet):
    """Integer raw values, sequential from ``0`` or the last explicit value."""

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> int:
        if not last_values:
            return 0
        return last_values[-1] + 1

    @classmethod
    def _accepts_raw(cls, raw: object) -> bool:
        # bool is an int subclass; True must not find the variant with raw value 1.
        return isinstance(raw, int) and not isinstance(raw, bool)


class TextRawSet(RawValueSet):
    """Text raw values, defaulting to the lower-cased variant name."""

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> str:
        return name.lower()

    @classmethod
    def _accepts_raw(cls, raw: object) -> bool:
        return isinstance(raw, str)


def raw_values(set_cls: type[RawValueSet]) -> dict[RawValueSet, Any]:
    """Return the ``{variant: raw_value}`` table in declaration order."""
    return {member: member.raw_value for member in set_cls}
