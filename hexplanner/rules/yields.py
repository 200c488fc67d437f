"""The six per-turn outputs a cell or district can produce."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum


class YieldType(Enum):
    """Name of one yield field; the value matches the ``Yields`` attribute."""

    FOOD = "food"
    PRODUCTION = "production"
    GOLD = "gold"
    SCIENCE = "science"
    CULTURE = "culture"
    FAITH = "faith"


@dataclass(frozen=True)
class Yields:
    """Immutable record of all six yields.

    Every field defaults to 0, so ``Yields()`` is the zero record.
    Instances add field-by-field with ``+``.
    """

    food: int = 0
    production: int = 0
    gold: int = 0
    science: int = 0
    culture: int = 0
    faith: int = 0

    def __add__(self, other: Yields) -> Yields:
        if not isinstance(other, Yields):
            return NotImplemented
        return Yields(
            *(getattr(self, f.name) + getattr(other, f.name) for f in fields(self)),
        )

    def get(self, yield_type: YieldType) -> int:
        """Return the amount stored for ``yield_type``."""
        return getattr(self, yield_type.value)

    def plus(self, yield_type: YieldType, amount: int) -> Yields:
        """Return a copy with ``amount`` added to a single field."""
        return replace(self, **{yield_type.value: self.get(yield_type) + amount})

    def as_dict(self) -> dict[str, int]:
        """Return ``{field_name: amount}`` for all six fields."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


ZERO_YIELDS = Yields()
