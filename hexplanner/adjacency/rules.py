"""Per-district adjacency rules as data.

Each district maps to an ordered tuple of :class:`AdjacencyRule`.  A rule
counts qualifying neighbours (or checks the district's own cell), divides
by ``group_size`` rounding down, and multiplies by ``amount_each``.

The Government Plaza bonus depends on the district's primary yield rather
than on a fixed yield, so the engine applies it in a separate pass after
these rules.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from operator import attrgetter

from hexplanner.rules.types import District, Feature, Improvement, Resource, ResourceCategory
from hexplanner.rules.yields import YieldType
from hexplanner.world.cell import Cell

CellPredicate = Callable[[Cell], bool]

GOVERNMENT_PLAZA_BONUS = 1
GOVERNMENT_PLAZA_SOURCE = "Government Plaza"


@dataclass(frozen=True)
class Tally:
    """A labelled neighbour test, e.g. ``Tally("Mountain(s)", is_mountain)``."""

    label: str
    matches: CellPredicate


@dataclass(frozen=True)
class AdjacencyRule:
    """One line of a district's adjacency table.

    Attributes:
        yield_type: Yield the rule grants.
        tallies: Neighbour tests whose counts are summed together.
        amount_each: Yield granted per completed group.
        group_size: Qualifying neighbours needed per group.
        on_own_cell: Test the district's own cell instead of its
            neighbours; the rule then grants ``amount_each`` once, or nothing.
    """

    yield_type: YieldType
    tallies: tuple[Tally, ...]
    amount_each: int = 1
    group_size: int = 1
    on_own_cell: bool = False

    def evaluate(self, cell: Cell, neighbours: Sequence[Cell]) -> tuple[int, str]:
        """Apply the rule.

        Args:
            cell: The district's cell.
            neighbours: Its existing neighbouring cells.

        Returns:
            ``(amount, source)``; ``amount`` may be 0.
        """
        if self.on_own_cell:
            (tally,) = self.tallies
            return (self.amount_each if tally.matches(cell) else 0), tally.label

        counts = [sum(1 for n in neighbours if tally.matches(n)) for tally in self.tallies]
        groups = sum(counts) // self.group_size
        source = ", ".join(
            f"{count} {tally.label}" for count, tally in zip(counts, self.tallies, strict=True)
        )
        return groups * self.amount_each, source


def _feature(feature: Feature) -> CellPredicate:
    return lambda cell: cell.feature is feature


def _district(district: District) -> CellPredicate:
    return lambda cell: cell.district is district


def _improvement(improvement: Improvement) -> CellPredicate:
    return lambda cell: cell.improvement is improvement


def _water_resource(cell: Cell) -> bool:
    return cell.is_water and cell.resource is not Resource.NONE


def _strategic_resource(cell: Cell) -> bool:
    return cell.resource_category is ResourceCategory.STRATEGIC


_MOUNTAINS = Tally("Mountain(s)", attrgetter("is_mountain"))
_DISTRICTS = Tally("District(s)", attrgetter("has_district"))


def _per_two_districts(yield_type: YieldType) -> AdjacencyRule:
    return AdjacencyRule(yield_type, (_DISTRICTS,), group_size=2)


ADJACENCY_RULES: dict[District, tuple[AdjacencyRule, ...]] = {
    District.CAMPUS: (
        AdjacencyRule(YieldType.SCIENCE, (_MOUNTAINS,)),
        AdjacencyRule(
            YieldType.SCIENCE,
            (Tally("Rainforest(s)", _feature(Feature.RAINFOREST)), _DISTRICTS),
            group_size=2,
        ),
        AdjacencyRule(
            YieldType.SCIENCE,
            (Tally("Geothermal Fissure(s)", _feature(Feature.GEOTHERMAL_FISSURE)),),
            amount_each=2,
        ),
        AdjacencyRule(YieldType.SCIENCE, (Tally("Reef(s)", _feature(Feature.REEF)),), amount_each=2),
    ),
    District.HOLY_SITE: (
        AdjacencyRule(YieldType.FAITH, (_MOUNTAINS,)),
        AdjacencyRule(
            YieldType.FAITH,
            (Tally("Woods", _feature(Feature.WOODS)), _DISTRICTS),
            group_size=2,
        ),
        AdjacencyRule(
            YieldType.FAITH,
            (Tally("Natural Wonder(s)", attrgetter("has_natural_wonder")),),
            amount_each=2,
        ),
    ),
    District.THEATER_SQUARE: (
        AdjacencyRule(YieldType.CULTURE, (Tally("Wonder(s)", attrgetter("has_wonder")),), amount_each=2),
        _per_two_districts(YieldType.CULTURE),
    ),
    District.COMMERCIAL_HUB: (
        AdjacencyRule(
            YieldType.GOLD,
            (Tally("River", attrgetter("has_river")),),
            amount_each=2,
            on_own_cell=True,
        ),
        AdjacencyRule(YieldType.GOLD, (Tally("Harbor(s)", _district(District.HARBOR)),), amount_each=2),
        _per_two_districts(YieldType.GOLD),
    ),
    District.HARBOR: (
        AdjacencyRule(YieldType.GOLD, (Tally("Coastal Resource(s)", _water_resource),)),
        AdjacencyRule(
            YieldType.GOLD,
            (Tally("City Center(s)", _district(District.CITY_CENTER)),),
            amount_each=2,
        ),
        _per_two_districts(YieldType.GOLD),
    ),
    District.INDUSTRIAL_ZONE: (
        AdjacencyRule(YieldType.PRODUCTION, (Tally("Mine(s)", _improvement(Improvement.MINE)),)),
        AdjacencyRule(YieldType.PRODUCTION, (Tally("Quarry(ies)", _improvement(Improvement.QUARRY)),)),
        AdjacencyRule(
            YieldType.PRODUCTION,
            (
                Tally("Aqueduct(s)", _district(District.AQUEDUCT)),
                Tally("Dam(s)", _district(District.DAM)),
                Tally("Canal(s)", _district(District.CANAL)),
            ),
            amount_each=2,
        ),
        _per_two_districts(YieldType.PRODUCTION),
        AdjacencyRule(YieldType.PRODUCTION, (Tally("Strategic Resource(s)", _strategic_resource),)),
    ),
    District.PRESERVE: (),
    District.GOVERNMENT_PLAZA: (),
}


def rules_for(district: District) -> tuple[AdjacencyRule, ...]:
    """Return the adjacency rules of ``district``; empty when it has none."""
    return ADJACENCY_RULES.get(district, ())
