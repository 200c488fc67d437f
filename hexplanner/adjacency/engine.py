"""Adjacency evaluation for districts on a :class:`GameMap`.

The engine is a read-only view over a map: it never changes a cell.
Hypothetical placements are evaluated on a copy of the target cell while
neighbours are read from the real map.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from hexplanner.adjacency.report import format_city_report
from hexplanner.adjacency.rules import (
    GOVERNMENT_PLAZA_BONUS,
    GOVERNMENT_PLAZA_SOURCE,
    rules_for,
)
from hexplanner.hexgrid.coords import HexCoord, hexes_in_range
from hexplanner.rules.tables import DISTRICT_DATA
from hexplanner.rules.types import District
from hexplanner.rules.yields import ZERO_YIELDS, YieldType, Yields
from hexplanner.world.cell import Cell
from hexplanner.world.game_map import CITY_WORKABLE_RANGE, GameMap

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AdjacencyBonus:
    """One line item of a district's adjacency, e.g. ``+3 science from 3 Mountain(s)``."""

    district: District
    yield_type: YieldType
    amount: int
    source: str


@dataclass(frozen=True)
class DistrictAdjacencyResult:
    """Adjacency of one district.

    Attributes:
        cell: The evaluated cell (a detached copy for hypothetical placements).
        district: District being evaluated.
        total: Sum of all bonuses, per yield.
        bonuses: Non-zero line items in rule order.
    """

    cell: Cell
    district: District
    total: Yields
    bonuses: tuple[AdjacencyBonus, ...]

    def primary_score(self) -> int:
        """Total of the district's primary yield, or 0 when it has none."""
        primary = DISTRICT_DATA[self.district].primary_yield
        return 0 if primary is None else self.total.get(primary)


@dataclass(frozen=True)
class CityAdjacencyResult:
    """Adjacency of every district a city can work."""

    city_center: HexCoord
    districts: tuple[DistrictAdjacencyResult, ...]
    total: Yields


@dataclass(frozen=True)
class PlacementSuggestion:
    """Best hex found for a district, with the adjacency it would earn."""

    coord: HexCoord
    result: DistrictAdjacencyResult

    @property
    def score(self) -> int:
        return self.result.primary_score()


class AdjacencyEngine:
    """Computes district adjacency bonuses over a map.

    Args:
        game_map: Map to read.  The engine holds a reference, so later
            edits to the map are seen by later calls.
    """

    def __init__(self, game_map: GameMap) -> None:
        self.game_map = game_map

    # -- Evaluation ----------------------------------------------------------

    def evaluate_cell(self, cell: Cell) -> DistrictAdjacencyResult:
        """Evaluate ``cell``'s district against its neighbours on the map.

        ``cell`` need not be the map's own cell at that coordinate; only its
        coordinate is used to find neighbours.
        """
        neighbours = self.game_map.neighbors(cell.coord)
        district = cell.district
        bonuses: list[AdjacencyBonus] = []

        for rule in rules_for(district):
            amount, source = rule.evaluate(cell, neighbours)
            if amount > 0:
                bonuses.append(AdjacencyBonus(district, rule.yield_type, amount, source))

        plaza_bonus = _government_plaza_bonus(district, neighbours)
        if plaza_bonus is not None:
            bonuses.append(plaza_bonus)

        total = ZERO_YIELDS
        for bonus in bonuses:
            total = total.plus(bonus.yield_type, bonus.amount)
        return DistrictAdjacencyResult(cell, district, total, tuple(bonuses))

    def calculate_district_adjacency(self, coord: HexCoord) -> DistrictAdjacencyResult | None:
        """Evaluate the district already standing at ``coord``.

        Returns:
            The result, or None when ``coord`` is off the map.  A cell with
            no district yields an empty result.
        """
        cell = self.game_map.cell_at(coord)
        if cell is None:
            return None
        return self.evaluate_cell(cell)

    def calculate_city_adjacency(self, city_center: HexCoord) -> CityAdjacencyResult:
        """Evaluate every district within the city's workable range.

        City Center districts are skipped; everything else with a district
        is evaluated and summed.
        """
        results = tuple(
            self.evaluate_cell(cell)
            for cell in self.game_map.cells_in_range(city_center, CITY_WORKABLE_RANGE)
            if cell.has_district and cell.district is not District.CITY_CENTER
        )
        total = ZERO_YIELDS
        for result in results:
            total = total + result.total

        logger.debug(
            "city adjacency computed",
            city_center=str(city_center),
            districts=len(results),
        )
        return CityAdjacencyResult(city_center, results, total)

    def calculate_potential_adjacency(
        self,
        coord: HexCoord,
        district: District,
    ) -> DistrictAdjacencyResult | None:
        """Evaluate ``district`` as if it were placed at ``coord``.

        The placement is applied to a copy of the cell, so the map is left
        unchanged.

        Returns:
            The hypothetical result, or None when ``coord`` is off the map.

        Raises:
            ValidationError: If the district could not be placed on that cell.
        """
        cell = self.game_map.cell_at(coord)
        if cell is None:
            return None
        candidate = cell.copy().set_district(district)
        return self.evaluate_cell(candidate)

    # -- Placement -----------------------------------------------------------

    @staticmethod
    def can_place_district(cell: Cell, district: District) -> bool:
        """Check the district's own terrain requirements for ``cell``.

        Coast-only districts need water, land districts need land, and some
        districts refuse hills.  Mountains and occupied cells are screened
        separately by the placement search.
        """
        info = DISTRICT_DATA[district]
        if info.requires_coast and not cell.is_water:
            return False
        if info.requires_land and not cell.is_land:
            return False
        return info.can_build_on_hills or not cell.is_hill

    def find_best_district_placement(
        self,
        city_center: HexCoord,
        district: District,
    ) -> PlacementSuggestion | None:
        """Find the hex near a city where ``district`` earns the most.

        Candidates are empty, non-mountain cells within the city's workable
        range that satisfy :meth:`can_place_district`.  They are scored by
        the district's primary yield and visited in range order; the first
        candidate with the highest score wins ties.

        Returns:
            The best suggestion, or None when the city center is off the map
            or no candidate exists.
        """
        if city_center not in self.game_map:
            return None

        best: PlacementSuggestion | None = None
        for coord in hexes_in_range(city_center, CITY_WORKABLE_RANGE):
            cell = self.game_map.cell_at(coord)
            if cell is None or cell.has_district or cell.is_mountain:
                continue
            if not self.can_place_district(cell, district):
                continue
            result = self.calculate_potential_adjacency(coord, district)
            if result is None:
                continue
            suggestion = PlacementSuggestion(coord, result)
            if best is None or suggestion.score > best.score:
                best = suggestion

        if best is not None:
            logger.debug(
                "best placement found",
                district=district.value,
                coord=str(best.coord),
                score=best.score,
            )
        return best

    def generate_report(self, city_center: HexCoord) -> str:
        """Return the printable adjacency report for a city."""
        return format_city_report(self.calculate_city_adjacency(city_center))


def _government_plaza_bonus(district: District, neighbours: list[Cell]) -> AdjacencyBonus | None:
    info = DISTRICT_DATA[district]
    if not info.is_specialty or info.primary_yield is None:
        return None
    if not any(n.district is District.GOVERNMENT_PLAZA for n in neighbours):
        return None
    return AdjacencyBonus(district, info.primary_yield, GOVERNMENT_PLAZA_BONUS, GOVERNMENT_PLAZA_SOURCE)
