"""Tests for hexplanner.adjacency (rule table and engine evaluation)."""

from __future__ import annotations

from hexplanner.adjacency.engine import AdjacencyEngine
from hexplanner.adjacency.rules import ADJACENCY_RULES, rules_for
from hexplanner.hexgrid.coords import HexCoord, neighbors
from hexplanner.rules.tables import DISTRICT_DATA
from hexplanner.rules.types import (
    District,
    Feature,
    Improvement,
    NaturalWonder,
    Resource,
    Terrain,
    TerrainModifier,
    Wonder,
)
from hexplanner.rules.yields import YieldType, Yields
from hexplanner.world.game_map import GameMap

CENTER = HexCoord(3, 3)
# Neighbours of CENTER in direction order:
# (4, 3), (3, 4), (2, 4), (2, 3), (3, 2), (4, 2)
EAST, SOUTH_EAST, SOUTH_WEST, WEST, NORTH_WEST, NORTH_EAST = neighbors(CENTER)


def _mountain(game_map: GameMap, coord: HexCoord) -> None:
    game_map.cell_at(coord).set_terrain(Terrain.PLAINS, TerrainModifier.MOUNTAIN)


def _district(game_map: GameMap, coord: HexCoord, district: District) -> None:
    game_map.cell_at(coord).set_district(district)


def _sources(engine: AdjacencyEngine, coord: HexCoord) -> list[tuple[int, str]]:
    result = engine.calculate_district_adjacency(coord)
    assert result is not None
    return [(b.amount, b.source) for b in result.bonuses]


class TestRuleTable:
    """Shape of the declarative rule table."""

    def test_districts_without_rules(self) -> None:
        assert rules_for(District.PRESERVE) == ()
        assert rules_for(District.GOVERNMENT_PLAZA) == ()
        assert rules_for(District.NEIGHBORHOOD) == ()
        assert rules_for(District.NONE) == ()

    def test_rule_yields_match_primary(self) -> None:
        for district, rules in ADJACENCY_RULES.items():
            for rule in rules:
                assert rule.yield_type is DISTRICT_DATA[district].primary_yield


class TestCampus:
    """Campus: mountains, rainforest/district pairs, fissures, reefs."""

    def test_two_mountains_single_line_item(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.CAMPUS)
        _mountain(small_map, EAST)
        _mountain(small_map, WEST)

        result = engine.calculate_district_adjacency(CENTER)
        assert result is not None
        assert result.total == Yields(science=2)
        assert len(result.bonuses) == 1
        bonus = result.bonuses[0]
        assert bonus.district is District.CAMPUS
        assert bonus.yield_type is YieldType.SCIENCE
        assert bonus.amount == 2
        assert bonus.source == "2 Mountain(s)"

    def test_rainforest_and_districts_pair_up(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.CAMPUS)
        small_map.cell_at(EAST).set_terrain(Terrain.PLAINS).set_feature(Feature.RAINFOREST)
        small_map.cell_at(WEST).set_terrain(Terrain.PLAINS).set_feature(Feature.RAINFOREST)
        _district(small_map, NORTH_WEST, District.HOLY_SITE)

        assert _sources(engine, CENTER) == [(1, "2 Rainforest(s), 1 District(s)")]

    def test_single_district_gives_nothing(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.CAMPUS)
        _district(small_map, EAST, District.HOLY_SITE)

        result = engine.calculate_district_adjacency(CENTER)
        assert result is not None
        assert result.bonuses == ()
        assert result.total == Yields()

    def test_geothermal_fissure_and_reef(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.CAMPUS)
        small_map.cell_at(EAST).set_feature(Feature.GEOTHERMAL_FISSURE)
        small_map.cell_at(WEST).set_terrain(Terrain.COAST).set_feature(Feature.REEF)

        assert _sources(engine, CENTER) == [
            (2, "1 Geothermal Fissure(s)"),
            (2, "1 Reef(s)"),
        ]


class TestHolySite:
    """Holy Site: mountains, woods/district pairs, natural wonders."""

    def test_woods_and_districts(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.HOLY_SITE)
        for coord in (EAST, SOUTH_EAST, SOUTH_WEST):
            small_map.cell_at(coord).set_feature(Feature.WOODS)
        _district(small_map, WEST, District.CAMPUS)
        _mountain(small_map, NORTH_WEST)

        assert _sources(engine, CENTER) == [
            (1, "1 Mountain(s)"),
            (2, "3 Woods, 1 District(s)"),
        ]

    def test_natural_wonder(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.HOLY_SITE)
        small_map.cell_at(EAST).set_natural_wonder(NaturalWonder.CHOCOLATE_HILLS)

        assert _sources(engine, CENTER) == [(2, "1 Natural Wonder(s)")]


class TestTheaterSquare:
    def test_wonders_and_districts(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.THEATER_SQUARE)
        small_map.cell_at(EAST).set_wonder(Wonder.PYRAMIDS)
        _district(small_map, WEST, District.CAMPUS)
        _district(small_map, NORTH_WEST, District.HOLY_SITE)

        result = engine.calculate_district_adjacency(CENTER)
        assert result is not None
        assert [(b.amount, b.source) for b in result.bonuses] == [
            (2, "1 Wonder(s)"),
            (1, "2 District(s)"),
        ]
        assert result.total == Yields(culture=3)


class TestCommercialHub:
    """Commercial Hub: river on its own cell, harbors, district pairs."""

    def test_three_districts_round_down(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.COMMERCIAL_HUB)
        for coord in (EAST, WEST, NORTH_WEST):
            _district(small_map, coord, District.CAMPUS)

        result = engine.calculate_district_adjacency(CENTER)
        assert result is not None
        assert result.total == Yields(gold=1)
        assert [(b.amount, b.source) for b in result.bonuses] == [(1, "3 District(s)")]

    def test_river_adds_flat_bonus(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        small_map.cell_at(CENTER).add_river_edge(2)
        _district(small_map, CENTER, District.COMMERCIAL_HUB)
        for coord in (EAST, WEST, NORTH_WEST):
            _district(small_map, coord, District.CAMPUS)

        result = engine.calculate_district_adjacency(CENTER)
        assert result is not None
        assert result.total == Yields(gold=3)
        assert [(b.amount, b.source) for b in result.bonuses] == [
            (2, "River"),
            (1, "3 District(s)"),
        ]

    def test_river_on_neighbour_does_not_count(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.COMMERCIAL_HUB)
        small_map.cell_at(EAST).add_river_edge(3)

        assert _sources(engine, CENTER) == []

    def test_harbor(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.COMMERCIAL_HUB)
        small_map.cell_at(EAST).set_terrain(Terrain.COAST).set_district(District.HARBOR)

        assert _sources(engine, CENTER) == [(2, "1 Harbor(s)")]


class TestHarbor:
    def test_coastal_resource_and_city_center(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        small_map.cell_at(CENTER).set_terrain(Terrain.COAST).set_district(District.HARBOR)
        small_map.cell_at(EAST).set_terrain(Terrain.COAST).set_resource(Resource.FISH)
        # A land resource does not count as coastal.
        small_map.cell_at(SOUTH_EAST).set_resource(Resource.WHEAT)
        small_map.cell_at(WEST).set_owner("rome", is_city_center=True)

        assert _sources(engine, CENTER) == [
            (1, "1 Coastal Resource(s)"),
            (2, "1 City Center(s)"),
        ]


class TestIndustrialZone:
    def test_all_sources(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.INDUSTRIAL_ZONE)
        small_map.cell_at(EAST).set_improvement(Improvement.MINE)
        small_map.cell_at(SOUTH_EAST).set_improvement(Improvement.QUARRY)
        _district(small_map, SOUTH_WEST, District.AQUEDUCT)
        _district(small_map, WEST, District.DAM)
        small_map.cell_at(NORTH_WEST).set_resource(Resource.IRON)

        result = engine.calculate_district_adjacency(CENTER)
        assert result is not None
        assert [(b.amount, b.source) for b in result.bonuses] == [
            (1, "1 Mine(s)"),
            (1, "1 Quarry(ies)"),
            (4, "1 Aqueduct(s), 1 Dam(s), 0 Canal(s)"),
            (1, "2 District(s)"),
            (1, "1 Strategic Resource(s)"),
        ]
        assert result.total == Yields(production=8)


class TestGovernmentPlaza:
    """The plaza adds +1 primary yield to adjacent specialty districts."""

    def test_adds_one_primary_yield(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.CAMPUS)
        _mountain(small_map, EAST)
        _mountain(small_map, WEST)
        _district(small_map, NORTH_WEST, District.GOVERNMENT_PLAZA)

        result = engine.calculate_district_adjacency(CENTER)
        assert result is not None
        assert result.total == Yields(science=3)
        last = result.bonuses[-1]
        assert (last.yield_type, last.amount, last.source) == (
            YieldType.SCIENCE,
            1,
            "Government Plaza",
        )

    def test_no_bonus_without_primary_yield(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.PRESERVE)
        _district(small_map, EAST, District.GOVERNMENT_PLAZA)
        _mountain(small_map, WEST)

        result = engine.calculate_district_adjacency(CENTER)
        assert result is not None
        assert result.bonuses == ()

    def test_plaza_itself_gets_nothing(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.GOVERNMENT_PLAZA)
        _district(small_map, EAST, District.GOVERNMENT_PLAZA)

        assert _sources(engine, CENTER) == []


class TestEngine:
    """District and city level evaluation."""

    def test_off_map_is_none(self, engine: AdjacencyEngine) -> None:
        assert engine.calculate_district_adjacency(HexCoord(50, 50)) is None

    def test_empty_cell_has_empty_result(self, engine: AdjacencyEngine) -> None:
        result = engine.calculate_district_adjacency(CENTER)
        assert result is not None
        assert result.district is District.NONE
        assert result.bonuses == ()

    def test_edge_cell_counts_existing_neighbours(
        self,
        small_map: GameMap,
        engine: AdjacencyEngine,
    ) -> None:
        _district(small_map, HexCoord(0, 0), District.CAMPUS)
        _mountain(small_map, HexCoord(1, 0))
        _mountain(small_map, HexCoord(0, 1))

        assert _sources(engine, HexCoord(0, 0)) == [(2, "2 Mountain(s)")]

    def test_engine_sees_later_edits(self, small_map: GameMap, engine: AdjacencyEngine) -> None:
        _district(small_map, CENTER, District.CAMPUS)
        assert _sources(engine, CENTER) == []
        _mountain(small_map, EAST)
        assert _sources(engine, CENTER) == [(1, "1 Mountain(s)")]

    def test_city_excludes_center_and_far_districts(
        self,
        small_map: GameMap,
        engine: AdjacencyEngine,
    ) -> None:
        small_map.cell_at(CENTER).set_owner("rome", is_city_center=True)
        _district(small_map, EAST, District.CAMPUS)
        _mountain(small_map, HexCoord(5, 3))
        # Distance 4 from the center: outside the workable range.
        _district(small_map, HexCoord(-1, 3), District.CAMPUS)

        result = engine.calculate_city_adjacency(CENTER)
        assert result.city_center == CENTER
        assert [r.cell.coord for r in result.districts] == [EAST]
        assert result.total == Yields(science=1)

    def test_city_total_sums_districts(self, demo: tuple, demo_engine: AdjacencyEngine) -> None:
        _, city_center = demo
        result = demo_engine.calculate_city_adjacency(city_center)
        assert result.total == sum((r.total for r in result.districts), Yields())


class TestDemoCity:
    """Adjacency of the demo city."""

    def test_districts_in_range_order(self, demo: tuple, demo_engine: AdjacencyEngine) -> None:
        _, city_center = demo
        result = demo_engine.calculate_city_adjacency(city_center)
        assert [r.district for r in result.districts] == [
            District.HOLY_SITE,
            District.CAMPUS,
            District.COMMERCIAL_HUB,
        ]

    def test_campus(self, demo_engine: AdjacencyEngine) -> None:
        assert _sources(demo_engine, HexCoord(4, 3)) == [
            (3, "3 Mountain(s)"),
            (1, "0 Rainforest(s), 2 District(s)"),
        ]

    def test_holy_site(self, demo_engine: AdjacencyEngine) -> None:
        assert _sources(demo_engine, HexCoord(3, 4)) == [
            (1, "1 Mountain(s)"),
            (2, "3 Woods, 2 District(s)"),
        ]

    def test_commercial_hub(self, demo_engine: AdjacencyEngine) -> None:
        assert _sources(demo_engine, HexCoord(5, 4)) == [(2, "River")]

    def test_city_total(self, demo: tuple, demo_engine: AdjacencyEngine) -> None:
        _, city_center = demo
        result = demo_engine.calculate_city_adjacency(city_center)
        assert result.total == Yields(gold=2, science=4, faith=3)
