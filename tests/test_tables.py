"""Tests for hexplanner.rules tables and yields."""

from __future__ import annotations

from enum import Enum

import pytest

from hexplanner.rules.tables import (
    DISTRICT_DATA,
    FEATURE_DATA,
    NATURAL_WONDER_DATA,
    RESOURCE_DATA,
    TERRAIN_DATA,
    WONDER_DATA,
)
from hexplanner.rules.types import (
    District,
    Feature,
    NaturalWonder,
    Resource,
    ResourceCategory,
    Terrain,
    Wonder,
)
from hexplanner.rules.yields import ZERO_YIELDS, YieldType, Yields


class TestCoverage:
    """Every enum member has exactly one table entry."""

    @pytest.mark.parametrize(
        ("enum_type", "table"),
        [
            (Terrain, TERRAIN_DATA),
            (Feature, FEATURE_DATA),
            (Resource, RESOURCE_DATA),
            (District, DISTRICT_DATA),
            (Wonder, WONDER_DATA),
            (NaturalWonder, NATURAL_WONDER_DATA),
        ],
    )
    def test_table_covers_enum(self, enum_type: type[Enum], table: dict) -> None:
        assert set(table) == set(enum_type)


class TestData:
    """Spot checks of game data."""

    def test_water_flags_agree(self) -> None:
        for terrain, info in TERRAIN_DATA.items():
            assert info.is_water == terrain.is_water

    def test_snapshot_identifiers(self) -> None:
        assert Feature.WOODS.value == "forest"
        assert Feature.RAINFOREST.value == "jungle"

    def test_primary_yields(self) -> None:
        assert DISTRICT_DATA[District.CAMPUS].primary_yield is YieldType.SCIENCE
        assert DISTRICT_DATA[District.HOLY_SITE].primary_yield is YieldType.FAITH
        assert DISTRICT_DATA[District.THEATER_SQUARE].primary_yield is YieldType.CULTURE
        assert DISTRICT_DATA[District.COMMERCIAL_HUB].primary_yield is YieldType.GOLD
        assert DISTRICT_DATA[District.HARBOR].primary_yield is YieldType.GOLD
        assert DISTRICT_DATA[District.INDUSTRIAL_ZONE].primary_yield is YieldType.PRODUCTION
        assert DISTRICT_DATA[District.PRESERVE].primary_yield is None

    def test_coastal_districts(self) -> None:
        for district in (District.HARBOR, District.WATER_PARK):
            info = DISTRICT_DATA[district]
            assert info.requires_coast
            assert not info.requires_land
            assert not info.can_build_on_hills

    def test_strategic_category(self) -> None:
        assert RESOURCE_DATA[Resource.IRON].category is ResourceCategory.STRATEGIC
        assert RESOURCE_DATA[Resource.NONE].category is ResourceCategory.NONE

    def test_none_entries_yield_nothing(self) -> None:
        assert FEATURE_DATA[Feature.NONE].yields == ZERO_YIELDS
        assert RESOURCE_DATA[Resource.NONE].yields == ZERO_YIELDS
        assert not NATURAL_WONDER_DATA[NaturalWonder.NONE].impassable


class TestYields:
    """Tests for the Yields record."""

    def test_zero_default(self) -> None:
        assert Yields() == ZERO_YIELDS
        assert all(v == 0 for v in ZERO_YIELDS.as_dict().values())

    def test_add(self) -> None:
        total = Yields(food=1, gold=2) + Yields(food=3, faith=1)
        assert total == Yields(food=4, gold=2, faith=1)

    def test_plus_and_get(self) -> None:
        yields = ZERO_YIELDS.plus(YieldType.SCIENCE, 3)
        assert yields.get(YieldType.SCIENCE) == 3
        assert ZERO_YIELDS.get(YieldType.SCIENCE) == 0

    def test_as_dict_order(self) -> None:
        assert list(Yields().as_dict()) == [
            "food",
            "production",
            "gold",
            "science",
            "culture",
            "faith",
        ]
