"""Static game data: intrinsic yields and placement rules.

Every enum member has exactly one entry in its table, including the
``NONE`` members, so lookups never need a fallback.
"""

from __future__ import annotations

from dataclasses import dataclass

from hexplanner.rules.types import (
    District,
    Feature,
    NaturalWonder,
    Resource,
    ResourceCategory,
    Terrain,
    Wonder,
)
from hexplanner.rules.yields import YieldType, Yields

_LAND = (Terrain.GRASS, Terrain.PLAINS, Terrain.DESERT, Terrain.TUNDRA, Terrain.SNOW)


@dataclass(frozen=True)
class TerrainInfo:
    """Properties of a base terrain."""

    name: str
    yields: Yields
    movement_cost: int
    is_water: bool


@dataclass(frozen=True)
class FeatureInfo:
    """Properties of a feature, including where it may be placed."""

    name: str
    yields: Yields
    valid_terrains: tuple[Terrain, ...]
    removable: bool
    appeal_modifier: int


@dataclass(frozen=True)
class ResourceInfo:
    """Properties of a resource."""

    name: str
    category: ResourceCategory
    yields: Yields
    valid_terrains: tuple[Terrain, ...]
    valid_features: tuple[Feature, ...]


@dataclass(frozen=True)
class DistrictInfo:
    """Properties of a district.

    Attributes:
        name: Display name.
        base_yields: Flat yields of the district itself.
        primary_yield: Yield its adjacency bonuses feed, or None.
        requires_coast: Must sit on a water cell.
        requires_land: Must sit on a land cell.
        can_build_on_hills: False when hills are forbidden.
        is_specialty: Counts toward city specialty-district limits.
        description: Short rules summary.
    """

    name: str
    base_yields: Yields
    primary_yield: YieldType | None
    requires_coast: bool
    requires_land: bool
    can_build_on_hills: bool
    is_specialty: bool
    description: str


@dataclass(frozen=True)
class WonderInfo:
    """Properties of a player-built wonder."""

    name: str
    era: str
    yields: Yields
    description: str
    provides_adjacency: bool = True


@dataclass(frozen=True)
class NaturalWonderInfo:
    """Properties of a natural wonder."""

    name: str
    yields: Yields
    tile_count: int
    description: str
    impassable: bool


TERRAIN_DATA: dict[Terrain, TerrainInfo] = {
    Terrain.GRASS: TerrainInfo("Grassland", Yields(food=2), 1, is_water=False),
    Terrain.PLAINS: TerrainInfo("Plains", Yields(food=1, production=1), 1, is_water=False),
    Terrain.DESERT: TerrainInfo("Desert", Yields(), 1, is_water=False),
    Terrain.TUNDRA: TerrainInfo("Tundra", Yields(food=1), 1, is_water=False),
    Terrain.SNOW: TerrainInfo("Snow", Yields(), 1, is_water=False),
    Terrain.COAST: TerrainInfo("Coast", Yields(food=1, gold=1), 1, is_water=True),
    Terrain.OCEAN: TerrainInfo("Ocean", Yields(food=1), 1, is_water=True),
}

HILLS_PRODUCTION_BONUS = 1

FEATURE_DATA: dict[Feature, FeatureInfo] = {
    Feature.NONE: FeatureInfo("None", Yields(), (), removable=False, appeal_modifier=0),
    Feature.WOODS: FeatureInfo(
        "Woods",
        Yields(production=1),
        (Terrain.GRASS, Terrain.PLAINS, Terrain.TUNDRA),
        removable=True,
        appeal_modifier=1,
    ),
    Feature.RAINFOREST: FeatureInfo(
        "Rainforest",
        Yields(food=1),
        (Terrain.PLAINS,),
        removable=True,
        appeal_modifier=-1,
    ),
    Feature.MARSH: FeatureInfo(
        "Marsh",
        Yields(food=1),
        (Terrain.GRASS,),
        removable=True,
        appeal_modifier=-1,
    ),
    Feature.FLOODPLAINS: FeatureInfo(
        "Floodplains",
        Yields(food=3),
        (Terrain.DESERT, Terrain.GRASS, Terrain.PLAINS),
        removable=False,
        appeal_modifier=-1,
    ),
    Feature.OASIS: FeatureInfo(
        "Oasis",
        Yields(food=3, gold=1),
        (Terrain.DESERT,),
        removable=False,
        appeal_modifier=1,
    ),
    Feature.REEF: FeatureInfo(
        "Reef",
        Yields(food=1, production=1),
        (Terrain.COAST,),
        removable=False,
        appeal_modifier=0,
    ),
    Feature.ICE: FeatureInfo(
        "Ice",
        Yields(),
        (Terrain.COAST, Terrain.OCEAN),
        removable=False,
        appeal_modifier=0,
    ),
    Feature.VOLCANO: FeatureInfo("Volcano", Yields(), _LAND, removable=False, appeal_modifier=0),
    Feature.GEOTHERMAL_FISSURE: FeatureInfo(
        "Geothermal Fissure",
        Yields(science=1),
        _LAND,
        removable=False,
        appeal_modifier=-1,
    ),
}


def _bonus(name: str, yields: Yields, terrains: tuple[Terrain, ...],
           features: tuple[Feature, ...] = (Feature.NONE,)) -> ResourceInfo:
    return ResourceInfo(name, ResourceCategory.BONUS, yields, terrains, features)


def _luxury(name: str, yields: Yields, terrains: tuple[Terrain, ...],
            features: tuple[Feature, ...] = (Feature.NONE,)) -> ResourceInfo:
    return ResourceInfo(name, ResourceCategory.LUXURY, yields, terrains, features)


def _strategic(name: str, yields: Yields, terrains: tuple[Terrain, ...],
               features: tuple[Feature, ...] = (Feature.NONE,)) -> ResourceInfo:
    return ResourceInfo(name, ResourceCategory.STRATEGIC, yields, terrains, features)


_G, _P, _D, _T, _S = Terrain.GRASS, Terrain.PLAINS, Terrain.DESERT, Terrain.TUNDRA, Terrain.SNOW
_C, _O = Terrain.COAST, Terrain.OCEAN

RESOURCE_DATA: dict[Resource, ResourceInfo] = {
    Resource.NONE: ResourceInfo("None", ResourceCategory.NONE, Yields(), (), ()),
    # Bonus
    Resource.BANANAS: _bonus("Bananas", Yields(food=1), (_P,), (Feature.RAINFOREST,)),
    Resource.CATTLE: _bonus("Cattle", Yields(food=1), (_G,)),
    Resource.COPPER: _bonus("Copper", Yields(gold=2), (_G, _P, _D, _T)),
    Resource.CRABS: _bonus("Crabs", Yields(gold=2), (_C,)),
    Resource.DEER: _bonus("Deer", Yields(production=1), (_T,), (Feature.WOODS,)),
    Resource.FISH: _bonus("Fish", Yields(food=1), (_C, _O)),
    Resource.MAIZE: _bonus("Maize", Yields(gold=2), (_G, _P)),
    Resource.RICE: _bonus("Rice", Yields(food=1), (_G,), (Feature.MARSH,)),
    Resource.SHEEP: _bonus("Sheep", Yields(food=1), (_G, _P, _D, _T)),
    Resource.STONE: _bonus("Stone", Yields(production=1), (_G, _P, _D, _T)),
    Resource.WHEAT: _bonus("Wheat", Yields(food=1), (_P,), (Feature.FLOODPLAINS,)),
    # Luxury
    Resource.AMBER: _luxury("Amber", Yields(gold=3), (_G, _P), (Feature.WOODS,)),
    Resource.CITRUS: _luxury("Citrus", Yields(food=2), (_G, _P)),
    Resource.COCOA: _luxury("Cocoa", Yields(gold=3), (_P,), (Feature.RAINFOREST,)),
    Resource.COFFEE: _luxury("Coffee", Yields(culture=1), (_G, _P)),
    Resource.COTTON: _luxury("Cotton", Yields(gold=3), (_G, _P)),
    Resource.DIAMONDS: _luxury("Diamonds", Yields(gold=3), (_G, _P, _D, _T), (Feature.RAINFOREST,)),
    Resource.DYES: _luxury("Dyes", Yields(faith=1), (_P,), (Feature.RAINFOREST, Feature.WOODS)),
    Resource.FURS: _luxury("Furs", Yields(food=1, gold=1), (_T,), (Feature.WOODS,)),
    Resource.GYPSUM: _luxury("Gypsum", Yields(production=1, gold=1), (_P, _D)),
    Resource.HONEY: _luxury("Honey", Yields(food=2), (_G, _P)),
    Resource.INCENSE: _luxury("Incense", Yields(faith=1), (_P, _D)),
    Resource.IVORY: _luxury("Ivory", Yields(production=1, gold=1), (_P, _D)),
    Resource.JADE: _luxury("Jade", Yields(culture=1), (_G, _P, _T), (Feature.WOODS,)),
    Resource.MARBLE: _luxury("Marble", Yields(culture=1), (_G, _P)),
    Resource.MERCURY: _luxury("Mercury", Yields(science=1), (_P,)),
    Resource.PEARLS: _luxury("Pearls", Yields(faith=1), (_C,)),
    Resource.SALT: _luxury("Salt", Yields(food=1, gold=1), (_P, _D, _T)),
    Resource.SILK: _luxury("Silk", Yields(culture=1), (_G, _P), (Feature.WOODS,)),
    Resource.SILVER: _luxury("Silver", Yields(gold=3), (_D, _T)),
    Resource.SPICES: _luxury("Spices", Yields(food=2), (_P,), (Feature.RAINFOREST,)),
    Resource.SUGAR: _luxury("Sugar", Yields(food=2), (_G,), (Feature.FLOODPLAINS, Feature.MARSH)),
    Resource.TEA: _luxury("Tea", Yields(culture=1), (_G, _P)),
    Resource.TOBACCO: _luxury("Tobacco", Yields(faith=1), (_G, _P)),
    Resource.TRUFFLES: _luxury(
        "Truffles",
        Yields(gold=3),
        (_G, _P, _T),
        (Feature.RAINFOREST, Feature.MARSH, Feature.WOODS),
    ),
    Resource.WHALES: _luxury("Whales", Yields(production=1, gold=1), (_C, _O)),
    Resource.WINE: _luxury("Wine", Yields(food=1, gold=1), (_G, _P)),
    # Strategic
    Resource.HORSES: _strategic("Horses", Yields(food=1, production=1), (_G, _P, _T)),
    Resource.IRON: _strategic("Iron", Yields(science=1), (_G, _P, _D, _T, _S)),
    Resource.NITER: _strategic("Niter", Yields(food=1, production=1), (_G, _P, _D, _T)),
    Resource.COAL: _strategic("Coal", Yields(production=2), (_G, _P)),
    Resource.OIL: _strategic(
        "Oil",
        Yields(production=3),
        (_D, _T, _S, _C, _O),
        (Feature.RAINFOREST, Feature.MARSH),
    ),
    Resource.ALUMINUM: _strategic("Aluminum", Yields(science=1), (_P, _D)),
    Resource.URANIUM: _strategic(
        "Uranium",
        Yields(production=2),
        (_G, _P, _D, _T, _S),
        (Feature.RAINFOREST, Feature.MARSH, Feature.WOODS),
    ),
}


def _district(
    name: str,
    primary_yield: YieldType | None = None,
    *,
    base_yields: Yields | None = None,
    requires_coast: bool = False,
    requires_land: bool = True,
    can_build_on_hills: bool = True,
    is_specialty: bool = True,
    description: str = "",
) -> DistrictInfo:
    return DistrictInfo(
        name=name,
        base_yields=base_yields or Yields(),
        primary_yield=primary_yield,
        requires_coast=requires_coast,
        requires_land=requires_land,
        can_build_on_hills=can_build_on_hills,
        is_specialty=is_specialty,
        description=description,
    )


DISTRICT_DATA: dict[District, DistrictInfo] = {
    District.NONE: _district("None", requires_land=False, is_specialty=False),
    District.CITY_CENTER: _district(
        "City Center",
        base_yields=Yields(food=2, production=1),
        is_specialty=False,
        description="The heart of your city.",
    ),
    District.HOLY_SITE: _district(
        "Holy Site",
        YieldType.FAITH,
        description=(
            "+1 Faith for each adjacent Mountain. "
            "+1 Faith for every 2 adjacent Woods and district tiles."
        ),
    ),
    District.CAMPUS: _district(
        "Campus",
        YieldType.SCIENCE,
        description=(
            "+1 Science for each adjacent Mountain. "
            "+1 Science for every 2 adjacent Rainforest and district tiles."
        ),
    ),
    District.THEATER_SQUARE: _district(
        "Theater Square",
        YieldType.CULTURE,
        description=(
            "+2 Culture for each adjacent Wonder. "
            "+1 Culture for every 2 adjacent district tiles."
        ),
    ),
    District.COMMERCIAL_HUB: _district(
        "Commercial Hub",
        YieldType.GOLD,
        description=(
            "+2 Gold when next to a River. +2 Gold for each adjacent Harbor. "
            "+1 Gold for every 2 adjacent district tiles."
        ),
    ),
    District.HARBOR: _district(
        "Harbor",
        YieldType.GOLD,
        requires_coast=True,
        requires_land=False,
        can_build_on_hills=False,
        description=(
            "+1 Gold for each adjacent Coastal resource. "
            "+2 Gold for each adjacent City Center. "
            "+1 Gold for every 2 adjacent district tiles."
        ),
    ),
    District.INDUSTRIAL_ZONE: _district(
        "Industrial Zone",
        YieldType.PRODUCTION,
        description=(
            "+1 Production for each adjacent Mine. "
            "+1 Production for each adjacent Quarry. "
            "+2 Production for each adjacent Aqueduct, Canal, or Dam."
        ),
    ),
    District.ENTERTAINMENT_COMPLEX: _district(
        "Entertainment Complex",
        description="Provides Amenities to your city.",
    ),
    District.WATER_PARK: _district(
        "Water Park",
        requires_coast=True,
        requires_land=False,
        can_build_on_hills=False,
        description="Coastal entertainment district providing Amenities.",
    ),
    District.AQUEDUCT: _district(
        "Aqueduct",
        can_build_on_hills=False,
        is_specialty=False,
        description="Must be built adjacent to the City Center and a source of fresh water.",
    ),
    District.NEIGHBORHOOD: _district(
        "Neighborhood",
        is_specialty=False,
        description="Provides Housing based on Appeal.",
    ),
    District.SPACEPORT: _district(
        "Spaceport",
        can_build_on_hills=False,
        description="Allows construction of Space Race projects.",
    ),
    District.AERODROME: _district(
        "Aerodrome",
        can_build_on_hills=False,
        description="Allows construction of air units.",
    ),
    District.ENCAMPMENT: _district(
        "Encampment",
        description="Military district. Cannot be adjacent to City Center.",
    ),
    District.GOVERNMENT_PLAZA: _district(
        "Government Plaza",
        description="Can only be built once. +1 adjacency bonus to all adjacent districts.",
    ),
    District.DIPLOMATIC_QUARTER: _district(
        "Diplomatic Quarter",
        description="Diplomatic district.",
    ),
    District.PRESERVE: _district(
        "Preserve",
        description="Cannot be adjacent to any other district. Increases Appeal of adjacent tiles.",
    ),
    District.DAM: _district(
        "Dam",
        can_build_on_hills=False,
        is_specialty=False,
        description=(
            "Must be built on Floodplains. "
            "Prevents flooding and provides bonus to Industrial Zones."
        ),
    ),
    District.CANAL: _district(
        "Canal",
        YieldType.GOLD,
        base_yields=Yields(gold=2),
        can_build_on_hills=False,
        is_specialty=False,
        description="Must be built between City Center and water, or between two water tiles.",
    ),
}


WONDER_DATA: dict[Wonder, WonderInfo] = {
    Wonder.NONE: WonderInfo("None", "", Yields(), "", provides_adjacency=False),
    # Ancient
    Wonder.STONEHENGE: WonderInfo("Stonehenge", "Ancient", Yields(faith=2), "Provides a free Great Prophet."),
    Wonder.PYRAMIDS: WonderInfo("Pyramids", "Ancient", Yields(culture=2), "Builders gain an extra charge."),
    Wonder.HANGING_GARDENS: WonderInfo("Hanging Gardens", "Ancient", Yields(food=2), "+15% Growth in all cities."),
    Wonder.ORACLE: WonderInfo("Oracle", "Ancient", Yields(culture=1, faith=1), "Great People cost less."),
    Wonder.GREAT_BATH: WonderInfo("Great Bath", "Ancient", Yields(faith=3), "Floodplains generate Faith."),
    Wonder.TEMPLE_OF_ARTEMIS: WonderInfo(
        "Temple of Artemis", "Ancient", Yields(food=4),
        "+1 Amenity for each Camp, Pasture, and Plantation.",
    ),
    Wonder.ETEMENANKI: WonderInfo(
        "Etemenanki", "Ancient", Yields(science=2),
        "Floodplains and Marsh tiles gain Science and Production.",
    ),
    # Classical
    Wonder.COLOSSEUM: WonderInfo(
        "Colosseum", "Classical", Yields(culture=2),
        "+3 Loyalty and +2 Amenities to cities within 6 tiles.",
    ),
    Wonder.COLOSSUS: WonderInfo("Colossus", "Classical", Yields(gold=3), "+1 Trade Route capacity."),
    Wonder.GREAT_LIBRARY: WonderInfo(
        "Great Library", "Classical", Yields(science=2),
        "Receive boosts to Ancient and Classical technologies.",
    ),
    Wonder.GREAT_LIGHTHOUSE: WonderInfo(
        "Great Lighthouse", "Classical", Yields(gold=3), "+1 Movement for naval units.",
    ),
    Wonder.JEBEL_BARKAL: WonderInfo("Jebel Barkal", "Classical", Yields(faith=4), "Awards 2 Iron."),
    Wonder.MAHABODHI_TEMPLE: WonderInfo("Mahabodhi Temple", "Classical", Yields(faith=4), "Grants 2 Apostles."),
    Wonder.MAUSOLEUM_AT_HALICARNASSUS: WonderInfo(
        "Mausoleum at Halicarnassus", "Classical", Yields(science=1, culture=1, faith=1),
        "Great Engineers have additional charges.",
    ),
    Wonder.PETRA: WonderInfo(
        "Petra", "Classical", Yields(culture=2),
        "Desert tiles gain +2 Food, +2 Gold, +1 Production.",
    ),
    Wonder.TERRACOTTA_ARMY: WonderInfo(
        "Terracotta Army", "Classical", Yields(culture=2), "All land units gain a promotion.",
    ),
    Wonder.APADANA: WonderInfo("Apadana", "Classical", Yields(culture=2), "+2 Envoys when a Wonder is completed."),
    Wonder.STATUE_OF_ZEUS: WonderInfo(
        "Statue of Zeus", "Classical", Yields(gold=3), "+50% Production toward anti-cavalry units.",
    ),
    # Medieval
    Wonder.ALHAMBRA: WonderInfo("Alhambra", "Medieval", Yields(science=2, culture=2), "Provides Military Policy slot."),
    Wonder.ANGKOR_WAT: WonderInfo(
        "Angkor Wat", "Medieval", Yields(faith=2), "+1 Population and +1 Housing in all cities.",
    ),
    Wonder.CHICHEN_ITZA: WonderInfo(
        "Chichen Itza", "Medieval", Yields(culture=2), "Rainforest tiles gain +2 Culture and +1 Production.",
    ),
    Wonder.HAGIA_SOPHIA: WonderInfo(
        "Hagia Sophia", "Medieval", Yields(faith=4), "Missionaries and Apostles +1 Spread Religion charge.",
    ),
    Wonder.KILWA_KISIWANI: WonderInfo("Kilwa Kisiwani", "Medieval", Yields(gold=3), "City-State bonuses improved."),
    Wonder.KOTOKU_IN: WonderInfo(
        "Kotoku-in", "Medieval", Yields(faith=5), "+4 Faith for each Holy Site in your empire.",
    ),
    Wonder.MEENAKSHI_TEMPLE: WonderInfo(
        "Meenakshi Temple", "Medieval", Yields(faith=3), "Gurus +2 Religious Strength.",
    ),
    Wonder.MONT_ST_MICHEL: WonderInfo("Mont St. Michel", "Medieval", Yields(faith=2), "Apostles gain Martyr."),
    Wonder.UNIVERSIDAD_DE_SALAMANCA: WonderInfo(
        "Universidad de Salamanca", "Medieval", Yields(science=3), "+1 Science per Trade Route.",
    ),
    # Renaissance
    Wonder.FORBIDDEN_CITY: WonderInfo(
        "Forbidden City", "Renaissance", Yields(culture=5), "Provides Wildcard Policy slot.",
    ),
    Wonder.GREAT_ZIMBABWE: WonderInfo(
        "Great Zimbabwe", "Renaissance", Yields(gold=5), "+2 Gold per bonus resource.",
    ),
    Wonder.HUEY_TEOCALLI: WonderInfo(
        "Huey Teocalli", "Renaissance", Yields(faith=1), "+1 Amenity for each Lake tile.",
    ),
    Wonder.POTALA_PALACE: WonderInfo(
        "Potala Palace", "Renaissance", Yields(culture=2, faith=3), "Provides Diplomatic Policy slot.",
    ),
    Wonder.ST_BASILS_CATHEDRAL: WonderInfo(
        "St. Basil's Cathedral", "Renaissance", Yields(faith=3), "+100% Religious Tourism from this city.",
    ),
    Wonder.TAJ_MAHAL: WonderInfo(
        "Taj Mahal", "Renaissance", Yields(culture=1), "+2 Era Score from Historic Moments.",
    ),
    Wonder.TORRE_DE_BELEM: WonderInfo(
        "Torre de Belém", "Renaissance", Yields(gold=5), "International Trade Routes +2 Gold.",
    ),
    Wonder.VENETIAN_ARSENAL: WonderInfo(
        "Venetian Arsenal", "Renaissance", Yields(production=2), "Receive a second naval unit when training.",
    ),
    # Industrial
    Wonder.BIG_BEN: WonderInfo("Big Ben", "Industrial", Yields(gold=6), "+1 Economic Policy slot."),
    Wonder.BOLSHOI_THEATRE: WonderInfo(
        "Bolshoi Theatre", "Industrial", Yields(culture=2), "Grants 2 randomly chosen civics.",
    ),
    Wonder.HERMITAGE: WonderInfo("Hermitage", "Industrial", Yields(culture=3), "+3 Great Artist points per turn."),
    Wonder.OXFORD_UNIVERSITY: WonderInfo(
        "Oxford University", "Industrial", Yields(science=3), "Grants 2 randomly chosen technologies.",
    ),
    Wonder.RUHR_VALLEY: WonderInfo(
        "Ruhr Valley", "Industrial", Yields(production=1), "+30% Production in this city.",
    ),
    Wonder.STATUE_OF_LIBERTY: WonderInfo(
        "Statue of Liberty", "Industrial", Yields(), "+4 Diplomatic Favor per turn.",
    ),
    # Modern
    Wonder.BROADWAY: WonderInfo("Broadway", "Modern", Yields(culture=3), "Grants free Atomic Era civic."),
    Wonder.CRISTO_REDENTOR: WonderInfo(
        "Cristo Redentor", "Modern", Yields(culture=4), "Religious Tourism not diminished.",
    ),
    Wonder.EIFFEL_TOWER: WonderInfo("Eiffel Tower", "Modern", Yields(), "+2 Appeal to all tiles."),
    Wonder.GOLDEN_GATE_BRIDGE: WonderInfo(
        "Golden Gate Bridge", "Modern", Yields(), "+3 Appeal to adjacent tiles. +4 Tourism.",
    ),
    Wonder.PANAMA_CANAL: WonderInfo("Panama Canal", "Modern", Yields(gold=10), "Connects two water bodies."),
    # Atomic
    Wonder.BIOSPHERE: WonderInfo(
        "Biosphere", "Atomic", Yields(science=4), "+1 Power for each Rainforest and Marsh.",
    ),
    Wonder.ESTADIO_DO_MARACANA: WonderInfo(
        "Estádio do Maracanã", "Atomic", Yields(culture=6), "+2 Amenities in all cities.",
    ),
    Wonder.SYDNEY_OPERA_HOUSE: WonderInfo(
        "Sydney Opera House", "Atomic", Yields(culture=5), "+5 Great Musician points per turn.",
    ),
    # Information
    Wonder.AMUNDSEN_SCOTT_RESEARCH_STATION: WonderInfo(
        "Amundsen-Scott Research Station", "Information", Yields(science=5), "+10% Science in all cities.",
    ),
}


NATURAL_WONDER_DATA: dict[NaturalWonder, NaturalWonderInfo] = {
    NaturalWonder.NONE: NaturalWonderInfo("None", Yields(), 0, "", impassable=False),
    NaturalWonder.CLIFFS_OF_DOVER: NaturalWonderInfo(
        "Cliffs of Dover", Yields(gold=2, culture=3), 2, "Coastal cliffs with high appeal.", impassable=True,
    ),
    NaturalWonder.CRATER_LAKE: NaturalWonderInfo(
        "Crater Lake", Yields(science=1, faith=4), 1, "Fresh water source.", impassable=False,
    ),
    NaturalWonder.DEAD_SEA: NaturalWonderInfo(
        "Dead Sea", Yields(culture=2, faith=2), 2, "Units heal automatically.", impassable=False,
    ),
    NaturalWonder.EVEREST: NaturalWonderInfo(
        "Mount Everest", Yields(faith=2), 3, "Religious units ignore hills movement cost.", impassable=True,
    ),
    NaturalWonder.GALAPAGOS_ISLANDS: NaturalWonderInfo(
        "Galápagos Islands", Yields(science=2), 2, "High science yield.", impassable=False,
    ),
    NaturalWonder.GREAT_BARRIER_REEF: NaturalWonderInfo(
        "Great Barrier Reef", Yields(food=3, science=2), 2, "High appeal coastal wonder.", impassable=False,
    ),
    NaturalWonder.KILIMANJARO: NaturalWonderInfo(
        "Mount Kilimanjaro", Yields(food=2, culture=2), 1, "Adjacent units ignore hills movement.",
        impassable=True,
    ),
    NaturalWonder.PANTANAL: NaturalWonderInfo(
        "Pantanal", Yields(food=2, culture=2), 4, "Large wetland wonder.", impassable=False,
    ),
    NaturalWonder.PIOPIOTAHI: NaturalWonderInfo(
        "Piopiotahi", Yields(gold=2, culture=1), 3, "Milford Sound fjord.", impassable=False,
    ),
    NaturalWonder.TORRES_DEL_PAINE: NaturalWonderInfo(
        "Torres del Paine", Yields(), 2, "Doubles terrain yields of adjacent tiles.", impassable=True,
    ),
    NaturalWonder.TSINGY_DE_BEMARAHA: NaturalWonderInfo(
        "Tsingy de Bemaraha", Yields(science=1, culture=1), 1, "Stone forest of Madagascar.", impassable=True,
    ),
    NaturalWonder.YOSEMITE: NaturalWonderInfo(
        "Yosemite", Yields(gold=1, science=1), 2, "Iconic granite cliffs.", impassable=True,
    ),
    NaturalWonder.ZHANGYE_DANXIA: NaturalWonderInfo(
        "Zhangye Danxia", Yields(), 3, "Rainbow mountains of China.", impassable=True,
    ),
    NaturalWonder.BERMUDA_TRIANGLE: NaturalWonderInfo(
        "Bermuda Triangle", Yields(science=5), 3, "Naval units gain Science.", impassable=False,
    ),
    NaturalWonder.CHOCOLATE_HILLS: NaturalWonderInfo(
        "Chocolate Hills", Yields(food=2, production=1), 3, "Geological formation in Philippines.",
        impassable=False,
    ),
    NaturalWonder.DELICATE_ARCH: NaturalWonderInfo(
        "Delicate Arch", Yields(gold=1, faith=2), 1, "Utah sandstone arch.", impassable=True,
    ),
    NaturalWonder.EYE_OF_THE_SAHARA: NaturalWonderInfo(
        "Eye of the Sahara", Yields(production=1, science=1), 3, "Richat Structure.", impassable=False,
    ),
    NaturalWonder.GIANTS_CAUSEWAY: NaturalWonderInfo(
        "Giant's Causeway", Yields(culture=2), 2, "Basalt columns in Ireland.", impassable=False,
    ),
    NaturalWonder.GOBUSTAN: NaturalWonderInfo(
        "Gobustan", Yields(production=1, culture=3), 1, "Ancient rock carvings.", impassable=False,
    ),
    NaturalWonder.HA_LONG_BAY: NaturalWonderInfo(
        "Hạ Long Bay", Yields(food=1, production=1, culture=1), 2, "Limestone karsts of Vietnam.",
        impassable=False,
    ),
    NaturalWonder.IK_KIL: NaturalWonderInfo(
        "Ik-Kil", Yields(science=1, faith=1), 1, "Sacred cenote of Maya.", impassable=False,
    ),
    NaturalWonder.LAKE_RETBA: NaturalWonderInfo(
        "Lake Retba", Yields(gold=2, culture=2), 1, "Pink lake in Senegal.", impassable=False,
    ),
    NaturalWonder.MATO_TIPILA: NaturalWonderInfo(
        "Mato Tipila", Yields(production=1, faith=1), 1, "Devil's Tower.", impassable=True,
    ),
    NaturalWonder.MATTERHORN: NaturalWonderInfo(
        "Matterhorn", Yields(culture=1), 1, "Iconic Alpine peak.", impassable=True,
    ),
    NaturalWonder.PAMUKKALE: NaturalWonderInfo(
        "Pamukkale", Yields(gold=2, culture=2), 2, "Turkish travertine terraces.", impassable=False,
    ),
    NaturalWonder.RORAIMA: NaturalWonderInfo(
        "Mount Roraima", Yields(science=1, faith=1), 4, "Tabletop mountain.", impassable=True,
    ),
    NaturalWonder.SAHARA_EL_BEYDA: NaturalWonderInfo(
        "Sahara el Beyda", Yields(gold=2, culture=2), 4, "White Desert of Egypt.", impassable=False,
    ),
    NaturalWonder.UBSUNUR_HOLLOW: NaturalWonderInfo(
        "Ubsunur Hollow", Yields(production=1, faith=2), 4, "UNESCO biosphere reserve.", impassable=False,
    ),
    NaturalWonder.ULURU: NaturalWonderInfo(
        "Uluru", Yields(culture=2, faith=2), 1, "Sacred Australian monolith.", impassable=True,
    ),
    NaturalWonder.VESUVIUS: NaturalWonderInfo(
        "Mount Vesuvius", Yields(), 1, "Active volcano near Naples.", impassable=True,
    ),
    NaturalWonder.VINLAND: NaturalWonderInfo(
        "Vinland", Yields(food=2, culture=1), 2, "Viking settlement site.", impassable=False,
    ),
    NaturalWonder.WHITE_DESERT: NaturalWonderInfo(
        "White Desert", Yields(science=1, culture=1), 2, "Chalk formations in Egypt.", impassable=False,
    ),
}
