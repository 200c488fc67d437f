"""A small ready-made city for trying out the adjacency engine."""

from __future__ import annotations

from hexplanner.hexgrid.coords import HexCoord
from hexplanner.rules.types import District, Feature, Terrain, TerrainModifier
from hexplanner.world.game_map import GameMap

DEMO_CITY_ID = "demo_city"
DEMO_CITY_CENTER = HexCoord(4, 4)

_MOUNTAINS = (HexCoord(3, 3), HexCoord(5, 3), HexCoord(4, 2))
_WOODS = (HexCoord(3, 5), HexCoord(2, 5), HexCoord(2, 4))


def build_demo_map() -> tuple[GameMap, HexCoord]:
    """Build the demo map.

    A 10x10 map with a city at (4, 4), three Plains mountains to the north,
    Woods to the south-west, a Campus between the mountains, a Holy Site
    beside the Woods, and a Commercial Hub on a river.

    Returns:
        ``(game_map, city_center)``.
    """
    game_map = GameMap(10, 10, name="Demo Map")

    game_map.cell_at(DEMO_CITY_CENTER).set_owner(DEMO_CITY_ID, is_city_center=True)

    for coord in _MOUNTAINS:
        game_map.cell_at(coord).set_terrain(Terrain.PLAINS, TerrainModifier.MOUNTAIN)
    for coord in _WOODS:
        game_map.cell_at(coord).set_terrain(Terrain.GRASS).set_feature(Feature.WOODS)

    game_map.cell_at(HexCoord(4, 3)).set_terrain(Terrain.PLAINS).set_district(District.CAMPUS)
    game_map.cell_at(HexCoord(3, 4)).set_district(District.HOLY_SITE)

    commercial = game_map.cell_at(HexCoord(5, 4))
    commercial.add_river_edge(0).add_river_edge(1).set_district(District.COMMERCIAL_HUB)

    return game_map, DEMO_CITY_CENTER
