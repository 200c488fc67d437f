"""Versioned snapshot schema for saved maps.

The snapshot is the persisted-state boundary, so its field names and enum
identifiers are fixed:

    {"version": 1, "name": ..., "width": ..., "height": ...,
     "tiles": [{"coord": {"q": .., "r": ..}, "terrain": .., "modifier": ..,
                "feature": .., "resource": .., "district": .., "wonder": ..,
                "naturalWonder": .., "improvement": .., "riverEdges": [..],
                "ownerCityId": .. | null, "isCityCenter": ..}, ...]}

Pydantic models check the structure; :mod:`hexplanner.world.game_map`
turns records into cells.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool, StrictInt, field_validator, model_validator

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

SNAPSHOT_VERSION = 1


class CoordRecord(BaseModel):
    """Axial coordinate as stored in a snapshot."""

    q: StrictInt
    r: StrictInt


class TileRecord(BaseModel):
    """One cell as stored in a snapshot."""

    coord: CoordRecord
    terrain: Terrain
    modifier: TerrainModifier
    feature: Feature
    resource: Resource
    district: District
    wonder: Wonder
    natural_wonder: NaturalWonder = Field(alias="naturalWonder")
    improvement: Improvement
    river_edges: list[StrictInt] = Field(alias="riverEdges")
    owner_city_id: str | None = Field(alias="ownerCityId")
    is_city_center: StrictBool = Field(alias="isCityCenter")

    @field_validator("river_edges")
    @classmethod
    def _check_river_edges(cls, edges: list[int]) -> list[int]:
        for edge in edges:
            if not 0 <= edge < 6:
                msg = f"river edge {edge} outside 0..5"
                raise ValueError(msg)
        if len(set(edges)) != len(edges):
            msg = "river edges must not repeat"
            raise ValueError(msg)
        return edges


class MapSnapshot(BaseModel):
    """A whole map as stored in a snapshot."""

    version: StrictInt
    name: str
    width: StrictInt
    height: StrictInt
    tiles: list[TileRecord]

    @field_validator("version")
    @classmethod
    def _check_version(cls, version: int) -> int:
        if version != SNAPSHOT_VERSION:
            msg = f"unsupported snapshot version {version}"
            raise ValueError(msg)
        return version

    @model_validator(mode="after")
    def _check_unique_coords(self) -> MapSnapshot:
        seen: set[tuple[int, int]] = set()
        for tile in self.tiles:
            key = (tile.coord.q, tile.coord.r)
            if key in seen:
                msg = f"duplicate tile at {key}"
                raise ValueError(msg)
            seen.add(key)
        return self
