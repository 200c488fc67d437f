"""A single hex on the settlement map.

A cell owns its terrain, feature, resource, district, wonders, improvement,
river edges, and city ownership.  All changes go through the ``set_*``
mutators, which check the placement rules first and either apply the
whole change or raise :class:`~hexplanner.errors.ValidationError` with the
cell untouched.  Derived properties are recomputed on every access.
"""

from __future__ import annotations

from hexplanner.errors import ValidationError
from hexplanner.hexgrid.coords import HexCoord
from hexplanner.rules.tables import (
    FEATURE_DATA,
    HILLS_PRODUCTION_BONUS,
    NATURAL_WONDER_DATA,
    RESOURCE_DATA,
    TERRAIN_DATA,
)
from hexplanner.rules.types import (
    District,
    Feature,
    Improvement,
    NaturalWonder,
    Resource,
    ResourceCategory,
    Terrain,
    TerrainModifier,
    Wonder,
)
from hexplanner.rules.yields import YieldType, Yields

RIVER_EDGE_COUNT = 6

_WATER_DISTRICTS = (District.HARBOR, District.WATER_PARK)


def _check_edge(edge: int) -> None:
    if not 0 <= edge < RIVER_EDGE_COUNT:
        msg = f"River edge must be between 0 and {RIVER_EDGE_COUNT - 1}, got {edge}"
        raise ValidationError(msg)


class Cell:
    """Mutable state of one hex, addressed by an immutable coordinate.

    River edges are kept as a 6-bit mask; bit ``i`` is set when edge ``i``
    (in :data:`~hexplanner.hexgrid.coords.DIRECTIONS` order) carries a river.
    """

    __slots__ = (
        "_coord",
        "_district",
        "_feature",
        "_improvement",
        "_is_city_center",
        "_modifier",
        "_natural_wonder",
        "_owner_city_id",
        "_resource",
        "_river_mask",
        "_terrain",
        "_wonder",
    )

    def __init__(self, coord: HexCoord) -> None:
        """Create a flat grassland cell with nothing on it."""
        self._coord = coord
        self._terrain = Terrain.GRASS
        self._modifier = TerrainModifier.FLAT
        self._feature = Feature.NONE
        self._resource = Resource.NONE
        self._district = District.NONE
        self._wonder = Wonder.NONE
        self._natural_wonder = NaturalWonder.NONE
        self._improvement = Improvement.NONE
        self._river_mask = 0
        self._owner_city_id: str | None = None
        self._is_city_center = False

    @classmethod
    def restore(
        cls,
        coord: HexCoord,
        *,
        terrain: Terrain,
        modifier: TerrainModifier,
        feature: Feature,
        resource: Resource,
        district: District,
        wonder: Wonder,
        natural_wonder: NaturalWonder,
        improvement: Improvement,
        river_mask: int,
        owner_city_id: str | None,
        is_city_center: bool,
    ) -> Cell:
        """Rebuild a cell from saved state without re-running placement rules.

        Used when loading snapshots, so a saved map always loads back
        exactly as it was written.
        """
        cell = cls(coord)
        cell._terrain = terrain
        cell._modifier = modifier
        cell._feature = feature
        cell._resource = resource
        cell._district = district
        cell._wonder = wonder
        cell._natural_wonder = natural_wonder
        cell._improvement = improvement
        cell._river_mask = river_mask
        cell._owner_city_id = owner_city_id
        cell._is_city_center = is_city_center
        return cell

    # -- Stored state --------------------------------------------------------

    @property
    def coord(self) -> HexCoord:
        return self._coord

    @property
    def terrain(self) -> Terrain:
        return self._terrain

    @property
    def modifier(self) -> TerrainModifier:
        return self._modifier

    @property
    def feature(self) -> Feature:
        return self._feature

    @property
    def resource(self) -> Resource:
        return self._resource

    @property
    def district(self) -> District:
        return self._district

    @property
    def wonder(self) -> Wonder:
        return self._wonder

    @property
    def natural_wonder(self) -> NaturalWonder:
        return self._natural_wonder

    @property
    def improvement(self) -> Improvement:
        return self._improvement

    @property
    def river_edges(self) -> frozenset[int]:
        """Edge indices that carry a river."""
        return frozenset(i for i in range(RIVER_EDGE_COUNT) if self._river_mask >> i & 1)

    @property
    def river_mask(self) -> int:
        return self._river_mask

    @property
    def owner_city_id(self) -> str | None:
        return self._owner_city_id

    @property
    def is_city_center(self) -> bool:
        return self._is_city_center

    # -- Mutators ------------------------------------------------------------

    def set_terrain(
        self,
        terrain: Terrain,
        modifier: TerrainModifier = TerrainModifier.FLAT,
    ) -> Cell:
        """Set the base terrain and its elevation together.

        Args:
            terrain: New base terrain.
            modifier: Flat, Hills, or Mountain.

        Returns:
            This cell.

        Raises:
            ValidationError: If Hills or Mountain is requested on water.
        """
        if modifier is not TerrainModifier.FLAT and terrain.is_water:
            msg = f"{modifier.value.capitalize()} cannot be placed on water tiles"
            raise ValidationError(msg)
        self._terrain = terrain
        self._modifier = modifier
        return self

    def set_feature(self, feature: Feature) -> Cell:
        """Place or clear a feature.

        Raises:
            ValidationError: If the feature is not allowed on this terrain.
        """
        if feature is not Feature.NONE and self._terrain not in FEATURE_DATA[feature].valid_terrains:
            msg = f"{feature.value} cannot be placed on {self._terrain.value}"
            raise ValidationError(msg)
        self._feature = feature
        return self

    def set_resource(self, resource: Resource) -> Cell:
        """Place or clear a resource.  Any resource is accepted."""
        self._resource = resource
        return self

    def set_district(self, district: District) -> Cell:
        """Place or clear a district.

        Placing any district removes the cell's feature and improvement.

        Raises:
            ValidationError: If the cell is a Mountain, or is water and the
                district is neither a Harbor nor a Water Park.
        """
        self._check_district(district)
        self._district = district
        if district is not District.NONE:
            self._feature = Feature.NONE
            self._improvement = Improvement.NONE
        return self

    def set_wonder(self, wonder: Wonder) -> Cell:
        """Place or clear a player-built wonder; placing one removes the improvement."""
        self._wonder = wonder
        if wonder is not Wonder.NONE:
            self._improvement = Improvement.NONE
        return self

    def set_natural_wonder(self, natural_wonder: NaturalWonder) -> Cell:
        self._natural_wonder = natural_wonder
        return self

    def set_improvement(self, improvement: Improvement) -> Cell:
        """Place or clear an improvement.

        Raises:
            ValidationError: If the cell holds a district or a wonder.
        """
        if self._district is not District.NONE or self._wonder is not Wonder.NONE:
            msg = "Cannot place improvements on districts or wonders"
            raise ValidationError(msg)
        self._improvement = improvement
        return self

    def add_river_edge(self, edge: int) -> Cell:
        """Mark edge ``edge`` as carrying a river.

        Raises:
            ValidationError: If ``edge`` is outside ``[0, 6)``.
        """
        _check_edge(edge)
        self._river_mask |= 1 << edge
        return self

    def remove_river_edge(self, edge: int) -> Cell:
        """Clear the river on edge ``edge``, if any.

        Raises:
            ValidationError: If ``edge`` is outside ``[0, 6)``.
        """
        _check_edge(edge)
        self._river_mask &= ~(1 << edge)
        return self

    def set_owner(self, city_id: str | None, is_city_center: bool = False) -> Cell:
        """Assign the owning city.

        Marking the cell as a city center also places the City Center
        district, under the same rules as :meth:`set_district`.

        Args:
            city_id: Owning city identifier, or None for unowned.
            is_city_center: Whether this cell is that city's center.

        Raises:
            ValidationError: If a City Center cannot stand on this cell.
        """
        if is_city_center:
            self._check_district(District.CITY_CENTER)
        self._owner_city_id = city_id
        self._is_city_center = is_city_center
        if is_city_center:
            self.set_district(District.CITY_CENTER)
        return self

    def _check_district(self, district: District) -> None:
        if district is District.NONE:
            return
        if self._modifier is TerrainModifier.MOUNTAIN:
            msg = "Districts cannot be placed on mountains"
            raise ValidationError(msg)
        if self._terrain.is_water and district not in _WATER_DISTRICTS:
            msg = "Only Harbor and Water Park can be placed on water"
            raise ValidationError(msg)

    # -- Derived properties --------------------------------------------------

    @property
    def is_water(self) -> bool:
        return self._terrain.is_water

    @property
    def is_land(self) -> bool:
        return not self._terrain.is_water

    @property
    def is_passable(self) -> bool:
        """False on Mountains and on impassable natural wonders."""
        if self._modifier is TerrainModifier.MOUNTAIN:
            return False
        return not NATURAL_WONDER_DATA[self._natural_wonder].impassable

    @property
    def has_river(self) -> bool:
        return self._river_mask != 0

    @property
    def is_hill(self) -> bool:
        return self._modifier is TerrainModifier.HILLS

    @property
    def is_mountain(self) -> bool:
        return self._modifier is TerrainModifier.MOUNTAIN

    @property
    def has_district(self) -> bool:
        return self._district is not District.NONE

    @property
    def has_wonder(self) -> bool:
        return self._wonder is not Wonder.NONE

    @property
    def has_natural_wonder(self) -> bool:
        return self._natural_wonder is not NaturalWonder.NONE

    @property
    def resource_category(self) -> ResourceCategory:
        return RESOURCE_DATA[self._resource].category

    @property
    def base_yields(self) -> Yields:
        """Terrain + hills + feature + resource yields, ignoring neighbours."""
        yields = TERRAIN_DATA[self._terrain].yields
        if self._modifier is TerrainModifier.HILLS:
            yields = yields.plus(YieldType.PRODUCTION, HILLS_PRODUCTION_BONUS)
        return yields + FEATURE_DATA[self._feature].yields + RESOURCE_DATA[self._resource].yields

    # -- Copying and display -------------------------------------------------

    def copy(self) -> Cell:
        """Return an independent cell with identical state."""
        clone = Cell(self._coord)
        for slot in Cell.__slots__:
            setattr(clone, slot, getattr(self, slot))
        return clone

    def describe(self) -> str:
        """Return a one-line summary such as ``plains hills with forest (river)``."""
        terrain_desc = self._terrain.value.replace("_", " ")
        if self._modifier is not TerrainModifier.FLAT:
            terrain_desc += f" {self._modifier.value}"
        parts = [terrain_desc]

        if self._feature is not Feature.NONE:
            parts.append(f"with {self._feature.value.replace('_', ' ')}")
        if self.has_river:
            parts.append("(river)")
        if self._resource is not Resource.NONE:
            parts.append(f"[{self._resource.value.replace('_', ' ')}]")
        if self._district is not District.NONE:
            parts.append(f"{{{self._district.value.replace('_', ' ')}}}")
        if self._wonder is not Wonder.NONE:
            parts.append(f"<{self._wonder.value.replace('_', ' ')}>")
        return " ".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return all(getattr(self, slot) == getattr(other, slot) for slot in Cell.__slots__)

    def __repr__(self) -> str:
        return f"Cell({self._coord.q}, {self._coord.r}: {self.describe()})"
