"""The addressable collection of cells.

The map covers an offset parallelogram rather than a rectangle: row ``r``
spans columns ``[-floor(r / 2), width - floor(r / 2))``.  A coordinate is
on the map exactly when a cell was created for it; there are no phantom
default cells outside that area.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import pydantic
import structlog

from hexplanner.errors import MalformedSnapshotError
from hexplanner.hexgrid.coords import HexCoord, hexes_in_range, key_to_coord, neighbors
from hexplanner.hexgrid.layout import hex_centers
from hexplanner.world.cell import Cell
from hexplanner.world.snapshot import SNAPSHOT_VERSION, CoordRecord, MapSnapshot, TileRecord

if TYPE_CHECKING:
    from collections.abc import Iterator

    import numpy as np
    from numpy.typing import NDArray

    from hexplanner.rules.types import District

logger = structlog.get_logger(__name__)

CITY_WORKABLE_RANGE = 3


@dataclass
class GameMap:
    """A bounded hex map that owns every cell on it.

    Attributes:
        width: Cells per row.
        height: Number of rows.
        name: Display name, stored in snapshots.
    """

    width: int
    height: int
    name: str = "Untitled Map"
    _cells: dict[HexCoord, Cell] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Fill the parallelogram with flat grassland cells, row by row."""
        self._cells = {}
        for r in range(self.height):
            q_offset = r // 2
            for q in range(-q_offset, self.width - q_offset):
                coord = HexCoord(q, r)
                self._cells[coord] = Cell(coord)

    # -- Lookup --------------------------------------------------------------

    def cell_at(self, coord: HexCoord) -> Cell | None:
        """Return the cell at ``coord``, or None when it is off the map."""
        return self._cells.get(coord)

    def cell_by_key(self, key: str) -> Cell | None:
        """Return the cell for a ``"q,r"`` key, or None for unknown or bad keys."""
        try:
            coord = key_to_coord(key)
        except ValueError:
            return None
        return self._cells.get(coord)

    def contains(self, coord: HexCoord) -> bool:
        return coord in self._cells

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells.values())

    def cells(self) -> list[Cell]:
        """Return all cells in map iteration order."""
        return list(self._cells.values())

    def set_cell(self, cell: Cell) -> None:
        """Insert or replace the cell at ``cell.coord``."""
        self._cells[cell.coord] = cell

    def neighbors(self, coord: HexCoord) -> list[Cell]:
        """Return the existing neighbours of ``coord`` in direction order.

        Off-map neighbours are skipped, so edge cells have fewer than six.
        """
        return [self._cells[c] for c in neighbors(coord) if c in self._cells]

    def cells_in_range(self, center: HexCoord, radius: int) -> list[Cell]:
        """Return the existing cells within ``radius`` of ``center``."""
        return [self._cells[c] for c in hexes_in_range(center, radius) if c in self._cells]

    def city_workable_cells(self, city_center: HexCoord) -> list[Cell]:
        """Return the cells a city at ``city_center`` can work."""
        return self.cells_in_range(city_center, CITY_WORKABLE_RANGE)

    def cells_with_district(self, district: District) -> list[Cell]:
        return [cell for cell in self._cells.values() if cell.district is district]

    def find_city_center(self) -> Cell | None:
        """Return the first cell flagged as a city center, if any.

        Several cells may carry the flag; the map does not prevent it and
        this returns whichever comes first in iteration order.
        """
        return next((cell for cell in self._cells.values() if cell.is_city_center), None)

    def pixel_centers(self, size: float) -> NDArray[np.float64]:
        """Return an ``(n, 2)`` array of cell centres in iteration order."""
        return hex_centers(self._cells.keys(), size)

    # -- Snapshots -----------------------------------------------------------

    def to_snapshot(self) -> dict[str, Any]:
        """Return the versioned, JSON-ready snapshot of this map."""
        snapshot = MapSnapshot(
            version=SNAPSHOT_VERSION,
            name=self.name,
            width=self.width,
            height=self.height,
            tiles=[_cell_to_record(cell) for cell in self._cells.values()],
        )
        return snapshot.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_snapshot(cls, data: Any) -> GameMap:
        """Rebuild a map from :meth:`to_snapshot` output.

        The tiles listed in the snapshot become the map's cells, in the
        order given.

        Args:
            data: Parsed snapshot mapping.

        Returns:
            A new GameMap.

        Raises:
            MalformedSnapshotError: If the snapshot is structurally invalid.
        """
        try:
            snapshot = MapSnapshot.model_validate(data)
        except pydantic.ValidationError as exc:
            msg = f"Invalid map snapshot: {exc.error_count()} problem(s)"
            raise MalformedSnapshotError(msg) from exc

        game_map = cls(width=snapshot.width, height=snapshot.height, name=snapshot.name)
        game_map._cells = {}
        for record in snapshot.tiles:
            cell = _record_to_cell(record)
            game_map._cells[cell.coord] = cell

        logger.debug("map restored", name=snapshot.name, cells=len(game_map._cells))
        return game_map

    def export_to_string(self) -> str:
        """Serialise the snapshot as indented JSON text."""
        return json.dumps(self.to_snapshot(), indent=2, ensure_ascii=False)

    @classmethod
    def import_from_string(cls, text: str) -> GameMap:
        """Parse JSON text produced by :meth:`export_to_string`.

        Raises:
            MalformedSnapshotError: If the text is not JSON or not a valid snapshot.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"Map snapshot is not valid JSON: {exc.msg}"
            raise MalformedSnapshotError(msg) from exc
        return cls.from_snapshot(data)


def _cell_to_record(cell: Cell) -> TileRecord:
    return TileRecord(
        coord=CoordRecord(q=cell.coord.q, r=cell.coord.r),
        terrain=cell.terrain,
        modifier=cell.modifier,
        feature=cell.feature,
        resource=cell.resource,
        district=cell.district,
        wonder=cell.wonder,
        naturalWonder=cell.natural_wonder,
        improvement=cell.improvement,
        riverEdges=sorted(cell.river_edges),
        ownerCityId=cell.owner_city_id,
        isCityCenter=cell.is_city_center,
    )


def _record_to_cell(record: TileRecord) -> Cell:
    river_mask = 0
    for edge in record.river_edges:
        river_mask |= 1 << edge
    return Cell.restore(
        HexCoord(record.coord.q, record.coord.r),
        terrain=record.terrain,
        modifier=record.modifier,
        feature=record.feature,
        resource=record.resource,
        district=record.district,
        wonder=record.wonder,
        natural_wonder=record.natural_wonder,
        improvement=record.improvement,
        river_mask=river_mask,
        owner_city_id=record.owner_city_id,
        is_city_center=record.is_city_center,
    )
