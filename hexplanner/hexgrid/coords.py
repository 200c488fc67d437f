"""Axial hex coordinates for a pointy-top grid.

Direction indices are shared with cell river edges: index 0 is east and
the remaining indices run counter-clockwise.

    Index   (dq, dr)
    0       (+1,  0)   east
    1       ( 0, +1)
    2       (-1, +1)
    3       (-1,  0)   west
    4       ( 0, -1)
    5       (+1, -1)

Cube coordinates ``(q, r, s)`` with ``q + r + s == 0`` are derived on
demand for distance math and never stored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True, order=True)
class HexCoord:
    """Axial coordinate of a single hex.

    Attributes:
        q: Column axis.
        r: Row axis.
    """

    q: int
    r: int

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


class CubeCoord(NamedTuple):
    """Cube coordinate; ``q + r + s`` is always zero."""

    q: int
    r: int
    s: int


DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (0, -1),
    (1, -1),
)

# Walk order for ring enumeration, starting from the (-radius, +radius) corner.
_RING_WALK: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


def axial_to_cube(coord: HexCoord) -> CubeCoord:
    """Return the cube form of an axial coordinate."""
    return CubeCoord(coord.q, coord.r, -coord.q - coord.r)


def cube_to_axial(cube: CubeCoord) -> HexCoord:
    """Drop ``s`` from a cube coordinate."""
    return HexCoord(cube.q, cube.r)


def neighbors(coord: HexCoord) -> list[HexCoord]:
    """Return the six adjacent coordinates in direction-index order."""
    return [HexCoord(coord.q + dq, coord.r + dr) for dq, dr in DIRECTIONS]


def neighbor_in_direction(coord: HexCoord, direction: int) -> HexCoord:
    """Return the neighbour across edge ``direction`` (taken modulo 6)."""
    dq, dr = DIRECTIONS[direction % 6]
    return HexCoord(coord.q + dq, coord.r + dr)


def distance(a: HexCoord, b: HexCoord) -> int:
    """Hex distance: the largest absolute cube-component difference."""
    ca = axial_to_cube(a)
    cb = axial_to_cube(b)
    return max(abs(ca.q - cb.q), abs(ca.r - cb.r), abs(ca.s - cb.s))


def hexes_in_range(center: HexCoord, radius: int) -> list[HexCoord]:
    """Return every coordinate within ``radius`` steps of ``center``.

    The result is ordered by ``dq`` then ``dr`` and always contains
    ``1 + 3 * radius * (radius + 1)`` coordinates for ``radius >= 0``.

    Args:
        center: Middle of the area.
        radius: Maximum distance, inclusive.

    Returns:
        List of coordinates; ``[center]`` when ``radius`` is 0.
    """
    results: list[HexCoord] = []
    for dq in range(-radius, radius + 1):
        for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
            results.append(HexCoord(center.q + dq, center.r + dr))
    return results


def hex_ring(center: HexCoord, radius: int) -> list[HexCoord]:
    """Return the coordinates at exactly ``radius`` steps from ``center``.

    Walks six sides of ``radius`` steps each, starting from the corner at
    ``(center.q - radius, center.r + radius)``.

    Args:
        center: Middle of the ring.
        radius: Ring distance.

    Returns:
        ``6 * radius`` coordinates, or ``[center]`` when ``radius`` is 0.
    """
    if radius == 0:
        return [center]

    results: list[HexCoord] = []
    q, r = center.q - radius, center.r + radius
    for dq, dr in _RING_WALK:
        for _ in range(radius):
            results.append(HexCoord(q, r))
            q, r = q + dq, r + dr
    return results


_KEY_PATTERN = re.compile(r"(?P<q>-?[0-9]+),(?P<r>-?[0-9]+)")


def coord_to_key(coord: HexCoord) -> str:
    """Encode a coordinate as a ``"q,r"`` string key."""
    return f"{coord.q},{coord.r}"


def key_to_coord(key: str) -> HexCoord:
    """Decode a key produced by :func:`coord_to_key`.

    Raises:
        ValueError: If the key is not two comma-separated integers.
    """
    match = _KEY_PATTERN.fullmatch(key)
    if match is None:
        msg = f"Invalid coordinate key: {key!r}"
        raise ValueError(msg)
    return HexCoord(int(match["q"]), int(match["r"]))
