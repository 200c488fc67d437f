"""Pixel projection for pointy-top hexes.

Only presentation code needs this; the rules engine works purely in
axial coordinates.  The forward and inverse transforms are stored as 2x2
matrices so whole maps can be projected in one NumPy call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from hexplanner.hexgrid.coords import HexCoord

if TYPE_CHECKING:
    from collections.abc import Iterable

_SQRT3 = math.sqrt(3.0)

# Axial (q, r) -> pixel (x, y) for a unit-size hex.
_FORWARD: NDArray[np.float64] = np.array(
    [
        [_SQRT3, _SQRT3 / 2.0],
        [0.0, 1.5],
    ],
    dtype=np.float64,
)

# Pixel (x, y) -> fractional axial (q, r) for a unit-size hex.
_INVERSE: NDArray[np.float64] = np.array(
    [
        [_SQRT3 / 3.0, -1.0 / 3.0],
        [0.0, 2.0 / 3.0],
    ],
    dtype=np.float64,
)


def hex_to_pixel(coord: HexCoord, size: float) -> tuple[float, float]:
    """Return the pixel centre of ``coord`` for hexes of radius ``size``."""
    x, y = size * (_FORWARD @ np.array([coord.q, coord.r], dtype=np.float64))
    return float(x), float(y)


def hex_centers(coords: Iterable[HexCoord], size: float) -> NDArray[np.float64]:
    """Project many coordinates at once.

    Args:
        coords: Coordinates to project.
        size: Hex radius in pixels.

    Returns:
        Array of shape ``(n, 2)`` holding ``(x, y)`` rows in input order.
    """
    axial = np.array([(c.q, c.r) for c in coords], dtype=np.float64).reshape(-1, 2)
    return size * (axial @ _FORWARD.T)


def round_hex(q: float, r: float) -> HexCoord:
    """Round a fractional axial coordinate to the containing hex.

    Each cube component is rounded, then the component with the largest
    rounding error is recomputed from the other two so ``q + r + s`` stays 0.
    """
    s = -q - r
    rq, rr, rs = round(q), round(r), round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs

    return HexCoord(int(rq), int(rr))


def pixel_to_hex(x: float, y: float, size: float) -> HexCoord:
    """Return the hex containing pixel ``(x, y)``."""
    q, r = (_INVERSE @ np.array([x, y], dtype=np.float64)) / size
    return round_hex(float(q), float(r))
