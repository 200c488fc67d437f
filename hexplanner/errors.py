"""Error types raised by the hexplanner core.

Lookups that find nothing return ``None``; only broken preconditions and
unreadable snapshots raise.
"""

from __future__ import annotations


class HexPlannerError(Exception):
    """Base class for all hexplanner errors."""


class ValidationError(HexPlannerError, ValueError):
    """A cell mutator was asked for a state the rules forbid.

    The cell is left exactly as it was before the call.
    """


class MalformedSnapshotError(HexPlannerError, ValueError):
    """A map snapshot could not be loaded.

    Raised for an unknown version, a missing field, an enum value outside
    its closed set, or any other structural problem.  Loading is atomic:
    no partially populated map is ever returned.
    """
