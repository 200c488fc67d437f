"""Plain-text rendering of city adjacency results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hexplanner.rules.tables import DISTRICT_DATA

if TYPE_CHECKING:
    from hexplanner.adjacency.engine import CityAdjacencyResult, DistrictAdjacencyResult
    from hexplanner.rules.yields import Yields

REPORT_TITLE = "District Adjacency Report"
NO_DISTRICTS_MESSAGE = "No districts found within city range."


def format_yields(yields: Yields) -> str:
    """Render the non-zero fields of ``yields``, e.g. ``science 4, faith 3``.

    An all-zero record renders as the word ``None``.
    """
    parts = [f"{name} {amount}" for name, amount in yields.as_dict().items() if amount]
    return ", ".join(parts) if parts else "None"


def format_district(result: DistrictAdjacencyResult) -> list[str]:
    """Return the report lines for a single district."""
    name = DISTRICT_DATA[result.district].name
    lines = [f"{name} at {result.cell.coord}"]
    if not result.bonuses:
        lines.append("  No adjacency bonuses")
    for bonus in result.bonuses:
        lines.append(f"  +{bonus.amount} {bonus.yield_type.value} from {bonus.source}")
    lines.append(f"  Total: {format_yields(result.total)}")
    return lines


def format_city_report(result: CityAdjacencyResult) -> str:
    """Render a full city report.

    Districts appear in the order they were evaluated, followed by the
    city-wide total.
    """
    lines = [REPORT_TITLE, "=" * len(REPORT_TITLE), ""]
    if not result.districts:
        lines.append(NO_DISTRICTS_MESSAGE)
        return "\n".join(lines)

    for district_result in result.districts:
        lines.extend(format_district(district_result))
        lines.append("")
    lines.append(f"City total: {format_yields(result.total)}")
    return "\n".join(lines)
