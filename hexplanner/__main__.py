"""Entry point for ``python -m hexplanner``.

Each sub-command reads or writes map snapshot JSON files:

* ``new``      create a blank map, optionally with a city center
* ``demo``     build the demo city and print its adjacency report
* ``report``   print the adjacency report for a saved map
* ``suggest``  find the best hex for a district near a city
* ``tile``     describe one tile
"""

from __future__ import annotations

import argparse
import pathlib
import sys

import structlog

from hexplanner.adjacency.engine import AdjacencyEngine
from hexplanner.adjacency.report import format_yields
from hexplanner.errors import HexPlannerError
from hexplanner.hexgrid.coords import HexCoord
from hexplanner.hexgrid.layout import hex_to_pixel
from hexplanner.logs import configure_logging
from hexplanner.planning.config import PlannerConfig
from hexplanner.planning.demo import build_demo_map
from hexplanner.rules.tables import DISTRICT_DATA
from hexplanner.rules.types import District, Feature, Resource
from hexplanner.world.game_map import GameMap

logger = structlog.get_logger(__name__)


def _district_arg(text: str) -> District:
    """Parse ``"campus"``, ``"Holy Site"`` or ``"commercial_hub"``."""
    value = "_".join(text.lower().split())
    try:
        district = District(value)
    except ValueError:
        names = ", ".join(d.value for d in District if d is not District.NONE)
        msg = f"unknown district {text!r} (choose from: {names})"
        raise argparse.ArgumentTypeError(msg) from None
    if district is District.NONE:
        msg = "a district type is required"
        raise argparse.ArgumentTypeError(msg)
    return district


def _load_map(path: pathlib.Path) -> GameMap:
    game_map = GameMap.import_from_string(path.read_text(encoding="utf-8"))
    logger.info("map loaded", path=str(path), name=game_map.name, cells=len(game_map))
    return game_map


def _save_map(game_map: GameMap, path: pathlib.Path) -> None:
    path.write_text(game_map.export_to_string() + "\n", encoding="utf-8")
    logger.info("map saved", path=str(path), name=game_map.name)


def _city_center(game_map: GameMap, city: list[int] | None) -> HexCoord:
    """Resolve ``--city Q R``, falling back to the map's own city center."""
    if city is not None:
        return HexCoord(*city)
    cell = game_map.find_city_center()
    if cell is None:
        msg = "map has no city center; pass --city Q R"
        raise HexPlannerError(msg)
    return cell.coord


# -- Commands -----------------------------------------------------------------


def _cmd_new(args: argparse.Namespace, config: PlannerConfig) -> int:
    game_map = GameMap(
        width=args.width if args.width is not None else config.map_width,
        height=args.height if args.height is not None else config.map_height,
        name=args.name if args.name is not None else config.map_name,
    )
    if args.city is not None:
        coord = HexCoord(*args.city)
        cell = game_map.cell_at(coord)
        if cell is None:
            msg = f"city center {coord} is not on the map"
            raise HexPlannerError(msg)
        cell.set_owner(config.city_id, is_city_center=True)

    _save_map(game_map, args.output)
    print(f"Created {game_map.width}x{game_map.height} map {game_map.name!r} in {args.output}")
    return 0


def _cmd_demo(args: argparse.Namespace, config: PlannerConfig) -> int:
    game_map, city_center = build_demo_map()
    if args.output is not None:
        _save_map(game_map, args.output)
    print(AdjacencyEngine(game_map).generate_report(city_center))
    return 0


def _cmd_report(args: argparse.Namespace, config: PlannerConfig) -> int:
    game_map = _load_map(args.map)
    city_center = _city_center(game_map, args.city)
    print(AdjacencyEngine(game_map).generate_report(city_center))
    return 0


def _cmd_suggest(args: argparse.Namespace, config: PlannerConfig) -> int:
    game_map = _load_map(args.map)
    city_center = _city_center(game_map, args.city)
    name = DISTRICT_DATA[args.district].name

    suggestion = AdjacencyEngine(game_map).find_best_district_placement(city_center, args.district)
    if suggestion is None:
        print(f"No valid placement found for {name}")
        return 1

    print(f"Best placement for {name}: {suggestion.coord}")
    if not suggestion.result.bonuses:
        print("  No adjacency bonuses")
    for bonus in suggestion.result.bonuses:
        print(f"  +{bonus.amount} {bonus.yield_type.value} from {bonus.source}")
    return 0


def _cmd_tile(args: argparse.Namespace, config: PlannerConfig) -> int:
    game_map = _load_map(args.map)
    coord = HexCoord(args.q, args.r)
    cell = game_map.cell_at(coord)
    if cell is None:
        print(f"Tile {coord} not found")
        return 1

    x, y = hex_to_pixel(coord, config.hex_size)
    print(f"Tile at {coord}: {cell.describe()}")
    print(f"  Terrain: {cell.terrain.value} ({cell.modifier.value})")
    print(f"  Feature: {cell.feature.value if cell.feature is not Feature.NONE else 'None'}")
    print(f"  Resource: {cell.resource.value if cell.resource is not Resource.NONE else 'None'}")
    print(f"  District: {DISTRICT_DATA[cell.district].name if cell.has_district else 'None'}")
    print(f"  Has River: {'Yes' if cell.has_river else 'No'}")
    print(f"  Owner: {cell.owner_city_id or 'None'}{' (city center)' if cell.is_city_center else ''}")
    print(f"  Base Yields: {format_yields(cell.base_yields)}")
    print(f"  Pixel Centre: ({x:.1f}, {y:.1f})")
    return 0


# -- Parser -------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="hexplanner",
        description="hexplanner - district adjacency planner for hex maps",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (e.g. config/default.yaml)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    new = sub.add_parser("new", help="Create a blank map")
    new.add_argument("output", type=pathlib.Path, help="Snapshot file to write")
    new.add_argument("--width", type=int, default=None, help="Cells per row")
    new.add_argument("--height", type=int, default=None, help="Number of rows")
    new.add_argument("--name", default=None, help="Map name")
    new.add_argument("--city", type=int, nargs=2, metavar=("Q", "R"), help="Place a city center")
    new.set_defaults(handler=_cmd_new)

    demo = sub.add_parser("demo", help="Build the demo city and print its report")
    demo.add_argument("-o", "--output", type=pathlib.Path, default=None, help="Also save the demo map")
    demo.set_defaults(handler=_cmd_demo)

    report = sub.add_parser("report", help="Print a city's adjacency report")
    report.add_argument("map", type=pathlib.Path, help="Snapshot file to read")
    report.add_argument("--city", type=int, nargs=2, metavar=("Q", "R"), help="City center")
    report.set_defaults(handler=_cmd_report)

    suggest = sub.add_parser("suggest", help="Find the best hex for a district")
    suggest.add_argument("map", type=pathlib.Path, help="Snapshot file to read")
    suggest.add_argument("district", type=_district_arg, help="District type, e.g. campus")
    suggest.add_argument("--city", type=int, nargs=2, metavar=("Q", "R"), help="City center")
    suggest.set_defaults(handler=_cmd_suggest)

    tile = sub.add_parser("tile", help="Describe one tile")
    tile.add_argument("map", type=pathlib.Path, help="Snapshot file to read")
    tile.add_argument("q", type=int)
    tile.add_argument("r", type=int)
    tile.set_defaults(handler=_cmd_tile)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, load config, run the chosen command."""
    args = build_parser().parse_args(argv)

    config = PlannerConfig.from_yaml(args.config) if args.config is not None else PlannerConfig()
    configure_logging(config.log_level, config.log_format)

    try:
        return args.handler(args, config)
    except (HexPlannerError, OSError) as exc:
        logger.error("command failed", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
