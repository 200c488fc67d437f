"""Tests for the ``python -m hexplanner`` command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from hexplanner.__main__ import main
from hexplanner.hexgrid.coords import HexCoord
from hexplanner.rules.types import District
from hexplanner.world.game_map import GameMap


def _read(path: Path) -> GameMap:
    return GameMap.import_from_string(path.read_text(encoding="utf-8"))


class TestNew:
    def test_defaults(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / "map.json"
        assert main(["new", str(out)]) == 0
        game_map = _read(out)
        assert (game_map.width, game_map.height, game_map.name) == (10, 10, "Untitled Map")
        assert game_map.find_city_center() is None
        assert "Created 10x10 map" in capsys.readouterr().out

    def test_size_and_city(self, tmp_path: Path) -> None:
        out = tmp_path / "map.json"
        assert main(["new", str(out), "--width", "6", "--height", "4", "--city", "2", "1"]) == 0
        game_map = _read(out)
        assert len(game_map) == 24
        center = game_map.find_city_center()
        assert center is not None
        assert center.coord == HexCoord(2, 1)
        assert center.owner_city_id == "city1"

    def test_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "cfg.yaml"
        config.write_text("map_width: 3\nmap_height: 2\nmap_name: Tiny\ncity_id: athens\n")
        out = tmp_path / "map.json"
        assert main(["--config", str(config), "new", str(out), "--city", "0", "0"]) == 0
        game_map = _read(out)
        assert (len(game_map), game_map.name) == (6, "Tiny")
        assert game_map.cell_at(HexCoord(0, 0)).owner_city_id == "athens"

    def test_city_off_map(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / "map.json"
        assert main(["new", str(out), "--city", "50", "50"]) == 1
        assert "not on the map" in capsys.readouterr().err
        assert not out.exists()


class TestDemoAndReport:
    def test_demo_prints_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["demo"]) == 0
        out = capsys.readouterr().out
        assert "Campus at (4, 3)" in out
        assert "City total: gold 2, science 4, faith 3" in out

    def test_report_from_saved_demo(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        saved = tmp_path / "demo.json"
        assert main(["demo", "--output", str(saved)]) == 0
        demo_out = capsys.readouterr().out

        assert main(["report", str(saved)]) == 0
        assert capsys.readouterr().out == demo_out

    def test_report_needs_city(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / "map.json"
        main(["new", str(out)])
        capsys.readouterr()
        assert main(["report", str(out)]) == 1
        assert "--city" in capsys.readouterr().err

    def test_report_explicit_city(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / "map.json"
        main(["new", str(out)])
        capsys.readouterr()
        assert main(["report", str(out), "--city", "3", "3"]) == 0
        assert "No districts found within city range." in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["report", str(tmp_path / "missing.json")]) == 1
        assert "error:" in capsys.readouterr().err

    def test_malformed_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('{"version": 7}')
        assert main(["report", str(bad)]) == 1
        assert "Invalid map snapshot" in capsys.readouterr().err


class TestSuggest:
    def test_suggest_campus(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        saved = tmp_path / "demo.json"
        main(["demo", "--output", str(saved)])
        capsys.readouterr()

        assert main(["suggest", str(saved), "Theater Square"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Best placement for Theater Square: (")
        assert "District(s)" in out

    def test_no_placement(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / "map.json"
        main(["new", str(out), "--city", "4", "4"])
        capsys.readouterr()
        assert main(["suggest", str(out), "harbor"]) == 1
        assert "No valid placement found for Harbor" in capsys.readouterr().out

    def test_unknown_district(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["suggest", str(tmp_path / "map.json"), "castle"])


class TestTile:
    def test_describe_tile(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        saved = tmp_path / "demo.json"
        main(["demo", "--output", str(saved)])
        capsys.readouterr()

        assert main(["tile", str(saved), "5", "4"]) == 0
        out = capsys.readouterr().out
        assert "Tile at (5, 4)" in out
        assert "District: Commercial Hub" in out
        assert "Has River: Yes" in out
        assert "Base Yields: food 2" in out

    def test_tile_off_map(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        saved = tmp_path / "demo.json"
        main(["demo", "--output", str(saved)])
        capsys.readouterr()
        assert main(["tile", str(saved), "40", "40"]) == 1
        assert "not found" in capsys.readouterr().out

    def test_saved_demo_keeps_districts(self, tmp_path: Path) -> None:
        saved = tmp_path / "demo.json"
        main(["demo", "--output", str(saved)])
        game_map = _read(saved)
        assert game_map.cell_at(HexCoord(4, 3)).district is District.CAMPUS
