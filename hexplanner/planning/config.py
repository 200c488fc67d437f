"""Load planner defaults from YAML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class PlannerConfig:
    """Defaults used by the command line when creating and rendering maps.

    Attributes:
        map_width: Cells per row for new maps.
        map_height: Rows for new maps.
        map_name: Display name for new maps.
        city_id: Owner id given to the city placed by ``new --city``.
        hex_size: Hex radius in pixels for pixel projection.
        log_level: Standard logging level name.
        log_format: ``"console"`` or ``"json"``.
    """

    map_width: int = 10
    map_height: int = 10
    map_name: str = "Untitled Map"
    city_id: str = "city1"
    hex_size: float = 32.0

    log_level: str = "INFO"
    log_format: str = "console"

    @classmethod
    def from_yaml(cls, path: str | Path) -> PlannerConfig:
        """Load configuration from a YAML file.

        Missing keys keep their defaults; unknown keys are ignored.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated PlannerConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            map_width=data.get("map_width", cls.map_width),
            map_height=data.get("map_height", cls.map_height),
            map_name=data.get("map_name", cls.map_name),
            city_id=data.get("city_id", cls.city_id),
            hex_size=data.get("hex_size", cls.hex_size),
            log_level=data.get("log_level", cls.log_level),
            log_format=data.get("log_format", cls.log_format),
        )
