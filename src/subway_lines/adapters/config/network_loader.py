"""Network configuration loader."""

from typing import Any

from subway_lines.adapters.config.app_config import AppConfig
from subway_lines.domain.models.line_configuration import (
    LineConfiguration,
    SectionConfiguration,
)
from subway_lines.domain.models.station import Station


def _require_int(data: dict[str, Any], key: str, context: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{context}: '{key}' must be an integer, got {value!r}")
    return value


class NetworkConfigurationLoader:
    """Loads stations and line configurations from app config."""

    @staticmethod
    def load_station_from_data(station_data: dict[str, Any]) -> Station:
        if not isinstance(station_data, dict):
            raise ValueError(f"Station entry must be a table, got {station_data!r}")
        station_id = _require_int(station_data, "id", "Station")
        name = station_data.get("name", str(station_id))
        return Station(id=station_id, name=str(name))

    @staticmethod
    def load_line_from_data(line_data: dict[str, Any]) -> LineConfiguration:
        if not isinstance(line_data, dict):
            raise ValueError(f"Line entry must be a table, got {line_data!r}")

        name = line_data.get("name")
        if not name:
            raise ValueError("All lines must have a 'name' field")
        color = str(line_data.get("color", ""))

        sections_data = line_data.get("sections", [])
        if not isinstance(sections_data, list) or not sections_data:
            raise ValueError(f"Line '{name}' must have at least one section")

        sections = []
        for section_data in sections_data:
            if not isinstance(section_data, dict):
                raise ValueError(f"Line '{name}': section entries must be tables")
            context = f"Line '{name}' section"
            sections.append(
                SectionConfiguration(
                    up_station_id=_require_int(section_data, "up", context),
                    down_station_id=_require_int(section_data, "down", context),
                    distance=_require_int(section_data, "distance", context),
                )
            )

        return LineConfiguration(name=str(name), color=color, sections=sections)

    @staticmethod
    def load(config: AppConfig) -> tuple[list[Station], list[LineConfiguration]]:
        """Load stations and line configurations from app config.

        Raises:
            ValueError: On malformed entries or duplicate station ids.
        """
        network = config.get_network_config()

        stations = [
            NetworkConfigurationLoader.load_station_from_data(data)
            for data in network["stations"]
        ]
        ids = [station.id for station in stations]
        if len(ids) != len(set(ids)):
            duplicates = {i for i in ids if ids.count(i) > 1}
            raise ValueError(f"Station ids must be unique. Duplicate ids found: {duplicates}")

        lines = [NetworkConfigurationLoader.load_line_from_data(data) for data in network["lines"]]
        return stations, lines
