"""Tests for the network configuration loader."""

from pathlib import Path

import pytest

from subway_lines.adapters.config import AppConfig, NetworkConfigurationLoader
from subway_lines.domain.models import LineConfiguration, SectionConfiguration, Station

PROJECT_ROOT = Path(__file__).parent.parent


def _config_for(tmp_path: Path, content: str) -> AppConfig:
    network_file = tmp_path / "network.toml"
    network_file.write_text(content, encoding="utf-8")
    return AppConfig(network_file=str(network_file))


def test_load_stations_and_lines(tmp_path: Path) -> None:
    """Given a network file, when loading, then stations and line configurations are built."""
    config = _config_for(
        tmp_path,
        """
[[stations]]
id = 1
name = "Gangnam"

[[stations]]
id = 2

[[lines]]
name = "Sinbundang"
color = "bg-red-600"
sections = [
    { up = 1, down = 2, distance = 10 },
    { up = 2, down = 3, distance = 5 },
]
""",
    )

    stations, lines = NetworkConfigurationLoader.load(config)

    assert stations == [Station(1), Station(2)]
    assert stations[0].name == "Gangnam"
    assert stations[1].name == "2"
    assert lines == [
        LineConfiguration(
            name="Sinbundang",
            color="bg-red-600",
            sections=[
                SectionConfiguration(up_station_id=1, down_station_id=2, distance=10),
                SectionConfiguration(up_station_id=2, down_station_id=3, distance=5),
            ],
        )
    ]


def test_duplicate_station_ids_are_rejected(tmp_path: Path) -> None:
    """Given two stations with one id, when loading, then ValueError is raised."""
    config = _config_for(tmp_path, "[[stations]]\nid = 1\n\n[[stations]]\nid = 1\n")

    with pytest.raises(ValueError, match="Duplicate ids found"):
        NetworkConfigurationLoader.load(config)


def test_line_without_sections_is_rejected() -> None:
    """Given a line with no sections, when loading it, then ValueError is raised."""
    with pytest.raises(ValueError, match="at least one section"):
        NetworkConfigurationLoader.load_line_from_data({"name": "Empty", "sections": []})


def test_line_without_name_is_rejected() -> None:
    """Given a line without a name, when loading it, then ValueError is raised."""
    with pytest.raises(ValueError, match="'name'"):
        NetworkConfigurationLoader.load_line_from_data(
            {"sections": [{"up": 1, "down": 2, "distance": 3}]}
        )


@pytest.mark.parametrize(
    "section",
    [
        {"up": "1", "down": 2, "distance": 3},
        {"up": 1, "down": 2},
        {"up": 1, "down": 2, "distance": True},
    ],
)
def test_section_fields_must_be_integers(section: dict[str, object]) -> None:
    """Given a malformed section entry, when loading the line, then ValueError is raised."""
    with pytest.raises(ValueError, match="must be an integer"):
        NetworkConfigurationLoader.load_line_from_data({"name": "L", "sections": [section]})


def test_station_id_must_be_integer() -> None:
    """Given a station with a string id, when loading it, then ValueError is raised."""
    with pytest.raises(ValueError, match="must be an integer"):
        NetworkConfigurationLoader.load_station_from_data({"id": "a", "name": "A"})


def test_example_network_file_loads() -> None:
    """Given the bundled example network, when loading, then all lines are present."""
    config = AppConfig(network_file=str(PROJECT_ROOT / "network.example.toml"))

    stations, lines = NetworkConfigurationLoader.load(config)

    assert len(stations) == 7
    assert [line.name for line in lines] == ["Sinbundang", "Line 2"]
