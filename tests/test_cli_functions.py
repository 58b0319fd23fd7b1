"""Tests for CLI helper functions and commands."""

import json
from pathlib import Path

import pytest

from subway_lines.adapters.config import AppConfig
from subway_lines.adapters.memory import InMemoryLineRepository
from subway_lines.cli import find_line_id, format_path, load_network, main
from subway_lines.domain.exceptions import LineNotFoundError
from subway_lines.domain.models import Line, LinePath, Station

PROJECT_ROOT = Path(__file__).parent.parent
EXAMPLE_NETWORK = str(PROJECT_ROOT / "network.example.toml")


@pytest.mark.asyncio
async def test_load_network_applies_sections_in_order() -> None:
    """Given the example network, when loading, then splits and extensions build the paths."""
    service = await load_network(AppConfig(network_file=EXAMPLE_NETWORK))

    sinbundang = await service.compute_path(await find_line_id(service, "Sinbundang"))
    line_2 = await service.compute_path(await find_line_id(service, "Line 2"))

    assert sinbundang.station_ids() == [5, 1, 2, 3, 4]
    assert sinbundang.total_distance == 27
    assert line_2.station_ids() == [6, 1, 7]
    assert line_2.total_distance == 21


@pytest.mark.asyncio
async def test_load_network_fails_when_line_gets_no_id(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a repository that assigns no id, when loading the network, then LineNotFoundError is raised."""

    async def save_without_id(self: InMemoryLineRepository, line: Line) -> Line:
        return line

    monkeypatch.setattr(InMemoryLineRepository, "save", save_without_id)

    with pytest.raises(LineNotFoundError, match="without an id"):
        await load_network(AppConfig(network_file=EXAMPLE_NETWORK))


@pytest.mark.asyncio
async def test_find_line_id_unknown_name() -> None:
    """Given an unknown line name, when looking it up, then LineNotFoundError is raised."""
    service = await load_network(AppConfig(network_file=EXAMPLE_NETWORK))

    with pytest.raises(LineNotFoundError):
        await find_line_id(service, "Line 9")


def test_format_path_uses_names_and_falls_back_to_ids() -> None:
    """Given a path, when formatting, then station names or ids are joined in order."""
    path = LinePath(
        line_name="Sinbundang",
        color="bg-red-600",
        stations=[Station(1, "Gangnam"), Station(2)],
        total_distance=10,
    )

    assert format_path(path) == "Sinbundang (bg-red-600): Gangnam -> 2 [total distance 10]"


@pytest.mark.asyncio
async def test_paths_command_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Given the paths command with --json, when run, then each line is printed as JSON."""
    exit_code = await main(["--network", EXAMPLE_NETWORK, "paths", "--line", "Line 2", "--json"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output[0]["line_name"] == "Line 2"
    assert [station["id"] for station in output[0]["stations"]] == [6, 1, 7]
    assert output[0]["total_distance"] == 21


@pytest.mark.asyncio
async def test_remove_station_command_merges(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an interior station, when removing it, then the printed path skips it."""
    exit_code = await main(["--network", EXAMPLE_NETWORK, "remove-station", "Line 2", "1"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == (
        "Line 2 (bg-green-600): Gyodae -> Seolleung [total distance 21]"
    )


@pytest.mark.asyncio
async def test_insert_section_command_splits(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a split insertion, when running insert-section, then the new station appears."""
    exit_code = await main(
        ["--network", EXAMPLE_NETWORK, "insert-section", "Line 2", "6", "2", "4"]
    )

    assert exit_code == 0
    assert "Gyodae -> Yangjae -> Gangnam -> Seolleung" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_failed_command_reports_error_details(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a rejected removal, when run with --json, then ErrorDetails go to stderr."""
    exit_code = await main(
        ["--network", EXAMPLE_NETWORK, "remove-station", "Line 2", "4", "--json"]
    )

    assert exit_code == 1
    details = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert details["code"] == "STATION_NOT_ON_LINE"


@pytest.mark.asyncio
async def test_missing_network_file_fails(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a missing network file, when running a command, then it exits with an error."""
    exit_code = await main(["--network", "does-not-exist.toml", "paths"])

    assert exit_code == 1
    assert "Network file not found" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no command, when running the CLI, then help is printed and it exits with 1."""
    exit_code = await main([])

    assert exit_code == 1
    assert "usage" in capsys.readouterr().out
