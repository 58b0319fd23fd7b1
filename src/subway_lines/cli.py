"""CLI for inspecting and editing the lines of a subway network file."""

import asyncio
import json
import logging
import sys

from subway_lines.adapters.config import AppConfig, NetworkConfigurationLoader
from subway_lines.adapters.memory import InMemoryLineRepository, InMemoryStationRepository
from subway_lines.application.services import LineService
from subway_lines.domain.exceptions import LineNotFoundError, SubwayError
from subway_lines.domain.models import ErrorDetails, LinePath

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def load_network(config: AppConfig) -> LineService:
    """Build a line service holding every station and line of the network file.

    Each line is created from its first section; the remaining sections are
    inserted one by one, in file order.
    """
    stations, line_configs = NetworkConfigurationLoader.load(config)
    service = LineService(InMemoryLineRepository(), InMemoryStationRepository(stations))

    for line_config in line_configs:
        first, *rest = line_config.sections
        line = await service.create_line(
            line_config.name,
            line_config.color,
            first.up_station_id,
            first.down_station_id,
            first.distance,
        )
        if line.id is None:
            raise LineNotFoundError(f"Line '{line_config.name}' was stored without an id")
        for section in rest:
            await service.insert_section(
                line.id, section.up_station_id, section.down_station_id, section.distance
            )

    logger.info(f"Loaded {len(stations)} station(s) and {len(line_configs)} line(s)")
    return service


async def find_line_id(service: LineService, name: str) -> int:
    """Find the id of a line by its name."""
    for line in await service.find_all_lines():
        if line.name == name and line.id is not None:
            return line.id
    raise LineNotFoundError(f"Line '{name}' does not exist")


def format_path(path: LinePath) -> str:
    """Format a line path as a single human-readable line."""
    stations = " -> ".join(station.name or str(station.id) for station in path.stations)
    return f"{path.line_name} ({path.color}): {stations} [total distance {path.total_distance}]"


def _print_paths(paths: list[LinePath], as_json: bool) -> None:
    if as_json:
        data = [path.model_dump(mode="json") for path in paths]
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return
    for path in paths:
        print(format_path(path))


def _extract_error_details(error: SubwayError) -> ErrorDetails:
    return ErrorDetails(code=error.code, reason=error.message)


async def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Subway line path helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the ordered stations of every line
  subway-lines paths

  # Show one line as JSON
  subway-lines paths --line Sinbundang --json

  # Split a section or extend a line
  subway-lines insert-section Sinbundang 2 6 3

  # Remove a station, merging its neighbouring sections
  subway-lines remove-station Sinbundang 2
        """,
    )
    parser.add_argument("--network", help="Path to TOML network file (overrides NETWORK_FILE)")

    output_options = argparse.ArgumentParser(add_help=False)
    output_options.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    paths_parser = subparsers.add_parser(
        "paths", parents=[output_options], help="Show ordered stations of lines"
    )
    paths_parser.add_argument("--line", help="Only show the line with this name")

    insert_parser = subparsers.add_parser(
        "insert-section", parents=[output_options], help="Insert a section into a line"
    )
    insert_parser.add_argument("line", help="Line name")
    insert_parser.add_argument("up_station_id", type=int, help="Up station id")
    insert_parser.add_argument("down_station_id", type=int, help="Down station id")
    insert_parser.add_argument("distance", type=int, help="Section distance")

    remove_parser = subparsers.add_parser(
        "remove-station", parents=[output_options], help="Remove a station from a line"
    )
    remove_parser.add_argument("line", help="Line name")
    remove_parser.add_argument("station_id", type=int, help="Station id")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig(network_file=args.network) if args.network else AppConfig()
        _configure_logging(config.log_level)
        service = await load_network(config)

        if args.command == "paths":
            if args.line:
                paths = [await service.compute_path(await find_line_id(service, args.line))]
            else:
                paths = await service.compute_all_paths()
            _print_paths(paths, args.json)

        elif args.command == "insert-section":
            line_id = await find_line_id(service, args.line)
            await service.insert_section(
                line_id, args.up_station_id, args.down_station_id, args.distance
            )
            _print_paths([await service.compute_path(line_id)], args.json)

        elif args.command == "remove-station":
            line_id = await find_line_id(service, args.line)
            await service.remove_section(line_id, args.station_id)
            _print_paths([await service.compute_path(line_id)], args.json)

    except SubwayError as e:
        details = _extract_error_details(e)
        if args.json:
            print(details.model_dump_json(), file=sys.stderr)
        else:
            print(f"Error: {details.reason}", file=sys.stderr)
        return 1
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
