"""Application services (use cases) for line management."""

import asyncio
import logging
from typing import TYPE_CHECKING

from subway_lines.domain.exceptions import (
    LineNotFoundError,
    StationNotFoundError,
    SubwayError,
)
from subway_lines.domain.models import Line, LinePath, Section, Sections, Station

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from subway_lines.domain.ports import LineRepository, StationRepository


class LineService:
    """Service resolving station ids, serializing access per line and persisting edge sets."""

    def __init__(
        self,
        line_repository: "LineRepository",
        station_repository: "StationRepository",
    ) -> None:
        """Initialize with line and station repositories."""
        self._line_repository = line_repository
        self._station_repository = station_repository
        self._line_locks: dict[int, asyncio.Lock] = {}

    def _lock_for(self, line_id: int) -> asyncio.Lock:
        lock = self._line_locks.get(line_id)
        if lock is None:
            lock = asyncio.Lock()
            self._line_locks[line_id] = lock
        return lock

    async def _find_station(self, station_id: int) -> Station:
        station = await self._station_repository.find_by_id(station_id)
        if station is None:
            raise StationNotFoundError(f"Station {station_id} does not exist")
        return station

    async def create_line(
        self,
        name: str,
        color: str,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> Line:
        """Create a line from its initial section and store it."""
        up_station = await self._find_station(up_station_id)
        down_station = await self._find_station(down_station_id)
        line = Line.create(name, color, Section.of(up_station, down_station, distance))
        saved = await self._line_repository.save(line)
        logger.info(
            f"Created line '{saved.name}' ({saved.id}): {up_station_id} -> {down_station_id}"
        )
        return saved

    async def find_line(self, line_id: int) -> Line:
        line = await self._line_repository.find_by_id(line_id)
        if line is None:
            raise LineNotFoundError(f"Line {line_id} does not exist")
        return line

    async def find_all_lines(self) -> list[Line]:
        return await self._line_repository.find_all()

    async def update_line(self, line_id: int, name: str, color: str) -> Line:
        """Replace the name and color of a line, keeping its sections."""
        async with self._lock_for(line_id):
            line = await self.find_line(line_id)
            line.update(name, color)
            return await self._line_repository.save(line)

    async def delete_line(self, line_id: int) -> None:
        async with self._lock_for(line_id):
            await self.find_line(line_id)
            await self._line_repository.delete_by_id(line_id)
        self._line_locks.pop(line_id, None)
        logger.info(f"Deleted line {line_id}")

    async def load_line_sections(self, line_id: int) -> Sections:
        """Load the persisted edge set of a line into a section graph."""
        sections = await self._line_repository.load_sections(line_id)
        if sections is None:
            raise LineNotFoundError(f"Line {line_id} does not exist")
        return Sections(sections)

    async def insert_section(
        self,
        line_id: int,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> Sections:
        """Insert a section into a line and persist the resulting edge set."""
        up_station = await self._find_station(up_station_id)
        down_station = await self._find_station(down_station_id)

        async with self._lock_for(line_id):
            line = await self.find_line(line_id)
            try:
                sections = line.add_section(up_station, down_station, distance)
            except SubwayError as e:
                logger.warning(
                    f"Rejected section {up_station_id} -> {down_station_id} on line {line_id}: {e}"
                )
                raise
            await self._line_repository.save_sections(line_id, sections.values())

        logger.info(
            f"Inserted section {up_station_id} -> {down_station_id} ({distance}) on line {line_id}"
        )
        return sections

    async def remove_section(self, line_id: int, station_id: int) -> Sections:
        """Remove a station from a line and persist the resulting edge set."""
        station = await self._find_station(station_id)

        async with self._lock_for(line_id):
            line = await self.find_line(line_id)
            try:
                sections = line.remove_station(station)
            except SubwayError as e:
                logger.warning(f"Rejected removal of station {station_id} from line {line_id}: {e}")
                raise
            await self._line_repository.save_sections(line_id, sections.values())

        logger.info(f"Removed station {station_id} from line {line_id}")
        return sections

    async def compute_path(self, line_id: int) -> LinePath:
        line = await self.find_line(line_id)
        return line.compute_path()

    async def compute_all_paths(self) -> list[LinePath]:
        lines = await self._line_repository.find_all()
        return [line.compute_path() for line in lines]


class StationService:
    """Service for creating, listing and deleting stations."""

    def __init__(self, station_repository: "StationRepository") -> None:
        """Initialize with a station repository."""
        self._station_repository = station_repository

    async def create_station(self, name: str) -> Station:
        station = await self._station_repository.save(name)
        logger.info(f"Created station '{station.name}' ({station.id})")
        return station

    async def find_all_stations(self) -> list[Station]:
        return await self._station_repository.find_all()

    async def delete_station(self, station_id: int) -> None:
        """Delete a station. Lines already holding it keep their sections."""
        if await self._station_repository.find_by_id(station_id) is None:
            raise StationNotFoundError(f"Station {station_id} does not exist")
        await self._station_repository.delete_by_id(station_id)
        logger.info(f"Deleted station {station_id}")
