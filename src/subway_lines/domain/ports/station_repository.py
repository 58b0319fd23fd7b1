"""Station repository port."""

from typing import Protocol

from subway_lines.domain.models.station import Station


class StationRepository(Protocol):
    """Port for retrieving station information."""

    async def save(self, name: str) -> Station:
        """Create a station with a new id."""
        ...

    async def find_by_id(self, station_id: int) -> Station | None:
        """Find a station by its id."""
        ...

    async def find_all(self) -> list[Station]:
        """Return all stations."""
        ...

    async def delete_by_id(self, station_id: int) -> None:
        """Delete a station."""
        ...
