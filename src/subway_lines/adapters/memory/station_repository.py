"""In-memory station repository."""

from subway_lines.domain.models.station import Station


class InMemoryStationRepository:
    """Keeps stations in a dict keyed by id."""

    def __init__(self, stations: list[Station] | None = None) -> None:
        self._stations: dict[int, Station] = {}
        for station in stations or []:
            self._stations[station.id] = station

    async def save(self, name: str) -> Station:
        station = Station(id=max(self._stations, default=0) + 1, name=name)
        self._stations[station.id] = station
        return station

    async def find_by_id(self, station_id: int) -> Station | None:
        return self._stations.get(station_id)

    async def find_all(self) -> list[Station]:
        return sorted(self._stations.values(), key=lambda s: s.id)

    async def delete_by_id(self, station_id: int) -> None:
        self._stations.pop(station_id, None)
