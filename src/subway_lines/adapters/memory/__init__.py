"""In-memory repository adapters."""

from subway_lines.adapters.memory.line_repository import InMemoryLineRepository
from subway_lines.adapters.memory.station_repository import InMemoryStationRepository

__all__ = ["InMemoryLineRepository", "InMemoryStationRepository"]
