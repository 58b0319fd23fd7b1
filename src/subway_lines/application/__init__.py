"""Application layer - use cases coordinating domain and ports."""

from subway_lines.application.services import LineService, StationService

__all__ = ["LineService", "StationService"]
