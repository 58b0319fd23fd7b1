"""Domain layer - core business logic and models."""

from subway_lines.domain.exceptions import SubwayError
from subway_lines.domain.models import (
    Distance,
    Line,
    LinePath,
    Section,
    Sections,
    Station,
)

__all__ = [
    "Distance",
    "Line",
    "LinePath",
    "Section",
    "Sections",
    "Station",
    "SubwayError",
]
