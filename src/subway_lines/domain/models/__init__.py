"""Domain models for subway lines."""

from subway_lines.domain.models.distance import Distance
from subway_lines.domain.models.error_details import ErrorDetails
from subway_lines.domain.models.line import Line
from subway_lines.domain.models.line_configuration import (
    LineConfiguration,
    SectionConfiguration,
)
from subway_lines.domain.models.line_path import LinePath
from subway_lines.domain.models.section import Section
from subway_lines.domain.models.sections import Sections
from subway_lines.domain.models.station import Station

__all__ = [
    "Distance",
    "ErrorDetails",
    "Line",
    "LineConfiguration",
    "LinePath",
    "Section",
    "SectionConfiguration",
    "Sections",
    "Station",
]
