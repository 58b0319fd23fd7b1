"""Line domain model."""

from dataclasses import dataclass

from subway_lines.domain.models.distance import Distance
from subway_lines.domain.models.line_path import LinePath
from subway_lines.domain.models.section import Section
from subway_lines.domain.models.sections import Sections
from subway_lines.domain.models.station import Station


@dataclass(eq=False)
class Line:
    """A subway line owning the sections it is built from.

    All graph logic lives in Sections; Line only translates line-level
    requests into section operations. Name and color uniqueness is checked
    by whoever stores lines.
    """

    name: str
    color: str
    sections: Sections
    id: int | None = None

    @classmethod
    def create(cls, name: str, color: str, section: Section, line_id: int | None = None) -> "Line":
        """Create a line from its initial section."""
        return cls(name=name, color=color, sections=Sections.of(section), id=line_id)

    def update(self, name: str, color: str) -> None:
        self.name = name
        self.color = color

    def add_section(self, up_station: Station, down_station: Station, distance: int) -> Sections:
        """Insert a section and return the updated edge set."""
        self.sections.insert(Section.of(up_station, down_station, distance))
        return self.sections

    def remove_station(self, station: Station) -> Sections:
        """Remove a station and return the updated edge set."""
        self.sections.remove(station)
        return self.sections

    def first_station(self) -> Station:
        return self.sections.first_station()

    def last_station(self) -> Station:
        return self.sections.last_station()

    def stations(self) -> list[Station]:
        return self.sections.path()

    def total_distance(self) -> Distance:
        return self.sections.total_distance()

    def compute_path(self) -> LinePath:
        """Return the ordered stations of the line with its total distance."""
        return LinePath(
            line_id=self.id,
            line_name=self.name,
            color=self.color,
            stations=self.stations(),
            total_distance=self.total_distance().value,
        )
