"""Section domain model."""

from dataclasses import dataclass

from subway_lines.domain.exceptions import InvalidSectionError
from subway_lines.domain.models.distance import Distance
from subway_lines.domain.models.station import Station


@dataclass(frozen=True)
class Section:
    """A directed, distance-weighted edge from up_station to down_station.

    Equality and hash cover all three fields, so a Section is its own
    identity inside the owning edge set.
    """

    up_station: Station
    down_station: Station
    distance: Distance

    def __post_init__(self) -> None:
        if self.up_station == self.down_station:
            raise InvalidSectionError(
                f"Section cannot start and end at station {self.up_station.id}"
            )

    @classmethod
    def of(cls, up_station: Station, down_station: Station, distance: int) -> "Section":
        """Build a section from a raw integer distance."""
        return cls(up_station, down_station, Distance(distance))

    def has_station(self, station: Station) -> bool:
        """Check if the station is either endpoint of this section."""
        return station in (self.up_station, self.down_station)

    def connects(self, first: Station, second: Station) -> bool:
        """Check if this section joins the two stations, in either direction."""
        return {self.up_station, self.down_station} == {first, second}
