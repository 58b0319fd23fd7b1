"""Line configuration domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SectionConfiguration:
    """A section as described in a network file, by station ids."""

    up_station_id: int
    down_station_id: int
    distance: int


@dataclass(frozen=True)
class LineConfiguration:
    """Configuration for a line and the sections it is built from."""

    name: str
    color: str
    sections: list[SectionConfiguration]  # Applied in order; the first one creates the line
