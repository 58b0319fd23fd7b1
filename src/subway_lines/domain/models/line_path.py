"""Line path domain model."""

from pydantic import BaseModel, ConfigDict

from subway_lines.domain.models.station import Station


class LinePath(BaseModel):
    """The ordered stations of a line and the total distance they span."""

    model_config = ConfigDict(frozen=True)

    line_id: int | None = None
    line_name: str
    color: str
    stations: list[Station]
    total_distance: int

    def station_ids(self) -> list[int]:
        return [station.id for station in self.stations]
