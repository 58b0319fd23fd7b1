"""Section graph engine for a single line.

The edge set is unordered. The station order of a line is never stored: it is
recomputed on every call by chaining each section's down station to the
section whose up station matches, so ordering and edges cannot drift apart.
"""

import logging
from collections.abc import Iterable, Iterator

from subway_lines.domain.exceptions import (
    DistanceExceedsOriginalError,
    InvalidPathStateError,
    LastSectionError,
    SectionAlreadyExistsError,
    StationNotOnLineError,
    StationsNotConnectedError,
)
from subway_lines.domain.models.distance import Distance
from subway_lines.domain.models.section import Section
from subway_lines.domain.models.station import Station

logger = logging.getLogger(__name__)


class Sections:
    """The edge set of one line, always forming exactly one simple path."""

    def __init__(self, sections: Iterable[Section]) -> None:
        """Build the graph from an edge set.

        Raises:
            InvalidPathStateError: If the set is empty or two sections leave
                or enter the same station.
        """
        self._sections: set[Section] = set(sections)
        if not self._sections:
            raise InvalidPathStateError("A line needs at least one section")
        self._by_up: dict[Station, Section] = {}
        self._by_down: dict[Station, Section] = {}
        self._reindex()

    @classmethod
    def of(cls, section: Section) -> "Sections":
        """Create the edge set of a new line from its initial section."""
        return cls({section})

    def _reindex(self) -> None:
        by_up: dict[Station, Section] = {}
        by_down: dict[Station, Section] = {}
        for section in self._sections:
            if section.up_station in by_up:
                raise InvalidPathStateError(
                    f"Line branches after station {section.up_station.id}"
                )
            if section.down_station in by_down:
                raise InvalidPathStateError(
                    f"Line branches before station {section.down_station.id}"
                )
            by_up[section.up_station] = section
            by_down[section.down_station] = section
        self._by_up = by_up
        self._by_down = by_down

    def values(self) -> set[Section]:
        """Return a copy of the edge set, as handed back for persistence."""
        return set(self._sections)

    def count(self) -> int:
        return len(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sections):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        return f"Sections({sorted(self._sections, key=_section_sort_key)!r})"

    def stations(self) -> set[Station]:
        """Return every station referenced by some section."""
        return set(self._by_up) | set(self._by_down)

    def has_station(self, station: Station) -> bool:
        return station in self._by_up or station in self._by_down

    def has_not_station(self, station: Station) -> bool:
        """Check that no section references the station."""
        return not self.has_station(station)

    def sections_with_station(self, station: Station) -> list[Section]:
        """Return the sections touching the station (two for interior stations)."""
        touching = [self._by_down.get(station), self._by_up.get(station)]
        return [section for section in touching if section is not None]

    def total_distance(self) -> Distance:
        return Distance(sum(section.distance.value for section in self._sections))

    def first_station(self) -> Station:
        return self._first_section().up_station

    def last_station(self) -> Station:
        return self._last_section().down_station

    def _first_section(self) -> Section:
        candidates = [
            section for station, section in self._by_up.items() if station not in self._by_down
        ]
        if len(candidates) != 1:
            raise InvalidPathStateError(
                f"Expected exactly one first section, found {len(candidates)}"
            )
        return candidates[0]

    def _last_section(self) -> Section:
        candidates = [
            section for station, section in self._by_down.items() if station not in self._by_up
        ]
        if len(candidates) != 1:
            raise InvalidPathStateError(
                f"Expected exactly one last section, found {len(candidates)}"
            )
        return candidates[0]

    def _next_section(self, current: Section) -> Section:
        following = self._by_up.get(current.down_station)
        if following is None:
            raise InvalidPathStateError(
                f"No section continues from station {current.down_station.id}"
            )
        return following

    def path(self) -> list[Station]:
        """Return the stations of the line in order, from first to last.

        Raises:
            InvalidPathStateError: If the sections do not chain into a single
                path covering every section.
        """
        current = self._first_section()
        last = self._last_section()
        result = [current.up_station]

        while current != last:
            result.append(current.down_station)
            if len(result) > len(self._sections):
                raise InvalidPathStateError("Sections contain a cycle")
            current = self._next_section(current)
        result.append(current.down_station)

        if len(result) != len(self._sections) + 1:
            raise InvalidPathStateError(
                f"Path covers {len(result) - 1} of {len(self._sections)} sections"
            )
        return result

    def insert(self, section: Section) -> None:
        """Add a section, extending the line at an endpoint or splitting a section.

        The edge set is left unchanged when the insertion is rejected.

        Raises:
            SectionAlreadyExistsError: If both stations are already on the line.
            StationsNotConnectedError: If neither station is on the line.
            DistanceExceedsOriginalError: If a split section is not strictly
                shorter than the section it subdivides.
        """
        up, down = section.up_station, section.down_station
        up_known = self.has_station(up)
        down_known = self.has_station(down)

        if up_known and down_known:
            raise SectionAlreadyExistsError(
                f"Stations {up.id} and {down.id} are both already on the line"
            )
        if not up_known and not down_known:
            raise StationsNotConnectedError(
                f"Neither station {up.id} nor station {down.id} is on the line"
            )

        if up == self.last_station() or down == self.first_station():
            logger.debug(f"Extending line with section {up.id} -> {down.id}")
            self._replace(removed=[], added=[section])
            return

        if up_known:
            original = self._by_up[up]
            remainder = Section(down, original.down_station, self._remaining(original, section))
            added = [section, remainder]
        else:
            original = self._by_down[down]
            remainder = Section(original.up_station, up, self._remaining(original, section))
            added = [remainder, section]

        logger.debug(
            f"Splitting section {original.up_station.id} -> {original.down_station.id} "
            f"at station {down.id if up_known else up.id}"
        )
        self._replace(removed=[original], added=added)

    @staticmethod
    def _remaining(original: Section, inserted: Section) -> Distance:
        if inserted.distance >= original.distance:
            raise DistanceExceedsOriginalError(
                f"Distance {inserted.distance.value} must be less than "
                f"{original.distance.value} of the section it splits"
            )
        return original.distance - inserted.distance

    def remove(self, station: Station) -> None:
        """Remove a station from the line.

        An endpoint drops its single section. An interior station merges its
        two sections into one spanning both, with the summed distance.

        Raises:
            StationNotOnLineError: If no section references the station.
            LastSectionError: If the line has only one section left.
        """
        if self.has_not_station(station):
            raise StationNotOnLineError(f"Station {station.id} is not on the line")
        if self.count() == 1:
            raise LastSectionError(
                f"Cannot remove station {station.id}: the line has a single section"
            )

        upper = self._by_down.get(station)
        lower = self._by_up.get(station)
        if upper is not None and lower is not None:
            merged = Section(
                upper.up_station, lower.down_station, upper.distance + lower.distance
            )
            logger.debug(
                f"Merging sections around station {station.id} into "
                f"{merged.up_station.id} -> {merged.down_station.id}"
            )
            self._replace(removed=[upper, lower], added=[merged])
            return

        logger.debug(f"Removing endpoint station {station.id}")
        self._replace(removed=self.sections_with_station(station), added=[])

    def _replace(self, removed: list[Section], added: list[Section]) -> None:
        self._sections.difference_update(removed)
        self._sections.update(added)
        self._reindex()


def _section_sort_key(section: Section) -> tuple[int, int]:
    return (section.up_station.id, section.down_station.id)
