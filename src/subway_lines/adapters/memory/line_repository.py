"""In-memory line repository."""

import itertools
import logging
from dataclasses import dataclass

from subway_lines.domain.models.line import Line
from subway_lines.domain.models.section import Section
from subway_lines.domain.models.sections import Sections

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _LineRecord:
    """Stored form of a line, detached from any Line instance."""

    name: str
    color: str
    sections: frozenset[Section]


class InMemoryLineRepository:
    """Stores lines as detached records, so every lookup returns a fresh Line."""

    def __init__(self) -> None:
        self._records: dict[int, _LineRecord] = {}
        self._ids = itertools.count(1)

    async def save(self, line: Line) -> Line:
        if line.id is None:
            line.id = next(self._ids)
        self._records[line.id] = _LineRecord(
            name=line.name,
            color=line.color,
            sections=frozenset(line.sections.values()),
        )
        logger.debug(f"Saved line {line.id} with {line.sections.count()} section(s)")
        return line

    async def find_by_id(self, line_id: int) -> Line | None:
        record = self._records.get(line_id)
        if record is None:
            return None
        return self._to_line(line_id, record)

    async def find_all(self) -> list[Line]:
        return [self._to_line(line_id, record) for line_id, record in self._records.items()]

    async def delete_by_id(self, line_id: int) -> None:
        self._records.pop(line_id, None)

    async def load_sections(self, line_id: int) -> set[Section] | None:
        record = self._records.get(line_id)
        if record is None:
            return None
        return set(record.sections)

    async def save_sections(self, line_id: int, sections: set[Section]) -> None:
        record = self._records.get(line_id)
        if record is None:
            raise KeyError(f"Line {line_id} is not stored")
        self._records[line_id] = _LineRecord(
            name=record.name, color=record.color, sections=frozenset(sections)
        )

    @staticmethod
    def _to_line(line_id: int, record: _LineRecord) -> Line:
        return Line(
            name=record.name,
            color=record.color,
            sections=Sections(record.sections),
            id=line_id,
        )
