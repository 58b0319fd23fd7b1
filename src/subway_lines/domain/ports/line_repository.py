"""Line repository port."""

from typing import Protocol

from subway_lines.domain.models.line import Line
from subway_lines.domain.models.section import Section


class LineRepository(Protocol):
    """Port for storing lines and the edge sets they own."""

    async def save(self, line: Line) -> Line:
        """Store a line with its sections, assigning an id when it has none."""
        ...

    async def find_by_id(self, line_id: int) -> Line | None:
        """Find a line by its id."""
        ...

    async def find_all(self) -> list[Line]:
        """Return all stored lines."""
        ...

    async def delete_by_id(self, line_id: int) -> None:
        """Delete a line and its sections."""
        ...

    async def load_sections(self, line_id: int) -> set[Section] | None:
        """Load the persisted edge set of a line."""
        ...

    async def save_sections(self, line_id: int, sections: set[Section]) -> None:
        """Replace the persisted edge set of a line as a whole."""
        ...
