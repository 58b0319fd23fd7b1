"""Station domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Station:
    """Represents a subway station, identified by its id."""

    id: int
    name: str = field(default="", compare=False)  # Display only, not part of identity
