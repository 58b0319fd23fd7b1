"""Adapters layer - external system integrations."""

from subway_lines.adapters.config import AppConfig, NetworkConfigurationLoader
from subway_lines.adapters.memory import (
    InMemoryLineRepository,
    InMemoryStationRepository,
)

__all__ = [
    "AppConfig",
    "InMemoryLineRepository",
    "InMemoryStationRepository",
    "NetworkConfigurationLoader",
]
