"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level name (e.g., DEBUG, INFO)")

    # TOML network file path
    network_file: str | None = Field(
        default="network.example.toml",
        description="Path to TOML file describing stations and lines",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        if not self.network_file:
            raise ValueError("network_file must be set to load the network configuration")

        network_path = Path(self.network_file)
        if not network_path.exists():
            raise FileNotFoundError(f"Network file not found: {network_path}")

        with open(network_path, "rb") as f:
            return tomllib.load(f)

    def get_network_config(self) -> dict[str, list[dict[str, Any]]]:
        """Parse the network file and return its stations and lines as lists of dicts.

        Raises:
            ValueError: If network_file is unset or 'stations'/'lines' are not lists.
            FileNotFoundError: If the network file does not exist.
        """
        toml_data = self._load_toml_data()

        stations = toml_data.get("stations", [])
        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        lines = toml_data.get("lines", [])
        if not isinstance(lines, list):
            raise ValueError("TOML config 'lines' must be a list")

        return {"stations": stations, "lines": lines}
