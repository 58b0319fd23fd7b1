"""Configuration adapters."""

from subway_lines.adapters.config.app_config import AppConfig
from subway_lines.adapters.config.network_loader import NetworkConfigurationLoader

__all__ = ["AppConfig", "NetworkConfigurationLoader"]
