"""Configuration management for dict_dispatch."""

from .config import DispatchConfig
from .config_manager import ConfigManager
from .defaults import create_default_config
from .resolver import ConfigResolver, probe_host, resolve_config

__all__ = [
    "DispatchConfig",
    "ConfigManager",
    "ConfigResolver",
    "create_default_config",
    "probe_host",
    "resolve_config",
]
