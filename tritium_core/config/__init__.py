"""
Configuration Management
========================

Configuration for the path and class helpers.
"""

from tritium_core.config.settings import (
    TritiumConfig,
    PathConfig,
    ClassConfig,
    load_config,
    save_config,
    get_default_config,
)

__all__ = [
    "TritiumConfig",
    "PathConfig",
    "ClassConfig",
    "load_config",
    "save_config",
    "get_default_config",
]
