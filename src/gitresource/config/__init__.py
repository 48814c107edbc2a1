"""Configuration loading and management."""

from gitresource.config.loader import (
    find_config_files,
    load_config,
    merge_configs,
)
from gitresource.config.schema import GitResourceSettings

__all__ = [
    "GitResourceSettings",
    "find_config_files",
    "load_config",
    "merge_configs",
]
