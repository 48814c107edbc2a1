"""Configuration loader with merge logic and precedence handling."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml

from gitresource.config.defaults import DEFAULT_CONFIG
from gitresource.config.schema import GitResourceSettings
from gitresource.utils.paths import expand_path

ENV_OVERRIDES = {
    "GITRESOURCE_DOWNLOAD_ROOT": "download_root",
    "GITRESOURCE_API_URL": "api_url",
    "GITRESOURCE_TIMEOUT": "timeout_seconds",
    "GITRESOURCE_LOG_LEVEL": "log_level",
}


def find_config_files() -> list[Path]:
    """Find configuration files in standard locations.

    Searches, lowest to highest precedence:
    1. Project config (./gitresource.yaml in current directory)
    2. User config (~/.config/gitresource/config.yaml)

    Returns:
        Existing config files ordered so later files override earlier ones
    """
    config_files = []

    project_config = Path.cwd() / "gitresource.yaml"
    if project_config.exists():
        config_files.append(project_config)

    user_config = expand_path("~/.config/gitresource/config.yaml")
    if user_config.exists():
        config_files.append(user_config)

    return config_files


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Raises:
        yaml.YAMLError: If the file contains invalid YAML
        FileNotFoundError: If the file doesn't exist
        ValueError: If the top level of the file is not a mapping
    """
    with open(file_path, "r") as f:
        content = yaml.safe_load(f)
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config file {file_path} must contain a mapping")
    return content


def merge_configs(configs: list[dict[str, Any]]) -> dict[str, Any]:
    """Deep merge configuration dictionaries, later ones taking precedence.

    Nested dictionaries are merged recursively; any other value (including
    lists) replaces the earlier one.
    """
    result: dict[str, Any] = {}
    for config in configs:
        result = _deep_merge(result, config)
    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply GITRESOURCE_* environment variable overrides to configuration."""
    result = config.copy()

    for env_var, key in ENV_OVERRIDES.items():
        if value := os.getenv(env_var):
            result[key] = value

    return result


def load_config(config_path: Optional[Path] = None) -> GitResourceSettings:
    """Load and merge configuration from all sources.

    Configuration precedence (lowest to highest):
    1. Built-in defaults
    2. Project config (./gitresource.yaml)
    3. User config (~/.config/gitresource/config.yaml)
    4. Explicitly provided config_path (if given)
    5. Environment variables

    Args:
        config_path: Optional explicit path to a config file

    Returns:
        Validated GitResourceSettings instance

    Raises:
        ValidationError: If the merged configuration is invalid
        yaml.YAMLError: If a config file contains invalid YAML
        FileNotFoundError: If config_path is provided but doesn't exist
    """
    configs_to_merge = [DEFAULT_CONFIG.copy()]

    for config_file in find_config_files():
        try:
            configs_to_merge.append(load_yaml_file(config_file))
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error loading {config_file}: {e}") from e

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        configs_to_merge.append(load_yaml_file(config_path))

    merged_config = apply_env_overrides(merge_configs(configs_to_merge))

    return GitResourceSettings(**merged_config)
