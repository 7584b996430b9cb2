# src/aot/commands/config_cmd.py
"""Config command - display current configuration.

This module provides the config display logic for the CLI.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from aot.commands.base import ConfigResult, SettingInfo
from aot.config import (
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    validate_config,
)


def _get_setting_source(
    key: str,
    yaml_settings: dict,
    env_settings: dict,
) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    return "default"


def config(
    config_path: str | Path | None = None,
) -> ConfigResult:
    """Get current configuration settings.

    Args:
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    try:
        file_config = load_config(config_path)
        env_settings = get_settings_from_env()
        yaml_settings = get_settings_from_yaml(file_config)
        settings = build_settings(file_config, env_settings)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return ConfigResult(success=False, error=f"Failed to load configuration: {e}")

    found_config_path = Path(config_path) if config_path is not None else find_config_file()

    result = ConfigResult(success=True)
    result.config_path = str(found_config_path) if found_config_path else None
    result.warnings = validate_config(file_config, found_config_path)

    for key, value in settings.model_dump().items():
        result.settings.append(
            SettingInfo(
                name=key,
                value=str(value),
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    return result
