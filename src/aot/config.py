# src/aot/config.py
"""Configuration loading utilities for the Atom of Thoughts engine.

This module provides configuration loading that can be used by:
- CLI commands
- The MCP server entry point
- External applications embedding the engine

It handles:
- Finding and loading aot.yaml config files
- Reading AOT_* environment variable overrides
- Building Settings objects from multiple sources
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from aot.settings import Settings

CONFIG_FILES = ["aot.yaml", "aot.yml", ".aotrc"]

# Valid configuration keys for validation
VALID_ROOT_KEYS = {"settings"}

VALID_SETTINGS_KEYS = {
    "max_depth",
    "light_max_depth",
    "promotion_threshold",
    "strong_conclusion_threshold",
    "conclusion_confidence_factor",
    "render_atoms",
}

# Environment variable -> (Settings field, parser name)
ENV_SETTINGS = {
    "AOT_MAX_DEPTH": ("max_depth", "int"),
    "AOT_LIGHT_MAX_DEPTH": ("light_max_depth", "int"),
    "AOT_PROMOTION_THRESHOLD": ("promotion_threshold", "float"),
    "AOT_STRONG_CONCLUSION_THRESHOLD": ("strong_conclusion_threshold", "float"),
    "AOT_CONCLUSION_CONFIDENCE_FACTOR": ("conclusion_confidence_factor", "float"),
    "AOT_RENDER_ATOMS": ("render_atoms", "bool"),
}


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in current directory or parent directories.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return config


def _parse_env_value(value: str, kind: str) -> Any:
    """Parse an env var string; returns None when it cannot be parsed."""
    if kind == "bool":
        return value.lower() in ("true", "1", "yes")
    try:
        return int(value) if kind == "int" else float(value)
    except ValueError:
        return None


def get_settings_from_env(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Read settings from AOT_* environment variables.

    Only explicitly set (and parseable) variables are returned, so YAML
    values survive unless overridden.

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        Dictionary of setting name -> value
    """
    environ = environ if environ is not None else dict(os.environ)
    result: dict[str, Any] = {}
    for env_key, (settings_key, kind) in ENV_SETTINGS.items():
        if env_key not in environ:
            continue
        value = _parse_env_value(environ[env_key], kind)
        if value is not None:
            result[settings_key] = value
    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract known settings from the 'settings:' section of a config file."""
    yaml_settings = config.get("settings", {}) or {}
    if not isinstance(yaml_settings, dict):
        return {}
    return {key: value for key, value in yaml_settings.items() if key in VALID_SETTINGS_KEYS}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
    **overrides: Any,
) -> Settings:
    """Build Settings object from YAML config, env vars and explicit overrides.

    Precedence (highest to lowest):
    1. Explicit overrides that are not None (CLI flags)
    2. Environment variables
    3. YAML settings: section
    4. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)
        **overrides: Explicit values; None means "not given"

    Returns:
        Configured Settings instance
    """
    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()
    explicit = {key: value for key, value in overrides.items() if value is not None}

    return Settings(**{**yaml_settings, **env_settings, **explicit})
