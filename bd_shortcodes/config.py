"""Configuration loading for bd-shortcodes.

Site data for the bundled SiteHost lives in ``shortcodes.yaml`` at the
project root. Missing keys fall back to DEFAULT_CONFIG.

Key functions:
- load_config: Load shortcodes.yaml from a project root, if present.
- load_config_file: Load an explicit configuration file.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "shortcodes.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "name": "",
    "description": "",
    "url": "",
    "admin_email": "",
    "timezone": None,
    "theme_mods": {},
    "attachments": {},
    "menus": {},
    "posts": [],
    "current": {},
}


class ConfigError(Exception):
    """Error raised when a configuration file cannot be used.

    Attributes:
        path: Path to the configuration file.
        message: Human-readable error message.
    """

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


def _defaults() -> dict[str, Any]:
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(project_root: Path) -> dict[str, Any]:
    """Load site configuration from shortcodes.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        Dictionary containing configuration values, with defaults applied.
    """
    config_path = project_root / CONFIG_FILENAME
    config = _defaults()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
            if isinstance(loaded, dict):
                config.update(loaded)
    return config


def load_config_file(path: Path) -> dict[str, Any]:
    """Load site configuration from an explicit file.

    Args:
        path: Path to a YAML file.

    Returns:
        Dictionary containing configuration values, with defaults applied.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or does not
            hold a mapping.
    """
    if not path.is_file():
        raise ConfigError(path, "configuration file not found")
    try:
        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(path, f"invalid YAML: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ConfigError(path, "expected a mapping at the top level")
    config = _defaults()
    config.update(loaded)
    return config
