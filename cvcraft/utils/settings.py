"""
Settings for CVCraft.

Defaults live in DEFAULT_SETTINGS. An optional YAML file named by the
CVCRAFT_CONFIG_PATH environment variable is merged on top, then individual
environment variables override single keys:

    CVCRAFT_THEMES_PATH   -> themes.path
    CVCRAFT_DEFAULT_THEME -> themes.default
    CVCRAFT_LOGS_PATH     -> logging.path

Examples:
    >>> settings = get_settings()
    >>> settings.themes.default
    'modern'
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

from cvcraft import __version__

load_dotenv()

DEFAULT_SETTINGS: Dict[str, Any] = {
    "app": {
        "name": "CVCraft",
        "cli_name": "cvcraft",
        "version": __version__,
        "description": "Markdown to PDF and Word resume converter with theming support",
    },
    "themes": {
        "path": "themes",
        "default": "modern",
    },
    "parsing": {
        "coalesce_headings": False,
        "recognize_blocks": False,
    },
    "logging": {
        "path": "outs/logs",
    },
}

# Environment variable -> dotted settings key
ENV_OVERRIDES = {
    "CVCRAFT_THEMES_PATH": "themes.path",
    "CVCRAFT_DEFAULT_THEME": "themes.default",
    "CVCRAFT_LOGS_PATH": "logging.path",
}

_settings: Optional[DictConfig] = None


def load_settings(config_path: Path = None) -> DictConfig:
    """
    Build the merged settings object.

    Args:
        config_path: Optional YAML file merged over the defaults
                     (defaults to CVCRAFT_CONFIG_PATH env variable)

    Returns:
        Read-only OmegaConf DictConfig
    """
    if config_path is None and os.getenv("CVCRAFT_CONFIG_PATH"):
        config_path = Path(os.getenv("CVCRAFT_CONFIG_PATH"))

    settings = OmegaConf.create(DEFAULT_SETTINGS)

    if config_path is not None:
        settings = OmegaConf.merge(settings, OmegaConf.load(config_path))

    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            OmegaConf.update(settings, key, value)

    OmegaConf.set_readonly(settings, True)
    return settings


def get_settings() -> DictConfig:
    """Return the process settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reload_settings() -> DictConfig:
    """Drop cached settings and load them again (picks up env changes)."""
    global _settings
    _settings = None
    return get_settings()


def themes_path() -> Path:
    """Configured themes directory."""
    return Path(get_settings().themes.path)


def logs_path() -> Path:
    """Configured logs directory."""
    return Path(get_settings().logging.path)
