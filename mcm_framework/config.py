"""
Central configuration for catalog and profile paths.

The rule catalog and the country profile registry are YAML files that live
in the repository's config/ directory by default.

Configure via environment variables:
  - MCM_CONFIG_DIR (default: <repo>/config)
  - MCM_CATALOG_PATH (default: $MCM_CONFIG_DIR/mcm_modules.yaml)
  - MCM_PROFILES_PATH (default: $MCM_CONFIG_DIR/country_profiles.yaml)
  - MCM_DEFAULT_COUNTRY (default: the registry's default_country)
  - MCM_LOG_LEVEL (default: INFO)
"""

import os
from pathlib import Path
from typing import Optional

from .constants import LOG_LEVELS
from .errors import ConfigurationError

CATALOG_FILENAME = "mcm_modules.yaml"
PROFILES_FILENAME = "country_profiles.yaml"


def get_config_dir() -> Path:
    """
    Get the directory holding the YAML configuration files.

    Uses MCM_CONFIG_DIR environment variable if set, otherwise defaults
    to the config/ directory at the repository root.

    Returns:
        Path to config directory
    """
    env_path = os.environ.get("MCM_CONFIG_DIR")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return Path(__file__).parent.parent / "config"


def get_catalog_path() -> Path:
    """Get the rule catalog YAML path."""
    env_path = os.environ.get("MCM_CATALOG_PATH")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return get_config_dir() / CATALOG_FILENAME


def get_profiles_path() -> Path:
    """Get the country profile registry YAML path."""
    env_path = os.environ.get("MCM_PROFILES_PATH")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return get_config_dir() / PROFILES_FILENAME


def get_default_country() -> Optional[str]:
    """Country to assess when none is given; None defers to the registry default."""
    return os.environ.get("MCM_DEFAULT_COUNTRY") or None


def get_log_level() -> str:
    """Log level from MCM_LOG_LEVEL.

    Raises:
        ConfigurationError: If the variable names an unknown level
    """
    level = os.environ.get("MCM_LOG_LEVEL", "INFO").upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"MCM_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{level}'")
    return level
