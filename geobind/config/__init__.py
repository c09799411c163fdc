"""
Configuration Package.

Structure:
    config/
    ├── __init__.py      # This file - exports and singleton
    ├── app_config.py    # GeobindConfig settings model
    └── defaults.py      # Default values for features, styles, logging

Usage:
    from geobind.config import get_config
    config = get_config()
    name = config.default_schema_name
"""

from typing import Optional

from .app_config import GeobindConfig
from .defaults import FeatureDefaults, LoggingDefaults, StyleDefaults


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[GeobindConfig] = None


def get_config() -> GeobindConfig:
    """
    Get global configuration singleton.

    Loaded from the environment on first call.

    Returns:
        GeobindConfig instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = GeobindConfig.from_environment()
    return _config_instance


def set_config(config: Optional[GeobindConfig]) -> None:
    """
    Replace the configuration singleton.

    Passing None makes the next get_config() reload from the environment.
    """
    global _config_instance
    _config_instance = config


__all__ = [
    'GeobindConfig',
    'get_config',
    'set_config',
    'FeatureDefaults',
    'LoggingDefaults',
    'StyleDefaults',
]
