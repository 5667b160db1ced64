"""
Configuration management for Veritree.

Handles loading and validation of configuration files.
"""

from veritree.config.settings import (
    LoggingConfig,
    TreeConfig,
    VeritreeConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "LoggingConfig",
    "TreeConfig",
    "VeritreeConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
