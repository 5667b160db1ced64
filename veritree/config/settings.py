"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

Configuration management for Veritree.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from veritree.exceptions import InvalidConfigurationError, UnsupportedAlgorithmError
from veritree.logging_config import get_logger
from veritree.merkle.digest import DEFAULT_ALGORITHM, HashAlgorithm

logger = get_logger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("console", "json")


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${VERITREE_ALGORITHM}" -> value of VERITREE_ALGORITHM env var
        "${VERITREE_ALGORITHM:sha256}" -> value of VERITREE_ALGORITHM or "sha256" if not set
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class TreeConfig:
    """Tree construction configuration."""

    hash_algorithm: str = DEFAULT_ALGORITHM.value
    parallel_enabled: bool = True
    parallel_threshold: int = 100  # Minimum level size for thread pool hashing
    max_workers: int = 4


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    file: str = ""  # Empty means stderr
    format: str = "console"  # "console" or "json"


@dataclass
class VeritreeConfig:
    """Main Veritree configuration."""

    tree: TreeConfig = field(default_factory=TreeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.veritree/config.yaml")


def get_default_config() -> VeritreeConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        VeritreeConfig: Default configuration object
    """
    return VeritreeConfig(tree=TreeConfig(), logging=LoggingConfig())


def load_config(config_path: Optional[str] = None) -> VeritreeConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        VeritreeConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(str(config_path))

    if not os.path.exists(config_path):
        logger.debug(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        )
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        )

    if config_data is None:
        logger.debug(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': top level must be a mapping"
        )

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except InvalidConfigurationError as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(f"Invalid configuration in '{config_path}': {e}")

    logger.debug(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidConfigurationError(f"'{name}' section must be a mapping")
    return section


def _as_bool(value: Any, name: str) -> bool:
    # Env var expansion turns booleans into strings
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "yes", "1", "on"):
        return True
    if isinstance(value, str) and value.strip().lower() in ("false", "no", "0", "off"):
        return False
    raise InvalidConfigurationError(f"{name} must be a boolean, got {value!r}")


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")


def _build_config_from_dict(config_data: Dict[str, Any]) -> VeritreeConfig:
    """
    Build VeritreeConfig from dictionary loaded from YAML.

    Merges user configuration with defaults.

    Args:
        config_data: Dictionary loaded from YAML file

    Returns:
        VeritreeConfig: Configuration object

    Raises:
        InvalidConfigurationError: If a value has the wrong type
    """
    default_config = get_default_config()

    tree_data = _section(config_data, 'tree')
    tree = TreeConfig(
        hash_algorithm=str(tree_data.get('hash_algorithm', default_config.tree.hash_algorithm)),
        parallel_enabled=_as_bool(
            tree_data.get('parallel_enabled', default_config.tree.parallel_enabled),
            'tree.parallel_enabled',
        ),
        parallel_threshold=_as_int(
            tree_data.get('parallel_threshold', default_config.tree.parallel_threshold),
            'tree.parallel_threshold',
        ),
        max_workers=_as_int(
            tree_data.get('max_workers', default_config.tree.max_workers),
            'tree.max_workers',
        ),
    )

    logging_data = _section(config_data, 'logging')
    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)).upper(),
        file=os.path.expanduser(str(logging_data.get('file', default_config.logging.file))),
        format=str(logging_data.get('format', default_config.logging.format)).lower(),
    )

    return VeritreeConfig(tree=tree, logging=logging)


def _validate_config(config: VeritreeConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    try:
        config.tree.hash_algorithm = HashAlgorithm.parse(config.tree.hash_algorithm).value
    except UnsupportedAlgorithmError as e:
        raise InvalidConfigurationError(str(e))

    if config.tree.parallel_threshold < 1:
        raise InvalidConfigurationError(
            f"tree.parallel_threshold must be at least 1, got {config.tree.parallel_threshold}"
        )

    if config.tree.max_workers < 1:
        raise InvalidConfigurationError(
            f"tree.max_workers must be at least 1, got {config.tree.max_workers}"
        )

    if config.logging.level not in VALID_LOG_LEVELS:
        raise InvalidConfigurationError(
            f"logging.level must be one of {', '.join(VALID_LOG_LEVELS)}, got {config.logging.level!r}"
        )

    if config.logging.format not in VALID_LOG_FORMATS:
        raise InvalidConfigurationError(
            f"logging.format must be one of {', '.join(VALID_LOG_FORMATS)}, got {config.logging.format!r}"
        )
