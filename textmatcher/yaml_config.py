"""
YAML configuration loading for textmatcher.

This module loads settings from a .textmatcher.yml file, with environment
variables taking precedence and built-in defaults as the last resort. Each
project directory can carry its own file.

Example usage:
    from textmatcher.yaml_config import load_yaml_config, resolve_column_policy

    # Load config from the current directory's .textmatcher.yml
    config_data = load_yaml_config()

    # Effective column policy for a directory: env -> YAML -> default
    policy = resolve_column_policy("/path/to/project")
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .config import config, validate_column_policy, validate_log_level
from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger(__name__)

CONFIG_FILE_NAME = ".textmatcher.yml"

VALID_SECTIONS = {"matcher", "logging"}


class YAMLConfigError(ConfigurationError):
    """Exception raised when YAML configuration loading fails."""

    pass


def get_config_file_path(directory: Optional[Union[str, Path]] = None) -> Path:
    """
    Get the path where the .textmatcher.yml file should be located.

    Args:
        directory: Directory path. Defaults to current working directory.

    Returns:
        Path to .textmatcher.yml (may or may not exist)
    """
    if directory is None:
        directory = Path.cwd()
    return Path(directory) / CONFIG_FILE_NAME


def find_config_file(directory: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """
    Find the .textmatcher.yml configuration file in a directory.

    Args:
        directory: Directory to search in. Defaults to current working directory.

    Returns:
        Path to the file if found, None otherwise.
    """
    config_file = get_config_file_path(directory)
    if config_file.exists() and config_file.is_file():
        return config_file
    return None


def load_yaml_config(directory: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load YAML configuration from .textmatcher.yml.

    Args:
        directory: Directory containing .textmatcher.yml. Defaults to current directory.

    Returns:
        Parsed configuration, or an empty dict if no file is found.

    Raises:
        YAMLConfigError: If the file exists but cannot be read or parsed,
            or does not have the expected structure.
    """
    config_file = find_config_file(directory)

    if config_file is None:
        logger.debug("No .textmatcher.yml file found, using environment variables and defaults")
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise YAMLConfigError(f"Failed to parse YAML configuration file {config_file}: {e}") from e
    except OSError as e:
        raise YAMLConfigError(f"Failed to read configuration file {config_file}: {e}") from e

    if not validate_yaml_structure(config_data):
        raise YAMLConfigError(f"Invalid structure in configuration file {config_file}")

    logger.info(f"Loaded YAML configuration from {config_file}")
    return config_data


def get_config_value(
    config_data: Dict[str, Any], key_path: str, default: Any = None, env_var: Optional[str] = None
) -> Any:
    """
    Get configuration value with fallback chain: environment -> YAML -> default.

    Args:
        config_data: Parsed YAML configuration data
        key_path: Dot-separated path to config value (e.g., "matcher.column_policy")
        default: Default value if not found in environment or YAML
        env_var: Environment variable name to check first

    Returns:
        Configuration value from environment, YAML, or default (in that order)
    """
    if env_var:
        env_value = os.getenv(env_var)
        if env_value is not None:
            return env_value

    yaml_value = _get_nested_value(config_data, key_path)
    if yaml_value is not None:
        return yaml_value

    return default


def _get_nested_value(data: Dict[str, Any], key_path: str) -> Any:
    """
    Get a nested value from a dictionary using dot notation.

    Returns:
        Value if found, None otherwise
    """
    if not key_path:
        return None

    current = data
    for key in key_path.split("."):
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]

    return current


def validate_yaml_structure(config_data: Dict[str, Any]) -> bool:
    """
    Validate that the YAML configuration has the expected structure.

    Unknown sections are logged and ignored; known sections must be mappings.

    Args:
        config_data: Parsed YAML configuration data

    Returns:
        True if structure is valid, False otherwise
    """
    if not isinstance(config_data, dict):
        return False

    for key, value in config_data.items():
        if key not in VALID_SECTIONS:
            logger.warning(f"Unknown configuration section: {key}")
        elif not isinstance(value, dict):
            logger.error(f"Configuration section '{key}' must be a dictionary")
            return False

    return True


def resolve_column_policy(directory: Optional[Union[str, Path]] = None) -> str:
    """Effective column policy for a directory."""
    value = get_config_value(
        load_yaml_config(directory),
        "matcher.column_policy",
        default=config.matcher.COLUMN_POLICY,
        env_var="TEXTMATCHER_COLUMN_POLICY",
    )
    return validate_column_policy(str(value), "matcher.column_policy")


def resolve_log_level(directory: Optional[Union[str, Path]] = None) -> str:
    """Effective log level for a directory."""
    value = get_config_value(
        load_yaml_config(directory),
        "logging.level",
        default=config.logging.LOG_LEVEL,
        env_var="TEXTMATCHER_LOG_LEVEL",
    )
    return validate_log_level(str(value), "logging.level")


def create_sample_config() -> str:
    """
    Create sample .textmatcher.yml content.

    Returns:
        String containing sample YAML configuration with comments
    """
    return """# textmatcher configuration file
# All settings are optional. Environment variables (TEXTMATCHER_*) take
# precedence, then this file, then built-in defaults.

# Selection matching
matcher:
  column_policy: "strict"          # "strict" raises on out-of-range selections, "clamp" trims them

# Logging
logging:
  level: "WARNING"                 # DEBUG, INFO, WARNING, ERROR, CRITICAL
"""


def write_sample_config(directory: Optional[Union[str, Path]] = None, overwrite: bool = False) -> Path:
    """
    Write a sample .textmatcher.yml to a directory.

    Raises:
        YAMLConfigError: If the file already exists and overwrite is False
    """
    config_file = get_config_file_path(directory)
    if config_file.exists() and not overwrite:
        raise YAMLConfigError(f"Configuration file {config_file} already exists")
    config_file.write_text(create_sample_config(), encoding="utf-8")
    logger.info(f"Wrote sample configuration to {config_file}")
    return config_file
