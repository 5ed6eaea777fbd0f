"""
Configuration module for the textmatcher library.

This module centralizes all configuration constants and default values.
Values are read from TEXTMATCHER_* environment variables when the module is
imported and validated immediately, so a bad value fails fast.

Example usage:
    from textmatcher.config import config

    # Access configuration values
    print(f"Column policy: {config.matcher.COLUMN_POLICY}")

    # Get configuration summary
    print(config.get_summary())
"""

import codecs
import os
from typing import Optional

from .exceptions import ConfigurationError


class ConfigValidationError(ConfigurationError, ValueError):
    """Exception raised when configuration validation fails."""

    pass


VALID_COLUMN_POLICIES = ("strict", "clamp")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_positive_int(value: str, var_name: str) -> int:
    """Validate and convert string to positive integer."""
    try:
        result = int(value)
    except ValueError as e:
        raise ConfigValidationError(f"{var_name} must be a valid integer, got '{value}'") from e

    if result <= 0:
        raise ConfigValidationError(f"{var_name} must be positive, got {result}")
    return result


def validate_log_level(value: str, var_name: str) -> str:
    """Validate log level."""
    valid_levels = list(LOG_LEVELS)
    if value.upper() not in valid_levels:
        raise ConfigValidationError(f"{var_name} must be one of {valid_levels}, got '{value}'")
    return value.upper()


def validate_column_policy(value: str, var_name: str) -> str:
    """Validate the out-of-range column policy name."""
    if value.lower() not in VALID_COLUMN_POLICIES:
        raise ConfigValidationError(
            f"{var_name} must be one of {list(VALID_COLUMN_POLICIES)}, got '{value}'"
        )
    return value.lower()


def validate_encoding(value: str, var_name: str) -> str:
    """Validate that an encoding name is known to the codecs registry."""
    try:
        return codecs.lookup(value).name
    except LookupError as e:
        raise ConfigValidationError(f"{var_name} must be a known text encoding, got '{value}'") from e


class MatcherConfig:
    """Selection matching configuration."""

    # How out-of-range lines and columns are handled: "strict" raises, "clamp" trims
    COLUMN_POLICY: str = validate_column_policy(
        os.getenv("TEXTMATCHER_COLUMN_POLICY", "strict"), "TEXTMATCHER_COLUMN_POLICY"
    )

    # Encoding used for buffer files and for byte-string lines
    BUFFER_ENCODING: str = validate_encoding(
        os.getenv("TEXTMATCHER_BUFFER_ENCODING", "utf-8"), "TEXTMATCHER_BUFFER_ENCODING"
    )


class LoggingConfig:
    """Logging configuration."""

    LOG_LEVEL: str = validate_log_level(
        os.getenv("TEXTMATCHER_LOG_LEVEL", "WARNING"), "TEXTMATCHER_LOG_LEVEL"
    )

    LOG_FORMAT: str = os.getenv(
        "TEXTMATCHER_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # File logging
    LOG_FILE: Optional[str] = os.getenv("TEXTMATCHER_LOG_FILE")
    LOG_MAX_SIZE: int = validate_positive_int(
        os.getenv("TEXTMATCHER_LOG_MAX_SIZE", "10485760"), "TEXTMATCHER_LOG_MAX_SIZE"
    )  # 10MB
    LOG_BACKUP_COUNT: int = validate_positive_int(
        os.getenv("TEXTMATCHER_LOG_BACKUP_COUNT", "5"), "TEXTMATCHER_LOG_BACKUP_COUNT"
    )


class Config:
    """Main configuration class that provides access to all configuration sections."""

    matcher = MatcherConfig()
    logging = LoggingConfig()

    @classmethod
    def get_summary(cls) -> str:
        """Get a summary of current configuration settings."""
        return f"""
textmatcher Configuration Summary:
==================================

Matcher:
  Column Policy: {cls.matcher.COLUMN_POLICY}
  Buffer Encoding: {cls.matcher.BUFFER_ENCODING}

Logging:
  Level: {cls.logging.LOG_LEVEL}
  File: {cls.logging.LOG_FILE or 'Console only'}
        """


# Create a global config instance for easy access
config = Config()
