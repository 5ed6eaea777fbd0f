"""
Logging configuration for the textmatcher library.

This module sets up logging for every textmatcher module using the
configuration from config.py.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from .config import config, validate_log_level


def resolve_level(level: str) -> int:
    """
    Convert a level name to its numeric logging level.

    Raises:
        ConfigValidationError: If the name is not a standard level
    """
    return logging.getLevelName(validate_log_level(level, "log level"))


def setup_logging(
    logger_name: str = "textmatcher",
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging for the library.

    Args:
        logger_name: Name of the logger
        log_level: Override log level from config
        log_file: Override log file from config

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)

    # Don't configure if already configured
    if logger.handlers:
        return logger

    logger.setLevel(resolve_level(log_level or config.logging.LOG_LEVEL))

    formatter = logging.Formatter(config.logging.LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    file_path = log_file or config.logging.LOG_FILE
    if file_path:
        log_path = Path(file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config.logging.LOG_MAX_SIZE,
            backupCount=config.logging.LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent duplicate logs
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    if name == "textmatcher" or name.startswith("textmatcher."):
        return setup_logging(name)
    return setup_logging(f"textmatcher.{name}")


def set_log_level(level: str) -> None:
    """
    Change the level of every configured textmatcher logger.

    Raises:
        ConfigValidationError: If the name is not a standard level
    """
    numeric_level = resolve_level(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and (
            name == "textmatcher" or name.startswith("textmatcher.")
        ):
            logger.setLevel(numeric_level)
