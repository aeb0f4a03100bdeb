"""
Configure logging for the plugin.

This module provides a consistent logging configuration across the plugin,
ensuring log messages are formatted correctly and directed to the console
and, when possible, to a rotating log file. The host application swallows
plugin stdout, so the file is usually the only place diagnostics survive.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from deckcounter.config.constants import LOGGER_NAME
from deckcounter.config.models import LoggingConfig


def configure_logging(
    name: str = LOGGER_NAME, log_config: Optional[LoggingConfig] = None
) -> logging.Logger:
    """
    Configure the plugin logger with console and file handlers.

    Args:
        name: Logger name, normally the package logger
        log_config: Logging settings; defaults are used when omitted

    Returns:
        logging.Logger: The configured logger instance
    """
    log_config = log_config or LoggingConfig()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_config.level.value))

    # Remove existing handlers if any
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter(log_config.format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_config.file_logging:
        try:
            log_dir = Path(log_config.log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_dir / log_config.log_filename,
                maxBytes=log_config.max_file_size,
                backupCount=log_config.backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {e}")

    # Prevent log propagation to root logger
    logger.propagate = False

    logger.debug("Logging configured")
    return logger
