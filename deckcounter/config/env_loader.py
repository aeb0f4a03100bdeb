"""
Environment variable loader for plugin configuration.

The host launches the plugin with a fixed set of command line arguments, so
anything beyond those four values is read from the environment (optionally
seeded from a ``.env`` file next to the plugin), with type conversion and
fallback to defaults.
"""

import os
from pathlib import Path
from typing import Optional, Type, TypeVar, cast

from dotenv import load_dotenv

from .constants import (
    COUNTER_ACTION,
    DEFAULT_HOST,
    DEFAULT_LOG_DIR,
    DEFAULT_LOG_FILE,
    DEFAULT_OPEN_TIMEOUT,
)
from .models import LoggingConfig, LogLevel, PluginConfig


def load_env_file(env_file: Optional[str] = None) -> bool:
    """Load environment variables from a .env file.

    Args:
        env_file: Path to the .env file. If None, python-dotenv searches for one.

    Returns:
        bool: True if a file was found and loaded
    """
    if env_file:
        return load_dotenv(env_file)
    return load_dotenv()


T = TypeVar("T")


def safe_convert(value: Optional[str], target_type: Type[T], default: T) -> T:
    """Safely convert environment variable string to target type."""
    if value is None:
        return default

    try:
        if target_type == bool:
            return cast(T, value.strip().lower() in ("1", "true", "yes", "on"))
        elif target_type == int:
            return cast(T, int(value))
        elif target_type == float:
            return cast(T, float(value))
        elif target_type == str:
            return cast(T, value)
        elif target_type == Path:
            return cast(T, Path(value))
        elif callable(target_type):
            return cast(T, target_type(value))  # type: ignore
        else:
            return default
    except (ValueError, TypeError):
        return default


def safe_string_or_none(value: Optional[str]) -> Optional[str]:
    """Convert environment variable to string or None if empty."""
    if value is None or value.strip() == "":
        return None
    return value.strip()


def load_logging_config() -> LoggingConfig:
    """Load logging configuration from environment variables."""
    level_name = safe_string_or_none(os.getenv("LOG_LEVEL"))
    level = safe_convert(
        level_name.upper() if level_name else None, LogLevel, LogLevel.INFO
    )
    return LoggingConfig(
        level=level,
        log_dir=os.getenv("LOG_DIR", DEFAULT_LOG_DIR),
        log_filename=os.getenv("LOG_FILENAME", DEFAULT_LOG_FILE),
        file_logging=safe_convert(os.getenv("LOG_FILE_ENABLED"), bool, True),
    )


def load_plugin_config(
    port: str,
    plugin_uuid: str,
    register_event: str,
    info: Optional[str] = None,
) -> PluginConfig:
    """Build the plugin configuration from startup arguments and environment.

    Args:
        port: Port number as passed on the command line
        plugin_uuid: Identifier the host assigned to this plugin instance
        register_event: Name of the registration command to send
        info: Opaque host/application description blob

    Returns:
        PluginConfig: The merged configuration

    Raises:
        ValueError: If the port is not a valid TCP port or a required value is empty
    """
    try:
        port_number = int(port)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid port: {port!r}") from e

    return PluginConfig(
        port=port_number,
        plugin_uuid=plugin_uuid,
        register_event=register_event,
        info=info,
        host=os.getenv("DECK_HOST", DEFAULT_HOST),
        counter_action=os.getenv("COUNTER_ACTION", COUNTER_ACTION),
        open_timeout=safe_convert(
            os.getenv("DECK_OPEN_TIMEOUT"), float, DEFAULT_OPEN_TIMEOUT
        ),
        logging=load_logging_config(),
    )
