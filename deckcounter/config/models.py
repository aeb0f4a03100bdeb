"""
Configuration models for the counter plugin.

This module defines dataclasses for the configuration domains of the plugin
process: how it logs and where it connects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from deckcounter.config.constants import (
    BACKUP_COUNT,
    COUNTER_ACTION,
    DEFAULT_HOST,
    DEFAULT_LOG_DIR,
    DEFAULT_LOG_FILE,
    DEFAULT_OPEN_TIMEOUT,
    MAX_LOG_SIZE,
)


class LogLevel(Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_dir: str = DEFAULT_LOG_DIR
    log_filename: str = DEFAULT_LOG_FILE
    file_logging: bool = True
    max_file_size: int = MAX_LOG_SIZE
    backup_count: int = BACKUP_COUNT


@dataclass
class PluginConfig:
    """Connection settings handed to the plugin by the host at launch.

    ``port``, ``plugin_uuid``, ``register_event`` and ``info`` come from the
    command line; the remaining fields may be overridden from the environment.
    """

    port: int
    plugin_uuid: str
    register_event: str
    info: Optional[str] = None
    host: str = DEFAULT_HOST
    counter_action: str = COUNTER_ACTION
    open_timeout: float = DEFAULT_OPEN_TIMEOUT
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        if not 0 < self.port < 65536:
            raise ValueError(f"Port out of range: {self.port}")
        if not self.plugin_uuid:
            raise ValueError("Plugin UUID is required")
        if not self.register_event:
            raise ValueError("Registration event name is required")

    def get_websocket_url(self) -> str:
        """Get the host application's plugin WebSocket URL."""
        return f"ws://{self.host}:{self.port}"
