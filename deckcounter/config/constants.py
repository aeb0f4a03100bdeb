"""
Constants and configuration values used throughout the plugin.

This module defines constants that are used across different parts of the plugin,
providing a centralized location for protocol identifiers and defaults.
"""

# Logger name used throughout the plugin
LOGGER_NAME = "deckcounter"

# The host only accepts plugin connections on the loopback interface
DEFAULT_HOST = "localhost"

# Action identifier declared in the plugin manifest for the counter button
COUNTER_ACTION = "com.yourname.counter.action"

# Seconds to wait for the websocket opening handshake
DEFAULT_OPEN_TIMEOUT = 10.0

# Logging defaults
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "deckcounter.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5
