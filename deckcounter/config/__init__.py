"""
Configuration for the counter plugin.

```python
from deckcounter.config import load_env_file, load_plugin_config, configure_logging

load_env_file()
config = load_plugin_config("28196", plugin_uuid, "registerPlugin")
logger = configure_logging(log_config=config.logging)
print(config.get_websocket_url())
```
"""

from .constants import COUNTER_ACTION, DEFAULT_HOST, LOGGER_NAME
from .env_loader import (
    load_env_file,
    load_logging_config,
    load_plugin_config,
    safe_convert,
)
from .logging_config import configure_logging
from .models import LoggingConfig, LogLevel, PluginConfig

__all__ = [
    "COUNTER_ACTION",
    "DEFAULT_HOST",
    "LOGGER_NAME",
    "LoggingConfig",
    "LogLevel",
    "PluginConfig",
    "configure_logging",
    "load_env_file",
    "load_logging_config",
    "load_plugin_config",
    "safe_convert",
]
