"""In-memory counter state keyed by context."""

import logging
from typing import Dict

from deckcounter.config.constants import LOGGER_NAME

logger = logging.getLogger(f"{LOGGER_NAME}.state")


class CounterStore:
    """
    Mapping from context identifier to a non-negative counter.

    Unknown contexts read as 0. Nothing here is persisted; the host stores the
    value through setSettings and hands it back with didReceiveSettings.
    Mutations are expected to come from a single consumer (the receive loop).
    """

    def __init__(self):
        self._counters: Dict[str, int] = {}

    def get(self, context: str) -> int:
        """Return the counter for a context, 0 if unset. Does not create an entry."""
        return self._counters.get(context, 0)

    def increment(self, context: str) -> int:
        """Add one to the counter for a context and return the new value."""
        value = self.get(context) + 1
        self._counters[context] = value
        logger.debug(f"Counter for {context} incremented to {value}")
        return value

    def set(self, context: str, value: int) -> None:
        """Overwrite the counter for a context."""
        if value < 0:
            raise ValueError(f"Counter value must be non-negative, got {value}")
        self._counters[context] = value
        logger.debug(f"Counter for {context} set to {value}")

    def __len__(self) -> int:
        return len(self._counters)
