"""
Error reporting for per-frame failures.

Bad JSON, incomplete events, writes on a closed socket and handler bugs are
all recoverable: they are logged at a level chosen by severity and counted
by context, and the receive loop carries on. The counts are summarized when
the session ends.
"""

import logging
from enum import Enum
from typing import Dict, Optional

from deckcounter.config.constants import LOGGER_NAME


class ErrorContext(Enum):
    """Where a failure happened."""

    CODEC = "codec"
    SEND = "send"
    HANDLER = "handler"


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = logging.DEBUG
    MEDIUM = logging.WARNING
    HIGH = logging.ERROR


class ErrorHandler:
    """Logs recoverable errors and keeps a count per context."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(f"{LOGGER_NAME}.errors")
        self.error_counts: Dict[ErrorContext, int] = {
            context: 0 for context in ErrorContext
        }

    def handle_error(
        self,
        error: Exception,
        context: ErrorContext,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        operation: str = "unknown",
        **metadata,
    ) -> None:
        """
        Log and count an error.

        Args:
            error: The exception that occurred
            context: Where it happened
            severity: Determines the log level
            operation: Name of the operation that failed
            **metadata: Additional details, e.g. the command or plugin context
        """
        self.error_counts[context] += 1
        details = f" {metadata}" if metadata else ""
        self.logger.log(
            severity.value, f"Error in {context.value} ({operation}): {error}{details}"
        )

    @property
    def total_errors(self) -> int:
        return sum(self.error_counts.values())

    def summary(self) -> str:
        """One-line summary of the counts, e.g. ``codec=1 send=0 handler=0``."""
        return " ".join(
            f"{context.value}={count}" for context, count in self.error_counts.items()
        )
