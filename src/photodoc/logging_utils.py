"""
Logging utilities: console setup for the CLI and a queue handler for
forwarding records to a UI console.
"""
from __future__ import annotations

import logging
import sys
from queue import Queue
from typing import Optional, TextIO

LOG_FORMAT = "%(message)s"
VERBOSE_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Attach a stream handler to the ``photodoc`` logger.

    Args:
        verbose: Log DEBUG with level and logger name instead of INFO messages.
        stream: Destination stream (default stderr).

    Returns:
        The installed handler (replaces one installed by a previous call).
    """
    logger = logging.getLogger("photodoc")
    for existing in list(logger.handlers):
        if getattr(existing, "_photodoc_console", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(VERBOSE_FORMAT if verbose else LOG_FORMAT))
    handler._photodoc_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends (message, level) tuples to a queue.

    Used to show library logs in a UI console.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter(LOG_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            level = record.levelname
            # Consoles only distinguish INFO and above
            if level == "DEBUG":
                level = "INFO"
            self.log_queue.put((message, level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = "photodoc") -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the specified logger.

    Args:
        log_queue: Queue to send log messages to.
        logger_name: Name of logger to attach to. None = root logger.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue)
    logger.addHandler(handler)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = "photodoc") -> None:
    """Remove a QueueLogHandler from the specified logger."""
    logger = logging.getLogger(logger_name)
    logger.removeHandler(handler)
