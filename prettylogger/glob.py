"""
Process-wide logger

A lazily created Logger shared through module-level functions. Every call
holds a re-entrant lock, so the shared logger can be used from several
threads.

Example:
    from prettylogger import glob

    glob.info("service started")
    with glob.locked() as logger:
        logger.set_verbosity(Verbosity.ALL)
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from prettylogger.core.log_level import Severity
from prettylogger.core.logger import Logger

_lock = threading.RLock()
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get the shared logger, creating a default one on first use."""
    global _logger
    with _lock:
        if _logger is None:
            _logger = Logger()
        return _logger


def set_logger(logger: Optional[Logger]) -> Optional[Logger]:
    """
    Replace the shared logger.

    Args:
        logger: New logger, or None to fall back to a fresh default

    Returns:
        The previous logger, if one was created
    """
    global _logger
    with _lock:
        previous = _logger
        _logger = logger
        return previous


@contextmanager
def locked() -> Iterator[Logger]:
    """Hold the lock while configuring the shared logger."""
    with _lock:
        yield get_logger()


def log(severity: Severity, message: str) -> bool:
    with _lock:
        return get_logger().log(severity, message)


def debug(message: str) -> bool:
    """Log debug message with the shared logger."""
    return log(Severity.DEBUG, message)


def info(message: str) -> bool:
    """Log info message with the shared logger."""
    return log(Severity.INFO, message)


def warning(message: str) -> bool:
    """Log warning message with the shared logger."""
    return log(Severity.WARNING, message)


def error(message: str) -> bool:
    """Log error message with the shared logger."""
    return log(Severity.ERROR, message)


def fatal(message: str) -> bool:
    """Log fatal error message with the shared logger."""
    return log(Severity.FATAL, message)
