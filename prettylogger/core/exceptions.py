"""
Exception hierarchy for prettylogger

- ConfigError: invalid configuration or template content
- PathError: file stream used without a valid writable path
- LockedError: file stream operation attempted while its lock is held
- LogIOError: the log file could not be opened or written
- DispatchError: one or more streams failed during a dispatch
"""

from typing import List, Optional, Tuple


class PrettyLoggerError(Exception):
    """Base exception for prettylogger."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(PrettyLoggerError, ValueError):
    """Invalid configuration value or template."""


class FormatError(ConfigError):
    """Log format template without the message placeholder."""


class PathError(PrettyLoggerError):
    """Log file path missing or not writable."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message} (path: {path})"
        super().__init__(message)


class LockedError(PrettyLoggerError):
    """Log file lock is held."""


class LogIOError(PrettyLoggerError, OSError):
    """Writing or opening the log file failed."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message} (path: {path})"
        super().__init__(message)


class DispatchError(PrettyLoggerError):
    """
    Raised after a dispatch in which some streams failed.

    Every enabled stream was still attempted. ``errors`` holds
    ``(stream_name, exception)`` pairs in dispatch order.
    """

    def __init__(self, errors: List[Tuple[str, Exception]]):
        self.errors = list(errors)
        details = "; ".join(f"{name}: {exc}" for name, exc in self.errors)
        super().__init__(f"{len(self.errors)} stream(s) failed: {details}")

    @property
    def stream_names(self) -> List[str]:
        return [name for name, _ in self.errors]
