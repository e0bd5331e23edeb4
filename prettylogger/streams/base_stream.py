"""
Base output stream interface
"""

from abc import ABC, abstractmethod
from typing import Optional

from prettylogger.core.log_event import LogEvent
from prettylogger.formatters.base_formatter import BaseFormatter


class OutputStream(ABC):
    """
    Abstract base class for output streams.

    A stream is a toggleable destination for log events. ``out`` on a
    disabled stream does nothing.
    """

    name = "stream"

    def __init__(self, enabled: bool = False):
        self._enabled = enabled

    def enable(self) -> None:
        """Enable the stream."""
        self._enabled = True

    def disable(self) -> None:
        """Disable the stream."""
        self._enabled = False

    def is_enabled(self) -> bool:
        """Check if the stream is enabled."""
        return self._enabled

    @property
    def enabled(self) -> bool:
        return self.is_enabled()

    @abstractmethod
    def out(self, event: LogEvent, formatter: Optional[BaseFormatter] = None) -> None:
        """
        Consume a log event.

        Args:
            event: Log event to output
            formatter: Formatter for streams that write text
        """
        pass

    def flush(self) -> None:
        """Flush pending output. Most streams have nothing to flush."""

    def close(self) -> None:
        """Release resources held by the stream."""

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(enabled={self._enabled})"
