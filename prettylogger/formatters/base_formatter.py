"""
Formatter interface

Streams that write text (stderr, file) call a formatter to turn a
LogEvent into one output line; the buffer stream keeps raw events.
"""

from abc import ABC, abstractmethod
from prettylogger.core.log_event import LogEvent


class BaseFormatter(ABC):
    """Renders LogEvents into lines for text streams."""

    @abstractmethod
    def format(self, event: LogEvent) -> str:
        """
        Render a single line.

        The returned line has no trailing newline; streams append it.
        """

    def __call__(self, event: LogEvent) -> str:
        return self.format(event)
