"""
Filter interface

A filter decides, before formatting, whether a LogEvent reaches the
output router at all.
"""

from abc import ABC, abstractmethod
from prettylogger.core.log_event import LogEvent


class BaseFilter(ABC):
    """Gate applied by Logger ahead of dispatch."""

    @abstractmethod
    def should_log(self, event: LogEvent) -> bool:
        """Return False to drop the event before any stream sees it."""

    def __call__(self, event: LogEvent) -> bool:
        return self.should_log(event)
