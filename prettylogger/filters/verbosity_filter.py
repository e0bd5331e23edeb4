"""
Verbosity-based filter

Suppresses log events below the severity threshold of a Verbosity
"""

from prettylogger.core.log_event import LogEvent
from prettylogger.core.log_level import Severity, Verbosity
from prettylogger.filters.base_filter import BaseFilter


# Severities that filtering never suppresses
UNFILTERED_SEVERITIES = frozenset({Severity.ERROR, Severity.FATAL})


class VerbosityFilter(BaseFilter):
    """
    Filter log events based on verbosity.

    ERROR and FATAL events always pass. When disabled, every event passes.

    Example:
        # Only let warnings and above through
        log_filter = VerbosityFilter(Verbosity.QUIET)
    """

    def __init__(self, verbosity: Verbosity = Verbosity.STANDARD, enabled: bool = True):
        """
        Initialize verbosity filter.

        Args:
            verbosity: Verbosity whose threshold is applied
            enabled: Whether filtering is applied at all
        """
        self.verbosity = verbosity
        self.enabled = enabled

    def allows(self, severity: Severity) -> bool:
        """Check if a severity passes the filter."""
        if not self.enabled or severity in UNFILTERED_SEVERITIES:
            return True
        return severity >= self.verbosity.threshold

    def should_log(self, event: LogEvent) -> bool:
        """
        Check if event's severity passes the current verbosity.

        Args:
            event: Log event to check

        Returns:
            True if the event should be emitted, False otherwise
        """
        return self.allows(event.severity)

    def __repr__(self) -> str:
        """String representation."""
        return f"VerbosityFilter(verbosity={self.verbosity}, enabled={self.enabled})"
