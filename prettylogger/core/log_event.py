"""
Log event data structure
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from prettylogger.core.log_level import Severity


@dataclass(frozen=True)
class LogEvent:
    """
    A single log occurrence.

    Immutable once created; the timestamp is captured at construction.
    """

    severity: Severity
    message: str
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate log event after initialization."""
        if not isinstance(self.severity, Severity):
            raise TypeError("severity must be Severity enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    @classmethod
    def debug(cls, message: str) -> "LogEvent":
        return cls(Severity.DEBUG, message)

    @classmethod
    def info(cls, message: str) -> "LogEvent":
        return cls(Severity.INFO, message)

    @classmethod
    def warning(cls, message: str) -> "LogEvent":
        return cls(Severity.WARNING, message)

    @classmethod
    def error(cls, message: str) -> "LogEvent":
        return cls(Severity.ERROR, message)

    @classmethod
    def fatal(cls, message: str) -> "LogEvent":
        return cls(Severity.FATAL, message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log event to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "severity": self.severity.display_name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEvent":
        """
        Create log event from dictionary.

        Args:
            data: Dictionary with log event data

        Returns:
            New LogEvent instance
        """
        return cls(
            severity=Severity.from_string(data["severity"]),
            message=data["message"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.severity.display_name:7}] "
            f"{self.message}"
        )
