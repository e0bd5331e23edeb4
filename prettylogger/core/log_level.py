"""
Severity, verbosity and drop policy enumerations

Severity orders log events by importance, Verbosity maps a configured
suppression level onto a minimum Severity.
"""

from enum import Enum, IntEnum
from typing import Dict


class Severity(IntEnum):
    """
    Severity of a log event.

    Values are ordered by ascending importance.
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    def __str__(self) -> str:
        """String representation of severity."""
        return SEVERITY_NAMES[self]

    @property
    def display_name(self) -> str:
        """Name used in templates and JSON."""
        return SEVERITY_NAMES[self]

    @classmethod
    def from_string(cls, name: str) -> "Severity":
        """
        Convert string to Severity.

        Args:
            name: Severity name (case-insensitive). Accepts the aliases
                  "err", "warn" and "fatalerror".

        Returns:
            Severity enum value

        Raises:
            ValueError: If name is not valid
        """
        key = name.strip().lower()
        if key in SEVERITY_FROM_NAME:
            return SEVERITY_FROM_NAME[key]
        raise ValueError(f"Invalid severity: {name}")


class Verbosity(IntEnum):
    """
    Logger verbosity.

    Each level maps to the lowest severity that still gets through
    filtering.
    """

    ALL = 0
    STANDARD = 1
    QUIET = 2
    ERRORS_ONLY = 3

    def __str__(self) -> str:
        return VERBOSITY_NAMES[self]

    @property
    def display_name(self) -> str:
        """Name used in templates and JSON."""
        return VERBOSITY_NAMES[self]

    @property
    def threshold(self) -> Severity:
        """Minimum severity emitted at this verbosity."""
        return Severity(int(self))

    @classmethod
    def default(cls) -> "Verbosity":
        return cls.STANDARD

    @classmethod
    def from_string(cls, name: str) -> "Verbosity":
        """
        Convert string to Verbosity.

        Raises:
            ValueError: If name is not valid
        """
        for verbosity, display in VERBOSITY_NAMES.items():
            if display.lower() == name.strip().lower():
                return verbosity
        if name.strip().upper() in cls.__members__:
            return cls[name.strip().upper()]
        raise ValueError(f"Invalid verbosity: {name}")


class OnDropPolicy(Enum):
    """
    What a file stream does with pending lines when it is closed while its
    file lock is held.
    """

    IGNORE_LOG_FILE_LOCK = "IgnoreLogFileLock"
    DISCARD_LOG_BUFFER = "DiscardLogBuffer"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "OnDropPolicy":
        return cls.DISCARD_LOG_BUFFER

    @classmethod
    def from_string(cls, name: str) -> "OnDropPolicy":
        """
        Convert string to OnDropPolicy.

        Raises:
            ValueError: If name is not valid
        """
        for policy in cls:
            if name.strip().lower() in (policy.value.lower(), policy.name.lower()):
                return policy
        raise ValueError(f"Invalid on drop policy: {name}")


# Mapping from severity to names
SEVERITY_NAMES: Dict[Severity, str] = {
    Severity.DEBUG: "Debug",
    Severity.INFO: "Info",
    Severity.WARNING: "Warning",
    Severity.ERROR: "Error",
    Severity.FATAL: "Fatal",
}

# Reverse mapping, lower-cased, with aliases
SEVERITY_FROM_NAME: Dict[str, Severity] = {
    **{v.lower(): k for k, v in SEVERITY_NAMES.items()},
    "warn": Severity.WARNING,
    "err": Severity.ERROR,
    "fatalerror": Severity.FATAL,
}

VERBOSITY_NAMES: Dict[Verbosity, str] = {
    Verbosity.ALL: "All",
    Verbosity.STANDARD: "Standard",
    Verbosity.QUIET: "Quiet",
    Verbosity.ERRORS_ONLY: "ErrorsOnly",
}
