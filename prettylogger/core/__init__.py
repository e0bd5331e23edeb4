"""
Core module for prettylogger

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEvent: Log event data structure
- Severity, Verbosity, OnDropPolicy: Enumerations
- Color: Header colors
- LoggerConfig: Configuration and template management
"""

from prettylogger.core.log_level import Severity, Verbosity, OnDropPolicy
from prettylogger.core.colors import Color, color_text
from prettylogger.core.exceptions import (
    PrettyLoggerError,
    ConfigError,
    FormatError,
    PathError,
    LockedError,
    LogIOError,
    DispatchError,
)
from prettylogger.core.log_event import LogEvent
from prettylogger.core.logger_config import LoggerConfig
from prettylogger.core.logger import Logger
from prettylogger.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEvent",
    "Severity",
    "Verbosity",
    "OnDropPolicy",
    "Color",
    "color_text",
    "LoggerConfig",
    "PrettyLoggerError",
    "ConfigError",
    "FormatError",
    "PathError",
    "LockedError",
    "LogIOError",
    "DispatchError",
]
