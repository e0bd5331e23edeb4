"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

prettylogger - A configurable logging library with template formatting,
verbosity filtering and stderr, buffer and file outputs
"""

import logging

__version__ = "1.0.0"

from prettylogger.core.logger import Logger
from prettylogger.core.logger_builder import LoggerBuilder
from prettylogger.core.log_event import LogEvent
from prettylogger.core.log_level import Severity, Verbosity, OnDropPolicy
from prettylogger.core.colors import Color
from prettylogger.core.logger_config import LoggerConfig
from prettylogger.core.exceptions import (
    PrettyLoggerError,
    ConfigError,
    FormatError,
    PathError,
    LockedError,
    LogIOError,
    DispatchError,
)
from prettylogger.formatters.log_formatter import LogFormatter
from prettylogger.formatters.formatter_config import FormatterConfig
from prettylogger.routing.output_router import OutputRouter
from prettylogger.streams import OutputStream, StderrStream, BufferStream, FileStream

# Import submodules (not all classes by default)
from prettylogger import filters
from prettylogger import formatters
from prettylogger import glob

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEvent",
    "Severity",
    "Verbosity",
    "OnDropPolicy",
    "Color",
    "LoggerConfig",
    "LogFormatter",
    "FormatterConfig",
    "OutputRouter",
    "OutputStream",
    "StderrStream",
    "BufferStream",
    "FileStream",
    "PrettyLoggerError",
    "ConfigError",
    "FormatError",
    "PathError",
    "LockedError",
    "LogIOError",
    "DispatchError",
    "filters",
    "formatters",
    "glob",
]
