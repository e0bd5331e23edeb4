"""
Log formatters module

Provides the template formatter and its configuration.
"""

from prettylogger.formatters.base_formatter import BaseFormatter
from prettylogger.formatters.formatter_config import FormatterConfig
from prettylogger.formatters.log_formatter import LogFormatter

__all__ = [
    "BaseFormatter",
    "FormatterConfig",
    "LogFormatter",
]
