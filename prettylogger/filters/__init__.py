"""
Log filters module

Provides filters that decide whether a log event is emitted.
"""

from prettylogger.filters.base_filter import BaseFilter
from prettylogger.filters.verbosity_filter import VerbosityFilter

__all__ = [
    "BaseFilter",
    "VerbosityFilter",
]
