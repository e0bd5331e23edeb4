"""
Main Logger class

Filters log events by verbosity, then routes them through an OutputRouter
that formats them with the Logger's LogFormatter.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from prettylogger.core.log_event import LogEvent
from prettylogger.core.log_level import Severity, Verbosity
from prettylogger.core.logger_config import LoggerConfig
from prettylogger.core.exceptions import DispatchError
from prettylogger.filters.verbosity_filter import VerbosityFilter
from prettylogger.formatters.log_formatter import LogFormatter
from prettylogger.routing.output_router import OutputRouter

_log = logging.getLogger(__name__)


class Logger:
    """
    Main logger class.

    A Logger is meant to be used by one thread at a time. Wrap it in a
    lock (see prettylogger.glob) to share it between threads.

    Example:
        logger = Logger()
        logger.set_verbosity(Verbosity.ALL)
        logger.debug("debug message")
        logger.error("error message")
    """

    def __init__(
        self,
        formatter: Optional[LogFormatter] = None,
        output: Optional[OutputRouter] = None,
        verbosity: Verbosity = Verbosity.STANDARD,
        filtering_enabled: bool = True,
    ):
        self._formatter = formatter if formatter is not None else LogFormatter()
        self._output = output if output is not None else OutputRouter()
        self._filter = VerbosityFilter(verbosity, filtering_enabled)
        self._metrics = {"logged": 0, "filtered": 0, "failed": 0}

    # Construction from configuration

    @classmethod
    def from_config(cls, config: LoggerConfig) -> "Logger":
        """
        Create a logger from a configuration snapshot.

        Raises:
            PathError: If the configured log file path is not writable
        """
        logger = cls(
            formatter=LogFormatter(config.formatter.copy()),
            verbosity=config.verbosity,
            filtering_enabled=config.filtering_enabled,
        )
        output = logger.output
        if config.output_enabled:
            output.enable()
        else:
            output.disable()
        _toggle(output.stderr_output, config.stderr_enabled)
        _toggle(output.buffer_output, config.buffer_enabled)

        file_output = output.file_output
        file_output.set_max_buffer_size(config.file_max_buffer_size)
        file_output.set_on_drop_policy(config.file_on_drop_policy)
        if config.log_file_path is not None:
            file_output.set_log_file_path(config.log_file_path)
        if config.file_enabled:
            file_output.enable()
        return logger

    @classmethod
    def from_template(cls, path: Union[str, Path]) -> "Logger":
        """
        Create a logger from a JSON template file.

        Raises:
            ConfigError: If the template cannot be read or is invalid
        """
        _log.debug("Loading logger template from %s", path)
        return cls.from_config(LoggerConfig.load(path))

    @classmethod
    def from_template_str(cls, text: str) -> "Logger":
        """
        Create a logger from a JSON template string.

        Raises:
            ConfigError: If the template is invalid
        """
        return cls.from_config(LoggerConfig.from_json(text))

    def save_template(self, path: Union[str, Path]) -> None:
        """Write the logger's configuration to a JSON template file."""
        self.config.save(path)

    def save_template_str(self) -> str:
        """Serialize the logger's configuration to a JSON template string."""
        return self.config.to_json()

    @property
    def config(self) -> LoggerConfig:
        """Snapshot of the current configuration."""
        file_output = self._output.file_output
        return LoggerConfig(
            formatter=self._formatter.config.copy(),
            verbosity=self._filter.verbosity,
            filtering_enabled=self._filter.enabled,
            output_enabled=self._output.is_enabled(),
            stderr_enabled=self._output.stderr_output.is_enabled(),
            buffer_enabled=self._output.buffer_output.is_enabled(),
            file_enabled=file_output.is_enabled(),
            file_max_buffer_size=file_output.max_buffer_size,
            file_on_drop_policy=file_output.on_drop_policy,
            log_file_path=file_output.path,
        )

    # Accessors

    @property
    def formatter(self) -> LogFormatter:
        return self._formatter

    @property
    def output(self) -> OutputRouter:
        return self._output

    @property
    def verbosity(self) -> Verbosity:
        return self._filter.verbosity

    @property
    def filtering_enabled(self) -> bool:
        return self._filter.enabled

    def set_verbosity(self, verbosity: Verbosity) -> None:
        self._filter.verbosity = verbosity

    def enable_log_filtering(self) -> None:
        self._filter.enabled = True

    def disable_log_filtering(self) -> None:
        self._filter.enabled = False

    def toggle_log_filtering(self, enabled: bool) -> None:
        self._filter.enabled = bool(enabled)

    def should_log(self, severity: Severity) -> bool:
        """Check if a severity passes the current filtering settings."""
        return self._filter.allows(severity)

    # Logging

    def log(self, severity: Severity, message: str) -> bool:
        """
        Log a message.

        Args:
            severity: Event severity
            message: Log message

        Returns:
            True if the event was dispatched, False if it was filtered

        Raises:
            DispatchError: If any stream failed; the others still received
                           the event
        """
        event = LogEvent(severity, message)
        if not self._filter.should_log(event):
            self._metrics["filtered"] += 1
            return False
        self._dispatch(event)
        return True

    def log_no_filtering(self, severity: Severity, message: str) -> bool:
        """Log a message, bypassing verbosity filtering."""
        self._dispatch(LogEvent(severity, message))
        return True

    def _dispatch(self, event: LogEvent) -> None:
        try:
            self._output.dispatch(event, self._formatter)
        except DispatchError:
            self._metrics["failed"] += 1
            raise
        finally:
            self._metrics["logged"] += 1

    def debug(self, message: str) -> bool:
        """Log debug message."""
        return self.log(Severity.DEBUG, message)

    def info(self, message: str) -> bool:
        """Log info message."""
        return self.log(Severity.INFO, message)

    def warning(self, message: str) -> bool:
        """Log warning message."""
        return self.log(Severity.WARNING, message)

    warn = warning

    def error(self, message: str) -> bool:
        """Log error message."""
        return self.log(Severity.ERROR, message)

    def fatal(self, message: str) -> bool:
        """Log fatal error message."""
        return self.log(Severity.FATAL, message)

    def debug_no_filtering(self, message: str) -> bool:
        return self.log_no_filtering(Severity.DEBUG, message)

    def info_no_filtering(self, message: str) -> bool:
        return self.log_no_filtering(Severity.INFO, message)

    def warning_no_filtering(self, message: str) -> bool:
        return self.log_no_filtering(Severity.WARNING, message)

    # Lifecycle

    def flush(self) -> None:
        """Flush all streams with pending output."""
        self._output.flush()

    def close(self) -> None:
        """Close all streams, applying file drop policies."""
        self._output.close()

    def __enter__(self) -> "Logger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def get_metrics(self) -> Dict[str, int]:
        """Get logging metrics."""
        return self._metrics.copy()

    def __repr__(self) -> str:
        return (
            f"Logger(verbosity={self.verbosity}, "
            f"filtering_enabled={self.filtering_enabled}, output={self._output!r})"
        )


def _toggle(stream, enabled: bool) -> None:
    if enabled:
        stream.enable()
    else:
        stream.disable()
