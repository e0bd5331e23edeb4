"""Logger builder pattern"""

from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Tuple, Union

from prettylogger.core.colors import Color
from prettylogger.core.log_level import OnDropPolicy, Severity, Verbosity
from prettylogger.core.logger import Logger
from prettylogger.core.logger_config import LoggerConfig
from prettylogger.streams.base_stream import OutputStream
from prettylogger.streams.file_stream import DEFAULT_MAX_BUFFER_SIZE


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Example:
        logger = (LoggerBuilder()
            .with_verbosity(Verbosity.ALL)
            .with_log_format("%d [%h] %m")
            .with_file("logs/app.log", max_buffer_size=16)
            .build())
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = replace(config, formatter=config.formatter.copy()) if config else LoggerConfig()
        self._file_path: Optional[str] = self._config.log_file_path
        self._file_enabled = self._config.file_enabled
        self._custom_streams: List[Tuple[str, OutputStream]] = []

    def with_verbosity(self, verbosity: Verbosity) -> "LoggerBuilder":
        """Set verbosity."""
        self._config.verbosity = verbosity
        return self

    def with_filtering(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable verbosity filtering."""
        self._config.filtering_enabled = enabled
        return self

    def with_log_format(self, log_format: str) -> "LoggerBuilder":
        """
        Set the log line template.

        Raises:
            FormatError: If the template lacks "%m"
        """
        self._config.formatter.log_format = log_format
        return self

    def with_datetime_format(self, datetime_format: str) -> "LoggerBuilder":
        self._config.formatter.datetime_format = datetime_format
        return self

    def with_header_color(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable colored headers."""
        self._config.formatter.log_header_color_enabled = enabled
        return self

    def with_header(self, severity: Severity, header: str, color: Optional[Color] = None) -> "LoggerBuilder":
        """Set the header label, and optionally the color, for a severity."""
        self._config.formatter.set_header(severity, header)
        if color is not None:
            self._config.formatter.set_color(severity, color)
        return self

    def with_stderr(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable stderr output."""
        self._config.stderr_enabled = enabled
        return self

    def with_buffer(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable in-memory buffer output."""
        self._config.buffer_enabled = enabled
        return self

    def with_file(
        self,
        filepath: Union[str, Path],
        max_buffer_size: Optional[int] = DEFAULT_MAX_BUFFER_SIZE,
        on_drop_policy: OnDropPolicy = OnDropPolicy.DISCARD_LOG_BUFFER,
    ) -> "LoggerBuilder":
        """
        Enable file output.

        Args:
            filepath: Path to log file
            max_buffer_size: Lines buffered before auto-flush (None: manual flush)
            on_drop_policy: Behavior for pending lines when closed while locked
        """
        self._file_path = str(filepath)
        self._file_enabled = True
        self._config.file_max_buffer_size = max_buffer_size
        self._config.file_on_drop_policy = on_drop_policy
        return self

    def add_stream(self, name: str, stream: OutputStream) -> "LoggerBuilder":
        """
        Add a custom stream.

        Args:
            name: Unique stream name
            stream: OutputStream instance

        Returns:
            Self for method chaining
        """
        self._custom_streams.append((name, stream))
        return self

    def build(self) -> Logger:
        """
        Build and return configured logger.

        Raises:
            PathError: If the file path is not writable
        """
        config = LoggerConfig(
            formatter=self._config.formatter.copy(),
            verbosity=self._config.verbosity,
            filtering_enabled=self._config.filtering_enabled,
            output_enabled=self._config.output_enabled,
            stderr_enabled=self._config.stderr_enabled,
            buffer_enabled=self._config.buffer_enabled,
            file_enabled=self._file_enabled,
            file_max_buffer_size=self._config.file_max_buffer_size,
            file_on_drop_policy=self._config.file_on_drop_policy,
            log_file_path=self._file_path,
        )
        logger = Logger.from_config(config)

        for name, stream in self._custom_streams:
            logger.output.register_stream(name, stream)

        return logger
