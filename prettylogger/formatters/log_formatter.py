"""
Template formatter with per-severity headers and colors

Renders a LogEvent through a template using the placeholders:
- %h: severity header (colored when header colors are enabled)
- %d: event timestamp, formatted with the datetime template
- %m: log message (mandatory)
"""

from datetime import datetime
from typing import Optional

from prettylogger.core.colors import Color, color_text
from prettylogger.core.log_event import LogEvent
from prettylogger.core.log_level import Severity
from prettylogger.formatters.base_formatter import BaseFormatter
from prettylogger.formatters.formatter_config import FormatterConfig


class LogFormatter(BaseFormatter):
    """
    Format log events using a customizable template.

    Any other "%x" sequence renders as "x", so "%%" renders a literal
    percent sign. A lone "%" at the end of the template is dropped.

    Example:
        formatter = LogFormatter()
        formatter.set_log_format("%d | %h | %m")
        formatter.set_datetime_format("%H:%M:%S")
        line = formatter.format(LogEvent.info("ready"))
    """

    def __init__(self, config: Optional[FormatterConfig] = None):
        """
        Initialize formatter.

        Args:
            config: Formatter configuration (default: FormatterConfig())
        """
        self.config = config if config is not None else FormatterConfig()

    def format(self, event: LogEvent) -> str:
        """
        Format log event using the template.

        Args:
            event: Log event to format

        Returns:
            Formatted line, without a trailing newline
        """
        template = self.config.log_format
        header = self.get_header(event.severity)
        timestamp = self.format_datetime(event.timestamp) if "%d" in template else ""

        parts = []
        i = 0
        length = len(template)
        while i < length:
            char = template[i]
            if char != "%":
                parts.append(char)
                i += 1
                continue
            if i + 1 >= length:
                break
            placeholder = template[i + 1]
            if placeholder == "h":
                parts.append(header)
            elif placeholder == "d":
                parts.append(timestamp)
            elif placeholder == "m":
                parts.append(event.message)
            else:
                parts.append(placeholder)
            i += 2

        return "".join(parts)

    def render(self, event: LogEvent) -> str:
        """Alias of format()."""
        return self.format(event)

    def format_datetime(self, timestamp: datetime) -> str:
        """
        Format a timestamp with the configured datetime template.

        Falls back to "YYYY-MM-DD HH:MM:SS" (isoformat) if the template
        cannot be rendered.
        """
        try:
            return timestamp.strftime(self.config.datetime_format)
        except ValueError:
            return timestamp.isoformat(sep=" ", timespec="seconds")

    def get_header(self, severity: Severity) -> str:
        """Header for a severity, colored if header colors are enabled."""
        return self.colorify(
            self.config.header_for(severity),
            self.config.color_for(severity),
        )

    def get_color(self, severity: Severity) -> Color:
        return self.config.color_for(severity)

    def colorify(self, text: str, color: Color) -> str:
        if self.config.log_header_color_enabled:
            return color_text(text, color)
        return text

    # Setters

    def set_log_format(self, log_format: str) -> None:
        """
        Set the log line template.

        Raises:
            FormatError: If "%m" is missing; the previous template is kept
        """
        self.config.log_format = log_format

    def set_datetime_format(self, datetime_format: str) -> None:
        """Set the strftime template used for "%d"."""
        self.config.datetime_format = str(datetime_format)

    def toggle_log_header_color(self, enabled: bool) -> None:
        self.config.log_header_color_enabled = bool(enabled)

    def set_header(self, severity: Severity, header: str) -> None:
        self.config.set_header(severity, header)

    def set_color(self, severity: Severity, color: Color) -> None:
        self.config.set_color(severity, color)

    def set_debug_header(self, header: str) -> None:
        self.set_header(Severity.DEBUG, header)

    def set_info_header(self, header: str) -> None:
        self.set_header(Severity.INFO, header)

    def set_warning_header(self, header: str) -> None:
        self.set_header(Severity.WARNING, header)

    def set_error_header(self, header: str) -> None:
        self.set_header(Severity.ERROR, header)

    def set_fatal_header(self, header: str) -> None:
        self.set_header(Severity.FATAL, header)

    def set_debug_color(self, color: Color) -> None:
        self.set_color(Severity.DEBUG, color)

    def set_info_color(self, color: Color) -> None:
        self.set_color(Severity.INFO, color)

    def set_warning_color(self, color: Color) -> None:
        self.set_color(Severity.WARNING, color)

    def set_error_color(self, color: Color) -> None:
        self.set_color(Severity.ERROR, color)

    def set_fatal_color(self, color: Color) -> None:
        self.set_color(Severity.FATAL, color)

    def __repr__(self) -> str:
        """String representation."""
        return f"LogFormatter(log_format='{self.config.log_format}')"
