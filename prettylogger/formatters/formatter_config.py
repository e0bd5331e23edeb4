"""
Formatter configuration

Headers, colors and templates used by LogFormatter.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict

from prettylogger.core.colors import Color
from prettylogger.core.exceptions import ConfigError, FormatError
from prettylogger.core.log_level import Severity


MESSAGE_PLACEHOLDER = "%m"

DEFAULT_LOG_FORMAT = "[%h] %m"
DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def has_message_placeholder(log_format: str) -> bool:
    """
    Scan a template left to right the way LogFormatter renders it.

    "%%m" is an escaped percent followed by a literal "m", not a placeholder.
    """
    i = 0
    length = len(log_format)
    while i < length - 1:
        if log_format[i] != "%":
            i += 1
            continue
        if log_format[i + 1] == "m":
            return True
        i += 2
    return False


def validate_log_format(log_format: str) -> str:
    """
    Check that a log format template contains the message placeholder.

    Raises:
        FormatError: If the placeholder is missing
    """
    if not isinstance(log_format, str):
        raise FormatError("Log format must be a string")
    if not has_message_placeholder(log_format):
        raise FormatError(
            f"Expected a message placeholder ('{MESSAGE_PLACEHOLDER}') "
            f"in log format: {log_format!r}"
        )
    return log_format


@dataclass
class FormatterConfig:
    """
    Formatter configuration.

    Assigning a log_format without "%m" raises FormatError and keeps the
    previous template.
    """

    log_header_color_enabled: bool = True

    debug_color: Color = Color.BLUE
    info_color: Color = Color.GREEN
    warning_color: Color = Color.YELLOW
    error_color: Color = Color.RED
    fatal_color: Color = Color.MAGENTA

    debug_header: str = "DBG"
    info_header: str = "INF"
    warning_header: str = "WAR"
    error_header: str = "ERR"
    fatal_header: str = "FATAL"

    log_format: str = DEFAULT_LOG_FORMAT
    datetime_format: str = DEFAULT_DATETIME_FORMAT

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "log_format":
            validate_log_format(value)
        elif name.endswith("_color") and not isinstance(value, Color):
            raise ConfigError(f"{name} must be a Color, got {value!r}")
        super().__setattr__(name, value)

    def header_for(self, severity: Severity) -> str:
        """Header label for a severity."""
        return getattr(self, f"{_FIELD_PREFIX[severity]}_header")

    def color_for(self, severity: Severity) -> Color:
        """Header color for a severity."""
        return getattr(self, f"{_FIELD_PREFIX[severity]}_color")

    def set_header(self, severity: Severity, header: str) -> None:
        setattr(self, f"{_FIELD_PREFIX[severity]}_header", str(header))

    def set_color(self, severity: Severity, color: Color) -> None:
        setattr(self, f"{_FIELD_PREFIX[severity]}_color", color)

    def copy(self) -> "FormatterConfig":
        return FormatterConfig(**{f.name: getattr(self, f.name) for f in fields(self)})

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = value.value if isinstance(value, Color) else value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormatterConfig":
        """
        Create configuration from dictionary. Missing keys keep defaults.

        Raises:
            ConfigError: On unknown colors, wrong value types or a log
                         format without the message placeholder
        """
        if not isinstance(data, dict):
            raise ConfigError("formatter section must be an object")

        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.name.endswith("_color"):
                if not isinstance(value, str):
                    raise ConfigError(f"{f.name} must be a color name")
                try:
                    value = Color.from_string(value)
                except ValueError as e:
                    raise ConfigError(str(e)) from e
            elif f.name == "log_header_color_enabled":
                if not isinstance(value, bool):
                    raise ConfigError(f"{f.name} must be a boolean")
            elif not isinstance(value, str):
                raise ConfigError(f"{f.name} must be a string")
            kwargs[f.name] = value

        return cls(**kwargs)


_FIELD_PREFIX = {
    Severity.DEBUG: "debug",
    Severity.INFO: "info",
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
    Severity.FATAL: "fatal",
}
