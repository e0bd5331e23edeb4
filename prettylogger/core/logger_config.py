"""
Logger configuration management

LoggerConfig is a snapshot of every piece of Logger state that belongs in a
template file, and handles the JSON (de)serialization of templates.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from prettylogger.core.exceptions import ConfigError
from prettylogger.core.log_level import OnDropPolicy, Verbosity
from prettylogger.formatters.formatter_config import FormatterConfig
from prettylogger.streams.file_stream import DEFAULT_MAX_BUFFER_SIZE


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Serializes to the template layout:
    {"formatter": {...}, "output": {...}, "verbosity": ..., "filtering_enabled": ...}
    """

    # Formatting
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    # Filtering
    verbosity: Verbosity = Verbosity.STANDARD
    filtering_enabled: bool = True

    # Output
    output_enabled: bool = True
    stderr_enabled: bool = True
    buffer_enabled: bool = False
    file_enabled: bool = False
    file_max_buffer_size: Optional[int] = DEFAULT_MAX_BUFFER_SIZE
    file_on_drop_policy: OnDropPolicy = OnDropPolicy.DISCARD_LOG_BUFFER
    log_file_path: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.formatter, FormatterConfig):
            raise ConfigError("formatter must be a FormatterConfig")
        if not isinstance(self.verbosity, Verbosity):
            raise ConfigError(f"Invalid verbosity: {self.verbosity!r}")
        if not isinstance(self.file_on_drop_policy, OnDropPolicy):
            raise ConfigError(f"Invalid on drop policy: {self.file_on_drop_policy!r}")
        if self.file_max_buffer_size is not None and (
            isinstance(self.file_max_buffer_size, bool)
            or not isinstance(self.file_max_buffer_size, int)
            or self.file_max_buffer_size <= 0
        ):
            raise ConfigError("file_max_buffer_size must be a positive integer or None")
        if self.file_enabled and not self.log_file_path:
            raise ConfigError("file output enabled without a log_file_path")

        # Convert log_file_path to str if it's a Path
        if isinstance(self.log_file_path, Path):
            self.log_file_path = str(self.log_file_path)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            verbosity=Verbosity.ALL,
            formatter=FormatterConfig(log_format="%d [%h] %m"),
        )

    @classmethod
    def quiet_config(cls) -> "LoggerConfig":
        """Create configuration that only shows warnings and errors."""
        return cls(verbosity=Verbosity.QUIET)

    # Serialization

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the template dictionary layout."""
        return {
            "formatter": self.formatter.to_dict(),
            "output": {
                "enabled": self.output_enabled,
                "stderr_output": {"enabled": self.stderr_enabled},
                "buffer_output": {"enabled": self.buffer_enabled},
                "file_output": {
                    "enabled": self.file_enabled,
                    "max_buffer_size": self.file_max_buffer_size,
                    "on_drop_policy": self.file_on_drop_policy.value,
                    "log_file_path": self.log_file_path,
                },
            },
            "verbosity": self.verbosity.display_name,
            "filtering_enabled": self.filtering_enabled,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggerConfig":
        """
        Create configuration from the template dictionary layout.

        Missing keys take their defaults.

        Raises:
            ConfigError: On wrong types, unknown enum names or an invalid
                         log format
        """
        if not isinstance(data, dict):
            raise ConfigError("Template must be a JSON object")

        kwargs: Dict[str, Any] = {}

        if "formatter" in data:
            kwargs["formatter"] = FormatterConfig.from_dict(data["formatter"])

        if "verbosity" in data:
            kwargs["verbosity"] = _parse_enum(data["verbosity"], Verbosity.from_string, "verbosity")
        if "filtering_enabled" in data:
            kwargs["filtering_enabled"] = _expect_bool(data["filtering_enabled"], "filtering_enabled")

        output = data.get("output", {})
        if not isinstance(output, dict):
            raise ConfigError("output section must be an object")
        if "enabled" in output:
            kwargs["output_enabled"] = _expect_bool(output["enabled"], "output.enabled")

        stderr_output = _section(output, "stderr_output")
        if "enabled" in stderr_output:
            kwargs["stderr_enabled"] = _expect_bool(stderr_output["enabled"], "stderr_output.enabled")

        buffer_output = _section(output, "buffer_output")
        if "enabled" in buffer_output:
            kwargs["buffer_enabled"] = _expect_bool(buffer_output["enabled"], "buffer_output.enabled")

        file_output = _section(output, "file_output")
        if "enabled" in file_output:
            kwargs["file_enabled"] = _expect_bool(file_output["enabled"], "file_output.enabled")
        if "max_buffer_size" in file_output:
            kwargs["file_max_buffer_size"] = file_output["max_buffer_size"]
        if "on_drop_policy" in file_output:
            kwargs["file_on_drop_policy"] = _parse_enum(
                file_output["on_drop_policy"], OnDropPolicy.from_string, "on_drop_policy"
            )
        if "log_file_path" in file_output:
            path = file_output["log_file_path"]
            if path is not None and not isinstance(path, str):
                raise ConfigError("file_output.log_file_path must be a string or null")
            kwargs["log_file_path"] = path

        return cls(**kwargs)

    def to_json(self) -> str:
        """Serialize to a pretty-printed JSON template."""
        return json.dumps(self.to_dict(), indent=4, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "LoggerConfig":
        """
        Parse a JSON template.

        Raises:
            ConfigError: If the text is not valid JSON or not a valid template
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON template: {e}") from e
        return cls.from_dict(data)

    def save(self, path: Union[str, Path]) -> None:
        """Write the JSON template to a file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: Union[str, Path]) -> "LoggerConfig":
        """
        Read a JSON template from a file.

        Raises:
            ConfigError: If the file cannot be read or is not a valid template
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Unable to read template {path}: {e}") from e
        return cls.from_json(text)


def _section(output: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = output.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"output.{key} must be an object")
    return value


def _expect_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be a boolean")
    return value


def _parse_enum(value: Any, parse, name: str):
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string")
    try:
        return parse(value)
    except ValueError as e:
        raise ConfigError(str(e)) from e
