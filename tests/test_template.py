"""Tests for logger configuration and JSON templates"""

import json

import pytest

from prettylogger import (
    Color,
    ConfigError,
    FormatError,
    Logger,
    LoggerConfig,
    OnDropPolicy,
    Verbosity,
)
from prettylogger.formatters import FormatterConfig


def custom_config(log_path) -> LoggerConfig:
    return LoggerConfig(
        formatter=FormatterConfig(
            log_header_color_enabled=False,
            debug_color=Color.GRAY,
            fatal_color=Color.NONE,
            warning_header="WARN",
            log_format="%d <%h> %m",
            datetime_format="%H:%M:%S",
        ),
        verbosity=Verbosity.ERRORS_ONLY,
        filtering_enabled=False,
        output_enabled=False,
        stderr_enabled=False,
        buffer_enabled=True,
        file_enabled=True,
        file_max_buffer_size=None,
        file_on_drop_policy=OnDropPolicy.IGNORE_LOG_FILE_LOCK,
        log_file_path=str(log_path),
    )


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.verbosity == Verbosity.STANDARD
        assert config.filtering_enabled is True
        assert config.stderr_enabled is True
        assert config.file_max_buffer_size == 128
        assert config.file_on_drop_policy == OnDropPolicy.DISCARD_LOG_BUFFER

    def test_presets(self):
        assert LoggerConfig.debug_config().verbosity == Verbosity.ALL
        assert LoggerConfig.quiet_config().verbosity == Verbosity.QUIET

    def test_file_enabled_requires_path(self):
        with pytest.raises(ConfigError):
            LoggerConfig(file_enabled=True)

    def test_invalid_max_buffer_size(self):
        with pytest.raises(ConfigError):
            LoggerConfig(file_max_buffer_size=0)

    def test_template_layout(self):
        data = LoggerConfig().to_dict()
        assert set(data) == {"formatter", "output", "verbosity", "filtering_enabled"}
        assert data["verbosity"] == "Standard"
        assert data["formatter"]["info_color"] == "Green"
        assert data["output"]["stderr_output"] == {"enabled": True}
        assert data["output"]["file_output"]["on_drop_policy"] == "DiscardLogBuffer"


class TestTemplateRoundTrip:
    """Test template serialization."""

    def test_default_round_trip(self):
        config = LoggerConfig()
        assert LoggerConfig.from_json(config.to_json()) == config

    def test_custom_round_trip(self, tmp_path):
        config = custom_config(tmp_path / "app.log")
        assert LoggerConfig.from_json(config.to_json()) == config

    def test_logger_round_trip(self, tmp_path):
        config = custom_config(tmp_path / "app.log")
        logger = Logger.from_config(config)

        restored = Logger.from_template_str(logger.save_template_str())

        assert restored.config == config
        logger.close()
        restored.close()

    def test_default_logger_round_trip(self):
        logger = Logger()
        assert Logger.from_template_str(logger.save_template_str()).config == logger.config

    def test_file_round_trip(self, tmp_path):
        path = tmp_path / "template.json"
        logger = Logger()
        logger.set_verbosity(Verbosity.QUIET)
        logger.formatter.set_error_header("E")
        logger.save_template(path)

        loaded = Logger.from_template(path)
        assert loaded.verbosity == Verbosity.QUIET
        assert loaded.formatter.config.error_header == "E"
        assert loaded.config == logger.config

    def test_applied_state(self, tmp_path):
        logger = Logger.from_config(custom_config(tmp_path / "app.log"))
        assert not logger.output.is_enabled()
        assert not logger.output.stderr_output.is_enabled()
        assert logger.output.buffer_output.is_enabled()
        assert logger.output.file_output.is_enabled()
        assert logger.output.file_output.on_drop_policy == OnDropPolicy.IGNORE_LOG_FILE_LOCK
        assert logger.filtering_enabled is False
        logger.close()


class TestTemplateValidation:
    """Test rejection of invalid templates."""

    def test_missing_keys_take_defaults(self):
        config = LoggerConfig.from_json('{"verbosity": "Quiet"}')
        assert config == LoggerConfig(verbosity=Verbosity.QUIET)

    def test_log_format_revalidated_on_load(self):
        text = json.dumps({"formatter": {"log_format": "[%h]"}})
        with pytest.raises(FormatError):
            Logger.from_template_str(text)

    def test_invalid_verbosity(self):
        with pytest.raises(ConfigError):
            Logger.from_template_str('{"verbosity": "Loud"}')

    def test_invalid_drop_policy(self):
        text = json.dumps({"output": {"file_output": {"on_drop_policy": "FlushAll"}}})
        with pytest.raises(ConfigError):
            Logger.from_template_str(text)

    def test_wrong_types(self):
        with pytest.raises(ConfigError):
            LoggerConfig.from_json('{"filtering_enabled": "yes"}')
        with pytest.raises(ConfigError):
            LoggerConfig.from_json('{"output": []}')

    def test_malformed_json(self):
        with pytest.raises(ConfigError):
            Logger.from_template_str("{not json")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            Logger.from_template(tmp_path / "absent.json")

    def test_file_enabled_without_path(self):
        text = json.dumps({"output": {"file_output": {"enabled": True}}})
        with pytest.raises(ConfigError):
            Logger.from_template_str(text)
