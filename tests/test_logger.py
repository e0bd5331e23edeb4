"""Basic tests for logger system"""

import io
import itertools

import pytest

from prettylogger import (
    Logger,
    LoggerBuilder,
    LoggerConfig,
    LogEvent,
    Severity,
    Verbosity,
    DispatchError,
    FormatError,
    LockedError,
)
from prettylogger.filters import VerbosityFilter
from prettylogger.streams import OutputStream, StderrStream


class FailingStream(OutputStream):
    """Stream that always fails."""

    name = "failing"

    def __init__(self):
        super().__init__(enabled=True)

    def out(self, event, formatter=None):
        raise RuntimeError("sink unavailable")


def make_logger(**kwargs) -> Logger:
    """Logger with only the buffer stream enabled."""
    logger = Logger(**kwargs)
    logger.output.stderr_output.disable()
    logger.output.buffer_output.enable()
    return logger


class TestSeverity:
    """Test severity ordering."""

    def test_severity_order(self):
        assert Severity.DEBUG < Severity.INFO
        assert Severity.INFO < Severity.WARNING
        assert Severity.WARNING < Severity.ERROR
        assert Severity.ERROR < Severity.FATAL

    def test_from_string(self):
        assert Severity.from_string("DEBUG") == Severity.DEBUG
        assert Severity.from_string("info") == Severity.INFO
        assert Severity.from_string("Err") == Severity.ERROR
        with pytest.raises(ValueError):
            Severity.from_string("verbose")

    def test_verbosity_thresholds(self):
        assert Verbosity.ALL.threshold == Severity.DEBUG
        assert Verbosity.STANDARD.threshold == Severity.INFO
        assert Verbosity.QUIET.threshold == Severity.WARNING
        assert Verbosity.ERRORS_ONLY.threshold == Severity.ERROR

    def test_verbosity_from_string(self):
        assert Verbosity.from_string("ErrorsOnly") == Verbosity.ERRORS_ONLY
        assert Verbosity.from_string("quiet") == Verbosity.QUIET
        assert Verbosity.from_string("ERRORS_ONLY") == Verbosity.ERRORS_ONLY
        with pytest.raises(ValueError):
            Verbosity.from_string("default")


class TestLogEvent:
    """Test log event structure."""

    def test_create_event(self):
        event = LogEvent(severity=Severity.INFO, message="Test message")
        assert event.severity == Severity.INFO
        assert event.message == "Test message"
        assert event.timestamp is not None

    def test_event_is_immutable(self):
        event = LogEvent.debug("Test")
        with pytest.raises(AttributeError):
            event.message = "changed"

    def test_rejects_non_severity(self):
        with pytest.raises(TypeError):
            LogEvent(severity="INFO", message="Test")

    def test_to_dict(self):
        data = LogEvent.warning("Test").to_dict()
        assert data["severity"] == "Warning"
        assert data["message"] == "Test"
        assert LogEvent.from_dict(data).severity == Severity.WARNING


class TestVerbosityFilter:
    """Test filter decisions."""

    def test_filtering_rule_for_every_combination(self):
        for severity, verbosity, enabled in itertools.product(
            Severity, Verbosity, (True, False)
        ):
            expected = (
                not enabled
                or severity in (Severity.ERROR, Severity.FATAL)
                or severity >= verbosity.threshold
            )
            assert VerbosityFilter(verbosity, enabled).allows(severity) is expected

    def test_fatal_and_error_never_filtered(self):
        log_filter = VerbosityFilter(Verbosity.ERRORS_ONLY)
        assert log_filter.should_log(LogEvent.fatal("x"))
        assert log_filter.should_log(LogEvent.error("x"))
        assert not log_filter.should_log(LogEvent.warning("x"))


class TestLogger:
    """Test main logger functionality."""

    def test_defaults(self):
        logger = Logger()
        assert logger.verbosity == Verbosity.STANDARD
        assert logger.filtering_enabled is True
        assert logger.output.stderr_output.is_enabled()
        assert not logger.output.buffer_output.is_enabled()
        assert not logger.output.file_output.is_enabled()
        logger.close()

    def test_standard_verbosity_suppresses_debug(self):
        logger = make_logger()

        assert logger.debug("x") is False
        assert logger.info("y") is True
        assert logger.error("z") is True

        events = logger.output.buffer_output.get_log_buffer()
        assert [e.message for e in events] == ["y", "z"]

    def test_emits_per_filter_rule(self):
        for severity, verbosity, enabled in itertools.product(
            Severity, Verbosity, (True, False)
        ):
            logger = make_logger(verbosity=verbosity, filtering_enabled=enabled)
            emitted = logger.log(severity, "m")
            expected = (
                not enabled
                or severity == Severity.FATAL
                or severity >= verbosity.threshold
            )
            assert emitted is expected
            assert len(logger.output.buffer_output) == int(expected)

    def test_disable_log_filtering(self):
        logger = make_logger(verbosity=Verbosity.ERRORS_ONLY)
        logger.disable_log_filtering()
        logger.debug("shown")
        assert len(logger.output.buffer_output) == 1

        logger.enable_log_filtering()
        logger.debug("hidden")
        assert len(logger.output.buffer_output) == 1

    def test_no_filtering_variants(self):
        logger = make_logger(verbosity=Verbosity.ERRORS_ONLY)
        logger.debug_no_filtering("d")
        logger.info_no_filtering("i")
        logger.warning_no_filtering("w")
        severities = [e.severity for e in logger.output.buffer_output.get_log_buffer()]
        assert severities == [Severity.DEBUG, Severity.INFO, Severity.WARNING]

    def test_events_keep_call_order(self):
        logger = make_logger(verbosity=Verbosity.ALL)
        for i in range(20):
            logger.info(f"message {i}")
        messages = [e.message for e in logger.output.buffer_output.get_log_buffer()]
        assert messages == [f"message {i}" for i in range(20)]

    def test_stderr_end_to_end(self, capsys):
        logger = Logger()
        logger.formatter.toggle_log_header_color(False)

        logger.debug("x")
        logger.info("y")
        logger.error("z")

        captured = capsys.readouterr()
        assert captured.err == "[INF] y\n[ERR] z\n"
        assert captured.out == ""

    def test_colored_header_on_stderr(self, capsys):
        logger = Logger()
        logger.warning("careful")
        assert capsys.readouterr().err == "[\033[33mWAR\033[0m] careful\n"

    def test_disabled_router_drops_everything(self):
        logger = make_logger()
        logger.output.disable()
        assert logger.fatal("lost") is True
        assert len(logger.output.buffer_output) == 0

    def test_stream_failure_does_not_block_siblings(self):
        logger = make_logger()
        logger.output.register_stream("failing", FailingStream())

        with pytest.raises(DispatchError) as exc_info:
            logger.error("boom")

        assert exc_info.value.stream_names == ["failing"]
        assert isinstance(exc_info.value.errors[0][1], RuntimeError)
        assert len(logger.output.buffer_output) == 1
        assert logger.get_metrics()["failed"] == 1

    def test_locked_file_reported_but_others_receive(self, tmp_path):
        logger = make_logger()
        file_output = logger.output.file_output
        file_output.set_log_file_path(tmp_path / "app.log")
        file_output.enable()
        file_output.lock_file()

        with pytest.raises(DispatchError) as exc_info:
            logger.fatal("still buffered")

        assert exc_info.value.stream_names == ["file"]
        assert isinstance(exc_info.value.errors[0][1], LockedError)
        assert len(logger.output.buffer_output) == 1
        logger.close()

    def test_metrics(self):
        logger = make_logger()
        logger.debug("filtered")
        logger.info("logged")
        logger.error("logged")
        metrics = logger.get_metrics()
        assert metrics["logged"] == 2
        assert metrics["filtered"] == 1
        assert metrics["failed"] == 0

    def test_set_log_format_rejects_missing_placeholder(self):
        logger = Logger()
        with pytest.raises(FormatError):
            logger.formatter.set_log_format("[%h]")
        assert logger.formatter.config.log_format == "[%h] %m"

    def test_context_manager_flushes_file(self, tmp_path):
        path = tmp_path / "app.log"
        with LoggerBuilder().with_stderr(False).with_file(path).build() as logger:
            logger.info("hello")
        assert path.read_text(encoding="utf-8").endswith("hello\n")


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_builder_pattern(self):
        logger = (LoggerBuilder()
            .with_verbosity(Verbosity.QUIET)
            .with_filtering(True)
            .with_log_format("<%h> %m")
            .with_header_color(False)
            .with_stderr(False)
            .with_buffer()
            .build())

        assert logger.verbosity == Verbosity.QUIET
        assert logger.formatter.config.log_format == "<%h> %m"
        assert not logger.output.stderr_output.is_enabled()
        assert logger.output.buffer_output.is_enabled()

    def test_builder_with_header(self):
        logger = (LoggerBuilder()
            .with_header(Severity.INFO, "info")
            .with_header_color(False)
            .build())
        assert logger.formatter.get_header(Severity.INFO) == "info"

    def test_builder_with_custom_stream(self):
        sink = io.StringIO()
        logger = (LoggerBuilder()
            .with_stderr(False)
            .with_header_color(False)
            .add_stream("capture", StderrStream(stream=sink))
            .build())

        logger.info("captured")
        assert sink.getvalue() == "[INF] captured\n"

    def test_builder_rejects_bad_format(self):
        with pytest.raises(FormatError):
            LoggerBuilder().with_log_format("no placeholder")

    def test_builder_with_file(self, tmp_path):
        path = tmp_path / "builder.log"
        logger = LoggerBuilder().with_file(path, max_buffer_size=None).build()
        file_output = logger.output.file_output
        assert file_output.is_enabled()
        assert file_output.path == str(path)
        assert file_output.max_buffer_size is None
        logger.close()

    def test_builder_keeps_file_disabled_from_config(self, tmp_path):
        path = tmp_path / "off.log"
        config = LoggerConfig(stderr_enabled=False, file_enabled=False, log_file_path=str(path))

        logger = LoggerBuilder(config).build()

        file_output = logger.output.file_output
        assert not file_output.is_enabled()
        assert file_output.path == str(path)
        assert logger.config.file_enabled is False
        logger.info("not written")
        logger.close()
        assert path.read_text(encoding="utf-8") == ""

    def test_builder_keeps_file_enabled_from_config(self, tmp_path):
        path = tmp_path / "on.log"
        config = LoggerConfig(stderr_enabled=False, file_enabled=True, log_file_path=str(path))

        logger = LoggerBuilder(config).build()

        assert logger.output.file_output.is_enabled()
        logger.close()
