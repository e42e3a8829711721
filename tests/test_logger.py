"""Basic tests for logger system"""

import io
import re

import pytest

from egon_log import (
    ConsoleWriter,
    LogEntry,
    Logger,
    LoggerBuilder,
    LoggerConfig,
    LogLevel,
)
from egon_log.formatters.ansi_style import Styled, highlight_style, red


PREFIX_RE = re.compile(r"^\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z\] \[(ERROR|WARN|INFO|DEBUG)\]")


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.ERROR < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.DEBUG

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string("warning") == LogLevel.WARN

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")

    def test_str(self):
        assert str(LogLevel.WARN) == "WARN"

    def test_color_codes(self):
        assert LogLevel.ERROR.color_code == "\033[31m"
        assert LogLevel.WARN.color_code == "\033[33m"
        assert LogLevel.INFO.color_code == "\033[32m"
        assert LogLevel.DEBUG.color_code == ""


class TestLogEntry:
    """Test log entry structure."""

    def test_create_entry(self):
        entry = LogEntry(level=LogLevel.INFO, values=("Test", 1))
        assert entry.level == LogLevel.INFO
        assert entry.values == ("Test", 1)
        assert entry.timestamp.tzinfo is not None

    def test_invalid_level(self):
        with pytest.raises(TypeError):
            LogEntry(level=2, values=("x",))


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.name == "egon"
        assert config.level == LogLevel.INFO
        assert config.colored_output is True
        assert config.message_format == "[{timestamp}] [{level}]"

    def test_debug_config(self):
        assert LoggerConfig.debug_config().level == LogLevel.DEBUG

    def test_production_config(self):
        config = LoggerConfig.production_config()
        assert config.level == LogLevel.WARN
        assert config.colored_output is False

    def test_level_name(self):
        assert LoggerConfig(level="warn").level == LogLevel.WARN

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            LoggerConfig(level="loud")
        with pytest.raises(TypeError):
            LoggerConfig(level=None)


class TestFiltering:
    """Test threshold gating."""

    @pytest.mark.parametrize("threshold", list(LogLevel))
    def test_emits_iff_at_or_above_threshold(self, make_logger, writer, threshold):
        logger = make_logger(threshold)
        logger.error("e")
        logger.warn("w")
        logger.info("i")
        logger.debug("d")

        expected = [lvl.name.lower() for lvl in LogLevel if lvl <= threshold]
        assert writer.channels() == expected

    def test_warn_threshold(self, make_logger, writer):
        logger = make_logger(LogLevel.WARN)
        logger.info("hidden")
        logger.debug("hidden")
        assert writer.calls == []
        logger.error("shown")
        logger.warn("shown")
        assert writer.channels() == ["error", "warn"]

    def test_threshold_evaluated_per_call(self, make_logger, writer):
        logger = make_logger(LogLevel.ERROR)
        logger.info("before")
        logger.set_level(LogLevel.INFO)
        logger.info("after")
        assert len(writer.calls) == 1
        assert writer.texts()[0].endswith("after")

    def test_suppressed_call_builds_no_entry(self, make_logger, writer, monkeypatch):
        logger = make_logger(LogLevel.ERROR)

        def fail(*args, **kwargs):
            raise AssertionError("entry built for suppressed call")

        monkeypatch.setattr("egon_log.core.logger.LogEntry", fail)
        logger.debug("nothing")
        assert writer.calls == []


class TestEmission:
    """Test formatting and dispatch of log lines."""

    def test_colored_levels_are_styled(self, make_logger, writer):
        logger = make_logger(LogLevel.DEBUG)
        logger.error("boom", {"code": 7})

        channel, values = writer.calls[0]
        assert channel == "error"
        assert len(values) == 1
        styled = values[0]
        assert isinstance(styled, Styled)
        assert styled.style == red
        assert PREFIX_RE.match(styled.values[0])
        assert styled.values[0].endswith("[ERROR]")
        # Values are handed over intact, not stringified
        assert styled.values[1:] == ("boom", {"code": 7})

    def test_debug_is_unstyled(self, make_logger, writer):
        logger = make_logger(LogLevel.DEBUG)
        payload = [1, 2]
        logger.debug("state", payload)

        channel, values = writer.calls[0]
        assert channel == "debug"
        assert PREFIX_RE.match(values[0])
        assert values[0].endswith("[DEBUG]")
        assert values[1] == "state"
        assert values[2] is payload

    def test_returns_none(self, make_logger):
        logger = make_logger()
        assert logger.info("x") is None

    def test_writer_error_is_reported(self, make_logger, writer, capsys):
        logger = make_logger()

        def broken(*values):
            raise IOError("disk gone")

        writer.info = broken
        logger.info("x")
        assert "Writer error: disk gone" in capsys.readouterr().err


class TestTableAndHighlight:
    """Test debug-only helpers."""

    def test_table_forwards_values(self, make_logger, writer):
        logger = make_logger(LogLevel.DEBUG)
        rows = [{"a": 1}, {"a": 2}]
        logger.table(rows, ["a"])
        assert writer.calls == [("table", (rows, ["a"]))]
        assert writer.calls[0][1][0] is rows

    def test_highlight_styles_strings_only(self, make_logger, writer):
        logger = make_logger(LogLevel.DEBUG)
        logger.highlight("look", 42, None)

        channel, values = writer.calls[0]
        assert channel == "log"
        assert isinstance(values[0], Styled)
        assert values[0].style == highlight_style
        assert values[0].values == ("look",)
        assert values[1:] == (42, None)

    @pytest.mark.parametrize("threshold", [LogLevel.ERROR, LogLevel.WARN, LogLevel.INFO])
    def test_noop_below_debug(self, make_logger, writer, threshold):
        logger = make_logger(threshold)
        logger.table([{"a": 1}])
        logger.highlight("x")
        assert writer.calls == []


    def test_table_argument_counts(self, capsys):
        out = io.StringIO()
        logger = Logger(
            LoggerConfig(level=LogLevel.DEBUG),
            writer=ConsoleWriter(colored=False, stream=out, error_stream=io.StringIO()),
        )
        logger.table()
        logger.table([{"a": "first"}], ["a"], "extra")

        assert "Writer error" not in capsys.readouterr().err
        assert "first" in out.getvalue()


class TestLevelAccess:
    """Test threshold mutators."""

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_set_get_round_trip(self, make_logger, level):
        logger = make_logger(LogLevel.INFO)
        logger.set_level(level)
        assert logger.get_level() == level
        assert logger.level == level

    def test_set_level_by_name(self, make_logger):
        logger = make_logger(LogLevel.INFO)
        logger.set_level("error")
        assert logger.get_level() == LogLevel.ERROR

    def test_level_property(self, make_logger):
        logger = make_logger(LogLevel.INFO)
        logger.level = LogLevel.DEBUG
        assert logger.get_level() == LogLevel.DEBUG

    def test_instances_are_independent(self, writer):
        first = Logger(LoggerConfig(level=LogLevel.INFO), writer=writer)
        second = Logger(LoggerConfig(level=LogLevel.INFO), writer=writer)
        first.set_level(LogLevel.ERROR)
        first.start_timer("job")
        assert second.get_level() == LogLevel.INFO
        assert "job" not in second.active_timers


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_builder_pattern(self):
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .with_level(LogLevel.WARN)
            .with_console(colored=False)
            .build())

        assert logger.name == "builder_test"
        assert logger.get_level() == LogLevel.WARN
        assert isinstance(logger._writer, ConsoleWriter)
        assert logger._writer.colored is False

    def test_builder_with_writer(self, writer):
        logger = LoggerBuilder().with_level("debug").with_writer(writer).build()
        logger.debug("hi")
        assert writer.channels() == ["debug"]

    def test_end_to_end_console(self):
        out, err = io.StringIO(), io.StringIO()
        logger = (LoggerBuilder()
            .with_level(LogLevel.INFO)
            .with_writer(ConsoleWriter(colored=False, stream=out, error_stream=err))
            .build())

        logger.info("started", {"port": 8080})
        logger.error("failed")
        logger.debug("hidden")

        out_lines = out.getvalue().splitlines()
        err_lines = err.getvalue().splitlines()
        assert len(out_lines) == 1
        assert PREFIX_RE.match(out_lines[0])
        assert out_lines[0].endswith("[INFO] started {'port': 8080}")
        assert len(err_lines) == 1
        assert err_lines[0].endswith("[ERROR] failed")

    def test_builder_with_format(self, writer):
        logger = (LoggerBuilder()
            .with_name("svc")
            .with_format("{logger}/{level}:")
            .with_writer(writer)
            .build())

        logger.info("up")
        assert writer.texts() == ["svc/INFO: up"]

    def test_unknown_placeholder_falls_back(self, writer):
        config = LoggerConfig(level=LogLevel.DEBUG, message_format="{host} {level}")
        logger = Logger(config, writer=writer)

        logger.debug("x")
        prefix = writer.calls[0][1][0]
        assert prefix.startswith("[FORMAT ERROR:")
        assert prefix.endswith("[DEBUG]")
