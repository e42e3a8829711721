"""Shared fixtures for logger tests"""

import pytest

from egon_log import Logger, LoggerConfig, LogLevel


class MockWriter:
    """Mock writer recording (channel, values) for every call."""

    def __init__(self):
        self.calls = []

    def _record(self, channel, values):
        self.calls.append((channel, values))

    def error(self, *values):
        self._record("error", values)

    def warn(self, *values):
        self._record("warn", values)

    def info(self, *values):
        self._record("info", values)

    def debug(self, *values):
        self._record("debug", values)

    def log(self, *values):
        self._record("log", values)

    def table(self, *values):
        self._record("table", values)

    def channels(self):
        return [channel for channel, _ in self.calls]

    def texts(self):
        """Each call rendered without colors."""
        return [" ".join(str(v) for v in values) for _, values in self.calls]

    def clear(self):
        self.calls.clear()


@pytest.fixture
def writer():
    return MockWriter()


@pytest.fixture
def make_logger(writer):
    def _make(level=LogLevel.DEBUG):
        return Logger(LoggerConfig(level=level), writer=writer)
    return _make
