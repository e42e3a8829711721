"""Logger builder pattern"""

from typing import Any, Optional, Union

from egon_log.core.logger import Logger
from egon_log.core.logger_config import LoggerConfig
from egon_log.core.log_level import LogLevel
from egon_log.writers.console_writer import ConsoleWriter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig.default()
        self._writer: Optional[Any] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set the initial threshold."""
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        self._config.level = level
        return self

    def with_console(self, colored: bool = True) -> "LoggerBuilder":
        """Enable/disable ANSI colors on console output."""
        self._config.colored_output = colored
        return self

    def with_format(self, template: str) -> "LoggerBuilder":
        """
        Set the line prefix template.

        Placeholders: {timestamp}, {level}, {logger}
        """
        self._config.message_format = template
        return self

    def with_writer(self, writer) -> "LoggerBuilder":
        """
        Use a custom writer instead of the console.

        Args:
            writer: Object with error/warn/info/debug/log/table methods

        Returns:
            Self for method chaining

        Example:
            logger = (LoggerBuilder()
                .with_writer(ConsoleWriter(stream=buffer, colored=False))
                .build())
        """
        self._writer = writer
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        writer = self._writer or ConsoleWriter(colored=self._config.colored_output)
        return Logger(self._config, writer=writer)
