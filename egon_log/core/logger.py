"""
Main Logger class - Leveled console logger with named timers
"""

from __future__ import annotations
from typing import Any, Optional, Union
import sys

from egon_log.core.log_level import LogLevel
from egon_log.core.log_entry import LogEntry
from egon_log.core.logger_config import LoggerConfig
from egon_log.formatters.ansi_style import Style, highlight_style
from egon_log.formatters.text_formatter import TextFormatter
from egon_log.timing.timer_mixin import TimerMixin
from egon_log.writers.console_writer import ConsoleWriter


class Logger(TimerMixin):
    """Main logger class with level filtering and named timers."""

    def __init__(self, config: LoggerConfig, writer: Optional[Any] = None):
        self._config = config
        self._level = config.level
        self._writer = writer or ConsoleWriter(colored=config.colored_output)
        self._formatter = TextFormatter(config.message_format)
        self._init_timers()

    def _should_log(self, level: LogLevel) -> bool:
        return level.is_enabled_for(self._level)

    def _dispatch(self, channel: str, *values: Any) -> None:
        """Hand values to one writer channel."""
        try:
            getattr(self._writer, channel)(*values)
        except Exception as e:
            print(f"Writer error: {e}", file=sys.stderr)

    def log(self, level: LogLevel, *values: Any) -> None:
        """Log values at the given level."""
        if not self._should_log(level):
            return

        entry = LogEntry(level=level, values=values, logger_name=self._config.name)
        prefix = self._formatter.format(entry)

        style = Style(level.color_code)
        if style:
            self._dispatch(level.name.lower(), style(prefix, *entry.values))
        else:
            self._dispatch(level.name.lower(), prefix, *entry.values)

    def error(self, *values: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, *values)

    def warn(self, *values: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, *values)

    def info(self, *values: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, *values)

    def debug(self, *values: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, *values)

    def table(self, *values: Any) -> None:
        """Render tabular data; only at debug threshold."""
        if not self._should_log(LogLevel.DEBUG):
            return
        self._dispatch("table", *values)

    def highlight(self, *values: Any) -> None:
        """
        Write values with strings shown inverted; only at debug threshold.

        Non-string values are passed through unstyled.
        """
        if not self._should_log(LogLevel.DEBUG):
            return
        highlighted = [highlight_style(v) if isinstance(v, str) else v for v in values]
        self._dispatch("log", *highlighted)

    def set_level(self, level: Union[LogLevel, str]) -> None:
        """Replace the threshold."""
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        self._level = level

    def get_level(self) -> LogLevel:
        """Get the current threshold."""
        return self._level

    level = property(get_level, set_level)

    @property
    def name(self) -> str:
        return self._config.name

    def __repr__(self) -> str:
        return f"Logger(name='{self._config.name}', level={self._level})"
