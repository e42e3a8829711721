"""
Log level enumeration

Levels are ranked from most to least severe; a lower value is more severe.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    A message is emitted when its level is less than or equal to the
    logger's threshold.
    """

    ERROR = 0   # Failures
    WARN = 1    # Warning messages
    INFO = 2    # Informational messages
    DEBUG = 3   # Most verbose, debug information

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(level_str.strip().upper())
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level

    def is_enabled_for(self, threshold: "LogLevel") -> bool:
        """Check whether a message at this level passes ``threshold``."""
        return self <= threshold

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence, empty for uncolored levels
        """
        colors = {
            LogLevel.ERROR: "\033[31m",     # Red
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.INFO: "\033[32m",      # Green
        }
        return colors.get(self, "")


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.ERROR: "ERROR",
    LogLevel.WARN: "WARN",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}
LEVEL_FROM_NAME["WARNING"] = LogLevel.WARN
