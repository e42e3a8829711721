"""
Logger configuration management
"""

from dataclasses import dataclass

from egon_log.core.log_level import LogLevel


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    ``level`` is required; a level name such as ``"debug"`` is accepted
    and converted.
    """

    level: LogLevel
    name: str = "egon"
    colored_output: bool = True

    # Format settings
    message_format: str = "[{timestamp}] [{level}]"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.level, str):
            self.level = LogLevel.from_string(self.level)
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum or level name")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls(level=LogLevel.INFO)

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(level=LogLevel.DEBUG, colored_output=True)

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(level=LogLevel.WARN, colored_output=False)
