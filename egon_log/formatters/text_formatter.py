"""
Text formatter with customizable template

Builds the ``[timestamp] [LEVEL]`` prefix of console lines
"""

from datetime import timezone

from egon_log.core.log_entry import LogEntry
from egon_log.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entry prefixes using a customizable template.

    Timestamps are converted to UTC and printed as ISO-8601 with
    millisecond precision, e.g. ``2026-10-18T09:15:02.123Z``.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] [{level}]"
    TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"

    def __init__(self, template: str = None):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: ISO-8601 UTC timestamp
                     - {level}: Log level name
                     - {logger}: Logger name

        Example:
            # Default format
            formatter = TextFormatter()

            # With logger name
            formatter = TextFormatter("[{timestamp}] [{logger}] [{level}]")
        """
        self.template = template or self.DEFAULT_TEMPLATE

    @classmethod
    def format_timestamp(cls, entry: LogEntry) -> str:
        """Render the entry timestamp as ISO-8601 UTC with milliseconds."""
        ts = entry.timestamp.astimezone(timezone.utc)
        return ts.strftime(cls.TIMESTAMP_FORMAT)[:-3] + "Z"  # Keep milliseconds

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry prefix using the template.

        Args:
            entry: Log entry to format

        Returns:
            Formatted prefix
        """
        format_dict = {
            "timestamp": self.format_timestamp(entry),
            "level": entry.level.name,
            "logger": entry.logger_name,
        }

        try:
            return self.template.format(**format_dict)
        except KeyError as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] [{entry.level.name}]"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
