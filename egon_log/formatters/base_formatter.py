"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from egon_log.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters turn a LogEntry into the prefix written ahead of its values.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a prefix string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted prefix for the log entry
        """
        pass

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)
