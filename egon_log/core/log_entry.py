"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Tuple

from egon_log.core.log_level import LogLevel


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Holds the values passed to a logging call untouched, so structured
    objects reach the writer intact.
    """

    level: LogLevel
    values: Tuple[Any, ...] = ()
    timestamp: datetime = field(default_factory=_utc_now)
    logger_name: str = ""

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.values, tuple):
            self.values = tuple(self.values)

