"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from egon_log.core.logger import Logger
from egon_log.core.logger_builder import LoggerBuilder
from egon_log.core.log_entry import LogEntry
from egon_log.core.log_level import LogLevel
from egon_log.core.logger_config import LoggerConfig

__all__ = ["Logger", "LoggerBuilder", "LogEntry", "LogLevel", "LoggerConfig"]
