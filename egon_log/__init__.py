"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Egon Log - A leveled console logger with named timers
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from egon_log.core.logger import Logger
from egon_log.core.logger_builder import LoggerBuilder
from egon_log.core.log_entry import LogEntry
from egon_log.core.log_level import LogLevel
from egon_log.core.logger_config import LoggerConfig
from egon_log.formatters.text_formatter import TextFormatter
from egon_log.formatters.ansi_style import red, yellow, green, highlight_style
from egon_log.writers.console_writer import ConsoleWriter

# Import submodules (not all classes by default)
from egon_log import formatters
from egon_log import timing
from egon_log import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "TextFormatter",
    "ConsoleWriter",
    "red",
    "yellow",
    "green",
    "highlight_style",
    "formatters",
    "timing",
    "writers",
]
