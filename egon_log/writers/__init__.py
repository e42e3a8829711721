"""Writers module - Log output handlers"""

from egon_log.writers.console_writer import ConsoleWriter

__all__ = ["ConsoleWriter"]
