"""
Log formatters module

Prefix formatting and ANSI styling for console output.
"""

from egon_log.formatters.base_formatter import BaseFormatter
from egon_log.formatters.text_formatter import TextFormatter
from egon_log.formatters.ansi_style import (
    Style,
    Styled,
    red,
    yellow,
    green,
    black,
    bg_white,
    highlight_style,
    render_value,
)

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "Style",
    "Styled",
    "red",
    "yellow",
    "green",
    "black",
    "bg_white",
    "highlight_style",
    "render_value",
]
