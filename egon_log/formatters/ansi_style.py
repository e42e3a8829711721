"""
ANSI color styling

Styles wrap values in a ``Styled`` renderable instead of building a string
right away, so the writer still receives the original objects and decides
whether colors are emitted at all.
"""

from typing import Any, Tuple

RESET = "\033[0m"


def render_value(value: Any, colored: bool = True) -> str:
    """
    Render one logged value for console output.

    Args:
        value: Any object passed to a logging call
        colored: Keep ANSI codes of styled values

    Returns:
        Strings unchanged, styled values rendered, anything else via repr
    """
    if isinstance(value, Styled):
        return value.render(colored)
    if isinstance(value, str):
        return value
    return repr(value)


class Style:
    """A composable set of ANSI codes."""

    def __init__(self, *codes: str):
        self.codes: Tuple[str, ...] = tuple(c for c in codes if c)

    def __call__(self, *values: Any) -> "Styled":
        return Styled(self, values)

    def __add__(self, other: "Style") -> "Style":
        return Style(*(self.codes + other.codes))

    def __bool__(self) -> bool:
        return bool(self.codes)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Style) and self.codes == other.codes

    def __hash__(self) -> int:
        return hash(self.codes)

    def __repr__(self) -> str:
        return f"Style({', '.join(repr(c) for c in self.codes)})"


class Styled:
    """Values paired with the style they should be shown in."""

    def __init__(self, style: Style, values: Tuple[Any, ...]):
        self.style = style
        self.values = values

    def render(self, colored: bool = True) -> str:
        text = " ".join(render_value(v, colored) for v in self.values)
        if not colored or not self.style:
            return text
        return f"{''.join(self.style.codes)}{text}{RESET}"

    def __str__(self) -> str:
        return self.render(colored=False)

    def __repr__(self) -> str:
        return f"Styled({self.style!r}, {self.values!r})"


red = Style("\033[31m")
yellow = Style("\033[33m")
green = Style("\033[32m")
black = Style("\033[30m")
bg_white = Style("\033[47m")

# Inverse look used by Logger.highlight
highlight_style = bg_white + black
