"""Decorative banner printed at the top of interactive tools."""

from rich.console import Console

from ..console import console as default_console

SCREEN_WIDTH = 60
SIDE_STARS = 3


def format_header(message: str, width: int = SCREEN_WIDTH, side: int = SIDE_STARS) -> list[str]:
    """Lay out a three-line star banner with ``message`` centered.

    When the padding is odd the extra space goes on the left. A message wider
    than ``width - 2 * side`` gets no padding and pushes the right border out;
    it is never truncated.
    """
    border = "*" * width
    side_border = "*" * side

    available = max(width - side * 2 - len(message), 0)
    left = available // 2 + available % 2
    right = available - left

    middle = side_border + " " * left + message + " " * right + side_border
    return [border, middle, border]


def pretty_header(message: str, *, console: Console | None = None) -> None:
    """Print the banner for ``message``."""
    out = console if console is not None else default_console
    for line in format_header(message):
        out.out(line, highlight=False)
