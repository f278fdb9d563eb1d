"""Validated console prompts.

Each ``require_*`` function shows a prompt, reads one line per attempt and
re-prompts with a diagnostic until the line satisfies its rule. There is no
retry limit; the only ways out are valid input or the end of the input
stream, which surfaces as ``EOFError``.

The rules are Rich prompt classes, so every function takes the console to
write to and the stream to read from as keyword arguments. Leaving
``stream`` unset reads from standard input.

Example:
    >>> year = require_integer_in_range("Enter year of birth", 1900, 2025)
"""

import logging
import math
import re
from typing import TextIO
from typing import TypeVar

from rich.console import Console
from rich.prompt import InvalidResponse
from rich.prompt import PromptBase
from rich.text import Text
from rich.text import TextType

from .console import console as default_console

logger = logging.getLogger(__name__)

# Integers are limited to a signed 32-bit range so oversized input is reported
# as out of range rather than silently accepted.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

T = TypeVar("T")

YES_NO_ANSWERS = {"Y": True, "YES": True, "N": False, "NO": False}


def _invalid(message: str) -> InvalidResponse:
    # Plain Text so user input and patterns are never parsed as markup
    return InvalidResponse(Text(message, style="prompt.invalid"))


class LinePrompt(PromptBase[T]):
    """Base prompt reading whole lines; an exhausted stream raises EOFError."""

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: TextType,
        password: bool,
        stream: TextIO | None = None,
    ) -> str:
        if stream is None:
            # input() raises EOFError itself when stdin is closed
            return console.input(prompt, password=password)
        line = console.input(prompt, password=password, stream=stream)
        if not line:
            raise EOFError("input stream is exhausted")
        return line.rstrip("\r\n")

    def on_validate_error(self, value: str, error: InvalidResponse) -> None:
        logger.debug("Rejected input %r for %s", value, type(self).__name__)
        super().on_validate_error(value, error)


class NonEmptyTextPrompt(LinePrompt[str]):
    response_type = str

    def process_response(self, value: str) -> str:
        if not value.strip():
            raise _invalid("Input cannot be empty.")
        return value


class IntegerPrompt(LinePrompt[int]):
    response_type = int

    def process_response(self, value: str) -> int:
        text = value.strip()
        if not _INTEGER_LITERAL.fullmatch(text):
            raise _invalid(f"{text} is not a valid integer.")
        number = int(text)
        if not INT_MIN <= number <= INT_MAX:
            raise _invalid(f"{text} is outside the supported range of [{INT_MIN} … {INT_MAX}].")
        return number


class FloatPrompt(LinePrompt[float]):
    response_type = float

    def process_response(self, value: str) -> float:
        text = value.strip()
        try:
            number = float(text)
        except ValueError:
            raise _invalid(f"{text} is not a valid double.") from None
        if math.isinf(number):
            raise _invalid(f"{text} is outside the supported range of a double.")
        if math.isnan(number):
            raise _invalid(f"{text} is not a valid double.")
        return number


class _RangeMixin:
    """Bounds check shared by the ranged integer and float prompts."""

    low: float
    high: float

    def check_bounds(self, number):
        if number < self.low:
            raise _invalid(f"{number} is below the minimum allowed value of {self.low}. Please try again.")
        if number > self.high:
            raise _invalid(f"{number} is above the maximum allowed value of {self.high}. Please try again.")
        return number


class RangedIntegerPrompt(_RangeMixin, IntegerPrompt):
    def __init__(self, prompt: TextType = "", *, low: int, high: int, console: Console | None = None) -> None:
        super().__init__(prompt, console=console)
        self.low = low
        self.high = high

    def process_response(self, value: str) -> int:
        return self.check_bounds(super().process_response(value))


class RangedFloatPrompt(_RangeMixin, FloatPrompt):
    def __init__(self, prompt: TextType = "", *, low: float, high: float, console: Console | None = None) -> None:
        super().__init__(prompt, console=console)
        self.low = low
        self.high = high

    def process_response(self, value: str) -> float:
        return self.check_bounds(super().process_response(value))


class YesNoPrompt(LinePrompt[bool]):
    """Accepts exactly Y, YES, N or NO, case-insensitively."""

    response_type = bool
    choices = ["Y", "N"]

    def process_response(self, value: str) -> bool:
        answer = value.strip()
        if not answer:
            raise _invalid("Input cannot be empty. Please answer Y/N.")
        choice = YES_NO_ANSWERS.get(answer.upper())
        if choice is None:
            raise _invalid(f"{answer} is not a valid response.  Please answer Y/N.")
        return choice


class PatternPrompt(LinePrompt[str]):
    """Accepts a line only when the whole line matches ``pattern``."""

    response_type = str

    def __init__(self, prompt: TextType = "", *, pattern: str | re.Pattern, console: Console | None = None) -> None:
        super().__init__(prompt, console=console)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def process_response(self, value: str) -> str:
        if self.pattern.fullmatch(value):
            return value
        raise _invalid(
            f'Sorry. "{value}" does not match the correct pattern. '
            f'The pattern we need to match is "{self.pattern.pattern}"'
        )


def _prompt_text(prompt: TextType, suffix: str = "") -> Text:
    text = Text(prompt, style="prompt") if isinstance(prompt, str) else prompt.copy()
    if suffix:
        text.append(suffix)
    return text


def _console(console: Console | None) -> Console:
    return console if console is not None else default_console


def require_non_empty_text(prompt: TextType, *, console: Console | None = None, stream: TextIO | None = None) -> str:
    """Prompt until the user types a line that is not blank. Returns the raw line."""
    return NonEmptyTextPrompt.ask(_prompt_text(prompt), console=_console(console), stream=stream)


def require_integer(prompt: TextType, *, console: Console | None = None, stream: TextIO | None = None) -> int:
    """Prompt until the user types a base-10 integer within the 32-bit range."""
    return IntegerPrompt.ask(_prompt_text(prompt), console=_console(console), stream=stream)


def require_float(prompt: TextType, *, console: Console | None = None, stream: TextIO | None = None) -> float:
    """Prompt until the user types a finite floating point number."""
    return FloatPrompt.ask(_prompt_text(prompt), console=_console(console), stream=stream)


def require_integer_in_range(
    prompt: TextType,
    low: int,
    high: int,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> int:
    """Prompt until the user types an integer in ``[low, high]``.

    The range is appended to the prompt as ``[low to high]``.

    Raises:
        ValueError: If ``low > high``; nothing is read in that case.
    """
    if low > high:
        raise ValueError(f"require_integer_in_range: invalid bounds, low ({low}) must be <= high ({high})")
    ranged = RangedIntegerPrompt(_prompt_text(prompt, f" [{low} to {high}]"), low=low, high=high, console=_console(console))
    return ranged(stream=stream)


def require_float_in_range(
    prompt: TextType,
    low: float,
    high: float,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> float:
    """Prompt until the user types a finite number in ``[low, high]``.

    Raises:
        ValueError: If ``low > high``; nothing is read in that case.
    """
    if low > high:
        raise ValueError(f"require_float_in_range: invalid bounds, low ({low}) must be <= high ({high})")
    ranged = RangedFloatPrompt(_prompt_text(prompt, f" [{low} to {high}]"), low=low, high=high, console=_console(console))
    return ranged(stream=stream)


def require_yes_no(prompt: TextType, *, console: Console | None = None, stream: TextIO | None = None) -> bool:
    """Ask a yes/no question. Y/YES return True, N/NO return False."""
    return YesNoPrompt.ask(_prompt_text(prompt), console=_console(console), stream=stream)


def require_pattern(
    prompt: TextType,
    pattern: str | re.Pattern,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> str:
    """Prompt until the entire line matches ``pattern``."""
    matcher = PatternPrompt(_prompt_text(prompt), pattern=pattern, console=_console(console))
    return matcher(stream=stream)
