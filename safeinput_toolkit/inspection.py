"""Echo a text file to the console and count its lines, words and characters."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import click
from rich.console import Console

from .console import console as default_console

logger = logging.getLogger(__name__)

# Words are runs of ASCII whitespace; blanks and control characters at either end are trimmed first
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))
_WORD_SEPARATOR = re.compile(r"[ \t\n\x0b\f\r]+")


class FileTargetError(Exception):
    """The path to inspect does not name a readable regular file."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File '{path}' not found or is not a valid file.")


@dataclass
class FileSummary:
    name: str
    line_count: int = 0
    word_count: int = 0
    char_count: int = 0

    def add_line(self, line: str) -> None:
        """Account for one line, given without its terminator."""
        self.line_count += 1
        trimmed = line.strip(_TRIM_CHARS)
        if trimmed:
            self.word_count += len(_WORD_SEPARATOR.split(trimmed))
        self.char_count += len(line)

    def render_lines(self) -> list[str]:
        return [
            "--- File Summary ---",
            f"File name: {self.name}",
            f"Number of lines: {self.line_count}",
            f"Number of words: {self.word_count}",
            f"Number of characters: {self.char_count}",
        ]


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def summarize_lines(name: str, lines: Iterable[str]) -> FileSummary:
    """Fold lines (terminators are ignored) into a summary in a single pass."""
    summary = FileSummary(name)
    for line in lines:
        summary.add_line(_strip_terminator(line))
    return summary


def validate_target(path: Path) -> Path:
    """Return ``path`` if it names an existing regular file.

    Raises:
        FileTargetError: If it does not exist or is not a regular file
    """
    if not path.is_file():
        raise FileTargetError(path)
    return path


def inspect_file(path: Path, *, console: Console | None = None) -> FileSummary:
    """Print every line of ``path`` followed by a summary block.

    Lines are echoed as they are read. If reading fails part way, the lines
    already echoed stay on screen, no summary is printed and the error
    propagates.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid UTF-8 text
    """
    out = console if console is not None else default_console
    summary = FileSummary(path.name)

    out.out("File Content:\n", highlight=False)
    with open(path, encoding="utf-8", newline=None) as f:
        for raw in f:
            line = _strip_terminator(raw)
            # Bypass Rich so tabs and control characters reach the terminal unchanged
            click.echo(line, file=out.file, color=True)
            summary.add_line(line)

    out.out("")
    for line in summary.render_lines():
        out.out(line, highlight=False)

    logger.info(
        f"Inspected {path}: {summary.line_count} lines, {summary.word_count} words, {summary.char_count} characters",
        extra={"event": "file.inspected"},
    )
    return summary
