"""File scanning commands.

``filescan`` takes an optional path and falls back to a file dialog;
``fileinspector`` always opens the dialog. Both echo the file and print a
line/word/character summary.

Example:
    $ filescan notes.txt
    $ filescan            # choose the file in a dialog
"""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import click

from ..console import console
from ..console import error_console
from ..file_selection import FileSelector
from ..file_selection import TkFileSelector
from ..inspection import FileTargetError
from ..inspection import inspect_file
from ..inspection import validate_target
from ..logging_setup import init_json_logging
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message
from . import load_settings_or_fail

logger = logging.getLogger(__name__)

START_DIR_HELP = "Directory the file dialog opens in (default: start_dir setting, 'src')."
USAGE = "Usage: filescan [filename]"


def acquire_path(paths: tuple[Path, ...], make_selector: Callable[[], FileSelector]) -> Path | None:
    """Pick the file to scan from the arguments, or ask a selector when there are none.

    ``make_selector`` is only called when no path was given, so settings are
    not read for an explicit path.
    """
    if paths:
        return paths[0]
    return make_selector().select_file()


def run_scan(path: Path | None) -> None:
    """Validate ``path`` and scan it, exiting non-zero on environment errors."""
    if path is None:
        console.print("File selection cancelled.")
        return

    try:
        validate_target(path)
    except FileTargetError as e:
        logger.warning(str(e), extra={"event": "file.invalid_target"})
        error_console.print(f"[red]Error:[/red] {escape_markup(e)}", soft_wrap=True)
        sys.exit(1)

    try:
        inspect_file(path, console=console)
    except (OSError, UnicodeDecodeError) as e:
        message = format_error_message(e, include_type=False)
        logger.error(f"Error reading {path}: {message}", extra={"event": "file.read_failed"})
        error_console.print(f"[red]Error reading file:[/red] {escape_markup(message)}", soft_wrap=True)
        sys.exit(1)


def _selector(start_dir: Path | None) -> FileSelector:
    if start_dir is None:
        start_dir = load_settings_or_fail().start_dir
    return TkFileSelector(start_dir)


@click.command("filescan")
@click.argument("paths", nargs=-1, metavar="[PATH]", type=click.Path(path_type=Path))
@click.option("--start-dir", type=click.Path(file_okay=False, path_type=Path), default=None, help=START_DIR_HELP)
def filescan(paths: tuple[Path, ...], start_dir: Path | None):
    """Print a file and count its lines, words and characters.

    With no PATH a file selection dialog is shown.
    """
    init_json_logging()
    if len(paths) > 1:
        logger.warning(f"Expected at most one file name, got {len(paths)}", extra={"event": "file.usage"})
        console.out(USAGE, highlight=False)
        return
    run_scan(acquire_path(paths, lambda: _selector(start_dir)))


@click.command("fileinspector")
@click.option("--start-dir", type=click.Path(file_okay=False, path_type=Path), default=None, help=START_DIR_HELP)
def fileinspector(start_dir: Path | None):
    """Choose a file in a dialog, print it and count its lines, words and characters."""
    init_json_logging()
    run_scan(_selector(start_dir).select_file())


if __name__ == "__main__":
    filescan()
