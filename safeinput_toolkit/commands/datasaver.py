"""Interactive record collector.

Asks for one or more person records, then for a file name, and writes the
records as comma separated lines into the output directory.

Example:
    $ datasaver
    $ datasaver --output-dir ./exports
"""

import logging
import sys
from pathlib import Path

import click

from ..console import console
from ..console import error_console
from ..logging_setup import init_json_logging
from ..records import collect_records
from ..records import normalize_filename
from ..records import write_records
from ..safe_input import require_non_empty_text
from ..ui.header import pretty_header
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message
from . import load_settings_or_fail

logger = logging.getLogger(__name__)


@click.command("datasaver")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to save the CSV file in (default: output_dir setting, 'src').",
)
def datasaver(output_dir: Path | None):
    """Collect records interactively and save them to a CSV file."""
    init_json_logging()
    settings = load_settings_or_fail()
    target_dir = output_dir if output_dir is not None else settings.output_dir

    pretty_header("Welcome to DataSaver!")

    try:
        records = collect_records(console=console)
        file_name = normalize_filename(
            require_non_empty_text("Enter file name to save (no extension)", console=console)
        )
    except EOFError:
        logger.warning("Input ended during record collection", extra={"event": "datasaver.eof"})
        error_console.print("[red]Input ended before the session was complete.[/red] Nothing was saved.")
        sys.exit(1)

    path = target_dir / file_name
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        write_records(path, records)
    except OSError as e:
        message = format_error_message(e, include_type=False)
        logger.error(f"Error writing to {path}: {message}", extra={"event": "datasaver.write_failed"})
        error_console.print(f"[red]Error writing to file:[/red] {escape_markup(message)}", soft_wrap=True)
        sys.exit(1)

    console.print(f"Data saved to {escape_markup(file_name)} in {escape_markup(target_dir)}.", soft_wrap=True)


if __name__ == "__main__":
    datasaver()
