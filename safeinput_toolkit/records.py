"""Person records collected by the datasaver command.

Records are written one per line with the fields joined by ``", "``. Values
are written as typed: no header row and no quoting, so a value containing a
comma produces a line with extra fields.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable
from typing import TextIO

from rich.console import Console

from .safe_input import require_integer_in_range
from .safe_input import require_non_empty_text
from .safe_input import require_yes_no

logger = logging.getLogger(__name__)

BIRTH_YEAR_MIN = 1900
BIRTH_YEAR_MAX = 2025

FIELD_SEPARATOR = ", "
CSV_SUFFIX = ".csv"
ID_WIDTH = 6


@dataclass(frozen=True)
class Record:
    first_name: str
    last_name: str
    record_id: int
    email: str
    birth_year: int

    @property
    def display_id(self) -> str:
        """The id zero-padded to six digits, e.g. ``000042``."""
        return f"{self.record_id:0{ID_WIDTH}d}"

    def to_line(self) -> str:
        return FIELD_SEPARATOR.join(
            (self.first_name, self.last_name, self.display_id, self.email, str(self.birth_year))
        )


def collect_record(
    record_id: int,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
    year_low: int = BIRTH_YEAR_MIN,
    year_high: int = BIRTH_YEAR_MAX,
) -> Record:
    """Prompt for the fields of one record."""
    first_name = require_non_empty_text("Enter first name", console=console, stream=stream)
    last_name = require_non_empty_text("Enter last name", console=console, stream=stream)
    email = require_non_empty_text("Enter email", console=console, stream=stream)
    birth_year = require_integer_in_range(
        "Enter year of birth", year_low, year_high, console=console, stream=stream
    )
    return Record(first_name, last_name, record_id, email, birth_year)


def collect_records(
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
    year_low: int = BIRTH_YEAR_MIN,
    year_high: int = BIRTH_YEAR_MAX,
) -> list[Record]:
    """Collect records until the user declines to add another.

    At least one record is always collected. Ids start at 1 and increase by
    one per record.
    """
    records: list[Record] = []
    while True:
        record = collect_record(
            len(records) + 1, console=console, stream=stream, year_low=year_low, year_high=year_high
        )
        records.append(record)
        logger.debug("Collected record %s", record.display_id)
        if not require_yes_no("Do you want to add another record?", console=console, stream=stream):
            return records


def normalize_filename(name: str) -> str:
    """Append ``.csv`` unless the name already ends with it."""
    return name if name.endswith(CSV_SUFFIX) else name + CSV_SUFFIX


def write_records(path: Path, records: Iterable[Record]) -> Path:
    """Write records to ``path``, replacing any existing file.

    Raises:
        OSError: If the file cannot be opened or written. Lines written
                 before the failure stay in the file.
    """
    count = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        for record in records:
            f.write(record.to_line() + os.linesep)
            count += 1
    logger.info("Wrote %d records to %s", count, path, extra={"event": "records.written"})
    return path
