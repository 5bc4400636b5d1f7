"""
Activity log parsing for Garmin Connect CSV exports.

The export is a header row followed by one row per activity. Only two
columns matter:

- Date: activity start, "YYYY-MM-DD HH:MM:SS". The export carries no
  timezone, so the reading is taken verbatim as UTC.
- Time: elapsed duration, "HH:MM:SS" (hours may exceed 24).

Columns are matched by name, so extra or reordered columns are fine.
"""

import csv
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from .activity import Activity
from .calculations import saturating_sum
from .durations import parse_elapsed
from .errors import ActivityFormatError, MalformedRowError

logger = logging.getLogger(__name__)

DATE_COLUMN = "Date"
TIME_COLUMN = "Time"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class RowError:
    """A data row that failed validation and was left out of the log."""

    row_number: int
    column: str
    reason: str
    value: Optional[str] = None

    def as_exception(self) -> MalformedRowError:
        return MalformedRowError(self.row_number, self.column, self.reason, self.value)


class ActivityLog:
    """Validated activities in file order, plus the rows that were skipped."""

    def __init__(
        self,
        activities: Iterable[Activity],
        errors: Optional[Iterable[RowError]] = None,
    ):
        self._activities: Tuple[Activity, ...] = tuple(activities)
        self.errors: Tuple[RowError, ...] = tuple(errors or ())

    def __iter__(self) -> Iterator[Activity]:
        return iter(self._activities)

    def __len__(self) -> int:
        return len(self._activities)

    @property
    def activities(self) -> Tuple[Activity, ...]:
        return self._activities

    def total_duration(self) -> timedelta:
        """Total duration of all activities summed together."""
        return saturating_sum(a.duration for a in self._activities)

    def total_duration_since(self, since: datetime) -> timedelta:
        """Total duration of activities that started strictly after `since`."""
        return saturating_sum(a.duration for a in self._activities if a.date > since)


def parse_garmin_date(text: str) -> datetime:
    """Parse a "YYYY-MM-DD HH:MM:SS" reading as a UTC datetime."""
    try:
        naive = datetime.strptime(text, DATE_FORMAT)
    except ValueError:
        raise ValueError("Date was not in YYYY-MM-DD HH:MM:SS format") from None
    return naive.replace(tzinfo=timezone.utc)


def _header_map(fieldnames: List[str]) -> dict:
    """Map normalized header names to the names as they appear in the file."""
    return {name.lstrip("\ufeff").strip().casefold(): name for name in fieldnames}


def iter_activity_rows(stream: TextIO) -> Iterator[Union[Activity, RowError]]:
    """
    Lazily decode activity rows.

    Yields an Activity for every valid row and a RowError for every
    malformed one, in file order. Row numbers count the header as row 1.

    Raises:
        ActivityFormatError: If the header is missing, a required column is
            absent, or the CSV itself cannot be read.
    """
    reader = csv.DictReader(stream)
    try:
        fieldnames = reader.fieldnames
    except csv.Error as e:
        raise ActivityFormatError(f"Invalid activity file header: {e}") from e
    if not fieldnames:
        raise ActivityFormatError("Activity file is missing a header row")

    columns = _header_map(fieldnames)
    missing = [
        name for name in (DATE_COLUMN, TIME_COLUMN) if name.casefold() not in columns
    ]
    if missing:
        raise ActivityFormatError(
            f"Activity file missing required columns: {', '.join(missing)}"
        )
    date_col = columns[DATE_COLUMN.casefold()]
    time_col = columns[TIME_COLUMN.casefold()]

    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            raise ActivityFormatError(
                f"Invalid activity file contents at line {reader.line_num}: {e}"
            ) from e

        row_number = reader.line_num
        date_raw = (row.get(date_col) or "").strip()
        time_raw = (row.get(time_col) or "").strip()

        try:
            date = parse_garmin_date(date_raw)
        except ValueError as e:
            yield RowError(row_number, DATE_COLUMN, str(e), date_raw)
            continue

        try:
            duration = parse_elapsed(time_raw)
        except ValueError as e:
            yield RowError(row_number, TIME_COLUMN, str(e), time_raw)
            continue

        yield Activity(date=date, duration=duration)


def parse_activity_log(stream: TextIO, strict: bool = False) -> ActivityLog:
    """
    Parse an activity CSV stream into an ActivityLog.

    By default malformed rows are skipped and collected in
    ActivityLog.errors. With strict=True the first malformed row raises.

    Raises:
        ActivityFormatError: On structural failures (see iter_activity_rows).
        MalformedRowError: On the first bad row when strict is set.
    """
    activities: List[Activity] = []
    errors: List[RowError] = []
    for item in iter_activity_rows(stream):
        if isinstance(item, RowError):
            if strict:
                raise item.as_exception()
            logger.debug(
                "Skipping activity row %d: %s: %s",
                item.row_number,
                item.column,
                item.reason,
            )
            errors.append(item)
            continue
        activities.append(item)

    logger.debug(
        "Parsed %d activities (%d rows skipped)", len(activities), len(errors)
    )
    return ActivityLog(activities, errors)
