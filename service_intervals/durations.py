"""Text codecs for elapsed-time and service-interval durations."""

import re
from datetime import timedelta

# Largest duration a timedelta can hold, in whole seconds and microseconds
MAX_SECONDS = timedelta.max.days * 86400 + timedelta.max.seconds
MAX_MICROSECONDS = MAX_SECONDS * 1_000_000 + timedelta.max.microseconds

_ELAPSED_PATTERN = re.compile(r"([0-9]+):([0-9]+):([0-9]+)")
_INTERVAL_TERM = re.compile(r"\s*([0-9]+)\s*([A-Za-z]+)\s*")

# Any field longer than this already exceeds timedelta.max in every unit
_MAX_DIGITS = 30

# Nanoseconds per interval unit (humantime conventions for months and years)
_NANOS_PER_SECOND = 1_000_000_000
INTERVAL_UNITS = {
    "ns": 1,
    "nsec": 1,
    "us": 1_000,
    "usec": 1_000,
    "ms": 1_000_000,
    "msec": 1_000_000,
    "s": _NANOS_PER_SECOND,
    "sec": _NANOS_PER_SECOND,
    "secs": _NANOS_PER_SECOND,
    "second": _NANOS_PER_SECOND,
    "seconds": _NANOS_PER_SECOND,
    "m": 60 * _NANOS_PER_SECOND,
    "min": 60 * _NANOS_PER_SECOND,
    "mins": 60 * _NANOS_PER_SECOND,
    "minute": 60 * _NANOS_PER_SECOND,
    "minutes": 60 * _NANOS_PER_SECOND,
    "h": 3600 * _NANOS_PER_SECOND,
    "hr": 3600 * _NANOS_PER_SECOND,
    "hrs": 3600 * _NANOS_PER_SECOND,
    "hour": 3600 * _NANOS_PER_SECOND,
    "hours": 3600 * _NANOS_PER_SECOND,
    "d": 86400 * _NANOS_PER_SECOND,
    "day": 86400 * _NANOS_PER_SECOND,
    "days": 86400 * _NANOS_PER_SECOND,
    "w": 604800 * _NANOS_PER_SECOND,
    "week": 604800 * _NANOS_PER_SECOND,
    "weeks": 604800 * _NANOS_PER_SECOND,
    "M": 2_630_016 * _NANOS_PER_SECOND,
    "month": 2_630_016 * _NANOS_PER_SECOND,
    "months": 2_630_016 * _NANOS_PER_SECOND,
    "y": 31_557_600 * _NANOS_PER_SECOND,
    "year": 31_557_600 * _NANOS_PER_SECOND,
    "years": 31_557_600 * _NANOS_PER_SECOND,
}


def _field_value(digits: str) -> int:
    """Integer value of a digit string, capped so huge fields still clamp."""
    digits = digits.lstrip("0")
    if len(digits) > _MAX_DIGITS:
        return 10 ** _MAX_DIGITS
    return int(digits or "0")


def clamp_seconds(seconds: int) -> timedelta:
    """Convert whole seconds to a timedelta, clamping at timedelta.max."""
    if seconds >= MAX_SECONDS:
        return timedelta.max
    return timedelta(seconds=seconds)


def parse_elapsed(text: str) -> timedelta:
    """
    Parse an elapsed-time string of the form HH:MM:SS.

    Hours are free-form ("120:00:00" is 120 hours) and every field must be
    a non-negative integer. Oversized values clamp to timedelta.max.

    Raises:
        ValueError: If the text is not in HH:MM:SS format.
    """
    match = _ELAPSED_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError("Duration was not in HH:MM:SS format")
    hours, minutes, seconds = (_field_value(field) for field in match.groups())
    return clamp_seconds(hours * 3600 + minutes * 60 + seconds)


def format_elapsed(duration: timedelta) -> str:
    """Format a duration as HH:MM:SS (hours may exceed 24, sub-seconds dropped)."""
    total = duration.days * 86400 + duration.seconds
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_interval(text: str) -> timedelta:
    """
    Parse a unit-suffixed interval such as "500h", "30d" or "1h 30m".

    Raises:
        ValueError: If the text is empty or contains an unknown unit.
    """
    text = text.strip()
    if not text:
        raise ValueError("Interval is empty")

    nanos = 0
    pos = 0
    while pos < len(text):
        match = _INTERVAL_TERM.match(text, pos)
        if match is None:
            raise ValueError(f"Invalid interval {text!r}")
        value, unit = match.groups()
        if unit not in INTERVAL_UNITS:
            raise ValueError(f"Unknown interval unit {unit!r} in {text!r}")
        nanos += _field_value(value) * INTERVAL_UNITS[unit]
        pos = match.end()

    micros = nanos // 1000
    if micros >= MAX_MICROSECONDS:
        return timedelta.max
    return timedelta(microseconds=micros)


def format_interval(duration: timedelta) -> str:
    """Format a duration using the largest whole units, e.g. "2d 4h"."""
    total = duration.days * 86400 + duration.seconds
    if total == 0:
        return "0s"
    parts = []
    for suffix, size in (("d", 86400), ("h", 3600), ("m", 60), ("s", 1)):
        count, total = divmod(total, size)
        if count:
            parts.append(f"{count}{suffix}")
    return " ".join(parts)
