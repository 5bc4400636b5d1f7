"""Helper functions for accrued-duration calculations."""

from datetime import timedelta
from functools import reduce
from typing import Iterable

from .status import Status


def saturating_add(a: timedelta, b: timedelta) -> timedelta:
    """Add two durations, clamping at timedelta.max instead of overflowing."""
    try:
        return a + b
    except OverflowError:
        return timedelta.max


def saturating_sub(a: timedelta, b: timedelta) -> timedelta:
    """Subtract two durations, clamping at timedelta.min instead of overflowing."""
    try:
        return a - b
    except OverflowError:
        return timedelta.min


def saturating_sum(durations: Iterable[timedelta]) -> timedelta:
    """Sum durations with saturating addition."""
    return reduce(saturating_add, durations, timedelta())


def check_status(accrued: timedelta, interval: timedelta) -> Status:
    """Service is due once accrued time strictly exceeds the interval."""
    if accrued > interval:
        return Status.DUE
    return Status.OK
