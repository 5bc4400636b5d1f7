"""Activity record for a single recorded usage session."""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Activity:
    """A completed activity: when it started (UTC) and how long it lasted."""

    date: datetime
    duration: timedelta
