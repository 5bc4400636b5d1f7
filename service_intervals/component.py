"""Component class for tracked parts and their service history."""

from datetime import datetime, timedelta
from typing import Iterable, Optional, Tuple


class Component:
    """A serviceable part with a rated interval and a set of service dates."""

    def __init__(
        self,
        name: str,
        interval: timedelta,
        serviced: Optional[Iterable[datetime]] = None,
    ):
        self.name = name
        self.interval = interval
        # Exact-equality duplicates collapse, history stays time-ordered
        self._serviced: Tuple[datetime, ...] = tuple(sorted(set(serviced or ())))

    @property
    def serviced(self) -> Tuple[datetime, ...]:
        """Distinct service dates, oldest first."""
        return self._serviced

    @property
    def last_serviced(self) -> Optional[datetime]:
        """
        Date the component was last serviced, or None if never serviced.

        A purchase date is usually recorded as the first service so that the
        interval starts counting from when the part was fitted.
        """
        if not self._serviced:
            return None
        return self._serviced[-1]

    def __repr__(self) -> str:
        return (
            f"Component(name={self.name!r}, interval={self.interval!r}, "
            f"serviced={len(self._serviced)} dates)"
        )
