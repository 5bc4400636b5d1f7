"""
Accrued usage per component since its last service.

Every calculation here compares activity dates against service dates only;
nothing reads the current time, so results are fully determined by inputs.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, Iterator, List, Tuple

from .activity import Activity
from .activity_log import ActivityLog
from .calculations import saturating_sum
from .component import Component
from .registry import ServiceRegistry
from .service_due import ServiceDue

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def cutoff_for(component: Component) -> datetime:
    """Instant after which activity counts: last service, or the epoch."""
    last = component.last_serviced
    return last if last is not None else EPOCH


def duration_since_last_serviced(
    component: Component, activities: Iterable[Activity]
) -> timedelta:
    """
    Sum activity durations strictly after the component's last service.

    An activity recorded at the exact service instant belongs to the
    previous interval. A component that was never serviced accrues all
    recorded activity.
    """
    cutoff = cutoff_for(component)
    return saturating_sum(a.duration for a in activities if a.date > cutoff)


def compute_due(
    registry: ServiceRegistry, log: ActivityLog
) -> Iterator[Tuple[Component, timedelta]]:
    """Yield (component, accrued duration) pairs in registry order."""
    for component in registry:
        yield component, duration_since_last_serviced(component, log)


def service_status(registry: ServiceRegistry, log: ActivityLog) -> List[ServiceDue]:
    """Calculate service status for every component in the registry."""
    return [
        ServiceDue(component=component, accrued=accrued)
        for component, accrued in compute_due(registry, log)
    ]
