"""ServiceDue dataclass for calculated service status."""

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from .calculations import check_status, saturating_sub
from .status import Status

if TYPE_CHECKING:
    from .component import Component


@dataclass(frozen=True)
class ServiceDue:
    """Accrued usage for a component since its last service."""

    component: "Component"
    accrued: timedelta

    @property
    def status(self) -> Status:
        return check_status(self.accrued, self.component.interval)

    @property
    def is_due(self) -> bool:
        return self.status is Status.DUE

    @property
    def remaining(self) -> timedelta:
        """Usage left before service is due; negative once overdue."""
        return saturating_sub(self.component.interval, self.accrued)
