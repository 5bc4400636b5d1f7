"""
Component service interval tracking.

This package computes how much usage time has accrued on each tracked
component since it was last serviced:
- Activity / ActivityLog: Usage sessions parsed from an activity export
- Component: A serviceable part with an interval and service history
- ServiceRegistry: Read-only collection of components
- ServiceDue: Accrued usage and due status for one component
- compute_due / service_status: The aggregation over both inputs
"""

from .status import Status
from .activity import Activity
from .activity_log import ActivityLog, RowError, iter_activity_rows, parse_activity_log
from .component import Component
from .registry import ServiceRegistry
from .service_due import ServiceDue
from .calculations import saturating_add, saturating_sub, saturating_sum, check_status
from .durations import parse_elapsed, format_elapsed, parse_interval, format_interval
from .aggregator import (
    EPOCH,
    cutoff_for,
    duration_since_last_serviced,
    compute_due,
    service_status,
)
from .errors import (
    ServiceIntervalError,
    MalformedRowError,
    FormatError,
    ActivityFormatError,
    RegistryFormatError,
    ResourceError,
    UnknownError,
)
from .loader import (
    load_registry,
    load_registry_file,
    load_activity_file,
    load_schema,
)

__all__ = [
    "Status",
    "Activity",
    "ActivityLog",
    "RowError",
    "iter_activity_rows",
    "parse_activity_log",
    "Component",
    "ServiceRegistry",
    "ServiceDue",
    "saturating_add",
    "saturating_sub",
    "saturating_sum",
    "check_status",
    "parse_elapsed",
    "format_elapsed",
    "parse_interval",
    "format_interval",
    "EPOCH",
    "cutoff_for",
    "duration_since_last_serviced",
    "compute_due",
    "service_status",
    "ServiceIntervalError",
    "MalformedRowError",
    "FormatError",
    "ActivityFormatError",
    "RegistryFormatError",
    "ResourceError",
    "UnknownError",
    "load_registry",
    "load_registry_file",
    "load_activity_file",
    "load_schema",
]
