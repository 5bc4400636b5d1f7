#!/usr/bin/env python3
"""
Unified CLI for component service intervals.

Commands:
  status      - Show accrued ride time per component and what is due
  total       - Show total activity time in the activity export
  components  - List tracked components and their service history
"""

import argparse
import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from service_intervals import (
    ActivityLog,
    RowError,
    ServiceDue,
    ServiceIntervalError,
    ServiceRegistry,
    Status,
    UnknownError,
    format_interval,
    load_activity_file,
    load_registry_file,
    service_status,
)
from service_intervals.config import (
    ACTIVITIES_ENV_VAR,
    default_activities_path,
    default_db_path,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Formatting helpers
# =============================================================================


def hours(duration: timedelta) -> float:
    """Duration in (fractional) hours."""
    return duration.total_seconds() / 3600


def format_hours(duration: timedelta) -> str:
    """Format whole hours for display (e.g., '1 hr' or '210 hrs')."""
    whole = int(duration.total_seconds()) // 3600
    return f"{whole} hr{'' if whole == 1 else 's'}"


def format_accrued(duration: timedelta) -> str:
    """Format accrued time in hours with one decimal."""
    return f"{hours(duration):,.1f}"


def format_remaining(svc: ServiceDue) -> str:
    """Format remaining hours for display, negative when overdue."""
    remaining = hours(svc.remaining)
    if remaining < 0:
        return f"-{abs(remaining):,.1f}"
    return f"{remaining:,.1f}"


def format_date(value: Optional[datetime]) -> str:
    """Format a UTC service date for display."""
    return value.strftime("%Y-%m-%d %H:%M UTC") if value is not None else "-"


def format_row_error(path: Path, error: RowError) -> str:
    """Describe a skipped activity row, naming the file and row."""
    return (
        f"{path}: row {error.row_number}: {error.column}: {error.reason}"
        f" (got {error.value!r})"
    )


# =============================================================================
# Loading
# =============================================================================


def _activity_path(args) -> Path:
    path = args.file or default_activities_path()
    if path is None:
        raise ServiceIntervalError(
            f"No activity file given (use --file or set {ACTIVITIES_ENV_VAR})"
        )
    return path


def load_activities(args) -> ActivityLog:
    """Load the activity export and report skipped rows on stderr."""
    path = _activity_path(args)
    log = load_activity_file(path, strict=args.strict)
    for error in log.errors:
        print(f"Warning: {format_row_error(path, error)}", file=sys.stderr)
    return log


def load_registry(args) -> ServiceRegistry:
    return load_registry_file(args.db or default_db_path())


# =============================================================================
# Status command
# =============================================================================


def make_status_table(services: List[ServiceDue]) -> List[List[str]]:
    """Convert service status list to table rows."""
    rows = []
    for svc in services:
        rows.append(
            [
                svc.component.name,
                format_interval(svc.component.interval),
                format_date(svc.component.last_serviced),
                format_accrued(svc.accrued),
                format_remaining(svc),
            ]
        )
    return rows


def cmd_status(args):
    """Show accrued ride time per component and what is due."""
    registry = load_registry(args)
    log = load_activities(args)

    print(f"Activities: {len(log)} ({format_hours(log.total_duration())})")
    if log.errors:
        print(f"Skipped rows: {len(log.errors)}")
    print(f"Components: {len(registry)}")
    print()

    statuses = service_status(registry, log)

    # Registry order is kept within each group
    due = [s for s in statuses if s.status == Status.DUE]
    ok = [s for s in statuses if s.status == Status.OK]

    headers = ["Component", "Interval", "Last Serviced", "Accrued (h)", "Remaining (h)"]

    if due:
        print("DUE:")
        print(tabulate(make_status_table(due), headers=headers, tablefmt="simple"))
        print()

    if ok and not args.due_only:
        print("OK:")
        print(tabulate(make_status_table(ok), headers=headers, tablefmt="simple"))
        print()

    if args.due_only and not due:
        print("Nothing is due.")

    return 0


# =============================================================================
# Total command
# =============================================================================


def cmd_total(args):
    """Show total activity time in the activity export."""
    log = load_activities(args)
    print(format_hours(log.total_duration()))
    return 0


# =============================================================================
# Components command
# =============================================================================


def cmd_components(args):
    """List tracked components and their service history."""
    registry = load_registry(args)

    print(f"Components: {len(registry)}")
    print()

    rows = [
        [
            component.name,
            format_interval(component.interval),
            format_date(component.last_serviced),
            len(component.serviced),
        ]
        for component in registry
    ]
    headers = ["Component", "Interval", "Last Serviced", "Services"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))

    return 0


# =============================================================================
# Main
# =============================================================================


COMMANDS = {
    "status": cmd_status,
    "total": cmd_total,
    "components": cmd_components,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Component service interval tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --file Activities.csv status
  %(prog)s --file Activities.csv status --due-only
  %(prog)s --file Activities.csv --strict total
  %(prog)s --db ~/bike/db.yaml components
""",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Garmin Connect activity CSV export",
    )
    parser.add_argument(
        "--db",
        type=Path,
        help="Service database YAML/JSON file (default: %s)" % default_db_path(),
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first malformed activity row instead of skipping it",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logs",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    status_parser = subparsers.add_parser(
        "status", help="Show accrued ride time per component and what is due"
    )
    status_parser.add_argument(
        "--due-only",
        action="store_true",
        help="Only show components that are due for service",
    )

    subparsers.add_parser("total", help="Show total activity time")
    subparsers.add_parser("components", help="List tracked components")

    return parser


def run(args) -> int:
    """Dispatch to the command handler, classifying unexpected failures."""
    try:
        return COMMANDS[args.command](args)
    except ServiceIntervalError:
        raise
    except Exception as e:
        raise UnknownError(f"Unexpected error: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        return run(args)
    except ServiceIntervalError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
