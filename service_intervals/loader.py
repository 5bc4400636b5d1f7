"""Loading utilities for the service database and activity exports."""

import copy
import logging
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, TextIO, Union

import yaml
from dateutil.parser import isoparse
from jsonschema import ValidationError, validate

from .activity_log import ActivityLog, parse_activity_log
from .component import Component
from .config import resolve_path
from .durations import parse_interval
from .errors import ActivityFormatError, RegistryFormatError, ResourceError
from .registry import ServiceRegistry

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "registry_schema.yaml"

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _RegistryLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as plain strings."""


_RegistryLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@lru_cache(maxsize=None)
def _cached_schema() -> Dict[str, Any]:
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def load_schema() -> Dict[str, Any]:
    """Load the JSON schema for the service database (a private copy)."""
    return copy.deepcopy(_cached_schema())


def _parse_serviced(name: str, value: str) -> datetime:
    """Parse a service timestamp and normalize it to UTC."""
    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError) as e:
        raise RegistryFormatError(
            f"Component {name!r}: invalid service date {value!r}: {e}"
        ) from e
    if parsed.tzinfo is None:
        raise RegistryFormatError(
            f"Component {name!r}: service date {value!r} has no timezone offset"
        )
    return parsed.astimezone(timezone.utc)


def _parse_component(dct: Dict[str, Any]) -> Component:
    """Build a Component from a validated database entry."""
    name = dct["name"]
    try:
        interval = parse_interval(dct["interval"])
    except ValueError as e:
        raise RegistryFormatError(f"Component {name!r}: {e}") from e
    serviced = [_parse_serviced(name, value) for value in dct["serviced"]]
    return Component(name, interval, serviced)


def load_registry(stream: TextIO) -> ServiceRegistry:
    """
    Load the service database from a YAML (or JSON) stream.

    The whole document must be valid; a single bad entry fails the load.

    Raises:
        RegistryFormatError: If the document cannot be parsed or validated.
    """
    try:
        data = yaml.load(stream, Loader=_RegistryLoader)
    except yaml.YAMLError as e:
        raise RegistryFormatError(f"YAML parse error: {e}") from e

    try:
        validate(instance=data, schema=_cached_schema())
    except ValidationError as e:
        message = f"Schema validation error: {e.message}"
        if e.path:
            message += f" at path: {'.'.join(str(p) for p in e.path)}"
        raise RegistryFormatError(message) from e

    components: List[Component] = [_parse_component(dct) for dct in data]
    logger.debug("Loaded %d components", len(components))
    return ServiceRegistry(components)


def load_registry_file(filename: Union[str, Path]) -> ServiceRegistry:
    """Load the service database from a file. The file must exist."""
    path = resolve_path(filename)
    try:
        with open(path, "r", encoding="utf-8") as fp:
            return load_registry(fp)
    except UnicodeDecodeError as e:
        raise RegistryFormatError(f"{path}: not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise ResourceError(str(path), e.strerror or str(e)) from e


def load_activity_file(filename: Union[str, Path], strict: bool = False) -> ActivityLog:
    """Load a Garmin activity CSV export from a file."""
    path = resolve_path(filename)
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as fp:
            log = parse_activity_log(fp, strict=strict)
    except UnicodeDecodeError as e:
        raise ActivityFormatError(f"{path}: not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise ResourceError(str(path), e.strerror or str(e)) from e
    logger.info("Loaded %d activities from %s", len(log), path)
    return log
