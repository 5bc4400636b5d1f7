"""Default locations for the service database and activity export."""

import os
from pathlib import Path
from typing import Optional, Union

DB_ENV_VAR = "SERVICE_INTERVALS_DB"
ACTIVITIES_ENV_VAR = "SERVICE_INTERVALS_ACTIVITIES"

DEFAULT_DB_PATH = "~/.config/service-intervals/db.yaml"


def resolve_path(path: Union[str, Path]) -> Path:
    """Expand ~ and environment variables in a user-supplied path."""
    return Path(os.path.expandvars(os.path.expanduser(str(path))))


def default_db_path() -> Path:
    """Service database path, from the environment or the default location."""
    return resolve_path(os.environ.get(DB_ENV_VAR) or DEFAULT_DB_PATH)


def default_activities_path() -> Optional[Path]:
    """Activity export path from the environment, if set."""
    value = os.environ.get(ACTIVITIES_ENV_VAR)
    return resolve_path(value) if value else None
