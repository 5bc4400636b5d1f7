#!/usr/bin/env python3
"""Validate service database files against the schema."""
import sys
from pathlib import Path
from typing import List, Optional

from service_intervals import FormatError, ResourceError, load_registry_file
from service_intervals.config import default_db_path


def validate_registry_file(filepath: Path) -> list[str]:
    """Validate a single service database file. Returns list of errors."""
    errors = []
    try:
        load_registry_file(filepath)
    except FormatError as e:
        errors.append(str(e))
    except ResourceError as e:
        errors.append(f"Error: {e}")
    return errors


def main(argv: Optional[List[str]] = None):
    """Validate the given database files, or the default database."""
    args = sys.argv[1:] if argv is None else argv
    paths = [Path(a) for a in args] or [default_db_path()]

    all_valid = True
    for filepath in paths:
        errors = validate_registry_file(filepath)
        if errors:
            print(f"FAIL: {filepath}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
