"""Status enum for service urgency."""

from enum import Enum


class Status(Enum):
    """Service status categories. Lower value = more urgent."""

    DUE = 1
    OK = 2
