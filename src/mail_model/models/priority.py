"""Message priority as carried by the X-Priority header."""

from enum import IntEnum

X_PRIORITY = "X-Priority"

# Returned when no usable priority header is present.
PRIORITY_UNAVAILABLE = -1


class Priority(IntEnum):
    """Conventional X-Priority values, 1 being the most urgent."""

    HIGHEST = 1
    HIGH = 2
    NORMAL = 3
    LOW = 4
    LOWEST = 5
