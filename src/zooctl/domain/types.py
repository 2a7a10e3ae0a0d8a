"""Health status values and entity bounds.

``health_status`` is stored as free text; these are the values the
service layer attaches meaning to.
"""

from __future__ import annotations

from enum import StrEnum


class HealthStatus(StrEnum):
    """Known creature health states."""

    STABLE = "stable"
    RECOVERING = "recovering"
    CRITICAL = "critical"


MIN_DANGER_LEVEL = 0
MAX_DANGER_LEVEL = 10
MIN_CAPACITY = 0
