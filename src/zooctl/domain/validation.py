"""Field validation for creatures and zones.

One function per entity, each returning every violated constraint as a
``(field, message)`` pair. An empty list means the entity may be persisted.
Services call these before any repository write.
"""

from __future__ import annotations

from dataclasses import dataclass

from zooctl.domain.models import Creature, Zone
from zooctl.domain.types import MAX_DANGER_LEVEL, MIN_CAPACITY, MIN_DANGER_LEVEL


@dataclass(frozen=True)
class Violation:
    """A single failed constraint."""

    field: str
    message: str


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_creature(creature: Creature) -> list[Violation]:
    """Check name, species, and danger level bounds."""
    violations: list[Violation] = []
    if _is_blank(creature.name):
        violations.append(Violation("name", "must not be blank"))
    if _is_blank(creature.species):
        violations.append(Violation("species", "must not be blank"))
    if not MIN_DANGER_LEVEL <= creature.danger_level <= MAX_DANGER_LEVEL:
        violations.append(
            Violation(
                "danger_level",
                f"must be between {MIN_DANGER_LEVEL} and {MAX_DANGER_LEVEL}",
            )
        )
    return violations


def validate_zone(zone: Zone) -> list[Violation]:
    """Check name and capacity lower bound."""
    violations: list[Violation] = []
    if _is_blank(zone.name):
        violations.append(Violation("name", "must not be blank"))
    if zone.capacity < MIN_CAPACITY:
        violations.append(Violation("capacity", f"must be at least {MIN_CAPACITY}"))
    return violations
