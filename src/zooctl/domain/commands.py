"""Explicit update commands for creatures and zones.

An update names each mutable field; ``None`` leaves the field unchanged.
``apply_to`` returns a new entity and never touches ``id``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from zooctl.domain.models import Creature, Zone


@dataclass(frozen=True)
class CreatureUpdate:
    """Field-level changes to a creature."""

    name: str | None = None
    species: str | None = None
    danger_level: int | None = None
    health_status: str | None = None
    zone_id: int | None = None

    @classmethod
    def from_creature(cls, creature: Creature) -> CreatureUpdate:
        """Overwrite every mutable field with *creature*'s values."""
        return cls(
            name=creature.name,
            species=creature.species,
            danger_level=creature.danger_level,
            health_status=creature.health_status,
            zone_id=creature.zone_id,
        )

    def changes(self) -> dict[str, Any]:
        """Supplied fields only."""
        return {
            key: value
            for key, value in (
                ("name", self.name),
                ("species", self.species),
                ("danger_level", self.danger_level),
                ("health_status", self.health_status),
                ("zone_id", self.zone_id),
            )
            if value is not None
        }

    def apply_to(self, creature: Creature) -> Creature:
        return replace(creature, **self.changes())


@dataclass(frozen=True)
class ZoneUpdate:
    """Field-level changes to a zone."""

    name: str | None = None
    description: str | None = None
    capacity: int | None = None

    @classmethod
    def from_zone(cls, zone: Zone) -> ZoneUpdate:
        return cls(name=zone.name, description=zone.description, capacity=zone.capacity)

    def changes(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in (
                ("name", self.name),
                ("description", self.description),
                ("capacity", self.capacity),
            )
            if value is not None
        }

    def apply_to(self, zone: Zone) -> Zone:
        return replace(zone, **self.changes())
