"""Entity records for creatures and zones.

Entities are plain mutable dataclasses. Construction never validates:
an invalid record can exist in memory, it just cannot be persisted
(see :mod:`zooctl.domain.validation`).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from zooctl.domain.types import HealthStatus


@dataclass
class Creature:
    """A creature housed (optionally) in a zone.

    ``id`` is None until the store assigns one on first save.
    """

    name: str = ""
    species: str = ""
    danger_level: int = 0
    health_status: str = HealthStatus.STABLE.value
    zone_id: int | None = None
    id: int | None = None

    @property
    def is_critical(self) -> bool:
        return self.health_status == HealthStatus.CRITICAL

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Zone:
    """An enclosure with a maximum creature count.

    ``creatures`` is populated by the repository on read, ordered by
    creature id. It is never written through the zone.
    """

    name: str = ""
    description: str = ""
    capacity: int = 0
    id: int | None = None
    creatures: list[Creature] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["creatures"] = [c.to_dict() for c in self.creatures]
        return data
