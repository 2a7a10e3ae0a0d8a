"""Store interfaces the service layer depends on.

Any object with these methods can back a service: the SQL repositories
in this package, or the in-memory fakes used by the service tests.
"""

from __future__ import annotations

from typing import Protocol

from zooctl.domain.models import Creature, Zone


class CreatureRepository(Protocol):
    """Persistence operations for creatures."""

    def find_by_id(self, creature_id: int) -> Creature | None: ...

    def save(self, creature: Creature) -> Creature:
        """Insert when ``id`` is None (store assigns it), update otherwise.

        Raises ResourceNotFoundError when updating an id that has no row.
        """
        ...

    def delete(self, creature: Creature) -> None: ...

    def find_all(self) -> list[Creature]: ...

    def find_by_zone(self, zone_id: int) -> list[Creature]: ...


class ZoneRepository(Protocol):
    """Persistence operations for zones."""

    def find_by_id(self, zone_id: int) -> Zone | None: ...

    def save(self, zone: Zone) -> Zone: ...

    def delete(self, zone: Zone) -> None: ...

    def find_all(self) -> list[Zone]: ...
