"""SQL-backed zone repository.

Zones are returned with their ``creatures`` collection loaded, ordered
by creature id. Saving a zone writes only the zone's own columns.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update

from zooctl.domain.errors import ResourceNotFoundError
from zooctl.domain.models import Creature, Zone
from zooctl.infrastructure.database.schema import creatures, zones
from zooctl.infrastructure.repositories.creatures import row_to_creature

if TYPE_CHECKING:
    from sqlalchemy import Connection, RowMapping
    from sqlalchemy.engine import Engine


def _row_to_zone(row: RowMapping, housed: list[Creature]) -> Zone:
    return Zone(
        id=int(row["id"]),
        name=str(row["name"]),
        description=str(row["description"] or ""),
        capacity=int(row["capacity"]),
        creatures=housed,
    )


def _columns(zone: Zone) -> dict[str, Any]:
    return {
        "name": zone.name,
        "description": zone.description,
        "capacity": zone.capacity,
    }


class SqlZoneRepository:
    """Encapsulates SQL for the ``zones`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_by_id(self, zone_id: int) -> Zone | None:
        with self._engine.connect() as conn:
            return self._fetch(conn, zone_id)

    def save(self, zone: Zone) -> Zone:
        """Insert *zone* when it has no id, else update its row.

        Updating an id with no row raises :class:`ResourceNotFoundError`.
        """
        values = _columns(zone)
        with self._engine.begin() as conn:
            if zone.id is None:
                result = conn.execute(insert(zones).values(**values))
                zone_id = int(result.inserted_primary_key[0])
            else:
                zone_id = zone.id
                result = conn.execute(update(zones).where(zones.c.id == zone_id).values(**values))
                if result.rowcount == 0:
                    raise ResourceNotFoundError("Zone", zone_id)
            saved = self._fetch(conn, zone_id)
        assert saved is not None
        return saved

    def delete(self, zone: Zone) -> None:
        """Delete *zone*; its creatures stay, with ``zone_id`` cleared."""
        if zone.id is None:
            msg = "Cannot delete a zone that was never saved"
            raise ValueError(msg)
        with self._engine.begin() as conn:
            conn.execute(delete(zones).where(zones.c.id == zone.id))

    def find_all(self) -> list[Zone]:
        with self._engine.connect() as conn:
            zone_rows = conn.execute(select(zones).order_by(zones.c.id)).mappings().all()
            creature_rows = (
                conn.execute(
                    select(creatures)
                    .where(creatures.c.zone_id.is_not(None))
                    .order_by(creatures.c.id)
                )
                .mappings()
                .all()
            )

        housed: dict[int, list[Creature]] = defaultdict(list)
        for row in creature_rows:
            housed[int(row["zone_id"])].append(row_to_creature(row))
        return [_row_to_zone(row, housed.get(int(row["id"]), [])) for row in zone_rows]

    @staticmethod
    def _fetch(conn: Connection, zone_id: int) -> Zone | None:
        row = conn.execute(select(zones).where(zones.c.id == zone_id)).mappings().first()
        if row is None:
            return None
        creature_rows = (
            conn.execute(
                select(creatures).where(creatures.c.zone_id == zone_id).order_by(creatures.c.id)
            )
            .mappings()
            .all()
        )
        return _row_to_zone(row, [row_to_creature(r) for r in creature_rows])
