"""SQL-backed creature repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update

from zooctl.domain.errors import ResourceNotFoundError
from zooctl.domain.models import Creature
from zooctl.infrastructure.database.schema import creatures

if TYPE_CHECKING:
    from sqlalchemy import Connection, RowMapping
    from sqlalchemy.engine import Engine


def row_to_creature(row: RowMapping) -> Creature:
    return Creature(
        id=int(row["id"]),
        name=str(row["name"]),
        species=str(row["species"]),
        danger_level=int(row["danger_level"]),
        health_status=str(row["health_status"]),
        zone_id=row["zone_id"],
    )


def _columns(creature: Creature) -> dict[str, Any]:
    return {
        "name": creature.name,
        "species": creature.species,
        "danger_level": creature.danger_level,
        "health_status": creature.health_status,
        "zone_id": creature.zone_id,
    }


class SqlCreatureRepository:
    """Encapsulates SQL for the ``creatures`` table.

    Each write runs in its own ``engine.begin()`` transaction.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_by_id(self, creature_id: int) -> Creature | None:
        with self._engine.connect() as conn:
            return self._fetch(conn, creature_id)

    def save(self, creature: Creature) -> Creature:
        """Insert *creature* when it has no id, else update its row.

        Updating an id with no row raises :class:`ResourceNotFoundError`.
        """
        values = _columns(creature)
        with self._engine.begin() as conn:
            if creature.id is None:
                result = conn.execute(insert(creatures).values(**values))
                creature_id = int(result.inserted_primary_key[0])
            else:
                creature_id = creature.id
                result = conn.execute(
                    update(creatures).where(creatures.c.id == creature_id).values(**values)
                )
                if result.rowcount == 0:
                    raise ResourceNotFoundError("Creature", creature_id)
            saved = self._fetch(conn, creature_id)
        assert saved is not None
        return saved

    def delete(self, creature: Creature) -> None:
        if creature.id is None:
            msg = "Cannot delete a creature that was never saved"
            raise ValueError(msg)
        with self._engine.begin() as conn:
            conn.execute(delete(creatures).where(creatures.c.id == creature.id))

    def find_all(self) -> list[Creature]:
        stmt = select(creatures).order_by(creatures.c.id)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [row_to_creature(row) for row in rows]

    def find_by_zone(self, zone_id: int) -> list[Creature]:
        stmt = select(creatures).where(creatures.c.zone_id == zone_id).order_by(creatures.c.id)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [row_to_creature(row) for row in rows]

    @staticmethod
    def _fetch(conn: Connection, creature_id: int) -> Creature | None:
        stmt = select(creatures).where(creatures.c.id == creature_id)
        row = conn.execute(stmt).mappings().first()
        return row_to_creature(row) if row is not None else None
