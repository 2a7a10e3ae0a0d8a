"""CreatureService against the SQLite-backed repositories."""

from __future__ import annotations

from dataclasses import replace

import pytest
from sqlalchemy import select

from tests.conftest import make_creature, make_zone
from zooctl.domain.commands import CreatureUpdate
from zooctl.domain.errors import IllegalStateError, ResourceNotFoundError
from zooctl.infrastructure.database.schema import creatures
from zooctl.infrastructure.zoo import Zoo
from zooctl.services.creatures import CreatureService
from zooctl.services.zones import ZoneService


@pytest.fixture
def service(zoo: Zoo) -> CreatureService:
    return CreatureService(zoo.creatures, zones=zoo.zones)


class TestCreaturePersistence:
    def test_create_persists_in_database(self, zoo: Zoo, service: CreatureService) -> None:
        created = service.create_creature(
            make_creature(name="Unicornio", species="Mistico", danger_level=3)
        )
        found = zoo.creatures.find_by_id(created.id)
        assert found is not None
        assert found.name == "Unicornio"
        assert found == created

    def test_update_changes_values_in_database(self, zoo: Zoo, service: CreatureService) -> None:
        created = service.create_creature(
            make_creature(name="Fenix", species="Ave", danger_level=4)
        )
        service.update_creature(
            created.id, CreatureUpdate(danger_level=2, health_status="recovering")
        )

        with zoo.engine.connect() as conn:
            row = conn.execute(select(creatures).where(creatures.c.id == created.id)).one()
        assert row.danger_level == 2
        assert row.health_status == "recovering"
        assert row.name == "Fenix"

    def test_delete_removes_from_database(self, zoo: Zoo, service: CreatureService) -> None:
        created = service.create_creature(make_creature(name="Hydra", species="Reptil"))
        service.delete_creature(created.id)
        assert zoo.creatures.find_by_id(created.id) is None
        with pytest.raises(ResourceNotFoundError):
            service.get_by_id(created.id)

    def test_critical_creature_row_kept(self, zoo: Zoo, service: CreatureService) -> None:
        created = service.create_creature(make_creature(health_status="critical"))
        with pytest.raises(IllegalStateError):
            service.delete_creature(created.id)
        assert zoo.creatures.find_by_id(created.id) is not None

    def test_create_with_existing_id_keeps_original_row(
        self, zoo: Zoo, service: CreatureService
    ) -> None:
        critical = service.create_creature(make_creature(name="Crit", health_status="critical"))
        impostor = service.create_creature(
            make_creature(id=critical.id, name="Impostor", health_status="stable")
        )

        assert impostor.id != critical.id
        assert zoo.creatures.find_by_id(critical.id) == critical
        with pytest.raises(IllegalStateError):
            service.delete_creature(critical.id)

    def test_update_of_vanished_row_not_resurrected(
        self, zoo: Zoo, service: CreatureService
    ) -> None:
        created = service.create_creature(make_creature())
        zoo.creatures.delete(created)
        with pytest.raises(ResourceNotFoundError):
            zoo.creatures.save(replace(created, name="Fantasma"))
        assert zoo.creatures.find_all() == []

    def test_zone_membership(self, zoo: Zoo, service: CreatureService) -> None:
        zone = ZoneService(zoo.zones).create_zone(make_zone(capacity=2))
        a = service.create_creature(make_creature(name="A", zone_id=zone.id))
        service.create_creature(make_creature(name="B"))
        assert [c.id for c in service.list_creatures(zone_id=zone.id)] == [a.id]
        assert [c.name for c in ZoneService(zoo.zones).get_by_id(zone.id).creatures] == ["A"]
