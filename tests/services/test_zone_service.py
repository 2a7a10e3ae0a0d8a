"""Tests for ZoneService against in-memory repositories."""

from __future__ import annotations

import pytest

from tests.conftest import make_creature, make_zone
from tests.fakes import InMemoryCreatureRepository, InMemoryZoneRepository
from zooctl.domain.commands import ZoneUpdate
from zooctl.domain.errors import ResourceNotFoundError, ValidationFailedError
from zooctl.domain.models import Zone
from zooctl.services.zones import ZoneService


@pytest.fixture
def service(zone_repo: InMemoryZoneRepository) -> ZoneService:
    return ZoneService(zone_repo)


class TestCreateZone:
    def test_returns_saved_zone(
        self, service: ZoneService, zone_repo: InMemoryZoneRepository
    ) -> None:
        saved = service.create_zone(Zone(name="Zona de Dragones", capacity=10))
        assert saved.id is not None
        assert saved.name == "Zona de Dragones"
        assert saved.capacity == 10
        assert len(zone_repo.saved) == 1

    def test_invalid_zone_never_saved(
        self, service: ZoneService, zone_repo: InMemoryZoneRepository
    ) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            service.create_zone(Zone(name="", capacity=-3))
        assert {v.field for v in exc_info.value.violations} == {"name", "capacity"}
        assert zone_repo.saved == []

    def test_supplied_id_does_not_overwrite_existing(
        self, service: ZoneService, zone_repo: InMemoryZoneRepository
    ) -> None:
        original = zone_repo.add(make_zone(id=1, name="Orig", capacity=12))
        created = service.create_zone(make_zone(id=original.id, name="Other", capacity=1))
        assert created.id != original.id
        assert zone_repo.find_by_id(original.id) == original


class TestGetById:
    def test_returns_zone(self, service: ZoneService, zone_repo: InMemoryZoneRepository) -> None:
        zone_repo.add(make_zone(id=2, name="Zona de Fenix"))
        assert service.get_by_id(2).name == "Zona de Fenix"

    def test_includes_housed_creatures(
        self,
        service: ZoneService,
        zone_repo: InMemoryZoneRepository,
        creature_repo: InMemoryCreatureRepository,
    ) -> None:
        zone_repo.add(make_zone(id=1))
        creature_repo.add(make_creature(id=3, zone_id=1))
        creature_repo.add(make_creature(id=1, zone_id=1))
        assert [c.id for c in service.get_by_id(1).creatures] == [1, 3]

    def test_raises_when_not_found(self, service: ZoneService) -> None:
        with pytest.raises(ResourceNotFoundError):
            service.get_by_id(99)


class TestListZones:
    def test_lists_all(self, service: ZoneService, zone_repo: InMemoryZoneRepository) -> None:
        zone_repo.add(make_zone(name="A"))
        zone_repo.add(make_zone(name="B"))
        assert [z.name for z in service.list_zones()] == ["A", "B"]


class TestUpdateZone:
    def test_updates_fields(self, service: ZoneService, zone_repo: InMemoryZoneRepository) -> None:
        zone_repo.add(make_zone(id=3, name="Vieja Zona", capacity=5))
        result = service.update_zone(3, ZoneUpdate(name="Nueva Zona", capacity=8))
        assert result.id == 3
        assert result.name == "Nueva Zona"
        assert result.capacity == 8
        assert len(zone_repo.saved) == 1

    def test_description_where_supplied(
        self, service: ZoneService, zone_repo: InMemoryZoneRepository
    ) -> None:
        zone_repo.add(make_zone(id=1, description="Original"))
        assert service.update_zone(1, ZoneUpdate(capacity=3)).description == "Original"
        assert service.update_zone(1, ZoneUpdate(description="Nueva")).description == "Nueva"

    def test_not_found(self, service: ZoneService) -> None:
        with pytest.raises(ResourceNotFoundError):
            service.update_zone(9, ZoneUpdate(capacity=1))

    def test_negative_capacity_rejected(
        self, service: ZoneService, zone_repo: InMemoryZoneRepository
    ) -> None:
        zone_repo.add(make_zone(id=1, capacity=4))
        with pytest.raises(ValidationFailedError):
            service.update_zone(1, ZoneUpdate(capacity=-1))
        assert service.get_by_id(1).capacity == 4


class TestDeleteZone:
    def test_deletes(self, service: ZoneService, zone_repo: InMemoryZoneRepository) -> None:
        zone_repo.add(make_zone(id=4, name="Zona a borrar"))
        service.delete_zone(4)
        assert zone_repo.deleted == [4]
        with pytest.raises(ResourceNotFoundError):
            service.get_by_id(4)

    def test_non_empty_zone_deleted_without_gate(
        self,
        service: ZoneService,
        zone_repo: InMemoryZoneRepository,
        creature_repo: InMemoryCreatureRepository,
    ) -> None:
        zone_repo.add(make_zone(id=1))
        creature_repo.add(make_creature(id=1, zone_id=1, health_status="critical"))
        service.delete_zone(1)
        assert zone_repo.deleted == [1]
        survivor = creature_repo.find_by_id(1)
        assert survivor is not None
        assert survivor.zone_id is None

    def test_not_found(self, service: ZoneService, zone_repo: InMemoryZoneRepository) -> None:
        with pytest.raises(ResourceNotFoundError):
            service.delete_zone(4)
        assert zone_repo.deleted == []
