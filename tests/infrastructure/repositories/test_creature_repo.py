"""Tests for SqlCreatureRepository."""

from __future__ import annotations

from dataclasses import replace

import pytest
from sqlalchemy.engine import Engine

from tests.conftest import make_creature, make_zone
from zooctl.domain.errors import ResourceNotFoundError
from zooctl.infrastructure.repositories.creatures import SqlCreatureRepository
from zooctl.infrastructure.repositories.zones import SqlZoneRepository


@pytest.fixture
def repo(db_engine: Engine) -> SqlCreatureRepository:
    return SqlCreatureRepository(db_engine)


class TestSave:
    def test_insert_assigns_id(self, repo: SqlCreatureRepository) -> None:
        saved = repo.save(make_creature())
        assert saved.id is not None
        assert replace(saved, id=None) == make_creature()

    def test_insert_leaves_input_untouched(self, repo: SqlCreatureRepository) -> None:
        creature = make_creature()
        repo.save(creature)
        assert creature.id is None

    def test_update_existing(self, repo: SqlCreatureRepository) -> None:
        saved = repo.save(make_creature(name="Dragon"))
        repo.save(replace(saved, name="Dragon Rojo"))
        found = repo.find_by_id(saved.id)
        assert found is not None
        assert found.name == "Dragon Rojo"
        assert len(repo.find_all()) == 1

    def test_save_with_unknown_id_raises(self, repo: SqlCreatureRepository) -> None:
        with pytest.raises(ResourceNotFoundError):
            repo.save(make_creature(id=40))
        assert repo.find_by_id(40) is None


class TestQueries:
    def test_find_by_id_missing(self, repo: SqlCreatureRepository) -> None:
        assert repo.find_by_id(1) is None

    def test_find_all_ordered(self, repo: SqlCreatureRepository) -> None:
        ids = [repo.save(make_creature(name=n)).id for n in ("A", "B", "C")]
        assert [c.id for c in repo.find_all()] == ids

    def test_find_by_zone(self, db_engine: Engine, repo: SqlCreatureRepository) -> None:
        zone = SqlZoneRepository(db_engine).save(make_zone())
        housed = repo.save(make_creature(zone_id=zone.id))
        repo.save(make_creature())
        assert repo.find_by_zone(zone.id) == [housed]


class TestDelete:
    def test_delete(self, repo: SqlCreatureRepository) -> None:
        saved = repo.save(make_creature())
        repo.delete(saved)
        assert repo.find_by_id(saved.id) is None

    def test_delete_unsaved_raises(self, repo: SqlCreatureRepository) -> None:
        with pytest.raises(ValueError, match="never saved"):
            repo.delete(make_creature())
