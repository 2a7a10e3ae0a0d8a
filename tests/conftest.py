"""Shared pytest fixtures and test helpers for zooctl tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from tests.fakes import InMemoryCreatureRepository, InMemoryZoneRepository
from zooctl.config.settings import ZooSettings
from zooctl.domain.models import Creature, Zone
from zooctl.infrastructure.database.engine import init_database
from zooctl.infrastructure.zoo import Zoo


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def zoo(tmp_path: Path) -> Iterator[Zoo]:
    """Zoo store on a temp data directory."""
    settings = ZooSettings.from_cli(data_dir=tmp_path)
    z = Zoo(settings)
    try:
        yield z
    finally:
        z.close()


@pytest.fixture
def creature_repo() -> InMemoryCreatureRepository:
    return InMemoryCreatureRepository()


@pytest.fixture
def zone_repo(creature_repo: InMemoryCreatureRepository) -> InMemoryZoneRepository:
    return InMemoryZoneRepository(creatures=creature_repo)


@pytest.fixture
def _isolated_zoo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_zoo")`` on command test
    classes.
    """
    monkeypatch.delenv("ZOOCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_creature(**overrides: Any) -> Creature:
    """A valid, stable creature; override any field."""
    fields: dict[str, Any] = {
        "name": "Fenix",
        "species": "Ave",
        "danger_level": 3,
        "health_status": "stable",
    }
    fields.update(overrides)
    return Creature(**fields)


def make_zone(**overrides: Any) -> Zone:
    """A valid empty zone; override any field."""
    fields: dict[str, Any] = {
        "name": "Zona de Dragones",
        "description": "Cuevas volcanicas",
        "capacity": 10,
    }
    fields.update(overrides)
    return Zone(**fields)
